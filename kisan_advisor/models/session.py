from datetime import date, datetime, timezone
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, Field

from .common import Latitude, Longitude, NonEmptyStr


class SupportedLanguage(str, Enum):
    ENGLISH = "English"
    HINDI = "Hindi"
    MARATHI = "Marathi"
    TAMIL = "Tamil"
    TELUGU = "Telugu"
    KANNADA = "Kannada"
    PUNJABI = "Punjabi"
    GUJARATI = "Gujarati"
    ODIA = "Odia"


class LoanApplicationStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class SchemeApplicationStatus(str, Enum):
    IN_PROGRESS = "In Progress"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class FarmFieldCreate(BaseModel):
    name: NonEmptyStr = Field(description="Name the farmer uses for the field.")
    crop_type: NonEmptyStr = Field(description="Crop currently planted in the field.")
    planting_date: date
    latitude: Latitude
    longitude: Longitude


class FarmField(FarmFieldCreate):
    id: str = Field(default_factory=lambda: uuid4().hex)


class LoanApplicationCreate(BaseModel):
    name: NonEmptyStr
    state: NonEmptyStr
    crop_type: NonEmptyStr
    loan_amount: float = Field(gt=0)
    land_size: float = Field(gt=0)
    bank_name: NonEmptyStr
    approved_amount: float = Field(ge=0)
    interest_rate: float = Field(ge=0)


class LoanApplication(LoanApplicationCreate):
    id: str = Field(default_factory=lambda: f"APP-{uuid4().hex[:12].upper()}")
    status: LoanApplicationStatus = Field(default=LoanApplicationStatus.PENDING)
    submitted_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class SchemeApplicationCreate(BaseModel):
    scheme_name: NonEmptyStr


class SchemeApplication(SchemeApplicationCreate):
    id: str = Field(default_factory=lambda: uuid4().hex)
    status: SchemeApplicationStatus = Field(default=SchemeApplicationStatus.IN_PROGRESS)
    submitted_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class FarmerSession(BaseModel):
    """Everything the dashboard keeps for one farmer."""

    farmer_id: str
    name: str
    language: SupportedLanguage = Field(default=SupportedLanguage.ENGLISH)
    notifications_enabled: bool = Field(default=False)
    farm_fields: List[FarmField] = Field(default_factory=list)
    loan_applications: List[LoanApplication] = Field(default_factory=list)
    scheme_applications: List[SchemeApplication] = Field(default_factory=list)

    def get_field(self, field_id: str) -> Optional[FarmField]:
        return next((item for item in self.farm_fields if item.id == field_id), None)


class FarmerSessionCreate(BaseModel):
    name: NonEmptyStr
    language: SupportedLanguage = Field(default=SupportedLanguage.ENGLISH)
