from typing import List

from pydantic import BaseModel, Field

from .common import NonEmptyStr


class CreditAdvisorInput(BaseModel):
    name: NonEmptyStr = Field(description="The farmer's full name.")
    state: NonEmptyStr = Field(description="The state where the farmer resides.")
    crop_type: NonEmptyStr = Field(description="The primary crop the farmer cultivates.")
    loan_amount: float = Field(gt=0, description="The requested loan amount in INR.")
    land_size: float = Field(gt=0, description="The size of the farmer's land in acres.")


class PartnerBank(BaseModel):
    name: str = Field(description="The name of the partner bank.")
    website: str = Field(
        description="The official website URL for the bank's agricultural loan section."
    )
    contact_info: str = Field(
        description=(
            "A brief contact instruction, e.g., 'Visit branch' or a (simulated) phone number."
        )
    )


class CreditAdvisorOutput(BaseModel):
    is_eligible: bool = Field(
        description=(
            "Whether the farmer is deemed eligible for the loan based on the AI assessment."
        )
    )
    approved_amount: float = Field(
        ge=0,
        description=(
            "The recommended loan amount in INR. This can be the same as or lower than "
            "the requested amount."
        ),
    )
    interest_rate: float = Field(
        ge=0, description="A simulated annual interest rate for the loan."
    )
    reasoning: str = Field(
        description=(
            "A brief, 1-2 sentence explanation for the decision, highlighting key "
            "positive or negative factors."
        )
    )
    next_steps: str = Field(
        description=(
            "Clear, actionable next steps for the farmer to take, such as 'Prepare land "
            "ownership documents' or 'Contact a partner bank'."
        )
    )
    partner_banks: List[PartnerBank] = Field(
        default_factory=list,
        max_length=3,
        description=(
            "A list of up to 3 recommended partner banks that are a good fit for the "
            "farmer's profile and loan request."
        ),
    )
