from enum import Enum

from pydantic import BaseModel, Field

from .common import DataUri


class RiskLevel(str, Enum):
    GOOD = "Good"
    OK = "Ok"
    MEDIUM = "Medium"
    RISK = "Risk"
    HIGH_RISK = "High Risk"


class AnalyzeUploadedImageInput(BaseModel):
    photo_data_uri: DataUri = Field(
        description=(
            "A photo of the crop, as a data URI that must include a MIME type and use "
            "Base64 encoding. Expected format: 'data:<mimetype>;base64,<encoded_data>'."
        )
    )


class AnalyzeUploadedImageOutput(BaseModel):
    pest_or_disease: str = Field(
        description=(
            'The identified pest or disease affecting the crop, or "None" if the image '
            "shows a healthy crop."
        )
    )
    summary: str = Field(
        description="A one or two sentence summary of the recommended actions."
    )
    recommended_actions: str = Field(
        description=(
            "Recommended actions to address the identified pest or disease. If no pest "
            "or disease is detected, suggest general crop health maintenance."
        )
    )
    health_percentage: float = Field(
        ge=0,
        le=100,
        description="The estimated health of the crop as a percentage from 0 to 100.",
    )
    risk_level: RiskLevel = Field(description="The risk level for the crop's health.")
