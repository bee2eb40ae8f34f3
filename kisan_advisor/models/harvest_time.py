from datetime import date

from pydantic import BaseModel, Field

from .common import NonEmptyStr


class HarvestTimeInput(BaseModel):
    crop_type: NonEmptyStr = Field(description="The type of crop planted in the field.")
    planting_date: date = Field(
        description="The planting date of the crop in ISO format."
    )


class HarvestTimeOutput(BaseModel):
    estimated_harvest_date: str = Field(
        description='The estimated harvest date in a readable format (e.g., "October 15, 2024").'
    )
    days_to_harvest: int = Field(
        description="The estimated number of days from today until the harvest."
    )
