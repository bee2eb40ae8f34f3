from datetime import date

from pydantic import BaseModel, Field

from .common import Latitude, Longitude, NonEmptyStr


class WateringRecommendationInput(BaseModel):
    crop_type: NonEmptyStr = Field(description="The type of crop planted in the field.")
    planting_date: date = Field(description="The planting date of the crop.")
    latitude: Latitude = Field(description="The latitude of the field.")
    longitude: Longitude = Field(description="The longitude of the field.")


class WateringPromptInput(BaseModel):
    crop_type: NonEmptyStr = Field(description="The type of crop planted in the field.")
    days_since_planting: int = Field(
        ge=0,
        description="The number of days that have passed since the crop was planted.",
    )
    weather: NonEmptyStr = Field(
        description=(
            "A summary of the current weather conditions, including temperature, wind "
            "speed, and condition."
        )
    )


class WateringRecommendationOutput(BaseModel):
    recommendation: str = Field(
        min_length=1,
        description="A concise watering recommendation for the next 24-48 hours.",
    )
