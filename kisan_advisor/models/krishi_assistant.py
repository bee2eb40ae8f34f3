from pydantic import BaseModel, Field

from .common import Latitude, Longitude, NonEmptyStr


class KrishiAssistantInput(BaseModel):
    query: NonEmptyStr = Field(description="The user's query in Tamil or English.")


class KrishiAssistantOutput(BaseModel):
    response: str = Field(
        description="The assistant's response in the same language as the query."
    )


class WeatherToolInput(BaseModel):
    latitude: Latitude = Field(description="The latitude for the weather forecast.")
    longitude: Longitude = Field(description="The longitude for the weather forecast.")


class MarketToolInput(BaseModel):
    crop_type: NonEmptyStr = Field(
        description="The crop for which to generate the market analysis."
    )
    region: NonEmptyStr = Field(
        description=(
            "The geographical region for the analysis (e.g., a state or district in India)."
        )
    )


class FarmingTipInput(BaseModel):
    pass
