from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from .common import NonEmptyStr


class PriceTrendDirection(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class MarketAnalysisInput(BaseModel):
    crop_type: NonEmptyStr = Field(
        description="The crop for which to generate the market analysis."
    )
    region: NonEmptyStr = Field(
        description=(
            "The geographical region for the analysis (e.g., a state or district in India)."
        )
    )


class PriceTrend(BaseModel):
    current_price: float = Field(ge=0, description="The current average price in INR.")
    trend: PriceTrendDirection = Field(description="The price trend direction.")
    change: float = Field(description="The percentage change over the last week.")


class Buyer(BaseModel):
    name: str = Field(description="The name of the mandi or major buyer.")
    price: float = Field(ge=0, description="The offered price in INR at that location.")


class MarketAnalysisOutput(BaseModel):
    crop_name: str = Field(description="The name of the crop analyzed.")
    price_trend: PriceTrend
    demand_forecast: str = Field(
        description="A 1-2 sentence forecast of market demand for the next few weeks."
    )
    top_buyers: List[Buyer] = Field(
        description="A list of the top 3-4 mandis or buyers with the best prices currently."
    )
    recommendation: str = Field(
        description=(
            "A clear, actionable recommendation for the farmer (e.g., 'Sell now', "
            "'Hold for 2 weeks', 'Sell partially')."
        )
    )
