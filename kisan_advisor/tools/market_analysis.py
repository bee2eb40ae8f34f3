import logging
from typing import Optional

from kisan_advisor.core.model_client import ModelClient
from kisan_advisor.core.tool_descriptor import ToolDescriptor
from kisan_advisor.models.krishi_assistant import MarketToolInput
from kisan_advisor.services.market_analysis_service import get_market_analysis

logger = logging.getLogger(__name__)

MARKET_TOOL_NAME = "get_market_analysis"


def build_market_analysis_tool(client: Optional[ModelClient] = None) -> ToolDescriptor:
    async def _market_analysis(crop_type: str, region: str) -> str:
        logger.info("Fetching market analysis for: crop=%s, region=%s", crop_type, region)
        analysis = await get_market_analysis(
            {"crop_type": crop_type, "region": region}, client=client
        )
        trend = analysis.price_trend
        return (
            f"The current average price for {crop_type} is ₹{trend.current_price:g} "
            f"and the trend is {trend.trend.value}. "
            f"The demand is expected to be {analysis.demand_forecast.lower().rstrip('.')}. "
            f"My recommendation is to {analysis.recommendation.lower().rstrip('.')}."
        )

    return ToolDescriptor(
        name=MARKET_TOOL_NAME,
        description="Get a simulated market analysis for a crop in a specific region of India.",
        input_model=MarketToolInput,
        func=_market_analysis,
    )
