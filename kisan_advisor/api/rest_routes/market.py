from fastapi import APIRouter, Depends

from kisan_advisor.core.model_client import ModelClient, get_model_client
from kisan_advisor.models.market_analysis import (
    MarketAnalysisInput,
    MarketAnalysisOutput,
)
from kisan_advisor.services.market_analysis_service import get_market_analysis

router = APIRouter(prefix="/market", tags=["Market"])


@router.post("/analysis", response_model=MarketAnalysisOutput)
async def market_analysis(
    request: MarketAnalysisInput,
    client: ModelClient = Depends(get_model_client),
):
    """
    Price trend, demand forecast and top buyers for a crop in a region.
    """
    return await get_market_analysis(request, client=client)
