from fastapi import APIRouter, Depends

from kisan_advisor.core.model_client import ModelClient, get_model_client
from kisan_advisor.models.farming_news import FarmingNewsOutput
from kisan_advisor.services.farming_news_service import get_farming_news

router = APIRouter(prefix="/news", tags=["News"])


@router.get("", response_model=FarmingNewsOutput)
async def farming_news(client: ModelClient = Depends(get_model_client)):
    """
    Latest farming news and best-practice tips.
    """
    return await get_farming_news(client=client)
