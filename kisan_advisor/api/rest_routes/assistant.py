from fastapi import APIRouter, Depends

from kisan_advisor.core.model_client import ModelClient, get_model_client
from kisan_advisor.models.krishi_assistant import (
    KrishiAssistantInput,
    KrishiAssistantOutput,
)
from kisan_advisor.services.krishi_assistant_service import krishi_assistant

router = APIRouter(prefix="/assistant", tags=["Assistant"])


@router.post("/query", response_model=KrishiAssistantOutput)
async def ask_assistant(
    request: KrishiAssistantInput,
    client: ModelClient = Depends(get_model_client),
):
    """
    Ask Krishi Mitra a question. The assistant may look up weather, market
    prices or farming tips before answering.
    """
    return await krishi_assistant(request, client=client)
