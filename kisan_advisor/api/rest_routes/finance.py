from fastapi import APIRouter, Depends

from kisan_advisor.core.model_client import ModelClient, get_model_client
from kisan_advisor.models.credit_advisor import CreditAdvisorInput, CreditAdvisorOutput
from kisan_advisor.models.schemes import FindSchemesInput, FindSchemesOutput
from kisan_advisor.services.credit_advisor_service import get_credit_assessment
from kisan_advisor.services.scheme_service import find_schemes

router = APIRouter(prefix="/finance", tags=["Finance"])


@router.post(
    "/credit-assessment",
    response_model=CreditAdvisorOutput,
    response_model_exclude_none=True,
)
async def credit_assessment(
    request: CreditAdvisorInput,
    client: ModelClient = Depends(get_model_client),
):
    """
    Simulated loan eligibility check with partner bank suggestions.
    """
    return await get_credit_assessment(request, client=client)


@router.post("/schemes", response_model=FindSchemesOutput)
async def government_schemes(
    request: FindSchemesInput,
    client: ModelClient = Depends(get_model_client),
):
    """
    Government schemes relevant to the farmer's state and crop.
    """
    return await find_schemes(request, client=client)
