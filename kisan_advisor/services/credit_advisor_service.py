from typing import Any, Mapping, Optional, Union

from kisan_advisor.core.advisory import AdvisoryFlow
from kisan_advisor.core.model_client import ModelClient
from kisan_advisor.core.prompt_template import AdvisoryPrompt
from kisan_advisor.models.credit_advisor import CreditAdvisorInput, CreditAdvisorOutput
from kisan_advisor.prompts.credit_advisor_prompt import CREDIT_ADVISOR_PROMPT

CREDIT_ADVISOR_FLOW = AdvisoryFlow(
    name="credit_advisor",
    prompt=AdvisoryPrompt(
        name="credit_advisor_prompt",
        template=CREDIT_ADVISOR_PROMPT,
        input_model=CreditAdvisorInput,
    ),
    output_model=CreditAdvisorOutput,
)


async def get_credit_assessment(
    payload: Union[CreditAdvisorInput, Mapping[str, Any]],
    *,
    client: Optional[ModelClient] = None,
) -> CreditAdvisorOutput:
    """Simulated creditworthiness assessment with partner bank suggestions."""
    return await CREDIT_ADVISOR_FLOW.run(payload, client=client)
