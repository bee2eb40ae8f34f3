from typing import Any, Mapping, Optional, Union

from kisan_advisor.core.advisory import AdvisoryFlow
from kisan_advisor.core.model_client import ModelClient
from kisan_advisor.core.prompt_template import AdvisoryPrompt
from kisan_advisor.models.schemes import FindSchemesInput, FindSchemesOutput
from kisan_advisor.prompts.schemes_prompt import FIND_SCHEMES_PROMPT

FIND_SCHEMES_FLOW = AdvisoryFlow(
    name="find_schemes",
    prompt=AdvisoryPrompt(
        name="find_schemes_prompt",
        template=FIND_SCHEMES_PROMPT,
        input_model=FindSchemesInput,
    ),
    output_model=FindSchemesOutput,
)


async def find_schemes(
    payload: Union[FindSchemesInput, Mapping[str, Any]],
    *,
    client: Optional[ModelClient] = None,
) -> FindSchemesOutput:
    return await FIND_SCHEMES_FLOW.run(payload, client=client)
