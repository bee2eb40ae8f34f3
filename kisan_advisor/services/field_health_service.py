from typing import Any, Mapping, Optional, Union

from kisan_advisor.core.advisory import AdvisoryFlow
from kisan_advisor.core.model_client import ModelClient
from kisan_advisor.core.prompt_template import AdvisoryPrompt
from kisan_advisor.models.field_health import (
    FieldHealthSummaryInput,
    FieldHealthSummaryOutput,
)
from kisan_advisor.prompts.field_health_prompt import FIELD_HEALTH_PROMPT

FIELD_HEALTH_FLOW = AdvisoryFlow(
    name="field_health_summary",
    prompt=AdvisoryPrompt(
        name="field_health_summary_prompt",
        template=FIELD_HEALTH_PROMPT,
        input_model=FieldHealthSummaryInput,
        media_fields=("satellite_imagery_data_uri",),
    ),
    output_model=FieldHealthSummaryOutput,
)


async def get_field_health_summary(
    payload: Union[FieldHealthSummaryInput, Mapping[str, Any]],
    *,
    client: Optional[ModelClient] = None,
) -> FieldHealthSummaryOutput:
    return await FIELD_HEALTH_FLOW.run(payload, client=client)
