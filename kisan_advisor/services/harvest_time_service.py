from datetime import date
from typing import Any, Mapping, Optional, Union

from kisan_advisor.core.advisory import AdvisoryFlow, format_prompt_date
from kisan_advisor.core.model_client import ModelClient
from kisan_advisor.core.prompt_template import AdvisoryPrompt
from kisan_advisor.models.harvest_time import HarvestTimeInput, HarvestTimeOutput
from kisan_advisor.prompts.harvest_time_prompt import HARVEST_TIME_PROMPT

HARVEST_TIME_FLOW = AdvisoryFlow(
    name="harvest_time_prediction",
    prompt=AdvisoryPrompt(
        name="harvest_time_prompt",
        template=HARVEST_TIME_PROMPT,
        input_model=HarvestTimeInput,
        context_variables=("today",),
    ),
    output_model=HarvestTimeOutput,
)


async def predict_harvest_time(
    payload: Union[HarvestTimeInput, Mapping[str, Any]],
    *,
    client: Optional[ModelClient] = None,
    today: Optional[date] = None,
) -> HarvestTimeOutput:
    """Estimate the harvest date and the days left until it."""
    return await HARVEST_TIME_FLOW.run(
        payload,
        client=client,
        today=format_prompt_date(today or date.today()),
    )
