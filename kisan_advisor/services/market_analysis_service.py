from datetime import date
from typing import Any, Mapping, Optional, Union

from kisan_advisor.core.advisory import AdvisoryFlow, format_prompt_date
from kisan_advisor.core.model_client import ModelClient
from kisan_advisor.core.prompt_template import AdvisoryPrompt
from kisan_advisor.models.market_analysis import MarketAnalysisInput, MarketAnalysisOutput
from kisan_advisor.prompts.market_analysis_prompt import MARKET_ANALYSIS_PROMPT

MARKET_ANALYSIS_FLOW = AdvisoryFlow(
    name="market_analysis",
    prompt=AdvisoryPrompt(
        name="market_analysis_prompt",
        template=MARKET_ANALYSIS_PROMPT,
        input_model=MarketAnalysisInput,
        context_variables=("today",),
    ),
    output_model=MarketAnalysisOutput,
)


async def get_market_analysis(
    payload: Union[MarketAnalysisInput, Mapping[str, Any]],
    *,
    client: Optional[ModelClient] = None,
    today: Optional[date] = None,
) -> MarketAnalysisOutput:
    return await MARKET_ANALYSIS_FLOW.run(
        payload,
        client=client,
        today=format_prompt_date(today or date.today()),
    )
