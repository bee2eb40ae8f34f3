from typing import Any, List, Mapping, Optional, Sequence, Union

from kisan_advisor.core.advisory import validate_input
from kisan_advisor.core.model_client import ModelClient, get_model_client
from kisan_advisor.core.prompt_template import AdvisoryPrompt
from kisan_advisor.core.tool_conversation import run_tool_conversation
from kisan_advisor.core.tool_descriptor import ToolDescriptor
from kisan_advisor.models.krishi_assistant import (
    KrishiAssistantInput,
    KrishiAssistantOutput,
)
from kisan_advisor.prompts.krishi_assistant_prompt import KRISHI_ASSISTANT_PROMPT
from kisan_advisor.tools.farming_tips import build_farming_tip_tool
from kisan_advisor.tools.market_analysis import build_market_analysis_tool
from kisan_advisor.tools.weather import build_weather_tool

KRISHI_ASSISTANT_TEMPLATE = AdvisoryPrompt(
    name="krishi_assistant_prompt",
    template=KRISHI_ASSISTANT_PROMPT,
    input_model=KrishiAssistantInput,
)


def build_assistant_tools(client: Optional[ModelClient] = None) -> List[ToolDescriptor]:
    return [
        build_weather_tool(client),
        build_market_analysis_tool(client),
        build_farming_tip_tool(),
    ]


async def krishi_assistant(
    payload: Union[KrishiAssistantInput, Mapping[str, Any]],
    *,
    client: Optional[ModelClient] = None,
    tools: Optional[Sequence[ToolDescriptor]] = None,
    max_iterations: Optional[int] = None,
) -> KrishiAssistantOutput:
    """Answer a farmer's question, letting the model call weather, market and tip tools."""
    request = validate_input(KrishiAssistantInput, payload)
    client = client or get_model_client()
    if tools is None:
        tools = build_assistant_tools(client)

    response = await run_tool_conversation(
        client,
        KRISHI_ASSISTANT_TEMPLATE.render(request),
        tools,
        max_iterations=max_iterations,
    )
    return KrishiAssistantOutput(response=response)
