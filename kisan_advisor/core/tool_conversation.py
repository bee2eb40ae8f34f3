from __future__ import annotations

import logging
from typing import Optional, Sequence

from langchain_core.messages import AIMessage, BaseMessage, ToolMessage

from .backend import ToolCallRequest
from .config import settings
from .errors import NoResponseError, ToolExecutionError, ToolLoopExceededError
from .logging_config import summarize_text
from .model_client import ModelClient
from .tool_descriptor import ToolDescriptor

logger = logging.getLogger(__name__)


async def _execute_tool_call(
    registry: dict[str, ToolDescriptor], call: ToolCallRequest
) -> str:
    tool = registry.get(call.name)
    if tool is None:
        logger.warning("Model requested unknown tool %s", call.name)
        return f"Tool '{call.name}' is not available."
    try:
        return await tool.execute(call.args)
    except ToolExecutionError as exc:
        # Reported to the model so it can answer without the tool.
        logger.warning("%s", exc.message)
        return f"{exc.message} Answer without this information."


async def run_tool_conversation(
    client: ModelClient,
    messages: Sequence[BaseMessage],
    tools: Sequence[ToolDescriptor],
    max_iterations: Optional[int] = None,
) -> str:
    """Let the model call ``tools`` until it produces a final text answer.

    Each round executes every tool call the model requested. More than
    ``max_iterations`` rounds raises ``ToolLoopExceededError``.
    """
    if max_iterations is None:
        max_iterations = settings.MAX_TOOL_ITERATIONS

    registry = {tool.name: tool for tool in tools}
    history: list[BaseMessage] = list(messages)
    rounds = 0

    while True:
        result = await client.generate_with_tools(history, tools)

        if not result.tool_calls:
            text = result.text.strip()
            if not text:
                raise NoResponseError()
            logger.info(
                "Tool conversation finished after %s round(s): %s",
                rounds,
                summarize_text(text),
            )
            return text

        if rounds >= max_iterations:
            raise ToolLoopExceededError(max_iterations)
        rounds += 1

        # The provider message carries metadata such as thought signatures.
        history.append(
            result.message
            if result.message is not None
            else AIMessage(
                content=result.text,
                tool_calls=[
                    {"name": call.name, "args": call.args, "id": call.id}
                    for call in result.tool_calls
                ],
            )
        )
        for call in result.tool_calls:
            output = await _execute_tool_call(registry, call)
            history.append(
                ToolMessage(content=output, tool_call_id=call.id, name=call.name)
            )
