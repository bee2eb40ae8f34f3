from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence, Type

from langchain_core.exceptions import OutputParserException
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from .errors import BackendError, SchemaMismatchError
from .genai_client import get_chat_model
from .tool_descriptor import ToolDescriptor

logger = logging.getLogger(__name__)


class ToolCallRequest(BaseModel):
    id: str = Field(default="")
    name: str
    args: dict[str, Any] = Field(default_factory=dict)


class GenerationResult(BaseModel):
    text: str = Field(default="")
    data: Optional[dict[str, Any]] = Field(default=None)
    tool_calls: list[ToolCallRequest] = Field(default_factory=list)
    message: Optional[AIMessage] = Field(default=None, exclude=True)


class GenerativeBackend(ABC):
    """The single outbound seam to the generative model."""

    @abstractmethod
    async def generate(
        self,
        messages: Sequence[BaseMessage],
        output_schema: Optional[Type[BaseModel]] = None,
        tools: Optional[Sequence[ToolDescriptor]] = None,
    ) -> GenerationResult: ...


def extract_ai_text(message: AIMessage) -> str:
    if isinstance(message.content, str):
        return message.content

    if isinstance(message.content, list):
        text_values = []
        for block in message.content:
            if isinstance(block, str):
                text_values.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                text_values.append(block.get("text") or "")
        return "\n".join([text for text in text_values if text]).strip()

    return ""


class GeminiBackend(GenerativeBackend):
    def __init__(self, model_factory: Callable[[], BaseChatModel] = get_chat_model) -> None:
        self._model_factory = model_factory

    async def generate(
        self,
        messages: Sequence[BaseMessage],
        output_schema: Optional[Type[BaseModel]] = None,
        tools: Optional[Sequence[ToolDescriptor]] = None,
    ) -> GenerationResult:
        model = self._model_factory()
        try:
            if output_schema is not None:
                structured_model = model.with_structured_output(
                    output_schema, method="json_schema"
                )
                output = await structured_model.ainvoke(list(messages))
                if output is None:
                    return GenerationResult()
                if isinstance(output, BaseModel):
                    return GenerationResult(data=output.model_dump(mode="json"))
                return GenerationResult(data=dict(output))

            if tools:
                model = model.bind_tools([tool.as_langchain_tool() for tool in tools])
            message: AIMessage = await model.ainvoke(list(messages))
        except (OutputParserException, PydanticValidationError) as exc:
            logger.warning("Model output failed to parse: %s", exc)
            schema_name = output_schema.__name__ if output_schema else "text"
            raise SchemaMismatchError(schema_name) from exc
        except Exception as exc:
            logger.exception("Model backend call failed")
            raise BackendError(f"GenAI service error: {exc}") from exc

        return GenerationResult(
            text=extract_ai_text(message),
            message=message,
            tool_calls=[
                ToolCallRequest(
                    id=call.get("id") or "",
                    name=call["name"],
                    args=call.get("args") or {},
                )
                for call in message.tool_calls
            ],
        )
