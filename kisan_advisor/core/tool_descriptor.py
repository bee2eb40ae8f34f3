from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Type

from langchain_core.tools import StructuredTool
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .errors import ToolExecutionError

logger = logging.getLogger(__name__)

ToolFunc = Callable[..., Awaitable[str]]


@dataclass(frozen=True)
class ToolDescriptor:
    """A side-function the assistant model may call before answering.

    ``func`` receives the validated arguments as keyword arguments and
    returns a short natural-language string for the model.
    """

    name: str
    description: str
    input_model: Type[BaseModel]
    func: ToolFunc

    async def execute(self, args: dict[str, Any] | None) -> str:
        try:
            parsed = self.input_model.model_validate(args or {})
        except PydanticValidationError as exc:
            raise ToolExecutionError(self.name, f"invalid arguments: {exc}") from exc

        logger.info("Executing tool %s with %s", self.name, parsed.model_dump())
        try:
            result = await self.func(**parsed.model_dump())
        except ToolExecutionError:
            raise
        except Exception as exc:
            raise ToolExecutionError(self.name, str(exc) or type(exc).__name__) from exc
        return str(result)

    def as_langchain_tool(self) -> StructuredTool:
        return StructuredTool.from_function(
            coroutine=self.func,
            name=self.name,
            description=self.description,
            args_schema=self.input_model,
        )
