from __future__ import annotations

import logging
from typing import Optional, Sequence, Type, TypeVar

from langchain_core.messages import BaseMessage
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from .backend import GeminiBackend, GenerationResult, GenerativeBackend
from .config import settings
from .errors import BackendError, NoResponseError, SchemaMismatchError, ValidationError
from .tool_descriptor import ToolDescriptor

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT", bound=BaseModel)

_model_client: Optional["ModelClient"] = None


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Model backend attempt %s failed, retrying: %s",
        retry_state.attempt_number,
        exc,
    )


def _is_empty_prompt(messages: Sequence[BaseMessage]) -> bool:
    for message in messages:
        content = message.content
        if isinstance(content, str) and content.strip():
            return False
        if isinstance(content, list) and content:
            return False
    return True


class ModelClient:
    """Single point of contact with the model backend.

    Transport failures (``BackendError``) are retried with jittered
    exponential backoff. Output that does not match the requested schema is
    never retried.
    """

    def __init__(
        self,
        backend: GenerativeBackend,
        *,
        max_retries: Optional[int] = None,
        retry_initial_delay: Optional[float] = None,
        retry_max_delay: Optional[float] = None,
    ) -> None:
        self.backend = backend
        self.max_retries = (
            settings.MODEL_MAX_RETRIES if max_retries is None else max_retries
        )
        self.retry_initial_delay = (
            settings.MODEL_RETRY_INITIAL_DELAY
            if retry_initial_delay is None
            else retry_initial_delay
        )
        self.retry_max_delay = (
            settings.MODEL_RETRY_MAX_DELAY if retry_max_delay is None else retry_max_delay
        )

    async def _generate(
        self,
        messages: Sequence[BaseMessage],
        output_schema: Optional[Type[BaseModel]] = None,
        tools: Optional[Sequence[ToolDescriptor]] = None,
    ) -> GenerationResult:
        if _is_empty_prompt(messages):
            raise ValidationError("prompt", "Prompt must not be empty.")

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_retries + 1),
            wait=wait_random_exponential(
                multiplier=self.retry_initial_delay, max=self.retry_max_delay
            ),
            retry=retry_if_exception_type(BackendError),
            before_sleep=_log_retry,
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                return await self.backend.generate(
                    messages, output_schema=output_schema, tools=tools
                )

    async def invoke(
        self, messages: Sequence[BaseMessage], output_schema: Type[OutputT]
    ) -> OutputT:
        result = await self._generate(messages, output_schema=output_schema)
        if not result.data:
            raise NoResponseError(
                f"The model returned no output for {output_schema.__name__}."
            )
        try:
            return output_schema.model_validate(result.data)
        except PydanticValidationError as exc:
            fields = sorted(
                {".".join(str(part) for part in error["loc"]) for error in exc.errors()}
            )
            logger.warning(
                "Model output rejected by %s: %s", output_schema.__name__, fields
            )
            raise SchemaMismatchError(output_schema.__name__, fields) from exc

    async def generate_with_tools(
        self,
        messages: Sequence[BaseMessage],
        tools: Sequence[ToolDescriptor],
    ) -> GenerationResult:
        return await self._generate(messages, tools=tools)


def get_model_client() -> ModelClient:
    global _model_client
    if _model_client is None:
        _model_client = ModelClient(GeminiBackend())
    return _model_client
