from __future__ import annotations

import logging
from datetime import date
from typing import Any, Generic, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError
from .model_client import ModelClient, get_model_client
from .prompt_template import AdvisoryPrompt

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)


def validate_input(
    model: Type[InputT], payload: Union[InputT, Mapping[str, Any]]
) -> InputT:
    """Validate ``payload`` against ``model``, failing closed."""
    if isinstance(payload, model):
        payload = payload.model_dump()
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or model.__name__
        raise ValidationError(field, error["msg"]) from exc


class AdvisoryFlow(Generic[InputT, OutputT]):
    """validate -> render -> invoke, for one advisory domain."""

    def __init__(
        self,
        name: str,
        prompt: AdvisoryPrompt[InputT],
        output_model: Type[OutputT],
    ) -> None:
        self.name = name
        self.prompt = prompt
        self.output_model = output_model

    @property
    def input_model(self) -> Type[InputT]:
        return self.prompt.input_model

    def validate(self, payload: Union[InputT, Mapping[str, Any]]) -> InputT:
        return validate_input(self.input_model, payload)

    async def run(
        self,
        payload: Union[InputT, Mapping[str, Any]],
        *,
        client: Optional[ModelClient] = None,
        **context: Any,
    ) -> OutputT:
        request = self.validate(payload)
        messages = self.prompt.render(request, **context)
        logger.info("Running advisory flow %s", self.name)
        return await (client or get_model_client()).invoke(messages, self.output_model)


def format_prompt_date(value: date) -> str:
    return value.strftime("%A, %B %d, %Y")
