from __future__ import annotations

from collections import Counter
from string import Formatter
from typing import Any, Generic, Sequence, Type, TypeVar

from langchain_core.messages import BaseMessage, HumanMessage
from langchain_core.prompts import PromptTemplate
from pydantic import BaseModel

from kisan_advisor.models.common import parse_data_uri

InputT = TypeVar("InputT", bound=BaseModel)


def _count_placeholders(template: str) -> Counter:
    return Counter(
        field_name
        for _, field_name, _, _ in Formatter().parse(template)
        if field_name is not None
    )


class AdvisoryPrompt(Generic[InputT]):
    """A fixed instruction template bound to one input schema.

    Every non-media field of ``input_model`` and every declared context
    variable must appear exactly once as a ``{placeholder}``. Media fields
    hold data URIs and are attached as inline media blocks instead.
    """

    def __init__(
        self,
        name: str,
        template: str,
        input_model: Type[InputT],
        media_fields: Sequence[str] = (),
        context_variables: Sequence[str] = (),
    ) -> None:
        self.name = name
        self.input_model = input_model
        self.media_fields = tuple(media_fields)
        self.context_variables = tuple(context_variables)

        unknown_media = set(self.media_fields) - set(input_model.model_fields)
        if unknown_media:
            raise ValueError(
                f"{name}: media fields {sorted(unknown_media)} are not declared on "
                f"{input_model.__name__}"
            )

        expected = (
            set(input_model.model_fields) - set(self.media_fields)
        ) | set(self.context_variables)
        counts = _count_placeholders(template)

        missing = expected - set(counts)
        unknown = set(counts) - expected
        repeated = sorted(key for key, count in counts.items() if count > 1)
        if missing or unknown or repeated:
            raise ValueError(
                f"{name}: template placeholders do not match {input_model.__name__} "
                f"(missing={sorted(missing)}, unknown={sorted(unknown)}, "
                f"repeated={repeated})"
            )

        self._template = PromptTemplate.from_template(template)

    @property
    def template(self) -> str:
        return self._template.template

    def format(self, request: InputT, **context: Any) -> str:
        missing_context = set(self.context_variables) - set(context)
        if missing_context:
            raise ValueError(
                f"{self.name}: missing context variables {sorted(missing_context)}"
            )
        values = request.model_dump(mode="json", exclude=set(self.media_fields))
        values.update({key: context[key] for key in self.context_variables})
        return self._template.format(**values)

    def render(self, request: InputT, **context: Any) -> list[BaseMessage]:
        text = self.format(request, **context)
        if not self.media_fields:
            return [HumanMessage(content=text)]

        blocks: list[dict[str, Any]] = [{"type": "text", "text": text}]
        for field_name in self.media_fields:
            mime_type, data = parse_data_uri(getattr(request, field_name))
            blocks.append({"type": "media", "mime_type": mime_type, "data": data})
        return [HumanMessage(content=blocks)]
