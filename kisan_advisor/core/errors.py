from typing import Optional, Sequence

from fastapi import status


class AdvisoryError(Exception):
    """Base class for every error an advisory call can raise."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict:
        return {"detail": self.message, "error": type(self).__name__}


class ValidationError(AdvisoryError):
    """Input record failed its schema. Raised before any model call."""

    status_code = 422

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"Invalid value for '{field}': {message}")
        self.field = field

    def to_payload(self) -> dict:
        payload = super().to_payload()
        payload["field"] = self.field
        return payload


class BackendError(AdvisoryError):
    """The model backend failed at the transport or service level."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class SchemaMismatchError(AdvisoryError):
    """The model answered, but not in the declared output shape."""

    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(self, schema_name: str, fields: Optional[Sequence[str]] = None) -> None:
        self.schema_name = schema_name
        self.fields = list(fields or [])
        detail = f"AI response did not match {schema_name}"
        if self.fields:
            detail += f" (fields: {', '.join(self.fields)})"
        super().__init__(detail)


class NoResponseError(AdvisoryError):
    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(self, message: str = "The model did not return a response.") -> None:
        super().__init__(message)


class ToolExecutionError(AdvisoryError):
    def __init__(self, tool_name: str, message: str) -> None:
        super().__init__(f"Tool '{tool_name}' failed: {message}")
        self.tool_name = tool_name


class ToolLoopExceededError(AdvisoryError):
    status_code = status.HTTP_504_GATEWAY_TIMEOUT

    def __init__(self, max_iterations: int) -> None:
        super().__init__(
            f"The assistant requested tools more than {max_iterations} times "
            "without producing an answer."
        )
        self.max_iterations = max_iterations
