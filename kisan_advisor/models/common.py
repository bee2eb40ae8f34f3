import re
from typing import Annotated, Tuple

from pydantic import Field, StringConstraints

DATA_URI_PATTERN = r"^data:[\w.+-]+/[\w.+-]+;base64,[A-Za-z0-9+/=\s]+$"

_DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<data>.+)$", re.S)

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

DataUri = Annotated[
    str,
    StringConstraints(strip_whitespace=True, pattern=DATA_URI_PATTERN),
]

Latitude = Annotated[float, Field(ge=-90, le=90)]
Longitude = Annotated[float, Field(ge=-180, le=180)]


def parse_data_uri(value: str) -> Tuple[str, str]:
    """Split ``data:<mime>;base64,<payload>`` into (mime, payload)."""
    match = _DATA_URI_RE.match(value.strip())
    if not match:
        raise ValueError("Expected a base64 data URI: 'data:<mimetype>;base64,<data>'")
    return match.group("mime"), re.sub(r"\s+", "", match.group("data"))
