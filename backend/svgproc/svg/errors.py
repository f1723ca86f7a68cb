"""Parse error taxonomy — one exception type, tagged by kind."""

from __future__ import annotations

import enum
from typing import Any


class ParseErrorKind(str, enum.Enum):
    PAYLOAD_TOO_LARGE = "PayloadTooLarge"
    TIMEOUT = "Timeout"
    INVALID_XML = "InvalidXML"
    MISSING_ROOT_ELEMENT = "MissingRootElement"
    INVALID_DIMENSIONS = "InvalidDimensions"
    DIMENSION_TOO_LARGE = "DimensionTooLarge"
    IO_FAILURE = "IOFailure"


# Bad input is a client problem; a failed read is ours.
_STATUS_CODES: dict[ParseErrorKind, int] = {
    ParseErrorKind.PAYLOAD_TOO_LARGE: 413,
    ParseErrorKind.IO_FAILURE: 500,
}
_DEFAULT_STATUS = 422


class ParseError(Exception):
    """Terminal failure of a parse call. No partial result accompanies it."""

    def __init__(self, kind: ParseErrorKind, message: str, **metadata: Any) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.metadata: dict[str, Any] = metadata

    @property
    def status_code(self) -> int:
        return _STATUS_CODES.get(self.kind, _DEFAULT_STATUS)

    @property
    def is_client_error(self) -> bool:
        return self.status_code < 500

    def __repr__(self) -> str:
        return f"ParseError(kind={self.kind.value!r}, message={self.message!r})"
