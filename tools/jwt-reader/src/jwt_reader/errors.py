"""
Error taxonomy for the JWT payload pipeline.

Each pipeline stage raises its own ``DecodeError`` subclass so callers can
tell *where* decoding failed.  Lower-level errors (``binascii.Error``,
``UnicodeDecodeError``, ``json.JSONDecodeError``) are chained with
``raise ... from exc`` and exposed through :attr:`DecodeError.cause`.
"""

from __future__ import annotations

__all__ = [
    "Base64DecodeError",
    "DecodeError",
    "HeaderDecodeError",
    "JsonParseError",
    "TokenShapeError",
    "Utf8DecodeError",
    "describe",
]


class DecodeError(Exception):
    """Base class for every failure while decoding a token."""

    kind = "decode-failure"
    label = "Decoding error"

    @property
    def summary(self) -> str:
        """Human-readable one-liner: the kind label plus the detail message."""
        detail = str(self)
        return f"{self.label}: {detail}" if detail else self.label

    @property
    def cause(self) -> BaseException | None:
        """The underlying error this one was raised from, if any."""
        return self.__cause__


class TokenShapeError(DecodeError):
    """The token does not split into header and payload segments."""

    kind = "malformed-token-shape"
    label = "Invalid JWT format"


class Base64DecodeError(DecodeError):
    """The payload segment is not valid unpadded base64url."""

    kind = "base64-decode-failure"
    label = "Base64 decoding error"


class Utf8DecodeError(DecodeError):
    """The decoded payload bytes are not well-formed UTF-8."""

    kind = "utf8-decode-failure"
    label = "UTF-8 conversion error"

    def __init__(self, message: str, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class JsonParseError(DecodeError):
    """The payload text is not a single valid JSON value."""

    kind = "json-parse-failure"
    label = "JSON parsing error"

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        colno: int | None = None,
        pos: int | None = None,
    ) -> None:
        super().__init__(message)
        self.lineno = lineno
        self.colno = colno
        self.pos = pos


class HeaderDecodeError(DecodeError):
    """The JOSE header could not be read (``--header`` only)."""

    kind = "header-decode-failure"
    label = "Header decoding error"


def describe(error: DecodeError) -> list[str]:
    """Return the lines to show a user for *error*, cause last."""
    lines = [f"Error decoding JWT: {error.summary}"]
    if error.cause is not None:
        lines.append(f"Caused by: {error.cause}")
    return lines
