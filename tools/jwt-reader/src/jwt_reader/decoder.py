"""
Core JWT payload decoding logic.

Extracts the claims payload of a compact-serialized token and renders it as
indented JSON.  Signature verification is **not** performed; this is for
inspection only.

The pipeline is a chain of small pure functions::

    split_token -> decode_base64url -> to_text -> parse_json -> render

Each stage either returns the next stage's input or raises the matching
:class:`~jwt_reader.errors.DecodeError` subclass.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
import math
import re
from dataclasses import dataclass
from typing import Any

import jwt

from .errors import (
    Base64DecodeError,
    HeaderDecodeError,
    JsonParseError,
    TokenShapeError,
    Utf8DecodeError,
)

__all__ = [
    "DEFAULT_INDENT",
    "DecodedToken",
    "decode_base64url",
    "decode_header",
    "decode_payload",
    "decode_token",
    "parse_json",
    "render",
    "split_token",
    "to_text",
]

logger = logging.getLogger(__name__)

DEFAULT_INDENT = 2

# Anything outside the URL-safe alphabet, padding included.
_NON_B64URL_RE = re.compile(r"[^A-Za-z0-9_-]")


@dataclass
class DecodedToken:
    """Holds the decoded parts of a JWT token."""

    header: dict | None
    payload: Any
    payload_text: str
    signature: str | None


# ---------------------------------------------------------------------------
# Pipeline stages
# ---------------------------------------------------------------------------

def split_token(token: str) -> list[str]:
    """Split *token* on ``'.'``; header and payload segments are mandatory."""
    parts = token.split(".")
    if len(parts) < 2:
        raise TokenShapeError(
            f"Token does not contain enough parts — expected at least 2 "
            f"(header.payload), got {len(parts)}."
        )
    logger.debug("Token split into %d segments", len(parts))
    return parts


def _b64url_to_bytes(segment: str) -> bytes:
    bad = _NON_B64URL_RE.search(segment)
    if bad:
        raise binascii.Error(
            f"Invalid symbol {bad.group()!r} at offset {bad.start()}"
        )
    # 4n+1 symbols carry 6 spare bits, never a whole byte.
    if len(segment) % 4 == 1:
        raise binascii.Error(f"Invalid input length {len(segment)}")
    return base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))


def decode_base64url(segment: str) -> bytes:
    """Decode an unpadded base64url *segment*."""
    try:
        data = _b64url_to_bytes(segment)
    except binascii.Error as exc:
        raise Base64DecodeError("payload segment is not valid base64url") from exc
    logger.debug("Decoded %d base64url symbols into %d bytes", len(segment), len(data))
    return data


def to_text(data: bytes) -> str:
    """Decode *data* as strict UTF-8."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise Utf8DecodeError(
            f"invalid UTF-8 sequence at byte offset {exc.start}",
            offset=exc.start,
        ) from exc


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {name!r}")


def _parse_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {literal}")
    return value


def _check_encodable(value: Any) -> None:
    # "\ud800" escapes parse into lone surrogates that UTF-8 cannot carry
    json.dumps(value, ensure_ascii=False).encode("utf-8")


def parse_json(text: str) -> Any:
    """Parse *text* as exactly one JSON value of any type."""
    try:
        value = json.loads(
            text,
            parse_float=_parse_float,
            parse_constant=_reject_constant,
        )
    except json.JSONDecodeError as exc:
        raise JsonParseError(
            "payload is not valid JSON",
            lineno=exc.lineno,
            colno=exc.colno,
            pos=exc.pos,
        ) from exc
    except (ValueError, RecursionError) as exc:
        raise JsonParseError("payload is not valid JSON") from exc

    try:
        _check_encodable(value)
    except UnicodeEncodeError as exc:
        raise JsonParseError("payload contains an unpaired surrogate escape") from exc
    return value


def render(value: Any, indent: int = DEFAULT_INDENT) -> str:
    """Serialize *value* as indented JSON, keeping key order."""
    return json.dumps(value, indent=indent, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def _payload_value(token: str) -> tuple[list[str], str, Any]:
    parts = split_token(token)
    text = to_text(decode_base64url(parts[1]))
    return parts, text, parse_json(text)


def decode_payload(token: str, indent: int = DEFAULT_INDENT) -> str:
    """
    Decode the payload of *token* and return it as pretty-printed JSON.

    Raises:
        DecodeError: The subclass names the stage that failed.
    """
    _, _, value = _payload_value(token)
    return render(value, indent=indent)


def decode_header(token: str) -> dict:
    """
    Return the JOSE header of *token* as PyJWT reads it, unverified.

    Raises:
        HeaderDecodeError: If PyJWT rejects the token or its header.
    """
    try:
        header = jwt.get_unverified_header(token)
    except jwt.InvalidTokenError as exc:
        raise HeaderDecodeError("could not read token header") from exc
    try:
        _check_encodable(header)
    except UnicodeEncodeError as exc:
        raise HeaderDecodeError("header contains an unpaired surrogate escape") from exc
    return header


def decode_token(token: str, header: bool = False) -> DecodedToken:
    """
    Decode *token* into payload, raw signature and (optionally) header.

    The payload is decoded first, so payload errors take precedence over
    header errors.
    """
    parts, text, value = _payload_value(token)
    return DecodedToken(
        header=decode_header(token) if header else None,
        payload=value,
        payload_text=text,
        signature=parts[2] if len(parts) > 2 else None,
    )
