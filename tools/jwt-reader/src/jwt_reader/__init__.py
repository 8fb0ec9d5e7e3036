"""Unverified JWT payload reader."""

from .decoder import decode_payload
from .errors import DecodeError

__version__ = "1.0.0"

__all__ = [
    "DecodeError",
    "cli",
    "config",
    "decode_payload",
    "decoder",
    "errors",
    "logging_setup",
]
