import base64
import json
import logging

import pytest

HS256_HEADER = {"alg": "HS256", "typ": "JWT"}


def b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


@pytest.fixture
def make_token():
    """Build a compact token around raw payload bytes or a JSON-able value."""

    def _make(payload, header=HS256_HEADER, signature="c2lnbmF0dXJl"):
        if not isinstance(payload, bytes):
            payload = json.dumps(payload, separators=(",", ":")).encode("utf-8")
        head = b64url(json.dumps(header, separators=(",", ":")).encode("utf-8"))
        parts = [head, b64url(payload)]
        if signature is not None:
            parts.append(signature)
        return ".".join(parts)

    return _make


@pytest.fixture
def restore_root_logging():
    """Put the root logger back the way pytest left it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
