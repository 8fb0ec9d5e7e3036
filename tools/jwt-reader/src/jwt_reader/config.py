"""
Configuration loading and validation for the JWT reader.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from .decoder import DEFAULT_INDENT

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_TOKEN",
    "PROJECT_ROOT",
    "ConfigError",
    "ReaderConfig",
    "load_config",
]

logger = logging.getLogger(__name__)

# Tool root directory (tools/jwt-reader), two levels up from this package
PROJECT_ROOT = os.path.dirname(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)

DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT, "config", "config.yaml")

# Example token, signature not verified.
# Header:  {"alg":"HS256","typ":"JWT"}
# Payload: {"sub":"1234567890","name":"John Doe","iat":1516239022,
#           "admin":true,"email":"john.doe@example.com"}
DEFAULT_TOKEN = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJzdWIiOiIxMjM0NTY3ODkwIiwibmFtZSI6IkpvaG4gRG9lIiwiaWF0IjoxNTE2MjM5MDIy"
    "LCJhZG1pbiI6dHJ1ZSwiZW1haWwiOiJqb2huLmRvZUBleGFtcGxlLmNvbSJ9"
    ".SflKxwRJSMeKKF2QT4fwpMeJf36POk6yJV_adQssw5c"
)


class ConfigError(Exception):
    """Raised when the configuration file is missing or invalid."""


@dataclass
class ReaderConfig:
    """Settings for the reader CLI."""

    default_token: str = DEFAULT_TOKEN
    indent: int = DEFAULT_INDENT
    log_dir: str | None = None


def load_config(config_path: str, required: bool = False) -> ReaderConfig:
    """Load and validate the YAML configuration file.

    A missing file yields the built-in defaults unless *required* is set.

    Raises:
        ConfigError: If the file is required but missing, or holds invalid values.
    """
    path = Path(config_path)
    if not path.exists():
        if required:
            raise ConfigError(
                f"Config file not found: {config_path}\n"
                "Copy config/config.yaml.example to config/config.yaml and adjust it."
            )
        logger.debug("No config at %s, using defaults", config_path)
        return ReaderConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f)
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Config file is not valid YAML: {config_path}: {exc}") from exc

    if cfg is None:
        cfg = {}
    if not isinstance(cfg, dict):
        raise ConfigError("Config file must contain a mapping at the top level")

    default_token = cfg.get("default_token", DEFAULT_TOKEN)
    if not isinstance(default_token, str) or not default_token:
        raise ConfigError("default_token must be a non-empty string")

    output_cfg = cfg.get("output", {}) or {}
    if not isinstance(output_cfg, dict):
        raise ConfigError("output must be a mapping")
    indent = output_cfg.get("indent", DEFAULT_INDENT)
    # bool is an int subclass; "indent: true" is a mistake, not 1
    if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
        raise ConfigError("output.indent must be a non-negative integer")

    log_cfg = cfg.get("logging", {}) or {}
    if not isinstance(log_cfg, dict):
        raise ConfigError("logging must be a mapping")
    log_dir = log_cfg.get("dir")
    if log_dir is not None:
        if not isinstance(log_dir, str):
            raise ConfigError("logging.dir must be a string")
        if not os.path.isabs(log_dir):
            log_dir = os.path.join(PROJECT_ROOT, log_dir)

    logger.debug("Config loaded from %s", config_path)
    return ReaderConfig(default_token=default_token, indent=indent, log_dir=log_dir)
