"""
CLI entry point for the JWT reader.

Prints the claims payload of a token as indented JSON on stdout.  Errors go
to stderr so scripts can branch on the outcome.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import DEFAULT_CONFIG_PATH, ConfigError, load_config
from .decoder import decode_token, render
from .errors import DecodeError, describe
from .logging_setup import setup_logging

__all__ = ["main"]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Output formatting
# ---------------------------------------------------------------------------

def _print_json(label: str, text: str) -> None:
    """Print a labelled JSON section."""
    print(f"\n{label}:")
    print(text)


def _print_default_notice(token: str) -> None:
    err = sys.stderr
    print("No JWT provided as a command-line argument.", file=err)
    print('Usage: jwt-reader "<YOUR_JWT_TOKEN_STRING>"', file=err)
    print("\nUsing a default example JWT (unsigned):", file=err)
    print(f"Default JWT: {token}", file=err)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print the claims payload of a JWT without signature verification.",
        epilog="Examples:\n"
               "  %(prog)s                          # decode the built-in example token\n"
               "  %(prog)s <token>                   # pass token as argument\n"
               "  echo '<token>' | %(prog)s --stdin  # read from stdin\n"
               "  %(prog)s --header <token>          # show the header as well\n",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "token",
        nargs="?",
        default=None,
        help="JWT token string (optional; a built-in example is used if omitted)",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        default=False,
        help="Read token from stdin (for piping)",
    )
    parser.add_argument(
        "--header",
        action="store_true",
        default=False,
        help="Also print the unverified token header",
    )
    parser.add_argument(
        "--config",
        "-c",
        default=None,
        help="Path to YAML config file (default: config/config.yaml)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose (debug) logging",
    )
    args = parser.parse_args()
    if args.stdin and args.token is not None:
        parser.error("pass the token as an argument or via --stdin, not both")
    return args


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    args = _parse_args()

    setup_logging(verbose=args.verbose)

    # --- Load config --------------------------------------------------------
    try:
        cfg = load_config(
            args.config or DEFAULT_CONFIG_PATH,
            required=args.config is not None,
        )
    except ConfigError as exc:
        logger.error("Configuration error: %s", exc)
        sys.exit(1)

    if cfg.log_dir:
        log_path = setup_logging(verbose=args.verbose, log_dir=cfg.log_dir)
        logger.debug("Logging to %s", log_path)

    # --- Resolve token input -----------------------------------------------
    if args.stdin:
        token = sys.stdin.read().strip()
        if not token:
            print("Error: No token received on stdin.", file=sys.stderr)
            sys.exit(1)
    elif args.token is not None:
        token = args.token
    else:
        token = cfg.default_token
        _print_default_notice(token)

    # --- Decode -------------------------------------------------------------
    try:
        result = decode_token(token, header=args.header)
    except DecodeError as exc:
        logger.debug("Decode failed with %s", exc.kind)
        print(file=sys.stderr)
        for line in describe(exc):
            print(line, file=sys.stderr)
        sys.exit(1)

    payload = render(result.payload, indent=cfg.indent)
    if args.header:
        _print_json("Header", render(result.header, indent=cfg.indent))
        _print_json("Payload", payload)
    else:
        print(payload)
