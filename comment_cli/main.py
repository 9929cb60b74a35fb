"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m comment_cli get [URL] [--json] [--raw] [--header K:V]
    python -m comment_cli post [URL] --name NAME --text TEXT
    python -m comment_cli put [URL] --id ID --name NAME --text TEXT
    python -m comment_cli serve [--host HOST] [--port PORT]
    python -m comment_cli config --init | --show

Environment Variables:
    COMMENT_API_URL             Base URL of the comment API
    COMMENT_DECODE_RESPONSES    Decode JSON response bodies (default: true)
    COMMENT_USE_INCLUDE_PATH    Search include path for local resources (default: false)
    COMMENT_INCLUDE_PATH        Include directories, os.pathsep-separated
    COMMENT_LOG_LEVEL           Log level (default: INFO)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from comment_cli import __version__
from comment_cli.commands import send, serve
from core.config import get_default_config_template, load_config


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _add_request_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "url",
        nargs="?",
        default=None,
        help="Target URL (default: COMMENT_API_URL or base_url from config)",
    )
    parser.add_argument(
        "--header", "-H",
        action="append",
        default=None,
        help="Extra request header as K:V (repeatable)",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        default=False,
        help="Print the raw response body instead of decoded JSON",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON summary",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks on errors",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="comment",
        description="Comment API client - send requests and run the fixture server.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./comment_client.json or ~/.config/comment_client/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- get command ---
    get_parser = subparsers.add_parser("get", help="List comments")
    _add_request_options(get_parser)
    get_parser.set_defaults(func=send.get_cmd)

    # --- post command ---
    post_parser = subparsers.add_parser("post", help="Create a comment")
    _add_request_options(post_parser)
    post_parser.add_argument("--name", type=str, required=True, help="Author name")
    post_parser.add_argument("--text", type=str, required=True, help="Comment text")
    post_parser.set_defaults(func=send.post_cmd)

    # --- put command ---
    put_parser = subparsers.add_parser("put", help="Update a comment")
    _add_request_options(put_parser)
    put_parser.add_argument("--id", type=int, default=None, help="Comment id (sent as ?id=)")
    put_parser.add_argument("--name", type=str, required=True, help="Author name")
    put_parser.add_argument("--text", type=str, required=True, help="Comment text")
    put_parser.set_defaults(func=send.put_cmd)

    # --- serve command ---
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the fixture comment API",
        description="Serve the stub comment API with uvicorn.",
    )
    serve_parser.add_argument("--host", type=str, default="127.0.0.1", help="Bind host")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")
    serve_parser.add_argument("--reload", action="store_true", default=False, help="Auto-reload on changes")
    serve_parser.set_defaults(func=serve.serve_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="comment_client.json",
        help="Path for config file (default: comment_client.json)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("You can also use environment variables (COMMENT_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.cli_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: comment config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=error status from the server)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    setup_logging(level=args.log_level or config.log_level)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if getattr(args, "debug", False):
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
