"""Entry point: parses CLI arguments, configures logging, runs uvicorn."""

import argparse
import logging
from typing import List, Optional

import uvicorn

from sequential_thinking.app import create_app
from sequential_thinking.config import ServerSettings, get_settings
from sequential_thinking.logging_manager import LoggingManager

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcp-sequential-thinking",
        description="MCP server exposing the sequential_thinking tool.",
    )
    parser.add_argument("--host", help="Interface to bind (default from HOST).")
    parser.add_argument("--port", type=int, help="Port to listen on (default from PORT).")
    parser.add_argument(
        "--transport",
        choices=["sse", "http"],
        help="MCP transport: 'sse' event stream or streamable 'http'.",
    )
    parser.add_argument("--log-level", help="Logging level, e.g. DEBUG or INFO.")
    return parser


def resolve_settings(argv: Optional[List[str]] = None) -> ServerSettings:
    """Apply command-line overrides on top of environment settings."""
    args = build_parser().parse_args(argv)
    overrides = {
        key: value
        for key, value in {
            "host": args.host,
            "port": args.port,
            "transport": args.transport,
            "log_level": args.log_level,
        }.items()
        if value is not None
    }
    return get_settings().model_copy(update=overrides)


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point for the sequential thinking server."""
    settings = resolve_settings(argv)
    LoggingManager(settings)

    app = create_app(settings=settings)
    logger.info(f"Sequential Thinking MCP Server running on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
