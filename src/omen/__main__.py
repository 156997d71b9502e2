"""CLI entry point for omen.

This module provides the command-line interface for starting the omen server.
It can be invoked as `omen` (via the script entry point) or `python -m omen`.
"""

import argparse
import logging
import os
import sys

import uvicorn

from omen import __version__, create_app
from omen.config import OmenSettings


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the omen CLI.

    Parses command-line arguments and starts the uvicorn server with the
    FastAPI application.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])
    """
    parser = argparse.ArgumentParser(
        prog="omen",
        description="Headless chat server for tool-using Anthropic agents",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"omen {__version__}",
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind the server to (default: 127.0.0.1, can be set via OMEN_HOST)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind the server to (default: 8000, can be set via OMEN_PORT)",
    )

    parser.add_argument(
        "--model",
        type=str,
        default=None,
        help="Default model for new sessions (can be set via OMEN_MODEL)",
    )

    parser.add_argument(
        "--data-dir",
        type=str,
        default=None,
        help="Directory the built-in read_file tool reads from (default: ., can be set via OMEN_DATA_DIR)",
    )

    parser.add_argument(
        "--tools-module",
        type=str,
        default=None,
        help="Dotted path of a module defining the tools to load (can be set via OMEN_TOOLS_MODULE)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO, can be set via OMEN_LOG_LEVEL)",
    )

    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development (uvicorn --reload)",
    )

    args = parser.parse_args(argv)

    # Build settings, CLI args override environment variables
    settings_kwargs = {}
    if args.host is not None:
        settings_kwargs["host"] = args.host
    if args.port is not None:
        settings_kwargs["port"] = args.port
    if args.model is not None:
        settings_kwargs["model"] = args.model
    if args.data_dir is not None:
        settings_kwargs["data_dir"] = args.data_dir
    if args.tools_module is not None:
        settings_kwargs["tools_module"] = args.tools_module
    if args.log_level is not None:
        settings_kwargs["log_level"] = args.log_level

    settings = OmenSettings(**settings_kwargs)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.reload:
        # The reloader builds the app in a child process from OMEN_* variables
        for name, value in settings_kwargs.items():
            os.environ[f"OMEN_{name.upper()}"] = str(value)
        uvicorn.run(
            "omen.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
            reload=True,
        )
        return

    # Create the FastAPI app
    app = create_app(settings=settings)

    # Start uvicorn
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    sys.exit(main())
