#!/usr/bin/env python
"""
Run the Urban Farm Share API server.

Usage:
    uv run python run_api.py
    uv run python run_api.py --reload  # Development mode
    uv run python run_api.py --port 9000 --log-level debug
"""

import argparse
import uvicorn

from shared.config import Settings, get_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run Urban Farm Share API server")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to (default: HOST)")
    parser.add_argument("--port", type=int, help="Port to bind to (default: PORT)")
    parser.add_argument("--log-level", type=str, help="Server log level (default: LOG_LEVEL)")
    return parser


def server_options(args: argparse.Namespace, settings: Settings) -> dict:
    """Merge command-line overrides onto the configured server settings."""
    return {
        "host": args.host or settings.host,
        "port": args.port or settings.port,
        "reload": args.reload or settings.reload,
        # uvicorn only accepts lower-case level names
        "log_level": (args.log_level or settings.log_level).lower(),
    }


def main(argv=None):
    args = build_parser().parse_args(argv)
    uvicorn.run("api:app", **server_options(args, get_settings()))


if __name__ == "__main__":
    main()
