#!/usr/bin/env python3
"""
Entry point for the Todo API.

Usage:
  python run.py [dev|prod|help]
"""

import logging
import sys

import uvicorn

from todo_app.logging_utils import configure_logging
from todo_app.settings import get_settings

configure_logging()
logger = logging.getLogger(__name__)


def log_startup(host: str, port: int, mode: str) -> None:
    """Log a single startup line for process managers."""
    settings = get_settings()
    logger.info(
        "Starting on %s:%s (MODE=%s, DATA_FILE=%s)",
        host,
        port,
        mode,
        settings.data_file,
    )


def run_server(reload: bool) -> None:
    settings = get_settings()
    log_startup(settings.host, settings.port, "dev" if reload else "prod")
    uvicorn.run(
        "todo_app.main:app",
        host=settings.host,
        port=settings.port,
        reload=reload,
        log_level="info",
    )


def show_help() -> None:
    print("""
Todo API - Launch Utility

Usage:
  python run.py [command]

Commands:
  dev        - Run with auto-reload
  prod       - Run without auto-reload (default)
  help       - Show this help message

Environment:
  TODO_DATA_FILE, TODO_STATIC_DIR, HOST, PORT, ENVIRONMENT,
  CONTENT_SECURITY_POLICY
    """.strip())


def main() -> None:
    mode = sys.argv[1].lower() if len(sys.argv) > 1 else "prod"

    try:
        if mode == "dev":
            run_server(reload=True)
        elif mode == "prod":
            run_server(reload=False)
        elif mode in ["help", "-h", "--help"]:
            show_help()
        else:
            print(f"Unknown mode: {mode}")
            show_help()
            sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Shutdown requested...")
        sys.exit(0)


if __name__ == "__main__":
    main()
