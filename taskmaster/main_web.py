import argparse
import os
import sys
from pathlib import Path

import uvicorn

from taskmaster.auth import OAuthService
from taskmaster.config import Settings
from taskmaster.config_docs import DEFAULT_WEB_PORT, log_config_summary, validate_configuration
from taskmaster.logger import Logger, session_logger
from taskmaster.storage import create_store
from taskmaster.web_server import TaskmasterWebServer

logger: Logger = session_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="ClickUp Taskmaster Web Server - OAuth connection endpoints"
    )
    parser.add_argument(
        "--host",
        type=str,
        default="0.0.0.0",
        help="Host address to bind to (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("TASKMASTER_WEB_PORT", str(DEFAULT_WEB_PORT))),
        help=f"Port number to listen on (default: {DEFAULT_WEB_PORT}, or TASKMASTER_WEB_PORT env var)",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default=None,
        help="Directory holding the OAuth token store (default: TASKMASTER_DATA_DIR or ./data)",
    )
    parser.add_argument(
        "--public-url",
        type=str,
        default=None,
        help="Externally visible base URL used to build the OAuth callback address",
    )
    return parser


def create_server(settings: Settings) -> TaskmasterWebServer:
    store = create_store(settings, logger=logger)
    oauth = OAuthService(settings, store, logger=logger)
    return TaskmasterWebServer(settings=settings, oauth_service=oauth, logger=logger)


if __name__ == "__main__":
    args = build_parser().parse_args()

    overrides = {}
    if args.data_dir:
        overrides["data_dir"] = Path(args.data_dir)
    if args.public_url:
        overrides["public_url"] = args.public_url
    settings = Settings.from_env(**overrides)

    is_valid, errors = validate_configuration(settings)
    if not is_valid:
        for error in errors:
            logger.error("FATAL: Invalid configuration", error=error)
        sys.exit(1)
    log_config_summary(settings, logger)
    if not settings.oauth_configured:
        logger.warning("OAuth is not configured; /oauth/authorize will return 500")

    server = create_server(settings)

    try:
        logger.info(
            "Starting web server",
            host=args.host,
            port=args.port,
            transport="HTTP REST API",
        )
        uvicorn.run(server.app, host=args.host, port=args.port)
        logger.info("Web server shutdown complete")
    except KeyboardInterrupt:
        logger.info("Web server stopped by user")
        sys.exit(0)
    except Exception as e:
        logger.error("Failed to start web server", error=str(e), error_type=type(e).__name__)
        sys.exit(1)
