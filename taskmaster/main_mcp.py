import argparse
import asyncio
import os
import sys
from pathlib import Path

from taskmaster.config import Settings
from taskmaster.config_docs import DEFAULT_MCP_PORT, log_config_summary, validate_configuration
from taskmaster.logger import Logger, session_logger

logger: Logger = session_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="ClickUp Taskmaster MCP Server - ClickUp tools via Model Context Protocol"
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
        default=int(os.environ.get("TASKMASTER_MCP_PORT", str(DEFAULT_MCP_PORT))),
        help=f"Port number to listen on (default: {DEFAULT_MCP_PORT}, or TASKMASTER_MCP_PORT env var)",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default=None,
        help="Directory holding the OAuth token store (default: TASKMASTER_DATA_DIR or ./data)",
    )
    return parser


if __name__ == "__main__":
    args = build_parser().parse_args()

    overrides = {"data_dir": Path(args.data_dir)} if args.data_dir else {}
    settings = Settings.from_env(**overrides)

    is_valid, errors = validate_configuration(settings)
    if not is_valid:
        for error in errors:
            logger.error("FATAL: Invalid configuration", error=error)
        sys.exit(1)
    log_config_summary(settings, logger)

    import taskmaster.mcp_server.mcp_server as mcp_server_module

    mcp_server_module.settings_override = settings
    from taskmaster.mcp_server.server import main

    try:
        logger.info(
            "Starting MCP server",
            host=args.host,
            port=args.port,
            transport="Streamable HTTP",
            oauth_configured=settings.oauth_configured,
        )
        asyncio.run(main(host=args.host, port=args.port))
        logger.info("MCP server shutdown complete")
    except KeyboardInterrupt:
        logger.info("Shutdown complete")
        sys.exit(0)
    except Exception as e:
        logger.error("Failed to start server", error=str(e), error_type=type(e).__name__)
        sys.exit(1)
