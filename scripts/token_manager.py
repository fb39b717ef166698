#!/usr/bin/env python3
"""ClickUp Token Management CLI

Command-line utility to inspect, store, and revoke the encrypted ClickUp token
shared by the MCP and web servers.
"""

import argparse
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from taskmaster.auth import DEFAULT_USER_ID, OAuthService  # noqa: E402
from taskmaster.config import Settings  # noqa: E402
from taskmaster.logger import Logger, session_logger  # noqa: E402
from taskmaster.storage import create_store  # noqa: E402


def build_service(args) -> OAuthService:
    overrides = {"data_dir": Path(args.data_dir)} if args.data_dir else {}
    settings = Settings.from_env(**overrides)
    return OAuthService(settings, create_store(settings))


def show_status(args):
    """Show stored-token status"""
    logger: Logger = session_logger
    service = build_service(args)

    token = service.load_token(args.user)
    status = service.status()
    logger.info("Token store", path=str(service.settings.kv_store_path))
    logger.info(f"OAuth configured:   {status['oauth_configured']}")
    logger.info(f"Static token set:   {status['fallback_token']}")
    if token is None:
        logger.info(f"No readable token stored for user '{args.user}'")
        return 0

    created = datetime.fromtimestamp(token.created_at / 1000, tz=timezone.utc)
    logger.info(f"User:       {args.user}")
    logger.info(f"Type:       {token.token_type}")
    logger.info(f"Created:    {created.strftime('%Y-%m-%d %H:%M:%S UTC')}")
    logger.info(f"Token:      {token.access_token[:8]}...")
    return 0


def revoke_token(args):
    """Revoke the stored token"""
    logger: Logger = session_logger
    service = build_service(args)

    if service.revoke_token(args.user):
        logger.info("Token revoked successfully", user=args.user)
    else:
        logger.info("No token stored", user=args.user)
    return 0


def store_token(args):
    """Store a token obtained outside the OAuth flow (e.g. a personal API token)"""
    logger: Logger = session_logger
    service = build_service(args)

    service.store_token(args.token, user_id=args.user)
    if args.user != DEFAULT_USER_ID:
        service.store_token(args.token, user_id=DEFAULT_USER_ID)
    logger.info("Token stored successfully", user=args.user)
    return 0


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="ClickUp Taskmaster Token Manager - Inspect and manage the stored ClickUp token",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show whether a token is stored
  python token_manager.py status

  # Store a personal API token for the MCP server to use
  python token_manager.py store --token pk_12345_ABCDEF

  # Revoke the stored token
  python token_manager.py revoke

Environment Variables:
    TASKMASTER_DATA_DIR         Directory holding oauth/kv.json
    TASKMASTER_ENCRYPTION_KEY   Key used to encrypt stored tokens
        """,
    )

    parser.add_argument(
        "--data-dir",
        type=str,
        default=None,
        help="Data directory (default: TASKMASTER_DATA_DIR or ./data)",
    )
    parser.add_argument(
        "--user",
        type=str,
        default=DEFAULT_USER_ID,
        help=f"User id the token is stored under (default: {DEFAULT_USER_ID})",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("status", help="Show stored-token status")
    subparsers.add_parser("revoke", help="Revoke the stored token")

    store_parser = subparsers.add_parser("store", help="Store a token")
    store_parser.add_argument("--token", type=str, required=True, help="ClickUp access token")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Execute command
    if args.command == "status":
        return show_status(args)
    elif args.command == "revoke":
        return revoke_token(args)
    elif args.command == "store":
        return store_token(args)
    else:
        logger: Logger = session_logger
        logger.error(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
