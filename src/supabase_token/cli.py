"""Command-line interface for managing the access token."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from keyring.errors import KeyringError

from .core.token_store import AccessTokenStore
from .errors import TokenStoreError


def cmd_login(args: argparse.Namespace, store: AccessTokenStore) -> int:
    token = args.token or os.getenv(store.config.token_env_var)
    if not token:
        if sys.stdin.isatty():
            print("Enter your access token: ", end="", file=sys.stderr, flush=True)
        token = sys.stdin.readline()
    store.save(token.strip())
    print("You are now logged in.")
    return 0


def cmd_logout(args: argparse.Namespace, store: AccessTokenStore) -> int:
    store.delete()
    print("Access token deleted successfully. You are now logged out.")
    return 0


def cmd_status(args: argparse.Namespace, store: AccessTokenStore) -> int:
    _, source = store.resolve()
    print(f"You are logged in. Access token loaded from {source}.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="supabase-token",
        description="Manage the Supabase CLI access token.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    login_p = sub.add_parser("login", help="Save an access token")
    login_p.add_argument("--token", help="Access token (read from stdin if omitted)")
    login_p.set_defaults(func=cmd_login)

    logout_p = sub.add_parser("logout", help="Delete the saved access token")
    logout_p.set_defaults(func=cmd_logout)

    status_p = sub.add_parser("status", help="Show whether an access token is available")
    status_p.set_defaults(func=cmd_status)

    return parser


def main(argv: Optional[List[str]] = None, store: Optional[AccessTokenStore] = None) -> int:
    """Run the CLI and return its exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="[%(asctime)s] %(name)s: %(message)s",
    )

    try:
        return args.func(args, store or AccessTokenStore())
    except TokenStoreError as e:
        print(str(e), file=sys.stderr)
        return 1
    except (KeyringError, OSError, RuntimeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
