"""Helpers shared by the CLI commands: console output, errors, running as a user."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import NoReturn, TypeVar

import typer
from rich.console import Console

from jobdesk.core.config import get_supabase_config
from jobdesk.core.errors import JobdeskError
from jobdesk.core.models import AuthUser
from jobdesk.db.client import SupabaseClient

console = Console()

T = TypeVar("T")

TOKEN_ENVVAR = "JOBDESK_TOKEN"


def cli_error(message: str) -> NoReturn:
    """Print a red error message and exit with code 1."""
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(code=1)


def require_token(token: str | None) -> str:
    if not token or not token.strip():
        cli_error(f"No access token. Pass --token or set {TOKEN_ENVVAR}.")
    return token.strip()


async def _run_as_user(
    token: str,
    action: Callable[[SupabaseClient, AuthUser], Awaitable[T]],
) -> T:
    async with SupabaseClient(get_supabase_config(), token) as client:
        user = await client.get_user()
        return await action(client, user)


def run_as_user(
    token: str | None,
    action: Callable[[SupabaseClient, AuthUser], Awaitable[T]],
) -> T:
    """Resolve *token* to a user and run *action*; errors exit with code 1."""
    token = require_token(token)
    try:
        return asyncio.run(_run_as_user(token, action))
    except JobdeskError as exc:
        cli_error(exc.message)
    except RuntimeError as exc:
        cli_error(str(exc))
