"""Account and configuration CLI commands."""

from __future__ import annotations

from typing import Optional

import typer
from rich.table import Table

from jobdesk.cli import TOKEN_ENVVAR, cli_error, console, run_as_user
from jobdesk.core.config import env_status
from jobdesk.core.models import AuthUser, Profile
from jobdesk.db import repository
from jobdesk.db.client import SupabaseClient


def credits_command(
    token: Optional[str] = typer.Option(None, "--token", envvar=TOKEN_ENVVAR, help="Access token."),
) -> None:
    """Show your remaining credit balance."""

    async def _load(client: SupabaseClient, user: AuthUser) -> Profile | None:
        return await repository.get_profile(client, user.id)

    profile = run_as_user(token, _load)
    if profile is None:
        cli_error("Profile not found.")
    console.print(f"Credits: [bold]{profile.credits_remaining}[/bold]")


def env_command() -> None:
    """Show which configuration keys are set (values are never printed)."""
    table = Table(title="Configuration")
    table.add_column("Key")
    table.add_column("Present")
    for key, present in env_status().items():
        table.add_row(key, "[green]yes[/green]" if present else "[red]no[/red]")
    console.print(table)
