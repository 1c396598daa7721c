"""Document browsing CLI commands."""

from __future__ import annotations

from typing import Optional

import typer
from rich.panel import Panel
from rich.table import Table

from jobdesk.cli import TOKEN_ENVVAR, cli_error, console, run_as_user
from jobdesk.core.models import AuthUser, Document
from jobdesk.db import repository
from jobdesk.db.client import SupabaseClient
from jobdesk.documents.listing import display_text, display_title, effective_type, filter_by_type

documents_app = typer.Typer(
    name="documents",
    help="Browse your stored resumes and cover letters.",
    no_args_is_help=True,
)


@documents_app.command("list")
def documents_list(
    doc_type: Optional[str] = typer.Option(None, "--type", "-t", help="Only show this document type."),
    token: Optional[str] = typer.Option(None, "--token", envvar=TOKEN_ENVVAR, help="Access token."),
) -> None:
    """List your documents, newest first."""

    async def _load(client: SupabaseClient, user: AuthUser) -> list[Document]:
        return await repository.list_documents(client, user.id)

    docs = filter_by_type(run_as_user(token, _load), doc_type)
    if not docs:
        console.print("[dim]No documents yet.[/dim]")
        return

    table = Table(title="Documents")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("Type", style="magenta")
    table.add_column("Created")
    table.add_column("Job", style="dim")
    for d in docs:
        table.add_row(
            d.id,
            display_title(d),
            effective_type(d),
            d.created_at.strftime("%b %d, %Y %H:%M") if d.created_at else "",
            d.job_id or "",
        )
    console.print(table)


@documents_app.command("show")
def documents_show(
    document_id: str = typer.Argument(..., help="Document ID."),
    token: Optional[str] = typer.Option(None, "--token", envvar=TOKEN_ENVVAR, help="Access token."),
) -> None:
    """Print one document's full text."""

    async def _load(client: SupabaseClient, user: AuthUser) -> Document | None:
        return await repository.get_document(client, document_id, user.id)

    doc = run_as_user(token, _load)
    if doc is None:
        cli_error(f"Document not found: '{document_id}'")
    console.print(
        Panel(
            display_text(doc),
            title=display_title(doc),
            subtitle=effective_type(doc),
            border_style="blue",
        )
    )
