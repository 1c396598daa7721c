"""The `jobdesk serve` command."""

from __future__ import annotations

import typer
import uvicorn

from jobdesk.cli import console
from jobdesk.core.logging_setup import configure_server_logging

APP_IMPORT_PATH = "jobdesk.api.app:app"


def serve_command(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind."),
    port: int = typer.Option(8000, "--port", "-p", help="Port to listen on."),
) -> None:
    """Start the API server."""
    # uvicorn.Config applies uvicorn's dictConfig, which resets its loggers'
    # handlers, so the file handler goes on afterwards.
    config = uvicorn.Config(APP_IMPORT_PATH, host=host, port=port)
    log_file = configure_server_logging()
    console.print(f"Serving on [bold]http://{host}:{port}[/bold] (log: {log_file})")
    uvicorn.Server(config).run()
