import logging
from importlib.metadata import version as pkg_version
from typing import Optional

import typer

from jobdesk.cli.account_cmd import credits_command, env_command
from jobdesk.cli.documents_cmd import documents_app
from jobdesk.cli.serve_cmd import serve_command

app = typer.Typer(
    name="jobdesk",
    help="Job tracker with AI-written resumes and cover letters.",
    no_args_is_help=True,
    invoke_without_command=True,
)

app.add_typer(documents_app, name="documents")

app.command("serve")(serve_command)
app.command("credits")(credits_command)
app.command("env")(env_command)

_CONSOLE_FORMAT = "%(name)s %(levelname)s: %(message)s"


def _show_version(value: bool):
    if value:
        typer.echo(f"jobdesk {pkg_version('jobdesk')}")
        raise typer.Exit()


def _configure_console_logging(debug: bool) -> None:
    # Third-party loggers stay at WARNING; --debug only opens up ours.
    logging.basicConfig(level=logging.WARNING, format=_CONSOLE_FORMAT)
    logging.getLogger("jobdesk").setLevel(logging.DEBUG if debug else logging.WARNING)


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-v", callback=_show_version, is_eager=True,
        help="Show version and exit.",
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Log jobdesk internals at DEBUG level.",
    ),
):
    """Job tracker with AI-written resumes and cover letters."""
    _configure_console_logging(debug)


if __name__ == "__main__":
    app()
