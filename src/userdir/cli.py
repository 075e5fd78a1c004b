"""userdir CLI - manage a JSON-backed user directory."""

from pathlib import Path
from typing import Sequence

import typer
from dotenv import load_dotenv

from . import __version__
from .config import dotenv_path, log_level
from .directory.commands import create_user, delete_user, get_user, list_users, update_user
from .logging_config import setup_logging

# Load environment variables from .env file if it exists
if dotenv_path().exists():
    load_dotenv(dotenv_path())

app = typer.Typer(help="Manage users stored in a local JSON file.", no_args_is_help=True)
# A negative age such as -1 must reach parse_age instead of being read as an option
_age_settings = {"ignore_unknown_options": True}
app.command("create", context_settings=_age_settings)(create_user)
app.command("update", context_settings=_age_settings)(update_user)
app.command("list")(list_users)
app.command("get")(get_user)
app.command("delete")(delete_user)


def version_callback(v: bool) -> None:
    if v:
        typer.echo(f"v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "-v", "--version", is_eager=True, callback=version_callback
    ),
    data_file: Path | None = typer.Option(
        None,
        "--data-file",
        help="JSON file holding the users (default: $USER_DATA_FILE or userdata.json)",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    setup_logging("DEBUG" if verbose else log_level())
    ctx.obj = {"data_file": data_file}


def main(argv: Sequence[str] | None = None) -> int:
    rc = app(
        args=list(argv) if argv is not None else None,
        standalone_mode=False,
    )
    # Commands return None on success; typer.Exit yields its code
    return rc if isinstance(rc, int) else 0
