"""CLI commands for the user directory."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, NoReturn

import typer

from ..config import data_file
from .errors import UserDirectoryError
from .models import User
from .service import UserService
from .store import JsonFileUserStore
from .validators import parse_age


def _get_service(ctx: typer.Context) -> UserService:
    """Build the service for the data file chosen on the command line."""
    path: Path | None = (ctx.obj or {}).get("data_file")
    return UserService(JsonFileUserStore(path or data_file()))


def _fail(message: str) -> NoReturn:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(1)


def _parse_age_or_fail(age: str) -> int:
    try:
        return parse_age(age)
    except UserDirectoryError as e:
        _fail(e.message)


def print_user(user: User) -> None:
    """Print a record one field per line."""
    typer.echo(f"Email: {user.email}")
    typer.echo(f"Username: {user.username}")
    typer.echo(f"Phone: {user.phone}")
    typer.echo(f"Age: {user.age}")


def print_user_table(users: list[User]) -> None:
    """Print records as an email/username table."""
    typer.echo("User list:")
    typer.echo("Email\t\tUsername")
    typer.echo("-" * 24)
    for user in users:
        typer.echo(f"{user.email}\t{user.username}")


def create_user(
    ctx: typer.Context,
    email: Annotated[str, typer.Argument(help="Email address (unique key)")],
    username: Annotated[str, typer.Argument(help="Display name, at least 3 characters")],
    phone: Annotated[str, typer.Argument(help="Phone number, at least 10 digits")],
    age: Annotated[str, typer.Argument(metavar="AGE", help="Age, 0 to 150")],
) -> None:
    """Create a new user."""
    parsed_age = _parse_age_or_fail(age)
    try:
        user = _get_service(ctx).create_user(email, username, phone, parsed_age)
    except UserDirectoryError as e:
        _fail(f"Failed to create user: {e.message}")

    typer.secho("User created successfully:", fg=typer.colors.GREEN)
    print_user(user)


def update_user(
    ctx: typer.Context,
    email: Annotated[str, typer.Argument(help="Email of the user to update")],
    username: Annotated[str, typer.Argument(help="New display name")],
    phone: Annotated[str, typer.Argument(help="New phone number")],
    age: Annotated[str, typer.Argument(metavar="AGE", help="New age")],
) -> None:
    """Replace an existing user's username, phone and age."""
    parsed_age = _parse_age_or_fail(age)
    try:
        user = _get_service(ctx).update_user(email, username, phone, parsed_age)
    except UserDirectoryError as e:
        _fail(f"Failed to update user: {e.message}")

    typer.secho("User updated successfully:", fg=typer.colors.GREEN)
    print_user(user)


def list_users(ctx: typer.Context) -> None:
    """List all users."""
    try:
        users = _get_service(ctx).list_users()
    except UserDirectoryError as e:
        _fail(f"Failed to list users: {e.message}")

    print_user_table(users)


def get_user(
    ctx: typer.Context,
    email: Annotated[str, typer.Argument(help="Email of the user to show")],
) -> None:
    """Show a single user."""
    try:
        user = _get_service(ctx).get_user(email)
    except UserDirectoryError as e:
        _fail(f"Failed to get user: {e.message}")

    print_user(user)


def delete_user(
    ctx: typer.Context,
    email: Annotated[str, typer.Argument(help="Email of the user to delete")],
) -> None:
    """Delete a user."""
    try:
        _get_service(ctx).delete_user(email)
    except UserDirectoryError as e:
        _fail(f"Failed to delete user: {e.message}")

    typer.secho("User deleted successfully", fg=typer.colors.GREEN)
