"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click

from ..auth.identity import normalize_email
from ..db import UserRepository, get_db_path
from ..models.user import AuthUser


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_db_path()
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'workout-competition init' first."
        )
        ctx.exit(1)


async def resolve_user(ctx: click.Context, email: str, create: bool = False) -> AuthUser | None:
    """Look up the user named by --email, optionally creating it."""
    try:
        normalized = normalize_email(email)
    except ValueError as e:
        echo_error(str(e))
        ctx.exit(1)

    repo = UserRepository(get_db_path())
    if create:
        return await repo.get_or_create(normalized)
    return await repo.get_by_email(normalized)


def format_percent(value: float) -> str:
    """Format a percent increase with an explicit sign, e.g. +12.5%."""
    return f"{value:+.1f}%"


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = [
        "".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)).rstrip(),
        "".join("-" * w + " " * padding for w in widths).rstrip(),
    ]
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)).rstrip()
        )

    return "\n".join(lines)
