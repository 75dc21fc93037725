"""Initialize project command."""

import click

from ..config import get_data_dir
from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the workout-competition database.

    Creates the data directory and the SQLite schema. Set
    WORKOUT_COMPETITION_DATA_DIR to keep the data elsewhere.
    """
    data_dir = get_data_dir()
    echo_info(f"Initializing workout-competition in {data_dir}")

    db_path = get_db_path(data_dir)
    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("Next steps:")
    click.echo("  workout-competition log --email you@example.com "
               "--pushups 20 --pullups 5 --situps 30 --squats 40")
    click.echo("  workout-competition leaderboard --email you@example.com")
