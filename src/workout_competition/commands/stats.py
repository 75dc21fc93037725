"""Personal stats commands."""

import click

from ..db import WorkoutRepository, get_db_path
from ..models.workout import Exercise
from ..services.dashboard import NO_WORKOUTS_YET, Dashboard
from ..services.progress import records_for_user
from .base import (
    async_command,
    echo_info,
    ensure_initialized,
    format_percent,
    format_table,
    resolve_user,
)


@click.command()
@click.option("--email", "-e", required=True, help="Email of the user")
@click.pass_context
@async_command
async def stats(ctx: click.Context, email: str):
    """Show your totals and progress since your first workout."""
    ensure_initialized(ctx)

    user = await resolve_user(ctx, email)
    dashboard = Dashboard(WorkoutRepository(get_db_path()), user)
    await dashboard.refresh()

    personal = dashboard.personal
    if personal is None:
        echo_info(NO_WORKOUTS_YET)
        return

    click.echo()
    click.echo(click.style("Your Stats", bold=True))
    click.echo(f"Total workouts: {personal.total_workouts}")
    click.echo()

    rows = [
        [
            exercise.label,
            str(personal.first.count(exercise)),
            str(personal.latest_count(exercise)),
            format_percent(personal.percent_increase(exercise)),
        ]
        for exercise in Exercise
    ]
    click.echo(format_table(["Exercise", "First", "Latest", "Change"], rows))


@click.command()
@click.option("--email", "-e", required=True, help="Email of the user")
@click.pass_context
@async_command
async def history(ctx: click.Context, email: str):
    """List your logged workouts, oldest first."""
    ensure_initialized(ctx)

    user = await resolve_user(ctx, email)
    if user is None:
        echo_info(NO_WORKOUTS_YET)
        return

    records = await WorkoutRepository(get_db_path()).list_all(ascending=True)
    mine = records_for_user(records, user.id)

    if not mine:
        echo_info(NO_WORKOUTS_YET)
        return

    rows = [
        [
            record.created_at.strftime("%Y-%m-%d %H:%M"),
            *(str(record.count(exercise)) for exercise in Exercise),
        ]
        for record in mine
    ]
    click.echo()
    click.echo(format_table(["Logged", *(e.label for e in Exercise)], rows))
    click.echo()
    click.echo(f"Total: {len(mine)} workout(s)")
