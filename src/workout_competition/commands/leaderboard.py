"""Leaderboard command."""

import click

from ..db import WorkoutRepository, get_db_path
from ..models.leaderboard import NO_COMPETITION_DATA
from ..models.workout import Exercise
from ..services.dashboard import Dashboard
from .base import (
    async_command,
    echo_info,
    ensure_initialized,
    format_percent,
    format_table,
    resolve_user,
)


@click.command()
@click.option("--email", "-e", default=None, help="Show ranks for this user")
@click.option("--full", is_flag=True, help="Show the full ranking for each exercise")
@click.pass_context
@async_command
async def leaderboard(ctx: click.Context, email: str | None, full: bool):
    """Show competition standings by percentage improvement."""
    ensure_initialized(ctx)

    user = await resolve_user(ctx, email) if email else None
    dashboard = Dashboard(WorkoutRepository(get_db_path()), user)
    await dashboard.refresh()

    board = dashboard.leaderboard
    if board is None:
        echo_info(NO_COMPETITION_DATA)
        return

    click.echo()
    click.echo(click.style("Competition Standings", bold=True))
    click.echo("=" * 50)

    if user is not None:
        ranks = []
        for exercise in Exercise:
            rank = board.current_user_rank(exercise)
            ranks.append(f"{exercise.label} {'#' + str(rank) if rank else '-'}")
        click.echo("Your ranks: " + "  ".join(ranks))
        click.echo()

    rows = []
    for exercise in Exercise:
        leader = board.leader(exercise)
        rows.append([exercise.label, leader.display_name, format_percent(leader.percent_increase)])
    click.echo(format_table(["Exercise", "Leader", "Change"], rows))

    if not full:
        return

    for exercise in Exercise:
        click.echo()
        click.echo(click.style(exercise.label, bold=True))
        rows = [
            [
                str(entry.rank),
                entry.display_name,
                f"{entry.first} -> {entry.latest}",
                format_percent(entry.percent_increase),
            ]
            for entry in board.standings[exercise].ranking
        ]
        click.echo(format_table(["Rank", "User", "First -> Latest", "Change"], rows))
