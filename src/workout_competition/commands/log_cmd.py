"""Log a workout from the command line."""

import click

from ..auth.identity import StaticIdentity
from ..db import WorkoutRepository, get_db_path
from ..models.workout import Exercise
from ..services.dashboard import Dashboard
from ..services.events import RefreshNotifier
from ..services.intake import WorkoutIntake
from .base import (
    async_command,
    echo_error,
    echo_success,
    ensure_initialized,
    format_percent,
    resolve_user,
)


@click.command(name="log")
@click.option("--email", "-e", required=True, help="Email of the user logging the workout")
@click.option("--pushups", required=True, help="Number of pushups")
@click.option("--pullups", required=True, help="Number of pullups")
@click.option("--situps", required=True, help="Number of situps")
@click.option("--squats", required=True, help="Number of squats")
@click.pass_context
@async_command
async def log_workout(
    ctx: click.Context,
    email: str,
    pushups: str,
    pullups: str,
    situps: str,
    squats: str,
):
    """Log a workout.

    Counts must be whole numbers of zero or more. The user is created on
    first use.

    Example:

        workout-competition log -e you@example.com --pushups 20 \\
            --pullups 5 --situps 30 --squats 40
    """
    ensure_initialized(ctx)

    user = await resolve_user(ctx, email, create=True)
    repository = WorkoutRepository(get_db_path())

    notifier = RefreshNotifier()
    dashboard = Dashboard(repository, user, notifier)
    intake = WorkoutIntake(StaticIdentity(user), repository, notifier)

    try:
        result = await intake.submit(
            pushups=pushups,
            pullups=pullups,
            situps=situps,
            squats=squats,
        )
    finally:
        dashboard.close()

    if not result.success:
        echo_error(result.error)
        ctx.exit(1)

    stats = dashboard.personal
    if stats is None:
        echo_success("Workout saved")
        return

    echo_success(f"Workout saved ({stats.total_workouts} logged so far)")
    for exercise in Exercise:
        click.echo(
            f"  {exercise.label:<8} {stats.latest_count(exercise):>5}  "
            f"{format_percent(stats.percent_increase(exercise))} since first workout"
        )
