"""CLI entry point for workout-competition."""

import click

from . import __version__
from .commands import history, init, leaderboard, log_workout, serve, stats
from .config import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="workout-competition")
def main():
    """workout-competition: log workouts and compete on improvement.

    Track pushups, pullups, situps and squats, then see who improved the
    most since their first workout.

    Example usage:

        # Initialize the database
        workout-competition init

        # Log a workout
        workout-competition log -e you@example.com --pushups 20 --pullups 5 --situps 30 --squats 40

        # See your progress and the standings
        workout-competition stats -e you@example.com
        workout-competition leaderboard -e you@example.com
    """
    configure_logging()


# Register commands
main.add_command(init)
main.add_command(log_workout)
main.add_command(stats)
main.add_command(history)
main.add_command(leaderboard)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
