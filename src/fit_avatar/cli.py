"""CLI entry point for fit-avatar."""

from pathlib import Path

import click

from . import __version__
from .commands import avatar, data, exercises, init, serve, stats, workout
from .config import get_settings
from .logging_setup import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="fit-avatar")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="FIT_AVATAR_DATA_DIR",
    help="Directory holding the database (default: ~/.fit-avatar)",
)
@click.option("--log-level", default=None, help="Logging level, e.g. INFO or DEBUG")
@click.pass_context
def main(ctx: click.Context, data_dir: Path | None, log_level: str | None):
    """fit-avatar: level up an avatar by logging your workouts.

    Each workout earns XP for the body parts it trains. Track levels per body
    part, review statistics and browse the exercise catalog.

    Example usage:

        # Initialize the database
        fit-avatar init

        # Find something to do
        fit-avatar exercises list --location home --difficulty beginner

        # Log it
        fit-avatar workout log "Squat" --set reps=15 --set reps=12

        # See the results
        fit-avatar avatar show
        fit-avatar stats --period month
    """
    settings = get_settings()
    setup_logging(log_level or settings.log_level, settings.log_format)
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir


# Register commands
main.add_command(init)
main.add_command(workout)
main.add_command(stats)
main.add_command(avatar)
main.add_command(exercises)
main.add_command(data)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
