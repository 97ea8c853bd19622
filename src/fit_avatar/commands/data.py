"""Export, import and clear commands."""

from pathlib import Path

import click

from ..errors import DeserializationError
from ..services.data_transfer import clear_all_data, export_data, import_data
from .base import (
    async_command,
    echo_error,
    echo_success,
    echo_warning,
    get_repository,
)


@click.group()
def data():
    """Back up, restore or clear your workout data."""
    pass


@data.command("export")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write to file instead of stdout",
)
@click.pass_context
@async_command
async def export(ctx: click.Context, output: Path | None):
    """Export user name, goals and workout history as JSON.

    Examples:

        fit-avatar data export

        fit-avatar data export -o backup.json
    """
    repo = get_repository(ctx)
    state = await repo.load()

    content = export_data(state.settings, state.history)

    if output:
        output.write_text(content, encoding="utf-8")
        echo_success(f"Exported {len(state.history)} workouts to {output}")
    else:
        click.echo(content)


@data.command("import")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def import_(ctx: click.Context, path: Path, yes: bool):
    """Replace history, user name and goals with an exported file.

    Existing workouts are discarded; nothing is merged.
    """
    repo = get_repository(ctx)
    state = await repo.load()

    try:
        imported, settings = import_data(path.read_bytes(), state.settings)
    except DeserializationError as e:
        echo_error(f"Import failed: {e}")
        ctx.exit(1)

    if not yes and len(state.history):
        echo_warning(
            f"This replaces {len(state.history)} existing workouts with "
            f"{len(imported.workout_history)} imported ones."
        )
        if not click.confirm("Continue?"):
            return

    await repo.save_import(imported, settings)
    echo_success(
        f"Imported {len(imported.workout_history)} workouts for {settings.user_name}"
    )


@data.command("clear")
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def clear(ctx: click.Context, yes: bool):
    """Delete all workout history and reset the user name."""
    repo = get_repository(ctx)
    state = await repo.load()

    if not yes:
        echo_warning("All workout history will be deleted.")
        if not click.confirm("Clear all data?"):
            return

    _, settings = clear_all_data(state.settings)
    await repo.clear_all(settings)
    echo_success("All workout data cleared")
