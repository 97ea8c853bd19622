"""Initialize project command."""

import click

from ..db import AppStateRepository, get_db_path, init_db
from .base import async_command, echo_info, echo_success, get_data_dir


@click.command()
@click.pass_context
@async_command
async def init(ctx: click.Context):
    """Initialize the fit-avatar data directory and database."""
    db_path = get_db_path(get_data_dir(ctx))
    echo_info(f"Initializing fit-avatar in {db_path.parent}")

    await init_db(db_path)
    echo_success("Database initialized")

    repo = AppStateRepository(db_path)
    state = await repo.load()
    await repo.avatar.save(state.stats)
    await repo.settings.save(state.settings)
    echo_success(f"Welcome, {state.settings.user_name}!")

    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Browse exercises:")
    click.echo("     fit-avatar exercises list --location home")
    click.echo()
    click.echo("  2. Log a workout:")
    click.echo('     fit-avatar workout log "Push-up" --set reps=12 --set reps=10')
    click.echo()
    click.echo("  3. Check your avatar:")
    click.echo("     fit-avatar avatar show")
