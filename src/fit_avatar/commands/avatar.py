"""Avatar stats commands."""

import json

import click

from ..models.avatar import BodyPart
from ..utils.radar import build_radar_chart
from .base import (
    async_command,
    echo_success,
    echo_warning,
    format_table,
    get_repository,
    progress_bar,
)


@click.group()
def avatar():
    """Inspect or reset per-body-part avatar stats."""
    pass


@avatar.command("show")
@click.pass_context
@async_command
async def show(ctx: click.Context):
    """Show levels, progress and radar values for each body part."""
    repo = get_repository(ctx)
    state = await repo.load()
    stats = state.stats

    click.echo()
    click.echo(click.style(f"{state.settings.user_name}'s Avatar", bold=True))
    click.echo("=" * 50)
    click.echo(f"Overall level: {stats.overall_level}")
    click.echo()

    radar = {point.part: point.value for point in stats.radar_data()}
    rows = [
        [
            part.label,
            str(stats.level(part)),
            str(stats.points(part)),
            progress_bar(stats.level_progress(part), width=10),
            str(stats.xp_to_next_level(part)),
            f"{radar[part]:.2f}",
        ]
        for part in BodyPart
    ]
    click.echo(
        format_table(["Part", "Lv", "Points", "Progress", "To next", "Radar"], rows)
    )


@avatar.command("radar")
@click.option("--size", default=200.0, type=click.FloatRange(min=0, min_open=True))
@click.option("--levels", is_flag=True, help="Include the five concentric grid rings")
@click.pass_context
@async_command
async def radar(ctx: click.Context, size: float, levels: bool):
    """Print radar chart geometry as JSON."""
    repo = get_repository(ctx)
    state = await repo.load()

    data = state.stats.radar_data()
    chart = build_radar_chart([p.value for p in data], size, show_multiple_levels=levels)
    payload = chart.to_dict()
    payload["points"] = [p.to_dict() for p in data]
    click.echo(json.dumps(payload, indent=2))


@avatar.command("reset")
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def reset(ctx: click.Context, yes: bool):
    """Reset every body part to zero points."""
    repo = get_repository(ctx)
    if not yes:
        echo_warning("This sets every body part back to level 1.")
        if not click.confirm("Reset avatar stats?"):
            return

    await repo.avatar.reset()
    echo_success("Avatar stats reset")
