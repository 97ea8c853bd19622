"""Statistics commands."""

import click

from ..config import get_settings
from ..models.exercises import SubCategory
from ..models.workout import TimePeriod
from ..services.statistics import StatisticsAggregator
from .base import async_command, format_table, get_repository, progress_bar


@click.command()
@click.option(
    "--period",
    "-p",
    type=click.Choice([p.value for p in TimePeriod]),
    default=TimePeriod.WEEK.value,
    help="Calendar period to summarize",
)
@click.pass_context
@async_command
async def stats(ctx: click.Context, period: str):
    """Summarize workouts for the current week, month or year.

    Also shows the overall level, a trailing seven-day activity chart and
    progress toward your goals.
    """
    repo = get_repository(ctx)
    state = await repo.load()

    aggregator = StatisticsAggregator(state.history)
    summary = aggregator.summary(
        TimePeriod(period), recent_limit=get_settings().recent_workouts_limit
    )

    click.echo()
    click.echo(click.style(f"Statistics ({summary.period.value})", bold=True))
    click.echo("=" * 50)
    click.echo(f"Workouts: {summary.workout_count}")
    click.echo(f"Sets:     {summary.total_sets}")
    click.echo(f"Minutes:  {summary.total_minutes}")
    click.echo(f"XP:       {summary.total_xp}")

    click.echo()
    click.echo(click.style("Overall Level", bold=True))
    click.echo(
        f"  Lv {summary.current_level} - {summary.xp_to_next_level} XP to next level"
    )

    click.echo()
    click.echo(click.style("Last 7 Days", bold=True))
    max_count = max((d.count for d in summary.weekly_bar_data), default=0)
    for day in summary.weekly_bar_data:
        ratio = day.count / max_count if max_count else 0.0
        click.echo(f"  {day.day} {progress_bar(ratio, width=10)} {day.count}")

    click.echo()
    click.echo(click.style("By Category", bold=True))
    breakdown = summary.category_breakdown
    rows = [
        [
            category.label,
            str(breakdown.counts[category]),
            f"{breakdown.percentage(category):.0f}%",
        ]
        for category in SubCategory
    ]
    click.echo(format_table(["Category", "Workouts", "Share"], rows))

    goals = aggregator.goal_progress(state.settings)
    click.echo()
    click.echo(click.style("Goals", bold=True))
    click.echo(
        f"  Weekly  {progress_bar(goals.weekly_ratio)} "
        f"{goals.weekly_workouts}/{goals.weekly_goal} workouts"
    )
    click.echo(
        f"  Monthly {progress_bar(goals.monthly_ratio)} "
        f"{goals.monthly_xp}/{goals.monthly_goal} XP"
    )
