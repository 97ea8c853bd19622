"""Workout logging and history commands."""

from datetime import datetime

import click
import questionary
from questionary import Style

from ..errors import InvalidInputError
from ..models.exercises import COMMON_EXERCISES, Exercise, TrainingType, find_exercise
from ..models.workout import WorkoutRecord, WorkoutSetDetail
from ..services.statistics import StatisticsAggregator
from ..services.workout_session import complete_workout
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    format_table,
    get_repository,
)

custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("instruction", ""),
    ]
)

_SET_FIELDS = {
    "weight": float,
    "reps": int,
    "seconds": int,
    "distance": float,
}


def parse_set_spec(spec: str) -> WorkoutSetDetail:
    """Parse ``weight=60,reps=10`` style set descriptions.

    Accepted keys: weight (kg), reps, seconds, distance (km).
    """
    values: dict = {}
    for part in spec.split(","):
        key, sep, raw = part.partition("=")
        key = key.strip().lower()
        if not sep or key not in _SET_FIELDS:
            raise click.BadParameter(
                f"'{part}' is not one of {', '.join(_SET_FIELDS)} as key=value"
            )
        try:
            values[key] = _SET_FIELDS[key](raw.strip())
        except ValueError:
            raise click.BadParameter(f"'{raw}' is not a valid number for {key}")

    try:
        return WorkoutSetDetail(
            weight=values.get("weight"),
            reps=values.get("reps"),
            duration_seconds=values.get("seconds"),
            distance=values.get("distance"),
        )
    except InvalidInputError as e:
        raise click.BadParameter(str(e))


def _parse_sets(ctx, param, value: tuple[str, ...]) -> list[WorkoutSetDetail]:
    return [parse_set_spec(spec) for spec in value]


def _is_number(text: str, cast) -> bool:
    if text == "":
        return True
    try:
        return cast(text) >= 0
    except ValueError:
        return False


async def _prompt_number(message: str, cast):
    answer = await questionary.text(
        message,
        validate=lambda text: _is_number(text, cast),
        style=custom_style,
    ).ask_async()
    return cast(answer) if answer else None


async def prompt_sets(exercise: Exercise) -> list[WorkoutSetDetail]:
    """Ask for set measurements until the user stops."""
    sets: list[WorkoutSetDetail] = []
    while True:
        click.echo(f"\nSet {len(sets) + 1}")
        if exercise.training_type == TrainingType.WEIGHTED:
            detail = WorkoutSetDetail(
                weight=await _prompt_number("Weight (kg):", float),
                reps=await _prompt_number("Reps:", int),
            )
        elif exercise.training_type == TrainingType.TIMED:
            detail = WorkoutSetDetail(
                duration_seconds=await _prompt_number("Seconds held:", int)
            )
        elif exercise.training_type == TrainingType.CARDIO:
            detail = WorkoutSetDetail(
                distance=await _prompt_number("Distance (km):", float),
                duration_seconds=await _prompt_number("Duration (seconds):", int),
            )
        else:
            detail = WorkoutSetDetail(reps=await _prompt_number("Reps:", int))
        sets.append(detail)

        more = await questionary.confirm(
            "Add another set?", default=True, style=custom_style
        ).ask_async()
        if not more:
            return sets


def _record_rows(records: list[WorkoutRecord]) -> list[list[str]]:
    return [
        [
            r.date.strftime("%Y-%m-%d %H:%M"),
            r.exercise_name,
            r.category.label,
            str(r.sets),
            f"{r.duration_minutes} min",
            f"+{r.xp_earned}",
        ]
        for r in records
    ]


_RECORD_HEADERS = ["Date", "Exercise", "Category", "Sets", "Time", "XP"]


@click.group()
def workout():
    """Log workouts and review your history."""
    pass


@workout.command("log")
@click.argument("exercise_name")
@click.option(
    "--set",
    "-s",
    "sets",
    multiple=True,
    callback=_parse_sets,
    help="One set as key=value pairs, e.g. 'weight=60,reps=10'. Repeat per set.",
)
@click.pass_context
@async_command
async def log(ctx: click.Context, exercise_name: str, sets: list[WorkoutSetDetail]):
    """Complete a workout for a catalog exercise.

    XP is 15 per set, multiplied by the exercise difficulty, and is added in
    full to every body part the exercise trains.

    Examples:

        fit-avatar workout log "Push-up" --set reps=12 --set reps=10

        fit-avatar workout log "Running" --set distance=5,seconds=1800

        # Prompt for each set interactively
        fit-avatar workout log "Plank"
    """
    exercise = find_exercise(exercise_name)
    if exercise is None:
        echo_error(f"Unknown exercise '{exercise_name}'")
        echo_info("Available: " + ", ".join(e.name for e in COMMON_EXERCISES))
        ctx.exit(1)

    repo = get_repository(ctx)

    if not sets:
        try:
            sets = await prompt_sets(exercise)
        except InvalidInputError as e:
            echo_error(str(e))
            ctx.exit(1)

    state = await repo.load()
    try:
        outcome = complete_workout(exercise, sets, state.history, state.stats)
    except InvalidInputError as e:
        echo_error(str(e))
        ctx.exit(1)

    await repo.save_workout(outcome.record, outcome.stats)

    echo_success(
        f"{exercise.name}: {outcome.record.sets} sets, "
        f"{outcome.record.duration_minutes} min, +{outcome.record.xp_earned} XP"
    )
    for part in sorted(exercise.trained_body_parts, key=lambda p: p.value):
        click.echo(
            f"  {part.label:<10} Lv {outcome.stats.level(part)} "
            f"({outcome.stats.points(part)} pts)"
        )


@workout.command("history")
@click.option("--limit", "-n", default=10, type=click.IntRange(min=0), help="Rows to show")
@click.pass_context
@async_command
async def history(ctx: click.Context, limit: int):
    """Show the most recent workouts, newest first."""
    repo = get_repository(ctx)
    state = await repo.load()

    records = state.history.recent(limit)
    if not records:
        echo_info("No workouts recorded yet.")
        return

    click.echo(format_table(_RECORD_HEADERS, _record_rows(records)))
    click.echo()
    click.echo(f"Showing {len(records)} of {len(state.history)} workouts")


@workout.command("today")
@click.pass_context
@async_command
async def today(ctx: click.Context):
    """Show workouts completed today."""
    repo = get_repository(ctx)
    state = await repo.load()

    records = StatisticsAggregator(state.history, datetime.now()).today_workouts()
    if not records:
        echo_info("No workouts yet today.")
        return

    click.echo(format_table(_RECORD_HEADERS, _record_rows(records)))
    click.echo()
    click.echo(f"Today: {len(records)} workouts, +{sum(r.xp_earned for r in records)} XP")
