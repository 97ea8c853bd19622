"""Exercise catalog commands."""

import click

from ..db import WorkoutRepository, get_db_path
from ..models.exercises import (
    COMMON_EXERCISES,
    DifficultyLevel,
    EquipmentType,
    Exercise,
    Location,
    MainCategory,
    MuscleGroup,
    SubCategory,
    find_exercise,
)
from ..services.exercise_query import ExerciseFilter, ExerciseQueryEngine, SortOrder
from ..services.workout_session import last_performed_by_exercise
from .base import async_command, echo_error, echo_info, format_table, get_data_dir


def _choice(enum_cls) -> click.Choice:
    return click.Choice([member.value for member in enum_cls])


def _rows(exercises: list[Exercise]) -> list[list[str]]:
    return [
        [
            e.name,
            e.sub_category.label,
            e.difficulty.label,
            e.equipment.value,
            e.location.value,
            e.last_performed.strftime("%Y-%m-%d") if e.last_performed else "-",
        ]
        for e in exercises
    ]


_HEADERS = ["Name", "Category", "Difficulty", "Equipment", "Location", "Last done"]


@click.group()
def exercises():
    """Browse the exercise catalog."""
    pass


@exercises.command("list")
@click.option("--main", "main_category", type=_choice(MainCategory), help="Main category")
@click.option("--sub", "sub_category", type=_choice(SubCategory), help="Sub-category")
@click.option("--difficulty", "-d", multiple=True, type=_choice(DifficultyLevel))
@click.option("--muscle", "-m", multiple=True, type=_choice(MuscleGroup))
@click.option("--equipment", "-e", multiple=True, type=_choice(EquipmentType))
@click.option("--location", "-l", multiple=True, type=_choice(Location))
@click.option("--search", "-q", default="", help="Match name or target muscle")
@click.option(
    "--sort",
    "sort_order",
    type=_choice(SortOrder),
    default=SortOrder.NAME_ASCENDING.value,
    help="Result ordering",
)
@click.option("--grouped", is_flag=True, help="Group results by sub-category")
@click.pass_context
@async_command
async def list_exercises(
    ctx: click.Context,
    main_category: str | None,
    sub_category: str | None,
    difficulty: tuple[str, ...],
    muscle: tuple[str, ...],
    equipment: tuple[str, ...],
    location: tuple[str, ...],
    search: str,
    sort_order: str,
    grouped: bool,
):
    """List catalog exercises matching every given option.

    Options that accept several values match any of them.

    Examples:

        fit-avatar exercises list --main cardio --equipment bodyweight

        fit-avatar exercises list -l home -d beginner --sort name_desc

        fit-avatar exercises list --search glutes --grouped
    """
    exercise_filter = ExerciseFilter(
        main_category=MainCategory(main_category) if main_category else None,
        sub_category=SubCategory(sub_category) if sub_category else None,
        difficulty_levels=frozenset(DifficultyLevel(d) for d in difficulty),
        target_muscles=frozenset(MuscleGroup(m) for m in muscle),
        equipment=frozenset(EquipmentType(e) for e in equipment),
        locations=frozenset(Location(loc) for loc in location),
        search_text=search.strip(),
    )
    order = SortOrder(sort_order)

    engine = ExerciseQueryEngine(COMMON_EXERCISES)
    db_path = get_db_path(get_data_dir(ctx))
    if db_path.exists():
        history = await WorkoutRepository(db_path).list_all()
        engine = engine.with_last_performed(last_performed_by_exercise(history))

    if grouped:
        groups = engine.grouped_by_sub_category(exercise_filter, order)
        if not groups:
            echo_info("No exercises match the filter.")
            return
        for sub, entries in groups:
            click.echo()
            click.echo(click.style(f"{sub.label} ({len(entries)})", bold=True))
            click.echo(format_table(_HEADERS, _rows(entries)))
        return

    results = engine.apply(exercise_filter, order)
    if not results:
        echo_info("No exercises match the filter.")
        return

    click.echo(format_table(_HEADERS, _rows(results)))
    click.echo()
    suffix = " (filtered)" if exercise_filter.is_active else ""
    click.echo(f"{len(results)} of {len(engine.catalog)} exercises{suffix}")


@exercises.command("show")
@click.argument("name")
@click.pass_context
def show(ctx: click.Context, name: str):
    """Show details and instructions for one exercise."""
    exercise = find_exercise(name)
    if exercise is None:
        echo_error(f"Unknown exercise '{name}'")
        ctx.exit(1)

    click.echo(click.style(exercise.name, bold=True))
    click.echo(f"  Category:   {exercise.main_category.label} / {exercise.sub_category.label}")
    click.echo(f"  Difficulty: {exercise.difficulty.label}")
    click.echo(f"  Equipment:  {exercise.equipment.value}")
    click.echo(f"  Location:   {exercise.location.value}")
    click.echo(
        "  Muscles:    "
        + ", ".join(sorted(m.label for m in exercise.target_muscles))
    )
    click.echo(
        "  Trains:     "
        + ", ".join(p.label for p in sorted(exercise.trained_body_parts, key=lambda p: p.value))
    )
    click.echo()
    click.echo(exercise.instructions)
