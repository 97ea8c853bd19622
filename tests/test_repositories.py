"""Tests for the SQLite repositories."""

import asyncio
import json
from datetime import datetime

import aiosqlite
import pytest

from fit_avatar.db import AppStateRepository, init_db
from fit_avatar.models.avatar import AvatarStats, BodyPart
from fit_avatar.models.exercises import find_exercise
from fit_avatar.models.user_settings import DEFAULT_USER_NAME, ExportData, UserSettings
from fit_avatar.models.workout import WorkoutSetDetail
from fit_avatar.services.workout_session import complete_workout


@pytest.fixture
def repo(temp_db_path):
    asyncio.run(init_db(temp_db_path))
    return AppStateRepository(temp_db_path)


async def _execute(db_path, sql, params=()):
    async with aiosqlite.connect(db_path) as db:
        await db.execute(sql, params)
        await db.commit()


def _log(repo, name, when):
    state = asyncio.run(repo.load())
    outcome = complete_workout(
        find_exercise(name), [WorkoutSetDetail(reps=10)], state.history, state.stats, when
    )
    asyncio.run(repo.save_workout(outcome.record, outcome.stats))
    return outcome


class TestAppStateRepository:
    """Tests for loading and saving the combined state."""

    def test_empty_database_gives_defaults(self, repo):
        state = asyncio.run(repo.load())

        assert len(state.history) == 0
        assert state.stats == AvatarStats()
        assert state.settings == UserSettings()

    def test_save_workout_persists_record_and_stats(self, repo):
        outcome = _log(repo, "Push-up", datetime(2024, 5, 15, 9, 0))
        state = asyncio.run(repo.load())

        assert state.history.workouts == (outcome.record,)
        assert state.stats.points(BodyPart.ARMS) == 15
        assert state.stats.points(BodyPart.SHOULDERS) == 15

    def test_history_newest_first(self, repo):
        _log(repo, "Squat", datetime(2024, 5, 15, 9, 0))
        _log(repo, "Plank", datetime(2024, 5, 14, 9, 0))
        _log(repo, "Crunch", datetime(2024, 5, 16, 9, 0))

        history = asyncio.run(repo.workouts.list_all())

        # Insertion order, not date order
        assert [w.exercise_name for w in history] == ["Crunch", "Plank", "Squat"]
        assert asyncio.run(repo.workouts.count()) == 3

    def test_save_import_replaces_history(self, repo, sample_history):
        _log(repo, "Squat", datetime(2024, 5, 15, 9, 0))
        data = ExportData(
            user_name="Sam", workout_history=sample_history, weekly_goal=4, monthly_goal=900
        )

        asyncio.run(repo.save_import(data, data.apply_to(UserSettings())))
        state = asyncio.run(repo.load())

        assert state.history == sample_history
        assert state.settings.user_name == "Sam"
        assert state.settings.weekly_workout_goal == 4

    def test_clear_all(self, repo):
        _log(repo, "Squat", datetime(2024, 5, 15, 9, 0))
        asyncio.run(repo.settings.save(UserSettings(user_name="Sam")))

        asyncio.run(repo.clear_all(UserSettings()))
        state = asyncio.run(repo.load())

        assert len(state.history) == 0
        assert state.settings.user_name == DEFAULT_USER_NAME
        # Avatar stats are not part of clearing
        assert state.stats.legs == 15


class TestCorruptData:
    """Unreadable stored data falls back to defaults."""

    def test_corrupt_stats_json(self, repo, temp_db_path):
        asyncio.run(
            _execute(
                temp_db_path,
                "INSERT INTO app_state (key, value) VALUES ('avatar_stats', '{broken')",
            )
        )
        assert asyncio.run(repo.avatar.load()) == AvatarStats()

    def test_invalid_stats_values(self, repo, temp_db_path):
        asyncio.run(
            _execute(
                temp_db_path,
                "INSERT INTO app_state (key, value) VALUES ('avatar_stats', ?)",
                (json.dumps({"arms": -4}),),
            )
        )
        assert asyncio.run(repo.avatar.load()) == AvatarStats()

    def test_corrupt_settings(self, repo, temp_db_path):
        asyncio.run(
            _execute(
                temp_db_path,
                "INSERT INTO app_state (key, value) VALUES ('user_settings', '[1, 2]')",
            )
        )
        assert asyncio.run(repo.settings.load()) == UserSettings()

    def test_unreadable_workout_row_skipped(self, repo, temp_db_path):
        _log(repo, "Squat", datetime(2024, 5, 15, 9, 0))
        asyncio.run(
            _execute(
                temp_db_path,
                """
                INSERT INTO workouts
                (id, exercise_name, category, sets, duration_minutes, xp_earned,
                 performed_at, details)
                VALUES ('bad', 'Ghost', 'nowhere', 1, 2, 15, 'not a date', '[]')
                """,
            )
        )

        history = asyncio.run(repo.workouts.list_all())
        assert [w.exercise_name for w in history] == ["Squat"]

    def test_stats_reset(self, repo):
        asyncio.run(repo.avatar.save(AvatarStats(arms=300)))
        asyncio.run(repo.avatar.reset())

        assert asyncio.run(repo.avatar.load()) == AvatarStats()


class TestWorkoutRepository:
    """Tests for the history table on its own."""

    def test_prepend_and_count(self, repo, make_record, now):
        older = make_record(datetime(2024, 5, 1), name="Squat")
        newer = make_record(now, name="Plank")

        asyncio.run(repo.workouts.prepend(older))
        asyncio.run(repo.workouts.prepend(newer))

        history = asyncio.run(repo.workouts.list_all())
        assert history.workouts == (newer, older)
        assert asyncio.run(repo.workouts.count()) == 2

    def test_replace_all_keeps_order(self, repo, sample_history):
        asyncio.run(repo.workouts.replace_all(sample_history))
        assert asyncio.run(repo.workouts.list_all()) == sample_history

        asyncio.run(repo.workouts.replace_all(sample_history.clear()))
        assert asyncio.run(repo.workouts.count()) == 0

    def test_clear(self, repo, sample_history):
        asyncio.run(repo.workouts.replace_all(sample_history))
        asyncio.run(repo.workouts.clear())

        assert len(asyncio.run(repo.workouts.list_all())) == 0

    def test_import_with_repeated_ids(self, repo, make_record, now):
        record = make_record(now, name="Squat").to_dict()
        data = ExportData.from_dict(
            {
                "userName": "Sam",
                "workoutHistory": [record, dict(record)],
                "weeklyGoal": 3,
                "monthlyGoal": 1000,
            }
        )

        asyncio.run(repo.save_import(data, data.apply_to(UserSettings())))

        assert asyncio.run(repo.workouts.count()) == 2
