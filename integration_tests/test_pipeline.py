"""End-to-end tests: log through the CLI, read back through the API.

Both surfaces share one database, so everything written by one must be visible
to the other with identical numbers.
"""

import json

from click.testing import CliRunner
from fastapi.testclient import TestClient

from fit_avatar.cli import main
from fit_avatar.config import get_settings
from fit_avatar.web import create_app

TRAINING_WEEK = [
    ("Squat", ["reps=15", "reps=12", "reps=10"]),
    ("Pull-up", ["reps=6", "reps=5"]),
    ("Plank", ["seconds=90", "seconds=60"]),
    ("Running", ["distance=5,seconds=1650"]),
    ("Dumbbell Bench Press", ["weight=22.5,reps=10", "weight=22.5,reps=8"]),
]


def run_cli(data_dir, *args):
    result = CliRunner().invoke(main, ["--data-dir", str(data_dir), *args])
    assert result.exit_code == 0, result.output
    return result


class TestPipelineIntegration:
    """Integration tests for the full logging flow."""

    def test_cli_writes_api_reads(self, data_dir):
        run_cli(data_dir, "init")
        for name, sets in TRAINING_WEEK:
            args = ["workout", "log", name]
            for spec in sets:
                args += ["--set", spec]
            run_cli(data_dir, *args)

        db_path = data_dir / get_settings().db_filename
        with TestClient(create_app(db_path)) as client:
            avatar = client.get("/avatar").json()
            parts = {p["part"]: p["points"] for p in avatar["parts"]}

            # Squat 45 + Running 15
            assert parts["legs"] == 60
            # Plank 30 + Running 15
            assert parts["abs"] == 45
            # Pull-up 90 + bench press 60
            assert parts["arms"] == 150
            assert parts["back"] == 90
            assert parts["shoulders"] == 60
            assert avatar["overall_level"] == (60 + 45 + 150 + 90 + 60) // 5

            stats = client.get("/stats", params={"period": "year"}).json()
            assert stats["workout_count"] == 5
            assert stats["total_xp"] == 45 + 90 + 30 + 15 + 60
            # Squat 6, pull-up 4, plank 1 + 1, running 27, bench 4
            assert stats["total_minutes"] == 6 + 4 + 2 + 27 + 4
            assert stats["current_level"] == 2

            workouts = client.get("/workouts", params={"limit": 10}).json()["workouts"]
            assert [w["exercise_name"] for w in workouts] == [
                name for name, _ in reversed(TRAINING_WEEK)
            ]

    def test_api_export_cli_import(self, data_dir, tmp_path):
        run_cli(data_dir, "init")
        db_path = data_dir / get_settings().db_filename

        with TestClient(create_app(db_path)) as client:
            client.post(
                "/workouts",
                json={"exercise_name": "Burpee", "sets": [{"reps": 12}] * 3},
            )
            exported = client.get("/export").json()

        backup = tmp_path / "backup.json"
        backup.write_text(json.dumps(exported))

        run_cli(data_dir, "data", "clear", "--yes")
        result = run_cli(data_dir, "data", "import", str(backup), "--yes")
        assert "Imported 1 workouts" in result.output

        history = run_cli(data_dir, "workout", "history").output
        assert "Burpee" in history
        assert "+135" in history
