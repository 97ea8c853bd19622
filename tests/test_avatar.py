"""Tests for avatar stats and leveling."""

import pytest

from fit_avatar.errors import DeserializationError, InvalidInputError
from fit_avatar.models.avatar import AvatarStats, BodyPart


class TestAddXp:
    """Tests for distributing XP to body parts."""

    def test_full_amount_goes_to_each_part(self):
        """XP is not split between the trained parts."""
        stats = AvatarStats().add_xp(50, [BodyPart.ARMS, BodyPart.SHOULDERS])

        assert stats.arms == 50
        assert stats.shoulders == 50
        assert stats.abs == 0
        assert stats.back == 0
        assert stats.legs == 0

    def test_returns_new_snapshot(self):
        original = AvatarStats()
        updated = original.add_xp(10, [BodyPart.LEGS])

        assert original.legs == 0
        assert updated.legs == 10

    def test_duplicate_parts_applied_once(self):
        stats = AvatarStats().add_xp(10, [BodyPart.ARMS, BodyPart.ARMS])
        assert stats.arms == 10

    def test_empty_parts_is_noop(self):
        stats = AvatarStats(arms=5)
        assert stats.add_xp(100, []) == stats

    def test_zero_amount(self):
        stats = AvatarStats(back=7).add_xp(0, [BodyPart.BACK])
        assert stats.back == 7

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidInputError):
            AvatarStats().add_xp(-1, [BodyPart.ARMS])


class TestLevels:
    """Tests for per-part and overall levels."""

    def test_fresh_stats(self):
        stats = AvatarStats()
        for part in BodyPart:
            assert stats.level(part) == 1
            assert stats.xp_to_next_level(part) == 100
            assert stats.level_progress(part) == 0.0
        assert stats.overall_level == 0

    def test_level_boundaries(self):
        stats = AvatarStats(arms=99, legs=100, back=250)

        assert stats.level(BodyPart.ARMS) == 1
        assert stats.level(BodyPart.LEGS) == 2
        assert stats.level(BodyPart.BACK) == 3

    def test_xp_to_next_and_progress(self):
        stats = AvatarStats(back=250)

        assert stats.xp_to_next_level(BodyPart.BACK) == 50
        assert stats.level_progress(BodyPart.BACK) == pytest.approx(0.5)

    def test_exact_level_threshold_starts_at_zero_progress(self):
        stats = AvatarStats(arms=200)

        assert stats.xp_to_next_level(BodyPart.ARMS) == 100
        assert stats.level_progress(BodyPart.ARMS) == 0.0

    def test_overall_level_is_mean_of_raw_points(self):
        """250 points in one part gives an overall level of 50."""
        assert AvatarStats(arms=250).overall_level == 50
        assert AvatarStats(arms=1, legs=3).overall_level == 0

    def test_total_points(self):
        assert AvatarStats(arms=1, shoulders=2, abs=3, back=4, legs=5).total_points == 15


class TestRadarData:
    """Tests for radar chart normalization."""

    def test_fresh_stats_all_at_floor(self):
        data = AvatarStats().radar_data()

        assert [p.label for p in data] == ["Arms", "Shoulders", "Abs", "Back", "Legs"]
        assert all(p.value == 0.05 for p in data)

    def test_normalized_by_max_part(self):
        data = {p.part: p.value for p in AvatarStats(arms=200, legs=50).radar_data()}

        assert data[BodyPart.ARMS] == pytest.approx(1.0)
        assert data[BodyPart.LEGS] == pytest.approx(0.25)
        assert data[BodyPart.ABS] == 0.05

    def test_small_totals_use_minimum_scale(self):
        data = {p.part: p.value for p in AvatarStats(arms=40, legs=3).radar_data()}

        assert data[BodyPart.ARMS] == pytest.approx(0.4)
        # 3 / 100 is below the display floor
        assert data[BodyPart.LEGS] == 0.05

    def test_values_within_bounds(self):
        stats = AvatarStats(arms=1000, shoulders=1, abs=0, back=500, legs=999)
        for point in stats.radar_data():
            assert 0.05 <= point.value <= 1.0


class TestSerialization:
    """Tests for storing avatar stats."""

    def test_to_dict(self):
        assert AvatarStats(arms=3).to_dict() == {
            "arms": 3,
            "shoulders": 0,
            "abs": 0,
            "back": 0,
            "legs": 0,
        }

    def test_from_dict_defaults_missing_parts(self):
        stats = AvatarStats.from_dict({"legs": 120})

        assert stats.legs == 120
        assert stats.arms == 0

    @pytest.mark.parametrize("bad", [-5, "10", 1.5, True, None])
    def test_from_dict_rejects_bad_values(self, bad):
        with pytest.raises(DeserializationError):
            AvatarStats.from_dict({"arms": bad})
