"""Tests for the session load calculator."""

import pytest

from loadtracker.metrics.load import compute_training_load, compute_volume_load


class TestTrainingLoad:
    @pytest.mark.parametrize(
        "rpe, duration, expected",
        [
            (8, 90, 720),
            (6, 120, 720),
            (7, 105, 735),
            (1, 1, 1),
            (10, 0, 0),
            (0, 60, 0),
        ],
    )
    def test_is_rpe_times_duration(self, rpe, duration, expected):
        assert compute_training_load(rpe, duration) == expected

    def test_monotonic_in_both_factors(self):
        base = compute_training_load(5, 60)
        assert compute_training_load(6, 60) > base
        assert compute_training_load(5, 61) > base


class TestVolumeLoad:
    @pytest.mark.parametrize(
        "sets, reps, weight, expected",
        [
            (4, 5, 120, 2400),
            (5, 3, 85, 1275),
            (3, 8, 75, 1800),
            (3, 8, 0, 0),
        ],
    )
    def test_is_sets_reps_weight_product(self, sets, reps, weight, expected):
        assert compute_volume_load(sets, reps, weight) == expected

    def test_fractional_weight(self):
        assert compute_volume_load(3, 10, 22.5) == pytest.approx(675.0)
