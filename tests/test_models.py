"""
Tests for training models.

Tests label mapping and report rendering.
"""

import pytest

from ftracker.models import (
    ActivityType,
    TrainingInfo,
)


class TestActivityType:
    """Tests for ActivityType enum."""

    def test_from_label_known(self):
        """Test mapping recognized training labels."""
        assert ActivityType.from_label("Running") == ActivityType.RUNNING
        assert ActivityType.from_label("Walking") == ActivityType.WALKING
        assert ActivityType.from_label("Swimming") == ActivityType.SWIMMING

    def test_from_label_case_sensitive(self):
        """Test labels must match exactly."""
        assert ActivityType.from_label("running") == ActivityType.UNKNOWN
        assert ActivityType.from_label("SWIMMING") == ActivityType.UNKNOWN
        assert ActivityType.from_label(" Walking") == ActivityType.UNKNOWN

    def test_from_label_unknown(self):
        """Test unknown labels map to UNKNOWN."""
        assert ActivityType.from_label("Dancing") == ActivityType.UNKNOWN
        assert ActivityType.from_label("") == ActivityType.UNKNOWN
        assert ActivityType.from_label("unknown") == ActivityType.UNKNOWN


class TestTrainingInfo:
    """Tests for TrainingInfo model."""

    def test_message_format(self):
        """Test message renders every field with two decimals."""
        info = TrainingInfo(
            training_type="Running",
            duration=1.5,
            distance=3.25,
            speed=2.1666,
            calories=150.0,
        )

        assert info.message() == (
            "Training type: Running\n"
            "Duration: 1.50 h.\n"
            "Distance: 3.25 km.\n"
            "Speed: 2.17 km/h\n"
            "Calories burned: 150.00\n"
        )

    def test_message_zero_values(self):
        """Test message with all-zero metrics."""
        info = TrainingInfo(
            training_type="Walking", duration=0, distance=0, speed=0, calories=0
        )

        assert "Speed: 0.00 km/h\n" in info.message()
        assert info.message().endswith("Calories burned: 0.00\n")

    def test_frozen(self):
        """Test training info cannot be modified."""
        info = TrainingInfo(
            training_type="Swimming", duration=1, distance=1, speed=1, calories=1
        )

        with pytest.raises(AttributeError):
            info.calories = 2
