"""Data models for training calculations."""

from dataclasses import dataclass
from enum import Enum


UNKNOWN_TRAINING_MESSAGE = "unknown training type"

REPORT_TEMPLATE = (
    "Training type: {training_type}\n"
    "Duration: {duration:.2f} h.\n"
    "Distance: {distance:.2f} km.\n"
    "Speed: {speed:.2f} km/h\n"
    "Calories burned: {calories:.2f}\n"
)


class ActivityType(Enum):
    """Enumeration of supported training types."""

    RUNNING = "Running"
    WALKING = "Walking"
    SWIMMING = "Swimming"
    UNKNOWN = "unknown"

    @classmethod
    def from_label(cls, label: str) -> "ActivityType":
        """Convert a training label to internal type. Matching is case-sensitive."""
        mapping = {
            "Running": cls.RUNNING,
            "Walking": cls.WALKING,
            "Swimming": cls.SWIMMING,
        }
        return mapping.get(label, cls.UNKNOWN)


@dataclass(frozen=True)
class TrainingInfo:
    """Calculated statistics for a single training session."""

    training_type: str
    duration: float
    distance: float
    speed: float
    calories: float

    def message(self) -> str:
        """Render the multi-line training summary."""
        return REPORT_TEMPLATE.format(
            training_type=self.training_type,
            duration=self.duration,
            distance=self.distance,
            speed=self.speed,
            calories=self.calories,
        )
