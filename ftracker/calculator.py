"""
Training calculator.

Provides formulas for distance, mean speed and calories burned
during running, walking and swimming, and builds the text summary
of a training session.
"""

import math
import logging
from typing import Callable, Dict, Optional, Tuple

from .config import UNITS, RUNNING, WALKING, SWIMMING
from .models import ActivityType, TrainingInfo, UNKNOWN_TRAINING_MESSAGE


logger = logging.getLogger(__name__)


# =============================================================================
# DISTANCE AND SPEED
# =============================================================================


def distance(action: int) -> float:
    """
    Distance in kilometers covered during the training.

    Parameters:
        action: Number of actions (steps when walking or running,
            strokes when swimming).
    """
    return action * UNITS.step_length_m / UNITS.m_in_km


def mean_speed(action: int, duration: float) -> float:
    """
    Mean speed in km/h. Zero duration gives zero speed.

    Parameters:
        action: Number of actions.
        duration: Training duration in hours.
    """
    if duration == 0:
        return 0.0
    return distance(action) / duration


def swimming_mean_speed(length_pool: int, count_pool: int, duration: float) -> float:
    """
    Mean swimming speed in km/h, based on pool length and laps.

    Parameters:
        length_pool: Pool length in meters.
        count_pool: Number of laps swum.
        duration: Training duration in hours.
    """
    if duration == 0:
        return 0.0
    return length_pool * count_pool / UNITS.m_in_km / duration


# =============================================================================
# CALORIES
# =============================================================================


def running_spent_calories(action: int, weight: float, duration: float) -> float:
    """Calories burned while running."""
    speed = mean_speed(action, duration)
    return (
        (RUNNING.speed_multiplier * speed * RUNNING.calorie_factor)
        * weight
        / UNITS.m_in_km
        * duration
        * UNITS.min_in_h
    )


def _divide(numerator: float, denominator: float) -> float:
    """Float division that yields inf or nan for a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def walking_spent_calories(
    action: int, duration: float, weight: float, height: float
) -> float:
    """
    Calories burned while walking.

    Height is in centimeters and is not checked: a zero height
    gives inf, or nan when the speed is also zero.
    """
    speed = mean_speed(action, duration) * UNITS.kmh_in_msec  # m/s
    return (
        (
            WALKING.weight_multiplier * weight
            + (_divide(speed**2, height) * UNITS.cm_in_m)
            * WALKING.height_multiplier
            * weight
        )
        * duration
        * UNITS.min_in_h
    )


def swimming_spent_calories(
    length_pool: int, count_pool: int, duration: float, weight: float
) -> float:
    """Calories burned while swimming."""
    speed = swimming_mean_speed(length_pool, count_pool, duration)
    return (
        (speed + SWIMMING.calorie_factor)
        * SWIMMING.weight_multiplier
        * weight
        * duration
    )


# =============================================================================
# TRAINING SUMMARY
# =============================================================================

# (action, duration, weight, height, length_pool, count_pool) -> (speed, calories)
SpeedAndCalories = Callable[[int, float, float, float, int, int], Tuple[float, float]]


def _running(
    action: int,
    duration: float,
    weight: float,
    height: float,
    length_pool: int,
    count_pool: int,
) -> Tuple[float, float]:
    return (
        mean_speed(action, duration),
        running_spent_calories(action, weight, duration),
    )


def _walking(
    action: int,
    duration: float,
    weight: float,
    height: float,
    length_pool: int,
    count_pool: int,
) -> Tuple[float, float]:
    return (
        mean_speed(action, duration),
        walking_spent_calories(action, duration, weight, height),
    )


def _swimming(
    action: int,
    duration: float,
    weight: float,
    height: float,
    length_pool: int,
    count_pool: int,
) -> Tuple[float, float]:
    return (
        swimming_mean_speed(length_pool, count_pool, duration),
        swimming_spent_calories(length_pool, count_pool, duration, weight),
    )


TRAINING_FORMULAS: Dict[ActivityType, SpeedAndCalories] = {
    ActivityType.RUNNING: _running,
    ActivityType.WALKING: _walking,
    ActivityType.SWIMMING: _swimming,
}


def training_info(
    action: int,
    training_type: str,
    duration: float,
    weight: float,
    height: float,
    length_pool: int,
    count_pool: int,
) -> Optional[TrainingInfo]:
    """
    Calculate training statistics for the given training type.

    Parameters:
        action: Number of actions (steps or strokes).
        training_type: Training label: "Running", "Walking" or "Swimming".
        duration: Training duration in hours.
        weight: Body weight in kilograms.
        height: Height in centimeters, used for walking.
        length_pool: Pool length in meters, used for swimming.
        count_pool: Number of pool laps, used for swimming.

    Returns:
        Training statistics, or None if the training type is unknown.
    """
    formula = TRAINING_FORMULAS.get(ActivityType.from_label(training_type))
    if formula is None:
        logger.warning(f"Unknown training type: {training_type!r}")
        return None

    speed, calories = formula(
        action, duration, weight, height, length_pool, count_pool
    )
    info = TrainingInfo(
        training_type=training_type,
        duration=duration,
        distance=distance(action),
        speed=speed,
        calories=calories,
    )
    logger.debug(f"Calculated training info: {info}")
    return info


def show_training_info(
    action: int,
    training_type: str,
    duration: float,
    weight: float,
    height: float,
    length_pool: int,
    count_pool: int,
) -> str:
    """
    Build the text summary of a training session.

    Returns a fixed message instead of raising when the training
    type is unknown.
    """
    info = training_info(
        action, training_type, duration, weight, height, length_pool, count_pool
    )
    if info is None:
        return UNKNOWN_TRAINING_MESSAGE
    return info.message()
