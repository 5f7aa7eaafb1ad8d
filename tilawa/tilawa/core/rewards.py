"""
Jannah points and progress levels.

Points for a recitation:

    floor(accuracy * 10) + floor(abjad_value / 100) + (500 if accuracy >= 95 else 0)
"""

import math

from tilawa.exceptions import InvalidArgumentError
from tilawa.models import LevelBadge, RewardResult

POINTS_PER_ACCURACY = 10
ABJAD_DIVISOR = 100
PERFECTION_THRESHOLD = 95
PERFECTION_BONUS = 500

# Highest threshold first
LEVEL_BADGES: tuple[LevelBadge, ...] = (
    LevelBadge(level="Master Scholar", min_points=10000, color="#FFD700", icon="👑"),
    LevelBadge(level="Advanced Reciter", min_points=5000, color="#C0392B", icon="🌟"),
    LevelBadge(level="Intermediate", min_points=2000, color="#E67E22", icon="📿"),
    LevelBadge(level="Beginner", min_points=500, color="#27AE60", icon="🌱"),
    LevelBadge(level="Learner", min_points=0, color="#3498DB", icon="📚"),
)


def _check_non_negative(name: str, value: float) -> None:
    # NaN fails every comparison, so it is rejected here too
    if not value >= 0:
        raise InvalidArgumentError(name, value, "must be non-negative")


def calculate_reward(accuracy_percent: float, abjad_value: int) -> RewardResult:
    """
    Compute the points breakdown for one recitation.

    Args:
        accuracy_percent: Accuracy score (0-100)
        abjad_value: Abjad value of the recited text

    Returns:
        RewardResult with base points, Abjad bonus and perfection bonus

    Raises:
        InvalidArgumentError: If either argument is negative
    """
    _check_non_negative("accuracy_percent", accuracy_percent)
    _check_non_negative("abjad_value", abjad_value)

    return RewardResult(
        base_points=math.floor(accuracy_percent * POINTS_PER_ACCURACY),
        abjad_bonus=math.floor(abjad_value / ABJAD_DIVISOR),
        perfection_bonus=PERFECTION_BONUS if accuracy_percent >= PERFECTION_THRESHOLD else 0,
    )


def calculate_jannah_points(accuracy_percent: float, abjad_value: int) -> int:
    """
    Compute the points for one recitation.

    Examples:
        >>> calculate_jannah_points(100, 786)
        1507
        >>> calculate_jannah_points(85, 500)
        855
    """
    return calculate_reward(accuracy_percent, abjad_value).points


def level_badge(total_points: int) -> LevelBadge:
    """
    Get the progress level for a points total.

    Args:
        total_points: Accumulated Jannah points

    Returns:
        The highest badge whose threshold the total reaches
    """
    for badge in LEVEL_BADGES:
        if total_points >= badge.min_points:
            return badge
    # Negative totals never occur in practice; treat them as the entry level
    return LEVEL_BADGES[-1]
