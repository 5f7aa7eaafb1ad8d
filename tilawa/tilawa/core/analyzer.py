"""
Recitation analysis.

Runs the four scoring steps over one transcript in the order the host
application uses them: accuracy, Abjad value, rule observations, points.
"""

import logging

from tilawa.core.abjad import DEFAULT_TOLERANCE, abjad_value, compare_abjad
from tilawa.core.matcher import is_near_miss
from tilawa.core.rewards import calculate_reward
from tilawa.core.scorer import score_text
from tilawa.core.tajweed import detect_rule_observations
from tilawa.models import RecitationAnalysis

logger = logging.getLogger(__name__)


def analyze_recitation(
    expected: str | None,
    transcript: str | None,
    abjad_tolerance: int = DEFAULT_TOLERANCE,
) -> RecitationAnalysis:
    """
    Score a transcript against the expected verse text.

    The Abjad value and points are computed from the transcript, not the
    expected text; the expected text's Abjad value is kept for comparison.

    Args:
        expected: Reference verse text
        transcript: Text returned by the transcription service
        abjad_tolerance: Allowed Abjad difference for ``analysis.abjad.is_match``

    Returns:
        RecitationAnalysis with all results

    Example:
        >>> analysis = analyze_recitation("بسم الله الرحمن الرحيم", "بسم الله الرحمن الرحيم")
        >>> analysis.accuracy, analysis.abjad_value, analysis.points
        (100, 786, 1507)
    """
    expected = expected or ""
    transcript = transcript or ""

    scored = score_text(expected, transcript)
    value = abjad_value(transcript)
    observations = detect_rule_observations(transcript, expected)
    reward = calculate_reward(scored.accuracy_percent, value)

    if expected and transcript and is_near_miss(scored.accuracy_percent, scored.similarity):
        logger.debug(
            "Low positional accuracy %d%% but loose similarity %.2f; likely misaligned",
            scored.accuracy_percent,
            scored.similarity,
        )

    logger.debug(
        "Analyzed recitation: accuracy=%d%% abjad=%d points=%d observations=%d",
        scored.accuracy_percent,
        value,
        reward.points,
        len(observations),
    )

    return RecitationAnalysis(
        scored=scored,
        abjad_value=value,
        abjad=compare_abjad(expected, transcript, tolerance=abjad_tolerance),
        observations=observations,
        reward=reward,
    )
