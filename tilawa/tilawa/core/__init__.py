"""
Core modules for Tilawa library.

This package contains the scoring logic for a recited verse:
- Positional accuracy of a transcript against the expected text
- Abjad numeral value of a text
- Simplified tajweed rule observations
- Jannah points and progress levels

Primary API:
    from tilawa.core import analyze_recitation

    analysis = analyze_recitation(expected_text, transcript)
    print(analysis.accuracy, analysis.abjad_value, analysis.points)
"""

# Primary API - what most users need
from tilawa.core.analyzer import analyze_recitation

# Individual scoring steps
from tilawa.core.abjad import ABJAD_MAP, abjad_value, compare_abjad
from tilawa.core.scorer import score, score_text
from tilawa.core.tajweed import TAJWEED_RULES, TajweedRule, detect_rule_observations
from tilawa.core.rewards import (
    calculate_jannah_points,
    calculate_reward,
    level_badge,
)

# Text utilities
from tilawa.core.arabic import normalize_arabic, strip_whitespace
from tilawa.core.matcher import is_near_miss, loose_similarity

__all__ = [
    # Primary API
    "analyze_recitation",
    # Scoring steps
    "ABJAD_MAP",
    "abjad_value",
    "compare_abjad",
    "score",
    "score_text",
    "TAJWEED_RULES",
    "TajweedRule",
    "detect_rule_observations",
    "calculate_jannah_points",
    "calculate_reward",
    "level_badge",
    # Text utilities
    "normalize_arabic",
    "strip_whitespace",
    "is_near_miss",
    "loose_similarity",
]
