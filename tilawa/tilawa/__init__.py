"""
Tilawa: scoring for Quran recitation practice.

Score a transcribed recitation against the expected verse, compute its
Abjad value, flag missed tajweed patterns and award Jannah points.

Quick start:
    from tilawa import analyze_recitation

    analysis = analyze_recitation("بسم الله الرحمن الرحيم", transcript)
    print(analysis.accuracy, analysis.points)
"""

__version__ = "0.1.0"

from tilawa.config import TilawaSettings, configure, configure_logging, get_settings
from tilawa.core import (
    abjad_value,
    analyze_recitation,
    calculate_jannah_points,
    detect_rule_observations,
    level_badge,
    score,
)
from tilawa.data import VerseLookup
from tilawa.exceptions import (
    InvalidArgumentError,
    TilawaError,
    VerseDataError,
    VerseNotFoundError,
)
from tilawa.models import (
    Ayah,
    RecitationAnalysis,
    RecitationRecord,
    RewardResult,
    RuleObservation,
    ScoredText,
    Severity,
    UserProgress,
)
from tilawa.session import InMemoryRecitationStore, RecitationSession

__all__ = [
    "__version__",
    # Configuration
    "TilawaSettings",
    "configure",
    "configure_logging",
    "get_settings",
    # Scoring
    "abjad_value",
    "analyze_recitation",
    "calculate_jannah_points",
    "detect_rule_observations",
    "level_badge",
    "score",
    # Data
    "VerseLookup",
    # Errors
    "TilawaError",
    "InvalidArgumentError",
    "VerseDataError",
    "VerseNotFoundError",
    # Models
    "Ayah",
    "RecitationAnalysis",
    "RecitationRecord",
    "RewardResult",
    "RuleObservation",
    "ScoredText",
    "Severity",
    "UserProgress",
    # Session
    "InMemoryRecitationStore",
    "RecitationSession",
]
