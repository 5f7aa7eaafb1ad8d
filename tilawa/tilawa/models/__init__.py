"""
Pydantic data models for Tilawa library.

These models represent the core data structures used throughout the library:
- Ayah: A single verse used as the expected text
- ScoredText, RuleObservation, RewardResult: Scoring results
- RecitationAnalysis: All results for one transcript
- RecitationRecord, UserProgress: What the host persists
"""

from tilawa.models.ayah import Ayah
from tilawa.models.result import (
    AbjadComparison,
    LevelBadge,
    RecitationAnalysis,
    RewardResult,
    RuleObservation,
    ScoredText,
    Severity,
)
from tilawa.models.recitation import RecitationRecord, UserProgress

__all__ = [
    "Ayah",
    "AbjadComparison",
    "LevelBadge",
    "RecitationAnalysis",
    "RewardResult",
    "RuleObservation",
    "ScoredText",
    "Severity",
    "RecitationRecord",
    "UserProgress",
]
