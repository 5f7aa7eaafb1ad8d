"""
Scoring result models.

All of these are value objects: frozen, recomputed from their inputs,
and never persisted by the core itself.
"""

from enum import Enum

from pydantic import BaseModel, Field


class Severity(str, Enum):
    """Severity of a rule observation."""

    MEDIUM = "medium"


class ScoredText(BaseModel):
    """
    Result of comparing a transcript against an expected text.

    Attributes:
        expected: Reference text
        actual: Transcribed text
        accuracy_percent: Positional character accuracy (0-100)
        similarity: Indel similarity of the texts with diacritics, letter variants
            and whitespace removed (0.0-1.0).            Informational only; points are always derived from accuracy_percent.
    """

    expected: str
    actual: str
    accuracy_percent: int = Field(..., ge=0, le=100)
    similarity: float = Field(default=0.0, ge=0.0, le=1.0)

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"ScoredText({self.accuracy_percent}%)"


class RuleObservation(BaseModel):
    """A tajweed rule whose pattern is in the expected text but not in the transcript."""

    rule_name: str = Field(..., description="Rule name, e.g. 'Qalqalah'")
    description: str = Field(..., description="Short description of the rule")
    severity: Severity = Field(default=Severity.MEDIUM)

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.rule_name} ({self.severity.value})"


class RewardResult(BaseModel):
    """
    Jannah points for one recitation, with the parts they are made of.

    ``points`` is always ``base_points + abjad_bonus + perfection_bonus``.
    """

    base_points: int = Field(..., ge=0)
    abjad_bonus: int = Field(..., ge=0)
    perfection_bonus: int = Field(..., ge=0)

    model_config = {"frozen": True}

    @property
    def points(self) -> int:
        """Total points awarded."""
        return self.base_points + self.abjad_bonus + self.perfection_bonus

    @property
    def is_perfect(self) -> bool:
        """Whether the perfection bonus was earned."""
        return self.perfection_bonus > 0


class AbjadComparison(BaseModel):
    """Abjad value of the expected text next to the value of what was recited."""

    expected_value: int = Field(..., ge=0)
    actual_value: int = Field(..., ge=0)
    tolerance: int = Field(default=5, ge=0)

    model_config = {"frozen": True}

    @property
    def difference(self) -> int:
        """Absolute difference between the two values."""
        return abs(self.expected_value - self.actual_value)

    @property
    def is_match(self) -> bool:
        """Whether the values agree within the tolerance."""
        return self.difference <= self.tolerance


class LevelBadge(BaseModel):
    """Progress level shown for a points total."""

    level: str
    min_points: int = Field(..., ge=0)
    color: str
    icon: str

    model_config = {"frozen": True}


class RecitationAnalysis(BaseModel):
    """
    Everything computed for one transcript against one expected text.

    Attributes:
        scored: Accuracy result
        abjad_value: Abjad value of the transcript
        abjad: Expected vs recited Abjad comparison
        observations: Rule observations, in rule-table order
        reward: Jannah points breakdown
    """

    scored: ScoredText
    abjad_value: int = Field(..., ge=0)
    abjad: AbjadComparison
    observations: list[RuleObservation] = Field(default_factory=list)
    reward: RewardResult

    model_config = {"frozen": True}

    @property
    def accuracy(self) -> int:
        """Shortcut for ``scored.accuracy_percent``."""
        return self.scored.accuracy_percent

    @property
    def points(self) -> int:
        """Shortcut for ``reward.points``."""
        return self.reward.points

    def __str__(self) -> str:
        return (
            f"RecitationAnalysis(accuracy={self.accuracy}%, "
            f"abjad={self.abjad_value}, points={self.points}, "
            f"observations={len(self.observations)})"
        )
