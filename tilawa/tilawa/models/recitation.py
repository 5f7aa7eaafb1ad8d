"""
Recitation record and user progress models.

These are the shapes a storage collaborator persists; the library
builds them but never stores them itself.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

from tilawa.models.result import RecitationAnalysis, RuleObservation


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RecitationRecord(BaseModel):
    """
    One scored recitation attempt by a user.

    Attributes:
        user_id: Identifier of the reciting user
        surah: Surah number (1-114)
        ayah: Ayah number within the surah
        transcript: Text returned by the transcription service
        expected_text: Reference text the transcript was scored against
        accuracy: Positional accuracy (0-100)
        abjad_value: Abjad value of the transcript
        jannah_points: Points awarded
        observations: Tajweed rule observations
        created_at: When the attempt was scored (UTC)
    """

    user_id: str = Field(..., min_length=1)
    surah: int = Field(..., ge=1, le=114)
    ayah: int = Field(..., ge=1)
    transcript: str
    expected_text: str
    accuracy: int = Field(..., ge=0, le=100)
    abjad_value: int = Field(..., ge=0)
    jannah_points: int = Field(..., ge=0)
    observations: list[RuleObservation] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utcnow)

    model_config = {"frozen": True}

    @classmethod
    def from_analysis(
        cls,
        user_id: str,
        surah: int,
        ayah: int,
        analysis: RecitationAnalysis,
    ) -> "RecitationRecord":
        """Build a record from an analysis result."""
        return cls(
            user_id=user_id,
            surah=surah,
            ayah=ayah,
            transcript=analysis.scored.actual,
            expected_text=analysis.scored.expected,
            accuracy=analysis.accuracy,
            abjad_value=analysis.abjad_value,
            jannah_points=analysis.points,
            observations=list(analysis.observations),
        )

    def __str__(self) -> str:
        return f"Recitation({self.surah}:{self.ayah}, {self.accuracy}%, +{self.jannah_points} pts)"


class UserProgress(BaseModel):
    """
    Running totals for one user.

    Use :meth:`with_recitation` to fold in a new attempt; the model is
    frozen so every update produces a new instance.
    """

    user_id: str = Field(..., min_length=1)
    total_jannah_points: int = Field(default=0, ge=0)
    total_recitations: int = Field(default=0, ge=0)
    average_accuracy: float = Field(default=0.0, ge=0.0, le=100.0)
    current_level: str = Field(default="Learner")
    last_recitation: Optional[datetime] = None

    model_config = {"frozen": True}

    def with_recitation(self, record: RecitationRecord) -> "UserProgress":
        """Return a copy of this progress updated with ``record``."""
        # Imported here: rewards imports models, models must not import core at load time.
        from tilawa.core.rewards import level_badge

        count = self.total_recitations + 1
        total = self.total_jannah_points + record.jannah_points
        average = self.average_accuracy + (record.accuracy - self.average_accuracy) / count

        return self.model_copy(
            update={
                "total_jannah_points": total,
                "total_recitations": count,
                "average_accuracy": average,
                "current_level": level_badge(total).level,
                "last_recitation": record.created_at,
            }
        )
