"""
Recitation practice session.

Connects the scoring core to the services a host application provides:
a transcriber that turns audio into text and a store that keeps
recitation records and user progress. Errors raised by either service
propagate to the caller unchanged.
"""

import logging
import threading
from typing import Callable, Protocol, runtime_checkable

from tilawa.config import TilawaSettings, get_settings
from tilawa.core.analyzer import analyze_recitation
from tilawa.data import VerseLookup
from tilawa.models import RecitationAnalysis, RecitationRecord, UserProgress

logger = logging.getLogger(__name__)


@runtime_checkable
class Transcriber(Protocol):
    """Speech-to-text service."""

    def transcribe(self, audio: bytes) -> str:
        """Return the recognized text for raw audio bytes."""
        ...


@runtime_checkable
class RecitationStore(Protocol):
    """Persistence for recitation records and user progress."""

    def save_recitation(self, record: RecitationRecord) -> None: ...

    def get_progress(self, user_id: str) -> UserProgress | None: ...

    def save_progress(self, progress: UserProgress) -> None: ...

    def update_progress(
        self, user_id: str, update: Callable[[UserProgress], UserProgress]
    ) -> UserProgress:
        """Apply ``update`` to the user's progress (zeroed if absent) atomically."""
        ...

    def recent_recitations(self, user_id: str, limit: int = 5) -> list[RecitationRecord]: ...


class InMemoryRecitationStore:
    """Thread-safe store that keeps everything in process memory."""

    def __init__(self):
        self._lock = threading.Lock()
        self._records: list[RecitationRecord] = []
        self._progress: dict[str, UserProgress] = {}

    def save_recitation(self, record: RecitationRecord) -> None:
        with self._lock:
            self._records.append(record)

    def get_progress(self, user_id: str) -> UserProgress | None:
        with self._lock:
            return self._progress.get(user_id)

    def save_progress(self, progress: UserProgress) -> None:
        with self._lock:
            self._progress[progress.user_id] = progress

    def update_progress(
        self, user_id: str, update: Callable[[UserProgress], UserProgress]
    ) -> UserProgress:
        with self._lock:
            current = self._progress.get(user_id) or UserProgress(user_id=user_id)
            updated = update(current)
            self._progress[user_id] = updated
            return updated

    def recent_recitations(self, user_id: str, limit: int = 5) -> list[RecitationRecord]:
        """Newest first."""
        with self._lock:
            mine = [r for r in self._records if r.user_id == user_id]
        mine.sort(key=lambda r: r.created_at, reverse=True)
        return mine[:limit]

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


class RecitationSession:
    """
    Score recited audio and record the result.

    Example:
        session = RecitationSession(transcriber, InMemoryRecitationStore())
        record = session.recite("user-1", surah=1, ayah=1, audio=wav_bytes)
        print(record.accuracy, record.jannah_points)
    """

    def __init__(
        self,
        transcriber: Transcriber,
        store: RecitationStore,
        verses: VerseLookup | None = None,
        settings: TilawaSettings | None = None,
    ):
        self.transcriber = transcriber
        self.store = store
        self.settings = settings or get_settings()
        if verses is None:
            verses = (
                VerseLookup.from_csv(self.settings.verses_csv)
                if self.settings.verses_csv
                else VerseLookup()
            )
        self.verses = verses

    def analyze(self, surah: int, ayah: int, transcript: str) -> RecitationAnalysis:
        """Score an already transcribed recitation without storing it."""
        expected = self.verses.expected_text(surah, ayah)
        if not expected:
            logger.warning("No expected text for %d:%d; accuracy will be 0", surah, ayah)
        return analyze_recitation(
            expected,
            transcript,
            abjad_tolerance=self.settings.abjad_tolerance,
        )

    def recite(self, user_id: str, surah: int, ayah: int, audio: bytes) -> RecitationRecord:
        """
        Transcribe, score and store one recitation.

        Args:
            user_id: Reciting user
            surah: Surah number
            ayah: Ayah number
            audio: Raw audio bytes for the transcriber

        Returns:
            The stored RecitationRecord
        """
        transcript = self.transcriber.transcribe(audio) or ""
        analysis = self.analyze(surah, ayah, transcript)
        record = RecitationRecord.from_analysis(user_id, surah, ayah, analysis)

        self.store.save_recitation(record)
        self.store.update_progress(user_id, lambda progress: progress.with_recitation(record))

        if record.accuracy < self.settings.accuracy_target:
            logger.warning(
                "Recitation %d:%d by %s below target: %d%% < %d%%",
                surah, ayah, user_id, record.accuracy, self.settings.accuracy_target,
            )
        else:
            logger.info(
                "Recitation %d:%d by %s: %d%%, +%d points",
                surah, ayah, user_id, record.accuracy, record.jannah_points,
            )
        return record

    def progress(self, user_id: str) -> UserProgress:
        """Current progress for a user (zeroed if they have none yet)."""
        return self.store.get_progress(user_id) or UserProgress(user_id=user_id)

    def recent(self, user_id: str) -> list[RecitationRecord]:
        """Most recent recitations for a user, newest first."""
        return self.store.recent_recitations(user_id, limit=self.settings.recent_limit)
