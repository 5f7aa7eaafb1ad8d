"""
Exceptions raised by the Tilawa library.

The scoring functions are total over their inputs; only the reward
calculator and the verse data layer raise.
"""


class TilawaError(Exception):
    """Base class for all Tilawa errors."""


class InvalidArgumentError(TilawaError, ValueError):
    """An argument is outside the domain the operation accepts."""

    def __init__(self, name: str, value: object, reason: str):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {name}={value!r}: {reason}")


class VerseNotFoundError(TilawaError, KeyError):
    """No verse text is known for the requested surah:ayah."""

    def __init__(self, surah: int, ayah: int):
        self.surah = surah
        self.ayah = ayah
        super().__init__(f"{surah}:{ayah}")

    def __str__(self) -> str:
        return f"Verse not found: {self.surah}:{self.ayah}"


class VerseDataError(TilawaError):
    """Verse data could not be read or a row is malformed."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"{source}: {message}")
