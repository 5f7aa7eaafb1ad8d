"""
Ayah (verse) data model.
"""
from typing import Optional

from pydantic import BaseModel, Field


class Ayah(BaseModel):
    """
    Represents a single ayah (verse) used as the expected reference text.

    Attributes:
        surah_id: Surah number (1-114)
        ayah_number: Ayah number within the surah (1-based)
        text: The Arabic text of the ayah, exactly as it will be scored
        translation: Optional English translation
        difficulty_level: Practice difficulty (1 = easiest)
    """

    surah_id: int = Field(
        ...,
        description="Surah number (1-114)",
        ge=1,
        le=114,
    )
    ayah_number: int = Field(
        ...,
        description="Ayah number within the surah (1-based)",
        ge=1,
    )
    text: str = Field(
        ...,
        description="The Arabic text of the ayah",
        min_length=1,
    )
    translation: Optional[str] = Field(
        default=None,
        description="English translation of the ayah",
    )
    difficulty_level: int = Field(
        default=1,
        description="Practice difficulty (1 = easiest)",
        ge=1,
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "surah_id": 1,
                    "ayah_number": 2,
                    "text": "الحَمدُ لِلهِ رَبِّ العَالَمِينَ",
                    "translation": "All praise is due to Allah, Lord of the worlds.",
                }
            ]
        },
    }

    @property
    def key(self) -> str:
        """Lookup key in ``surah:ayah`` form."""
        return f"{self.surah_id}:{self.ayah_number}"

    def __str__(self) -> str:
        return f"Ayah({self.key})"

    def __repr__(self) -> str:
        return f"Ayah(surah_id={self.surah_id}, ayah_number={self.ayah_number})"
