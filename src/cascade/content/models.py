"""Data models for curated puzzle content."""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class PuzzleContent(BaseModel):
    """
    A curated puzzle as authored: seed word, cascade word and column words.

    Accepts both snake_case names and the camelCase keys of the curated
    JSON files (``seedWord``, ``cascadeWord``, ``cascadeRow``, ``columnWords``).
    """

    model_config = ConfigDict(populate_by_name=True)

    seed_word: str = Field(..., alias="seedWord")
    cascade_word: str = Field(..., alias="cascadeWord")
    cascade_row: int = Field(..., alias="cascadeRow", ge=1, le=3)
    column_words: List[str] = Field(..., alias="columnWords")
    date: Optional[str] = None

    @field_validator("seed_word", "cascade_word")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("column_words")
    @classmethod
    def _upper_all(cls, value: List[str]) -> List[str]:
        return [w.strip().upper() for w in value]


class GeneratedContent(BaseModel):
    """Content produced by the auto-generator, with swap-in alternatives."""

    content: PuzzleContent
    alternatives: List[List[str]] = Field(default_factory=list)
    quality: int = 0
    warnings: List[str] = Field(default_factory=list)
