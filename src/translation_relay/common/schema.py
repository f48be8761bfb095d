"""Pydantic models and dataclasses for request/response types."""
from __future__ import annotations
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

@dataclass(frozen=True)
class Direction:
    """Translation direction as two-letter language codes."""
    from_lang: str
    to_lang: str

JA_TO_EN = Direction("ja", "en")
EN_TO_JA = Direction("en", "ja")

class TranslateOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    input: str
    from_lang: str = Field(alias="from")
    to_lang: str = Field(alias="to")
    translated: str
    romanized: str | None = None

class PhraseTotals(BaseModel):
    phrases: int = 0
    words: int = 0
    combined: int = 0

class PhrasesOut(BaseModel):
    phrases: list[str] = Field(default_factory=list)
    words: list[str] = Field(default_factory=list)
    total: PhraseTotals = Field(default_factory=PhraseTotals)
