"""Translation direction resolution from the caller's input-type hint."""
from __future__ import annotations
import re

from translation_relay.common.schema import Direction, EN_TO_JA, JA_TO_EN

# Hiragana, Katakana, CJK Unified Ideographs
JAPANESE_SCRIPT_RE = re.compile(r"[\u3040-\u309f\u30a0-\u30ff\u4e00-\u9fff]")

JAPANESE = "japanese"
ROMANJI = "romanji"
ENGLISH = "english"

def contains_japanese_script(text: str) -> bool:
    return JAPANESE_SCRIPT_RE.search(text) is not None

def resolve_direction(text: str, input_type: str | None) -> Direction:
    """
    Pick the translation direction. First match wins.

    Romanji input has already been converted to kana by the caller, so it is
    treated exactly like Japanese. Unknown or missing hints fall back to a
    script scan of the text.
    """
    if input_type == JAPANESE:
        return JA_TO_EN
    if input_type == ROMANJI:
        return JA_TO_EN
    if input_type == ENGLISH:
        return EN_TO_JA
    return JA_TO_EN if contains_japanese_script(text) else EN_TO_JA

def romanization_source(input_type: str | None, direction: Direction) -> str | None:
    """
    Say which side of the exchange gets romanized: "input", "translated" or None.

    Auto-detected requests are never romanized, even when the text is Japanese.
    """
    if input_type == JAPANESE and direction.from_lang == "ja":
        return "input"
    if input_type == ENGLISH and direction.to_lang == "ja":
        return "translated"
    return None
