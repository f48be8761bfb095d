from __future__ import annotations

import pytest

from translation_relay.common.schema import EN_TO_JA, JA_TO_EN
from translation_relay.relay.direction import (
    contains_japanese_script,
    resolve_direction,
    romanization_source,
)


@pytest.mark.parametrize("text", ["ひらがな", "カタカナ", "漢字", "hello 世界", "ー"])
def test_contains_japanese_script_true(text: str) -> None:
    assert contains_japanese_script(text)


@pytest.mark.parametrize("text", ["hello", "", "123 !?", "café", "안녕하세요"])
def test_contains_japanese_script_false(text: str) -> None:
    assert not contains_japanese_script(text)


def test_explicit_hints_win_over_script() -> None:
    assert resolve_direction("hello", "japanese") == JA_TO_EN
    assert resolve_direction("konnichiwa", "romanji") == JA_TO_EN
    assert resolve_direction("こんにちは", "english") == EN_TO_JA


def test_fallback_detects_script() -> None:
    assert resolve_direction("こんにちは", None) == JA_TO_EN
    assert resolve_direction("hello", None) == EN_TO_JA
    assert resolve_direction("hello", "Japanese") == EN_TO_JA


def test_romanization_source() -> None:
    assert romanization_source("japanese", JA_TO_EN) == "input"
    assert romanization_source("english", EN_TO_JA) == "translated"
    assert romanization_source("romanji", JA_TO_EN) is None
    assert romanization_source(None, JA_TO_EN) is None
    assert romanization_source(None, EN_TO_JA) is None
