from __future__ import annotations

import pytest

from korean_ac.domain.errors import HangulError, InvalidIndex, OutOfRange
from korean_ac.domain.hangul_codec import (
    CHOSEONG,
    JONGSEONG,
    JUNGSEONG,
    compose,
    compose_jamo,
    decompose,
    decompose_to_jamo,
    is_consonant_jamo,
    is_standalone_jamo,
    is_syllable,
    is_vowel_jamo,
)


def test_table_sizes() -> None:
    assert len(CHOSEONG) == 19
    assert len(JUNGSEONG) == 21
    assert len(JONGSEONG) == 28
    assert JONGSEONG[0] == ""


def test_decompose_basic() -> None:
    assert decompose("가") == (0, 0, None)
    assert decompose("한") == (18, 0, 4)
    assert decompose(ord("힣")) == (18, 20, 27)


def test_compose_basic() -> None:
    assert compose(0, 0) == "가"
    assert compose(0, 0, 0) == "가"
    assert compose(18, 0, 4) == "한"


def test_compose_decompose_every_syllable() -> None:
    for code in range(0xAC00, 0xD7A4):
        s = chr(code)
        assert compose(*decompose(s)) == s


def test_decompose_compose_every_triple() -> None:
    for i in range(19):
        for m in range(21):
            for f in [None] + list(range(1, 28)):
                assert decompose(compose(i, m, f)) == (i, m, f)


@pytest.mark.parametrize("value", ["a", "ㄱ", "ㅏ", " ", 0xD7A4, 0xABFF, "가나"])
def test_decompose_out_of_range(value) -> None:
    with pytest.raises(OutOfRange):
        decompose(value)


@pytest.mark.parametrize("triple", [(19, 0, None), (-1, 0, None), (0, 21, None), (0, 0, 28), (0, 0, -1)])
def test_compose_invalid_index(triple) -> None:
    with pytest.raises(InvalidIndex):
        compose(*triple)


def test_errors_are_value_errors() -> None:
    assert issubclass(OutOfRange, HangulError)
    assert issubclass(InvalidIndex, HangulError)
    assert issubclass(HangulError, ValueError)


def test_compose_jamo() -> None:
    assert compose_jamo("ㄱ", "ㅏ", "ㄴ") == "간"
    assert compose_jamo("ㄷ", "ㅏ", "ㄺ") == "닭"
    assert compose_jamo("ㅇ", "ㅘ") == "와"
    with pytest.raises(InvalidIndex):
        compose_jamo("ㄳ", "ㅏ")
    with pytest.raises(InvalidIndex):
        compose_jamo("ㄱ", "ㄱ")


def test_decompose_to_jamo() -> None:
    assert decompose_to_jamo("한") == ("ㅎ", "ㅏ", "ㄴ")
    assert decompose_to_jamo("와") == ("ㅇ", "ㅘ", "")


def test_character_classes() -> None:
    assert is_syllable("가") and is_syllable("힣")
    assert not is_syllable("ㄱ") and not is_syllable("a") and not is_syllable("가나")
    assert is_consonant_jamo("ㄱ") and is_consonant_jamo("ㄳ") and is_consonant_jamo("ㅎ")
    assert not is_consonant_jamo("ㅏ")
    assert is_vowel_jamo("ㅏ") and is_vowel_jamo("ㅢ") and is_vowel_jamo("ㅣ")
    assert not is_vowel_jamo("ㅎ")
    assert is_standalone_jamo("ㅋ") and is_standalone_jamo("ㅠ")
    assert not is_standalone_jamo("한")
