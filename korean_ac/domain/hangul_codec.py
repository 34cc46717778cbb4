from __future__ import annotations

"""Hangul syllable codec (domain layer).

It centralises:
- Hangul jamo ordering constants (compatibility jamo)
- Character class checks for syllables and standalone jamo
- Pure functions converting between a syllable and its jamo indices

Primary API:
- decompose(syllable) -> (initial, medial, final | None)
- compose(initial, medial, final=None) -> syllable
"""

from typing import Final, Optional, Union

from korean_ac.domain.errors import InvalidIndex, OutOfRange


# -----------------------------------------------------------------------------
# Domain data: compatibility jamo ordering
# -----------------------------------------------------------------------------

# Leading consonants (Choseong) in standard Unicode Hangul order
CHOSEONG: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Vowels (Jungseong) in standard Unicode Hangul order
JUNGSEONG: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Trailing consonants (Jongseong) in standard Unicode Hangul order
# Index 0 is "no final"
JONGSEONG: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)

SYLLABLE_BASE: Final[int] = 0xAC00
SYLLABLE_LAST: Final[int] = 0xD7A3

INITIAL_COUNT: Final[int] = len(CHOSEONG)  # 19
MEDIAL_COUNT: Final[int] = len(JUNGSEONG)  # 21
FINAL_COUNT: Final[int] = len(JONGSEONG)  # 28, including "no final"

# Compatibility jamo block: consonants ㄱ..ㅎ, vowels ㅏ..ㅣ
_CONSONANT_FIRST: Final[int] = 0x3131
_CONSONANT_LAST: Final[int] = 0x314E
_VOWEL_FIRST: Final[int] = 0x314F
_VOWEL_LAST: Final[int] = 0x3163


# -----------------------------------------------------------------------------
# Character classes
# -----------------------------------------------------------------------------

def _codepoint(ch: Union[str, int]) -> int:
    if isinstance(ch, int):
        return ch
    if len(ch) != 1:
        return -1
    return ord(ch)


def is_syllable(ch: Union[str, int]) -> bool:
    """True for a precomposed Hangul syllable (가..힣)."""
    return SYLLABLE_BASE <= _codepoint(ch) <= SYLLABLE_LAST


def is_consonant_jamo(ch: Union[str, int]) -> bool:
    """True for a standalone compatibility consonant (ㄱ..ㅎ, compounds included)."""
    return _CONSONANT_FIRST <= _codepoint(ch) <= _CONSONANT_LAST


def is_vowel_jamo(ch: Union[str, int]) -> bool:
    """True for a standalone compatibility vowel (ㅏ..ㅣ)."""
    return _VOWEL_FIRST <= _codepoint(ch) <= _VOWEL_LAST


def is_standalone_jamo(ch: Union[str, int]) -> bool:
    return is_consonant_jamo(ch) or is_vowel_jamo(ch)


# -----------------------------------------------------------------------------
# Domain logic
# -----------------------------------------------------------------------------

def decompose(syllable: Union[str, int]) -> tuple[int, int, Optional[int]]:
    """Split a Hangul syllable into its jamo indices.

    Args:
        syllable: a single-character string or an int codepoint.

    Returns:
        (initial_index, medial_index, final_index) where final_index is None
        for a syllable without a final consonant.

    Raises:
        OutOfRange: if `syllable` is not in the Hangul syllable block.
    """
    code = _codepoint(syllable)
    if not SYLLABLE_BASE <= code <= SYLLABLE_LAST:
        raise OutOfRange("Not a Hangul syllable: %r" % (syllable,))

    offset = code - SYLLABLE_BASE
    initial = offset // (MEDIAL_COUNT * FINAL_COUNT)
    medial = (offset % (MEDIAL_COUNT * FINAL_COUNT)) // FINAL_COUNT
    final = offset % FINAL_COUNT
    return initial, medial, (final or None)


def compose(initial: int, medial: int, final: Optional[int] = None) -> str:
    """Compose a Hangul syllable from jamo indices.

    This uses the Unicode Hangul Syllables algorithm:
    SBase + (LIndex * VCount + VIndex) * TCount + TIndex

    Raises:
        InvalidIndex: if any index is outside its range
            (0-18 initials, 0-20 medials, 0-27 finals; None or 0 is "no final").
    """
    f = 0 if final is None else final
    if not 0 <= initial < INITIAL_COUNT:
        raise InvalidIndex("Invalid initial index: %r" % (initial,))
    if not 0 <= medial < MEDIAL_COUNT:
        raise InvalidIndex("Invalid medial index: %r" % (medial,))
    if not 0 <= f < FINAL_COUNT:
        raise InvalidIndex("Invalid final index: %r" % (final,))

    return chr(SYLLABLE_BASE + (initial * MEDIAL_COUNT + medial) * FINAL_COUNT + f)


# -----------------------------------------------------------------------------
# Internal lookup maps
# -----------------------------------------------------------------------------

_CHO_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(CHOSEONG)}
_JUNG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JUNGSEONG)}
_JONG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JONGSEONG)}


def compose_jamo(lead: str, vowel: str, tail: str = "") -> str:
    """Compose a Hangul syllable from compatibility jamo.

    Args:
        lead: choseong (e.g., "ㄱ")
        vowel: jungseong (e.g., "ㅏ")
        tail: jongseong (e.g., "ㄴ") or "" for no final

    Raises:
        InvalidIndex: if a jamo cannot occupy its position.
    """
    li = _CHO_MAP.get(lead)
    vi = _JUNG_MAP.get(vowel)
    ti = _JONG_MAP.get(tail or "")
    if li is None or vi is None or ti is None:
        raise InvalidIndex("Invalid jamo for composition: lead=%r vowel=%r tail=%r" % (lead, vowel, tail))
    return compose(li, vi, ti)


def decompose_to_jamo(syllable: Union[str, int]) -> tuple[str, str, str]:
    """Like decompose(), but returns compatibility jamo ("" for no final)."""
    initial, medial, final = decompose(syllable)
    return CHOSEONG[initial], JUNGSEONG[medial], JONGSEONG[final or 0]
