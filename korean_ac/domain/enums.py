from __future__ import annotations

from enum import Enum, auto


class LayoutRole(Enum):
    """Position a jamo occupies inside a syllable."""

    INITIAL = auto()
    MEDIAL = auto()
    FINAL = auto()


class ComposeState(Enum):
    """States of the Latin-key to Hangul composition machine."""

    EMPTY = auto()
    HAS_INITIAL = auto()
    HAS_MEDIAL = auto()  # lone vowel, no initial
    HAS_INITIAL_MEDIAL = auto()
    HAS_INITIAL_MEDIAL_FINAL = auto()
