from __future__ import annotations

"""Latin keys -> Hangul composition (domain layer).

Interprets a string as keystrokes on the two-set Korean layout and assembles
the Hangul text those keystrokes would produce ("gksrnr" -> "한국").

The composition is an explicit state machine:

    EMPTY --consonant--> HAS_INITIAL --vowel--> HAS_INITIAL_MEDIAL
    EMPTY --vowel------> HAS_MEDIAL
    HAS_INITIAL_MEDIAL --final-capable consonant--> HAS_INITIAL_MEDIAL_FINAL

Any transition not listed flushes the current syllable first. A vowel that
arrives after a final takes that final (or the second half of a compound
final) as the initial of the next syllable: "rksk" -> "가나", not "간ㅏ".

Characters that are not layout keys (digits, spaces, Hangul, ...) are hard
syllable boundaries and are copied through unchanged.
"""

from dataclasses import dataclass, field
from typing import Optional

from korean_ac.domain.enums import ComposeState, LayoutRole
from korean_ac.domain.hangul_codec import compose_jamo
from korean_ac.domain.keyboard_layout import LAYOUT, KeyboardLayout


@dataclass
class CompositionState:
    """Slots of the syllable currently being assembled.

    `keys` holds the raw keys consumed for the filled slots, in typing order.
    """

    initial: Optional[str] = None
    medial: Optional[str] = None
    final: Optional[str] = None
    keys: list[str] = field(default_factory=list)

    @property
    def state(self) -> ComposeState:
        if self.initial is None:
            return ComposeState.EMPTY if self.medial is None else ComposeState.HAS_MEDIAL
        if self.medial is None:
            return ComposeState.HAS_INITIAL
        if self.final is None:
            return ComposeState.HAS_INITIAL_MEDIAL
        return ComposeState.HAS_INITIAL_MEDIAL_FINAL

    def reset(self) -> None:
        self.initial = None
        self.medial = None
        self.final = None
        self.keys = []


class HangulComposer:
    """Single-use composer; feed keys, then call finish()."""

    def __init__(self, layout: KeyboardLayout = LAYOUT, convert_single_korean_letter: bool = False) -> None:
        self._layout = layout
        self._convert_single = convert_single_korean_letter
        self._slots = CompositionState()
        self._out: list[str] = []

    @property
    def state(self) -> ComposeState:
        return self._slots.state

    @property
    def slots(self) -> CompositionState:
        return self._slots

    def text(self) -> str:
        """Committed text so far (excludes the syllable still being composed)."""
        return "".join(self._out)

    def feed(self, key: str) -> None:
        medial = self._layout.jamo_for_key(key, LayoutRole.MEDIAL)
        if medial is not None:
            self._feed_vowel(medial, key)
            return

        initial = self._layout.jamo_for_key(key, LayoutRole.INITIAL)
        if initial is not None:
            self._feed_consonant(initial, self._layout.jamo_for_key(key, LayoutRole.FINAL), key)
            return

        self.flush()
        self._out.append(key)

    def flush(self) -> None:
        """Commit whatever is in the slots and return to EMPTY."""
        s = self._slots
        st = s.state
        if st is ComposeState.EMPTY:
            return
        if st in (ComposeState.HAS_INITIAL, ComposeState.HAS_MEDIAL):
            lone = s.initial if s.initial is not None else s.medial
            self._out.append(lone if self._convert_single else "".join(s.keys))
        else:
            self._out.append(compose_jamo(s.initial, s.medial, s.final or ""))
        s.reset()

    def finish(self) -> str:
        self.flush()
        return self.text()

    # ---- transitions ----

    def _start(self, key: str, *, initial: Optional[str] = None, medial: Optional[str] = None) -> None:
        self._slots.initial = initial
        self._slots.medial = medial
        self._slots.keys = [key]

    def _feed_vowel(self, vowel: str, key: str) -> None:
        s = self._slots
        st = s.state

        if st is ComposeState.EMPTY:
            self._start(key, medial=vowel)
        elif st is ComposeState.HAS_INITIAL:
            s.medial = vowel
            s.keys.append(key)
        elif st in (ComposeState.HAS_MEDIAL, ComposeState.HAS_INITIAL_MEDIAL):
            compound = self._layout.combine(s.medial, vowel, LayoutRole.MEDIAL)
            if compound is not None:
                s.medial = compound
                s.keys.append(key)
            else:
                self.flush()
                self._start(key, medial=vowel)
        else:
            self._reassign_final(vowel, key)

    def _reassign_final(self, vowel: str, key: str) -> None:
        """Move the trailing final onto a new syllable started by `vowel`."""
        s = self._slots
        parts = self._layout.split(s.final, LayoutRole.FINAL)
        if parts is not None:
            s.final, moved = parts
        else:
            moved, s.final = s.final, None
        # the moved jamo was always typed by the last key
        moved_key = s.keys.pop()
        self.flush()
        self._start(moved_key, initial=moved)
        s.medial = vowel
        s.keys.append(key)

    def _feed_consonant(self, initial: str, final: Optional[str], key: str) -> None:
        s = self._slots
        st = s.state

        if st is ComposeState.EMPTY:
            self._start(key, initial=initial)
        elif st is ComposeState.HAS_INITIAL_MEDIAL and final is not None:
            s.final = final
            s.keys.append(key)
        elif st is ComposeState.HAS_INITIAL_MEDIAL_FINAL and final is not None:
            compound = self._layout.combine(s.final, final, LayoutRole.FINAL)
            if compound is not None:
                s.final = compound
                s.keys.append(key)
            else:
                self.flush()
                self._start(key, initial=initial)
        else:
            self.flush()
            self._start(key, initial=initial)


@dataclass(frozen=True)
class Eng2KorConverter:
    """Rewrite Latin-key text as the Hangul it types ("dkssud" -> "안녕").

    With `convert_single_korean_letter` a key that cannot join a syllable
    becomes a standalone jamo ("r" -> "ㄱ"); without it the key is kept.
    """

    convert_single_korean_letter: bool = False
    layout: KeyboardLayout = field(default=LAYOUT, repr=False, compare=False)

    def convert(self, text: str) -> str:
        composer = HangulComposer(self.layout, self.convert_single_korean_letter)
        for ch in text:
            composer.feed(ch)
        return composer.finish()
