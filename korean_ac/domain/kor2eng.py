from __future__ import annotations

import logging
from dataclasses import dataclass, field

from korean_ac.domain.enums import LayoutRole
from korean_ac.domain.hangul_codec import decompose_to_jamo, is_standalone_jamo, is_syllable
from korean_ac.domain.keyboard_layout import LAYOUT, KeyboardLayout

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Kor2EngConverter:
    """Rewrite Korean text as the Latin keys that type it ("한국" -> "gksrnr").

    Standalone jamo are converted only when `convert_single_korean_letter`
    is set; otherwise they are left as they are.
    """

    convert_single_korean_letter: bool = False
    layout: KeyboardLayout = field(default=LAYOUT, repr=False, compare=False)

    def convert(self, text: str) -> str:
        out: list[str] = []
        for ch in text:
            if is_syllable(ch):
                out.append(self._syllable_keys(ch))
            elif is_standalone_jamo(ch) and self.convert_single_korean_letter:
                keys = self.layout.keys_for_standalone(ch)
                if keys is None:
                    logger.debug("No layout entry for jamo %r; passing through", ch)
                    keys = ch
                out.append(keys)
            else:
                out.append(ch)
        return "".join(out)

    def _syllable_keys(self, syllable: str) -> str:
        initial, medial, final = decompose_to_jamo(syllable)
        parts: list[str] = []
        for jamo, role in (
                (initial, LayoutRole.INITIAL),
                (medial, LayoutRole.MEDIAL),
                (final, LayoutRole.FINAL),
        ):
            if not jamo:
                continue
            keys = self.layout.keys_for(jamo, role)
            if keys is None:
                logger.debug("No %s layout entry for %r in %r", role.name.lower(), jamo, syllable)
                return syllable
            parts.append(keys)
        return "".join(parts)
