from __future__ import annotations

from dataclasses import dataclass

from korean_ac.domain.hangul_codec import (
    CHOSEONG,
    decompose,
    is_consonant_jamo,
    is_syllable,
    is_vowel_jamo,
)


@dataclass(frozen=True)
class KoreanChoseongParser:
    """Reduce Korean text to its initial consonants ("한글" -> "ㅎㄱ").

    Standalone jamo already present in the text are kept unless the matching
    remove option is set. Non-Korean characters pass through unchanged.
    """

    remove_single_jaeum: bool = False
    remove_single_moeum: bool = False

    def parse(self, text: str) -> str:
        out: list[str] = []
        for ch in text:
            if is_syllable(ch):
                initial, _, _ = decompose(ch)
                out.append(CHOSEONG[initial])
            elif is_consonant_jamo(ch):
                if not self.remove_single_jaeum:
                    out.append(ch)
            elif is_vowel_jamo(ch):
                if not self.remove_single_moeum:
                    out.append(ch)
            else:
                out.append(ch)
        return "".join(out)
