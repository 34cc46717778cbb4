from __future__ import annotations

from korean_ac.domain.hangul_codec import decompose_to_jamo, is_syllable


class KoreanJamoParser:
    """Spell out every syllable as compatibility jamo ("한" -> "ㅎㅏㄴ")."""

    def parse(self, text: str) -> str:
        out: list[str] = []
        for ch in text:
            if is_syllable(ch):
                # final is "" when the syllable has none
                out.extend(decompose_to_jamo(ch))
            else:
                out.append(ch)
        return "".join(out)
