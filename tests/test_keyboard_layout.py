from __future__ import annotations

import dataclasses

import pytest

from korean_ac.domain.enums import LayoutRole
from korean_ac.domain.hangul_codec import CHOSEONG, JONGSEONG, JUNGSEONG
from korean_ac.domain.keyboard_layout import LAYOUT, TWO_SET_ENTRIES, KeyboardLayout, LayoutEntry


def test_entry_counts_per_role() -> None:
    counts = {role: 0 for role in LayoutRole}
    for e in TWO_SET_ENTRIES:
        counts[e.role] += 1
    assert counts[LayoutRole.INITIAL] == 19
    assert counts[LayoutRole.MEDIAL] == 21
    assert counts[LayoutRole.FINAL] == 28


def test_every_jamo_has_keys() -> None:
    for jamo in CHOSEONG:
        assert LAYOUT.keys_for(jamo, LayoutRole.INITIAL)
    for jamo in JUNGSEONG:
        assert LAYOUT.keys_for(jamo, LayoutRole.MEDIAL)
    for jamo in JONGSEONG[1:]:
        assert LAYOUT.keys_for(jamo, LayoutRole.FINAL)


def test_entries_are_immutable() -> None:
    entry = TWO_SET_ENTRIES[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.keys = "x"  # type: ignore[misc]
    with pytest.raises(TypeError):
        LAYOUT.forward_table(LayoutRole.INITIAL)["ㄱ"] = "x"  # type: ignore[index]


def test_forward_lookup() -> None:
    assert LAYOUT.keys_for("ㅎ", LayoutRole.INITIAL) == "g"
    assert LAYOUT.keys_for("ㄲ", LayoutRole.INITIAL) == "R"
    assert LAYOUT.keys_for("ㅘ", LayoutRole.MEDIAL) == "hk"
    assert LAYOUT.keys_for("ㅢ", LayoutRole.MEDIAL) == "ml"
    assert LAYOUT.keys_for("ㄳ", LayoutRole.FINAL) == "rt"
    assert LAYOUT.keys_for("ㅆ", LayoutRole.FINAL) == "T"
    # ㄸ/ㅃ/ㅉ never end a syllable
    assert LAYOUT.keys_for("ㄸ", LayoutRole.FINAL) is None
    assert LAYOUT.keys_for("ㅃ", LayoutRole.FINAL) is None
    assert LAYOUT.keys_for("ㅉ", LayoutRole.FINAL) is None


def test_standalone_lookup_order() -> None:
    assert LAYOUT.keys_for_standalone("ㄱ") == "r"
    assert LAYOUT.keys_for_standalone("ㅏ") == "k"
    assert LAYOUT.keys_for_standalone("ㄳ") == "rt"
    assert LAYOUT.keys_for_standalone("ㅙ") == "ho"
    assert LAYOUT.keys_for_standalone("a") is None


def test_inverse_lookup() -> None:
    assert LAYOUT.jamo_for_key("r", LayoutRole.INITIAL) == "ㄱ"
    assert LAYOUT.jamo_for_key("r", LayoutRole.FINAL) == "ㄱ"
    assert LAYOUT.jamo_for_key("r", LayoutRole.MEDIAL) is None
    assert LAYOUT.jamo_for_key("k", LayoutRole.MEDIAL) == "ㅏ"
    assert LAYOUT.jamo_for_key("k", LayoutRole.INITIAL) is None
    assert LAYOUT.jamo_for_key("O", LayoutRole.MEDIAL) == "ㅒ"
    assert LAYOUT.jamo_for_key("1", LayoutRole.INITIAL) is None


def test_shifted_keys() -> None:
    assert LAYOUT.jamo_for_key("R", LayoutRole.INITIAL) == "ㄲ"
    assert LAYOUT.jamo_for_key("R", LayoutRole.FINAL) == "ㄲ"
    assert LAYOUT.jamo_for_key("E", LayoutRole.INITIAL) == "ㄸ"
    # shifted key with its own jamo does not fall back to the lower-case key
    assert LAYOUT.jamo_for_key("E", LayoutRole.FINAL) is None
    # shifted key without a shifted jamo types the plain jamo
    assert LAYOUT.jamo_for_key("A", LayoutRole.INITIAL) == "ㅁ"
    assert LAYOUT.jamo_for_key("K", LayoutRole.MEDIAL) == "ㅏ"
    assert LAYOUT.resolve_key("G") == "g"
    assert LAYOUT.resolve_key("!") is None


def test_compounds_derived_from_digraphs() -> None:
    assert LAYOUT.combine("ㅗ", "ㅏ", LayoutRole.MEDIAL) == "ㅘ"
    assert LAYOUT.combine("ㅡ", "ㅣ", LayoutRole.MEDIAL) == "ㅢ"
    assert LAYOUT.combine("ㅏ", "ㅗ", LayoutRole.MEDIAL) is None
    assert LAYOUT.combine("ㄹ", "ㄱ", LayoutRole.FINAL) == "ㄺ"
    assert LAYOUT.combine("ㅂ", "ㅅ", LayoutRole.FINAL) == "ㅄ"
    assert LAYOUT.combine("ㄱ", "ㄱ", LayoutRole.FINAL) is None
    assert LAYOUT.split("ㄺ", LayoutRole.FINAL) == ("ㄹ", "ㄱ")
    assert LAYOUT.split("ㅝ", LayoutRole.MEDIAL) == ("ㅜ", "ㅓ")
    assert LAYOUT.split("ㄱ", LayoutRole.FINAL) is None


def test_custom_layout_rejects_unmapped_digraph() -> None:
    entries = [
        LayoutEntry(LayoutRole.MEDIAL, "ㅗ", "h"),
        LayoutEntry(LayoutRole.MEDIAL, "ㅘ", "hk"),
    ]
    with pytest.raises(ValueError):
        KeyboardLayout(entries)
