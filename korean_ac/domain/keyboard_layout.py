from __future__ import annotations

"""Two-set (두벌식) keyboard layout table (domain layer).

This module is the single source of truth for:
  - The jamo -> Latin key(s) mapping for every initial, medial and final
  - The inverse Latin key -> jamo lookup per role
  - Compound medials/finals, derived from their two-key entries

The table is built once at import time and never mutated afterwards, so it is
safe to share between threads.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Iterable, Mapping, Optional

from korean_ac.domain.enums import LayoutRole
from korean_ac.domain.hangul_codec import CHOSEONG, JONGSEONG, JUNGSEONG


@dataclass(frozen=True)
class LayoutEntry:
    role: LayoutRole
    jamo: str  # compatibility form; "" only for the "no final" entry
    keys: str  # one key, or two keys for compound medials/finals


# -----------------------------------------------------------------------------
# Layout data
# -----------------------------------------------------------------------------
#
# Keys are listed in the same order as the codec tables so that
# CHOSEONG[i] <-> _INITIAL_KEYS[i] etc. line up index for index.

_INITIAL_KEYS: Final[tuple[str, ...]] = (
    "r", "R", "s", "e", "E", "f", "a", "q", "Q",
    "t", "T", "d", "w", "W", "c", "z", "x", "v", "g",
)

_MEDIAL_KEYS: Final[tuple[str, ...]] = (
    "k", "o", "i", "O", "j", "p", "u", "P",
    "h", "hk", "ho", "hl", "y",
    "n", "nj", "np", "nl", "b",
    "m", "ml", "l",
)

_FINAL_KEYS: Final[tuple[str, ...]] = (
    "",
    "r", "R", "rt",
    "s", "sw", "sg",
    "e",
    "f", "fr", "fa", "fq", "ft", "fx", "fv", "fg",
    "a",
    "q", "qt",
    "t", "T",
    "d",
    "w", "c",
    "z",
    "x",
    "v",
    "g",
)


def _build_entries() -> tuple[LayoutEntry, ...]:
    entries: list[LayoutEntry] = []
    for role, jamo_table, key_table in (
            (LayoutRole.INITIAL, CHOSEONG, _INITIAL_KEYS),
            (LayoutRole.MEDIAL, JUNGSEONG, _MEDIAL_KEYS),
            (LayoutRole.FINAL, JONGSEONG, _FINAL_KEYS),
    ):
        if len(jamo_table) != len(key_table):
            raise ValueError("Layout table size mismatch for %s" % role.name)
        for jamo, keys in zip(jamo_table, key_table):
            entries.append(LayoutEntry(role=role, jamo=jamo, keys=keys))
    return tuple(entries)


TWO_SET_ENTRIES: Final[tuple[LayoutEntry, ...]] = _build_entries()


class KeyboardLayout:
    """Bidirectional jamo <-> key index over a fixed set of LayoutEntry.

    Forward lookups return the key(s) typing a jamo in a given role.
    Inverse lookups resolve a single key to the jamo it types in a role.
    Two-key entries (ㅘ = "hk", ㄳ = "rt") also define which jamo pairs
    combine into a compound during composition.
    """

    def __init__(self, entries: Iterable[LayoutEntry]) -> None:
        self._entries = tuple(entries)

        forward: dict[LayoutRole, dict[str, str]] = {r: {} for r in LayoutRole}
        inverse: dict[LayoutRole, dict[str, str]] = {r: {} for r in LayoutRole}
        for e in self._entries:
            if not e.jamo:
                continue
            forward[e.role][e.jamo] = e.keys
            if len(e.keys) == 1:
                inverse[e.role][e.keys] = e.jamo

        combine: dict[LayoutRole, dict[tuple[str, str], str]] = {r: {} for r in LayoutRole}
        for e in self._entries:
            if len(e.keys) != 2:
                continue
            first = inverse[e.role].get(e.keys[0])
            second = inverse[e.role].get(e.keys[1])
            if first is None or second is None:
                raise ValueError("Compound %r has unmapped keys %r" % (e.jamo, e.keys))
            combine[e.role][(first, second)] = e.jamo

        self._forward = MappingProxyType({r: MappingProxyType(m) for r, m in forward.items()})
        self._inverse = MappingProxyType({r: MappingProxyType(m) for r, m in inverse.items()})
        self._combine = MappingProxyType({r: MappingProxyType(m) for r, m in combine.items()})
        self._split = MappingProxyType({
            r: MappingProxyType({v: k for k, v in m.items()}) for r, m in combine.items()
        })
        self._all_keys = frozenset(k for m in inverse.values() for k in m)

    @property
    def entries(self) -> tuple[LayoutEntry, ...]:
        return self._entries

    def forward_table(self, role: LayoutRole) -> Mapping[str, str]:
        return self._forward[role]

    def inverse_table(self, role: LayoutRole) -> Mapping[str, str]:
        return self._inverse[role]

    # ---- jamo -> keys ----

    def keys_for(self, jamo: str, role: LayoutRole) -> Optional[str]:
        return self._forward[role].get(jamo)

    def keys_for_standalone(self, jamo: str) -> Optional[str]:
        """Keys for an isolated jamo: tried as initial, then medial, then final."""
        for role in (LayoutRole.INITIAL, LayoutRole.MEDIAL, LayoutRole.FINAL):
            keys = self._forward[role].get(jamo)
            if keys is not None:
                return keys
        return None

    # ---- key -> jamo ----

    def resolve_key(self, key: str) -> Optional[str]:
        """Return the layout key that `key` stands for, or None if unmappable.

        Shifted keys without a shifted jamo (e.g. "A") type the same jamo as
        their lower-case key.
        """
        if key in self._all_keys:
            return key
        lowered = key.lower()
        if lowered != key and lowered in self._all_keys:
            return lowered
        return None

    def jamo_for_key(self, key: str, role: LayoutRole) -> Optional[str]:
        resolved = self.resolve_key(key)
        if resolved is None:
            return None
        return self._inverse[role].get(resolved)

    # ---- compounds ----

    def combine(self, first: str, second: str, role: LayoutRole) -> Optional[str]:
        """Compound jamo typed by `first` then `second` (ㅗ+ㅏ -> ㅘ), if any."""
        return self._combine[role].get((first, second))

    def split(self, jamo: str, role: LayoutRole) -> Optional[tuple[str, str]]:
        """Inverse of combine(): (ㄳ) -> (ㄱ, ㅅ); None for a simple jamo."""
        return self._split[role].get(jamo)


LAYOUT: Final[KeyboardLayout] = KeyboardLayout(TWO_SET_ENTRIES)
