from __future__ import annotations

import logging
from typing import Any, Callable

from korean_ac.domain.choseong import KoreanChoseongParser
from korean_ac.domain.eng2kor import Eng2KorConverter
from korean_ac.domain.jamo import KoreanJamoParser
from korean_ac.domain.kor2eng import Kor2EngConverter
from korean_ac.domain.substrings import generate_substrings
from korean_ac.services.processor_config import CompletionOptions

logger = logging.getLogger(__name__)


class CompletionAggregator:
    """Collect autocomplete candidates for one text value.

    Each enabled transformation (choseong, jamo, kor2eng, eng2kor) runs over
    the input; every suffix of every non-empty result goes into one set.
    The result is a frozenset: candidate order carries no meaning.
    """

    def __init__(self, options: CompletionOptions) -> None:
        self._options = options
        self._transforms: list[tuple[str, Callable[[str], str]]] = []

        if options.choseong:
            parser = KoreanChoseongParser(options.remove_single_jaeum, options.remove_single_moeum)
            self._transforms.append(("choseong", parser.parse))
        if options.jamo:
            self._transforms.append(("jamo", KoreanJamoParser().parse))
        if options.kor2eng:
            self._transforms.append(("kor2eng", Kor2EngConverter(options.convert_single_korean_letter).convert))
        if options.eng2kor:
            self._transforms.append(("eng2kor", Eng2KorConverter(options.convert_single_korean_letter).convert))

    @property
    def options(self) -> CompletionOptions:
        return self._options

    def variants(self, text: str) -> dict[str, str]:
        """Output of each enabled transformation, keyed by its name."""
        return {name: fn(text) for name, fn in self._transforms}

    def build(self, value: Any) -> frozenset[str]:
        if not isinstance(value, str):
            logger.debug("Skipping non-text value of type %s", type(value).__name__)
            return frozenset()

        candidates: set[str] = set()
        for name, variant in self.variants(value).items():
            if not variant:
                continue
            candidates.update(generate_substrings(variant))
            logger.debug("%s(%r) -> %r", name, value, variant)
        return frozenset(candidates)
