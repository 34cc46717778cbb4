from __future__ import annotations

import logging
from typing import Any, Callable, Final, Mapping

from korean_ac.services.completion import CompletionAggregator
from korean_ac.services.ingest_document import IngestDocument
from korean_ac.services.processor_config import PROCESSOR_TYPE, ProcessorConfig

logger = logging.getLogger(__name__)


class KoreanAcIngestProcessor:
    """Ingest processor writing Korean autocomplete candidates to a field.

    Reads `target_field`; when it holds text, the candidate set is stored in
    `completion_field` as a sorted list, replacing any previous value. A
    missing or non-text target, or a config with every transformation
    disabled, leaves the document untouched.
    """

    TYPE: Final[str] = PROCESSOR_TYPE

    def __init__(self, config: ProcessorConfig) -> None:
        self._config = config
        self._aggregator = CompletionAggregator(config.options)

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "KoreanAcIngestProcessor":
        return cls(ProcessorConfig.from_mapping(config))

    @property
    def config(self) -> ProcessorConfig:
        return self._config

    @property
    def tag(self) -> str | None:
        return self._config.tag

    def execute(self, document: IngestDocument) -> IngestDocument:
        if not self._config.options.any_enabled:
            return document

        value = document.get_field_value(self._config.target_field, ignore_missing=True)
        if not isinstance(value, str):
            logger.debug("Field [%s] missing or not text; document left unchanged", self._config.target_field)
            return document

        candidates = self._aggregator.build(value)
        document.set_field_value(self._config.completion_field, sorted(candidates))
        return document

    def __repr__(self) -> str:
        return "KoreanAcIngestProcessor(tag={!r}, target_field={!r}, completion_field={!r})".format(
            self._config.tag, self._config.target_field, self._config.completion_field
        )


ProcessorFactory = Callable[[Mapping[str, Any]], KoreanAcIngestProcessor]

PROCESSOR_FACTORIES: Final[dict[str, ProcessorFactory]] = {
    KoreanAcIngestProcessor.TYPE: KoreanAcIngestProcessor.from_mapping,
}
