from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, MutableMapping

from korean_ac.services.errors import ConfigurationError, FieldPathConflict
from korean_ac.services.ingest_document import IngestDocument
from korean_ac.services.processor import PROCESSOR_FACTORIES, KoreanAcIngestProcessor, ProcessorFactory
from korean_ac.services.processor_config import load_yaml_mapping

logger = logging.getLogger(__name__)


class Pipeline:
    """Ordered list of processors applied to each document.

    Config shape (YAML or dict):

        description: optional text
        processors:
          - korean_auto_complete_completion_splitter:
              target_field: title
              completion_field: title_ac
              choseong: true
    """

    def __init__(self, processors: Iterable[KoreanAcIngestProcessor], description: str | None = None) -> None:
        self._processors = tuple(processors)
        self.description = description

    @property
    def processors(self) -> tuple[KoreanAcIngestProcessor, ...]:
        return self._processors

    @classmethod
    def from_config(cls, config: Mapping[str, Any],
                    factories: Mapping[str, ProcessorFactory] | None = None) -> "Pipeline":
        registry = PROCESSOR_FACTORIES if factories is None else factories
        items = config.get("processors")
        if not isinstance(items, list) or not items:
            raise ConfigurationError("pipeline requires a non-empty 'processors' list")

        processors: list[KoreanAcIngestProcessor] = []
        for i, item in enumerate(items):
            if not isinstance(item, Mapping) or len(item) != 1:
                raise ConfigurationError(
                    "processor #{} must be a mapping with exactly one processor type".format(i))
            (processor_type, processor_config), = item.items()
            factory = registry.get(processor_type)
            if factory is None:
                raise ConfigurationError("No processor type exists with name [{}]".format(processor_type))
            processors.append(factory(processor_config or {}))

        description = config.get("description")
        logger.info("Built pipeline with %d processor(s)", len(processors))
        return cls(processors, description=description if isinstance(description, str) else None)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Pipeline":
        return cls.from_config(load_yaml_mapping(path))

    def execute(self, document: IngestDocument) -> IngestDocument:
        for processor in self._processors:
            document = processor.execute(document)
        return document

    def run(self, sources: Iterable[MutableMapping[str, Any]]) -> list[MutableMapping[str, Any]]:
        """Execute over plain dict documents.

        Non-mapping entries are skipped. A document whose output path is
        blocked by an existing non-mapping value is logged and passed on as
        it stands.
        """
        results: list[MutableMapping[str, Any]] = []
        for i, source in enumerate(sources):
            if not isinstance(source, MutableMapping):
                logger.warning("Skipping document #%d: expected a mapping, got %s", i, type(source).__name__)
                continue
            try:
                self.execute(IngestDocument(source))
            except FieldPathConflict as e:
                logger.warning("Document #%d: %s", i, e)
            results.append(source)
        return results
