"""
Service package exports.

Provides a stable import surface for the processor, its configuration and
the pipeline runner.
"""

from .completion import CompletionAggregator  # noqa: F401
from .errors import ConfigurationError, FieldNotFound, FieldPathConflict  # noqa: F401
from .ingest_document import IngestDocument  # noqa: F401
from .pipeline import Pipeline  # noqa: F401
from .processor import PROCESSOR_FACTORIES, KoreanAcIngestProcessor  # noqa: F401
from .processor_config import CompletionOptions, ProcessorConfig  # noqa: F401

__all__ = [
    "CompletionAggregator",
    "CompletionOptions",
    "ConfigurationError",
    "FieldNotFound",
    "FieldPathConflict",
    "IngestDocument",
    "KoreanAcIngestProcessor",
    "PROCESSOR_FACTORIES",
    "Pipeline",
    "ProcessorConfig",
]
