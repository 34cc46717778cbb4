from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final, Mapping

import yaml

from korean_ac.services.errors import ConfigurationError

logger = logging.getLogger(__name__)

PROCESSOR_TYPE: Final[str] = "korean_auto_complete_completion_splitter"

TARGET_FIELD_NAME: Final[str] = "target_field"
COMPLETION_FIELD_NAME: Final[str] = "completion_field"
ACTIVE_CHOSEONG_FILTER: Final[str] = "choseong"
ACTIVE_JAMO_FILTER: Final[str] = "jamo"
ACTIVE_KOR2ENG_FILTER: Final[str] = "kor2eng"
ACTIVE_ENG2KOR_FILTER: Final[str] = "eng2kor"
REMOVE_SINGLE_JAEUM_OPTION: Final[str] = "remove_single_jaeum"
REMOVE_SINGLE_MOEUM_OPTION: Final[str] = "remove_single_moeum"
CONVERT_SINGLE_KOREAN_LETTER_OPTION: Final[str] = "convert_single_korean_letter"
TAG: Final[str] = "tag"
DESCRIPTION: Final[str] = "description"


@dataclass(frozen=True)
class CompletionOptions:
    """Which transformations run, and how they treat standalone jamo."""

    choseong: bool = False
    jamo: bool = False
    kor2eng: bool = False
    eng2kor: bool = False
    remove_single_jaeum: bool = False
    remove_single_moeum: bool = False
    convert_single_korean_letter: bool = False

    @property
    def any_enabled(self) -> bool:
        return self.choseong or self.jamo or self.kor2eng or self.eng2kor


@dataclass(frozen=True)
class ProcessorConfig:
    target_field: str
    completion_field: str
    options: CompletionOptions = field(default_factory=CompletionOptions)
    tag: str | None = None
    description: str | None = None

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "ProcessorConfig":
        """Validate a processor config mapping.

        Required: target_field, completion_field.
        Optional booleans default to false. Unknown keys are rejected.
        """
        if not isinstance(config, Mapping):
            raise ConfigurationError("processor config must be a mapping, got %r" % (config,),
                                     processor_type=PROCESSOR_TYPE)
        remaining = dict(config)
        tag = _read_optional_string(remaining, TAG, None)
        description = _read_optional_string(remaining, DESCRIPTION, tag)

        target_field = _read_required_string(remaining, TARGET_FIELD_NAME, tag)
        completion_field = _read_required_string(remaining, COMPLETION_FIELD_NAME, tag)

        options = CompletionOptions(
            choseong=_read_boolean(remaining, ACTIVE_CHOSEONG_FILTER, tag),
            jamo=_read_boolean(remaining, ACTIVE_JAMO_FILTER, tag),
            kor2eng=_read_boolean(remaining, ACTIVE_KOR2ENG_FILTER, tag),
            eng2kor=_read_boolean(remaining, ACTIVE_ENG2KOR_FILTER, tag),
            remove_single_jaeum=_read_boolean(remaining, REMOVE_SINGLE_JAEUM_OPTION, tag),
            remove_single_moeum=_read_boolean(remaining, REMOVE_SINGLE_MOEUM_OPTION, tag),
            convert_single_korean_letter=_read_boolean(remaining, CONVERT_SINGLE_KOREAN_LETTER_OPTION, tag),
        )

        if remaining:
            raise ConfigurationError(
                "processor does not support one or more provided configuration parameters %s"
                % sorted(remaining),
                processor_type=PROCESSOR_TYPE,
                tag=tag,
            )

        return cls(
            target_field=target_field,
            completion_field=completion_field,
            options=options,
            tag=tag,
            description=description,
        )


# -----------------------------------------------------------------------------
# Property readers
# -----------------------------------------------------------------------------

def parse_boolean(value: Any) -> bool:
    """True only for True or a string equal to "true" (any case)."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, str):
        return value.lower() == "true"
    raise TypeError("not a boolean: %r" % (value,))


def _read_boolean(config: dict[str, Any], name: str, tag: str | None) -> bool:
    value = config.pop(name, None)
    try:
        return parse_boolean(value)
    except TypeError:
        raise ConfigurationError(
            "property isn't a boolean, but of type [{}]".format(type(value).__name__),
            processor_type=PROCESSOR_TYPE,
            tag=tag,
            property_name=name,
        ) from None


def _read_required_string(config: dict[str, Any], name: str, tag: str | None) -> str:
    value = config.pop(name, None)
    if value is None:
        raise ConfigurationError("required property is missing",
                                 processor_type=PROCESSOR_TYPE, tag=tag, property_name=name)
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError("property must be a non-empty string, got %r" % (value,),
                                 processor_type=PROCESSOR_TYPE, tag=tag, property_name=name)
    return value


def _read_optional_string(config: dict[str, Any], name: str, tag: str | None) -> str | None:
    value = config.pop(name, None)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError("property must be a string, got %r" % (value,),
                                 processor_type=PROCESSOR_TYPE, tag=tag, property_name=name)
    return value


# -----------------------------------------------------------------------------
# YAML loading
# -----------------------------------------------------------------------------

def load_yaml_mapping(path: str | Path) -> dict[str, Any]:
    """Load a YAML file that must hold a mapping. An empty file yields {}."""
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("expected a mapping at the top of {}".format(p))
    logger.debug("Loaded configuration from %s", p)
    return data
