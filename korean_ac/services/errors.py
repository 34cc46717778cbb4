from __future__ import annotations


class ConfigurationError(ValueError):
    """Invalid or incomplete processor / pipeline configuration."""

    def __init__(self, message: str, *, processor_type: str | None = None,
                 tag: str | None = None, property_name: str | None = None) -> None:
        self.processor_type = processor_type
        self.tag = tag
        self.property_name = property_name
        prefix = ""
        if processor_type:
            prefix = "[{}]".format(processor_type)
            if tag:
                prefix += "[{}]".format(tag)
            if property_name:
                prefix += "[{}]".format(property_name)
            prefix += " "
        super().__init__(prefix + message)


class FieldNotFound(KeyError):
    """A document field path does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(path)

    def __str__(self) -> str:
        return "field [{}] not present".format(self.path)


class FieldPathConflict(ValueError):
    """A dotted path runs through an existing value that is not a mapping."""

    def __init__(self, path: str, part: str, found: object) -> None:
        self.path = path
        self.part = part
        super().__init__(
            "cannot set [{}] with parent object of type [{}] as part of path [{}]".format(
                part, type(found).__name__, path
            )
        )
