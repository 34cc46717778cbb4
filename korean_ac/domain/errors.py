from __future__ import annotations

"""Errors raised by the Hangul domain layer.

These only surface on internal misuse of the codec. The public text
transformations check character classes first and never raise them.
"""


class HangulError(ValueError):
    """Base class for Hangul codec errors."""


class OutOfRange(HangulError):
    """A character or codepoint is outside the Hangul syllable block."""


class InvalidIndex(HangulError):
    """A jamo index is outside its valid range for composition."""
