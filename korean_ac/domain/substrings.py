from __future__ import annotations


def generate_substrings(text: str) -> list[str]:
    """Every suffix of `text`, longest first ("abc" -> ["abc", "bc", "c"]).

    Indexing all suffixes lets autocomplete match from the middle of a word.
    """
    return [text[i:] for i in range(len(text))]
