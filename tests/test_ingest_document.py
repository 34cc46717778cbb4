from __future__ import annotations

import pytest

from korean_ac.services.errors import FieldNotFound, FieldPathConflict
from korean_ac.services.ingest_document import IngestDocument


def test_get_top_level_and_nested() -> None:
    doc = IngestDocument({"title": "한국", "name": {"ko": "삼성", "en": "Samsung"}})
    assert doc.get_field_value("title") == "한국"
    assert doc.get_field_value("name.ko") == "삼성"
    assert doc.has_field("name.en")
    assert not doc.has_field("name.ja")


def test_missing_field() -> None:
    doc = IngestDocument({"title": "한국"})
    assert doc.get_field_value("body", ignore_missing=True) is None
    assert doc.get_field_value("title.ko", ignore_missing=True) is None
    with pytest.raises(FieldNotFound) as exc:
        doc.get_field_value("body")
    assert isinstance(exc.value, KeyError)
    assert "body" in str(exc.value)


def test_explicit_none_is_present() -> None:
    doc = IngestDocument({"title": None})
    assert doc.has_field("title")
    assert doc.get_field_value("title") is None


def test_set_creates_intermediate_mappings() -> None:
    doc = IngestDocument()
    doc.set_field_value("ac.title", ["ㄱ"])
    assert doc.source == {"ac": {"title": ["ㄱ"]}}


def test_set_replaces_existing_value() -> None:
    doc = IngestDocument({"ac": "old", "keep": 1})
    doc.set_field_value("ac", ["new"])
    assert doc.source == {"ac": ["new"], "keep": 1}


def test_set_through_non_mapping_raises_and_keeps_document() -> None:
    doc = IngestDocument({"b": "scalar", "n": {"x": 1}})
    with pytest.raises(FieldPathConflict) as exc:
        doc.set_field_value("b.c", ["ㅎ"])
    assert isinstance(exc.value, ValueError)
    assert "b.c" in str(exc.value)
    with pytest.raises(FieldPathConflict):
        doc.set_field_value("n.x.y", 2)
    assert doc.source == {"b": "scalar", "n": {"x": 1}}


def test_wraps_source_in_place() -> None:
    source = {"a": 1}
    doc = IngestDocument(source)
    doc.set_field_value("b", 2)
    assert source == {"a": 1, "b": 2}
