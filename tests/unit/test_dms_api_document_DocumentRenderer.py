"""Unit tests for proxy document rendering and parsing."""

import pytest

from dms.api.document.DocumentRenderer import DocumentRenderer
from dms.api.link.ExternalLinkRecord import ExternalLinkRecord
from dms.api.link.validate_record import validate_record
from dms.api.path.RootQualifier import DriveRootQualifier

pytestmark = pytest.mark.document

EXPECTED_SPEC_DOCUMENT = """---
external_path: /tmp/spec.pdf
categories: Work
audience:
tags: draft
created_date:
file_type: pdf
file_size: 2048
---
Design notes for the sync engine

Read before the review.

[Open External File](/tmp/spec.pdf)
"""


@pytest.fixture
def renderer() -> DocumentRenderer:
    return DocumentRenderer()


def test_render_layout(renderer, spec_record):
    assert renderer.render(spec_record) == EXPECTED_SPEC_DOCUMENT


def test_render_is_byte_stable(renderer, spec_record):
    assert renderer.render(spec_record) == renderer.render(spec_record.model_copy())


def test_render_ignores_last_modified(renderer, spec_record):
    touched = spec_record.model_copy(update={"last_modified": 123})
    assert renderer.render(touched) == renderer.render(spec_record)


def test_render_created_date_iso(renderer, spec_record):
    record = spec_record.model_copy(update={"created_date": 1_700_000_000_000})
    assert "created_date: 2023-11-14T22:13:20.000+00:00\n" in renderer.render(record)


def test_render_link_target_uses_root_qualifier(spec_record):
    renderer = DocumentRenderer(DriveRootQualifier("C:"))
    record = spec_record.model_copy(update={"path": "/tmp/my spec.pdf"})
    text = renderer.render(record)
    assert "external_path: /tmp/my spec.pdf\n" in text
    assert text.endswith("[Open External File](C:/tmp/my%20spec.pdf)\n")


def test_render_url_target_untouched(renderer, spec_record):
    record = spec_record.model_copy(update={"path": "https://example.com/a%20b"})
    assert renderer.render(record).endswith("[Open External File](https://example.com/a%20b)\n")


def test_parse_round_trip(renderer, spec_record):
    record = spec_record.model_copy(update={"created_date": 1_700_000_000_123, "audience": ["Team", "Client"]})
    partial = renderer.parse(renderer.render(record))
    assert partial.external_path == "/tmp/spec.pdf"
    assert partial.categories == ["Work"]
    assert partial.audience == ["Team", "Client"]
    assert partial.tags == ["draft"]
    assert partial.created_date == 1_700_000_000_123
    assert partial.file_type == "pdf"
    assert partial.file_size == 2048
    assert partial.summary == record.summary
    assert partial.notes == record.notes


@pytest.mark.parametrize(
    ("summary", "notes"),
    [
        ("", ""),
        ("Only a summary", ""),
        ("", "Only notes"),
        ("Two\nlines", "First paragraph\n\nSecond paragraph"),
    ],
)
def test_parse_round_trip_body_shapes(renderer, summary, notes):
    record = validate_record(ExternalLinkRecord(title="T", path="/x", summary=summary, notes=notes))
    partial = renderer.parse(renderer.render(record))
    assert partial.summary == summary
    assert partial.notes == notes


def test_parse_accepts_crlf_and_bom(renderer, spec_record):
    text = "\ufeff" + renderer.render(spec_record).replace("\n", "\r\n")
    partial = renderer.parse(text)
    assert partial.external_path == "/tmp/spec.pdf"
    assert partial.notes == "Read before the review."


def test_parse_user_edit(renderer, spec_record):
    text = renderer.render(spec_record).replace("tags: draft", "tags: draft,  reviewed ,")
    assert renderer.parse(text).tags == ["draft", "reviewed"]


@pytest.mark.parametrize("text", ["", "no header here", "---\nexternal_path: /x\n(no closing fence)"])
def test_parse_without_header_is_empty(renderer, text):
    assert renderer.parse(text).is_empty()


def test_parse_bad_values_are_dropped(renderer):
    partial = renderer.parse("---\nexternal_path: /x\ncreated_date: yesterday\nfile_size: big\n---\nS\n")
    assert partial.external_path == "/x"
    assert partial.created_date is None
    assert partial.file_size is None
    assert partial.summary == "S"
    assert partial.notes == ""
