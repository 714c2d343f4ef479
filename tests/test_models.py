from pathlib import Path

import pytest

from pytxt.domain.models import Document, ExportFormat, ExportResult, TextStats


def test_document_defaults():
    d = Document()
    assert d.text == ""


def test_document_mutation():
    d = Document(text="hi")
    d.text = "bye"
    assert d.text == "bye"


@pytest.mark.parametrize(
    "raw, expected",
    [
        (ExportFormat.HTML, ExportFormat.HTML),
        ("rtf", ExportFormat.RTF),
        ("RTF", ExportFormat.RTF),
        (" html ", ExportFormat.HTML),
    ],
)
def test_export_format_parse(raw, expected):
    assert ExportFormat.parse(raw) is expected


def test_export_format_parse_unknown():
    with pytest.raises(ValueError):
        ExportFormat.parse("docx")


def test_export_result_variants(tmp_path):
    ok = ExportResult.success(tmp_path / "a.rtf")
    bad = ExportResult.io_error(Path("b.rtf"), "disk full")
    assert ok.ok and ok.error is None
    assert not bad.ok and bad.error == "disk full"


def test_text_stats_is_value_object():
    assert TextStats(1, 2) == TextStats(word_count=1, char_count=2)
