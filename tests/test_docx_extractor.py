"""Unit tests for DOCX text extraction with paragraph limit validation."""

import io

import pytest
from docx import Document

from screener.core.config import settings
from screener.utils.docx_extractor import extract_text_from_docx_bytes


def _docx_with_paragraphs(num_paragraphs: int) -> bytes:
    doc = Document()
    for i in range(num_paragraphs):
        doc.add_paragraph(f"This is paragraph number {i + 1}.")
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def small_paragraph_limit(monkeypatch: pytest.MonkeyPatch) -> int:
    monkeypatch.setattr(settings.app, "max_docx_paragraphs", 5)
    return 5


def test_extract_docx_within_limit():
    text, meta = extract_text_from_docx_bytes(_docx_with_paragraphs(3))

    assert meta["paragraphs"] == 3
    assert text.splitlines()[0] == "This is paragraph number 1."


def test_extract_docx_at_exact_limit(small_paragraph_limit: int):
    _text, meta = extract_text_from_docx_bytes(_docx_with_paragraphs(small_paragraph_limit))

    assert meta["paragraphs"] == small_paragraph_limit


def test_extract_docx_exceeds_limit(small_paragraph_limit: int):
    with pytest.raises(ValueError) as exc_info:
        extract_text_from_docx_bytes(_docx_with_paragraphs(small_paragraph_limit + 1))

    message = str(exc_info.value)
    assert "too many paragraphs" in message.lower()
    assert str(small_paragraph_limit + 1) in message


def test_extract_docx_skips_blank_paragraphs():
    doc = Document()
    doc.add_paragraph("Alice Smith")
    doc.add_paragraph("")
    doc.add_paragraph("Go, SQL")
    buffer = io.BytesIO()
    doc.save(buffer)

    text, meta = extract_text_from_docx_bytes(buffer.getvalue())

    assert text == "Alice Smith\nGo, SQL"
    assert meta["paragraphs"] == 2


def test_extract_docx_rejects_non_docx_bytes():
    with pytest.raises(Exception):
        extract_text_from_docx_bytes(b"%PDF-1.4 not a word document")
