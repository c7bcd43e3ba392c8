from io import BytesIO

from docx import Document

from screener.core.config import settings


def extract_text_from_docx_bytes(data: bytes) -> tuple[str, dict]:
    """Extract paragraph text from DOCX bytes.

    Used for providers that accept PDFs inline but not Word documents.

    Args:
        data: Raw bytes of the DOCX file.

    Returns:
        tuple: (text joined by newlines, {"paragraphs": non-empty count})

    Raises:
        ValueError: If the document has more paragraphs than configured.
    """
    doc = Document(BytesIO(data))

    para_count = len(doc.paragraphs)
    max_paras = settings.app.max_docx_paragraphs
    if para_count > max_paras:
        raise ValueError(
            f"DOCX has too many paragraphs: {para_count} (max allowed: {max_paras})"
        )

    paragraphs = [p.text for p in doc.paragraphs if p.text]
    return "\n".join(paragraphs).strip(), {"paragraphs": len(paragraphs)}
