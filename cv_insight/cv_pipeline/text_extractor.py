"""Extract raw text from uploaded CV files (PDF, DOCX, TXT). In-memory only."""

import re
import unicodedata
from io import BytesIO
from typing import Optional

from cv_insight.config import CV_MAX_CHARS, CV_MAX_UPLOAD_BYTES, SUPPORTED_CV_EXTENSIONS
from cv_insight.utils.logger import get_logger

logger = get_logger(__name__)


def _normalize_unicode(text: str) -> str:
    """Normalize unicode (NFC)."""
    if not text:
        return ""
    return unicodedata.normalize("NFC", text)


def clean_cv_text(text: str, max_chars: int = CV_MAX_CHARS) -> str:
    """Remove excessive whitespace and normalize unicode for CV content."""
    if not text or not text.strip():
        return ""
    t = _normalize_unicode(text)
    t = t.replace("\r\n", "\n").replace("\r", "\n")
    t = re.sub(r"[ \t]+", " ", t)
    t = re.sub(r"\n\s*\n\s*\n", "\n\n", t)
    t = t.strip()
    if len(t) > max_chars:
        t = t[:max_chars] + "\n\n[Content truncated.]"
    return t


def _extract_pdf(bytes_io: BytesIO) -> Optional[str]:
    """Extract text from PDF using pdfplumber, one block per page."""
    try:
        import pdfplumber
    except ImportError:
        logger.warning("pdfplumber not installed; install with: pip install pdfplumber")
        return None
    try:
        with pdfplumber.open(bytes_io) as pdf:
            parts = []
            for page in pdf.pages:
                ptext = page.extract_text()
                if ptext:
                    parts.append(ptext)
            return "\n\n".join(parts) if parts else None
    except Exception as e:
        logger.exception("PDF extraction failed: %s", e)
        return None


def _extract_docx(bytes_io: BytesIO) -> Optional[str]:
    """Extract paragraph text (and table cells) from DOCX using python-docx."""
    try:
        from docx import Document
    except ImportError:
        logger.warning("python-docx not installed; install with: pip install python-docx")
        return None
    try:
        doc = Document(bytes_io)
        parts = [p.text for p in doc.paragraphs if p.text.strip()]
        for table in doc.tables:
            for row in table.rows:
                cells = [c.text.strip() for c in row.cells if c.text.strip()]
                if cells:
                    parts.append(" | ".join(cells))
        return "\n".join(parts) if parts else None
    except Exception as e:
        logger.exception("DOCX extraction failed: %s", e)
        return None


def _extract_txt(file_bytes: bytes) -> Optional[str]:
    text = file_bytes.decode("utf-8-sig", errors="replace")
    return text if text.strip() else None


def extract_text_from_file(file_bytes: bytes, filename: str) -> Optional[str]:
    """
    Extract and clean text from an uploaded CV file (PDF, DOCX or TXT).
    File is read from bytes in memory; no disk write.
    Returns cleaned text or None if the type is unsupported, the upload is
    empty or larger than CV_MAX_UPLOAD_BYTES, or extraction fails.
    """
    name_lower = (filename or "").lower().strip()
    if not name_lower.endswith(SUPPORTED_CV_EXTENSIONS):
        logger.warning("Unsupported file type: %s", filename)
        return None
    if not file_bytes:
        logger.warning("Empty upload: %s", filename)
        return None
    if len(file_bytes) > CV_MAX_UPLOAD_BYTES:
        logger.warning(
            "Upload %s is %d bytes; limit is %d", filename, len(file_bytes), CV_MAX_UPLOAD_BYTES
        )
        return None

    raw: Optional[str]
    if name_lower.endswith(".pdf"):
        raw = _extract_pdf(BytesIO(file_bytes))
    elif name_lower.endswith(".docx"):
        raw = _extract_docx(BytesIO(file_bytes))
    else:
        raw = _extract_txt(file_bytes)

    if not raw or not raw.strip():
        return None
    return clean_cv_text(raw)
