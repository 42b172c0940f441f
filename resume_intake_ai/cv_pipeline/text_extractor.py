"""Extract raw text from uploaded resume files (PDF, DOCX, TXT, PNG/JPEG). In-memory only."""

from io import BytesIO

import pdfplumber
from docx import Document

from resume_intake_ai.config import (
    DOCX_MIME,
    JPEG_MIME,
    MIME_ALIASES,
    OCR_LANG,
    PDF_MIME,
    PNG_MIME,
    SUPPORTED_MIME_TYPES,
    TEXT_MIME,
)
from resume_intake_ai.cv_pipeline.image_normalizer import normalize_image
from resume_intake_ai.cv_pipeline.ocr import recognize_text
from resume_intake_ai.services.text_cleaner import (
    collapse_blank_lines,
    normalize_newlines,
    strip_cid_artifacts,
)
from resume_intake_ai.utils.errors import DocumentExtractionError, UnsupportedFormatError
from resume_intake_ai.utils.logger import get_logger, quiet_third_party_loggers

logger = get_logger(__name__)
quiet_third_party_loggers()


def normalize_mime_type(mime_type: str) -> str:
    """Lowercase, drop parameters (e.g. '; charset=utf-8') and resolve aliases."""
    base = (mime_type or "").split(";", 1)[0].strip().lower()
    return MIME_ALIASES.get(base, base)


def _extract_pdf(file_bytes: bytes) -> str:
    """
    Text layer only. Image-only PDFs come back (nearly) empty; they are not
    rasterized for OCR.
    """
    try:
        with pdfplumber.open(BytesIO(file_bytes)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        # pdfplumber wraps pdfminer parser errors differently across releases
        logger.warning("PDF extraction failed: %s", e)
        raise DocumentExtractionError("Could not read the PDF document", {"error": str(e)}) from e
    text = strip_cid_artifacts("\n".join(pages))
    if not text.strip():
        logger.warning("PDF has no extractable text layer (scanned PDF?)")
    return text


def _extract_docx(file_bytes: bytes) -> str:
    """Paragraph and table text from python-docx; styling is discarded."""
    try:
        doc = Document(BytesIO(file_bytes))
    except Exception as e:
        # python-docx raises zipfile/KeyError/PackageNotFoundError depending on the damage
        logger.warning("DOCX extraction failed: %s", e)
        raise DocumentExtractionError("Could not read the DOCX document", {"error": str(e)}) from e
    parts = [p.text for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if cells:
                parts.append(" | ".join(dict.fromkeys(cells)))
    return "\n\n".join(parts)


def _extract_plain_text(file_bytes: bytes) -> str:
    text = file_bytes.decode("utf-8-sig", errors="replace")
    if "\ufffd" in text:
        logger.warning("Text upload is not clean UTF-8; undecodable bytes were replaced")
    return text


def _extract_image(file_bytes: bytes) -> str:
    return recognize_text(normalize_image(file_bytes), language=OCR_LANG)


_EXTRACTORS = {
    PDF_MIME: _extract_pdf,
    DOCX_MIME: _extract_docx,
    TEXT_MIME: _extract_plain_text,
    PNG_MIME: _extract_image,
    JPEG_MIME: _extract_image,
}


def extract_text(file_bytes: bytes, mime_type: str) -> str:
    """
    Convert an uploaded document into plain text, routed by its declared MIME type.
    Raises UnsupportedFormatError for anything outside PDF, DOCX, plain text, PNG and JPEG.
    """
    mime = normalize_mime_type(mime_type)
    extractor = _EXTRACTORS.get(mime)
    if extractor is None:
        logger.warning("Unsupported file type: %s", mime_type)
        raise UnsupportedFormatError(mime_type)

    logger.info("Processing file of type: %s (%s bytes)", SUPPORTED_MIME_TYPES[mime], len(file_bytes or b""))
    raw = extractor(file_bytes or b"")
    return collapse_blank_lines(normalize_newlines(raw))
