"""Optical text recognition over normalized resume images (Tesseract)."""

from io import BytesIO
from typing import Optional

import pytesseract
from PIL import Image, UnidentifiedImageError

from resume_intake_ai.config import OCR_LANG, OCR_TIMEOUT_SECONDS, TESSERACT_CMD
from resume_intake_ai.utils.errors import OcrError
from resume_intake_ai.utils.logger import get_logger

logger = get_logger(__name__)

if TESSERACT_CMD:
    pytesseract.pytesseract.tesseract_cmd = TESSERACT_CMD


def recognize_text(
    image_bytes: bytes,
    language: str = OCR_LANG,
    timeout: Optional[float] = OCR_TIMEOUT_SECONDS,
) -> str:
    """
    Run one Tesseract pass over the image and return the text.
    Engine failures, a missing binary and timeouts raise OcrError; no retry here.
    """
    logger.info("Starting OCR (lang=%s)", language)
    try:
        with Image.open(BytesIO(image_bytes)) as img:
            text = pytesseract.image_to_string(img, lang=language, timeout=timeout or 0)
    except pytesseract.TesseractNotFoundError as e:
        raise OcrError("Tesseract binary not found; install tesseract-ocr or set TESSERACT_CMD") from e
    except pytesseract.TesseractError as e:
        raise OcrError("OCR failed", {"error": str(e)}) from e
    except RuntimeError as e:
        # pytesseract reports its own timeout as a bare RuntimeError
        raise OcrError("OCR timed out", {"error": str(e), "timeout": timeout}) from e
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise OcrError("OCR could not read the image", {"error": str(e)}) from e
    logger.info("OCR finished: %s characters", len(text))
    return text
