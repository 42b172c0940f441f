"""Prepare scanned resume images for OCR: grayscale, sharpen, auto-contrast."""

from io import BytesIO

from PIL import Image, ImageFilter, ImageOps, UnidentifiedImageError

from resume_intake_ai.utils.errors import ImageProcessingError
from resume_intake_ai.utils.logger import get_logger

logger = get_logger(__name__)


def normalize_image(image_bytes: bytes) -> bytes:
    """
    Return a PNG of the image converted to grayscale, sharpened, and
    contrast-normalized, in that order. In-memory only.
    """
    if not image_bytes:
        raise ImageProcessingError("Empty image upload")
    try:
        with Image.open(BytesIO(image_bytes)) as img:
            img.load()
            oriented = ImageOps.exif_transpose(img)
            gray = ImageOps.grayscale(oriented)
            sharpened = gray.filter(ImageFilter.SHARPEN)
            normalized = ImageOps.autocontrast(sharpened)
            out = BytesIO()
            normalized.save(out, format="PNG")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        logger.warning("Image normalization failed: %s", e)
        raise ImageProcessingError("Could not decode or normalize the image", {"error": str(e)}) from e
    logger.debug("Normalized image to %sx%s grayscale", normalized.width, normalized.height)
    return out.getvalue()
