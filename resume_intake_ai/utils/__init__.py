"""Utility exports."""

from .errors import (
    AllModelsExhaustedError,
    ContentBlockedError,
    DocumentExtractionError,
    ImageProcessingError,
    MalformedResponseError,
    ModelError,
    ModelRequestError,
    OcrError,
    ResumeIntakeError,
    UnsupportedFormatError,
)
from .helpers import extract_emails, lookup_key, preview
from .logger import get_logger, quiet_third_party_loggers

__all__ = [
    "get_logger",
    "quiet_third_party_loggers",
    "extract_emails",
    "lookup_key",
    "preview",
    "ResumeIntakeError",
    "UnsupportedFormatError",
    "DocumentExtractionError",
    "ImageProcessingError",
    "OcrError",
    "ModelError",
    "ContentBlockedError",
    "ModelRequestError",
    "AllModelsExhaustedError",
    "MalformedResponseError",
]
