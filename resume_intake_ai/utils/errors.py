"""
Exceptions raised by the resume intake pipeline.

Every failure the pipeline surfaces to its caller is a ResumeIntakeError
subclass, so the caller can tell "bad input", "upstream unavailable" and
"upstream returned garbage" apart without inspecting messages.
"""

from typing import Any, List, Optional


class ResumeIntakeError(Exception):
    """Base exception for all resume intake errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Document intake
# =============================================================================


class UnsupportedFormatError(ResumeIntakeError):
    """MIME type outside the supported set."""

    def __init__(self, mime_type: str) -> None:
        super().__init__(f"Unsupported file type: {mime_type or '<none>'}", {"mime_type": mime_type})
        self.mime_type = mime_type


class DocumentExtractionError(ResumeIntakeError):
    """A supported document could not be read (corrupt file, bad encoding)."""

    pass


class ImageProcessingError(ResumeIntakeError):
    """Image could not be decoded or normalized before OCR."""

    pass


class OcrError(ResumeIntakeError):
    """The OCR engine failed or timed out."""

    pass


# =============================================================================
# Model extraction
# =============================================================================


class ModelError(ResumeIntakeError):
    """Base exception for language-model failures."""

    pass


class ContentBlockedError(ModelError):
    """The model declined to answer (content policy, refusal, empty payload)."""

    def __init__(self, model: str, reason: str = "") -> None:
        message = f"Model '{model}' returned no content"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, {"model": model, "reason": reason})
        self.model = model
        self.reason = reason


class ModelRequestError(ModelError):
    """A non-availability failure (auth, quota, bad request); no other model is tried."""

    def __init__(self, model: str, cause: BaseException) -> None:
        super().__init__(
            f"Model '{model}' request failed: {cause}",
            {"model": model, "error_type": type(cause).__name__},
        )
        self.model = model
        self.cause = cause


class AllModelsExhaustedError(ModelError):
    """Every configured model candidate was unavailable."""

    def __init__(self, attempted: List[str], last_error: Optional[BaseException] = None) -> None:
        message = "No configured model was available"
        if last_error is not None:
            message = f"{message}; last error: {last_error}"
        super().__init__(message, {"attempted": list(attempted)})
        self.attempted = list(attempted)
        self.last_error = last_error


# =============================================================================
# Response decoding
# =============================================================================


class MalformedResponseError(ResumeIntakeError):
    """The model answered but no JSON object could be recovered."""

    NO_JSON_OBJECT = "no_json_object"
    INVALID_JSON = "invalid_json"

    def __init__(self, reason: str, raw_text: str = "", message: Optional[str] = None) -> None:
        super().__init__(
            message or f"Could not recover a JSON object from the model response ({reason})",
            {"reason": reason},
        )
        self.reason = reason
        self.raw_text = raw_text
