"""Service exports."""

from .response_decoder import decode_response
from .text_cleaner import collapse_blank_lines, normalize_newlines, strip_cid_artifacts

__all__ = [
    "decode_response",
    "collapse_blank_lines",
    "normalize_newlines",
    "strip_cid_artifacts",
]
