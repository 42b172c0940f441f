"""Clean extracted document text before it goes into the extraction prompt."""

import re

_BLANK_RUN_RE = re.compile(r"\n{3,}")
_CID_RE = re.compile(r"\(cid:\d+\)")


def collapse_blank_lines(text: str) -> str:
    """Collapse runs of 3+ consecutive newlines to exactly 2. Nothing else changes."""
    if not text:
        return ""
    return _BLANK_RUN_RE.sub("\n\n", text)


def strip_cid_artifacts(text: str) -> str:
    """Remove `(cid:N)` glyph placeholders left by PDFs with unmapped fonts."""
    if not text:
        return ""
    return _CID_RE.sub("", text)


def normalize_newlines(text: str) -> str:
    """Convert CRLF / CR line endings to LF."""
    if not text:
        return ""
    return text.replace("\r\n", "\n").replace("\r", "\n")
