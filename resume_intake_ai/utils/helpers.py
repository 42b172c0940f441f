"""Helper utilities for the resume intake pipeline."""

import re
from typing import Any, List, Optional

_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


def extract_emails(text: str) -> List[str]:
    """Extract email addresses from text using regex, in order of appearance."""
    if not text:
        return []
    return list(dict.fromkeys(_EMAIL_RE.findall(text)))


def lookup_key(data: dict, key: str) -> Optional[Any]:
    """
    Return data[key], falling back to a case-insensitive key match.
    Models often answer with 'firstname' for 'firstName'.
    """
    if key in data:
        return data[key]
    lowered = key.lower()
    for candidate, value in data.items():
        if isinstance(candidate, str) and candidate.lower() == lowered:
            return value
    return None


def preview(text: str, limit: int = 200) -> str:
    """Single-line, truncated view of text for log messages."""
    flat = " ".join((text or "").split())
    if len(flat) > limit:
        return flat[:limit] + "…"
    return flat
