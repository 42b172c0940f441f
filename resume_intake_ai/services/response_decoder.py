"""Recover the JSON object embedded in a raw language-model response."""

import json
import re
from typing import Optional

from resume_intake_ai.utils.errors import MalformedResponseError
from resume_intake_ai.utils.helpers import preview
from resume_intake_ai.utils.logger import get_logger

logger = get_logger(__name__)

_JSON_FENCE_RE = re.compile(r"```[ \t]*json[ \t]*\r?\n?(.*?)```", re.IGNORECASE | re.DOTALL)
_ANY_FENCE_RE = re.compile(r"```[ \t]*\r?\n(.*?)```", re.DOTALL)


def _fenced_block(text: str) -> Optional[str]:
    """Interior of the first ```json fence, else of the first unlabeled fence."""
    match = _JSON_FENCE_RE.search(text) or _ANY_FENCE_RE.search(text)
    return match.group(1) if match else None


def decode_response(raw_text: str) -> dict:
    """
    Parse the single JSON object in a model response.

    Markdown fences are unwrapped first; inside the remaining text the span
    from the first '{' to the last '}' is parsed. Models bound their answer
    with matching outer braces even when they add chatter around it.

    Raises MalformedResponseError with reason 'no_json_object' when no braces
    are found, or 'invalid_json' when the span does not parse to an object.
    """
    text = raw_text or ""
    candidate = _fenced_block(text)
    if candidate is None or "{" not in candidate:
        candidate = text

    start = candidate.find("{")
    end = candidate.rfind("}")
    if start == -1 or end == -1 or end < start:
        logger.error("No JSON object in model response: %s", preview(text))
        raise MalformedResponseError(MalformedResponseError.NO_JSON_OBJECT, raw_text=text)

    try:
        data = json.loads(candidate[start : end + 1])
    except (json.JSONDecodeError, RecursionError) as e:
        logger.error("Model response JSON did not parse (%s): %s", e, preview(text))
        raise MalformedResponseError(MalformedResponseError.INVALID_JSON, raw_text=text) from e

    if not isinstance(data, dict):
        raise MalformedResponseError(MalformedResponseError.INVALID_JSON, raw_text=text)
    return data
