"""Map untrusted model JSON onto the fixed ResumeRecord schema. Never raises."""

from typing import Any

from resume_intake_ai.schemas.resume_record import ResumeRecord, SkillsVariant, resume_schema
from resume_intake_ai.utils.helpers import lookup_key
from resume_intake_ai.utils.logger import get_logger

logger = get_logger(__name__)


def _sanitize_value(default: Any, candidate: Any) -> Any:
    if candidate is None:
        return default
    if isinstance(default, list):
        # Arrays are taken verbatim or not at all; elements are not filtered
        return candidate if isinstance(candidate, list) else default
    if isinstance(default, dict):
        if not isinstance(candidate, dict):
            return default
        return {key: _sanitize_value(sub_default, lookup_key(candidate, key)) for key, sub_default in default.items()}
    return candidate if type(candidate) is type(default) else default


def sanitize_dict(untrusted: Any, variant: SkillsVariant = SkillsVariant.FLAT) -> dict:
    """
    Field-by-field defaulting against the canonical schema. Each field is
    checked on its own, so one malformed field never affects its siblings.
    Unknown keys are dropped; 'confidence' is never taken from the input.
    """
    schema = resume_schema(variant)
    source = untrusted if isinstance(untrusted, dict) else {}
    sanitized: dict = {}
    defaulted = []
    for key, default in schema.items():
        candidate = lookup_key(source, key)
        value = _sanitize_value(default, candidate)
        if candidate is not None and value is default and candidate is not default:
            defaulted.append(key)
        sanitized[key] = value
    sanitized["confidence"] = 0

    if defaulted:
        logger.info("Discarded mistyped fields from model output: %s", ", ".join(defaulted))
    return sanitized


def sanitize(untrusted: Any, variant: SkillsVariant = SkillsVariant.FLAT) -> ResumeRecord:
    """Return a fully populated, type-correct ResumeRecord for any input, including None."""
    return ResumeRecord.model_validate(sanitize_dict(untrusted, variant))
