"""Heuristic completeness score for a sanitized resume record."""

from typing import Callable, List, Tuple

from resume_intake_ai.schemas.resume_record import ResumeRecord

# (label, weight, predicate); identity fields carry the most weight. Sums to 100.
CONFIDENCE_WEIGHTS: List[Tuple[str, int, Callable[[ResumeRecord], bool]]] = [
    ("name", 20, lambda r: bool(r.first_name and r.last_name)),
    ("email", 15, lambda r: bool(r.email)),
    ("phone", 10, lambda r: bool(r.phone)),
    ("headline", 10, lambda r: bool(r.headline)),
    ("linkedin", 5, lambda r: bool(r.linkedin)),
    ("github", 5, lambda r: bool(r.github)),
    ("portfolio", 5, lambda r: bool(r.portfolio)),
    ("work_experience", 15, lambda r: len(r.work_experience) > 0),
    ("education", 10, lambda r: len(r.education) > 0),
    ("skills", 5, lambda r: len(r.skill_list()) > 0),
]


def score_confidence(record: ResumeRecord) -> int:
    """Sum of satisfied weights, capped to [0, 100]."""
    score = sum(weight for _, weight, present in CONFIDENCE_WEIGHTS if present(record))
    return max(0, min(100, score))


def apply_confidence(record: ResumeRecord) -> ResumeRecord:
    return record.model_copy(update={"confidence": score_confidence(record)})
