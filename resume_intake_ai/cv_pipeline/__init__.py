"""Resume intake pipeline: text extraction, OCR, LLM extraction, sanitizing, scoring."""

from resume_intake_ai.cv_pipeline.confidence import score_confidence
from resume_intake_ai.cv_pipeline.cv_extractor import process_resume, run_cv_pipeline
from resume_intake_ai.cv_pipeline.image_normalizer import normalize_image
from resume_intake_ai.cv_pipeline.ocr import recognize_text
from resume_intake_ai.cv_pipeline.sanitizer import sanitize
from resume_intake_ai.cv_pipeline.text_extractor import extract_text
from resume_intake_ai.schemas.resume_record import ResumeRecord

__all__ = [
    "process_resume",
    "run_cv_pipeline",
    "extract_text",
    "normalize_image",
    "recognize_text",
    "sanitize",
    "score_confidence",
    "ResumeRecord",
]
