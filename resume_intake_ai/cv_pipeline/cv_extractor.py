"""Resume pipeline: document -> text -> model JSON -> sanitized, scored ResumeRecord."""

import asyncio
from typing import Optional

from resume_intake_ai.agents.extractor_agent import ExtractionOrchestrator
from resume_intake_ai.config import ExtractionConfig
from resume_intake_ai.cv_pipeline.confidence import apply_confidence
from resume_intake_ai.cv_pipeline.sanitizer import sanitize
from resume_intake_ai.cv_pipeline.text_extractor import extract_text
from resume_intake_ai.schemas.resume_record import ResumeRecord
from resume_intake_ai.services.response_decoder import decode_response
from resume_intake_ai.utils.helpers import extract_emails
from resume_intake_ai.utils.logger import get_logger

logger = get_logger(__name__)

NOT_FOUND = "Not Found"


def _merge_email_into_record(record: ResumeRecord, resume_text: str) -> ResumeRecord:
    """
    If the model didn't extract an email, take the first one found in the text.

    Runs after sanitization and before scoring, so a backfilled address earns
    the email confidence weight.
    """
    if record.email:
        return record
    emails = extract_emails(resume_text)
    if emails:
        return record.model_copy(update={"email": emails[0]})
    return record


def _log_extraction_summary(record: ResumeRecord) -> None:
    summary = record.summary
    rows = [
        ("First Name", record.first_name or NOT_FOUND),
        ("Last Name", record.last_name or NOT_FOUND),
        ("Email", record.email or NOT_FOUND),
        ("Phone", record.phone or NOT_FOUND),
        ("Location", record.location or NOT_FOUND),
        ("Headline", record.headline or NOT_FOUND),
        ("LinkedIn", record.linkedin or NOT_FOUND),
        ("GitHub", record.github or NOT_FOUND),
        ("Portfolio", record.portfolio or NOT_FOUND),
        ("LeetCode", record.leetcode or NOT_FOUND),
        ("YouTube", record.youtube or NOT_FOUND),
        ("Summary", f"{summary[:50]}..." if summary else NOT_FOUND),
        ("Skills", f"{len(record.skill_list())} skills found"),
        ("Work Experience", f"{len(record.work_experience)} positions found"),
        ("Education", f"{len(record.education)} institutions found"),
        ("Projects", f"{len(record.projects)} projects found"),
        ("Certifications", f"{len(record.certifications)} certifications found"),
        ("Confidence Score", f"{record.confidence}%"),
    ]
    width = max(len(label) for label, _ in rows)
    table = "\n".join(f"  {label.ljust(width)} | {value}" for label, value in rows)
    logger.info("Resume extraction successful:\n%s", table)


async def process_resume(
    file_bytes: bytes,
    mime_type: str,
    orchestrator: Optional[ExtractionOrchestrator] = None,
    config: Optional[ExtractionConfig] = None,
) -> ResumeRecord:
    """
    Run the full pipeline for one upload. Stages run strictly in sequence.
    Fails only with ResumeIntakeError subclasses; sanitization itself never fails.
    """
    if orchestrator is None:
        orchestrator = ExtractionOrchestrator(config or ExtractionConfig.from_env())

    # PDF parsing and OCR are blocking; keep them off the event loop
    resume_text = await asyncio.to_thread(extract_text, file_bytes, mime_type)
    logger.info("Extracted %s characters of resume text", len(resume_text))
    if not resume_text.strip():
        logger.warning("No text extracted from upload; the model will see an empty resume")

    raw = await orchestrator.extract_structured(resume_text)
    data = decode_response(raw)
    record = sanitize(data, orchestrator.config.skills_variant)
    record = _merge_email_into_record(record, resume_text)
    record = apply_confidence(record)
    _log_extraction_summary(record)
    return record


def run_cv_pipeline(
    file_bytes: bytes,
    mime_type: str,
    orchestrator: Optional[ExtractionOrchestrator] = None,
    config: Optional[ExtractionConfig] = None,
) -> ResumeRecord:
    """
    Sync wrapper around process_resume.
    Uses a fresh event loop; safe to call from sync context (e.g. Streamlit).
    """
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(
            process_resume(file_bytes, mime_type, orchestrator=orchestrator, config=config)
        )
    finally:
        loop.close()
