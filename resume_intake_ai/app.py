"""
Resume Intake AI – Streamlit frontend.
No business logic in layout; extraction runs through cv_pipeline.
"""

import json

import streamlit as st

from resume_intake_ai.config import ExtractionConfig, OPENAI_API_KEY, SUPPORTED_MIME_TYPES
from resume_intake_ai.cv_pipeline import run_cv_pipeline
from resume_intake_ai.schemas.resume_record import ResumeRecord
from resume_intake_ai.utils.errors import (
    AllModelsExhaustedError,
    ContentBlockedError,
    DocumentExtractionError,
    ImageProcessingError,
    MalformedResponseError,
    ModelRequestError,
    OcrError,
    ResumeIntakeError,
    UnsupportedFormatError,
)

UPLOAD_TYPES = ["pdf", "docx", "txt", "png", "jpg", "jpeg"]

# Error kind -> message shown to the user
ERROR_MESSAGES = {
    UnsupportedFormatError: "Invalid file type. Only PDF, DOCX, TXT, PNG, and JPG are allowed.",
    DocumentExtractionError: "The document could not be read. It may be corrupted.",
    ImageProcessingError: "The image could not be processed. Try a clearer scan.",
    OcrError: "Text recognition failed for this image. Please try again.",
    ContentBlockedError: "The AI model declined to process this document. Please review its content and try again.",
    AllModelsExhaustedError: "No AI model is available right now. Please try again later.",
    ModelRequestError: "The AI service rejected the request. Check the API key and quota.",
    MalformedResponseError: "The AI returned an unreadable answer. Please try again.",
}


def _error_message(error: ResumeIntakeError) -> str:
    for kind, message in ERROR_MESSAGES.items():
        if isinstance(error, kind):
            return message
    return f"Failed to process the uploaded file: {error.message}"


def _render_record(record: ResumeRecord) -> None:
    st.metric("Confidence", f"{record.confidence}%")
    st.progress(record.confidence / 100)

    col1, col2 = st.columns(2)
    with col1:
        name = f"{record.first_name} {record.last_name}".strip()
        st.markdown(f"### {name or 'Unnamed candidate'}")
        if record.headline:
            st.caption(record.headline)
        st.markdown(f"**Email:** {record.email or '—'}  \n**Phone:** {record.phone or '—'}")
        st.markdown(f"**Location:** {record.location or '—'}")
    with col2:
        for label, url in (
            ("LinkedIn", record.linkedin),
            ("GitHub", record.github),
            ("Portfolio", record.portfolio),
            ("LeetCode", record.leetcode),
            ("YouTube", record.youtube),
        ):
            if url:
                st.markdown(f"**{label}:** {url}")

    if record.summary:
        with st.expander("Summary"):
            st.markdown(record.summary)

    skills = [str(s) for s in record.skill_list() if s]
    if skills:
        st.markdown(" ".join(f"`{s}`" for s in skills[:30]))

    st.caption(
        f"{len(record.work_experience)} positions · {len(record.education)} institutions · "
        f"{len(record.projects)} projects · {len(record.certifications)} certifications"
    )
    data = record.to_json_dict()
    with st.expander("Extracted JSON"):
        st.json(data)
    st.download_button(
        "Download JSON",
        data=json.dumps(data, ensure_ascii=False, indent=2).encode("utf-8"),
        file_name="resume.json",
        mime="application/json",
        key="download_json",
    )


def render_layout() -> None:
    """Streamlit page layout: upload, run pipeline, show record or a typed error."""
    st.set_page_config(page_title="Resume Intake AI", layout="wide")
    st.title("Resume Intake AI")
    st.markdown("*Upload a resume to extract a structured profile with AI.*")
    st.divider()

    uploaded = st.file_uploader(
        "Resume file",
        type=UPLOAD_TYPES,
        help=", ".join(SUPPORTED_MIME_TYPES.values()),
        key="resume_upload",
    )
    extract_clicked = st.button("Extract", type="primary", key="extract_btn", disabled=uploaded is None)

    if "record" not in st.session_state:
        st.session_state["record"] = None
    if "error" not in st.session_state:
        st.session_state["error"] = None

    if extract_clicked and uploaded is not None:
        if not OPENAI_API_KEY:
            st.session_state["error"] = "OPENAI_API_KEY is not set. Add it to your .env file."
            st.session_state["record"] = None
        else:
            with st.spinner("Reading the document and extracting the profile…"):
                try:
                    st.session_state["record"] = run_cv_pipeline(
                        uploaded.getvalue(),
                        uploaded.type or "",
                        config=ExtractionConfig.from_env(),
                    )
                    st.session_state["error"] = None
                except ResumeIntakeError as e:
                    st.session_state["error"] = _error_message(e)
                    st.session_state["record"] = None

    if st.session_state.get("error"):
        st.error(st.session_state["error"])

    record = st.session_state.get("record")
    if record is not None:
        _render_record(record)
    elif not st.session_state.get("error"):
        st.info("Upload a PDF, DOCX, TXT, PNG or JPG resume, then click **Extract**.")


if __name__ == "__main__":
    render_layout()
