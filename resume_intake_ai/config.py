"""Configuration loaded from environment variables."""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from resume_intake_ai.schemas.resume_record import SkillsVariant
from resume_intake_ai.utils.logger import get_logger

logger = get_logger(__name__)

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


# API keys – never hardcode
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
OPENAI_BASE_URL: str = os.getenv("OPENAI_BASE_URL", "")

# Model candidates, tried in order until one is available
MODEL_CANDIDATES: List[str] = _env_list("MODEL_CANDIDATES", "gpt-4o-mini,gpt-4o,gpt-4.1-mini")

# Generation settings
LLM_TEMPERATURE: float = float(os.getenv("LLM_TEMPERATURE", "0"))
LLM_MAX_TOKENS: int = int(os.getenv("LLM_MAX_TOKENS", "4096"))
LLM_TIMEOUT_SECONDS: float = float(os.getenv("LLM_TIMEOUT_SECONDS", "60"))
LLM_MAX_RETRIES: int = int(os.getenv("LLM_MAX_RETRIES", "0"))
ENFORCE_RESPONSE_SCHEMA: bool = _env_bool("ENFORCE_RESPONSE_SCHEMA", True)

# Output shape: "flat" skill list or "categorized" skill map
SKILLS_SCHEMA_VARIANT: str = os.getenv("SKILLS_SCHEMA_VARIANT", SkillsVariant.FLAT.value)

# OCR settings
OCR_LANG: str = os.getenv("OCR_LANG", "eng")
OCR_TIMEOUT_SECONDS: float = float(os.getenv("OCR_TIMEOUT_SECONDS", "30"))
TESSERACT_CMD: str = os.getenv("TESSERACT_CMD", "")

# Accepted upload types (MIME -> short label)
PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_MIME = "text/plain"
PNG_MIME = "image/png"
JPEG_MIME = "image/jpeg"

SUPPORTED_MIME_TYPES: dict = {
    PDF_MIME: "PDF",
    DOCX_MIME: "DOCX",
    TEXT_MIME: "Plain text",
    PNG_MIME: "PNG image",
    JPEG_MIME: "JPEG image",
}

# Non-standard spellings seen from browsers and upload clients
MIME_ALIASES: dict = {
    "image/jpg": JPEG_MIME,
    "image/pjpeg": JPEG_MIME,
}


def resolve_skills_variant(value: Optional[str] = None) -> SkillsVariant:
    """Map a configured variant name to SkillsVariant; unknown names fall back to flat."""
    raw = (value if value is not None else SKILLS_SCHEMA_VARIANT).strip().lower()
    try:
        return SkillsVariant(raw)
    except ValueError:
        logger.warning("Unknown SKILLS_SCHEMA_VARIANT %r; using 'flat'", raw)
        return SkillsVariant.FLAT


class ExtractionConfig(BaseModel):
    """Model endpoint settings handed to the extraction orchestrator."""

    api_key: str = Field(default="", description="OpenAI API key")
    base_url: Optional[str] = Field(default=None, description="Optional OpenAI-compatible endpoint")
    model_candidates: List[str] = Field(default_factory=list, description="Model ids in priority order")
    temperature: float = Field(default=0.0, description="Sampling temperature (0 for determinism)")
    max_tokens: int = Field(default=4096, description="Completion token cap")
    timeout_seconds: float = Field(default=60.0, description="Per-call timeout for the model endpoint")
    max_retries: int = Field(default=0, description="SDK transport retries per candidate")
    enforce_response_schema: bool = Field(default=True, description="Send a JSON schema response_format")
    skills_variant: SkillsVariant = Field(default=SkillsVariant.FLAT, description="Skills output shape")

    @classmethod
    def from_env(cls) -> "ExtractionConfig":
        """Build the config from the module-level environment settings."""
        return cls(
            api_key=OPENAI_API_KEY,
            base_url=OPENAI_BASE_URL or None,
            model_candidates=list(MODEL_CANDIDATES),
            temperature=LLM_TEMPERATURE,
            max_tokens=LLM_MAX_TOKENS,
            timeout_seconds=LLM_TIMEOUT_SECONDS,
            max_retries=LLM_MAX_RETRIES,
            enforce_response_schema=ENFORCE_RESPONSE_SCHEMA,
            skills_variant=resolve_skills_variant(),
        )
