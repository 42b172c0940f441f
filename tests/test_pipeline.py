"""
End-to-end tests for the resume pipeline with a stubbed model client.
"""

import json
from unittest.mock import patch

import openai
import pytest

from resume_intake_ai.agents.extractor_agent import ExtractionOrchestrator
from resume_intake_ai.config import PNG_MIME, TEXT_MIME
from resume_intake_ai.cv_pipeline import process_resume, run_cv_pipeline
from resume_intake_ai.schemas.resume_record import SkillCategories, SkillsVariant
from resume_intake_ai.utils.errors import (
    AllModelsExhaustedError,
    MalformedResponseError,
    UnsupportedFormatError,
)

from .conftest import make_status_error

RESUME_TEXT = "John Smith, john@x.com, 555-1234, Senior Engineer at Acme (2019–Present)"

MODEL_ANSWER = json.dumps(
    {
        "firstname": "John",
        "lastname": "Smith",
        "email": "john@x.com",
        "workExperience": [{"company": "Acme", "title": "Senior Engineer", "dates": "2019-Present"}],
    }
)


class TestEndToEnd:
    def test_plain_text_resume(self, extraction_config, fake_client_factory):
        client = fake_client_factory({"model-a": MODEL_ANSWER})
        orchestrator = ExtractionOrchestrator(extraction_config, client=client)

        record = run_cv_pipeline(RESUME_TEXT.encode("utf-8"), TEXT_MIME, orchestrator=orchestrator)

        assert record.first_name == "John"
        assert record.last_name == "Smith"
        assert record.email == "john@x.com"
        assert record.work_experience == [{"company": "Acme", "title": "Senior Engineer", "dates": "2019-Present"}]
        assert record.phone == ""
        assert record.headline == ""
        assert record.skills == []
        assert record.education == []
        # name (20) + email (15) + work experience (15)
        assert record.confidence == 50

        prompt = client.completions.calls[0]["messages"][0]["content"]
        assert RESUME_TEXT in prompt

    def test_output_uses_camel_case_keys(self, extraction_config, fake_client_factory):
        orchestrator = ExtractionOrchestrator(extraction_config, client=fake_client_factory({"model-a": MODEL_ANSWER}))
        data = run_cv_pipeline(RESUME_TEXT.encode(), TEXT_MIME, orchestrator=orchestrator).to_json_dict()
        assert data["firstName"] == "John"
        assert data["workExperience"][0]["company"] == "Acme"
        assert data["confidence"] == 50

    @pytest.mark.asyncio
    async def test_fenced_answer_after_fallback(self, extraction_config, fake_client_factory):
        client = fake_client_factory(
            {
                "model-a": make_status_error(openai.NotFoundError, 404, "model not found"),
                "model-b": "Sure!\n```json\n" + MODEL_ANSWER + "\n```\nHope that helps!",
            }
        )
        record = await process_resume(
            RESUME_TEXT.encode(), TEXT_MIME, orchestrator=ExtractionOrchestrator(extraction_config, client=client)
        )
        assert record.first_name == "John"
        assert client.completions.models_called == ["model-a", "model-b"]

    @pytest.mark.asyncio
    async def test_email_backfilled_from_text(self, extraction_config, fake_client_factory):
        client = fake_client_factory({"model-a": '{"firstName": "John", "lastName": "Smith", "email": 42}'})
        record = await process_resume(
            RESUME_TEXT.encode(), TEXT_MIME, orchestrator=ExtractionOrchestrator(extraction_config, client=client)
        )
        assert record.email == "john@x.com"
        assert record.confidence == 35

    @pytest.mark.asyncio
    async def test_categorized_variant(self, extraction_config, fake_client_factory):
        config = extraction_config.model_copy(update={"skills_variant": SkillsVariant.CATEGORIZED})
        answer = json.dumps({"skills": {"languages": ["Python"], "tools": "git"}})
        client = fake_client_factory({"model-a": answer})

        record = await process_resume(
            b"Python developer", TEXT_MIME, orchestrator=ExtractionOrchestrator(config, client=client)
        )

        assert isinstance(record.skills, SkillCategories)
        assert record.skills.languages == ["Python"]
        assert record.skills.tools == []
        assert record.confidence == 5

    @pytest.mark.asyncio
    async def test_image_upload_uses_ocr(self, extraction_config, fake_client_factory, text_image_png):
        client = fake_client_factory({"model-a": MODEL_ANSWER})
        with patch("pytesseract.image_to_string", return_value=RESUME_TEXT) as ocr:
            record = await process_resume(
                text_image_png, PNG_MIME, orchestrator=ExtractionOrchestrator(extraction_config, client=client)
            )
        assert ocr.call_count == 1
        assert record.last_name == "Smith"


class TestPipelineErrors:
    @pytest.mark.asyncio
    async def test_unsupported_format_never_calls_model(self, extraction_config, fake_client_factory):
        client = fake_client_factory({"model-a": MODEL_ANSWER})
        with pytest.raises(UnsupportedFormatError):
            await process_resume(
                b"GIF89a", "image/gif", orchestrator=ExtractionOrchestrator(extraction_config, client=client)
            )
        assert client.completions.calls == []

    @pytest.mark.asyncio
    async def test_garbage_answer(self, extraction_config, fake_client_factory):
        client = fake_client_factory({"model-a": "I am unable to parse this resume."})
        with pytest.raises(MalformedResponseError):
            await process_resume(
                RESUME_TEXT.encode(), TEXT_MIME, orchestrator=ExtractionOrchestrator(extraction_config, client=client)
            )

    @pytest.mark.asyncio
    async def test_exhausted_models(self, extraction_config, fake_client_factory):
        missing = make_status_error(openai.NotFoundError, 404, "model not found")
        client = fake_client_factory({"model-a": missing, "model-b": missing, "model-c": missing})
        with pytest.raises(AllModelsExhaustedError):
            await process_resume(
                RESUME_TEXT.encode(), TEXT_MIME, orchestrator=ExtractionOrchestrator(extraction_config, client=client)
            )
