"""
Shared fixtures: a fake OpenAI chat client and helpers to build SDK errors.
"""

import asyncio
import struct
import zlib
from io import BytesIO
from types import SimpleNamespace
from typing import Any, Dict, List

import httpx
import openai
import pytest
from PIL import Image, ImageDraw

from resume_intake_ai.config import ExtractionConfig

_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


def make_status_error(cls: type, status: int, message: str = "error", code: str = None) -> openai.APIStatusError:
    """Build an openai.APIStatusError subclass the way the SDK does from an HTTP response."""
    body = {"message": message, "type": "invalid_request_error", "code": code}
    response = httpx.Response(status, request=_REQUEST, json={"error": body})
    return cls(message, response=response, body=body)


def make_timeout_error() -> openai.APITimeoutError:
    return openai.APITimeoutError(request=_REQUEST)


def make_completion(content: Any, finish_reason: str = "stop", refusal: str = None) -> SimpleNamespace:
    message = SimpleNamespace(content=content, refusal=refusal, role="assistant")
    return SimpleNamespace(choices=[SimpleNamespace(index=0, finish_reason=finish_reason, message=message)])


class FakeCompletions:
    """
    Stand-in for client.chat.completions. `behaviors` maps model id to a
    string (returned as content), a completion object, an exception (raised),
    or the string "hang" (sleeps past any test timeout).
    """

    def __init__(self, behaviors: Dict[str, Any]) -> None:
        self.behaviors = behaviors
        self.calls: List[dict] = []

    async def create(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        behavior = self.behaviors[kwargs["model"]]
        if isinstance(behavior, BaseException):
            raise behavior
        if behavior == "hang":
            await asyncio.sleep(10)
        if isinstance(behavior, str):
            return make_completion(behavior)
        return behavior

    @property
    def models_called(self) -> List[str]:
        return [call["model"] for call in self.calls]


class FakeClient:
    def __init__(self, behaviors: Dict[str, Any]) -> None:
        self.completions = FakeCompletions(behaviors)
        self.chat = SimpleNamespace(completions=self.completions)


@pytest.fixture
def fake_client_factory():
    """Return a function building a FakeClient from a model -> behavior map."""
    return FakeClient


@pytest.fixture
def extraction_config():
    """Config with three candidates and a short timeout."""
    return ExtractionConfig(
        api_key="test-key",
        model_candidates=["model-a", "model-b", "model-c"],
        timeout_seconds=0.5,
    )


@pytest.fixture
def valid_model_output():
    """A well-formed model answer in the flat skills shape."""
    return {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "phone": "+44 20 7946 0000",
        "location": "London",
        "headline": "Analyst",
        "summary": "Mathematician and writer.",
        "linkedin": "https://linkedin.com/in/ada",
        "github": "https://github.com/ada",
        "portfolio": "",
        "leetcode": "",
        "youtube": "",
        "skills": ["Mathematics", "Analytical Engine"],
        "workExperience": [
            {
                "company": "Analytical Engine Project",
                "title": "Programmer",
                "dateRange": {"start": "1842", "end": "1843"},
                "description": "Wrote the first published algorithm.",
            }
        ],
        "education": [{"institution": "Home tutoring", "degree": "Mathematics", "dateRange": "1820-1835"}],
        "projects": [{"name": "Note G", "description": "Bernoulli numbers"}],
        "certifications": [],
    }


@pytest.fixture
def text_image_png():
    """Small in-memory PNG with some dark text-like strokes on a colored background."""
    img = Image.new("RGB", (120, 40), color=(200, 220, 255))
    draw = ImageDraw.Draw(img)
    draw.text((5, 10), "Jane Doe", fill=(20, 20, 20))
    buf = BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data))


@pytest.fixture
def oversized_png():
    """Tiny PNG whose header declares 20000x20000 pixels, past Pillow's bomb limit."""
    header = struct.pack(">IIBBBBB", 20000, 20000, 8, 0, 0, 0, 0)
    return b"\x89PNG\r\n\x1a\n" + _png_chunk(b"IHDR", header) + _png_chunk(b"IDAT", b"") + _png_chunk(b"IEND", b"")
