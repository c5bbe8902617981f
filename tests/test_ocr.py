"""
Unit tests for the OpenAI vision transcriber, using a stub client.
"""
import base64
from types import SimpleNamespace

import httpx
import openai
import pytest

from app.errors import QuotaExceeded, RecognitionFailed
from app.ocr.openai_vision import OCR_PROMPT, OpenAIVisionTranscriber

_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


class StubCompletions:
    def __init__(self, content="", error=None, choices=True):
        self.content = content
        self.error = error
        self.choices = choices
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        if self.error is not None:
            raise self.error
        if not self.choices:
            return SimpleNamespace(choices=[])
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _transcriber(completions: StubCompletions) -> OpenAIVisionTranscriber:
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return OpenAIVisionTranscriber(api_key="sk-test", model="gpt-4o-mini", client=client)


def _status_error(cls, status: int):
    response = httpx.Response(status, request=_REQUEST)
    return cls("boom", response=response, body=None)


class TestTranscribe:
    def test_returns_message_content(self):
        completions = StubCompletions(content="SHOP\nTOTAL: 1.00")
        assert _transcriber(completions).transcribe(b"abc", "image/png") == "SHOP\nTOTAL: 1.00"

        kwargs = completions.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["temperature"] == 0
        parts = kwargs["messages"][0]["content"]
        assert parts[0] == {"type": "text", "text": OCR_PROMPT}
        expected = "data:image/png;base64," + base64.b64encode(b"abc").decode()
        assert parts[1]["image_url"]["url"] == expected

    def test_defaults_to_jpeg(self):
        completions = StubCompletions(content="x")
        _transcriber(completions).transcribe(b"abc", "application/octet-stream")
        url = completions.kwargs["messages"][0]["content"][1]["image_url"]["url"]
        assert url.startswith("data:image/jpeg;base64,")

    def test_none_content_is_empty_string(self):
        assert _transcriber(StubCompletions(content=None)).transcribe(b"abc") == ""

    def test_no_choices_is_empty_string(self):
        assert _transcriber(StubCompletions(choices=False)).transcribe(b"abc") == ""


class TestErrors:
    def test_rate_limit_is_quota(self):
        completions = StubCompletions(error=_status_error(openai.RateLimitError, 429))
        with pytest.raises(QuotaExceeded):
            _transcriber(completions).transcribe(b"abc")

    def test_other_status_is_recognition_failure(self):
        completions = StubCompletions(error=_status_error(openai.InternalServerError, 500))
        with pytest.raises(RecognitionFailed):
            _transcriber(completions).transcribe(b"abc")

    def test_connection_error_is_recognition_failure(self):
        completions = StubCompletions(error=openai.APIConnectionError(request=_REQUEST))
        with pytest.raises(RecognitionFailed):
            _transcriber(completions).transcribe(b"abc")
