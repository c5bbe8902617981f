"""
Shared pytest fixtures — fake transcriber + FastAPI TestClient.
"""
import pytest
from fastapi.testclient import TestClient

from app.deps import get_pipeline
from app.main import app
from app.pipeline import ReceiptPipeline


class FakeTranscriber:
    """Returns canned text, or raises the configured error."""

    def __init__(self, text: str = "", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[tuple[bytes, str | None]] = []

    def transcribe(self, image_bytes, content_type=None):
        self.calls.append((image_bytes, content_type))
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture()
def transcriber():
    return FakeTranscriber()


@pytest.fixture()
def client(transcriber):
    app.dependency_overrides[get_pipeline] = lambda: ReceiptPipeline(transcriber)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
