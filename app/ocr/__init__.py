from app.ocr.base import Transcriber  # noqa: F401
from app.ocr.openai_vision import OpenAIVisionTranscriber  # noqa: F401
