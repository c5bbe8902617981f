"""
FastAPI dependencies.
"""
from functools import lru_cache

from app.config import Settings, settings
from app.ocr import OpenAIVisionTranscriber
from app.pipeline import ReceiptExtractor, ReceiptPipeline


def build_pipeline(cfg: Settings) -> ReceiptPipeline:
    transcriber = OpenAIVisionTranscriber(
        api_key=cfg.OPENAI_API_KEY,
        model=cfg.OCR_MODEL,
        timeout=cfg.OCR_TIMEOUT_SECONDS,
    )
    extractor = ReceiptExtractor(
        default_currency=cfg.DEFAULT_CURRENCY,
        dollar_currency=cfg.DOLLAR_CURRENCY,
    )
    return ReceiptPipeline(transcriber, extractor)


@lru_cache
def get_pipeline() -> ReceiptPipeline:
    """Pipeline dependency; one instance per process."""
    return build_pipeline(settings)
