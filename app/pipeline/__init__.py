"""
Receipt Snap core pipeline.

Orchestrates: transcribe image → split lines → detect merchant → detect
amount & currency → build result.
"""
import logging
from typing import Optional

from app.ocr import Transcriber
from app.pipeline.receipt_builder import ReceiptExtractor, extract
from app.schemas import ExtractionResult

__all__ = ["ReceiptExtractor", "ReceiptPipeline", "extract"]

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 120


class ReceiptPipeline:
    """Image bytes → :class:`ExtractionResult`.

    Transcription errors propagate unchanged; the caller maps them to
    response codes.
    """

    def __init__(
        self,
        transcriber: Transcriber,
        extractor: Optional[ReceiptExtractor] = None,
    ) -> None:
        self.transcriber = transcriber
        self.extractor = extractor or ReceiptExtractor()

    def run(
        self, image_bytes: bytes, content_type: Optional[str] = None
    ) -> ExtractionResult:
        logger.info("Pipeline start — transcribe %d bytes", len(image_bytes))
        text = self.transcriber.transcribe(image_bytes, content_type) or ""
        logger.info("Transcription preview: %r", text[:PREVIEW_CHARS])

        logger.info("Pipeline — extract fields")
        result = self.extractor.extract(text)
        logger.info(
            "Extracted merchant=%r amount=%s currency=%s (matched: %r)",
            result.merchant,
            result.amount,
            result.currency,
            result.matched_line,
        )
        return result
