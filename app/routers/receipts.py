"""
Receipt OCR endpoint.

POST /ocr   — upload a receipt photo (form field ``file``) → merchant,
              amount, currency

Every outcome is HTTP 200; ``ok`` and ``code`` tell "no result" apart from
a transport failure.
"""
from __future__ import annotations

import logging
from typing import Union

from fastapi import APIRouter, Depends, File, UploadFile

from app.deps import get_pipeline
from app.errors import ErrorCode, TranscriptionError
from app.pipeline import ReceiptPipeline
from app.schemas import OcrResponse

logger = logging.getLogger(__name__)
router = APIRouter()


# ── POST /ocr ─────────────────────────────────────────────────────────────
@router.post("/ocr", response_model=OcrResponse, response_model_exclude_none=True)
def ocr(
    file: Union[UploadFile, str, None] = File(None),
    pipeline: ReceiptPipeline = Depends(get_pipeline),
):
    logger.info("/ocr request received")
    # A text form field named "file" carries no image either
    if file is None or isinstance(file, str):
        logger.warning("/ocr without a file")
        return OcrResponse.failure(ErrorCode.NOFILE.value, ErrorCode.NOFILE.message)

    image_bytes = file.file.read()
    logger.info(
        "Upload: filename=%s  content_type=%s  size=%d",
        file.filename,
        file.content_type,
        len(image_bytes),
    )
    if not image_bytes:
        return OcrResponse.failure(ErrorCode.NOFILE.value, ErrorCode.NOFILE.message)

    try:
        result = pipeline.run(image_bytes, file.content_type)
    except TranscriptionError as e:
        logger.error("[/ocr] %s: %s", e.code.value, e)
        return OcrResponse.failure(e.code.value, e.code.message)
    except Exception as e:
        logger.error("[/ocr] unexpected failure: %s", e, exc_info=True)
        return OcrResponse.failure(ErrorCode.ERROR.value, ErrorCode.ERROR.message)

    return OcrResponse.success(result.to_public())
