from app.schemas.base import (  # noqa: F401
    ApiHealthResponse,
    ExtractionResult,
    HealthResponse,
    OcrResponse,
    ReceiptFields,
)
