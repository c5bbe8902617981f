"""
receipt-snap contracts — Pydantic v2 models shared by the pipeline and API.

The extractor produces :class:`ExtractionResult`, which carries a
diagnostic ``matched_line``.  Only :class:`ReceiptFields` ever leaves the
process.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Extraction (internal)
# ---------------------------------------------------------------------------

class ReceiptFields(BaseModel):
    """Public projection of an extraction: the three fields callers see."""
    merchant: str = Field(..., description="Merchant name, 1-60 chars or '-'")
    amount: float = Field(..., ge=0, description="Total amount, 0 when unknown")
    currency: str = Field(..., description="3-letter currency code")


class ExtractionResult(BaseModel):
    """Full extractor output including diagnostics. Never serialize as-is."""
    model_config = ConfigDict(frozen=True)

    merchant: str = "-"
    currency: str = "SGD"
    amount: float = Field(default=0.0, ge=0)
    matched_line: str = Field(
        default="", description="Source line the amount came from (logs only)"
    )

    def to_public(self) -> ReceiptFields:
        return ReceiptFields(
            merchant=self.merchant, amount=self.amount, currency=self.currency
        )


# ---------------------------------------------------------------------------
# API envelopes
# ---------------------------------------------------------------------------

class OcrResponse(BaseModel):
    """Envelope for ``POST /ocr``; unset keys are dropped from the body."""
    ok: bool
    merchant: Optional[str] = None
    amount: Optional[float] = None
    currency: Optional[str] = None
    code: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def success(cls, fields: ReceiptFields) -> "OcrResponse":
        return cls(ok=True, **fields.model_dump())

    @classmethod
    def failure(cls, code: str, message: str) -> "OcrResponse":
        return cls(ok=False, code=code, message=message)


class HealthResponse(BaseModel):
    ok: bool = True
    time: str


class ApiHealthResponse(HealthResponse):
    hasKey: bool
