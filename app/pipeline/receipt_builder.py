"""
Receipt builder – assembles an :class:`ExtractionResult` from the line
classifier and the amount matcher, filling documented defaults.
"""
from __future__ import annotations

import logging

from app.pipeline.classifier import detect_merchant, split_lines
from app.pipeline.structurer import detect_amount
from app.schemas import ExtractionResult

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "SGD"


class ReceiptExtractor:
    """Turns a transcription into merchant / currency / amount.

    ``dollar_currency`` is what a bare ``$`` means; it defaults to SGD
    rather than USD, matching the receipts this service was built for.
    """

    def __init__(
        self,
        default_currency: str = DEFAULT_CURRENCY,
        dollar_currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self.default_currency = default_currency
        self.dollar_currency = dollar_currency

    def extract(self, text: str | None) -> ExtractionResult:
        lines = split_lines(text)
        merchant = detect_merchant(lines)
        match = detect_amount(lines, self.dollar_currency)

        if match is None:
            logger.debug("No amount pattern matched in %d lines", len(lines))
            return ExtractionResult(merchant=merchant, currency=self.default_currency)

        logger.debug("Amount matched by %r on line: %s", match.pattern, match.line)
        return ExtractionResult(
            merchant=merchant,
            currency=match.currency or self.default_currency,
            amount=match.amount,
            matched_line=match.line,
        )


_default_extractor = ReceiptExtractor()


def extract(text: str | None) -> ExtractionResult:
    """Extract fields using the default SGD settings."""
    return _default_extractor.extract(text)
