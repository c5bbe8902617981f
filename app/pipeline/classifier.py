"""
Rule‑based line classifier.

Normalizes a transcription into lines and picks the merchant name from the
header of the receipt: the first early line that is not receipt metadata.
"""
from __future__ import annotations

import re

MERCHANT_SCAN_LINES = 6
MERCHANT_MIN_LENGTH = 3
MERCHANT_MAX_LENGTH = 60
NO_MERCHANT = "-"

# Receipt metadata keywords; any hit disqualifies a merchant candidate.
# "store" only counts as a label ("STORE: 12", "Store #0042", "STORE ID"),
# otherwise shop names such as "STORE NAME" would never qualify.
DENY_KEYWORDS: list[str] = [
    r"total",
    r"date",
    r"time",
    r"invoice",
    r"batch",
    r"approval",
    r"trans\s*id",
    r"customer",
    r"wechat",
    r"visa",
    r"master",
    r"sale",
    r"receipt",
    r"store\s*(?:[:#]|no\b|id\b|code\b)",
    r"cashier",
    r"host",
    r"mid",
    r"tid",
]

_DENY = re.compile("|".join(DENY_KEYWORDS), re.IGNORECASE)
_UNSAFE_CHARS = re.compile(r"[^\w\s\-&.,]")
_LETTER = re.compile(r"[A-Za-z]")


def split_lines(text: str | None) -> list[str]:
    """Split on any line break, trim each line and drop the empty ones."""
    return [line.strip() for line in (text or "").splitlines() if line.strip()]


def is_denied(line: str) -> bool:
    return _DENY.search(line) is not None


def is_merchant_candidate(line: str) -> bool:
    line = line.strip()
    return (
        not is_denied(line)
        and _LETTER.search(line) is not None
        and len(line) >= MERCHANT_MIN_LENGTH
    )


def sanitize_merchant(line: str) -> str:
    return _UNSAFE_CHARS.sub("", line)[:MERCHANT_MAX_LENGTH]


def detect_merchant(lines: list[str]) -> str:
    """Return the sanitized merchant name, or ``"-"`` when none qualifies."""
    for line in lines[:MERCHANT_SCAN_LINES]:
        if is_merchant_candidate(line):
            return sanitize_merchant(line)
    return NO_MERCHANT
