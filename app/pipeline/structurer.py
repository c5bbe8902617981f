"""
Rule‑based amount & currency matcher.

Each line is tried against an ordered registry of patterns; the first
line on which any pattern matches supplies the amount, and that same line
is inspected for a currency marker.
"""
from __future__ import annotations

import re
from typing import NamedTuple, Optional

# digits, "." or ",", exactly two digits
AMOUNT_TOKEN = r"([0-9]+[.,][0-9]{2})(?![0-9])"
CURRENCY_MARKER = r"(?:SGD|HKD|CNY|USD|S\$|\$|RM)"

# ---------------------------------------------------------------------------
# Registry (priority order)
# ---------------------------------------------------------------------------

AMOUNT_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    (
        "total",
        re.compile(rf"TOTAL[:\s]+{CURRENCY_MARKER}?\s*{AMOUNT_TOKEN}", re.IGNORECASE),
    ),
    (
        "amount",
        re.compile(
            rf"(?:AMOUNT\s+DUE|AMOUNT|AMT)[:\s]+{CURRENCY_MARKER}?\s*{AMOUNT_TOKEN}",
            re.IGNORECASE,
        ),
    ),
    # Shadowed by "amount" on every line it matches; keep the order as is.
    (
        "currency_amount",
        re.compile(rf"(?:CNY|SGD|USD)\s*AMOUNT[:\s]+{AMOUNT_TOKEN}", re.IGNORECASE),
    ),
    (
        "dollar",
        re.compile(rf"(?:S\$|\$)\s*{AMOUNT_TOKEN}"),
    ),
]

_CNY = re.compile(r"CNY", re.IGNORECASE)
_SGD = re.compile(r"SGD|S\$", re.IGNORECASE)


class AmountMatch(NamedTuple):
    amount: float
    currency: Optional[str]
    line: str
    pattern: str


def parse_amount(token: str) -> float:
    return float(token.replace(",", "."))


def match_line(line: str) -> Optional[tuple[str, str]]:
    """Return ``(pattern_name, token)`` for the first pattern hitting *line*."""
    for name, pattern in AMOUNT_PATTERNS:
        m = pattern.search(line)
        if m:
            return name, m.group(1)
    return None


def infer_currency(line: str, dollar_currency: str = "SGD") -> Optional[str]:
    """Currency signalled by *line*, or ``None`` when it carries no marker."""
    if _CNY.search(line):
        return "CNY"
    if _SGD.search(line):
        return "SGD"
    if "$" in line:
        return dollar_currency
    return None


def detect_amount(
    lines: list[str], dollar_currency: str = "SGD"
) -> Optional[AmountMatch]:
    """Scan *lines* top to bottom; stop at the first line with a match."""
    for line in lines:
        hit = match_line(line)
        if hit is None:
            continue
        name, token = hit
        return AmountMatch(
            amount=parse_amount(token),
            currency=infer_currency(line, dollar_currency),
            line=line,
            pattern=name,
        )
    return None
