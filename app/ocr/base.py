"""
Transcription adapter interface.
"""
from __future__ import annotations

from typing import Optional, Protocol


class Transcriber(Protocol):
    """Image bytes → best‑effort plain text.

    May return ``""`` or partial/noisy text.  Failures are raised as
    :class:`app.errors.QuotaExceeded` or :class:`app.errors.RecognitionFailed`.
    """

    def transcribe(self, image_bytes: bytes, content_type: Optional[str] = None) -> str:
        ...
