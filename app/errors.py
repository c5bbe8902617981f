"""
Error taxonomy for the upload → transcription → extraction flow.

Adapter failures are raised as exceptions and translated into an
:class:`ErrorCode` at the HTTP boundary.  The extractor itself never raises.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    NOFILE = "NOFILE"
    QUOTA = "QUOTA"
    ERROR = "ERROR"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ErrorCode.NOFILE: "No image file was received.",
    ErrorCode.QUOTA: (
        "The recognition service quota is exhausted. "
        "Check the billing settings of the OpenAI account and try again."
    ),
    ErrorCode.ERROR: "Recognition failed, please try again later.",
}


class TranscriptionError(Exception):
    """Base class for transcription adapter failures."""

    code = ErrorCode.ERROR


class QuotaExceeded(TranscriptionError):
    """The recognition service refused the call for billing/rate reasons."""

    code = ErrorCode.QUOTA


class RecognitionFailed(TranscriptionError):
    """Any other adapter failure: network, bad response, unsupported image."""

    code = ErrorCode.ERROR
