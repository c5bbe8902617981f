"""
OpenAI vision transcriber.

Sends the receipt image to a vision‑capable chat model and asks for every
readable character as plain text.  No structuring happens here.
"""
from __future__ import annotations

import base64
import logging
from typing import Any, Optional

import openai
from openai import OpenAI

from app.errors import QuotaExceeded, RecognitionFailed

logger = logging.getLogger(__name__)

OCR_PROMPT = "Extract ALL readable text from this receipt as plain text. Do NOT summarize."
DEFAULT_CONTENT_TYPE = "image/jpeg"


def _data_url(image_bytes: bytes, content_type: Optional[str]) -> str:
    if not content_type or not content_type.startswith("image/"):
        content_type = DEFAULT_CONTENT_TYPE
    b64 = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{content_type};base64,{b64}"


class OpenAIVisionTranscriber:
    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        timeout: float = 60.0,
        client: Any = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._client = client

    @property
    def client(self) -> Any:
        # Built on first use: OpenAI() raises when no key is configured.
        if self._client is None:
            self._client = OpenAI(api_key=self.api_key or None, timeout=self.timeout)
        return self._client

    def transcribe(self, image_bytes: bytes, content_type: Optional[str] = None) -> str:
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                temperature=0,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": OCR_PROMPT},
                            {
                                "type": "image_url",
                                "image_url": {"url": _data_url(image_bytes, content_type)},
                            },
                        ],
                    }
                ],
            )
        except openai.RateLimitError as e:
            logger.warning("OCR quota exhausted: %s", e)
            raise QuotaExceeded(str(e)) from e
        except openai.APIStatusError as e:
            if e.status_code == 429:
                logger.warning("OCR quota exhausted: %s", e)
                raise QuotaExceeded(str(e)) from e
            logger.error("OCR request failed (%s): %s", e.status_code, e)
            raise RecognitionFailed(str(e)) from e
        except openai.OpenAIError as e:
            logger.error("OCR request failed: %s", e)
            raise RecognitionFailed(str(e)) from e

        if not resp.choices:
            return ""
        return resp.choices[0].message.content or ""
