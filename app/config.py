"""
Application settings
"""
import re
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # OpenAI vision OCR
    OPENAI_API_KEY: str = ""
    OCR_MODEL: str = "gpt-4o-mini"
    OCR_TIMEOUT_SECONDS: float = 60.0

    # Extraction — a bare "$" is read as DOLLAR_CURRENCY
    DEFAULT_CURRENCY: str = "SGD"
    DOLLAR_CURRENCY: str = "SGD"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    @field_validator("DEFAULT_CURRENCY", "DOLLAR_CURRENCY")
    @classmethod
    def _currency_code(cls, v: str) -> str:
        v = v.strip().upper()
        if not re.fullmatch(r"[A-Z]{3}", v):
            raise ValueError("currency must be a 3-letter code")
        return v

    @property
    def masked_api_key(self) -> str:
        return self.OPENAI_API_KEY[:4] + "****"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
