"""
Receipt Snap — FastAPI application entry‑point.
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.config import settings
from app.netinfo import get_lan_ip
from app.schemas import ApiHealthResponse, HealthResponse

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s  %(name)-30s  %(levelname)-5s  %(message)s",
)
logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Never log more than a prefix of the key
    logger.info("OPENAI_API_KEY loaded: %s", settings.masked_api_key)
    logger.info("AI OCR server running:")
    logger.info("   Local:   http://localhost:%d", settings.PORT)
    logger.info("   Network: http://%s:%d", get_lan_ip(), settings.PORT)
    yield
    logger.info("Shutting down")


app = FastAPI(
    title="Receipt Snap",
    description="Receipt photo → OCR transcription → merchant / amount / currency",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "OK"


@app.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(ok=True, time=_now())


@app.get("/api/health", response_model=ApiHealthResponse)
async def api_health_check():
    return ApiHealthResponse(ok=True, hasKey=bool(settings.OPENAI_API_KEY), time=_now())


# ── Register API router ──────────────────────────────────────────────────
from app.routers.receipts import router as receipts_router  # noqa: E402

app.include_router(receipts_router, tags=["Receipt OCR"])
