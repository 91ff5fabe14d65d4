from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from gita_guide.api.schemas import InsightResponse
from gita_guide.api.routes import router
from gita_guide.core.config import get_settings

import logging

# Basic console logging configuration
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-7s  %(name)-20s │ %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

FALLBACK_ERROR = "Unable to channel the wisdom at this moment."


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:
    settings = get_settings()

    logger.info(
        "Starting | env=%s | model=%s | backend=%s | api_key=%s",
        settings.ENVIRONMENT,
        settings.GROQ_MODEL.value,
        settings.GROQ_BASE_URL,
        "configured" if settings.has_api_key else "missing",
    )

    try:
        yield
    finally:
        logger.info("Shutting down")


settings = get_settings()

app = FastAPI(
    title="Gita Guide API",
    description="Guidance from the Bhagavad Gita for a personal problem",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
    redoc_url=None,
)

app.include_router(router)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "client_ip": request.client.host if request.client else "unknown",
        }
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=InsightResponse(error=FALLBACK_ERROR).model_dump(mode="json"),
    )


@app.get("/health", include_in_schema=False)
async def health_check():
    return {"status": "healthy"}
