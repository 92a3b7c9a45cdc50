"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.ads.copywriter import AdCopywriter
from src.api.routes import router
from src.config import get_settings
from src.extraction import build_default_extractor
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Initialize logging FIRST so all subsequent operations produce JSON logs
    setup_logging(settings.log_level)
    logger.info("starting product ad service")

    app.state.settings = settings
    app.state.extractor = build_default_extractor(settings)
    app.state.copywriter = AdCopywriter(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        max_tokens=settings.ad_max_tokens,
    )

    logger.info(
        "product ad service ready",
        extra={
            "openai_model": settings.openai_model,
            "cors_origin": settings.cors_origin,
            "require_static_images": settings.require_static_images,
        },
    )

    yield

    logger.info("shutting down product ad service")


app = FastAPI(title="Product Ad Service", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[get_settings().cors_origin],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(router)


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
