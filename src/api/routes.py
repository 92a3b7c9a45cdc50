"""POST /createAd, POST /generateAdPrompt, POST /image-proxy endpoint handlers."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from src.ads.copywriter import AdCopywriter, CopyGenerationFailure
from src.api.schemas import (
    CreateAdRequest,
    CreateAdResponse,
    ImageProxyRequest,
    ImageProxyResponse,
    ManualAdRequest,
    ManualAdResponse,
)
from src.api.service import (
    ClientDisconnected,
    create_ad,
    generate_manual_ad,
    missing_manual_fields,
    proxy_images,
    run_until_disconnected,
    validate_page_url,
)
from src.extraction import HybridExtractor, ScrapeFailure

logger = logging.getLogger(__name__)

router = APIRouter()

# Non-standard "client closed request" status, as used by nginx.
_CLIENT_CLOSED_REQUEST = 499


def _get_extractor(request: Request) -> HybridExtractor:
    return request.app.state.extractor


def _get_copywriter(request: Request) -> AdCopywriter:
    return request.app.state.copywriter


def _require_url(url: str | None) -> str:
    if not url:
        raise HTTPException(status_code=400, detail="No URL provided")
    if not validate_page_url(url):
        raise HTTPException(status_code=400, detail="Invalid URL")
    return url


@router.post("/createAd", response_model=CreateAdResponse)
async def create_ad_route(
    body: CreateAdRequest,
    request: Request,
    extractor: HybridExtractor = Depends(_get_extractor),
    copywriter: AdCopywriter = Depends(_get_copywriter),
):
    _require_url(body.url)
    try:
        return await run_until_disconnected(request, create_ad(extractor, copywriter, body))
    except ScrapeFailure as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    except CopyGenerationFailure as exc:
        logger.error("ad generation failed", extra={"url": body.url}, exc_info=True)
        raise HTTPException(status_code=502, detail="Error generating ad") from exc
    except ClientDisconnected as exc:
        raise HTTPException(status_code=_CLIENT_CLOSED_REQUEST, detail="Client closed request") from exc


@router.post("/generateAdPrompt", response_model=ManualAdResponse)
async def generate_ad_prompt_route(
    body: ManualAdRequest,
    copywriter: AdCopywriter = Depends(_get_copywriter),
):
    missing = missing_manual_fields(body)
    if missing:
        logger.debug("manual ad rejected", extra={"missing": missing})
        raise HTTPException(status_code=400, detail="Missing required fields")
    try:
        return await generate_manual_ad(copywriter, body)
    except CopyGenerationFailure as exc:
        logger.error("manual ad generation failed", exc_info=True)
        raise HTTPException(status_code=502, detail="Error generating ad") from exc


@router.post("/image-proxy", response_model=ImageProxyResponse)
async def image_proxy_route(
    body: ImageProxyRequest,
    request: Request,
    extractor: HybridExtractor = Depends(_get_extractor),
):
    url = _require_url(body.url)
    try:
        return await run_until_disconnected(request, proxy_images(extractor, url))
    except ScrapeFailure as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    except ClientDisconnected as exc:
        raise HTTPException(status_code=_CLIENT_CLOSED_REQUEST, detail="Client closed request") from exc
