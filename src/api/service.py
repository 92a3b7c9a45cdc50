"""Service layer: runs extraction and ad generation for the API routes."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, TypeVar
from urllib.parse import urlparse

from fastapi import Request

from src.ads.copywriter import AdCopywriter
from src.ads.prompts import format_manual_prompt, format_targeted_prompt
from src.api.schemas import (
    CreateAdRequest,
    CreateAdResponse,
    ImageProxyResponse,
    ManualAdRequest,
    ManualAdResponse,
)
from src.extraction import HybridExtractor

logger = logging.getLogger(__name__)

T = TypeVar("T")

_VALID_SCHEMES = {"http", "https"}

MANUAL_AD_FIELDS = (
    "brand_name",
    "product_name",
    "product_description",
    "target_audience",
    "unique_selling_points",
)


class ClientDisconnected(Exception):
    """The client went away before the response was ready."""


def validate_page_url(url: str) -> bool:
    """Check that *url* is an absolute http(s) URL with a hostname."""
    parsed = urlparse(url)
    if parsed.scheme not in _VALID_SCHEMES:
        return False
    return bool(parsed.hostname)


def missing_manual_fields(body: ManualAdRequest) -> list[str]:
    """Return the names of manual ad fields that are absent or blank."""
    return [name for name in MANUAL_AD_FIELDS if not (getattr(body, name) or "").strip()]


async def run_until_disconnected(
    request: Request,
    awaitable: Awaitable[T],
    poll_interval: float = 0.5,
) -> T:
    """Await *awaitable*, cancelling it if the client disconnects first.

    Cancellation unwinds any in-flight browser render, which closes its
    browser on the way out; this returns only once that unwinding is done.
    """
    task = asyncio.ensure_future(awaitable)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()
            if await request.is_disconnected():
                logger.info("client disconnected, cancelling", extra={"path": request.url.path})
                raise ClientDisconnected()
    finally:
        if not task.done():
            task.cancel()
            # Let the work unwind (browser close included) before responding.
            await asyncio.wait({task})
            if not task.cancelled() and task.exception() is not None:
                logger.warning(
                    "cancelled work raised while unwinding",
                    extra={"path": request.url.path},
                    exc_info=task.exception(),
                )


async def create_ad(
    extractor: HybridExtractor,
    copywriter: AdCopywriter,
    body: CreateAdRequest,
) -> CreateAdResponse:
    """Scrape the product page and write ad copy targeted at the requested audience."""
    logger.info(
        "create ad started",
        extra={"url": body.url, "gender": body.gender, "age_group": body.age_group},
    )
    product = await extractor.extract(body.url)

    prompt = format_targeted_prompt(
        brand_name=product.brand_name,
        product_name=product.product_name,
        product_description=product.product_description,
        gender=body.gender,
        age_group=body.age_group,
    )
    ad_copy = await copywriter.write(prompt)

    return CreateAdResponse(
        brand_name=product.brand_name,
        product_name=product.product_name,
        product_description=product.product_description,
        images=product.images,
        ad_copy=ad_copy,
    )


async def generate_manual_ad(
    copywriter: AdCopywriter,
    body: ManualAdRequest,
) -> ManualAdResponse:
    """Write ad copy from manually entered product details."""
    logger.info("manual ad started", extra={"brand_name": body.brand_name})
    prompt = format_manual_prompt(
        brand_name=body.brand_name,
        product_name=body.product_name,
        product_description=body.product_description,
        target_audience=body.target_audience,
        unique_selling_points=body.unique_selling_points,
    )
    ad_copy = await copywriter.write(prompt)

    return ManualAdResponse(
        brand_name=body.brand_name,
        product_name=body.product_name,
        product_description=body.product_description,
        target_audience=body.target_audience,
        unique_selling_points=body.unique_selling_points,
        ad_copy=ad_copy,
    )


async def proxy_images(extractor: HybridExtractor, url: str) -> ImageProxyResponse:
    """Render the page and return its product images."""
    images = await extractor.render_images(url)
    return ImageProxyResponse(images=images)
