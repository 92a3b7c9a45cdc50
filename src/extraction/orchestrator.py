"""Tier orchestration: static extraction first, browser rendering as fallback."""

from __future__ import annotations

import logging
from typing import Protocol

from .document import QueryableDocument, RenderedDocument, StaticDocument
from .errors import ScrapeFailure
from .fields import extract_fields
from .images import filter_product_images
from .models import ExtractionResult

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    """Protocol for static tier fetchers."""

    async def fetch(self, url: str) -> str: ...


class Renderer(Protocol):
    """Protocol for dynamic tier renderers."""

    async def render(self, url: str) -> RenderedDocument: ...


def _build_result(doc: QueryableDocument, url: str) -> ExtractionResult:
    fields = extract_fields(doc, url)
    images = filter_product_images(fields.image_candidates)
    logger.debug(
        "fields extracted",
        extra={
            "url": url,
            "title": fields.title[:80],
            "candidates": len(fields.image_candidates),
            "images": len(images),
        },
    )
    return ExtractionResult(
        brand_name=fields.brand_name,
        product_name=fields.product_name,
        product_description=fields.product_description,
        images=images,
    )


class HybridExtractor:
    """Runs the static -> rendered extraction state machine for one URL at a time.

    The static result is accepted when it yields at least one product image
    (or unconditionally when ``require_static_images`` is off). Otherwise, or
    when the static tier fails, the page is rendered and the rendered result
    replaces the static one entirely.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        renderer: Renderer,
        *,
        require_static_images: bool = True,
    ) -> None:
        self._fetcher = fetcher
        self._renderer = renderer
        self._require_static_images = require_static_images

    async def extract(self, url: str) -> ExtractionResult:
        """Extract product data from *url*, rendering only if the static tier falls short."""
        result = await self._extract_static(url)
        if result is not None:
            return result

        try:
            doc = await self._renderer.render(url)
            result = _build_result(doc, url)
        except Exception as exc:
            logger.error("dynamic extraction failed", extra={"url": url}, exc_info=True)
            raise ScrapeFailure("Failed to scrape product data") from exc

        logger.info(
            "dynamic extraction successful",
            extra={"url": url, "tier": "dynamic", "images": len(result.images)},
        )
        return result

    async def render_images(self, url: str) -> list[str]:
        """Render *url* and return its product images, skipping the static tier."""
        try:
            doc = await self._renderer.render(url)
            images = filter_product_images(doc.image_sources())
        except Exception as exc:
            logger.error("image scrape failed", extra={"url": url}, exc_info=True)
            raise ScrapeFailure("Failed to scrape images") from exc

        logger.info("image scrape complete", extra={"url": url, "images": len(images)})
        return images

    async def _extract_static(self, url: str) -> ExtractionResult | None:
        """Return the static result if acceptable, else ``None``. Never raises."""
        try:
            markup = await self._fetcher.fetch(url)
            result = _build_result(StaticDocument(markup), url)
        except Exception as exc:
            logger.warning(
                "static extraction failed, switching to renderer",
                extra={"url": url, "error": str(exc)},
            )
            return None

        if self._require_static_images and not result.images:
            logger.info(
                "static extraction found no product images, switching to renderer",
                extra={"url": url},
            )
            return None

        logger.info(
            "static extraction successful",
            extra={"url": url, "tier": "static", "images": len(result.images)},
        )
        return result
