"""Hybrid product-page extraction: static HTML first, headless rendering as fallback."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .document import QueryableDocument, RenderedDocument, StaticDocument
from .errors import ExtractionError, FetchFailure, RenderFailure, ScrapeFailure
from .fetcher import StaticFetcher
from .fields import extract_fields
from .images import filter_product_images, is_product_image
from .models import ExtractionResult, PageFields
from .orchestrator import HybridExtractor
from .renderer import PageRenderer

if TYPE_CHECKING:
    from src.config import Settings

__all__ = [
    "ExtractionError",
    "ExtractionResult",
    "FetchFailure",
    "HybridExtractor",
    "PageFields",
    "PageRenderer",
    "QueryableDocument",
    "RenderFailure",
    "RenderedDocument",
    "ScrapeFailure",
    "StaticDocument",
    "StaticFetcher",
    "build_default_extractor",
    "extract_fields",
    "filter_product_images",
    "is_product_image",
]


def build_default_extractor(settings: Settings) -> HybridExtractor:
    """Build the extractor with an httpx fetcher and a Playwright renderer."""
    fetcher = StaticFetcher(
        user_agent=settings.static_user_agent,
        timeout=settings.fetch_timeout_seconds,
    )
    renderer = PageRenderer(
        user_agent=settings.render_user_agent,
        timeout_ms=settings.render_timeout_ms,
    )
    return HybridExtractor(
        fetcher,
        renderer,
        require_static_images=settings.require_static_images,
    )
