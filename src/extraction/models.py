"""Data models for the extraction pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PageFields:
    """Fields read from a single document, before image filtering."""

    title: str
    brand_name: str
    product_name: str
    product_description: str
    image_candidates: list[str] = field(default_factory=list)


@dataclass
class ExtractionResult:
    """Product information extracted from a page."""

    brand_name: str
    product_name: str
    product_description: str
    images: list[str] = field(default_factory=list)
