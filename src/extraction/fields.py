"""Field heuristics applied identically to static and rendered documents."""

from __future__ import annotations

from urllib.parse import urlparse

from .document import QueryableDocument
from .models import PageFields

DEFAULT_TITLE = "No title available"
DEFAULT_DESCRIPTION = "No description found"
DEFAULT_PRODUCT_NAME = "Unknown Product"
DEFAULT_BRAND_NAME = "Unknown Brand"

# Meta descriptions shorter than this are treated as placeholders.
MIN_META_DESCRIPTION_LENGTH = 10


def _description(doc: QueryableDocument) -> str:
    meta = doc.first_attr('meta[name="description"]', "content")
    if meta and len(meta) >= MIN_META_DESCRIPTION_LENGTH:
        return meta
    return doc.first_text("p") or doc.first_text("h1") or DEFAULT_DESCRIPTION


def _brand_name(doc: QueryableDocument, url: str) -> str:
    site_name = doc.first_attr('meta[property="og:site_name"]', "content")
    if site_name:
        return site_name
    return urlparse(url).hostname or DEFAULT_BRAND_NAME


def extract_fields(doc: QueryableDocument, url: str) -> PageFields:
    """Read brand, product name, description and image candidates from *doc*.

    *url* is the requested page URL, used only as the brand fallback. Missing
    fields degrade to fixed defaults; this never raises for absent markup.
    """
    title = doc.title()
    product_name = doc.first_text("h1") or title or DEFAULT_PRODUCT_NAME

    return PageFields(
        title=title or DEFAULT_TITLE,
        brand_name=_brand_name(doc, url),
        product_name=product_name,
        product_description=_description(doc),
        image_candidates=doc.image_sources(),
    )
