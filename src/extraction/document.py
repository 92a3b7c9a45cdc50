"""Queryable document providers for the static and rendered tiers."""

from __future__ import annotations

from typing import Protocol
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

_PARSER = "html.parser"


class QueryableDocument(Protocol):
    """Protocol for documents the field extractor can query."""

    def title(self) -> str | None: ...

    def first_text(self, selector: str) -> str | None: ...

    def first_attr(self, selector: str, attr: str) -> str | None: ...

    def image_sources(self) -> list[str]: ...


def _clean(value: object) -> str | None:
    """Normalise an extracted value; empty or whitespace-only reads as absent."""
    if value is None:
        return None
    if isinstance(value, list):
        value = " ".join(value)
    text = str(value).strip()
    return text or None


def _first_srcset_url(srcset: object) -> str | None:
    """Return the first URL of a srcset list such as ``"a.jpg 1x, b.jpg 2x"``."""
    text = _clean(srcset)
    if text is None:
        return None
    for candidate in text.split(","):
        parts = candidate.split()
        if parts:
            return parts[0]
    return None


class _SoupDocument:
    """Selector queries shared by both providers."""

    def __init__(self, markup: str) -> None:
        self._soup = BeautifulSoup(markup, _PARSER)

    def title(self) -> str | None:
        tag = self._soup.title
        if tag is None:
            return None
        return _clean(tag.get_text())

    def first_text(self, selector: str) -> str | None:
        tag = self._soup.select_one(selector)
        if tag is None:
            return None
        return _clean(tag.get_text(" ", strip=True))

    def first_attr(self, selector: str, attr: str) -> str | None:
        tag = self._soup.select_one(selector)
        if tag is None:
            return None
        return _clean(tag.get(attr))

    def _images(self) -> list[Tag]:
        return self._soup.find_all("img")


class StaticDocument(_SoupDocument):
    """Server-delivered markup, parsed without executing scripts.

    Relative image paths are not resolved: only ``src`` values that are
    already absolute http(s) URLs become candidates.
    """

    def image_sources(self) -> list[str]:
        sources: list[str] = []
        for img in self._images():
            src = _clean(img.get("src"))
            if src and src.lower().startswith("http"):
                sources.append(src)
        return sources


class RenderedDocument(_SoupDocument):
    """DOM captured from a headless browser after page scripts ran.

    *url* is the page's effective URL after redirects; image paths are
    resolved against it (or against ``<base href>`` when the page sets one),
    mirroring the browser's resolved ``img.src`` property.
    """

    def __init__(self, markup: str, url: str) -> None:
        super().__init__(markup)
        self.url = url

    def _base_url(self) -> str:
        base = self._soup.find("base", href=True)
        if base is not None:
            return urljoin(self.url, base["href"])
        return self.url

    def image_sources(self) -> list[str]:
        base_url = self._base_url()
        sources: list[str] = []
        for img in self._images():
            src = _clean(img.get("src")) or _clean(img.get("data-src"))
            if not src:
                src = _first_srcset_url(img.get("data-srcset"))
            if src:
                sources.append(urljoin(base_url, src))
        return sources
