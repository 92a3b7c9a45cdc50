"""Exception hierarchy for the extraction pipeline."""

from __future__ import annotations


class ExtractionError(Exception):
    """Base class for extraction pipeline failures."""


class FetchFailure(ExtractionError):
    """The static tier could not retrieve the page markup."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"fetch failed for {url}: {reason}")
        self.url = url
        self.reason = reason


class RenderFailure(ExtractionError):
    """The headless browser could not launch or navigate to the page."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"render failed for {url}: {reason}")
        self.url = url
        self.reason = reason


class ScrapeFailure(ExtractionError):
    """Every extraction tier was exhausted without a result."""
