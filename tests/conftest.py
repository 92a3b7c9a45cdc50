"""Fixtures: HTML page builder, mocked tier collaborators."""

from unittest.mock import AsyncMock, MagicMock

import pytest


def _make_page(
    *,
    title: str | None = "Acme Store",
    site_name: str | None = None,
    description: str | None = None,
    h1: str | None = None,
    paragraph: str | None = None,
    images: list[str] | None = None,
    head_extra: str = "",
) -> str:
    """Build a minimal product page."""
    head = []
    if title is not None:
        head.append(f"<title>{title}</title>")
    if site_name is not None:
        head.append(f'<meta property="og:site_name" content="{site_name}">')
    if description is not None:
        head.append(f'<meta name="description" content="{description}">')
    head.append(head_extra)

    body = []
    if h1 is not None:
        body.append(f"<h1>{h1}</h1>")
    if paragraph is not None:
        body.append(f"<p>{paragraph}</p>")
    for src in images or []:
        body.append(f'<img src="{src}">')

    return f"<html><head>{''.join(head)}</head><body>{''.join(body)}</body></html>"


@pytest.fixture
def fetcher() -> MagicMock:
    """Static fetcher whose ``fetch`` is an AsyncMock."""
    mock = MagicMock()
    mock.fetch = AsyncMock()
    return mock


@pytest.fixture
def renderer() -> MagicMock:
    """Renderer whose ``render`` is an AsyncMock."""
    mock = MagicMock()
    mock.render = AsyncMock()
    return mock


@pytest.fixture
def make_page():
    """Factory for minimal product page markup."""
    return _make_page
