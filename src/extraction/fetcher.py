"""Static tier fetcher: one plain HTTP GET for the page markup."""

from __future__ import annotations

import logging

import httpx

from .errors import FetchFailure

logger = logging.getLogger(__name__)


class StaticFetcher:
    """Fetches raw page markup over HTTP without executing any script."""

    def __init__(
        self,
        *,
        user_agent: str = "Mozilla/5.0",
        timeout: float = 30.0,
    ) -> None:
        self._user_agent = user_agent
        self._timeout = timeout

    async def fetch(self, url: str) -> str:
        """GET *url* and return the response body as text.

        Raises ``FetchFailure`` on network errors, timeouts and non-2xx
        statuses.
        """
        logger.debug("static fetch", extra={"url": url})
        try:
            async with httpx.AsyncClient(
                follow_redirects=True,
                headers={"User-Agent": self._user_agent},
            ) as client:
                resp = await client.get(url, timeout=self._timeout)
                resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchFailure(url, f"HTTP {exc.response.status_code}") from exc
        except httpx.TimeoutException as exc:
            raise FetchFailure(url, f"timed out after {self._timeout}s") from exc
        except httpx.HTTPError as exc:
            raise FetchFailure(url, str(exc) or type(exc).__name__) from exc

        logger.debug(
            "static fetch complete",
            extra={"url": url, "status": resp.status_code, "length": len(resp.text)},
        )
        return resp.text
