"""Documentation fetcher using httpx.AsyncClient.

Fetches documentation pages as text for the documentation viewer, with
connection pooling and configurable timeouts.
"""

from __future__ import annotations

from typing import Any

import httpx

from lintlens.kernel.exceptions import DocumentFetchError
from lintlens.kernel.logging import get_logger

logger = get_logger(__name__)


class DocumentFetcher:
    """Fetches remote documentation pages.

    Parameters
    ----------
    timeout : float
        Request timeout in seconds (default: 30.0).
    headers : dict[str, str] | None
        Default headers included in every request.
    follow_redirects : bool
        Whether to follow HTTP redirects (default: True).

    Examples
    --------
    Basic usage::

        fetcher = DocumentFetcher(timeout=10.0)
        html = await fetcher.afetch_text("https://eslint.org/docs/rules/no-console")
        await fetcher.aclose()
    """

    def __init__(
        self,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        follow_redirects: bool = True,
    ) -> None:
        self._timeout = timeout
        self._default_headers = dict(headers) if headers else {}
        self._follow_redirects = follow_redirects
        self._client: httpx.AsyncClient | None = None
        # Test hook: injected httpx transport
        self._transport: httpx.AsyncBaseTransport | None = None

    def _get_client(self) -> httpx.AsyncClient:
        """Lazily create the httpx client on first use."""
        if self._client is None:
            kwargs: dict[str, Any] = {
                "timeout": self._timeout,
                "headers": self._default_headers,
                "follow_redirects": self._follow_redirects,
            }
            if self._transport is not None:
                kwargs["transport"] = self._transport
            self._client = httpx.AsyncClient(**kwargs)
        return self._client

    async def afetch_text(self, url: str) -> str:
        """GET ``url`` and return the response body as text.

        Raises
        ------
        DocumentFetchError
            On transport failures and non-2xx responses
        """
        logger.debug("Fetching documentation page {url}", url=url)
        try:
            response = await self._get_client().get(url)
        except httpx.HTTPError as e:
            raise DocumentFetchError(url, str(e) or type(e).__name__) from e

        if not response.is_success:
            raise DocumentFetchError(
                url, f"HTTP {response.status_code}", status_code=response.status_code
            )
        return response.text

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
