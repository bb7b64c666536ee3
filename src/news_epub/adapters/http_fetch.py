"""Shared HTTP fetching for feed and article adapters."""

from typing import Optional

import httpx

from news_epub.core import FetchError

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "news-epub/0.1"


class HttpFetcher:
    """Single-shot HTTP GET without retries.

    A client can be injected (tests, connection reuse); otherwise a client is
    opened per request.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.client = client
        self.timeout = timeout
        self.headers = {"User-Agent": user_agent}

    async def get(self, url: str) -> httpx.Response:
        """GET ``url``, raising ``FetchError`` on transport errors or non-2xx status."""
        try:
            if self.client is not None:
                response = await self.client.get(url, headers=self.headers)
            else:
                async with httpx.AsyncClient(
                    timeout=self.timeout, follow_redirects=True, headers=self.headers
                ) as client:
                    response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(f"HTTP {e.response.status_code} for {url}") from e
        except httpx.HTTPError as e:
            raise FetchError(f"Request to {url} failed: {e}") from e
        except httpx.InvalidURL as e:
            raise FetchError(f"Invalid URL {url}: {e}") from e
        return response
