"""Retrieval backends for the content extractor.

A fetcher is any async callable ``fetcher(url) -> str`` returning the page
markup and raising RetrievalError on failure. Two are provided:

- HttpxFetcher: plain GET, fast, default
- PlaywrightFetcher: headless Firefox for storefronts that render client-side
"""

import logging

import httpx
from playwright.async_api import (
    async_playwright,
    Error as PlaywrightError,
    TimeoutError as PlaywrightTimeout,
)

from .config import FETCH_BACKEND, FETCH_TIMEOUT, USER_AGENT
from .errors import RetrievalError

logger = logging.getLogger(__name__)


class HttpxFetcher:
    """Fetch a page with a single GET request."""

    def __init__(
        self,
        timeout: float = FETCH_TIMEOUT,
        user_agent: str = USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = timeout
        self.user_agent = user_agent
        self._transport = transport

    async def __call__(self, url: str) -> str:
        logger.debug("GET %s (timeout=%ss)", url, self.timeout)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
        except httpx.TimeoutException as e:
            raise RetrievalError(url, f"Timed out after {self.timeout}s") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise RetrievalError(url, f"Request failed: {e}") from e

        if not response.is_success:
            raise RetrievalError(
                url, f"HTTP {response.status_code}", status_code=response.status_code
            )
        return response.text


class PlaywrightFetcher:
    """Render a page in headless Firefox and return the resulting DOM."""

    def __init__(self, timeout: float = FETCH_TIMEOUT, user_agent: str = USER_AGENT):
        self.timeout = timeout
        self.user_agent = user_agent

    async def __call__(self, url: str) -> str:
        logger.debug("Rendering %s in headless Firefox", url)
        try:
            async with async_playwright() as p:
                browser = await p.firefox.launch(headless=True)
                try:
                    context = await browser.new_context(
                        user_agent=self.user_agent,
                        viewport={"width": 1920, "height": 1080},
                        locale="en-US",
                    )
                    page = await context.new_page()
                    response = await page.goto(
                        url, timeout=self.timeout * 1000, wait_until="networkidle"
                    )
                    if response is not None and not response.ok:
                        raise RetrievalError(
                            url, f"HTTP {response.status}", status_code=response.status
                        )
                    return await page.content()
                finally:
                    await browser.close()
        except PlaywrightTimeout as e:
            raise RetrievalError(url, f"Timed out after {self.timeout}s") from e
        except PlaywrightError as e:
            raise RetrievalError(url, f"Browser error: {e}") from e


def get_fetcher(backend: str = FETCH_BACKEND, timeout: float = FETCH_TIMEOUT):
    """Build the fetcher named by ``backend`` ("httpx" or "playwright")."""
    if backend == "playwright":
        return PlaywrightFetcher(timeout=timeout)
    if backend != "httpx":
        logger.warning("Unknown fetch backend %r, using httpx", backend)
    return HttpxFetcher(timeout=timeout)
