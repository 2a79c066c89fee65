"""Shared fakes for the test suite."""

import asyncio

from growth_report.errors import RetrievalError

YOGA_HTML = """
<html>
<head>
  <title> Acme Yoga Mats </title>
  <meta name="description" content="Premium fitness gear for every practice">
  <meta name="keywords" content="yoga, mats , , fitness">
</head>
<body>
  <h1>Acme Yoga</h1>
  <h2>Hi</h2>
  <ul>
    <li><span class="item-name">Cork Yoga Mat</span> <span class="price">$89.00</span></li>
    <li><span class="item-name">Travel Mat</span> <span class="sale-price">Now 1,299.50 USD</span></li>
    <li><span class="cost">free</span></li>
    <li><span data-price="12">12</span></li>
  </ul>
</body>
</html>
"""

EMPTY_HTML = "<html><head></head><body><p>a</p></body></html>"


class FakeFetcher:
    """Returns canned markup and records every URL it was asked for."""

    def __init__(self, html: str = YOGA_HTML):
        self.html = html
        self.calls: list[str] = []

    async def __call__(self, url: str) -> str:
        self.calls.append(url)
        return self.html


class FailingFetcher:
    """Behaves like a blocked or unreachable site."""

    def __init__(self, exc: Exception | None = None):
        self.exc = exc
        self.calls: list[str] = []

    async def __call__(self, url: str) -> str:
        self.calls.append(url)
        raise self.exc or RetrievalError(url, "blocked by cross-origin policy")


class BlockingFetcher:
    """Holds the request open until ``release`` is set."""

    def __init__(self, html: str = YOGA_HTML):
        self.html = html
        self.started = asyncio.Event()
        self.release = asyncio.Event()
        self.calls: list[str] = []

    async def __call__(self, url: str) -> str:
        self.calls.append(url)
        self.started.set()
        await self.release.wait()
        return self.html
