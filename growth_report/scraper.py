"""Best-effort storefront scraper.

Fetches the homepage once and pulls title, description, keywords, candidate
product names and prices using loose CSS selectors. Any failure falls back to
the domain-name profile from fallback.py, so the caller always gets a
WebsiteProfile.
"""

import logging
import random
import re
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from .errors import ParseError, RetrievalError
from .fallback import generate_fallback_profile
from .fetchers import get_fetcher
from .models import WebsiteProfile
from .tables import STAGE_INTELLIGENCE, STAGE_STRUCTURE

logger = logging.getLogger(__name__)

PRICE_SELECTOR = '[class*="price"], [data-price], .price, .cost, [class*="amount"]'
NAME_SELECTOR = 'h1, h2, [class*="product"], [class*="title"], [class*="name"]'

PRICE_PATTERN = re.compile(r"\d+(?:,\d+)*(?:\.\d+)?")

MAX_PRICES = 10
MAX_NAMES = 5
NAME_MIN_LEN = 4
NAME_MAX_LEN = 99


async def extract_website_data(
    url: str,
    fetcher=None,
    on_progress: callable = None,
    rng: random.Random | None = None,
) -> WebsiteProfile:
    """
    Build a WebsiteProfile for ``url``.

    Tries a direct fetch + parse first. If that fails or finds nothing,
    synthesizes a profile from the hostname instead.

    Args:
        url: Absolute http(s) URL, already validated
        fetcher: Async callable url -> markup (default: configured backend)
        on_progress: Optional callback(stage: str)
        rng: Random source for synthesized prices

    Returns:
        WebsiteProfile tagged "direct" or "intelligent_analysis"
    """
    def _progress(msg: str):
        if on_progress:
            on_progress(msg)

    _progress(STAGE_STRUCTURE)
    fetcher = fetcher or get_fetcher()

    profile = None
    try:
        html = await fetcher(url)
        profile = parse_website_content(html, url)
    except RetrievalError as e:
        logger.warning("Could not retrieve %s: %s", url, e)
    except ParseError as e:
        logger.warning("Could not parse %s: %s", url, e)
    except Exception:
        logger.warning("Unexpected error extracting %s", url, exc_info=True)

    if profile is None:
        _progress(STAGE_INTELLIGENCE)
        domain = urlparse(url).hostname
        profile = generate_fallback_profile(domain, rng)

    return profile


def parse_website_content(html: str, url: str) -> WebsiteProfile | None:
    """
    Extract storefront fields from raw markup.

    Returns None when the page yields nothing usable (no title, description,
    keywords, product names or prices).
    """
    try:
        soup = BeautifulSoup(html, "html.parser")
    except Exception as e:
        raise ParseError(f"Unparseable markup: {e}") from e

    title = ""
    title_tag = soup.find("title")
    if title_tag:
        title = title_tag.get_text(strip=True)

    description = (
        _meta_content(soup, {"name": "description"})
        or _meta_content(soup, {"property": "og:description"})
    )

    raw_keywords = _meta_content(soup, {"name": "keywords"})
    keywords = [k.strip() for k in raw_keywords.split(",") if k.strip()]

    product_prices = _extract_prices(soup)
    product_names = _extract_product_names(soup)

    if not (title or description or keywords or product_prices or product_names):
        logger.info("No storefront content found at %s", url)
        return None

    return WebsiteProfile(
        title=title,
        description=description,
        keywords=keywords,
        product_prices=product_prices,
        product_names=product_names,
        domain=urlparse(url).hostname,
        method="direct",
    )


def _meta_content(soup: BeautifulSoup, attrs: dict) -> str:
    tag = soup.find("meta", attrs=attrs)
    if not tag:
        return ""
    return tag.get("content", "") or ""


def _extract_prices(soup: BeautifulSoup) -> list[str]:
    """First numeric run from each price-like element, document order."""
    prices: list[str] = []
    for el in soup.select(PRICE_SELECTOR):
        match = PRICE_PATTERN.search(el.get_text())
        if match:
            prices.append(match.group())
            if len(prices) >= MAX_PRICES:
                break
    return prices


def _extract_product_names(soup: BeautifulSoup) -> list[str]:
    """Headings and product/title/name-flagged elements of plausible length."""
    names: list[str] = []
    for el in soup.select(NAME_SELECTOR):
        text = el.get_text().strip()
        if NAME_MIN_LEN <= len(text) <= NAME_MAX_LEN:
            names.append(text)
            if len(names) >= MAX_NAMES:
                break
    return names
