"""Synthetic business profile derived from the domain name alone.

Used when the storefront can't be fetched or yields nothing useful.
"""

import random
from dataclasses import dataclass

from .models import WebsiteProfile
from .tables import (
    DEFAULT_DESCRIPTOR,
    DOMAIN_INDUSTRY_KEYWORDS,
    GENERIC_PRODUCTS,
    INDUSTRY_PRODUCTS,
    PRODUCT_PRICE_RANGE,
)


@dataclass(frozen=True)
class DomainInfo:
    domain: str
    company_name: str
    detected_industry: str  # descriptor, e.g. "beauty cosmetics"


def company_name_from_domain(domain: str) -> str:
    """Leading label of a hostname.

    >>> company_name_from_domain("beautybox.com")
    'beautybox'
    """
    return domain.split(".")[0]


def search_website_info(domain: str, company_name: str) -> DomainInfo:
    """Match the domain against DOMAIN_INDUSTRY_KEYWORDS; first hit wins."""
    detected = DEFAULT_DESCRIPTOR
    for keyword, descriptor in DOMAIN_INDUSTRY_KEYWORDS:
        if keyword in domain or keyword in company_name:
            detected = descriptor
            break
    return DomainInfo(domain=domain, company_name=company_name, detected_industry=detected)


def analyze_search_results(info: DomainInfo, rng: random.Random | None = None) -> WebsiteProfile:
    """Turn a DomainInfo into a WebsiteProfile with catalog products and random prices."""
    rng = rng or random.Random()
    descriptor = info.detected_industry

    title = f"{info.company_name[:1].upper()}{info.company_name[1:]} - {descriptor}"
    description = f"Premium {descriptor} products and services"

    product_names = list(INDUSTRY_PRODUCTS.get(descriptor, GENERIC_PRODUCTS))
    low, high = PRODUCT_PRICE_RANGE
    # whole cents so the formatted price never rounds up to the upper bound
    product_prices = [
        f"{rng.randrange(int(low * 100), int(high * 100)) / 100:.2f}" for _ in product_names
    ]

    return WebsiteProfile(
        title=title,
        description=description,
        keywords=descriptor.split(" "),
        product_prices=product_prices,
        product_names=product_names,
        domain=info.domain,
        method="intelligent_analysis",
    )


def generate_fallback_profile(domain: str, rng: random.Random | None = None) -> WebsiteProfile:
    """Classify ``domain`` by keyword and synthesize its profile."""
    info = search_website_info(domain, company_name_from_domain(domain))
    return analyze_search_results(info, rng)
