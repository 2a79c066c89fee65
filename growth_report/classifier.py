"""Rule-based industry classification."""

from .models import WebsiteProfile
from .tables import DEFAULT_INDUSTRY, INDUSTRY_SYNONYMS


def determine_industry(website: WebsiteProfile) -> str:
    """
    Map a profile to one of the INDUSTRIES labels.

    Title, description and keywords are folded into one lowercase blob and
    checked against INDUSTRY_SYNONYMS in order; the first category with any
    synonym substring wins, so "fashion beauty" is fashion.
    """
    content = " ".join(
        [website.title, website.description, " ".join(website.keywords or [])]
    ).lower()

    for industry, synonyms in INDUSTRY_SYNONYMS:
        if any(term in content for term in synonyms):
            return industry
    return DEFAULT_INDUSTRY
