"""Static lookup tables driving classification and the synthetic report data.

Ordered tables are tuples (iteration order matters: first match wins).
Keyed tables are read-only mappings.
"""

from types import MappingProxyType

INDUSTRIES = ("fashion", "beauty", "electronics", "fitness", "home", "general")

# ---------------------------------------------------------------------------
# Fallback generator: domain keyword -> industry descriptor (first match wins)
# ---------------------------------------------------------------------------

DOMAIN_INDUSTRY_KEYWORDS = (
    ("shopify", "ecommerce platform"),
    ("store", "retail ecommerce"),
    ("shop", "online store"),
    ("beauty", "beauty cosmetics"),
    ("fashion", "clothing apparel"),
    ("tech", "technology electronics"),
    ("home", "home furniture decor"),
    ("fitness", "fitness health wellness"),
)

DEFAULT_DESCRIPTOR = "general"

INDUSTRY_PRODUCTS = MappingProxyType({
    "beauty cosmetics": ("Foundation", "Lipstick", "Skincare Set", "Eye Shadow"),
    "clothing apparel": ("T-Shirt", "Jeans", "Dress", "Sneakers"),
    "technology electronics": ("Smartphone", "Laptop", "Headphones", "Tablet"),
    "home furniture decor": ("Sofa", "Dining Table", "Bed Frame", "Lamp"),
    "fitness health wellness": ("Protein Powder", "Yoga Mat", "Dumbbells", "Supplement"),
})

GENERIC_PRODUCTS = ("Product 1", "Product 2", "Product 3", "Product 4")

PRODUCT_PRICE_RANGE = (20.0, 220.0)

# ---------------------------------------------------------------------------
# Classifier: industry -> synonyms, checked in this order
# ---------------------------------------------------------------------------

INDUSTRY_SYNONYMS = (
    ("fashion", ("fashion", "clothing", "apparel")),
    ("beauty", ("beauty", "cosmetics", "skincare")),
    ("electronics", ("electronics", "tech", "gadget")),
    ("fitness", ("fitness", "sports", "workout")),
    ("home", ("home", "furniture", "decor")),
)

DEFAULT_INDUSTRY = "general"

# ---------------------------------------------------------------------------
# Competitors
# ---------------------------------------------------------------------------

INDUSTRY_COMPETITORS = MappingProxyType({
    "fashion": ("zara.com", "hm.com", "asos.com", "uniqlo.com"),
    "electronics": ("apple.com", "samsung.com", "sony.com", "lg.com"),
    "beauty": ("sephora.com", "ulta.com", "beautylish.com", "glossier.com"),
    "fitness": ("nike.com", "adidas.com", "lululemon.com", "underarmour.com"),
    "home": ("wayfair.com", "ikea.com", "target.com", "homedepot.com"),
})

GENERIC_COMPETITORS = ("competitor1.com", "competitor2.com", "competitor3.com")

COMPETITOR_KEYWORDS = ("brand keyword", "product category", "competitor term")
COMPETITOR_AD_CHANNELS = ("Google Ads", "Facebook Ads", "Instagram Ads")

# Half-open ranges [low, high)
REVENUE_RANGE_M = (1.0, 6.0)
AD_SPEND_RANGE_K = (50.0, 250.0)
ROAS_RANGE = (200, 500)
MARKET_SHARE_RANGE = (5, 20)

# ---------------------------------------------------------------------------
# Market intelligence
# ---------------------------------------------------------------------------

MARKET_SIZE_RANGE_B = (10.0, 60.0)
GROWTH_RATE_RANGE = (5.0, 20.0)

TOP_TRENDS = ("sustainable products", "mobile shopping", "personalization")

SEASONALITY = (
    ("Jan", 85), ("Feb", 78), ("Mar", 92), ("Apr", 88),
    ("May", 95), ("Jun", 82), ("Jul", 75), ("Aug", 80),
    ("Sep", 90), ("Oct", 98), ("Nov", 100), ("Dec", 95),
)

# (age bucket, share %, engagement)
AGE_GROUPS = (
    ("18-24", 15, 85),
    ("25-34", 35, 92),
    ("35-44", 28, 88),
    ("45-54", 15, 75),
    ("55+", 7, 65),
)

# (region, share %, growth %)
GEO_DISTRIBUTION = (
    ("North America", 45, 12),
    ("Europe", 30, 18),
    ("Asia Pacific", 20, 25),
    ("Others", 5, 8),
)

# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

# industry -> (roas, ctr, cpc, cvr)
BASELINE_METRICS = MappingProxyType({
    "fashion": (280, 2.1, 0.75, 2.8),
    "beauty": (320, 2.8, 0.85, 3.2),
    "electronics": (250, 1.9, 1.2, 2.1),
    "fitness": (290, 2.3, 0.65, 2.9),
    "home": (260, 2.0, 0.95, 2.5),
    "general": (240, 2.0, 0.8, 2.4),
})

# Symmetric jitter applied around each baseline value
METRIC_JITTER = MappingProxyType({
    "roas": 20.0,
    "ctr": 0.2,
    "cpc": 0.1,
    "cvr": 0.3,
})

# (channel, current %, optimized %, roi)
BUDGET_OPTIMIZATION = (
    ("Google Ads", 35, 45, 4.2),
    ("Meta Ads", 40, 35, 3.8),
    ("TikTok Ads", 25, 20, 2.9),
)

# ---------------------------------------------------------------------------
# Stage labels and user-facing messages
# ---------------------------------------------------------------------------

STAGE_CONNECTING = "Connecting to website..."
STAGE_STRUCTURE = "Analyzing website structure..."
STAGE_INTELLIGENCE = "Gathering website intelligence..."
STAGE_CATEGORY = "Identifying business category..."
STAGE_COMPETITORS = "Researching competitors..."
STAGE_MARKET = "Gathering market intelligence..."
STAGE_RECOMMENDATIONS = "Generating AI recommendations..."
STAGE_FINALIZING = "Finalizing insights..."
STAGE_COMPLETE = "Analysis complete!"

MSG_EMPTY_URL = "Please enter a valid website URL"
MSG_INVALID_URL = "Please enter a valid URL (e.g., https://example.com)"
MSG_LIMITED_DATA = "Analysis completed with limited data. Some features may use estimated values."
MSG_BUSY = "An analysis is already in progress"
