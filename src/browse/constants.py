"""
Shared constants for catalog browsing filters.
"""

DEFAULT_PRICE_RANGE: tuple[float, float] = (0, 200000)

SORT_KEYS: tuple[str, ...] = ("featured", "newest", "popular", "most-loved", "price-low", "price-high")
DEFAULT_SORT = "featured"

VIEW_MODES: tuple[str, ...] = ("grid", "large")
DEFAULT_VIEW_MODE = "grid"

FILTER_CATEGORIES: tuple[str, ...] = ("materials", "types", "occasions", "collections")

# Options shown in the sidebar, by filter category
FILTER_OPTIONS: dict[str, list[str]] = {
    "materials": ["Gold", "Diamond", "Platinum", "Rose Gold", "White Gold", "Gemstone"],
    "types": ["Rings", "Earrings", "Necklaces", "Bracelets", "Bangles"],
    "occasions": ["Bridal", "Daily Wear", "Festive", "Office", "Gift Ideas"],
    "collections": ["Rivaah", "GlamDays", "Modern Minimal", "Signature Series"],
}
