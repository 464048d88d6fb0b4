"""Static destination tables.

Used for:
- rule-based location recovery when no phrase pattern matches (gazetteer)
- region -> sub-location cross matching in location scoring (aliases)
"""

# Checked in this order; the first name found in the prompt wins.
COMMON_DESTINATIONS: tuple[str, ...] = (
    "maldives", "paris", "rome", "tokyo", "dubai", "new york", "orlando",
    "hawaii", "maui", "cancun", "london", "barcelona", "bali", "santorini",
    "denver", "aspen", "sedona", "whistler", "istanbul", "vienna", "kyoto",
)

LOCATION_ALIASES: dict[str, tuple[str, ...]] = {
    "hawaii": ("honolulu", "maui", "wailea", "lahaina"),
    "maldives": ("malé", "male"),
    "new york": ("nyc", "manhattan", "times square"),
    "orlando": ("disney", "walt disney world"),
    "paris": ("france",),
    "tokyo": ("japan",),
    "dubai": ("uae", "united arab emirates"),
}
