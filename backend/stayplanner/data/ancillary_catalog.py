"""Static catalog of paid add-ons, keyed by enumerated category.

Used for:
- mood / party / property-tag driven curation
- direct lookup of a traveller's non-negotiables (e.g. "spa", "water park")
"""

from enum import Enum

from stayplanner.schemas.plan import Ancillary


class AncillaryCategory(str, Enum):
    WATERPARK = "waterpark"
    SPA = "spa"
    ROMANTIC = "romantic"
    FAMILY = "family"
    ADVENTURE = "adventure"
    BEACH = "beach"
    MOUNTAIN = "mountain"
    CULTURE = "culture"
    NIGHTLIFE = "nightlife"

    @classmethod
    def lookup(cls, key: str) -> "AncillaryCategory | None":
        """Resolve a derived key string, None when it names no category."""
        try:
            return cls(key)
        except ValueError:
            return None


ANCILLARY_CATALOG: dict[AncillaryCategory, tuple[Ancillary, ...]] = {
    AncillaryCategory.WATERPARK: (
        Ancillary(title="Waterpark Day Pass", description="Full access to resort waterpark", price_hint="From $50/person"),
        Ancillary(title="Waterpark Season Pass", description="Unlimited waterpark access", price_hint="From $150/person"),
    ),
    AncillaryCategory.SPA: (
        Ancillary(title="Couples Spa Package", description="90-minute couples massage", price_hint="From $300/couple"),
        Ancillary(title="Spa Day Pass", description="Access to spa facilities + treatment", price_hint="From $150/person"),
        Ancillary(title="Relaxation Massage", description="60-minute full body massage", price_hint="From $120/person"),
    ),
    AncillaryCategory.ROMANTIC: (
        Ancillary(title="Champagne Dinner", description="Private dinner with champagne", price_hint="From $200/couple"),
        Ancillary(title="Romantic Sunset Cruise", description="Private boat tour at sunset", price_hint="From $250/couple"),
        Ancillary(title="In-Room Romance Package", description="Rose petals, champagne, chocolates", price_hint="From $150"),
        Ancillary(title="Late Checkout", description="Extended checkout until 2pm", price_hint="Complimentary"),
    ),
    AncillaryCategory.FAMILY: (
        Ancillary(title="Kids Club Access", description="Supervised activities for children", price_hint="From $50/day"),
        Ancillary(title="Family Suite Upgrade", description="Upgrade to family-friendly suite", price_hint="From $100/night"),
        Ancillary(title="Family Photo Session", description="Professional family photos", price_hint="From $200"),
    ),
    AncillaryCategory.ADVENTURE: (
        Ancillary(title="Guided Hiking Tour", description="Expert-led mountain hiking", price_hint="From $80/person"),
        Ancillary(title="Adventure Gear Rental", description="Bikes, kayaks, and more", price_hint="From $40/day"),
        Ancillary(title="Zipline Experience", description="Thrilling zipline adventure", price_hint="From $120/person"),
        Ancillary(title="Rock Climbing Session", description="Indoor/outdoor climbing", price_hint="From $90/person"),
    ),
    AncillaryCategory.BEACH: (
        Ancillary(title="Beach Cabana Rental", description="Private beach cabana for the day", price_hint="From $150/day"),
        Ancillary(title="Snorkeling Excursion", description="Guided snorkeling tour", price_hint="From $70/person"),
        Ancillary(title="Surf Lesson", description="Professional surf instruction", price_hint="From $100/person"),
        Ancillary(title="Beachside Dining", description="Private beach dinner setup", price_hint="From $180/couple"),
    ),
    AncillaryCategory.MOUNTAIN: (
        Ancillary(title="Ski Equipment Rental", description="Full ski/snowboard gear", price_hint="From $60/day"),
        Ancillary(title="Ski Lesson Package", description="Private or group lessons", price_hint="From $120/person"),
        Ancillary(title="Mountain Guide Service", description="Expert mountain guide", price_hint="From $200/day"),
    ),
    AncillaryCategory.CULTURE: (
        Ancillary(title="Cultural Tour", description="Guided city and culture tour", price_hint="From $80/person"),
        Ancillary(title="Museum Pass", description="Access to local museums", price_hint="From $50/person"),
        Ancillary(title="Cooking Class", description="Learn local cuisine", price_hint="From $120/person"),
    ),
    AncillaryCategory.NIGHTLIFE: (
        Ancillary(title="VIP Nightclub Access", description="Skip-the-line club entry", price_hint="From $100/person"),
        Ancillary(title="Bar Crawl Experience", description="Guided bar hopping tour", price_hint="From $80/person"),
    ),
}
