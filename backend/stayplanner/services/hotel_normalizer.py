"""Utilities to turn raw brand search hits into normalized Hotel records."""

import re
from dataclasses import dataclass
from urllib.parse import urlparse

from stayplanner.schemas.hotel import Brand, ExperienceTag, Hotel, Suitability
from stayplanner.services.exa_client import SearchResult
from stayplanner.services.planner_config import planner_config


@dataclass(frozen=True)
class BrandSource:
    """Where a brand's properties live and what a property page URL looks like."""
    domain: str
    property_path: re.Pattern
    excluded_path: re.Pattern | None = None

    def is_property_url(self, url: str) -> bool:
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            return False
        path = parsed.path
        if not self.property_path.search(path):
            return False
        return not (self.excluded_path and self.excluded_path.search(path))


BRAND_SOURCES: dict[Brand, BrandSource] = {
    Brand.MARRIOTT: BrandSource(
        domain="marriott.com",
        property_path=re.compile(r"/hotels/"),
        excluded_path=re.compile(r"/(search|default\.mi)"),
    ),
    Brand.HILTON: BrandSource(domain="hilton.com", property_path=re.compile(r"/en/hotels/")),
    Brand.HYATT: BrandSource(domain="hyatt.com", property_path=re.compile(r"/en-US/hotel/")),
}

# Checked in order; a hotel keeps every tag that matches
TAG_RULES: tuple[tuple[ExperienceTag, re.Pattern], ...] = (
    (ExperienceTag.BEACH, re.compile(r"beach|ocean|coast|seaside|waterfront", re.IGNORECASE)),
    (ExperienceTag.SPA, re.compile(r"spa|massage|wellness|relaxation", re.IGNORECASE)),
    (ExperienceTag.MOUNTAIN, re.compile(r"mountain|ski|hiking|alpine", re.IGNORECASE)),
    (ExperienceTag.FAMILY, re.compile(r"family|kids|children|playground", re.IGNORECASE)),
    (ExperienceTag.NIGHTLIFE, re.compile(r"nightlife|bar|club|entertainment", re.IGNORECASE)),
    (ExperienceTag.CULTURE, re.compile(r"museum|culture|historic|art|gallery", re.IGNORECASE)),
    (ExperienceTag.ROMANTIC, re.compile(r"romantic|couples|honeymoon|intimate", re.IGNORECASE)),
    (ExperienceTag.ADVENTURE, re.compile(r"adventure|outdoor|sports|activities", re.IGNORECASE)),
    (ExperienceTag.WATERPARK, re.compile(r"waterpark|water park|slides", re.IGNORECASE)),
    (ExperienceTag.GOLF, re.compile(r"golf|course|fairway", re.IGNORECASE)),
)

_FAMILY = re.compile(r"family|kids|children|playground|family-friendly", re.IGNORECASE)
_COUPLES = re.compile(r"couples?|romantic|honeymoon|intimate", re.IGNORECASE)
_GROUPS = re.compile(r"group|conference|meeting|business|event", re.IGNORECASE)

_BRAND_SUFFIX = re.compile(r"\s*-\s*(Hilton|Hyatt|Marriott).*", re.IGNORECASE)

HERO_IMAGES = {
    "beach": "https://images.unsplash.com/photo-1507525428034-b723cf961d3e?w=800",
    "mountain": "https://images.unsplash.com/photo-1506905925346-21bda4d32df4?w=800",
    "spa": "https://images.unsplash.com/photo-1571896349842-33c89424de2d?w=800",
    "culture": "https://images.unsplash.com/photo-1529260830199-42c24126f198?w=800",
    "romantic": "https://images.unsplash.com/photo-1502602898657-3e91760cbb34?w=800",
    "default": "https://images.unsplash.com/photo-1566073771259-6a8506099945?w=800",
}


def infer_tags(text: str) -> list[ExperienceTag]:
    tags = [tag for tag, pattern in TAG_RULES if pattern.search(text)]
    return tags or [ExperienceTag.RELAXING]


def infer_suitability(text: str) -> Suitability:
    return Suitability(
        family=bool(_FAMILY.search(text)),
        couples=bool(_COUPLES.search(text)),
        groups=bool(_GROUPS.search(text)),
    )


def hero_for(tags: list[ExperienceTag]) -> str:
    """Pick a display image: beach > mountain > spa/relaxing > culture > romantic."""
    if ExperienceTag.BEACH in tags:
        return HERO_IMAGES["beach"]
    if ExperienceTag.MOUNTAIN in tags:
        return HERO_IMAGES["mountain"]
    if ExperienceTag.SPA in tags or ExperienceTag.RELAXING in tags:
        return HERO_IMAGES["spa"]
    if ExperienceTag.CULTURE in tags:
        return HERO_IMAGES["culture"]
    if ExperienceTag.ROMANTIC in tags:
        return HERO_IMAGES["romantic"]
    return HERO_IMAGES["default"]


def display_name(title: str | None, url: str) -> str:
    """Page title minus the "- <Brand> ..." suffix, else the URL slug, else "Unknown"."""
    name = _BRAND_SUFFIX.sub("", title or "").strip()
    if name:
        return name

    segments = [s for s in urlparse(url).path.split("/") if s]
    if segments:
        slug = re.sub(r"[-_]", " ", segments[-1]).strip()
        if slug:
            return slug
    return "Unknown"


def to_hotel(result: SearchResult, brand: Brand, location: str) -> Hotel:
    """
    Build a Hotel from one accepted search hit.

    City is the queried location, country is unknown, and the price is a
    provisional placeholder until the caller applies a budget band.
    """
    tags = infer_tags(result.text)
    return Hotel(
        id=f"{brand.value}:{result.url}",
        brand=brand,
        name=display_name(result.title, result.url),
        city=location,
        country="",
        base_price_usd=planner_config.limits.provisional_price_usd,
        suitability=infer_suitability(result.text),
        experiences=tags,
        amenities=[],
        hero_image=hero_for(tags),
        source_url=result.url,
    )


def normalize_results(results: list[SearchResult], brand: Brand, location: str) -> list[Hotel]:
    """Keep property pages only and normalize them. A repeated page keeps its first hit."""
    source = BRAND_SOURCES[brand]
    hotels = []
    seen: set[str] = set()
    for result in results:
        if not source.is_property_url(result.url):
            continue
        hotel = to_hotel(result, brand, location)
        if hotel.id in seen:
            continue
        seen.add(hotel.id)
        hotels.append(hotel)
    return hotels
