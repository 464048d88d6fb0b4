"""Ancillary curator - picks paid add-ons for an (intent, hotel) pair."""

import logging
import re

from stayplanner.data.ancillary_catalog import ANCILLARY_CATALOG, AncillaryCategory
from stayplanner.schemas.hotel import ExperienceTag, Hotel
from stayplanner.schemas.intent import Intent, Mood
from stayplanner.schemas.plan import Ancillary
from stayplanner.services.planner_config import planner_config

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")

# Categories added for each mood, in accumulation order
MOOD_CATEGORIES: dict[Mood, tuple[AncillaryCategory, ...]] = {
    Mood.ROMANTIC: (AncillaryCategory.ROMANTIC, AncillaryCategory.SPA),
    Mood.RELAXING: (AncillaryCategory.ROMANTIC, AncillaryCategory.SPA),
    Mood.ADVENTURE: (AncillaryCategory.ADVENTURE,),
    Mood.MOUNTAIN: (AncillaryCategory.ADVENTURE, AncillaryCategory.MOUNTAIN),
    Mood.BEACH: (AncillaryCategory.BEACH,),
    Mood.FAMILY: (AncillaryCategory.FAMILY,),
    Mood.CULTURE: (AncillaryCategory.CULTURE,),
    Mood.NIGHTLIFE: (AncillaryCategory.NIGHTLIFE,),
}

# Property tags that pull in their own catalog
TAG_CATEGORIES: tuple[tuple[ExperienceTag, AncillaryCategory], ...] = (
    (ExperienceTag.WATERPARK, AncillaryCategory.WATERPARK),
    (ExperienceTag.SPA, AncillaryCategory.SPA),
    (ExperienceTag.BEACH, AncillaryCategory.BEACH),
    (ExperienceTag.MOUNTAIN, AncillaryCategory.MOUNTAIN),
)


def _categories_for(intent: Intent, hotel: Hotel) -> list[AncillaryCategory]:
    categories = list(MOOD_CATEGORIES[intent.mood])

    if intent.party.has_kids:
        categories.append(AncillaryCategory.FAMILY)
    if intent.party.is_couple:
        categories.append(AncillaryCategory.ROMANTIC)

    for tag, category in TAG_CATEGORIES:
        if hotel.has_experience(tag):
            categories.append(category)

    for requirement in intent.non_negotiables:
        key = _WHITESPACE.sub("", requirement.lower())
        category = AncillaryCategory.lookup(key)
        if category is None:
            logger.debug(f"No ancillary catalog for non-negotiable '{requirement}'")
            continue
        categories.append(category)

    return categories


def curate(intent: Intent, hotel: Hotel, limit: int | None = None) -> list[Ancillary]:
    """
    Collect add-ons from every matching rule, dedupe by title (first wins)
    and cap the list.
    """
    if limit is None:
        limit = planner_config.limits.ancillaries_per_hotel

    seen: set[str] = set()
    curated: list[Ancillary] = []
    for category in _categories_for(intent, hotel):
        for ancillary in ANCILLARY_CATALOG[category]:
            if ancillary.title in seen:
                continue
            seen.add(ancillary.title)
            curated.append(ancillary)

    return curated[:limit]
