"""Scoring engine - ranks hotel candidates against a traveller's intent.

The score is the plain sum of six sub-scores (location, experience, party,
budget, non-negotiables, interests). It has no fixed range and can go
negative: a hotel in the wrong place is pushed below zero by the location
penalty so the ranking filter drops it.
"""

import re
from dataclasses import dataclass

from stayplanner.data.destinations import LOCATION_ALIASES
from stayplanner.schemas.hotel import ExperienceTag, Hotel
from stayplanner.schemas.intent import BudgetBand, Intent, Mood, Party
from stayplanner.services.planner_config import BUDGET_BANDS, planner_config

_PUNCTUATION = re.compile(r"[^\w\s]", re.ASCII)
_WHITESPACE = re.compile(r"\s+")

# mood -> property tag that partially satisfies it
_PARTIAL_EXPERIENCES: dict[Mood, ExperienceTag] = {
    Mood.ROMANTIC: ExperienceTag.RELAXING,
    Mood.ADVENTURE: ExperienceTag.MOUNTAIN,
}


@dataclass
class ScoredHotel:
    hotel: Hotel
    score: float


def normalize_location(value: str) -> str:
    """Lowercase, drop punctuation and collapse whitespace."""
    cleaned = _PUNCTUATION.sub("", value.lower().strip())
    return _WHITESPACE.sub(" ", cleaned).strip()


def fuzzy_match(first: str, second: str) -> bool:
    """
    Loose place-name comparison.

    Matches when the normalized strings are equal, when one contains the
    other, or when every significant word of `first` overlaps a word of
    `second` ("new york" vs "new york city"). Empty strings never match.
    """
    s1 = normalize_location(first)
    s2 = normalize_location(second)
    if not s1 or not s2:
        return False

    if s1 == s2:
        return True

    if s1 in s2 or s2 in s1:
        return True

    min_len = planner_config.match.fuzzy_min_word_length
    words1 = [w for w in s1.split(" ") if len(w) >= min_len]
    words2 = [w for w in s2.split(" ") if len(w) >= min_len]
    if words1 and words2:
        return all(any(w2 in w or w in w2 for w2 in words2) for w in words1)

    return False


def location_match(hotel: Hotel, intent_location: str) -> int:
    """Location sub-score before any penalty: 5, 4, 3 or 0."""
    weights = planner_config.location
    intent_loc = normalize_location(intent_location)
    if not intent_loc:
        return 0

    city = normalize_location(hotel.city)
    country = normalize_location(hotel.country)
    region = normalize_location(hotel.region) if hotel.region else ""

    if fuzzy_match(intent_loc, city):
        return weights.city

    if fuzzy_match(intent_loc, country):
        return weights.country

    if city and (intent_loc in city or city in intent_loc):
        return weights.substring

    if region and fuzzy_match(intent_loc, region):
        return weights.region

    # "hawaii" asked, hotel in "maui" - or the other way round
    for key, aliases in LOCATION_ALIASES.items():
        if fuzzy_match(intent_loc, key):
            if any(fuzzy_match(city, a) or fuzzy_match(country, a) for a in aliases):
                return weights.alias
        if any(fuzzy_match(intent_loc, a) for a in aliases):
            if fuzzy_match(city, key) or fuzzy_match(country, key):
                return weights.alias

    return 0


def location_score(hotel: Hotel, intent_location: str) -> int:
    """Location sub-score including the wrong-location penalty."""
    score = location_match(hotel, intent_location)
    if score == 0 and intent_location.strip():
        return planner_config.location.wrong_location_penalty
    return score


def experience_match(hotel: Hotel, mood: Mood) -> int:
    weights = planner_config.experience
    if hotel.has_experience(mood):
        return weights.exact
    partial = _PARTIAL_EXPERIENCES.get(mood)
    if partial is not None and hotel.has_experience(partial):
        return weights.partial
    return 0


def party_suitability(hotel: Hotel, party: Party) -> int:
    """Independent +2 bonuses for family, couple and group fit."""
    bonus = planner_config.match.party_bonus
    score = 0
    if party.has_kids and hotel.suitability.family:
        score += bonus
    if party.is_couple and hotel.suitability.couples:
        score += bonus
    if party.adults > 2 and hotel.suitability.groups:
        score += bonus
    return score


def budget_score(price: float, budget: BudgetBand | None) -> int:
    """In-band 3, then 2 / 1 / -1 as the price drifts from the band's typical rate."""
    if budget is None:
        return 0

    weights = planner_config.budget
    band = BUDGET_BANDS[budget]
    if band.contains(price):
        return weights.in_band

    distance = abs(price - band.typical)
    if distance < weights.near_distance:
        return weights.near
    if distance < weights.somewhat_distance:
        return weights.somewhat
    return weights.far


def _contains_count(haystack: str, needles: tuple[str, ...]) -> int:
    return sum(1 for n in needles if n.lower() in haystack)


def non_negotiables_match(hotel: Hotel, non_negotiables: tuple[str, ...]) -> int:
    if not non_negotiables:
        return 0
    hotel_text = f"{' '.join(hotel.amenities)} {' '.join(hotel.experience_values)}".lower()
    return planner_config.match.non_negotiable * _contains_count(hotel_text, non_negotiables)


def interests_match(hotel: Hotel, interests: tuple[str, ...]) -> int:
    if not interests:
        return 0
    hotel_text = (
        f"{' '.join(hotel.amenities)} {' '.join(hotel.experience_values)} "
        f"{hotel.city} {hotel.country}"
    ).lower()
    return planner_config.match.interest * _contains_count(hotel_text, interests)


def score_hotel(hotel: Hotel, intent: Intent) -> float:
    """Deterministic fitness of one hotel for one intent."""
    return float(
        location_score(hotel, intent.location)
        + experience_match(hotel, intent.mood)
        + party_suitability(hotel, intent.party)
        + budget_score(hotel.base_price_usd, intent.budget)
        + non_negotiables_match(hotel, intent.non_negotiables)
        + interests_match(hotel, intent.interests)
    )


def score_hotels(hotels: list[Hotel], intent: Intent) -> list[ScoredHotel]:
    """Score every candidate, preserving input order."""
    return [ScoredHotel(hotel=h, score=score_hotel(h, intent)) for h in hotels]
