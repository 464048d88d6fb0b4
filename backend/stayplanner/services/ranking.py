"""Ranking - threshold filter and brand selection over scored hotels."""

import logging
from collections import defaultdict

from stayplanner.schemas.hotel import Brand
from stayplanner.schemas.intent import Intent
from stayplanner.services.planner_config import planner_config
from stayplanner.services.scoring_engine import ScoredHotel

logger = logging.getLogger(__name__)

DEFAULT_BRAND = Brand.MARRIOTT


def filter_scored(scored: list[ScoredHotel], intent: Intent) -> list[ScoredHotel]:
    """
    Drop hotels below the acceptance threshold and sort by score descending.

    With no location every non-negative score survives. With a location the
    score must be strictly positive, which turns the wrong-location penalty
    into a hard gate. Ties keep their input order.
    """
    if intent.has_location:
        kept = [s for s in scored if s.score > 0]
    else:
        kept = [s for s in scored if s.score >= 0]

    kept.sort(key=lambda s: s.score, reverse=True)
    return kept


def brand_strengths(scored: list[ScoredHotel]) -> dict[Brand, float]:
    """Sum of each brand's top-N scores (fewer candidates sum what they have)."""
    by_brand: dict[Brand, list[float]] = defaultdict(list)
    for s in scored:
        by_brand[s.hotel.brand].append(s.score)

    top_n = planner_config.limits.brand_top_n
    return {
        brand: sum(sorted(scores, reverse=True)[:top_n])
        for brand, scores in by_brand.items()
    }


def select_best_brand(scored: list[ScoredHotel]) -> Brand:
    """
    Pick the brand with the strongest top-N sum.

    Marriott is the baseline (its own sum, or 0 when it has no candidates);
    another brand only wins with a strictly greater sum, visited in fixed
    brand order. Ties therefore always resolve to marriott.
    """
    strengths = brand_strengths(scored)

    best_brand = DEFAULT_BRAND
    best_score = strengths.get(DEFAULT_BRAND, 0)
    for brand in Brand:
        score = strengths.get(brand)
        if score is not None and score > best_score:
            best_brand = brand
            best_score = score

    summary = ", ".join(f"{b.value}={s:g}" for b, s in strengths.items())
    logger.debug(f"Brand strengths: {summary or 'none'} -> {best_brand.value}")
    return best_brand


def top_for_brand(ranked: list[ScoredHotel], brand: Brand, limit: int | None = None) -> list[ScoredHotel]:
    """Best-scoring hotels of one brand from an already ranked list."""
    if limit is None:
        limit = planner_config.limits.hotels_per_plan
    picked = [s for s in ranked if s.hotel.brand == brand]
    picked.sort(key=lambda s: s.score, reverse=True)
    return picked[:limit]
