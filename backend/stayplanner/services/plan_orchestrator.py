"""Plan orchestrator - runs the full prompt-to-plan pipeline."""

import logging
import time

from stayplanner.errors import NoBrandCandidatesError, NoCandidatesError
from stayplanner.schemas.hotel import Brand, Hotel
from stayplanner.schemas.intent import Intent
from stayplanner.schemas.plan import PlannedHotel, PlanOption
from stayplanner.services.ancillary_curator import curate
from stayplanner.services.brand_links import build_brand_deep_link
from stayplanner.services.intent_extractor import IntentExtractor, intent_extractor
from stayplanner.services.planner_config import BUDGET_BANDS, planner_config
from stayplanner.services.ranking import filter_scored, select_best_brand, top_for_brand
from stayplanner.services.scoring_engine import ScoredHotel, score_hotels
from stayplanner.services.source_aggregator import SourceAggregator, source_aggregator

logger = logging.getLogger(__name__)


def apply_budget_price(hotels: list[Hotel], intent: Intent) -> None:
    """Source pages rarely carry real nightly rates: price every hotel at the band's typical rate."""
    if intent.budget is None:
        return
    typical = BUDGET_BANDS[intent.budget].typical
    for hotel in hotels:
        hotel.base_price_usd = typical


def get_highlights(hotel: Hotel, intent: Intent) -> list[str]:
    highlights = []

    if hotel.has_experience(intent.mood):
        highlights.append(f"Perfect for {intent.mood.value} experiences")

    if intent.party.has_kids and hotel.suitability.family:
        highlights.append("Family-friendly")

    if intent.party.is_couple and hotel.suitability.couples:
        highlights.append("Ideal for couples")

    if hotel.has_experience("beach"):
        highlights.append("Beachfront location")

    if hotel.has_experience("spa"):
        highlights.append("World-class spa")

    if hotel.amenities:
        highlights.append(hotel.amenities[0])

    return highlights[: planner_config.limits.highlights_per_hotel]


def build_rationale(brand: Brand, intent: Intent) -> str:
    where = f" in {intent.location}" if intent.location else ""
    return (
        f"Selected {brand.value.capitalize()} based on your preferences "
        f"for {intent.mood.value} experiences{where}."
    )


def assemble_plan(brand: Brand, ranked: list[ScoredHotel], intent: Intent) -> PlanOption:
    """
    Compose the plan for the winning brand from the ranked candidates.

    Raises NoBrandCandidatesError when the brand has no ranked hotel.
    """
    picked = top_for_brand(ranked, brand)
    if not picked:
        raise NoBrandCandidatesError(brand.value)

    return PlanOption(
        brand=brand,
        rationale=build_rationale(brand, intent),
        hotels=[
            PlannedHotel(
                hotel=s.hotel,
                score=s.score,
                highlights=get_highlights(s.hotel, intent),
                ancillaries=curate(intent, s.hotel),
                book_url=s.hotel.source_url or build_brand_deep_link(s.hotel),
            )
            for s in picked
        ],
    )


class PlanOrchestrator:
    """Coordinates extraction, brand search, scoring, selection and assembly."""

    def __init__(
        self,
        extractor: IntentExtractor | None = None,
        aggregator: SourceAggregator | None = None,
    ):
        self._extractor = extractor or intent_extractor
        self._aggregator = aggregator or source_aggregator

    async def plan_trip(self, prompt: str) -> PlanOption:
        """
        Turn a free-text request into a single-brand plan.

        Raises NoCandidatesError when nothing passes the ranking filter and
        NoBrandCandidatesError when the selected brand has no hotel left.
        """
        start_time = time.monotonic()

        # 1. Structured intent (never fails)
        intent = await self._extractor.extract(prompt)

        # 2. Brand fan-out (failed sources contribute nothing)
        hotels = await self._aggregator.search(intent.location)
        apply_budget_price(hotels, intent)

        # 3. Score, filter and rank
        ranked = filter_scored(score_hotels(hotels, intent), intent)
        if not ranked:
            logger.info(
                f"No candidates for mood={intent.mood.value} location='{intent.location}' "
                f"({len(hotels)} hotels before filtering)"
            )
            raise NoCandidatesError()

        # 4. Brand selection and assembly
        brand = select_best_brand(ranked)
        plan = assemble_plan(brand, ranked, intent)

        elapsed_ms = int((time.monotonic() - start_time) * 1000)
        logger.info(
            f"Plan ready: brand={brand.value} hotels={len(plan.hotels)} "
            f"candidates={len(ranked)}/{len(hotels)} in {elapsed_ms}ms"
        )
        return plan


plan_orchestrator = PlanOrchestrator()
