"""Planner configuration - single source for ranking weights, bands and caps.

These are fixed constants, not learned and not environment-configurable.
"""

import math
from dataclasses import dataclass, field

from stayplanner.schemas.intent import BudgetBand


@dataclass(frozen=True)
class BandRange:
    """Nightly rate band (USD)."""
    min: float
    max: float
    typical: float

    def contains(self, price: float) -> bool:
        return self.min <= price <= self.max


BUDGET_BANDS: dict[BudgetBand, BandRange] = {
    BudgetBand.VALUE: BandRange(min=0, max=150, typical=100),
    BudgetBand.MID: BandRange(min=150, max=350, typical=250),
    BudgetBand.PREMIUM: BandRange(min=350, max=700, typical=525),
    BudgetBand.LUXURY: BandRange(min=700, max=math.inf, typical=1000),
}


@dataclass(frozen=True)
class LocationScores:
    """Location sub-score by match kind."""
    city: int = 5
    country: int = 4
    substring: int = 4
    region: int = 3
    alias: int = 4
    wrong_location_penalty: int = -10   # applied when a location was asked for and nothing matched


@dataclass(frozen=True)
class ExperienceScores:
    exact: int = 3
    partial: int = 2     # romantic <- relaxing, adventure <- mountain


@dataclass(frozen=True)
class BudgetScores:
    in_band: int = 3
    near: int = 2        # distance from typical < near_distance
    somewhat: int = 1    # distance from typical < somewhat_distance
    far: int = -1
    near_distance: float = 100.0
    somewhat_distance: float = 200.0


@dataclass(frozen=True)
class MatchScores:
    party_bonus: int = 2           # per satisfied party rule
    non_negotiable: int = 3        # per satisfied must-have
    interest: int = 1              # per satisfied interest
    fuzzy_min_word_length: int = 3


@dataclass(frozen=True)
class PlanLimits:
    brand_top_n: int = 3           # top scores summed per brand
    hotels_per_plan: int = 3
    highlights_per_hotel: int = 3
    ancillaries_per_hotel: int = 4
    provisional_price_usd: float = 250.0


@dataclass(frozen=True)
class PlannerConfig:
    """Top-level config aggregating all sub-configs."""
    location: LocationScores = field(default_factory=LocationScores)
    experience: ExperienceScores = field(default_factory=ExperienceScores)
    budget: BudgetScores = field(default_factory=BudgetScores)
    match: MatchScores = field(default_factory=MatchScores)
    limits: PlanLimits = field(default_factory=PlanLimits)


# Singleton - import this everywhere
planner_config = PlannerConfig()
