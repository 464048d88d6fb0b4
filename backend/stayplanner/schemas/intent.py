from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class Mood(str, Enum):
    ADVENTURE = "adventure"
    RELAXING = "relaxing"
    ROMANTIC = "romantic"
    FAMILY = "family"
    NIGHTLIFE = "nightlife"
    CULTURE = "culture"
    BEACH = "beach"
    MOUNTAIN = "mountain"


class BudgetBand(str, Enum):
    VALUE = "value"
    MID = "mid"
    PREMIUM = "premium"
    LUXURY = "luxury"


class Party(BaseModel):
    adults: int = Field(default=2, ge=1)
    kids: int | None = Field(default=None, ge=0)

    model_config = {"frozen": True}

    @property
    def has_kids(self) -> bool:
        return bool(self.kids)

    @property
    def is_couple(self) -> bool:
        """Exactly two adults travelling without children."""
        return self.adults == 2 and not self.kids


class TripDates(BaseModel):
    start: date | None = None
    end: date | None = None

    model_config = {"frozen": True}

    @field_validator("start", "end", mode="before")
    @classmethod
    def _snap_date(cls, value):
        """Keep ISO dates, drop anything unparseable instead of failing."""
        if value is None or isinstance(value, date):
            return value
        try:
            return date.fromisoformat(str(value)[:10])
        except ValueError:
            return None


class Intent(BaseModel):
    """Structured travel request. Immutable once built."""

    raw: str
    mood: Mood = Mood.RELAXING
    location: str = ""
    party: Party = Field(default_factory=Party)
    dates: TripDates | None = None
    budget: BudgetBand | None = None
    non_negotiables: tuple[str, ...] = ()
    interests: tuple[str, ...] = ()

    model_config = {"frozen": True}

    @property
    def has_location(self) -> bool:
        return bool(self.location.strip())
