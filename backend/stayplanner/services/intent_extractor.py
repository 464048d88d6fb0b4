"""Intent extractor - LLM structured extraction with a deterministic rule-based fallback."""

import json
import logging
import re

from pydantic import AliasChoices, BaseModel, Field, field_validator

from stayplanner.data.destinations import COMMON_DESTINATIONS
from stayplanner.errors import ExtractionDegraded
from stayplanner.schemas.intent import BudgetBand, Intent, Mood, Party, TripDates
from stayplanner.services.llm_client import LLMClient, llm_client

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are a travel intent extraction system. Extract structured information from user travel requests.

Location rules:
- Extract the most specific location mentioned (city, region, or country)
- Use the exact name as mentioned (e.g., "Maldives", "Paris", "New York", "Orlando")
- If multiple locations are mentioned, use the primary destination
- If the location is ambiguous, extract what the user most likely means
- Common locations: Maldives, Paris, Rome, New York, Orlando, Tokyo, Dubai, Cancun, Maui, Hawaii
- If no destination is mentioned, return an empty string

mood: one of adventure, relaxing, romantic, family, nightlife, culture, beach, mountain
party: number of adults and children (only if children are mentioned)
budget: value (<$150/night), mid ($150-350), premium ($350-700), luxury ($700+)
dates: YYYY-MM-DD, only if the user gives them
nonNegotiables: must-have features (e.g. waterpark, spa, beachfront)
interests: additional interests or activities

Return valid JSON only."""

USER_TEMPLATE = 'Extract travel intent from this request: "{prompt}"'

INTENT_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "mood": {
            "type": "string",
            "enum": [m.value for m in Mood],
            "description": "Primary mood or experience type desired",
        },
        "location": {"type": "string", "description": "City, region, or country name"},
        "party": {
            "type": "object",
            "properties": {
                "adults": {"type": "integer", "description": "Number of adults"},
                "kids": {"type": "integer", "description": "Number of children, if any"},
            },
            "required": ["adults"],
        },
        "dates": {
            "type": "object",
            "properties": {
                "start": {"type": "string", "description": "Start date in YYYY-MM-DD format"},
                "end": {"type": "string", "description": "End date in YYYY-MM-DD format"},
            },
        },
        "budget": {
            "type": "string",
            "enum": [b.value for b in BudgetBand],
            "description": "value (<$150/night), mid ($150-350), premium ($350-700), luxury ($700+)",
        },
        "nonNegotiables": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Must-have features or amenities",
        },
        "interests": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Additional interests or activities",
        },
    },
    "required": ["mood", "location", "party"],
}


class _ExtractedParty(BaseModel):
    adults: int | None = None
    kids: int | None = Field(default=None, ge=0)


class ExtractedIntent(BaseModel):
    """Model output as returned; every field may be missing."""

    mood: Mood | None = None
    location: str | None = None
    party: _ExtractedParty | None = None
    dates: TripDates | None = None
    budget: BudgetBand | None = None
    non_negotiables: list[str] | None = Field(
        default=None, validation_alias=AliasChoices("nonNegotiables", "non_negotiables")
    )
    interests: list[str] | None = None

    @field_validator("mood", "budget", mode="before")
    @classmethod
    def _lowercase(cls, value):
        if isinstance(value, str):
            return value.strip().lower() or None
        return value

    def to_intent(self, raw: str) -> Intent:
        """Apply field defaults: relaxing / "" / 2 adults / mid budget / empty lists."""
        adults = self.party.adults if self.party and self.party.adults else 2
        if adults < 1:
            adults = 2
        return Intent(
            raw=raw,
            mood=self.mood or Mood.RELAXING,
            location=(self.location or "").strip(),
            party=Party(adults=adults, kids=self.party.kids if self.party else None),
            dates=self.dates,
            budget=self.budget or BudgetBand.MID,
            non_negotiables=tuple(self.non_negotiables or ()),
            interests=tuple(self.interests or ()),
        )


# ─── Rule-based fallback tables ───

MOOD_RULES: tuple[tuple[Mood, tuple[str, ...]], ...] = (
    (Mood.ADVENTURE, ("adventure", "adventurous")),
    (Mood.ROMANTIC, ("romantic", "partner", "couple")),
    (Mood.FAMILY, ("family", "kids", "children")),
    (Mood.NIGHTLIFE, ("nightlife", "party")),
    (Mood.CULTURE, ("culture", "museum", "historic")),
    (Mood.BEACH, ("beach", "ocean", "coast")),
    (Mood.MOUNTAIN, ("mountain", "ski", "hiking")),
)

# "premium" only wins when luxury's broader set did not already match
BUDGET_RULES: tuple[tuple[BudgetBand, tuple[str, ...]], ...] = (
    (BudgetBand.VALUE, ("budget", "cheap", "affordable")),
    (BudgetBand.LUXURY, ("luxury", "premium", "high-end")),
    (BudgetBand.PREMIUM, ("premium",)),
)

NON_NEGOTIABLE_RULES: tuple[tuple[str, re.Pattern], ...] = (
    ("waterpark", re.compile(r"water\s?parks?")),
    ("spa", re.compile(r"\bspas?\b")),
    ("beachfront", re.compile(r"beach\s?front")),
)

_ADULTS = re.compile(r"(\d+)\s*(?:adults?|people|travell?ers?)")
_KIDS = re.compile(r"(\d+)\s*(?:kids?|children|child)")

# One or more capitalized words, e.g. "Paris", "New York City", "Malé"
_PLACE = r"([A-Z][a-zà-ÿ]+(?:\s+[A-Z][a-zà-ÿ]+)*)"

LOCATION_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(rf"\b(?:in|to|at|near|for)\s+{_PLACE}"),
    re.compile(rf"{_PLACE}\s+(?:vacation|trip|getaway|holiday)\b"),
    re.compile(rf"\b(?:going|traveling|travelling|visiting)\s+{_PLACE}"),
)


def detect_mood(lower: str) -> Mood:
    for mood, keywords in MOOD_RULES:
        if any(k in lower for k in keywords):
            return mood
    return Mood.RELAXING


def detect_party(lower: str) -> Party:
    adults_match = _ADULTS.search(lower)
    adults = int(adults_match.group(1)) if adults_match else 2
    kids_match = _KIDS.search(lower)
    kids = int(kids_match.group(1)) if kids_match else None
    return Party(adults=adults if adults >= 1 else 2, kids=kids)


def detect_location(prompt: str) -> str:
    """
    Last match of the first phrase pattern that matches at all, then the
    gazetteer. The gazetteer hit is returned as written in the prompt.
    """
    for pattern in LOCATION_PATTERNS:
        matches = pattern.findall(prompt)
        if matches:
            return matches[-1].strip()

    for name in COMMON_DESTINATIONS:
        found = re.search(rf"\b{re.escape(name)}\b", prompt, flags=re.IGNORECASE)
        if found:
            return found.group(0)

    return ""


def detect_budget(lower: str) -> BudgetBand:
    for band, keywords in BUDGET_RULES:
        if any(k in lower for k in keywords):
            return band
    return BudgetBand.MID


def detect_non_negotiables(lower: str) -> tuple[str, ...]:
    return tuple(token for token, pattern in NON_NEGOTIABLE_RULES if pattern.search(lower))


def fallback_extract(prompt: str) -> Intent:
    """Deterministic extraction, no external calls. Interests stay empty."""
    lower = prompt.lower()
    return Intent(
        raw=prompt,
        mood=detect_mood(lower),
        location=detect_location(prompt),
        party=detect_party(lower),
        budget=detect_budget(lower),
        non_negotiables=detect_non_negotiables(lower),
        interests=(),
    )


def _strip_code_fences(raw: str) -> str:
    if raw.startswith("```"):
        lines = [l for l in raw.split("\n") if not l.strip().startswith("```")]
        return "\n".join(lines).strip()
    return raw


class IntentExtractor:
    """Turns a free-text prompt into an Intent. Never fails."""

    def __init__(self, llm: LLMClient | None = None):
        self._llm = llm or llm_client

    async def extract(self, prompt: str) -> Intent:
        if not getattr(self._llm, "available", True):
            logger.info("No LLM provider configured, using rule-based intent extraction")
            return fallback_extract(prompt)

        try:
            return await self._extract_with_llm(prompt)
        except ExtractionDegraded as e:
            logger.warning(f"LLM intent extraction degraded, using fallback: {e}")
            return fallback_extract(prompt)

    async def _extract_with_llm(self, prompt: str) -> Intent:
        raw = ""
        try:
            raw = await self._llm.complete(
                system=SYSTEM_PROMPT,
                user=USER_TEMPLATE.format(prompt=prompt),
                json_schema=INTENT_SCHEMA,
                schema_name="travel_intent",
            )
            payload = json.loads(_strip_code_fences(raw))
            if not isinstance(payload, dict):
                raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
            return ExtractedIntent.model_validate(payload).to_intent(prompt)
        except json.JSONDecodeError as e:
            raise ExtractionDegraded(f"invalid JSON: {e}; raw: {raw[:200]}") from e
        except Exception as e:
            raise ExtractionDegraded(str(e)) from e


intent_extractor = IntentExtractor()
