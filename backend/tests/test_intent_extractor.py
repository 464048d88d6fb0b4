import json
import logging
from datetime import date

import pytest

from factories import FakeLLM
from stayplanner.schemas.intent import BudgetBand, Mood
from stayplanner.services.intent_extractor import INTENT_SCHEMA, IntentExtractor, fallback_extract


# ─── Rule-based fallback ───


def test_fallback_romantic_paris():
    intent = fallback_extract("Romantic getaway to Paris for two")

    assert intent.mood == Mood.ROMANTIC
    assert intent.location == "Paris"
    assert intent.party.adults == 2
    assert intent.party.kids is None
    assert intent.budget == BudgetBand.MID
    assert intent.interests == ()


def test_fallback_family_with_waterpark():
    intent = fallback_extract("Family trip to Orlando with 2 adults and 3 kids, must have a water park")

    assert intent.mood == Mood.FAMILY
    assert intent.location == "Orlando"
    assert intent.party.adults == 2
    assert intent.party.kids == 3
    assert intent.non_negotiables == ("waterpark",)


def test_fallback_cheap_ski_trip():
    intent = fallback_extract("Cheap ski trip in Aspen")

    assert intent.mood == Mood.MOUNTAIN
    assert intent.budget == BudgetBand.VALUE
    assert intent.location == "Aspen"


def test_fallback_gazetteer_keeps_prompt_casing():
    intent = fallback_extract("I want to relax somewhere in the MALDIVES")

    assert intent.location == "MALDIVES"
    assert intent.mood == Mood.RELAXING


def test_fallback_prefers_last_phrase_match():
    assert fallback_extract("Flying from Boston to Rome, then to Florence").location == "Florence"


def test_fallback_location_stops_at_all_caps_word():
    assert fallback_extract("Beach trip to Paris ASAP").location == "Paris"
    assert fallback_extract("Trip to New York NOW").location == "New York"
    assert fallback_extract("Honeymoon near Malé please").location == "Malé"


def test_fallback_premium_maps_to_luxury():
    assert fallback_extract("A premium stay please").budget == BudgetBand.LUXURY


def test_fallback_defaults():
    intent = fallback_extract("somewhere nice")

    assert intent.mood == Mood.RELAXING
    assert intent.location == ""
    assert intent.party.adults == 2
    assert intent.budget == BudgetBand.MID
    assert intent.non_negotiables == ()


def test_fallback_spa_needs_whole_word():
    assert fallback_extract("Need some space to think").non_negotiables == ()
    assert fallback_extract("Hotel with a spa").non_negotiables == ("spa",)


# ─── LLM path ───


def _extract(asyncio_event_loop, llm, prompt="Beach week in the Maldives"):
    return asyncio_event_loop.run_until_complete(IntentExtractor(llm=llm).extract(prompt))


def test_llm_output_is_parsed(asyncio_event_loop):
    llm = FakeLLM(json.dumps({
        "mood": "Beach",
        "location": " Maldives ",
        "party": {"adults": 2},
        "budget": "LUXURY",
        "nonNegotiables": ["spa"],
    }))

    intent = _extract(asyncio_event_loop, llm)

    assert intent.mood == Mood.BEACH
    assert intent.location == "Maldives"
    assert intent.budget == BudgetBand.LUXURY
    assert intent.non_negotiables == ("spa",)
    assert intent.interests == ()
    assert llm.calls[0]["json_schema"] is INTENT_SCHEMA


def test_llm_missing_fields_get_defaults(asyncio_event_loop):
    intent = _extract(asyncio_event_loop, FakeLLM("{}"), prompt="anything")

    assert intent.mood == Mood.RELAXING
    assert intent.location == ""
    assert intent.party.adults == 2
    assert intent.budget == BudgetBand.MID
    assert intent.raw == "anything"


def test_llm_zero_adults_defaults_to_two(asyncio_event_loop):
    intent = _extract(asyncio_event_loop, FakeLLM('{"mood": "family", "party": {"adults": 0, "kids": 2}}'))

    assert intent.party.adults == 2
    assert intent.party.kids == 2


def test_llm_code_fences_are_stripped(asyncio_event_loop):
    raw = '```json\n{"mood": "culture", "location": "Rome"}\n```'

    intent = _extract(asyncio_event_loop, FakeLLM(raw))

    assert intent.mood == Mood.CULTURE
    assert intent.location == "Rome"


def test_llm_dates_are_snapped(asyncio_event_loop):
    raw = json.dumps({"mood": "beach", "dates": {"start": "2025-03-01T00:00:00", "end": "next week"}})

    intent = _extract(asyncio_event_loop, FakeLLM(raw))

    assert intent.dates.start == date(2025, 3, 1)
    assert intent.dates.end is None


@pytest.mark.parametrize(
    "llm",
    [
        FakeLLM("not json at all"),
        FakeLLM('["beach"]'),
        FakeLLM('{"mood": "sleepy"}'),
        FakeLLM(error=RuntimeError("All LLM providers failed: boom")),
    ],
    ids=["invalid-json", "not-an-object", "unknown-mood", "provider-error"],
)
def test_llm_failures_fall_back_to_rules(asyncio_event_loop, llm, caplog):
    prompt = "Romantic getaway to Paris"

    with caplog.at_level(logging.WARNING, logger="stayplanner.services.intent_extractor"):
        intent = _extract(asyncio_event_loop, llm, prompt=prompt)

    assert intent == fallback_extract(prompt)
    assert "degraded" in caplog.text


def test_unavailable_llm_is_never_called(asyncio_event_loop):
    llm = FakeLLM("{}", available=False)

    intent = _extract(asyncio_event_loop, llm, prompt="Cheap ski trip in Aspen")

    assert llm.calls == []
    assert intent.location == "Aspen"
