import pytest

from factories import make_hotel, make_intent
from stayplanner.schemas.hotel import Brand, ExperienceTag, Suitability
from stayplanner.schemas.intent import BudgetBand, Mood, Party
from stayplanner.services.planner_config import BUDGET_BANDS
from stayplanner.services.scoring_engine import (
    budget_score,
    experience_match,
    fuzzy_match,
    interests_match,
    location_match,
    location_score,
    non_negotiables_match,
    normalize_location,
    party_suitability,
    score_hotel,
)


def test_normalize_location_strips_punctuation_and_spaces():
    assert normalize_location("  St. Lucia!  ") == "st lucia"
    assert normalize_location("New   York,\tCity") == "new york city"


@pytest.mark.parametrize("value", ["paris", "new york", "walt disney world", "mal", "x"])
def test_fuzzy_match_is_reflexive(value):
    assert fuzzy_match(value, value)


def test_fuzzy_match_rules():
    assert fuzzy_match("New York", "new york city")
    assert fuzzy_match("york new", "new york")
    assert not fuzzy_match("paris", "rome")
    assert not fuzzy_match("", "")
    assert not fuzzy_match("paris", "")


def test_location_match_city_country_region_alias():
    assert location_match(make_hotel(city="Paris"), "paris") == 5
    assert location_match(make_hotel(city="", country="France"), "France") == 4
    assert location_match(make_hotel(city="Zermatt", region="Swiss Alps"), "Alps") == 3
    assert location_match(make_hotel(city="Wailea"), "Hawaii") == 4
    assert location_match(make_hotel(city="New York"), "NYC") == 4
    assert location_match(make_hotel(city="Rome"), "Tokyo") == 0
    assert location_match(make_hotel(city="Rome"), "") == 0


def test_wrong_location_is_penalized():
    hotel = make_hotel(city="Rome", experiences=[ExperienceTag.BEACH])
    intent = make_intent(location="Tokyo", mood=Mood.BEACH)

    assert location_score(hotel, "Tokyo") == -10
    base_without_location = experience_match(hotel, intent.mood)
    assert score_hotel(hotel, intent) <= base_without_location - 10


def test_empty_location_never_penalized():
    hotel = make_hotel(city="Rome", experiences=[ExperienceTag.CULTURE])
    intent = make_intent(location="  ", mood=Mood.CULTURE)

    assert location_score(hotel, intent.location) == 0
    assert score_hotel(hotel, intent) == 3


def test_experience_match():
    beach = make_hotel(experiences=[ExperienceTag.BEACH, ExperienceTag.SPA])
    relaxing = make_hotel(experiences=[ExperienceTag.RELAXING])
    mountain = make_hotel(experiences=[ExperienceTag.MOUNTAIN])
    romantic = make_hotel(experiences=[ExperienceTag.ROMANTIC])

    assert experience_match(beach, Mood.BEACH) == 3
    assert experience_match(relaxing, Mood.ROMANTIC) == 2
    assert experience_match(mountain, Mood.ADVENTURE) == 2
    assert experience_match(beach, Mood.CULTURE) == 0
    assert experience_match(romantic, Mood.RELAXING) == 0


def test_party_suitability_is_additive():
    all_round = make_hotel(suitability=Suitability(family=True, couples=True, groups=True))

    assert party_suitability(all_round, Party(adults=2)) == 2
    assert party_suitability(all_round, Party(adults=2, kids=1)) == 2
    assert party_suitability(all_round, Party(adults=4, kids=2)) == 4
    assert party_suitability(all_round, Party(adults=1)) == 0
    assert party_suitability(make_hotel(), Party(adults=4, kids=2)) == 0


def test_budget_score_bands():
    assert budget_score(5000, None) == 0
    assert budget_score(250, BudgetBand.MID) == 3
    assert budget_score(350, BudgetBand.MID) == 3
    assert budget_score(175, BudgetBand.VALUE) == 2
    assert budget_score(720, BudgetBand.PREMIUM) == 1
    assert budget_score(100, BudgetBand.LUXURY) == -1


@pytest.mark.parametrize("band", list(BudgetBand))
def test_budget_score_never_improves_with_distance(band):
    typical = BUDGET_BANDS[band].typical
    for direction in (1, -1):
        prices = [typical + direction * d for d in range(0, 1500, 10)]
        prices = [p for p in prices if p > 0]
        scores = [budget_score(p, band) for p in prices]
        assert all(a >= b for a, b in zip(scores, scores[1:])), (band, direction, scores)


def test_non_negotiable_counted_once_per_token():
    hotel = make_hotel(amenities=["Spa Access"], experiences=[ExperienceTag.SPA])

    assert non_negotiables_match(hotel, ("spa",)) == 3
    assert non_negotiables_match(hotel, ("spa", "waterpark")) == 3
    assert non_negotiables_match(hotel, ()) == 0


def test_interests_match_city_and_amenities():
    hotel = make_hotel(city="Paris", amenities=["Rooftop bar"])

    assert interests_match(hotel, ("paris", "rooftop", "golf")) == 2


def test_maldives_scenario_scores():
    intent = make_intent(mood=Mood.BEACH, location="Maldives", party=Party(adults=2), budget=BudgetBand.LUXURY)
    h1 = make_hotel(
        id="hilton:h1",
        brand=Brand.HILTON,
        city="Malé",
        experiences=[ExperienceTag.BEACH, ExperienceTag.SPA],
        base_price_usd=1000,
        suitability=Suitability(couples=True),
    )
    h2 = make_hotel(
        id="marriott:h2",
        brand=Brand.MARRIOTT,
        city="Paris",
        experiences=[ExperienceTag.CULTURE],
        base_price_usd=1000,
    )

    assert score_hotel(h1, intent) == 13
    assert score_hotel(h2, intent) == -7


def test_blank_tokens_match_any_hotel():
    hotel = make_hotel(city="Paris", amenities=["Pool"])

    assert non_negotiables_match(hotel, ("",)) == 3
    assert interests_match(hotel, ("", "golf")) == 1
