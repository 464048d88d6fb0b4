import itertools

from factories import make_hotel, make_intent
from stayplanner.schemas.hotel import ExperienceTag
from stayplanner.schemas.intent import Mood, Party
from stayplanner.services.ancillary_curator import curate


def _titles(ancillaries):
    return [a.title for a in ancillaries]


def test_romantic_couple_gets_romantic_catalog():
    intent = make_intent(mood=Mood.ROMANTIC, party=Party(adults=2))

    assert _titles(curate(intent, make_hotel())) == [
        "Champagne Dinner",
        "Romantic Sunset Cruise",
        "In-Room Romance Package",
        "Late Checkout",
    ]


def test_non_negotiable_key_drops_whitespace_and_case():
    intent = make_intent(mood=Mood.NIGHTLIFE, party=Party(adults=4), non_negotiables=("Water Park",))

    assert _titles(curate(intent, make_hotel())) == [
        "VIP Nightclub Access",
        "Bar Crawl Experience",
        "Waterpark Day Pass",
        "Waterpark Season Pass",
    ]


def test_unknown_non_negotiable_is_skipped():
    intent = make_intent(mood=Mood.NIGHTLIFE, party=Party(adults=4), non_negotiables=("beachfront",))

    assert _titles(curate(intent, make_hotel())) == ["VIP Nightclub Access", "Bar Crawl Experience"]


def test_repeated_categories_dedupe_by_title():
    intent = make_intent(mood=Mood.CULTURE, party=Party(adults=4), non_negotiables=("spa",))
    hotel = make_hotel(experiences=[ExperienceTag.SPA])

    assert _titles(curate(intent, hotel)) == [
        "Cultural Tour",
        "Museum Pass",
        "Cooking Class",
        "Couples Spa Package",
    ]


def test_kids_pull_in_family_not_romantic():
    intent = make_intent(mood=Mood.FAMILY, party=Party(adults=2, kids=2))

    titles = _titles(curate(intent, make_hotel(), limit=10))

    assert "Kids Club Access" in titles
    assert "Champagne Dinner" not in titles


def test_curate_never_duplicates_or_exceeds_cap():
    parties = [Party(adults=1), Party(adults=2), Party(adults=2, kids=1), Party(adults=6)]
    tag_sets = [[], [ExperienceTag.WATERPARK, ExperienceTag.SPA], [ExperienceTag.BEACH, ExperienceTag.MOUNTAIN]]
    requirements = [(), ("spa", "water park"), ("beachfront", "spa")]

    for mood, party, tags, musts in itertools.product(Mood, parties, tag_sets, requirements):
        intent = make_intent(mood=mood, party=party, non_negotiables=musts)
        titles = _titles(curate(intent, make_hotel(experiences=tags)))
        assert len(titles) <= 4
        assert len(titles) == len(set(titles))
