import re

from saferoute.services.geocoding.phrases import LocationPattern, extract_location_phrase


def test_prepositional_phrase():
    assert extract_location_phrase("Someone grabbed my bag near Joyce Kilmer Avenue") == "Joyce Kilmer Avenue"


def test_last_match_wins_within_family():
    text = "I was at the gym, then someone followed me near Buccleuch Park."
    assert extract_location_phrase(text) == "Buccleuch Park"


def test_chained_prepositions_split_into_separate_matches():
    assert extract_location_phrase("followed me in the parking lot near the gym") == "gym"
    assert extract_location_phrase("man at the corner by Easton Avenue") == "Easton Avenue"


def test_trailing_home_locality_is_trimmed():
    assert extract_location_phrase("dark alley on Handy Street in New Brunswick") == "Handy Street"


def test_marker_family_used_when_no_prepositional_phrase():
    assert extract_location_phrase("Location: Handy St. Bad lighting") == "Handy St"


def test_prepositional_family_is_tried_before_marker():
    assert extract_location_phrase("Location: Handy St, man lurking by the parking deck") == "parking deck"


def test_pronoun_objects_are_not_places():
    assert extract_location_phrase("Someone yelled at me") is None


def test_no_phrase():
    assert extract_location_phrase("felt unsafe walking home") is None
    assert extract_location_phrase("") is None
    assert extract_location_phrase(None) is None


def test_patterns_are_injectable():
    patterns = (LocationPattern("corner", re.compile(r"corner of (?P<phrase>[\w\s]+?) and", re.I)),)
    text = "corner of Somerset and George, then corner of Hamilton and Easton"
    assert extract_location_phrase(text, patterns) == "Hamilton"
