import pytest

from proximate.classifier import (
    calculate_confidence, classify, classify_housing_type, classify_intent, default_preferences,
    extract_bathrooms, extract_bedrooms, extract_budget, extract_lease_length, extract_location,
    generate_search_filters,
)

def test_classify_house_with_parking_under_budget():
    c = classify("2 bedroom house with parking under $1200")

    assert set(c.preferences.bedrooms) == {2}
    assert "parking" in c.preferences.amenities
    assert c.preferences.price_range.max == 1200
    assert c.housing_type == "house"
    assert c.preferences.parking is True
    assert [e.type for e in c.extracted_entities] == ["budget", "bedrooms", "amenities"]
    assert c.confidence == pytest.approx((0.9 + 0.9 + 0.8) / 3)

def test_classify_studio_near_campus():
    c = classify("studio near campus")

    assert c.preferences.bedrooms == [1]
    assert c.preferences.distance_to_campus <= 2
    assert c.housing_type == "studio"
    location = c.first_entity("location")
    assert location.value.is_near_campus is True
    assert "near campus" in location.value.keywords

@pytest.mark.parametrize("text", ["hello there", "   ", ""])
def test_no_recognizable_pattern_keeps_defaults(text):
    c = classify(text)

    assert c.confidence == 0
    assert c.extracted_entities == []
    assert c.intent == "search"
    assert c.preferences.model_dump() == default_preferences().model_dump()

@pytest.mark.parametrize("value", [None, 42, ["2 bedroom"], {"q": "studio"}])
def test_non_string_input_never_raises(value):
    c = classify(value)

    assert c.original_input == ""
    assert c.confidence == 0
    assert c.intent == "search"
    assert c.housing_type == "apartment"

def test_budget_first_pattern_wins():
    # "\$N" va antes que "under N" en el orden declarado
    assert extract_budget("under 900, could stretch to $1100") == 1100
    assert extract_budget("budget of 750 dollars") == 750

def test_qualitative_budget_words_add_no_number():
    c = classify("affordable luxury apartment")

    assert c.first_entity("budget") is None
    assert c.preferences.price_range.max == 0
    assert c.confidence == 0

def test_bedrooms_are_a_deduplicated_union():
    assert sorted(extract_bedrooms("studio or 2 bedroom apartment")) == [1, 2]
    assert extract_bedrooms("2 bed 2 bedroom 2 br") == [2]
    assert sorted(extract_bedrooms("two bed or double")) == [2]
    assert extract_bedrooms("three bedroom") == [3]
    assert extract_bedrooms("one bed") == [1]

def test_bathrooms_half_and_decimal():
    assert set(extract_bathrooms("2 bath and a half bath")) == {2, 0.5}
    assert extract_bathrooms("1.5 bathroom") == [1.5]
    assert extract_bathrooms("private bath") == []

def test_amenities_set_derived_flags():
    c = classify("pet friendly furnished place with wifi and laundry")
    prefs = c.preferences

    assert {"pet friendly", "furnished", "wifi", "laundry"} <= set(prefs.amenities)
    assert prefs.pet_friendly and prefs.furnished and prefs.wifi and prefs.laundry
    assert prefs.parking is False
    dumped = prefs.model_dump(by_alias=True)
    assert dumped["petFriendly"] is True
    assert dumped["parking"] is False

def test_amenities_match_substrings():
    c = classify("close to a gymnasium")
    assert "gym" in c.preferences.amenities

def test_location_distance_and_near_campus_cap():
    assert extract_location("within 3 miles").distance == 3
    assert extract_location("5 miles away but near campus").distance == 2
    assert extract_location("1 mile, walking distance").distance == 1
    assert extract_location("somewhere quiet") is None

def test_location_accepts_decimal_distances():
    loc = extract_location("within 1.5 miles")
    assert loc.distance == 1.5
    assert generate_search_filters(classify("within 1.5 miles")).distance_to_campus == 1.5
    assert extract_location("0.5 mile from campus").distance == 0.5

@pytest.mark.parametrize("text, expected", [
    ("3 blocks", 3),
    ("10 minutes walk", 10),
    ("5 minutes drive", 5),
    # el cap de "short walk" pisa al número
    ("short walk, 4 miles", 2),
    # gana el primer patrón de la tabla (millas), no el primero en el texto
    ("15 minutes walk or 2 miles", 2),
])
def test_location_distance_units(text, expected):
    assert extract_location(text).distance == expected

def test_lease_length():
    assert extract_lease_length("6 month lease") == 6
    assert extract_lease_length("year lease please") == 12
    assert extract_lease_length("short term stay") == 6
    assert extract_lease_length("long term rental") == 18
    assert extract_lease_length("flexible") is None

def test_housing_type_uses_declared_group_order():
    assert classify_housing_type("condo or house") == "house"
    assert classify_housing_type("roommate wanted") == "shared"
    assert classify_housing_type("something to live in") == "apartment"

def test_intent_priority():
    assert classify_intent("show me listings i want") == "search"
    assert classify_intent("show me houses") == "display"
    assert classify_intent("can you recommend a place") == "recommendation"
    assert classify_intent("2 bedroom") == "search"

def test_confidence_is_clamped_mean():
    assert calculate_confidence([]) == 0
    c = classify("2 bedroom 1 bath with pool under $900, 3 miles, 12 month lease")
    assert len(c.extracted_entities) == 6
    assert 0 < c.confidence <= 1

def test_classify_is_idempotent():
    text = "looking for a furnished 2 br apartment near campus under $1000"
    assert classify(text).model_dump() == classify(text).model_dump()

def test_generate_search_filters_matches_preferences():
    c = classify("3 bedroom house with a yard under $1800, 12 month lease")
    filters = generate_search_filters(c)

    assert filters.model_dump() == c.preferences.model_dump()
    assert filters is not c.preferences
    assert filters.lease_length == 12

def test_huge_budget_number_is_ignored():
    text = "$" + "9" * 400
    assert extract_budget(text) is None

    c = classify(text)
    assert c.first_entity("budget") is None
    assert c.preferences.price_range.max == 0
