from proximate.classifier import classify
from proximate.mapping import amenities_filter, build_query
from proximate.schemas import PreferenceRecord, PriceRange

def test_default_preferences_only_constrain_availability():
    assert build_query(PreferenceRecord()) == {"available": True}

def test_build_query_basic():
    prefs = PreferenceRecord(
        price_range=PriceRange(min=500, max=1200),
        bedrooms=[1, 2],
        bathrooms=[1.5],
        amenities=["pool"],
        distance_to_campus=3,
    )
    q = build_query(prefs)

    assert q["price"] == {"$lte": 1200, "$gte": 500}
    assert q["bedrooms"] == {"$in": [1, 2]}
    assert q["bathrooms"] == {"$in": [1.5]}
    assert q["distanceToCampus"] == {"$lte": 3}
    assert q["amenities"] == {"$in": ["pool"]}
    assert q["available"] is True

def test_min_price_ignored_without_max():
    q = build_query(PreferenceRecord(price_range=PriceRange(min=500, max=0)))
    assert "price" not in q

def test_distance_sentinel():
    assert "distanceToCampus" not in build_query(PreferenceRecord(distance_to_campus=10))
    assert build_query(PreferenceRecord(distance_to_campus=9.5))["distanceToCampus"] == {"$lte": 9.5}

def test_flags_add_store_labels():
    prefs = classify("pet friendly place with parking and wifi").preferences
    wanted = amenities_filter(prefs)

    assert {"pet friendly", "parking", "wifi"} <= set(wanted)
    assert {"Pet Friendly", "Parking", "WiFi"} <= set(wanted)
    assert "Furnished" not in wanted
    assert len(wanted) == len(set(wanted))

def test_build_query_from_classified_text():
    c = classify("2 bedroom house with parking under $1200")
    q = build_query(c.preferences)

    assert q["price"] == {"$lte": 1200}
    assert q["bedrooms"] == {"$in": [2]}
    assert "Parking" in q["amenities"]["$in"]
    assert "distanceToCampus" not in q
    assert q["available"] is True
