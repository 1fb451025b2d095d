import logging
from datetime import datetime, timezone
from typing import Iterable

from .filters_catalog import STOCK_IMAGE_URLS
from .schemas import (
    NO_DISTANCE_LIMIT, ClassificationResult, EnhancedListing, Listing, RelevanceIndicators,
)
from .settings import settings
from .utils import format_number

logger = logging.getLogger(__name__)

INDICATOR_COUNT = 4
CLOSE_TO_CAMPUS_MILES = 2

def calculate_relevance_indicators(listing: Listing, classification: ClassificationResult) -> RelevanceIndicators:
    """
    Cuatro señales independientes. Si el usuario no pidió algo, esa señal queda en False
    (no cuenta como match), y overallScore siempre divide por 4.
    """
    prefs = classification.preferences
    ind = RelevanceIndicators()

    if prefs.price_range.max > 0:
        ind.price_match = listing.price <= prefs.price_range.max

    if prefs.bedrooms:
        ind.bedroom_match = listing.bedrooms in prefs.bedrooms

    if prefs.amenities:
        have = [a.lower() for a in listing.amenities]
        ind.amenity_match = any(want.lower() in h for want in prefs.amenities for h in have)

    if prefs.distance_to_campus < NO_DISTANCE_LIMIT:
        ind.location_match = listing.distance_to_campus <= prefs.distance_to_campus

    hits = sum([ind.price_match, ind.bedroom_match, ind.amenity_match, ind.location_match])
    ind.overall_score = hits / INDICATOR_COUNT
    return ind

def generate_smart_description(listing: Listing, classification: ClassificationResult) -> str:
    max_price = classification.preferences.price_range.max
    highlights = []

    if max_price > 0 and listing.price <= max_price:
        highlights.append(f"Great price at ${format_number(listing.price)}/month")
    if listing.distance_to_campus <= CLOSE_TO_CAMPUS_MILES:
        highlights.append(f"Only {format_number(listing.distance_to_campus)} miles from campus")
    if "Pet Friendly" in listing.amenities:
        highlights.append("Pet-friendly")
    if "Furnished" in listing.amenities:
        highlights.append("Furnished")
    if "Parking" in listing.amenities:
        highlights.append("Parking included")

    if not highlights:
        return listing.description
    return f"Perfect match! {', '.join(highlights)}."

def enhance_images(images: list[str], limit: int | None = None) -> list[str]:
    # relleno con fotos de stock (demo), nunca más de `limit`
    limit = settings.MAX_IMAGES if limit is None else limit
    return [*images, *STOCK_IMAGE_URLS][:limit]

def enhance(listings: Iterable[Listing], classification: ClassificationResult) -> list[EnhancedListing]:
    """Copia anotada de cada listing, en el mismo orden en que vinieron del store."""
    now = datetime.now(timezone.utc)
    out = []
    for listing in listings:
        data = listing.model_dump()
        data.update(
            images=enhance_images(listing.images),
            relevance_indicators=calculate_relevance_indicators(listing, classification),
            smart_description=generate_smart_description(listing, classification),
            enhanced_at=now,
        )
        out.append(EnhancedListing.model_validate(data))
    logger.debug("enhance -> %d listings", len(out))
    return out
