"""
Clasificador de búsquedas en lenguaje natural.

Convierte texto libre (tipeado o transcripto por voz) en un PreferenceRecord,
la lista de entidades extraídas, un intent y un tipo de vivienda. Es puro:
no hace I/O ni guarda estado entre llamadas, y nunca lanza excepciones por
el input; lo que no entiende queda en los defaults con confidence 0.
"""
import logging
from typing import Optional

from .filters_catalog import (
    AMENITY_PATTERNS, BATHROOM_PATTERNS, BEDROOM_PATTERNS, BEDROOM_WORDS, BUDGET_PATTERNS,
    DEFAULT_HOUSING_TYPE, DEFAULT_INTENT, DISTANCE_PATTERNS, HOUSING_TYPES_CANON, INTENT_PATTERNS,
    LEASE_PATTERNS, LEASE_WORDS, LOCATION_KEYWORD_PATTERNS, NEAR_CAMPUS_MAX_DISTANCE,
    NEAR_CAMPUS_PATTERN, find_canon, match_labels,
)
from .schemas import (
    NO_DISTANCE_LIMIT, ClassificationResult, ExtractedEntity, LocationValue, PreferenceRecord,
)
from .utils import first_number, normalize_text, unique

logger = logging.getLogger(__name__)

# confianza fija por categoría
ENTITY_CONFIDENCE = {
    "budget": 0.9,
    "bedrooms": 0.9,
    "bathrooms": 0.9,
    "amenities": 0.8,
    "location": 0.8,
    "lease": 0.8,
}

def default_preferences() -> PreferenceRecord:
    return PreferenceRecord()

# ========== EXTRACTORES ==========
def extract_budget(text: str) -> Optional[float]:
    # primer patrón que da un número gana; "affordable", "luxury", etc. no aportan número
    for pattern in BUDGET_PATTERNS:
        for m in pattern.finditer(text):
            n = first_number(m.group(0))
            if n is not None:
                return n
    return None

def _bedroom_count(match: str) -> Optional[int]:
    for word, count in BEDROOM_WORDS:
        if word in match:
            return count
    return first_number(match)

def extract_bedrooms(text: str) -> list[int]:
    found = []
    for pattern in BEDROOM_PATTERNS:
        for m in pattern.finditer(text):
            n = _bedroom_count(m.group(0))
            if n is not None:
                found.append(n)
    return unique(found)

def extract_bathrooms(text: str) -> list[float]:
    found = []
    for pattern in BATHROOM_PATTERNS:
        for m in pattern.finditer(text):
            match = m.group(0)
            if "half" in match:
                found.append(0.5)
                continue
            n = first_number(match, allow_decimal=True)
            if n is not None:
                found.append(n)
    return unique(found)

def extract_amenities(text: str) -> list[str]:
    return match_labels(text, AMENITY_PATTERNS)

def extract_location(text: str) -> Optional[LocationValue]:
    distance = None
    for pattern in DISTANCE_PATTERNS:
        for m in pattern.finditer(text):
            distance = first_number(m.group(0), allow_decimal=True)
            if distance is not None:
                break
        if distance is not None:
            break

    near_campus = bool(NEAR_CAMPUS_PATTERN.search(text))
    if distance is None and not near_campus:
        return None
    if distance is None:
        distance = NO_DISTANCE_LIMIT
    if near_campus:
        distance = min(distance, NEAR_CAMPUS_MAX_DISTANCE)

    return LocationValue(
        distance=distance,
        is_near_campus=near_campus,
        keywords=match_labels(text, LOCATION_KEYWORD_PATTERNS),
    )

def _lease_months(match: str) -> Optional[int]:
    for word, months in LEASE_WORDS:
        if word in match:
            return months
    return first_number(match)

def extract_lease_length(text: str) -> Optional[int]:
    for pattern in LEASE_PATTERNS:
        for m in pattern.finditer(text):
            months = _lease_months(m.group(0))
            if months is not None:
                return months
    return None

# ========== CLASIFICADORES ==========
def classify_housing_type(text: str) -> str:
    return find_canon(text, HOUSING_TYPES_CANON) or DEFAULT_HOUSING_TYPE

def classify_intent(text: str) -> str:
    for intent, pattern in INTENT_PATTERNS:
        if pattern.search(text):
            return intent
    return DEFAULT_INTENT

def calculate_confidence(entities: list[ExtractedEntity]) -> float:
    if not entities:
        return 0.0
    total = sum(e.confidence for e in entities)
    return min(total / len(entities), 1.0)

# ========== ENTIDADES -> PREFERENCIAS ==========
def apply_entity(prefs: PreferenceRecord, entity: ExtractedEntity) -> PreferenceRecord:
    if entity.type == "budget":
        prefs.price_range.max = entity.value
    elif entity.type == "bedrooms":
        prefs.bedrooms = list(entity.value)
    elif entity.type == "bathrooms":
        prefs.bathrooms = list(entity.value)
    elif entity.type == "amenities":
        # los flags (petFriendly, parking...) se derivan solos de esta lista
        prefs.amenities = list(entity.value)
    elif entity.type == "location":
        prefs.distance_to_campus = entity.value.distance
    elif entity.type == "lease":
        prefs.lease_length = entity.value
    return prefs

def extract_entities(text: str) -> list[ExtractedEntity]:
    """Corre los extractores en orden fijo: budget, bedrooms, bathrooms, amenities, location, lease."""
    extracted = [
        ("budget", extract_budget(text)),
        ("bedrooms", extract_bedrooms(text)),
        ("bathrooms", extract_bathrooms(text)),
        ("amenities", extract_amenities(text)),
        ("location", extract_location(text)),
        ("lease", extract_lease_length(text)),
    ]
    return [
        ExtractedEntity(type=etype, value=value, confidence=ENTITY_CONFIDENCE[etype])
        for etype, value in extracted
        if isinstance(value, LocationValue) or value
    ]

def classify(user_input) -> ClassificationResult:
    text = normalize_text(user_input)
    original = user_input if isinstance(user_input, str) else ""
    if not text.strip():
        return ClassificationResult(original_input=original, preferences=default_preferences())

    entities = extract_entities(text)
    prefs = default_preferences()
    for entity in entities:
        apply_entity(prefs, entity)

    result = ClassificationResult(
        original_input=original,
        intent=classify_intent(text),
        housing_type=classify_housing_type(text),
        preferences=prefs,
        extracted_entities=entities,
        confidence=calculate_confidence(entities),
    )
    logger.debug("classify -> intent=%s type=%s entities=%s confidence=%.2f",
                 result.intent, result.housing_type, [e.type for e in entities], result.confidence)
    return result

def generate_search_filters(classification: ClassificationResult) -> PreferenceRecord:
    """Re-aplica las entidades sobre una copia de las preferencias (payload `searchFilters`)."""
    prefs = classification.preferences.model_copy(deep=True)
    for entity in classification.extracted_entities:
        apply_entity(prefs, entity)
    return prefs
