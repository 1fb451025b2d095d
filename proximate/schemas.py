from datetime import date, datetime
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, confloat, conint, model_validator
from pydantic.alias_generators import to_camel

from .filters_catalog import AMENITY_FLAGS
from .settings import settings

Campus = Literal["blacksburg", "arlington", "roanoke"]
Intent = Literal["search", "display", "recommendation"]
HousingType = Literal["apartment", "house", "condo", "studio", "shared"]
EntityType = Literal["budget", "bedrooms", "bathrooms", "amenities", "location", "lease"]

DEFAULT_CAMPUS: Campus = "blacksburg"
NO_DISTANCE_LIMIT = 10   # distancias >= 10 millas = sin restricción

class CamelModel(BaseModel):
    # atributos en snake_case, JSON en camelCase
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

def has_amenity(amenities: list[str], label: str) -> bool:
    wanted = label.lower()
    return any(a.lower() == wanted for a in amenities)

# ========== PREFERENCIAS ==========
class PriceRange(CamelModel):
    min: confloat(ge=0) = 0
    max: confloat(ge=0) = 0      # 0 = sin techo

    @model_validator(mode="after")
    def _min_le_max(self):
        if self.max and self.min > self.max:
            raise ValueError("priceRange.min must be <= priceRange.max")
        return self

class PreferenceRecord(CamelModel):
    campus: Campus = DEFAULT_CAMPUS
    price_range: PriceRange = Field(default_factory=PriceRange)
    bedrooms: list[conint(ge=0)] = Field(default_factory=list)
    bathrooms: list[confloat(ge=0)] = Field(default_factory=list)   # pasos de 0.5
    amenities: list[str] = Field(default_factory=list)
    distance_to_campus: confloat(ge=0) = NO_DISTANCE_LIMIT
    lease_length: Optional[conint(ge=0)] = None       # meses
    move_in_date: date = Field(default_factory=date.today)

    # Flags derivados de `amenities`: nunca se guardan, así no pueden desincronizarse.
    @computed_field(alias="petFriendly")
    @property
    def pet_friendly(self) -> bool:
        return has_amenity(self.amenities, AMENITY_FLAGS["petFriendly"][0])

    @computed_field
    @property
    def furnished(self) -> bool:
        return has_amenity(self.amenities, AMENITY_FLAGS["furnished"][0])

    @computed_field
    @property
    def parking(self) -> bool:
        return has_amenity(self.amenities, AMENITY_FLAGS["parking"][0])

    @computed_field
    @property
    def laundry(self) -> bool:
        return has_amenity(self.amenities, AMENITY_FLAGS["laundry"][0])

    @computed_field
    @property
    def wifi(self) -> bool:
        return has_amenity(self.amenities, AMENITY_FLAGS["wifi"][0])

    def flags(self) -> dict[str, bool]:
        return {
            "petFriendly": self.pet_friendly,
            "furnished": self.furnished,
            "parking": self.parking,
            "laundry": self.laundry,
            "wifi": self.wifi,
        }

# ========== CLASIFICACIÓN ==========
class LocationValue(CamelModel):
    distance: float
    is_near_campus: bool = False
    keywords: list[str] = Field(default_factory=list)

class ExtractedEntity(CamelModel):
    type: EntityType
    value: Union[LocationValue, int, float, list[int], list[float], list[str]]
    confidence: confloat(ge=0, le=1)

class ClassificationResult(CamelModel):
    original_input: str = ""
    intent: Intent = "search"
    housing_type: HousingType = "apartment"
    preferences: PreferenceRecord = Field(default_factory=PreferenceRecord)
    extracted_entities: list[ExtractedEntity] = Field(default_factory=list)
    confidence: confloat(ge=0, le=1) = 0

    def first_entity(self, entity_type: str) -> Optional[ExtractedEntity]:
        return next((e for e in self.extracted_entities if e.type == entity_type), None)

# ========== LISTINGS ==========
class Listing(CamelModel):
    """Listing tal como lo entrega el store. Campos extra se conservan."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    id: str
    title: str = ""
    description: str = ""
    price: confloat(ge=0)
    bedrooms: conint(ge=0)
    bathrooms: confloat(ge=0) = 0
    amenities: list[str] = Field(default_factory=list)
    distance_to_campus: confloat(ge=0)
    images: list[str] = Field(default_factory=list)
    available: bool = True
    created_at: Optional[datetime] = None

class RelevanceIndicators(CamelModel):
    price_match: bool = False
    bedroom_match: bool = False
    amenity_match: bool = False
    location_match: bool = False
    overall_score: float = 0

class EnhancedListing(Listing):
    relevance_indicators: RelevanceIndicators = Field(default_factory=RelevanceIndicators)
    smart_description: str = ""
    enhanced_at: Optional[datetime] = None
    relevance_score: Optional[float] = None

# ========== TRANSPORTE ==========
class TextSearchRequest(CamelModel):
    query: str = Field(min_length=1, description="Consulta del usuario en lenguaje natural")
    voice_input: bool = False
    user_id: Optional[str] = None

class VoiceSearchRequest(CamelModel):
    transcript: str = Field(min_length=1, description="Transcripción de la búsqueda por voz")
    confidence: confloat(ge=0, le=1) = Field(default_factory=lambda: settings.DEFAULT_VOICE_CONFIDENCE)
    user_id: Optional[str] = None

class ClassificationSummary(CamelModel):
    intent: Intent
    housing_type: HousingType
    confidence: float
    extracted_entities: list[ExtractedEntity]

class SearchResponse(CamelModel):
    success: bool = True
    query: str
    classification: ClassificationSummary
    search_filters: PreferenceRecord
    results: list[EnhancedListing]
    total_results: int
    timestamp: datetime

class VoiceSearchResponse(CamelModel):
    success: bool = True
    transcript: str
    voice_confidence: float
    classification: ClassificationSummary
    search_filters: PreferenceRecord
    results: list[EnhancedListing]
    total_results: int
    timestamp: datetime

class SuggestionsResponse(BaseModel):
    suggestions: list[str]
    query: str
