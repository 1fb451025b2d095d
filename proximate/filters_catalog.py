# Catálogo de patrones y vocabularios fijos del clasificador.
# Todo es de sólo lectura: tuplas de regex compiladas y mappings inmutables.
# El ORDEN de cada tupla importa: la extracción se detiene en el primer patrón que aplica.

import re
from types import MappingProxyType

def _p(pattern: str) -> re.Pattern:
    return re.compile(pattern, re.IGNORECASE)

BUDGET_PATTERNS = (
    _p(r"\$(\d+)"),
    _p(r"(\d+)\s*dollars?"),
    _p(r"under\s*\$?(\d+)"),
    _p(r"less\s*than\s*\$?(\d+)"),
    _p(r"max\s*\$?(\d+)"),
    _p(r"budget\s*of\s*\$?(\d+)"),
    # cualitativos: matchean pero no aportan número
    _p(r"affordable"),
    _p(r"cheap"),
    _p(r"expensive"),
    _p(r"luxury"),
)

BEDROOM_PATTERNS = (
    _p(r"(\d+)\s*bed"),
    _p(r"(\d+)\s*bedroom"),
    _p(r"(\d+)\s*bedroom\s*house"),
    _p(r"(\d+)\s*bedroom\s*apartment"),
    _p(r"(\d+)\s*bedroom\s*home"),
    _p(r"(\d+)\s*bedroom\s*place"),
    _p(r"studio"),
    _p(r"one\s*bed"),
    _p(r"two\s*bed"),
    _p(r"three\s*bed"),
    _p(r"four\s*bed"),
    _p(r"single"),
    _p(r"double"),
    _p(r"(\d+)\s*br"),
    _p(r"(\d+)\s*br\s*house"),
    _p(r"(\d+)\s*br\s*apartment"),
)

# palabra -> dormitorios; se evalúa en orden sobre el texto matcheado
BEDROOM_WORDS = (
    ("studio", 1),
    ("single", 1),
    ("one", 1),
    ("two", 2),
    ("double", 2),
    ("three", 3),
    ("four", 4),
)

BATHROOM_PATTERNS = (
    _p(r"(\d+(?:\.\d+)?)\s*bath"),
    _p(r"(\d+(?:\.\d+)?)\s*bathroom"),
    _p(r"half\s*bath"),
    _p(r"full\s*bath"),
    _p(r"shared\s*bath"),
    _p(r"private\s*bath"),
)

# (etiqueta legible, patrón)
AMENITY_PATTERNS = (
    ("pet friendly", _p(r"pet\s*friendly")),
    ("furnished", _p(r"furnished")),
    ("unfurnished", _p(r"unfurnished")),
    ("parking", _p(r"parking")),
    ("garage", _p(r"garage")),
    ("laundry", _p(r"laundry")),
    ("washer", _p(r"washer")),
    ("dryer", _p(r"dryer")),
    ("wifi", _p(r"wifi")),
    ("internet", _p(r"internet")),
    ("air conditioning", _p(r"air\s*conditioning")),
    ("heating", _p(r"heating")),
    ("dishwasher", _p(r"dishwasher")),
    ("pool", _p(r"pool")),
    ("gym", _p(r"gym")),
    ("fitness", _p(r"fitness")),
    ("balcony", _p(r"balcony")),
    ("patio", _p(r"patio")),
    ("yard", _p(r"yard")),
    ("garden", _p(r"garden")),
    ("fireplace", _p(r"fireplace")),
    ("hardwood", _p(r"hardwood")),
    ("carpet", _p(r"carpet")),
    ("tile", _p(r"tile")),
)

# flag -> (etiqueta extraída que lo activa, etiqueta de amenity en el store)
AMENITY_FLAGS = MappingProxyType({
    "petFriendly": ("pet friendly", "Pet Friendly"),
    "furnished": ("furnished", "Furnished"),
    "parking": ("parking", "Parking"),
    "laundry": ("laundry", "Laundry"),
    "wifi": ("wifi", "WiFi"),
})

DISTANCE_PATTERNS = (
    _p(r"(\d+(?:\.\d+)?)\s*miles?"),
    _p(r"(\d+(?:\.\d+)?)\s*blocks?"),
    _p(r"(\d+(?:\.\d+)?)\s*minutes?\s*walk"),
    _p(r"(\d+(?:\.\d+)?)\s*minutes?\s*drive"),
    _p(r"walking\s*distance"),
    _p(r"short\s*walk"),
    _p(r"long\s*walk"),
)

NEAR_CAMPUS_PATTERN = _p(r"near\s*campus|close\s*to\s*campus|walking\s*distance|short\s*walk")
NEAR_CAMPUS_MAX_DISTANCE = 2

# (etiqueta, patrón) descriptivos; no alteran filtros
LOCATION_KEYWORD_PATTERNS = (
    ("near campus", _p(r"near\s*campus")),
    ("close to campus", _p(r"close\s*to\s*campus")),
    ("walking distance", _p(r"walking\s*distance")),
    ("downtown", _p(r"downtown")),
    ("city center", _p(r"city\s*center")),
    ("suburbs", _p(r"suburbs")),
    ("quiet", _p(r"quiet")),
    ("busy", _p(r"busy")),
    ("safe", _p(r"safe")),
    ("unsafe", _p(r"unsafe")),
)

LEASE_PATTERNS = (
    _p(r"(\d+)\s*month"),
    _p(r"(\d+)\s*month\s*lease"),
    _p(r"year\s*lease"),
    _p(r"short\s*term"),
    _p(r"long\s*term"),
    _p(r"flexible"),
    _p(r"sublet"),
)

# palabra -> meses
LEASE_WORDS = (
    ("year", 12),
    ("short", 6),
    ("long", 18),
)

HOUSING_TYPES_CANON = MappingProxyType({
    "apartment": ("apartment", "apt", "unit", "flat"),
    "house": ("house", "home", "residence", "property"),
    "condo": ("condo", "condominium", "townhouse"),
    "studio": ("studio", "efficiency"),
    "shared": ("shared", "roommate", "room", "sublet"),
})
DEFAULT_HOUSING_TYPE = "apartment"

INTENT_PATTERNS = (
    ("search", _p(r"find|search|look|need|want|looking for")),
    ("display", _p(r"show|display|list")),
    ("recommendation", _p(r"recommend|suggest")),
)
DEFAULT_INTENT = "search"

SEARCH_SUGGESTIONS = (
    "pet friendly apartment under $1200",
    "furnished studio near campus",
    "2 bedroom house with parking",
    "cheap housing with laundry",
    "luxury apartment with pool",
    "quiet neighborhood near campus",
    "furnished room for rent",
    "apartment with gym access",
    "house with yard and pets allowed",
    "modern apartment with wifi",
)
MAX_SUGGESTIONS = 5
MIN_SUGGESTION_QUERY = 2

STOCK_IMAGE_URLS = (
    "https://images.unsplash.com/photo-1560448204-e02f11c3d0e2?w=800&h=600&fit=crop",
    "https://images.unsplash.com/photo-1570129477492-45c003edd2be?w=800&h=600&fit=crop",
    "https://images.unsplash.com/photo-1522708323590-d24dbb6b0267?w=800&h=600&fit=crop",
    "https://images.unsplash.com/photo-1545324418-cc1a3fa10c00?w=800&h=600&fit=crop",
    "https://images.unsplash.com/photo-1560448204-603b3fc33ddc?w=800&h=600&fit=crop",
)

def find_canon(text: str | None, table) -> str | None:
    """Primer canónico (en orden de la tabla) con algún sinónimo contenido en el texto."""
    if not text:
        return None
    t = text.lower()
    for canon, syns in table.items():
        for s in syns:
            if s in t:
                return canon
    return None

def match_labels(text: str | None, table) -> list[str]:
    out: list[str] = []
    for label, pattern in table:
        if text and pattern.search(text) and label not in out:
            out.append(label)
    return out
