import logging
from typing import Any, Dict

from .filters_catalog import AMENITY_FLAGS
from .schemas import NO_DISTANCE_LIMIT, PreferenceRecord
from .utils import unique

logger = logging.getLogger(__name__)

def amenities_filter(prefs: PreferenceRecord) -> list[str]:
    """Amenities explícitas + la etiqueta del store de cada flag activo."""
    wanted = list(prefs.amenities)
    flags = prefs.flags()
    for flag, (_, store_label) in AMENITY_FLAGS.items():
        if flags[flag]:
            wanted.append(store_label)
    return unique(wanted)

def build_query(prefs: PreferenceRecord) -> Dict[str, Any]:
    """
    Traduce preferencias a una expresión de filtro estilo Mongo:
      - price:             {"$lte": max, "$gte": min?}   si max > 0
      - bedrooms/bathrooms {"$in": [...]}                si hay valores
      - distanceToCampus:  {"$lte": d}                   si d < 10
      - amenities:         {"$in": [...]}                alcanza con intersectar
      - available:         True                          siempre
    Todas las claves se combinan con AND.
    """
    query: Dict[str, Any] = {}

    price = prefs.price_range
    if price.max > 0:
        query["price"] = {"$lte": price.max}
        if price.min > 0:
            query["price"]["$gte"] = price.min

    if prefs.bedrooms:
        query["bedrooms"] = {"$in": list(prefs.bedrooms)}
    if prefs.bathrooms:
        query["bathrooms"] = {"$in": list(prefs.bathrooms)}

    if prefs.distance_to_campus < NO_DISTANCE_LIMIT:
        query["distanceToCampus"] = {"$lte": prefs.distance_to_campus}

    amenities = amenities_filter(prefs)
    if amenities:
        query["amenities"] = {"$in": amenities}

    query["available"] = True

    logger.debug("build_query -> %s", query)
    return query
