import logging
from typing import Iterable

from .schemas import ClassificationResult, EnhancedListing
from .settings import settings

logger = logging.getLogger(__name__)

def required_bedrooms(classification: ClassificationResult) -> list[int]:
    entity = classification.first_entity("bedrooms")
    return list(entity.value) if entity else []

def rank(
    listings: Iterable[EnhancedListing],
    classification: ClassificationResult,
    limit: int | None = None,
) -> list[EnhancedListing]:
    """
    Primero los "exact matches" (dormitorios pedidos en el texto), después el resto;
    dentro de cada grupo por overallScore descendente. El sort es estable, así que los
    empates respetan el orden del store. Se corta en `limit` (12 por defecto).

    El dormitorio funciona como filtro duro expresado en el orden: nunca excluye,
    así que un query sobre-restringido igual devuelve algo.
    """
    limit = settings.MAX_RESULTS if limit is None else limit
    wanted = required_bedrooms(classification)

    scored = []
    for listing in listings:
        exact = bool(wanted) and listing.bedrooms in wanted
        item = listing.model_copy(update={"relevance_score": listing.relevance_indicators.overall_score})
        scored.append((exact, item))

    scored.sort(key=lambda pair: (pair[0], pair[1].relevance_score), reverse=True)
    exact_count = sum(1 for exact, _ in scored if exact)
    logger.debug("rank -> %d candidates, %d exact matches, limit=%d", len(scored), exact_count, limit)
    return [item for _, item in scored[:limit]]
