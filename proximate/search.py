"""
Orquestador de búsqueda: texto -> clasificación -> filtro -> store -> scoring -> ranking.

Una request no comparte estado con otra. El único I/O es `store.find`; si falla,
el error sube tal cual (ListingStoreError) y no hay nada que deshacer.
"""
import logging
from datetime import datetime, timezone

from .classifier import classify, generate_search_filters
from .filters_catalog import MAX_SUGGESTIONS, MIN_SUGGESTION_QUERY, SEARCH_SUGGESTIONS
from .mapping import build_query
from .ranking import rank
from .schemas import (
    ClassificationResult, ClassificationSummary, EnhancedListing, PreferenceRecord,
    SearchResponse, VoiceSearchResponse,
)
from .scoring import enhance
from .settings import settings
from .store import ListingStore

logger = logging.getLogger(__name__)

def summarize(classification: ClassificationResult) -> ClassificationSummary:
    return ClassificationSummary(
        intent=classification.intent,
        housing_type=classification.housing_type,
        confidence=classification.confidence,
        extracted_entities=classification.extracted_entities,
    )

def _search(
    classification: ClassificationResult, store: ListingStore, fetch_limit: int
) -> tuple[PreferenceRecord, list[EnhancedListing]]:
    filters = generate_search_filters(classification)
    query = build_query(filters)
    candidates = store.find(query, limit=fetch_limit)
    results = rank(enhance(candidates, classification), classification)
    logger.info("search: intent=%s confidence=%.2f candidates=%d results=%d",
                classification.intent, classification.confidence, len(candidates), len(results))
    return filters, results

def run_text_search(query: str, store: ListingStore) -> SearchResponse:
    classification = classify(query)
    filters, results = _search(classification, store, settings.TEXT_SEARCH_FETCH_LIMIT)
    return SearchResponse(
        query=query,
        classification=summarize(classification),
        search_filters=filters,
        results=results,
        total_results=len(results),
        timestamp=datetime.now(timezone.utc),
    )

def voice_confidence(classifier_confidence: float, recognition_confidence: float) -> float:
    return min(classifier_confidence * recognition_confidence, 1.0)

def run_voice_search(transcript: str, recognition_confidence: float, store: ListingStore) -> VoiceSearchResponse:
    classification = classify(transcript)
    # la confianza del reconocimiento de voz descuenta la del clasificador
    classification.confidence = voice_confidence(classification.confidence, recognition_confidence)
    filters, results = _search(classification, store, settings.VOICE_SEARCH_FETCH_LIMIT)
    return VoiceSearchResponse(
        transcript=transcript,
        voice_confidence=recognition_confidence,
        classification=summarize(classification),
        search_filters=filters,
        results=results,
        total_results=len(results),
        timestamp=datetime.now(timezone.utc),
    )

def generate_search_suggestions(q: str | None) -> list[str]:
    if not q or len(q) < MIN_SUGGESTION_QUERY:
        return []
    needle = q.lower()
    return [s for s in SEARCH_SUGGESTIONS if needle in s.lower()][:MAX_SUGGESTIONS]
