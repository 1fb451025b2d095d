"""
Store de listings en memoria.

La persistencia real es un colaborador externo; acá sólo necesitamos algo que
entienda la expresión de filtro de `mapping.build_query` ($lte, $gte, $in e
igualdad) y devuelva listings de sólo lectura.
"""
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, Protocol

from pydantic import ValidationError

from .errors import ListingStoreError
from .schemas import Listing
from .seed_listings import SEED_LISTINGS
from .settings import settings

logger = logging.getLogger(__name__)

class ListingStore(Protocol):
    def find(self, query: Dict[str, Any], limit: int) -> list[Listing]: ...

def _fold(value):
    return value.lower() if isinstance(value, str) else value

def _match_in(actual, options: list) -> bool:
    wanted = {_fold(o) for o in options}
    if isinstance(actual, (list, tuple, set)):
        return any(_fold(a) in wanted for a in actual)
    return _fold(actual) in wanted

def _match_condition(actual, cond) -> bool:
    if not isinstance(cond, dict):
        return actual == cond
    for op, expected in cond.items():
        if op == "$lte":
            if actual is None or actual > expected:
                return False
        elif op == "$gte":
            if actual is None or actual < expected:
                return False
        elif op == "$in":
            if actual is None or not _match_in(actual, expected):
                return False
        else:
            raise ValueError(f"unsupported operator {op!r}")
    return True

def matches(doc: Dict[str, Any], query: Dict[str, Any]) -> bool:
    return all(_match_condition(doc.get(field), cond) for field, cond in query.items())

class InMemoryListingStore:
    def __init__(self, listings: Iterable[Listing | Dict[str, Any]]):
        self._listings = [
            l if isinstance(l, Listing) else Listing.model_validate(l) for l in listings
        ]

    @classmethod
    def from_json(cls, path: str | Path) -> "InMemoryListingStore":
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
            store = cls(raw)
        except (OSError, ValueError, ValidationError) as e:
            raise ListingStoreError(f"Could not load listings from {path}: {e}") from e
        logger.info("Loaded %d listings from %s", len(store), path)
        return store

    def __len__(self) -> int:
        return len(self._listings)

    def find(self, query: Dict[str, Any], limit: int) -> list[Listing]:
        try:
            found = [l for l in self._listings if matches(l.model_dump(by_alias=True), query)]
        except Exception as e:
            raise ListingStoreError(f"Listing query failed: {e}") from e
        # más nuevos primero; sin createdAt se respeta el orden de carga
        found.sort(key=lambda l: l.created_at.timestamp() if l.created_at else float("-inf"), reverse=True)
        logger.debug("find -> %d matches (limit=%d)", len(found), limit)
        return found[:limit]

@lru_cache
def get_listing_store() -> ListingStore:
    if settings.LISTINGS_PATH:
        return InMemoryListingStore.from_json(settings.LISTINGS_PATH)
    return InMemoryListingStore(SEED_LISTINGS)
