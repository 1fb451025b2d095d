import logging
from typing import Optional

from fastapi import Depends, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware

from .error_handlers import init_error_handlers
from .logging_config import setup_logging
from .middleware import RequestIdMiddleware
from .schemas import (
    SearchResponse, SuggestionsResponse, TextSearchRequest, VoiceSearchRequest, VoiceSearchResponse,
)
from .search import generate_search_suggestions, run_text_search, run_voice_search
from .settings import settings
from .store import ListingStore, get_listing_store

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger("proximate")

# ========== FASTAPI ==========
app = FastAPI(title="Proximate - Intelligent Housing Search API", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True, allow_methods=["*"], allow_headers=["*"],
)
app.add_middleware(RequestIdMiddleware)
init_error_handlers(app)

@app.get("/health")
def health():
    return {"status": "ok"}

@app.post("/api/search/intelligent", response_model=SearchResponse)
def intelligent_search(req: TextSearchRequest, store: ListingStore = Depends(get_listing_store)):
    # 1) clasificar, 2) consultar store, 3) scoring + ranking
    return run_text_search(req.query, store)

@app.post("/api/search/voice", response_model=VoiceSearchResponse)
def voice_search(req: VoiceSearchRequest, store: ListingStore = Depends(get_listing_store)):
    return run_voice_search(req.transcript, req.confidence, store)

@app.get("/api/search/suggestions", response_model=SuggestionsResponse)
def search_suggestions(q: Optional[str] = Query(default=None)):
    return SuggestionsResponse(suggestions=generate_search_suggestions(q), query=q or "")
