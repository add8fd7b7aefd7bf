from __future__ import annotations

"""
FastAPI application for the Oshi Checker result screen.

- Ranking comes from the diagnosis engine as ordered member ids
- Match percentages are derived from rank only (see scoring.map_scores)
- Precondition violations (duplicate / unknown ids) surface as 422
- Share endpoint is debounced per client
"""

from typing import Dict, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from ._singletons import get_catalog, get_share_debouncer, get_site_config
from .catalog import UnknownCandidateError
from .config import (
    HealthResponse,
    Locale,
    PageMetadata,
    RankingRequest,
    ResultResponse,
    ScoresResponse,
    ShareRequest,
    ShareResponse,
)
from .metadata import build_home_metadata, build_result_metadata, generate_static_params
from .partition import partition_ranking
from .result import build_result_view
from .scoring import RankingValidationError, map_scores, validate_ranking
from .share import build_share


app = FastAPI(title="Oshi Checker")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def startup_event() -> None:
    logger.info("Starting app warmup...")
    site = get_site_config()
    logger.info("Site URL {} / share URL base {}", site.site_url, site.share_url_base)
    catalog = get_catalog()
    logger.info("Catalog ready with {} members", len(catalog))
    logger.info("Warmup complete.")


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="healthy")


@app.get("/locales")
def locales() -> List[Dict[str, str]]:
    return generate_static_params()


@app.get("/{locale}/metadata", response_model=PageMetadata)
def home_metadata(locale: Locale) -> PageMetadata:
    return build_home_metadata(locale, get_site_config())


@app.get("/{locale}/result/metadata", response_model=PageMetadata)
def result_metadata(locale: Locale) -> PageMetadata:
    return build_result_metadata(locale, get_site_config())


@app.post("/scores", response_model=ScoresResponse)
def scores(req: RankingRequest) -> ScoresResponse:
    try:
        return ScoresResponse(scores=map_scores(req.ranking))
    except RankingValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/{locale}/result", response_model=ResultResponse)
def result(locale: Locale, req: RankingRequest) -> ResultResponse:
    try:
        return build_result_view(req.ranking, get_catalog(), locale, get_site_config())
    except (RankingValidationError, UnknownCandidateError) as e:
        logger.warning("Rejected ranking for {}: {}", locale, e)
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/{locale}/share", response_model=ShareResponse)
def share(locale: Locale, req: ShareRequest) -> ShareResponse:
    if not req.ranking:
        raise HTTPException(status_code=422, detail="Ranking must be non-empty")
    catalog = get_catalog()
    try:
        validate_ranking(req.ranking)
        members = catalog.resolve_ranking(req.ranking)
    except (RankingValidationError, UnknownCandidateError) as e:
        raise HTTPException(status_code=422, detail=str(e))

    if not get_share_debouncer().try_acquire(req.client_id):
        raise HTTPException(status_code=429, detail="Share already in progress")

    podium, _ = partition_ranking(members)
    return build_share(podium, catalog.groups, locale, get_site_config())
