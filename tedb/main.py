"""FastAPI application exposing the VAT search client over HTTP."""
from __future__ import annotations

import logging
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, HTTPException

from .config import settings
from .errors import CriteriaError, EmptyResultError, NoMatchError, TedbError
from .models import SearchCriteria, SearchResult
from .search import VatSearchService, default_cache, default_transport

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL = logging.getLevelName(settings.log_level.upper())

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, force=True)
for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "urllib3"):
    logging.getLogger(name).setLevel(LOG_LEVEL)

logger = logging.getLogger(__name__)

app = FastAPI(title="TEDB VAT Search")


def get_service() -> VatSearchService:
    # One service per request; transport and cache are shared.
    return VatSearchService(default_transport(), default_cache())


def _status_for(exc: TedbError) -> int:
    if isinstance(exc, CriteriaError):
        return 400
    if isinstance(exc, (EmptyResultError, NoMatchError)):
        return 404
    return 502


@app.get("/health")
async def health() -> dict:
    return {"base_url": settings.base_url, "cache_backend": settings.cache_backend}


@app.post("/vat-search", response_model=SearchResult)
def vat_search(criteria: SearchCriteria, service: VatSearchService = Depends(get_service)) -> SearchResult:
    try:
        return service.search(criteria)
    except TedbError as exc:
        raise HTTPException(status_code=_status_for(exc), detail=str(exc)) from exc


@app.get("/cn-codes/{code}")
def cn_code(code: str, service: VatSearchService = Depends(get_service)) -> dict:
    try:
        cn_id: Optional[int] = service.lookup_cn_id(code)
    except TedbError as exc:
        raise HTTPException(status_code=_status_for(exc), detail=str(exc)) from exc
    if cn_id is None:
        raise HTTPException(status_code=404, detail=f"no id known for {code!r}")
    return {"code": code, "id": cn_id}


def run() -> None:
    logger.info("Serving TEDB VAT search for %s on %s:%s", settings.base_url, settings.api_host, settings.api_port)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
