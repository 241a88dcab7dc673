"""Public entry point: validate, build, send and normalize a VAT search."""
from __future__ import annotations

import enum
import logging
from datetime import date
from functools import lru_cache
from time import perf_counter
from typing import Callable, Optional

from .cache import CacheBackend, build_cache
from .cn_lookup import CnCodeLookup
from .errors import TedbError
from .models import SearchCriteria, SearchResult
from .normalizer import normalize_response
from .request_builder import build_request
from .transport import HttpTransport
from .validation import validate_criteria

logger = logging.getLogger(__name__)

VAT_SEARCH_PATH = "rest-api/vatSearch"


class SearchState(str, enum.Enum):
    START = "start"
    VALIDATED = "validated"
    REQUEST_BUILT = "request_built"
    AWAITING_RESPONSE = "awaiting_response"
    NORMALIZED = "normalized"
    FAILED = "failed"


class VatSearchService:
    """Runs one search at a time; ``state`` reflects the most recent search."""

    def __init__(
        self,
        transport: Optional[HttpTransport] = None,
        cache: Optional[CacheBackend] = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self.transport = transport or HttpTransport()
        self._cache = cache
        self.clock = clock
        self.state = SearchState.START
        self.last_error: Optional[TedbError] = None

    def search(self, criteria: SearchCriteria) -> SearchResult:
        self.state = SearchState.START
        self.last_error = None
        started = perf_counter()
        try:
            validated = validate_criteria(criteria, today=self.clock())
            self.state = SearchState.VALIDATED
            payload = build_request(validated)
            self.state = SearchState.REQUEST_BUILT
            self.state = SearchState.AWAITING_RESPONSE
            raw = self.transport.post_json(VAT_SEARCH_PATH, payload.model_dump())
            result = normalize_response(raw)
        except TedbError as exc:
            failed_in = self.state
            self.state = SearchState.FAILED
            self.last_error = exc
            logger.info("search failed in state=%s: %s", failed_in.value, exc)
            raise
        self.state = SearchState.NORMALIZED
        logger.info(
            "search countries=%s codes=%s results=%s took=%.2fms",
            validated.country_codes,
            payload.selectedCnCodes,
            len(result.results),
            (perf_counter() - started) * 1000,
        )
        return result

    def lookup_cn_id(self, code: str) -> Optional[int]:
        if self._cache is None:
            self._cache = build_cache()
        return CnCodeLookup(self.transport, self._cache).get_id(code)


@lru_cache(maxsize=1)
def default_transport() -> HttpTransport:
    return HttpTransport()


@lru_cache(maxsize=1)
def default_cache() -> CacheBackend:
    return build_cache()


def search(criteria: SearchCriteria, service: Optional[VatSearchService] = None) -> SearchResult:
    if service is None:
        service = VatSearchService(default_transport(), default_cache())
    return service.search(criteria)
