"""Maps the raw ``vatSearch`` response onto :class:`SearchResult`."""
from __future__ import annotations

import logging

from pydantic import ValidationError

from .errors import (
    EmptyResultError,
    MalformedResponseError,
    NoMatchError,
    ServiceReportedError,
)
from .models import SearchResult, VatSearchResponse

logger = logging.getLogger(__name__)

EMPTY_OBJECT = b"{}"


def normalize_response(raw: bytes) -> SearchResult:
    if raw.strip() == EMPTY_OBJECT:
        raise EmptyResultError()

    try:
        response = VatSearchResponse.model_validate_json(raw)
    except ValidationError as exc:
        logger.debug("undecodable response (%s bytes): %s", len(raw), exc)
        raise MalformedResponseError(f"unexpected response shape: {exc.error_count()} error(s)") from exc

    if response.errors is not None:
        raise ServiceReportedError(response.errors)
    if not response.result:
        raise NoMatchError()
    return SearchResult(results=response.result)
