"""Resolves a CN code to its TEDB numeric id via the per-heading code lists."""
from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from .cache import CacheBackend
from .codes import HEADING_LENGTH, split_cn
from .errors import InvalidCodeError, MalformedResponseError
from .models import CodeRecord
from .transport import HttpTransport

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(List[CodeRecord])


class CnCodeLookup:
    def __init__(self, transport: HttpTransport, cache: CacheBackend) -> None:
        self.transport = transport
        self.cache = cache

    def _records(self, heading: str) -> List[CodeRecord]:
        filename = f"{heading}.json"
        body = self.cache.get(filename)
        if body is None:
            body = self.transport.get_json(f"codes/CN_CODE/{filename}")
            self.cache.set(filename, body)
        else:
            logger.debug("cache hit for %s", filename)
        try:
            return _RECORDS.validate_json(body)
        except ValidationError as exc:
            raise MalformedResponseError(f"unexpected code list for heading {heading}") from exc

    def get_id(self, code: str) -> Optional[int]:
        """Return the id of ``code`` or ``None`` when the heading list lacks it."""

        parts = split_cn(code)
        if len(parts[0]) < HEADING_LENGTH:
            raise InvalidCodeError(code, f"a {HEADING_LENGTH}-digit heading is required")
        target = " ".join(parts).lower()
        for record in self._records(parts[0]):
            if record.code.lower() == target:
                return record.id
        logger.info("no code list entry for %r under heading %s", code, parts[0])
        return None
