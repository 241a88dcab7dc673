"""Criteria defaulting, date checks and duplicate detection."""
from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Union

from .errors import DateFormatError, DateRangeError, DuplicateValueError
from .models import SearchCriteria, ValidatedCriteria

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y/%m/%d"
# ISO dates are accepted too so JSON clients can send ``2024-01-31``.
ACCEPTED_DATE_FORMATS = (DATE_FORMAT, "%Y-%m-%d")


def _normalize(item: str) -> str:
    return item.replace(" ", "").lower()


def check_no_duplicates(items: Iterable[str], label: str = "value") -> None:
    """Raise :class:`DuplicateValueError` if two items differ only in case or spaces."""

    seen: set[str] = set()
    for item in items:
        key = _normalize(item)
        if key in seen:
            raise DuplicateValueError(item, label)
        seen.add(key)


def parse_date(value: Union[date, str]) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        for fmt in ACCEPTED_DATE_FORMATS:
            try:
                return datetime.strptime(value, fmt).date()
            except ValueError:
                continue
    raise DateFormatError(value, DATE_FORMAT)


def validate_criteria(criteria: SearchCriteria, today: Optional[date] = None) -> ValidatedCriteria:
    """Resolve default dates and reject inconsistent criteria.

    ``date_to`` defaults to ``today`` (the local date when omitted) and
    ``date_from`` to the day before ``date_to``.
    """

    raw_to = criteria.date_to if criteria.date_to is not None else (today or date.today())
    date_to = parse_date(raw_to)

    raw_from = criteria.date_from if criteria.date_from is not None else date_to - timedelta(days=1)
    date_from = parse_date(raw_from)

    if date_from > date_to:
        raise DateRangeError(date_from, date_to)

    check_no_duplicates(criteria.country_codes, "country code")
    check_no_duplicates(criteria.commodity_codes, "commodity code")
    check_no_duplicates(criteria.categories, "category")

    logger.debug("criteria validated date_from=%s date_to=%s", date_from, date_to)
    return ValidatedCriteria(
        country_codes=list(criteria.country_codes),
        date_from=date_from,
        date_to=date_to,
        categories=list(criteria.categories),
        commodity_codes=list(criteria.commodity_codes),
    )
