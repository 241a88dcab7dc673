"""Turns validated criteria into the upstream ``vatSearch`` payload."""
from __future__ import annotations

import logging
from typing import List

from .codes import join_cn
from .models import ValidatedCriteria, VatSearchRequest
from .reference import CATEGORIES, COUNTRIES, ReferenceTable
from .validation import DATE_FORMAT

logger = logging.getLogger(__name__)


def build_request(
    criteria: ValidatedCriteria,
    countries: ReferenceTable = COUNTRIES,
    categories: ReferenceTable = CATEGORIES,
) -> VatSearchRequest:
    # Unknown countries abort the build; unknown categories are dropped.
    member_states = [countries.lookup(code) for code in criteria.country_codes]

    category_ids: List[int] = []
    for name in criteria.categories:
        if name not in categories:
            logger.debug("skipping unknown category %r", name)
            continue
        category_ids.append(categories.lookup(name))

    cn_codes = [join_cn(code) for code in criteria.commodity_codes]

    payload = VatSearchRequest(
        selectedMemberStates=member_states,
        dateFrom=criteria.date_from.strftime(DATE_FORMAT),
        dateTo=criteria.date_to.strftime(DATE_FORMAT),
        selectedCategories=category_ids,
        selectedCnCodes=cn_codes,
        selectedCpaCodes=[],
    )
    logger.debug("vatSearch payload=%s", payload.model_dump())
    return payload
