"""Combined Nomenclature code decomposition.

A CN code is up to eight digits: chapter (2) + heading (2), then pairs of
subheading digits. Upstream lookups expect the canonical spaced form, e.g.
``"0402 29 11"``. Callers may hand us either ``"04022911"`` or the spaced
form; when they do use spaces the grouping must match the canonical one.
"""
from __future__ import annotations

from typing import List

from .errors import InvalidCodeError

HEADING_LENGTH = 4
MIN_DIGITS = 2
MAX_DIGITS = 8


def _segments(digits: str) -> List[str]:
    if len(digits) <= HEADING_LENGTH:
        return [digits]

    parts = [digits[:HEADING_LENGTH]]
    remainder = digits[HEADING_LENGTH:]
    even = len(remainder) // 2 * 2
    parts.extend(remainder[i : i + 2] for i in range(0, even, 2))
    if even < len(remainder):
        parts.append(remainder[even:])
    return parts


def split_cn(code: str) -> List[str]:
    """Validate ``code`` and return its segments, heading first."""

    if not code:
        raise InvalidCodeError(code, "empty code")

    digits = code.replace(" ", "")
    if not digits.isdigit() or not digits.isascii():
        raise InvalidCodeError(code, "only digits and spaces are allowed")
    if not MIN_DIGITS <= len(digits) <= MAX_DIGITS:
        raise InvalidCodeError(code, f"expected {MIN_DIGITS} to {MAX_DIGITS} digits, got {len(digits)}")
    if len(digits) % 2:
        raise InvalidCodeError(code, f"expected an even number of digits, got {len(digits)}")

    parts = _segments(digits)
    if " " in code:
        canonical = " ".join(parts)
        if canonical.lower() != code.lower():
            raise InvalidCodeError(code, f"grouping does not match {canonical!r}")
    return parts


def join_cn(code: str) -> str:
    """Canonical space-grouped form used by the upstream service."""

    return " ".join(split_cn(code))
