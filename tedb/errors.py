"""Error taxonomy raised by the VAT search pipeline."""
from __future__ import annotations

from typing import Any, Optional


class TedbError(Exception):
    """Base class for every error surfaced by this client."""


class CriteriaError(TedbError):
    """The caller supplied criteria that cannot be turned into a request."""


class InvalidCodeError(CriteriaError):
    def __init__(self, code: str, reason: str) -> None:
        super().__init__(f"the commodity code {code!r} is incorrect: {reason}")
        self.code = code
        self.reason = reason


class UnknownKeyError(CriteriaError):
    def __init__(self, table: str, key: str) -> None:
        super().__init__(f"unknown {table} key {key!r}")
        self.table = table
        self.key = key


class DuplicateValueError(CriteriaError):
    def __init__(self, value: str, label: str = "value") -> None:
        super().__init__(f"duplicate {label} {value!r}")
        self.value = value
        self.label = label


class DateFormatError(CriteriaError):
    def __init__(self, value: Any, expected: str) -> None:
        super().__init__(f"date {value!r} does not match the format {expected}")
        self.value = value
        self.expected = expected


class DateRangeError(CriteriaError):
    def __init__(self, date_from: Any, date_to: Any) -> None:
        super().__init__(f"date from {date_from} is after date to {date_to}")
        self.date_from = date_from
        self.date_to = date_to


class TransportError(TedbError):
    """Network failure, unexpected status code or content type."""

    def __init__(
        self,
        message: str,
        *,
        url: str,
        status_code: Optional[int] = None,
        content_type: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.content_type = content_type


class ResponseError(TedbError):
    """The service answered, but the answer is not a usable result."""


class EmptyResultError(ResponseError):
    def __init__(self) -> None:
        super().__init__("the service did not return any results for the given criteria")


class MalformedResponseError(ResponseError):
    pass


class ServiceReportedError(ResponseError):
    def __init__(self, error: Any) -> None:
        super().__init__(f"the service reported an error: {error.detail!r}")
        self.error = error


class NoMatchError(ResponseError):
    def __init__(self) -> None:
        super().__init__("no VAT rates matched the given criteria")
