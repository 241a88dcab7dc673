"""Pydantic models for criteria, request payloads and service responses."""
from __future__ import annotations

from datetime import date
from typing import Annotated, Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, Strict, field_validator, model_validator

# Only real date objects (or ISO strings in JSON) become dates; other strings
# are parsed later so bad formats raise DateFormatError.
CriteriaDate = Optional[Union[Annotated[date, Strict()], str]]


class SearchCriteria(BaseModel):
    country_codes: List[str] = Field(default_factory=list, description="Member state codes, e.g. ES")
    date_from: CriteriaDate = Field(default=None, union_mode="left_to_right")
    date_to: CriteriaDate = Field(default=None, union_mode="left_to_right")
    categories: List[str] = Field(default_factory=list, description="Reduced rate category names")
    commodity_codes: List[str] = Field(default_factory=list, description="CN codes, e.g. 0402 29 11")


class ValidatedCriteria(BaseModel):
    model_config = ConfigDict(frozen=True)

    country_codes: List[str]
    date_from: date
    date_to: date
    categories: List[str]
    commodity_codes: List[str]


class VatSearchRequest(BaseModel):
    """Body of ``POST /rest-api/vatSearch``."""

    model_config = ConfigDict(frozen=True)

    selectedMemberStates: List[int]
    dateFrom: str
    dateTo: str
    selectedCategories: List[int]
    selectedCnCodes: List[str]
    selectedCpaCodes: List[str] = Field(default_factory=list)


class _Passthrough(BaseModel):
    # Fields we do not model are kept as-is.
    model_config = ConfigDict(extra="allow", frozen=True)


class MemberState(_Passthrough):
    name: Optional[str] = None
    defaultCountryCode: Optional[str] = None


class Rate(_Passthrough):
    type: Optional[str] = None
    value: Optional[float] = None


class CnCodeRange(_Passthrough):
    code: Optional[str] = None
    description: Optional[str] = None


class RateEntry(_Passthrough):
    rate: Optional[Rate] = None
    situationOn: Optional[Union[str, int]] = None
    cnCodes: Optional[List[CnCodeRange]] = None
    category: Optional[str] = None
    comment: Optional[str] = None


class CountryResult(_Passthrough):
    # The service sends null for absent members; they are kept as None.
    memberState: Optional[MemberState] = None
    historized: Optional[bool] = False
    type: Optional[str] = None
    rates: Optional[List[RateEntry]] = None


class ServiceError(BaseModel):
    """Present-with-detail form of the upstream ``errors`` field."""

    model_config = ConfigDict(frozen=True)

    detail: Any


class VatSearchResponse(_Passthrough):
    result: Optional[List[CountryResult]] = None
    errors: Optional[ServiceError] = None

    @model_validator(mode="before")
    @classmethod
    def _require_known_keys(cls, data: Any) -> Any:
        if isinstance(data, dict) and not ({"result", "errors"} & data.keys()):
            raise ValueError("response carries neither 'result' nor 'errors'")
        return data

    @field_validator("errors", mode="before")
    @classmethod
    def _wrap_errors(cls, value: Any) -> Any:
        if value is None or isinstance(value, ServiceError):
            return value
        return {"detail": value}


class SearchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    results: List[CountryResult]


class CodeRecord(_Passthrough):
    """Entry of the ``codes/CN_CODE/{heading}.json`` reference list."""

    id: int
    code: str
    description: Optional[str] = None
    parentDescription: Optional[str] = None
    order: Optional[int] = None
