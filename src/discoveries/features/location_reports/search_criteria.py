"""Search criteria for listing location reports.

The list endpoint accepts four optional filters. Each one that is present and
not blank becomes exactly one criterion, always in the order call sign,
location id, from-time, to-time. An empty list means "match everything".
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from pydantic import AwareDatetime, TypeAdapter, ValidationError

from ...core.errors import ErrorCode, FailedRequestError

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?\d+")
# Calendar date and clock time up front; rules out bare Unix timestamps
_ISO_DATETIME_PREFIX = re.compile(r"\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}")
_aware_datetime = TypeAdapter(AwareDatetime)

# Location ids are signed 32-bit integers
MIN_LOCATION_ID = -(2**31)
MAX_LOCATION_ID = 2**31 - 1


@dataclass(frozen=True)
class AgentCallSignSearchCriterion:
    call_sign: str


@dataclass(frozen=True)
class LocationIdSearchCriterion:
    location_id: int


@dataclass(frozen=True)
class FromTimeSearchCriterion:
    """Inclusive lower bound on report time."""

    time: datetime


@dataclass(frozen=True)
class ToTimeSearchCriterion:
    """Upper bound on report time; the store decides inclusivity."""

    time: datetime


ReportSearchCriterion = Union[
    AgentCallSignSearchCriterion,
    LocationIdSearchCriterion,
    FromTimeSearchCriterion,
    ToTimeSearchCriterion,
]


def _present(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value


def _parse_int(name: str, value: str) -> int:
    if not _INTEGER.fullmatch(value):
        raise FailedRequestError(ErrorCode.INVALID_INPUT, f"{name} must be an integer")
    parsed = int(value)
    if parsed < MIN_LOCATION_ID or parsed > MAX_LOCATION_ID:
        raise FailedRequestError(ErrorCode.INVALID_INPUT, f"{name} is out of range")
    return parsed


def _parse_time(name: str, value: str) -> datetime:
    if not _ISO_DATETIME_PREFIX.match(value):
        raise FailedRequestError(
            ErrorCode.INVALID_INPUT,
            f"{name} must be an ISO-8601 timestamp with a UTC offset",
        )
    try:
        return _aware_datetime.validate_python(value)
    except ValidationError as e:
        raise FailedRequestError(
            ErrorCode.INVALID_INPUT,
            f"{name} must be an ISO-8601 timestamp with a UTC offset",
        ) from e


@dataclass(frozen=True)
class LocationReportQuery:
    """The raw filters of a report search, before parsing.

    Blank values are normalised to None at construction.
    """

    call_sign: Optional[str] = None
    location_id: Optional[str] = None
    from_time: Optional[str] = None
    to_time: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("call_sign", "location_id", "from_time", "to_time"):
            object.__setattr__(self, name, _present(getattr(self, name)))

    @classmethod
    def from_query_params(cls, params: Mapping[str, Optional[str]]) -> "LocationReportQuery":
        return cls(
            call_sign=params.get("callSign"),
            location_id=params.get("locationId"),
            from_time=params.get("fromTime"),
            to_time=params.get("toTime"),
        )

    def to_criteria(self) -> list[ReportSearchCriterion]:
        """Parses each present filter.

        Raises:
            FailedRequestError: INVALID_INPUT if locationId is not an integer
                or a time is not a zoned ISO-8601 timestamp.
        """
        criteria: list[ReportSearchCriterion] = []

        if self.call_sign is not None:
            criteria.append(AgentCallSignSearchCriterion(self.call_sign))

        if self.location_id is not None:
            criteria.append(LocationIdSearchCriterion(_parse_int("locationId", self.location_id)))

        if self.from_time is not None:
            criteria.append(FromTimeSearchCriterion(_parse_time("fromTime", self.from_time)))

        if self.to_time is not None:
            criteria.append(ToTimeSearchCriterion(_parse_time("toTime", self.to_time)))

        return criteria


def parse_search_criteria(params: Mapping[str, Optional[str]]) -> list[ReportSearchCriterion]:
    criteria = LocationReportQuery.from_query_params(params).to_criteria()
    logger.debug(f"Parsed search criteria: {criteria}")
    return criteria
