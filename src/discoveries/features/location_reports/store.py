"""Store interfaces for location reports (repository pattern).

Stores take and return domain records, never ORM rows, so the mapping and
search code can be exercised against any implementation.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional

from tortoise.queryset import QuerySet

from .domain import LocationStatusReport
from .models import LocationReport
from .search_criteria import (
    AgentCallSignSearchCriterion,
    FromTimeSearchCriterion,
    LocationIdSearchCriterion,
    ReportSearchCriterion,
    ToTimeSearchCriterion,
)


class LocationReportStore(ABC):
    """Interface for location report persistence."""

    @abstractmethod
    async def add_report(self, report: LocationStatusReport) -> int:
        """Persist a new report and return its id."""
        ...

    @abstractmethod
    async def get_report(self, report_id: int) -> Optional[LocationStatusReport]:
        """Return a report by id, or None if not found."""
        ...

    @abstractmethod
    async def search_reports(self, criteria: list[ReportSearchCriterion]) -> list[LocationStatusReport]:
        """Return reports matching every criterion, ordered by report_time.

        An empty criteria list matches every report. Both time bounds are inclusive.
        """
        ...


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _to_domain(row: LocationReport) -> LocationStatusReport:
    return LocationStatusReport(
        report_id=row.id,
        agent_id=row.agent_id,
        location_id=row.location_id,
        status=row.status,
        report_time=_as_utc(row.report_time),
        report_body=row.report_body,
        title=row.title,
    )


def _apply_criterion(query: QuerySet[LocationReport], criterion: ReportSearchCriterion) -> QuerySet[LocationReport]:
    if isinstance(criterion, AgentCallSignSearchCriterion):
        return query.filter(agent__call_sign=criterion.call_sign)
    if isinstance(criterion, LocationIdSearchCriterion):
        return query.filter(location_id=criterion.location_id)
    if isinstance(criterion, FromTimeSearchCriterion):
        return query.filter(report_time__gte=_as_utc(criterion.time))
    if isinstance(criterion, ToTimeSearchCriterion):
        return query.filter(report_time__lte=_as_utc(criterion.time))
    raise TypeError(f"Unsupported search criterion: {criterion!r}")


class TortoiseLocationReportStore(LocationReportStore):
    """Location report store backed by the Tortoise ORM."""

    async def add_report(self, report: LocationStatusReport) -> int:
        row = await LocationReport.create(
            agent_id=report.agent_id,
            location_id=report.location_id,
            status=report.status,
            report_time=_as_utc(report.report_time),
            report_body=report.report_body,
            title=report.title,
        )
        return row.id

    async def get_report(self, report_id: int) -> Optional[LocationStatusReport]:
        row = await LocationReport.get_or_none(id=report_id)
        return _to_domain(row) if row else None

    async def search_reports(self, criteria: list[ReportSearchCriterion]) -> list[LocationStatusReport]:
        query = LocationReport.all()
        for criterion in criteria:
            query = _apply_criterion(query, criterion)
        rows = await query.order_by("report_time", "id")
        return [_to_domain(row) for row in rows]
