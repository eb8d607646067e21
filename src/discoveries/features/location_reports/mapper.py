"""Mapping between the wire model and the domain record.

Writes are stamped with the server's UTC clock; any report_time the caller
sent is never read. Reads are localized to the timezone of the location the
report is about.
"""

import logging
from datetime import datetime, timezone

from ...core.errors import ErrorCode, FailedRequestError
from ..locations.service import LocationLookup, resolve_time_zone
from .domain import LocationStatusReport
from .schemas import LocationStatusReportApiModel

logger = logging.getLogger(__name__)

MIN_STATUS = 0
MAX_STATUS = 100


def validate_report(api_model: LocationStatusReportApiModel) -> None:
    """Rejects reports whose status is outside 0-100.

    Raises:
        FailedRequestError: INVALID_INPUT when the status is out of range.
    """
    if api_model.status < MIN_STATUS or api_model.status > MAX_STATUS:
        raise FailedRequestError(ErrorCode.INVALID_INPUT, "status out of range")


def validate_then_map(api_model: LocationStatusReportApiModel) -> LocationStatusReport:
    validate_report(api_model)

    return LocationStatusReport(
        agent_id=api_model.agent_id,
        location_id=api_model.location_id,
        status=api_model.status,
        report_time=datetime.now(timezone.utc),
        report_body=api_model.report_body,
        title=api_model.title,
    )


async def map_to_api_model(
    report: LocationStatusReport, locations: LocationLookup
) -> LocationStatusReportApiModel:
    """Renders a stored report with its time shown in the location's timezone.

    Raises:
        FailedRequestError: UNKNOWN_ERROR when the report's location or the
            location's zone name cannot be resolved. Both mean stored data is
            inconsistent rather than that the caller asked for something wrong.
    """
    location = await locations.get_location(report.location_id)
    if location is None:
        logger.error(f"Report {report.report_id} references missing location {report.location_id}")
        raise FailedRequestError(ErrorCode.UNKNOWN_ERROR, "Could not successfully get location info")

    try:
        location_time_zone = resolve_time_zone(location.time_zone)
    except ValueError as e:
        logger.error(f"Location {location.id} has an unusable time zone: {e}")
        raise FailedRequestError(ErrorCode.UNKNOWN_ERROR, "Could not successfully get location info") from e

    return LocationStatusReportApiModel(
        report_id=report.report_id,
        agent_id=report.agent_id,
        location_id=report.location_id,
        status=report.status,
        report_time=report.report_time.astimezone(location_time_zone),
        report_body=report.report_body,
        title=report.title,
    )
