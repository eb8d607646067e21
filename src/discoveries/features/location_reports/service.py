"""
Location Reports Service Module

Orchestrates submission, lookup and search of location status reports. The
store and location lookup are passed in so the router can supply them as
FastAPI dependencies and tests can swap in fakes.
"""

import logging
from collections.abc import Mapping
from typing import List, Optional

from ...core.errors import ErrorCode, FailedRequestError
from ..auth.models import User as AuthUser
from ..auth.security import ensure_can_act_as_agent
from ..locations.service import LocationLookup, TortoiseLocationLookup
from .mapper import map_to_api_model, validate_then_map
from .schemas import LocationStatusReportApiModel
from .search_criteria import parse_search_criteria
from .store import LocationReportStore, TortoiseLocationReportStore

logger = logging.getLogger(__name__)


def get_report_store() -> LocationReportStore:
    return TortoiseLocationReportStore()


def get_location_lookup() -> LocationLookup:
    return TortoiseLocationLookup()


async def submit_report(
    api_model: LocationStatusReportApiModel,
    current_user: AuthUser,
    store: LocationReportStore,
    locations: LocationLookup,
) -> LocationStatusReportApiModel:
    """
    Validates, stamps and stores a new report, returning it as the caller will see it.

    Raises:
        FailedRequestError: INVALID_INPUT for an out of range status,
            OPERATION_FORBIDDEN if the user may not act as the report's agent,
            UNKNOWN_ERROR if the stored report cannot be rendered.
    """
    report = validate_then_map(api_model)
    ensure_can_act_as_agent(current_user, report.agent_id)

    report_id = await store.add_report(report)
    logger.info(f"Agent {report.agent_id} filed report {report_id} for location {report.location_id}")

    stored = await store.get_report(report_id)
    if stored is None:
        raise FailedRequestError(ErrorCode.UNKNOWN_ERROR, "Report could not be read back after saving")
    return await map_to_api_model(stored, locations)


async def get_report(
    report_id: int, store: LocationReportStore, locations: LocationLookup
) -> LocationStatusReportApiModel:
    report = await store.get_report(report_id)
    if report is None:
        raise FailedRequestError(ErrorCode.NOT_FOUND, f"Report {report_id} not found")
    return await map_to_api_model(report, locations)


async def search_reports(
    params: Mapping[str, Optional[str]], store: LocationReportStore, locations: LocationLookup
) -> List[LocationStatusReportApiModel]:
    criteria = parse_search_criteria(params)
    reports = await store.search_reports(criteria)
    return [await map_to_api_model(report, locations) for report in reports]
