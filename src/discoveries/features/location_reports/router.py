from fastapi import APIRouter, Depends, Query, status
from typing import Annotated, List, Optional

from ..auth.models import User as AuthUser
from ..auth.security import get_current_active_user
from ..locations.service import LocationLookup
from .schemas import LocationStatusReportApiModel
from .store import LocationReportStore
from . import service as report_service

router = APIRouter(
    prefix="/reports/locationstatus",
    tags=["Location Reports"],
    dependencies=[Depends(get_current_active_user)],
)

StoreDep = Annotated[LocationReportStore, Depends(report_service.get_report_store)]
LocationsDep = Annotated[LocationLookup, Depends(report_service.get_location_lookup)]


@router.post("", response_model=LocationStatusReportApiModel, status_code=status.HTTP_201_CREATED)
async def create_location_report(
    report_in: LocationStatusReportApiModel,
    current_user: Annotated[AuthUser, Depends(get_current_active_user)],
    store: StoreDep,
    locations: LocationsDep,
):
    return await report_service.submit_report(report_in, current_user, store, locations)


@router.get("", response_model=List[LocationStatusReportApiModel])
async def search_location_reports(
    store: StoreDep,
    locations: LocationsDep,
    # Kept as strings: malformed filters are reported as INVALID_INPUT, not 422
    call_sign: Optional[str] = Query(None, alias="callSign"),
    location_id: Optional[str] = Query(None, alias="locationId"),
    from_time: Optional[str] = Query(None, alias="fromTime", description="ISO-8601 with offset"),
    to_time: Optional[str] = Query(None, alias="toTime", description="ISO-8601 with offset"),
):
    params = {"callSign": call_sign, "locationId": location_id, "fromTime": from_time, "toTime": to_time}
    return await report_service.search_reports(params, store, locations)


@router.get("/{report_id}", response_model=LocationStatusReportApiModel)
async def get_location_report(report_id: int, store: StoreDep, locations: LocationsDep):
    return await report_service.get_report(report_id, store, locations)
