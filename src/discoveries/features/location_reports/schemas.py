from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional
import datetime


class LocationStatusReportApiModel(BaseModel):
    """Wire representation of a location status report.

    On input report_id and report_time are accepted but ignored. On output
    report_time is localized to the timezone of the reported location.
    """

    report_id: Optional[int] = Field(None, description="Server-assigned report id")
    agent_id: int = Field(..., description="Id of the reporting agent")
    location_id: int = Field(..., description="Id of the location being reported on")
    status: int = Field(..., description="Status score, 0-100 inclusive")
    report_time: Optional[datetime.datetime] = Field(
        None, description="Time the server received the report, in the location's timezone"
    )
    report_body: str = Field(..., description="Free-text report")
    title: Optional[str] = Field(None, description="Short label for the report")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
