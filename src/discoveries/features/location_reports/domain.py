"""Domain representation of a location status report.

Pure data with no API input rules; the Tortoise row lives in models.py.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class LocationStatusReport:
    """A report as persisted. report_time is always timezone-aware UTC."""

    agent_id: int
    location_id: int
    status: int
    report_time: datetime
    report_body: str
    title: Optional[str] = None
    report_id: Optional[int] = None
