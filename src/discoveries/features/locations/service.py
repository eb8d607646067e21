"""Location lookups and timezone resolution.

Reports only ever read locations: the lookup resolves a location id to the
row holding its display timezone, and resolve_time_zone turns that zone name
into a tzinfo.
"""

import logging
from abc import ABC, abstractmethod
from datetime import tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .models import Location

logger = logging.getLogger(__name__)


class LocationLookup(ABC):
    """Interface for reading locations by id."""

    @abstractmethod
    async def get_location(self, location_id: int) -> Optional[Location]:
        """Return the location with this id, or None if not found."""
        ...


class TortoiseLocationLookup(LocationLookup):
    """Location lookup backed by the Tortoise ORM."""

    async def get_location(self, location_id: int) -> Optional[Location]:
        return await Location.get_or_none(id=location_id)


def resolve_time_zone(zone_name: str) -> tzinfo:
    """Resolves an IANA zone name such as "Europe/London".

    Raises:
        ValueError: If the zone name is not known to the timezone database.
    """
    try:
        return ZoneInfo(zone_name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        # Region names such as "Europe" are directories in the zone database
        raise ValueError(f"Unknown time zone: {zone_name!r}") from e


async def create_location(site_name: str, location: str, time_zone: str) -> Location:
    """Creates a location after checking its zone name resolves.

    Raises:
        ValueError: If time_zone is not a known zone name.
    """
    resolve_time_zone(time_zone)
    new_location = await Location.create(site_name=site_name, location=location, time_zone=time_zone)
    logger.info(f"Created location {new_location.id} in {time_zone}")
    return new_location
