import datetime

import pytest

from discoveries.features.locations.models import Location
from discoveries.features.locations.service import (
    TortoiseLocationLookup,
    create_location,
    resolve_time_zone,
)


@pytest.mark.parametrize("zone_name", ["UTC", "Europe/London", "America/New_York", "Asia/Kolkata"])
def test_resolve_known_time_zones(zone_name):
    zone = resolve_time_zone(zone_name)
    assert datetime.datetime(2024, 1, 1, tzinfo=zone).utcoffset() is not None


@pytest.mark.parametrize("zone_name", ["Mars/Olympus_Mons", "", "not a zone", "Europe", "America"])
def test_resolve_unknown_time_zone_raises_value_error(zone_name):
    with pytest.raises(ValueError):
        resolve_time_zone(zone_name)


@pytest.mark.asyncio
async def test_lookup_returns_location_or_none(initialize_test_db):
    london = initialize_test_db["london"]
    lookup = TortoiseLocationLookup()

    found = await lookup.get_location(london.id)

    assert found is not None
    assert found.time_zone == "Europe/London"
    assert await lookup.get_location(9999) is None


@pytest.mark.asyncio
async def test_create_location_rejects_unknown_zone(initialize_test_db):
    before = await Location.all().count()

    with pytest.raises(ValueError):
        await create_location("Moon Base", "Tranquility", "Moon/Tranquility")

    assert await Location.all().count() == before


@pytest.mark.asyncio
async def test_create_location(initialize_test_db):
    location = await create_location("Harbour Office", "Sydney", "Australia/Sydney")
    assert (await Location.get(id=location.id)).time_zone == "Australia/Sydney"
