import pytest

from location_report_fakes import (
    BROKEN_ZONE_ID,
    LONDON_ID,
    TOKYO_ID,
    FakeLocationLookup,
    InMemoryLocationReportStore,
)


@pytest.fixture
def location_lookup() -> FakeLocationLookup:
    return FakeLocationLookup({
        LONDON_ID: "Europe/London",
        TOKYO_ID: "Asia/Tokyo",
        BROKEN_ZONE_ID: "Mars/Olympus_Mons",
    })


@pytest.fixture
def report_store() -> InMemoryLocationReportStore:
    return InMemoryLocationReportStore(call_signs={7: "ALPHA1", 8: "BRAVO2"})
