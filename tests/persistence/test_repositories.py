"""Unit tests for Firestore repositories using FakeFirestoreClient."""

from __future__ import annotations

from datetime import date, datetime, timezone
from unittest.mock import patch

import pytest

from flightlog.contracts.flight import LogbookFlight
from flightlog.contracts.profile import PilotProfile
from flightlog.persistence.errors import DocumentNotFoundError
from flightlog.persistence.repositories.flight_repo import FlightRepository
from flightlog.persistence.repositories.profile_repo import ProfileRepository
from tests.persistence.fake_firestore import FakeFirestoreClient, FakeQuery

USER_ID = "test-user-123"


@pytest.fixture
def fake_client():
    return FakeFirestoreClient()


@pytest.fixture(autouse=True)
def patch_firestore(fake_client):
    with patch(
        "flightlog.persistence.firestore_client.get_firestore_client",
        return_value=fake_client,
    ):
        with patch(
            "flightlog.persistence.repositories.base.get_firestore_client",
            return_value=fake_client,
        ):
            yield


def _make_flight(
    flight_date: date,
    registration: str = "C-GABC",
    aircraft: str = "C172",
    created_hour: int = 12,
    **buckets,
) -> LogbookFlight:
    return LogbookFlight(
        flight_date=flight_date,
        aircraft_make_model=aircraft,
        registration=registration,
        flight_hours=buckets.get("se_day_pic", 1.0),
        created_at=datetime(2025, 1, 1, created_hour, tzinfo=timezone.utc),
        **buckets,
    )


# ---------------------------------------------------------------------------
# FlightRepository
# ---------------------------------------------------------------------------


class TestFlightRepository:
    @pytest.mark.asyncio
    async def test_create_and_get(self):
        repo = FlightRepository()
        flight = _make_flight(date(2025, 3, 1), se_day_pic=1.4, day_takeoffs_landings=1)

        doc_id = await repo.create(USER_ID, flight)
        restored = await repo.get(USER_ID, doc_id)

        assert restored is not None
        assert restored.id == doc_id
        assert restored.se_day_pic == 1.4
        assert restored.day_takeoffs_landings == 1
        assert restored.se_night_pic is None
        assert restored.flight_date == date(2025, 3, 1)

    @pytest.mark.asyncio
    async def test_absent_buckets_not_stored(self, fake_client):
        repo = FlightRepository()
        doc_id = await repo.create(USER_ID, _make_flight(date(2025, 3, 1), se_day_pic=1.0))
        stored = fake_client.store[f"users/{USER_ID}/flights/{doc_id}"]
        assert "se_night_pic" not in stored
        assert stored["se_day_pic"] == 1.0

    @pytest.mark.asyncio
    async def test_get_missing(self):
        assert await FlightRepository().get(USER_ID, "nope") is None

    @pytest.mark.asyncio
    async def test_require_missing_raises(self):
        with pytest.raises(DocumentNotFoundError, match="flights/nope"):
            await FlightRepository().require(USER_ID, "nope")

    @pytest.mark.asyncio
    async def test_list_recent_newest_first(self):
        repo = FlightRepository()
        await repo.create(USER_ID, _make_flight(date(2025, 3, 5), registration="C-B"))
        await repo.create(USER_ID, _make_flight(date(2025, 3, 1), registration="C-A"))
        await repo.create(USER_ID, _make_flight(date(2025, 3, 9), registration="C-C", created_hour=8))
        await repo.create(USER_ID, _make_flight(date(2025, 3, 9), registration="C-D", created_hour=18))

        flights = await repo.list_recent(USER_ID)
        assert [f.registration for f in flights] == ["C-D", "C-C", "C-B", "C-A"]
        assert all(f.id for f in flights)

    @pytest.mark.asyncio
    async def test_list_recent_pages(self):
        repo = FlightRepository()
        for day in range(1, 13):
            await repo.create(USER_ID, _make_flight(date(2025, 3, day), registration=f"C-{day:02d}"))

        first = await repo.list_recent(USER_ID)
        assert len(first) == 10
        assert first[0].registration == "C-12"

        second = await repo.list_recent(USER_ID, limit=10, offset=10)
        assert [f.registration for f in second] == ["C-02", "C-01"]

        assert await repo.list_recent(USER_ID, limit=5, offset=20) == []

    @pytest.mark.asyncio
    async def test_last_flight_by_date_then_created(self):
        repo = FlightRepository()
        await repo.create(USER_ID, _make_flight(date(2025, 3, 9), registration="EARLY", created_hour=8))
        await repo.create(USER_ID, _make_flight(date(2025, 3, 9), registration="LATE", created_hour=18))
        await repo.create(USER_ID, _make_flight(date(2025, 2, 1), registration="OLD", created_hour=23))

        last = await repo.get_last_flight(USER_ID)
        assert last is not None
        assert last.registration == "LATE"

    @pytest.mark.asyncio
    async def test_last_flight_empty(self):
        assert await FlightRepository().get_last_flight(USER_ID) is None

    @pytest.mark.asyncio
    async def test_count_scoped_by_user(self):
        repo = FlightRepository()
        await repo.create(USER_ID, _make_flight(date(2025, 3, 1)))
        await repo.create(USER_ID, _make_flight(date(2025, 3, 2)))
        await repo.create("someone-else", _make_flight(date(2025, 3, 3)))

        assert await repo.count(USER_ID) == 2
        assert await repo.count("someone-else") == 1

    @pytest.mark.asyncio
    async def test_count_uses_aggregation_query(self):
        repo = FlightRepository()
        await repo.create(USER_ID, _make_flight(date(2025, 3, 1)))

        with patch.object(
            FakeQuery, "count", autospec=True, side_effect=FakeQuery.count
        ) as count_spy:
            assert await repo.count(USER_ID) == 1
        count_spy.assert_called_once()

    @pytest.mark.asyncio
    async def test_count_empty(self):
        assert await FlightRepository().count(USER_ID) == 0

    @pytest.mark.asyncio
    async def test_autocomplete_data(self):
        repo = FlightRepository()
        await repo.create(USER_ID, _make_flight(date(2025, 3, 1), "C-GABC", "C172"))
        await repo.create(USER_ID, _make_flight(date(2025, 3, 2), "C-FTWN", "DA42"))
        await repo.create(USER_ID, _make_flight(date(2025, 3, 3), "C-GABC", "C172"))
        await repo.create(USER_ID, _make_flight(date(2025, 3, 4), "C-GXYZ", "C172"))

        data = await repo.autocomplete_data(USER_ID)
        assert data.aircraft == ["C172", "DA42"]
        assert data.registrations_by_aircraft == {
            "C172": ["C-GABC", "C-GXYZ"],
            "DA42": ["C-FTWN"],
        }

    @pytest.mark.asyncio
    async def test_replace_drops_cleared_buckets(self):
        repo = FlightRepository()
        doc_id = await repo.create(
            USER_ID, _make_flight(date(2025, 3, 1), se_day_pic=1.0, xc_day_pic=1.0)
        )
        await repo.replace(USER_ID, doc_id, _make_flight(date(2025, 3, 1), se_day_pic=1.0))

        restored = await repo.get(USER_ID, doc_id)
        assert restored.xc_day_pic is None

    @pytest.mark.asyncio
    async def test_replace_missing_raises(self):
        with pytest.raises(DocumentNotFoundError):
            await FlightRepository().replace(USER_ID, "nope", _make_flight(date(2025, 3, 1)))

    @pytest.mark.asyncio
    async def test_delete(self):
        repo = FlightRepository()
        doc_id = await repo.create(USER_ID, _make_flight(date(2025, 3, 1)))
        await repo.delete(USER_ID, doc_id)
        assert await repo.get(USER_ID, doc_id) is None
        with pytest.raises(DocumentNotFoundError):
            await repo.delete(USER_ID, doc_id)


# ---------------------------------------------------------------------------
# ProfileRepository
# ---------------------------------------------------------------------------


class TestProfileRepository:
    @pytest.mark.asyncio
    async def test_missing_profile(self):
        assert await ProfileRepository().get_profile(USER_ID) is None

    @pytest.mark.asyncio
    async def test_save_and_get(self):
        repo = ProfileRepository()
        await repo.save_profile(
            USER_ID, PilotProfile(pilot_name="Jane Pilot", home_base="czbb")
        )
        profile = await repo.get_profile(USER_ID)
        assert profile is not None
        assert profile.home_base == "CZBB"
        assert profile.default_instructor is None

    @pytest.mark.asyncio
    async def test_save_replaces(self):
        repo = ProfileRepository()
        await repo.save_profile(
            USER_ID,
            PilotProfile(pilot_name="Jane", home_base="CZBB", default_instructor="Bob"),
        )
        await repo.save_profile(USER_ID, PilotProfile(pilot_name="Jane", home_base="CYVR"))
        profile = await repo.get_profile(USER_ID)
        assert profile.home_base == "CYVR"
        assert profile.default_instructor is None
