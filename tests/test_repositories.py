"""Tests for the repository ABCs and in-memory implementations."""

import asyncio
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from appointments.errors import SlotAlreadyBooked
from appointments.models import CreateAppointmentData, CreateNotificationData
from appointments.repositories import (
    AppointmentRepository,
    InMemoryAppointmentRepository,
    InMemoryNotificationRepository,
    NotificationRepository,
)

TZ = ZoneInfo("America/Sao_Paulo")


def data(hour, provider_id="p1", day=10, user_id="u1"):
    return CreateAppointmentData(
        provider_id=provider_id,
        user_id=user_id,
        date=datetime(2020, 5, day, hour, tzinfo=TZ),
    )


class TestABCs:
    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            AppointmentRepository()
        with pytest.raises(TypeError):
            NotificationRepository()

    def test_concrete_implementation(self):
        class MockRepository(AppointmentRepository):
            async def find_by_date(self, date, provider_id):
                return None
            async def find_all_in_day_from_provider(self, provider_id, year, month, day):
                return []
            async def create(self, data):
                raise NotImplementedError

        assert isinstance(MockRepository(), AppointmentRepository)


class TestInMemoryAppointmentRepository:
    @pytest.mark.asyncio
    async def test_create_assigns_id(self):
        repo = InMemoryAppointmentRepository()
        first = await repo.create(data(9))
        second = await repo.create(data(10))
        assert first.id and second.id
        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_find_by_date(self):
        repo = InMemoryAppointmentRepository()
        created = await repo.create(data(9))

        assert await repo.find_by_date(created.date, "p1") == created
        assert await repo.find_by_date(created.date, "p2") is None
        assert await repo.find_by_date(datetime(2020, 5, 10, 10, tzinfo=TZ), "p1") is None

    @pytest.mark.asyncio
    async def test_create_enforces_unique_slot(self):
        repo = InMemoryAppointmentRepository()
        await repo.create(data(9))

        with pytest.raises(SlotAlreadyBooked):
            await repo.create(data(9, user_id="u2"))
        assert len(repo.appointments) == 1

    @pytest.mark.asyncio
    async def test_concurrent_creates_keep_one(self):
        repo = InMemoryAppointmentRepository()
        results = await asyncio.gather(
            *(repo.create(data(9, user_id=f"u{i}")) for i in range(3)),
            return_exceptions=True,
        )
        assert sum(not isinstance(r, Exception) for r in results) == 1
        assert len(repo.appointments) == 1

    @pytest.mark.asyncio
    async def test_find_all_in_day_sorted(self):
        repo = InMemoryAppointmentRepository()
        await repo.create(data(15))
        await repo.create(data(9))
        await repo.create(data(11, day=11))
        await repo.create(data(10, provider_id="p2"))

        found = await repo.find_all_in_day_from_provider("p1", 2020, 5, 10)

        assert [a.date.hour for a in found] == [9, 15]


class TestInMemoryNotificationRepository:
    @pytest.mark.asyncio
    async def test_create(self):
        repo = InMemoryNotificationRepository()
        notification = await repo.create(
            CreateNotificationData(recipient_id="p1", content="hello")
        )
        assert notification.id
        assert notification.read is False
        assert repo.notifications == [notification]
