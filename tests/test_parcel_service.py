"""Tests for ParcelService lifecycle rules."""

import json
import logging

import pytest

from tracker.errors import ParcelNotFoundError, ParcelStateError
from tracker.monitor.logger import JsonFormatter
from tracker.parcel import ParcelStatus
from tracker.persistence.store import ParcelStore
from tracker.service import ParcelService


@pytest.fixture
def service(store: ParcelStore) -> ParcelService:
    return ParcelService(store)


class TestRegister:
    """Parcel registration."""

    @pytest.mark.asyncio
    async def test_register_stores_parcel(self, service, store, caplog):
        with caplog.at_level(logging.INFO, logger="tracker.service"):
            parcel = await service.register(1000, "test")

        assert parcel.number is not None
        assert parcel.status == ParcelStatus.REGISTERED
        assert await store.get(parcel.number) == parcel
        assert "Parcel registered" in caplog.text

    @pytest.mark.asyncio
    async def test_client_parcels(self, service, rng):
        client = rng.randrange(10_000_000)
        numbers = {(await service.register(client, "test")).number for _ in range(2)}

        parcels = await service.client_parcels(client)

        assert {p.number for p in parcels} == numbers


class TestNextStatus:
    """Status progression."""

    @pytest.mark.asyncio
    async def test_progression(self, service, store):
        parcel = await service.register(1000, "test")

        assert await service.next_status(parcel.number) == ParcelStatus.SENT
        assert await service.next_status(parcel.number) == ParcelStatus.DELIVERED
        assert await service.next_status(parcel.number) == ParcelStatus.DELIVERED

        got = await store.get(parcel.number)
        assert got.status == ParcelStatus.DELIVERED

    @pytest.mark.asyncio
    async def test_missing_parcel(self, service):
        with pytest.raises(ParcelNotFoundError):
            await service.next_status(999)


class TestRegisteredOnly:
    """Address change and delete require a registered parcel."""

    @pytest.mark.asyncio
    async def test_change_address_registered(self, service, store):
        parcel = await service.register(1000, "test")

        await service.change_address(parcel.number, "new address")

        assert (await store.get(parcel.number)).address == "new address"

    @pytest.mark.asyncio
    async def test_change_address_after_send(self, service, store):
        parcel = await service.register(1000, "test")
        await service.next_status(parcel.number)

        with pytest.raises(ParcelStateError) as exc_info:
            await service.change_address(parcel.number, "new address")

        assert exc_info.value.status == ParcelStatus.SENT
        assert (await store.get(parcel.number)).address == "test"

    @pytest.mark.asyncio
    async def test_delete_registered(self, service, store):
        parcel = await service.register(1000, "test")

        await service.delete(parcel.number)

        with pytest.raises(ParcelNotFoundError):
            await store.get(parcel.number)

    @pytest.mark.asyncio
    async def test_delete_after_send(self, service, store):
        parcel = await service.register(1000, "test")
        await service.next_status(parcel.number)

        with pytest.raises(ParcelStateError) as exc_info:
            await service.delete(parcel.number)

        assert exc_info.value.number == parcel.number
        assert (await store.get(parcel.number)).status == ParcelStatus.SENT

    @pytest.mark.asyncio
    async def test_missing_parcel(self, service):
        with pytest.raises(ParcelNotFoundError):
            await service.change_address(999, "new address")
        with pytest.raises(ParcelNotFoundError):
            await service.delete(999)

    @pytest.mark.asyncio
    async def test_status_changed_behind_service(self, service, store):
        """A parcel sent through the store directly is no longer editable."""
        parcel = await service.register(1000, "test")
        await store.set_status(parcel.number, ParcelStatus.DELIVERED)

        with pytest.raises(ParcelStateError) as exc_info:
            await service.change_address(parcel.number, "new address")

        assert exc_info.value.status == ParcelStatus.DELIVERED
        assert (await store.get(parcel.number)).address == "test"


class TestStructuredLogging:
    """Mutations carry structured fields for the JSON log."""

    @pytest.mark.asyncio
    async def test_mutation_fields_in_json(self, service, caplog):
        with caplog.at_level(logging.INFO, logger="tracker.service"):
            parcel = await service.register(1000, "test")
            await service.next_status(parcel.number)

        formatter = JsonFormatter()
        entries = [
            json.loads(formatter.format(record))
            for record in caplog.records
            if record.name == "tracker.service"
        ]

        assert entries[0]["number"] == parcel.number
        assert entries[0]["client"] == 1000
        assert entries[0]["status"] == "registered"
        assert entries[1]["number"] == parcel.number
        assert entries[1]["status"] == "sent"
        assert entries[1]["logger"] == "tracker.service"
