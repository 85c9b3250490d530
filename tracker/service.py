"""Parcel business rules on top of the store."""

import logging

from tracker.errors import ParcelStateError
from tracker.parcel import NEXT_STATUS, Parcel, ParcelStatus, utc_timestamp
from tracker.persistence.store import ParcelStore

logger = logging.getLogger(__name__)


class ParcelService:
    """
    Registers parcels and guards their lifecycle.

    The address can be changed and the parcel deleted only while it is
    still registered. Status moves forward one step at a time.
    """

    def __init__(self, store: ParcelStore) -> None:
        self._store = store

    async def register(self, client: int, address: str) -> Parcel:
        """Register a new parcel for a client."""
        parcel = Parcel(
            client=client,
            address=address,
            status=ParcelStatus.REGISTERED,
            created_at=utc_timestamp(),
        )
        parcel.number = await self._store.add(parcel)
        logger.info(
            "Parcel registered: number=%s client=%s address=%s created_at=%s",
            parcel.number,
            parcel.client,
            parcel.address,
            parcel.created_at,
            extra={
                "extra_data": {
                    "number": parcel.number,
                    "client": parcel.client,
                    "status": parcel.status.value,
                }
            },
        )
        return parcel

    async def client_parcels(self, client: int) -> list[Parcel]:
        """Get all parcels of a client."""
        return await self._store.get_by_client(client)

    async def next_status(self, number: int) -> ParcelStatus:
        """
        Advance a parcel to its next status.

        Returns:
            The parcel status after the call. Delivered parcels are
            left as they are.
        """
        parcel = await self._store.get(number)
        next_status = NEXT_STATUS.get(parcel.status)
        if next_status is None:
            logger.debug("Parcel %s already %s", number, parcel.status.value)
            return parcel.status

        await self._store.set_status(number, next_status)
        logger.info(
            "Parcel %s status: %s -> %s",
            number,
            parcel.status.value,
            next_status.value,
            extra={"extra_data": {"number": number, "status": next_status.value}},
        )
        return next_status

    async def change_address(self, number: int, address: str) -> None:
        """Change the delivery address of a registered parcel."""
        updated = await self._store.set_address(
            number, address, when_status=ParcelStatus.REGISTERED
        )
        if not updated:
            await self._refuse(number, "change address of")
        logger.info(
            "Parcel %s address changed to %s",
            number,
            address,
            extra={"extra_data": {"number": number, "address": address}},
        )

    async def delete(self, number: int) -> None:
        """Delete a registered parcel."""
        deleted = await self._store.delete(
            number, when_status=ParcelStatus.REGISTERED
        )
        if not deleted:
            await self._refuse(number, "delete")
        logger.info(
            "Parcel %s deleted",
            number,
            extra={"extra_data": {"number": number}},
        )

    async def _refuse(self, number: int, action: str) -> None:
        # The guarded write matched nothing: either no such parcel
        # (get raises) or it has left the registered status.
        parcel = await self._store.get(number)
        raise ParcelStateError(
            f"Cannot {action} parcel {number} in status {parcel.status.value}",
            number,
            parcel.status,
        )
