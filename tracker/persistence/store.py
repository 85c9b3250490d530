"""Data access layer for parcels."""

from tracker.errors import ParcelNotFoundError
from tracker.parcel import Parcel, ParcelStatus
from tracker.persistence.database import Database


class ParcelStore:
    """
    CRUD gateway over the parcel table.

    Every write is one statement committed on its own; a failed write is
    rolled back and its error propagates unchanged. Updates and deletes
    that match no row succeed silently, so they are idempotent.
    """

    def __init__(self, db: Database) -> None:
        self._db = db

    async def add(self, parcel: Parcel) -> int:
        """Insert a parcel and return its generated number."""
        cursor = await self._db.write(
            """
            INSERT INTO parcel (client, status, address, created_at)
            VALUES (:client, :status, :address, :created_at)
            """,
            {
                "client": parcel.client,
                "status": parcel.status.value,
                "address": parcel.address,
                "created_at": parcel.created_at,
            },
        )
        return cursor.lastrowid

    async def get(self, number: int) -> Parcel:
        """Get a parcel by number."""
        row = await self._db.fetchone(
            "SELECT * FROM parcel WHERE number = :number",
            {"number": number},
        )
        if row is None:
            raise ParcelNotFoundError(number)
        return Parcel.from_row(row)

    async def get_by_client(self, client: int) -> list[Parcel]:
        """Get all parcels owned by a client."""
        rows = await self._db.fetchall(
            "SELECT * FROM parcel WHERE client = :client ORDER BY number ASC",
            {"client": client},
        )
        return [Parcel.from_row(row) for row in rows]

    async def set_address(
        self,
        number: int,
        address: str,
        when_status: ParcelStatus | None = None,
    ) -> int:
        """
        Update the delivery address of a parcel.

        Args:
            number: Parcel number
            address: New delivery address
            when_status: Only update if the parcel currently has this status

        Returns:
            Number of rows updated (0 or 1)
        """
        sql = "UPDATE parcel SET address = :address WHERE number = :number"
        parameters = {"address": address, "number": number}
        if when_status is not None:
            sql += " AND status = :when_status"
            parameters["when_status"] = when_status.value
        cursor = await self._db.write(sql, parameters)
        return cursor.rowcount

    async def set_status(self, number: int, status: ParcelStatus) -> int:
        """Update the status of a parcel. Returns the number of rows updated."""
        cursor = await self._db.write(
            "UPDATE parcel SET status = :status WHERE number = :number",
            {"status": status.value, "number": number},
        )
        return cursor.rowcount

    async def delete(
        self, number: int, when_status: ParcelStatus | None = None
    ) -> int:
        """
        Delete a parcel.

        Args:
            number: Parcel number
            when_status: Only delete if the parcel currently has this status

        Returns:
            Number of rows deleted (0 or 1)
        """
        sql = "DELETE FROM parcel WHERE number = :number"
        parameters = {"number": number}
        if when_status is not None:
            sql += " AND status = :when_status"
            parameters["when_status"] = when_status.value
        cursor = await self._db.write(sql, parameters)
        return cursor.rowcount
