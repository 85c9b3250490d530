"""Database schema definitions."""

SCHEMA = [
    # Parcels
    """
    CREATE TABLE IF NOT EXISTS parcel (
        number INTEGER PRIMARY KEY AUTOINCREMENT,
        client INTEGER NOT NULL,
        status TEXT NOT NULL,
        address TEXT NOT NULL,
        created_at TEXT NOT NULL
    )
    """,
    # Index for client lookups
    """
    CREATE INDEX IF NOT EXISTS idx_parcel_client
    ON parcel(client)
    """,
]
