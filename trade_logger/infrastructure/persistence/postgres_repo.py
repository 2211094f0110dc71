from typing import Optional

import psycopg2

from trade_logger.core.errors import StorageUnavailable
from trade_logger.core.interfaces.trade_store import ITradeStore


class PostgresTradeStore(ITradeStore):
    """
    One row per key in a small key/value table; the journal lives under one key.
    """

    def __init__(self, dsn: str, key: str = "trades"):
        self.dsn = dsn
        self.key = key
        self._init_db()

    def _connect(self):
        try:
            return psycopg2.connect(self.dsn)
        except psycopg2.Error as e:
            raise StorageUnavailable(f"Failed to connect to Postgres: {e}") from e

    def _init_db(self):
        conn = self._connect()
        try:
            cur = conn.cursor()
            cur.execute("""
                CREATE TABLE IF NOT EXISTS journal_blobs (
                    key VARCHAR PRIMARY KEY,
                    payload TEXT NOT NULL
                );
            """)
            conn.commit()
            cur.close()
        except psycopg2.Error as e:
            raise StorageUnavailable(f"Failed to create journal table: {e}") from e
        finally:
            conn.close()

    def load(self) -> Optional[str]:
        conn = self._connect()
        try:
            cur = conn.cursor()
            cur.execute("SELECT payload FROM journal_blobs WHERE key = %s", (self.key,))
            row = cur.fetchone()
            cur.close()
        except psycopg2.Error as e:
            raise StorageUnavailable(f"Postgres read error: {e}") from e
        finally:
            conn.close()
        return row[0] if row else None

    def save(self, blob: str) -> None:
        conn = self._connect()
        try:
            cur = conn.cursor()
            cur.execute("""
                INSERT INTO journal_blobs (key, payload)
                VALUES (%s, %s)
                ON CONFLICT (key) DO UPDATE SET payload = EXCLUDED.payload
            """, (self.key, blob))
            conn.commit()
            cur.close()
        except psycopg2.Error as e:
            raise StorageUnavailable(f"Postgres write error: {e}") from e
        finally:
            conn.close()
