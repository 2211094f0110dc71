"""
Tests for the trade store backends and store selection.
"""
from unittest.mock import MagicMock

import psycopg2
import pytest
import redis

from trade_logger import config
from trade_logger.core.errors import StorageUnavailable
from trade_logger.infrastructure.cache.redis_service import RedisTradeStore
from trade_logger.infrastructure.persistence.postgres_repo import PostgresTradeStore
from trade_logger.infrastructure.storage.file_store import JsonFileTradeStore
from trade_logger.infrastructure.storage.memory_store import InMemoryTradeStore


def test_file_store_missing_file(tmp_path):
    assert JsonFileTradeStore(str(tmp_path / "trades.json")).load() is None


def test_file_store_round_trip(tmp_path):
    store = JsonFileTradeStore(str(tmp_path / "nested" / "trades.json"))
    store.save('[{"symbol": "₹"}]')
    assert store.load() == '[{"symbol": "₹"}]'


def test_file_store_write_failure(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    store = JsonFileTradeStore(str(blocker / "trades.json"))
    with pytest.raises(StorageUnavailable):
        store.save("[]")


def test_redis_store_uses_fixed_key():
    client = MagicMock()
    client.get.return_value = "[]"
    store = RedisTradeStore("redis://unused", key="trades", client=client)

    store.save("[1]")
    client.set.assert_called_once_with("trades", "[1]")
    assert store.load() == "[]"
    client.get.assert_called_once_with("trades")


def test_redis_store_errors_become_storage_unavailable():
    client = MagicMock()
    client.get.side_effect = redis.ConnectionError("down")
    client.set.side_effect = redis.ConnectionError("down")
    store = RedisTradeStore("redis://unused", client=client)
    with pytest.raises(StorageUnavailable):
        store.load()
    with pytest.raises(StorageUnavailable):
        store.save("[]")


def test_postgres_store_connect_failure(monkeypatch):
    def refuse(dsn):
        raise psycopg2.OperationalError("connection refused")

    monkeypatch.setattr(psycopg2, "connect", refuse)
    with pytest.raises(StorageUnavailable):
        PostgresTradeStore("postgresql://unused")


def test_postgres_store_upserts_blob(monkeypatch):
    conn = MagicMock()
    cursor = conn.cursor.return_value
    cursor.fetchone.return_value = ("[]",)
    monkeypatch.setattr(psycopg2, "connect", lambda dsn: conn)

    store = PostgresTradeStore("postgresql://unused", key="trades")
    store.save("[1]")
    assert store.load() == "[]"

    sql, params = cursor.execute.call_args_list[1].args
    assert "ON CONFLICT" in sql
    assert params == ("trades", "[1]")


def test_build_store_defaults_to_file(monkeypatch, tmp_path):
    monkeypatch.delenv("TRADE_STORE", raising=False)
    monkeypatch.setenv("TRADES_FILE", str(tmp_path / "trades.json"))
    assert isinstance(config.build_store(), JsonFileTradeStore)


def test_build_store_memory(monkeypatch):
    monkeypatch.setenv("TRADE_STORE", "memory")
    assert isinstance(config.build_store(), InMemoryTradeStore)


def test_build_store_postgres_without_url_falls_back(monkeypatch):
    monkeypatch.setenv("TRADE_STORE", "postgres")
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert isinstance(config.build_store(), InMemoryTradeStore)


def test_charge_schedule_from_env(monkeypatch):
    monkeypatch.setenv("BROKERAGE_CAP", "40")
    monkeypatch.setenv("GST_RATE", "oops")
    schedule = config.charge_schedule()
    assert schedule.brokerage_cap == 40.0
    assert schedule.gst_rate == 0.18
