"""
Environment-driven settings for Trade Logger.
"""
import logging
import os

from trade_logger.core.errors import StorageUnavailable
from trade_logger.core.interfaces.trade_store import ITradeStore
from trade_logger.core.use_cases.charge_calculator import ChargeSchedule

logger = logging.getLogger(__name__)

TRADES_KEY = os.getenv("TRADES_KEY", "trades")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not a number, using {default}.")
        return default


def starting_capital() -> float:
    return _env_float("STARTING_CAPITAL", 100000.0)


def charge_schedule() -> ChargeSchedule:
    defaults = ChargeSchedule()
    return ChargeSchedule(
        brokerage_cap=_env_float("BROKERAGE_CAP", defaults.brokerage_cap),
        brokerage_rate=_env_float("BROKERAGE_RATE", defaults.brokerage_rate),
        sebi_rate=_env_float("SEBI_RATE", defaults.sebi_rate),
        stamp_duty_rate=_env_float("STAMP_DUTY_RATE", defaults.stamp_duty_rate),
        gst_rate=_env_float("GST_RATE", defaults.gst_rate),
        stt_rate=_env_float("STT_RATE", defaults.stt_rate)
    )


def build_store() -> ITradeStore:
    """
    Picks the store from TRADE_STORE (file, redis, postgres, memory).
    An unreachable backend falls back to memory with a warning.
    """
    from trade_logger.infrastructure.storage.file_store import JsonFileTradeStore
    from trade_logger.infrastructure.storage.memory_store import InMemoryTradeStore

    kind = os.getenv("TRADE_STORE", "file").lower()
    try:
        if kind == "redis":
            from trade_logger.infrastructure.cache.redis_service import RedisTradeStore
            return RedisTradeStore(os.getenv("REDIS_URL", "redis://localhost:6379/0"), key=TRADES_KEY)
        if kind == "postgres":
            from trade_logger.infrastructure.persistence.postgres_repo import PostgresTradeStore
            db_url = os.getenv("DATABASE_URL")
            if not db_url:
                raise StorageUnavailable("DATABASE_URL not set")
            return PostgresTradeStore(db_url, key=TRADES_KEY)
        if kind == "memory":
            return InMemoryTradeStore()
        if kind != "file":
            logger.warning(f"Unknown TRADE_STORE={kind!r}, using file store.")
        return JsonFileTradeStore(os.getenv("TRADES_FILE", "trades.json"))
    except StorageUnavailable as e:
        logger.warning(f"{e}. Journal will be kept in memory only.")
        return InMemoryTradeStore()
