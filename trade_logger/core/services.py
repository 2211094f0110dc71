import logging
import time
from typing import List, Optional, Tuple, Union

from pydantic import TypeAdapter, ValidationError

from trade_logger.core.entities.summary import LedgerSummary
from trade_logger.core.entities.trade import ChargeBreakdown, TradeForm, TradeRecord
from trade_logger.core.errors import ImportFailure, StorageUnavailable
from trade_logger.core.interfaces.trade_store import ITradeStore
from trade_logger.core.use_cases.charge_calculator import (
    DEFAULT_SCHEDULE,
    ChargeSchedule,
    calculate_charges,
)
from trade_logger.core.use_cases.ledger_aggregator import summarize
from trade_logger.core.use_cases.trade_form import parse_trade_form

logger = logging.getLogger(__name__)

_trade_list = TypeAdapter(List[TradeRecord])


def serialize_trades(trades: List[TradeRecord]) -> str:
    return _trade_list.dump_json(trades).decode("utf-8")


def deserialize_trades(blob: Union[str, bytes]) -> List[TradeRecord]:
    return _trade_list.validate_json(blob)


class JournalService:
    """
    The ledger aggregate for one session: ordered trades plus starting capital.
    Totals are never stored; summary() recomputes them from the trade list.
    """

    def __init__(self, store: ITradeStore, schedule: ChargeSchedule = DEFAULT_SCHEDULE,
                 starting_capital: float = 100000.0):
        self.store: Optional[ITradeStore] = store
        self.schedule = schedule
        self.starting_capital = starting_capital
        self._trades: List[TradeRecord] = []
        self._last_id = 0

    @property
    def trades(self) -> Tuple[TradeRecord, ...]:
        return tuple(self._trades)

    @property
    def in_memory_only(self) -> bool:
        return self.store is None

    # --- Lifecycle ---

    def load(self) -> None:
        """
        Load the journal from the store. Missing data gives an empty ledger;
        unreadable data gives an empty ledger and switches to memory only.
        """
        if self.store is None:
            return
        try:
            blob = self.store.load()
        except StorageUnavailable as e:
            logger.warning(f"Trade store unavailable: {e}. Continuing in memory only.")
            self.store = None
            return

        if not blob:
            self._trades = []
            return
        try:
            self._trades = deserialize_trades(blob)
        except ValidationError as e:
            # Keep the stored blob as it is; nothing is written back this session.
            logger.warning(f"Stored journal is corrupt, starting empty in memory only: {e}")
            self._trades = []
            self.store = None
        self._last_id = max((t.id for t in self._trades), default=0)
        logger.info(f"Loaded {len(self._trades)} trades.")

    def save(self) -> None:
        if self.store is None:
            return
        try:
            self.store.save(serialize_trades(self._trades))
        except StorageUnavailable as e:
            logger.warning(f"Failed to persist journal: {e}. Continuing in memory only.")
            self.store = None

    # --- Mutations ---

    def _next_id(self) -> int:
        self._last_id = max(int(time.time() * 1000), self._last_id + 1)
        return self._last_id

    def preview(self, form: TradeForm) -> ChargeBreakdown:
        parsed = parse_trade_form(form)
        return calculate_charges(parsed.entry, parsed.exit, parsed.qty, self.schedule)

    def add_trade(self, form: TradeForm) -> TradeRecord:
        parsed = parse_trade_form(form)
        outcome = calculate_charges(parsed.entry, parsed.exit, parsed.qty, self.schedule)

        record = TradeRecord(
            id=self._next_id(),
            **parsed.model_dump(),
            profit=outcome.profit,
            charges=outcome.charges,
            net=outcome.net,
            tip=outcome.tip
        )
        self._trades.append(record)
        self.save()
        logger.info(f"Logged {record.symbol} trade {record.id}: net {record.net:.2f}")
        return record

    def delete_trade(self, trade_id: int) -> bool:
        remaining = [t for t in self._trades if t.id != trade_id]
        if len(remaining) == len(self._trades):
            return False
        self._trades = remaining
        self.save()
        return True

    def import_trades(self, payload: Union[str, bytes]) -> int:
        """
        Replace the whole journal with the payload. On any parse error the
        current journal is kept and ImportFailure is raised.
        """
        try:
            imported = deserialize_trades(payload)
        except ValidationError as e:
            raise ImportFailure(f"Import file is not a valid trade list: {e.error_count()} error(s)") from e

        ids = [t.id for t in imported]
        if len(set(ids)) != len(ids):
            raise ImportFailure("Import file contains duplicate trade ids")

        self._trades = imported
        self._last_id = max(self._last_id, max(ids, default=0))
        self.save()
        logger.info(f"Imported {len(imported)} trades.")
        return len(imported)

    def export_trades(self) -> str:
        return serialize_trades(self._trades)

    def set_starting_capital(self, value: float) -> None:
        self.starting_capital = value

    # --- Reads ---

    def summary(self) -> LedgerSummary:
        return summarize(self._trades, self.starting_capital)
