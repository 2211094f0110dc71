from typing import Optional

from trade_logger.core.interfaces.trade_store import ITradeStore


class InMemoryTradeStore(ITradeStore):
    """Keeps the blob for the lifetime of the process. Used by tests and TRADE_STORE=memory."""

    def __init__(self, blob: Optional[str] = None):
        self.blob = blob

    def load(self) -> Optional[str]:
        return self.blob

    def save(self, blob: str) -> None:
        self.blob = blob
