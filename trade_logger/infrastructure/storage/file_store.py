import logging
import os
from typing import Optional

from trade_logger.core.errors import StorageUnavailable
from trade_logger.core.interfaces.trade_store import ITradeStore

logger = logging.getLogger(__name__)


class JsonFileTradeStore(ITradeStore):
    """
    Stores the journal as one UTF-8 JSON file. Writes go to a temp file
    first and are renamed into place.
    """

    def __init__(self, path: str):
        self.path = path

    def load(self) -> Optional[str]:
        if not os.path.exists(self.path):
            logger.info(f"No journal at {self.path}, starting empty.")
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return f.read()
        except OSError as e:
            raise StorageUnavailable(f"Cannot read {self.path}: {e}") from e

    def save(self, blob: str) -> None:
        tmp_path = f"{self.path}.tmp"
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(blob)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise StorageUnavailable(f"Cannot write {self.path}: {e}") from e
