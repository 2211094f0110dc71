from abc import ABC, abstractmethod
from typing import Optional


class ITradeStore(ABC):
    """
    Key-value surface holding the whole journal as one serialized blob.
    Implementations raise StorageUnavailable on read/write failure.
    """

    @abstractmethod
    def load(self) -> Optional[str]:
        """Returns the stored blob, or None when nothing was saved yet."""
        pass

    @abstractmethod
    def save(self, blob: str) -> None:
        pass
