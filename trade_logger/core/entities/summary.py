from typing import Literal

from pydantic import BaseModel


class ProgressIndicator(BaseModel):
    percent: float  # 0.0 - 100.0
    tone: Literal["positive", "negative"]


class LedgerSummary(BaseModel):
    """
    Portfolio totals. Always recomputed from the trade list.
    """
    startingCapital: float
    currentCapital: float
    totalGross: float
    totalCharges: float
    totalNet: float
    tradeCount: int
    progress: ProgressIndicator
