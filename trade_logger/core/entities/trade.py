"""
Trade Entities for Trade Logger

Wire names (entry, exit, qty, profit, charges, net) follow the journal
export format so older exports import unchanged.
"""
import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Largest accepted price or quantity.
MAX_MAGNITUDE = 1e12
# Largest accepted profit, charge or net amount on a stored record.
MAX_AMOUNT = 1e30


class TradeForm(BaseModel):
    """
    Raw form fields as typed by the user. Nothing is parsed yet.
    JSON numbers are accepted and kept as their string form.
    """
    symbol: str = ""
    entry: str = ""
    exit: str = ""
    qty: str = ""
    date: str = ""
    strategy: str = ""
    notes: str = ""

    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        json_schema_extra={
            "example": {
                "symbol": "INFY",
                "entry": "100",
                "exit": "110",
                "qty": "50",
                "date": "2024-03-01",
                "strategy": "Breakout",
                "notes": "Clean retest"
            }
        }
    )


class TradeInput(BaseModel):
    """Validated form values, ready for the charge calculator."""
    symbol: str
    entry: float
    exit: float
    qty: int
    date: dt.date
    strategy: Optional[str] = None
    notes: Optional[str] = None


class ChargeBreakdown(BaseModel):
    """
    Charges and profit of one round trip (buy leg + sell leg).
    Components are unrounded; totals are rounded to 2 decimals.
    """
    turnover: float
    brokerage: float
    sebi: float
    stamp_duty: float
    gst: float
    stt: float
    charges: float
    profit: float
    net: float
    tip: str


class TradeRecord(BaseModel):
    """
    A journal entry. Derived fields are fixed at creation.
    """
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: int
    symbol: str
    entry: float = Field(gt=0, le=MAX_MAGNITUDE)
    exit: float = Field(gt=0, le=MAX_MAGNITUDE)
    qty: int = Field(gt=0, le=int(MAX_MAGNITUDE))
    date: dt.date
    strategy: Optional[str] = None
    notes: Optional[str] = None
    profit: float = Field(ge=-MAX_AMOUNT, le=MAX_AMOUNT)
    charges: float = Field(ge=-MAX_AMOUNT, le=MAX_AMOUNT)
    net: float = Field(ge=-MAX_AMOUNT, le=MAX_AMOUNT)
    tip: str
