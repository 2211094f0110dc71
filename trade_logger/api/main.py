import asyncio
import logging
from functools import lru_cache
from typing import List

from fastapi import Depends, FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# --- Imports ---
from trade_logger import config
from trade_logger.core.entities.summary import LedgerSummary
from trade_logger.core.entities.trade import ChargeBreakdown, TradeForm, TradeRecord
from trade_logger.core.errors import ImportFailure, TradeValidationError
from trade_logger.core.services import JournalService

# Setup Logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("TradeLogger")

app = FastAPI(title="Trade Logger API", version="1.0.0", description="Personal trade journal with charge estimates and capital tracking")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class CapitalUpdate(BaseModel):
    startingCapital: float = Field(..., ge=0, allow_inf_nan=False)


# --- Dependency Injection ---

@lru_cache(maxsize=1)
def get_journal() -> JournalService:
    journal = JournalService(
        config.build_store(),
        schedule=config.charge_schedule(),
        starting_capital=config.starting_capital()
    )
    journal.load()
    return journal


def _validation_error(e: TradeValidationError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"field": e.field, "reason": e.reason.value, "message": str(e)}
    )


# --- Endpoints ---

@app.get("/health")
def health(journal: JournalService = Depends(get_journal)):
    return {"status": "healthy", "persistent": not journal.in_memory_only}


@app.get("/v1/trades", response_model=List[TradeRecord])
def list_trades(journal: JournalService = Depends(get_journal)):
    return list(journal.trades)


@app.post("/v1/trades", response_model=TradeRecord, status_code=201)
def add_trade(form: TradeForm, journal: JournalService = Depends(get_journal)):
    try:
        return journal.add_trade(form)
    except TradeValidationError as e:
        logger.info(f"Rejected trade: {e}")
        raise _validation_error(e)


@app.post("/v1/charges/preview", response_model=ChargeBreakdown)
def preview_charges(form: TradeForm, journal: JournalService = Depends(get_journal)):
    """
    Charges and profit for the form without logging the trade.
    """
    try:
        return journal.preview(form)
    except TradeValidationError as e:
        raise _validation_error(e)


@app.delete("/v1/trades/{trade_id}")
def delete_trade(trade_id: int, journal: JournalService = Depends(get_journal)):
    return {"deleted": journal.delete_trade(trade_id)}


@app.get("/v1/summary", response_model=LedgerSummary)
def get_summary(journal: JournalService = Depends(get_journal)):
    return journal.summary()


@app.put("/v1/capital", response_model=LedgerSummary)
def set_capital(update: CapitalUpdate, journal: JournalService = Depends(get_journal)):
    journal.set_starting_capital(update.startingCapital)
    return journal.summary()


@app.get("/v1/trades/export")
def export_trades(journal: JournalService = Depends(get_journal)):
    return Response(
        content=journal.export_trades().encode("utf-8"),
        media_type="application/json; charset=utf-8",
        headers={"Content-Disposition": 'attachment; filename="trades.json"'}
    )


@app.post("/v1/trades/import")
async def import_trades(request: Request, journal: JournalService = Depends(get_journal)):
    """
    Body is the raw content of an exported trades.json file.
    The current journal is replaced only if the whole file parses.
    """
    payload = await request.body()
    try:
        count = await asyncio.to_thread(journal.import_trades, payload)
    except ImportFailure as e:
        logger.warning(f"Import rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return {"status": "success", "imported": count}
