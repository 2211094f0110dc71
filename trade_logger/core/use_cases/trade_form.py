"""
Parse-and-validate step between the raw form and the charge calculator.
Unparsable numbers never reach the arithmetic.
"""
import datetime as dt
import math

from trade_logger.core.entities.trade import MAX_MAGNITUDE, TradeForm, TradeInput
from trade_logger.core.errors import TradeValidationError, ValidationReason

REQUIRED_FIELDS = ("symbol", "entry", "exit", "qty", "date")


def _parse_price(field: str, raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise TradeValidationError(field, ValidationReason.NOT_A_NUMBER)
    if not math.isfinite(value):
        raise TradeValidationError(field, ValidationReason.NOT_A_NUMBER)
    if value <= 0:
        raise TradeValidationError(field, ValidationReason.NON_POSITIVE)
    if value > MAX_MAGNITUDE:
        raise TradeValidationError(field, ValidationReason.OUT_OF_RANGE)
    return value


def _parse_quantity(raw: str) -> int:
    try:
        value = float(raw)
    except ValueError:
        raise TradeValidationError("qty", ValidationReason.NOT_A_NUMBER)
    if not math.isfinite(value):
        raise TradeValidationError("qty", ValidationReason.NOT_A_NUMBER)
    if not value.is_integer():
        raise TradeValidationError("qty", ValidationReason.NOT_AN_INTEGER)
    if value <= 0:
        raise TradeValidationError("qty", ValidationReason.NON_POSITIVE)
    if value > MAX_MAGNITUDE:
        raise TradeValidationError("qty", ValidationReason.OUT_OF_RANGE)
    return int(value)


def _parse_date(raw: str) -> dt.date:
    try:
        return dt.date.fromisoformat(raw)
    except ValueError:
        raise TradeValidationError("date", ValidationReason.INVALID_DATE)


def parse_trade_form(form: TradeForm) -> TradeInput:
    values = {name: getattr(form, name).strip() for name in TradeForm.model_fields}

    for name in REQUIRED_FIELDS:
        if not values[name]:
            raise TradeValidationError(name, ValidationReason.MISSING_FIELD)

    return TradeInput(
        symbol=values["symbol"],
        entry=_parse_price("entry", values["entry"]),
        exit=_parse_price("exit", values["exit"]),
        qty=_parse_quantity(values["qty"]),
        date=_parse_date(values["date"]),
        strategy=values["strategy"] or None,
        notes=values["notes"] or None
    )
