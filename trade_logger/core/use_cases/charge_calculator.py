from decimal import Decimal, ROUND_HALF_UP, localcontext

from pydantic import BaseModel

from trade_logger.core.entities.trade import ChargeBreakdown

GOOD_TIP = "✅ Good execution. Stick to the plan."
REVIEW_TIP = "⚠️ Review entry/exit. Consider stop-loss discipline."

_CENT = Decimal("0.01")
# Enough digits to quantize any finite float to cents.
_ROUND_PRECISION = 400


class ChargeSchedule(BaseModel):
    """
    Fee schedule for an equity round trip. Defaults model Indian
    discount-broker intraday charges.
    """
    brokerage_cap: float = 20.0  # per leg
    brokerage_rate: float = 0.0003
    sebi_rate: float = 0.000001
    stamp_duty_rate: float = 0.00003
    gst_rate: float = 0.18
    stt_rate: float = 0.00025


DEFAULT_SCHEDULE = ChargeSchedule()


def round2(value: float) -> float:
    """
    Round to 2 decimals, half away from zero, on the exact binary value
    of the float (same result as JavaScript's toFixed(2)).
    """
    with localcontext() as ctx:
        ctx.prec = _ROUND_PRECISION
        rounded = Decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP)
    return float(rounded) + 0.0  # no -0.0


def advisory_tip(net: float) -> str:
    return GOOD_TIP if net >= 0 else REVIEW_TIP


def calculate_charges(entry: float, exit: float, qty: int,
                      schedule: ChargeSchedule = DEFAULT_SCHEDULE) -> ChargeBreakdown:
    turnover = (entry + exit) * qty
    brokerage_per_leg = min(schedule.brokerage_cap, schedule.brokerage_rate * entry * qty)
    total_brokerage = 2 * brokerage_per_leg
    sebi = schedule.sebi_rate * turnover
    stamp = schedule.stamp_duty_rate * entry * qty
    gst = schedule.gst_rate * total_brokerage
    stt = schedule.stt_rate * exit * qty

    # Charges and profit are rounded first; net is taken from the rounded values.
    charges = round2(total_brokerage + sebi + stamp + gst + stt)
    profit = round2((exit - entry) * qty)
    net = round2(profit - charges)

    return ChargeBreakdown(
        turnover=turnover,
        brokerage=total_brokerage,
        sebi=sebi,
        stamp_duty=stamp,
        gst=gst,
        stt=stt,
        charges=charges,
        profit=profit,
        net=net,
        tip=advisory_tip(net)
    )
