from typing import Iterable, Sequence

from trade_logger.core.entities.summary import LedgerSummary, ProgressIndicator
from trade_logger.core.entities.trade import TradeRecord
from trade_logger.core.use_cases.charge_calculator import round2


def total_gross(trades: Iterable[TradeRecord]) -> float:
    return round2(sum(t.profit for t in trades))


def total_charges(trades: Iterable[TradeRecord]) -> float:
    return round2(sum(t.charges for t in trades))


def total_net(trades: Iterable[TradeRecord]) -> float:
    return round2(sum(t.net for t in trades))


def current_capital(starting_capital: float, net: float) -> float:
    return round2(starting_capital + net)


def progress_ratio(net: float, starting_capital: float) -> ProgressIndicator:
    """
    Share of starting capital gained or lost, clamped to 100%.
    A starting capital of zero or below reports 0%.
    """
    tone = "positive" if net >= 0 else "negative"
    if starting_capital <= 0:
        return ProgressIndicator(percent=0.0, tone=tone)
    percent = min(abs(net) / starting_capital, 1.0) * 100
    return ProgressIndicator(percent=percent, tone=tone)


def summarize(trades: Sequence[TradeRecord], starting_capital: float) -> LedgerSummary:
    net = total_net(trades)
    return LedgerSummary(
        startingCapital=starting_capital,
        currentCapital=current_capital(starting_capital, net),
        totalGross=total_gross(trades),
        totalCharges=total_charges(trades),
        totalNet=net,
        tradeCount=len(trades),
        progress=progress_ratio(net, starting_capital)
    )
