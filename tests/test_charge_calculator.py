"""
Tests for per-trade charge and profit calculation.
"""
import pytest

from trade_logger.core.use_cases.charge_calculator import (
    GOOD_TIP,
    REVIEW_TIP,
    ChargeSchedule,
    advisory_tip,
    calculate_charges,
    round2,
)


def test_reference_trade():
    """100 -> 110 x 50: gross 500.00, charges 5.08, net 494.92."""
    result = calculate_charges(100.0, 110.0, 50)
    assert result.profit == 500.00
    assert result.brokerage == pytest.approx(3.0)
    assert result.sebi == pytest.approx(0.0105)
    assert result.stamp_duty == pytest.approx(0.15)
    assert result.gst == pytest.approx(0.54)
    assert result.stt == pytest.approx(1.375)
    assert result.charges == 5.08
    assert result.net == 494.92
    assert result.tip == GOOD_TIP


def test_brokerage_capped_per_leg():
    """Large orders pay at most 20 per leg."""
    result = calculate_charges(1000.0, 1010.0, 1000)
    assert result.brokerage == 40.0
    assert result.gst == pytest.approx(7.2)


def test_losing_trade_gets_review_tip():
    result = calculate_charges(110.0, 100.0, 50)
    assert result.profit == -500.00
    assert result.net < 0
    assert result.tip == REVIEW_TIP


def test_net_uses_rounded_components():
    """Net is taken from the already rounded gross and charges."""
    result = calculate_charges(100.0, 110.0, 50)
    assert result.net == round2(result.profit - result.charges)


def test_custom_schedule():
    """A zero-fee schedule leaves net equal to gross."""
    free = ChargeSchedule(brokerage_cap=0, brokerage_rate=0, sebi_rate=0,
                          stamp_duty_rate=0, gst_rate=0, stt_rate=0)
    result = calculate_charges(100.0, 110.0, 50, free)
    assert result.charges == 0.0
    assert result.net == result.profit == 500.0


def test_tip_boundary():
    """Zero net counts as good execution, a one paisa loss does not."""
    assert advisory_tip(0.00) == GOOD_TIP
    assert advisory_tip(-0.01) == REVIEW_TIP


@pytest.mark.parametrize("value, expected", [
    (0.125, 0.13),
    (-0.125, -0.13),
    (1.005, 1.0),  # stored as 1.00499999...
    (2.675, 2.67),  # stored as 2.67499999...
    (5.0755, 5.08),
])
def test_round2_half_away_from_zero(value, expected):
    assert round2(value) == expected


def test_round2_has_no_negative_zero():
    assert str(round2(-0.001)) == "0.0"


@pytest.mark.parametrize("value", [5.33e26, -1e30, 1.7e308])
def test_round2_large_values(value):
    """Values far beyond 28 significant digits still round."""
    assert round2(value) == value


def test_largest_accepted_trade_is_computable():
    result = calculate_charges(1e12, 1e12, 10 ** 12)
    assert result.profit == 0.0
    assert result.charges > 0
