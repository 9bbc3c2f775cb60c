"""Tests for derived profitability metrics."""

import pytest

from ecomcalc.domain.entities import AggregateInput
from ecomcalc.domain.metrics import DEFAULT_VAT_RATE, cost_breakdown, derive, profit_share


@pytest.fixture
def manual_inputs():
    """A two-day manual entry with a profit."""
    return AggregateInput(
        orders_count=5,
        net_value_with_vat=1210.0,
        total_value_with_shipping=1300.0,
        marketing_cost=100.0,
        daily_fixed_expenses=50.0,
        days_count=2,
    )


def test_derive_manual_entry(manual_inputs):
    """Worked example for a two-day period."""
    metrics = derive(manual_inputs)

    assert metrics.net_value_ex_vat == pytest.approx(1000.0)
    assert metrics.product_cost == pytest.approx(500.0)
    assert metrics.total_fixed_costs == pytest.approx(100.0)
    assert metrics.gross_profit == pytest.approx(300.0)
    assert metrics.vat_amount == pytest.approx(210.0)
    assert metrics.profit_margin == pytest.approx(30.0)
    assert metrics.average_order_value == pytest.approx(260.0)


def test_default_inputs_are_all_zero():
    """Defaults derive to zero without division errors."""
    metrics = derive(AggregateInput())

    assert metrics.net_value_ex_vat == 0.0
    assert metrics.product_cost == 0.0
    assert metrics.gross_profit == 0.0
    assert metrics.profit_margin == 0.0
    assert metrics.average_order_value == 0.0


def test_default_vat_rate():
    assert DEFAULT_VAT_RATE == 0.21


@pytest.mark.parametrize("net", [0.0, 1.0, 99.99, 1210.0, 123456.78])
def test_vat_split_adds_up(net):
    """VAT plus the VAT-exclusive value gives back the VAT-inclusive value."""
    metrics = derive(AggregateInput(net_value_with_vat=net))

    assert metrics.net_value_ex_vat == pytest.approx(net / 1.21)
    assert metrics.vat_amount + metrics.net_value_ex_vat == pytest.approx(net)
    assert metrics.product_cost == metrics.net_value_ex_vat / 2


def test_alternate_vat_rate():
    """The VAT rate is a parameter, not a global."""
    metrics = derive(AggregateInput(net_value_with_vat=1100.0), vat_rate=0.10)

    assert metrics.net_value_ex_vat == pytest.approx(1000.0)
    assert metrics.vat_amount == pytest.approx(100.0)


def test_zero_vat_rate():
    metrics = derive(AggregateInput(net_value_with_vat=500.0), vat_rate=0.0)

    assert metrics.net_value_ex_vat == 500.0
    assert metrics.vat_amount == 0.0


@pytest.mark.parametrize("days", [1, 2, 7, 31])
def test_total_fixed_costs(days):
    metrics = derive(AggregateInput(daily_fixed_expenses=12.5, days_count=days))

    assert metrics.total_fixed_costs == 12.5 * days


def test_loss_is_not_clamped():
    """Gross profit and margin stay negative for a loss."""
    inputs = AggregateInput(net_value_with_vat=121.0, marketing_cost=200.0)

    metrics = derive(inputs)

    assert metrics.gross_profit == pytest.approx(100.0 - 50.0 - 200.0)
    assert metrics.gross_profit < 0
    assert metrics.profit_margin == pytest.approx(-150.0)


def test_costs_without_revenue():
    """Costs with no revenue give a negative profit and a zero margin."""
    metrics = derive(AggregateInput(marketing_cost=10.0, daily_fixed_expenses=5.0, days_count=3))

    assert metrics.gross_profit == pytest.approx(-25.0)
    assert metrics.profit_margin == 0.0


def test_gross_profit_decreases_with_costs(manual_inputs):
    """More marketing or fixed costs never raise gross profit."""
    from dataclasses import replace

    base = derive(manual_inputs).gross_profit
    more_marketing = derive(replace(manual_inputs, marketing_cost=150.0)).gross_profit
    more_fixed = derive(replace(manual_inputs, daily_fixed_expenses=60.0)).gross_profit

    assert more_marketing < base
    assert more_fixed < base


def test_average_order_value_without_orders():
    """No orders means a zero average rather than a division error."""
    metrics = derive(AggregateInput(orders_count=0, total_value_with_shipping=5000.0))

    assert metrics.average_order_value == 0.0


def test_derive_is_pure(manual_inputs):
    assert derive(manual_inputs) == derive(manual_inputs)


def test_cost_breakdown_profit(manual_inputs):
    metrics = derive(manual_inputs)

    breakdown = cost_breakdown(manual_inputs, metrics)

    assert [s.name for s in breakdown.slices] == [
        "Product cost",
        "Marketing",
        "Fixed costs",
        "Gross profit",
    ]
    assert [s.value for s in breakdown.slices] == pytest.approx([500.0, 100.0, 100.0, 300.0])
    assert breakdown.bars[0].value == pytest.approx(1000.0)
    assert breakdown.profit_share == pytest.approx(30.0)


def test_cost_breakdown_loss_floors_slice_only():
    """A loss shows as zero share but a negative bar."""
    inputs = AggregateInput(net_value_with_vat=121.0, marketing_cost=200.0)
    metrics = derive(inputs)

    breakdown = cost_breakdown(inputs, metrics)

    assert breakdown.slices[-1].value == 0.0
    assert breakdown.bars[-1].value == pytest.approx(-150.0)


def test_profit_share_without_revenue():
    assert profit_share(derive(AggregateInput())) is None
