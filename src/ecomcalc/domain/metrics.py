"""Profitability metrics derived from aggregate input figures."""

from typing import Optional

from ecomcalc.domain.entities import (
    AggregateInput,
    CostBreakdown,
    CostSlice,
    DerivedMetrics,
)

DEFAULT_VAT_RATE = 0.21

# Cost of goods is modelled as this share of VAT-exclusive net revenue.
PRODUCT_COST_RATIO = 0.5


def derive(inputs: AggregateInput, vat_rate: float = DEFAULT_VAT_RATE) -> DerivedMetrics:
    """Compute the derived metrics for one period.

    Pure and total over non-negative finite inputs. Gross profit and
    profit margin keep their sign so a loss stays visible.

    Args:
        inputs: Aggregate figures for the period
        vat_rate: VAT rate as a fraction of the VAT-exclusive value

    Returns:
        DerivedMetrics for the input
    """
    net_value_ex_vat = inputs.net_value_with_vat / (1 + vat_rate)
    product_cost = net_value_ex_vat * PRODUCT_COST_RATIO
    total_fixed_costs = inputs.daily_fixed_expenses * inputs.days_count
    gross_profit = (
        net_value_ex_vat - inputs.marketing_cost - product_cost - total_fixed_costs
    )
    vat_amount = inputs.net_value_with_vat - net_value_ex_vat

    # Guarded on the VAT-inclusive value but divided by the VAT-exclusive
    # one. Ported as observed; both are positive together for any rate > -1.
    if inputs.net_value_with_vat > 0:
        profit_margin = (gross_profit / net_value_ex_vat) * 100
    else:
        profit_margin = 0.0

    if inputs.orders_count > 0:
        average_order_value = inputs.total_value_with_shipping / inputs.orders_count
    else:
        average_order_value = 0.0

    return DerivedMetrics(
        net_value_ex_vat=net_value_ex_vat,
        product_cost=product_cost,
        total_fixed_costs=total_fixed_costs,
        gross_profit=gross_profit,
        vat_amount=vat_amount,
        profit_margin=profit_margin,
        average_order_value=average_order_value,
    )


def profit_share(metrics: DerivedMetrics) -> Optional[float]:
    """Gross profit as a percentage of VAT-exclusive revenue, if any revenue."""
    if metrics.net_value_ex_vat > 0:
        return metrics.gross_profit / metrics.net_value_ex_vat * 100
    return None


def cost_breakdown(inputs: AggregateInput, metrics: DerivedMetrics) -> CostBreakdown:
    """Split net revenue into cost and profit shares for display.

    The share slices floor gross profit at zero since a loss has no share
    of revenue; the bar series keeps the signed value.
    """
    slices = (
        CostSlice("Product cost", metrics.product_cost),
        CostSlice("Marketing", inputs.marketing_cost),
        CostSlice("Fixed costs", metrics.total_fixed_costs),
        CostSlice("Gross profit", max(0.0, metrics.gross_profit)),
    )
    bars = (
        CostSlice("Net revenue (ex VAT)", metrics.net_value_ex_vat),
        CostSlice("Product cost", metrics.product_cost),
        CostSlice("Marketing", inputs.marketing_cost),
        CostSlice("Fixed costs", metrics.total_fixed_costs),
        CostSlice("Gross profit", metrics.gross_profit),
    )
    return CostBreakdown(slices=slices, bars=bars, profit_share=profit_share(metrics))
