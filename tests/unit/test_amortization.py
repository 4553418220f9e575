"""Unit tests for EMI calculation"""

import pytest
from loan_eligibility.domain.amortization import (
    compute_installment,
    frequency_label,
    payment_breakdown,
    payments_per_year,
)


def test_compute_installment_standard_formula():
    """1,000,000 at 12% over 5 years, monthly"""
    result = compute_installment(1_000_000, 12, 5)

    assert result.installment_amount == 22244.45
    assert result.payments_per_year == 12
    assert result.total_payments == 60
    assert result.total_interest > 0
    # Totals come from the unrounded installment: within 60 half-cents
    assert result.total_payment == pytest.approx(result.installment_amount * 60, abs=0.3)
    assert result.total_interest == pytest.approx(result.total_payment - 1_000_000, abs=0.01)


def test_compute_installment_quarterly():
    """100,000 at 8% over 2 years, quarterly: 8 payments at 2% per period"""
    result = compute_installment(100_000, 8, 2, "quarterly")

    assert result.payments_per_year == 4
    assert result.total_payments == 8
    assert result.installment_amount == pytest.approx(13650.98, abs=0.02)


def test_compute_installment_zero_rate():
    """Zero interest splits principal evenly"""
    result = compute_installment(120_000, 0, 1)

    assert result.installment_amount == 10000.0
    assert result.total_payment == 120000.0
    assert result.total_interest == 0.0
    assert result.total_payments == 12


def test_compute_installment_zero_rate_rounds_to_cent():
    result = compute_installment(100_000, 0, 0.25)

    assert result.total_payments == 3
    assert result.installment_amount == 33333.33


@pytest.mark.parametrize(
    "principal,rate,tenure",
    [
        (0, 12, 5),
        (-1000, 12, 5),
        (100_000, -1, 5),
        (100_000, 12, 0),
        (100_000, 12, -2),
    ],
)
def test_compute_installment_degenerate_inputs(principal, rate, tenure):
    """Incomplete inputs produce a zeroed result instead of raising"""
    result = compute_installment(principal, rate, tenure)

    assert result.installment_amount == 0
    assert result.total_payment == 0
    assert result.total_interest == 0
    assert result.total_payments == 0
    assert result.payments_per_year == 12


def test_compute_installment_degenerate_keeps_frequency():
    result = compute_installment(0, 10, 3, "half-yearly")

    assert result.payments_per_year == 2
    assert result.total_payments == 0


def test_compute_installment_tenure_below_one_period():
    """A tenure that rounds to zero payments is degenerate"""
    result = compute_installment(50_000, 10, 0.25, "yearly")

    assert result.total_payments == 0
    assert result.installment_amount == 0


def test_compute_installment_tenure_in_months():
    """Tenure supplied as months / 12 maps back to whole monthly periods"""
    result = compute_installment(70_000, 12, 7 / 12)

    assert result.total_payments == 7


def test_compute_installment_monotonic_in_rate():
    """Raising the rate never lowers the installment"""
    installments = [
        compute_installment(500_000, rate, 10).installment_amount
        for rate in (0, 0.5, 1, 4, 8, 12, 18, 24, 36)
    ]

    assert installments == sorted(installments)


def test_compute_installment_non_negative_interest():
    for principal, rate, tenure, frequency in [
        (10_000, 0.01, 1, "monthly"),
        (250_000, 9.5, 15, "quarterly"),
        (1_000, 30, 0.5, "half-yearly"),
        (5_000_000, 7, 30, "yearly"),
    ]:
        result = compute_installment(principal, rate, tenure, frequency)
        assert result.total_interest >= 0


def test_payments_per_year_unknown_frequency_defaults_to_monthly():
    assert payments_per_year("weekly") == 12
    assert compute_installment(120_000, 0, 1, "fortnightly").total_payments == 12


def test_frequency_label():
    assert frequency_label("monthly") == "Monthly"
    assert frequency_label("half-yearly") == "Half-Yearly"
    assert frequency_label("yearly") == "Yearly"
    assert frequency_label("daily") == "Monthly"


def test_payment_breakdown():
    result = compute_installment(120_000, 0, 1)
    assert payment_breakdown(120_000, result) == (100, 0)

    result = compute_installment(1_000_000, 12, 5)
    principal_pct, interest_pct = payment_breakdown(1_000_000, result)
    assert principal_pct == 75  # 1,000,000 / 1,334,667
    assert principal_pct + interest_pct == 100


def test_payment_breakdown_zero_result():
    assert payment_breakdown(0, compute_installment(0, 12, 5)) == (0, 0)
