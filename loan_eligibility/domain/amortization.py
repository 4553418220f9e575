"""EMI (equated installment) calculation for amortizing loans"""

from typing import Tuple
from loan_eligibility.domain.models import AmortizationResult
from loan_eligibility.utils.rounding import round_currency, round_half_up

PAYMENTS_PER_YEAR = {
    "monthly": 12,
    "quarterly": 4,
    "half-yearly": 2,
    "yearly": 1,
}

FREQUENCY_LABELS = {
    "monthly": "Monthly",
    "quarterly": "Quarterly",
    "half-yearly": "Half-Yearly",
    "yearly": "Yearly",
}

DEFAULT_FREQUENCY = "monthly"


def normalize_frequency(frequency: str) -> str:
    """Known frequency name, or monthly for anything unrecognized"""
    return frequency if frequency in PAYMENTS_PER_YEAR else DEFAULT_FREQUENCY


def payments_per_year(frequency: str) -> int:
    """Number of installments per year"""
    return PAYMENTS_PER_YEAR[normalize_frequency(frequency)]


def frequency_label(frequency: str) -> str:
    """Display label for a payment frequency"""
    return FREQUENCY_LABELS[normalize_frequency(frequency)]


def _zero_result(periods_per_year: int) -> AmortizationResult:
    return AmortizationResult(
        installment_amount=0.0,
        total_payment=0.0,
        total_interest=0.0,
        payments_per_year=periods_per_year,
        total_payments=0,
    )


def compute_installment(
    principal: float,
    annual_rate_pct: float,
    tenure_years: float,
    frequency: str = DEFAULT_FREQUENCY,
) -> AmortizationResult:
    """
    Calculate the periodic installment that fully amortizes a loan.

        EMI = P * R * (1+R)^N / ((1+R)^N - 1)

    where P is the principal, R the rate per period and N the number of
    payments. Currency outputs are rounded to the cent, halves away from zero.

    Incomplete inputs (non-positive principal or tenure, negative rate) are
    not an error: they yield a zeroed result so partially filled forms can
    still be scored.

    Example:
        1,000,000 at 12% over 5 years, monthly → 22,244.45 per month
    """
    periods_per_year = payments_per_year(frequency)

    if principal <= 0 or tenure_years <= 0 or annual_rate_pct < 0:
        return _zero_result(periods_per_year)

    rate_per_period = annual_rate_pct / 100 / periods_per_year
    total_payments = round_half_up(tenure_years * periods_per_year)

    # Tenure shorter than half a period
    if total_payments == 0:
        return _zero_result(periods_per_year)

    if rate_per_period == 0:
        return AmortizationResult(
            installment_amount=round_currency(principal / total_payments),
            total_payment=round_currency(principal),
            total_interest=0.0,
            payments_per_year=periods_per_year,
            total_payments=total_payments,
        )

    rate_factor = (1 + rate_per_period) ** total_payments
    installment = principal * rate_per_period * rate_factor / (rate_factor - 1)

    total_payment = installment * total_payments
    total_interest = total_payment - principal

    return AmortizationResult(
        installment_amount=round_currency(installment),
        total_payment=round_currency(total_payment),
        total_interest=round_currency(total_interest),
        payments_per_year=periods_per_year,
        total_payments=total_payments,
    )


def payment_breakdown(principal: float, result: AmortizationResult) -> Tuple[int, int]:
    """
    Split total payment into principal and interest shares.

    Returns: (principal_pct, interest_pct), both whole percentages summing to 100
    """
    if result.total_payment <= 0:
        return 0, 0

    principal_pct = round_half_up(principal / result.total_payment * 100)
    return principal_pct, 100 - principal_pct
