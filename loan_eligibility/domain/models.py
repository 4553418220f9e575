"""Domain models - pure Python dataclasses representing eligibility inputs and results"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class ExistingLoan:
    """Loan the applicant is already repaying"""

    loan_type: str
    outstanding_amount: float
    emi: float
    repayment_frequency: str = "monthly"


@dataclass(frozen=True)
class Collateral:
    """Asset pledged against a secured loan"""

    estimated_value: float
    property_type: str = "other"  # residential | commercial | land | vehicle | gold | other
    ownership_status: str = "self-owned"  # self-owned | co-owned | parental
    property_address: str = ""


@dataclass(frozen=True)
class ApplicantProfile:
    """Applicant financial profile supplied by the caller for one evaluation"""

    loan_type: str  # "secured" or "unsecured"
    loan_amount: float
    preferred_tenure_months: int
    monthly_income: float
    occupation: str  # salaried | self-employed | business | retired
    years_of_experience: float
    date_of_birth: Union[date, str]
    existing_loans: Tuple[ExistingLoan, ...] = ()
    collateral: Optional[Collateral] = None
    expected_emi: Optional[float] = None


@dataclass(frozen=True)
class AmortizationResult:
    """Installment and payment totals for one amortization request"""

    installment_amount: float
    total_payment: float
    total_interest: float
    payments_per_year: int
    total_payments: int


@dataclass(frozen=True)
class StrategyResult:
    """Outcome of a single scoring strategy"""

    name: str
    score: int
    max_score: int
    passed: bool
    reason: str
    recommendation: Optional[str] = None


@dataclass(frozen=True)
class EligibilityResult:
    """Output of an eligibility evaluation"""

    score: int
    status: str  # "likely_approved" or "likely_rejected"
    reasons: Tuple[str, ...]
    recommendations: Tuple[str, ...]
    strategies: Tuple[StrategyResult, ...] = field(default=())
