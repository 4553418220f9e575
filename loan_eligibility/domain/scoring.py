"""Eligibility scoring engine - core business logic for loan eligibility decisions"""

import logging
import math
from datetime import date
from typing import List, Optional, Tuple
from loan_eligibility.domain.models import ApplicantProfile, EligibilityResult, StrategyResult
from loan_eligibility.domain.amortization import compute_installment
from loan_eligibility.domain.exceptions import InvalidInputError
from loan_eligibility.utils.date_utils import age_in_years, parse_date
from loan_eligibility.utils.rounding import format_number, format_ratio, round_half_up

logger = logging.getLogger(__name__)

DEFAULT_ANNUAL_RATE_PCT = 12.0
APPROVAL_THRESHOLD_PCT = 60

LIKELY_APPROVED = "likely_approved"
LIKELY_REJECTED = "likely_rejected"

# FOIR ceilings (% of monthly income) by occupation
FOIR_LIMITS = {
    "salaried": 50,
    "self-employed": 45,
    "business": 45,
    "retired": 40,
}
DEFAULT_FOIR_LIMIT = 50

# Loan-to-income caps (multiples of annual income)
SECURED_MAX_LTI = 6
UNSECURED_MAX_LTI = 3

STATUS_LABELS = {
    LIKELY_APPROVED: "Likely to be Approved",
    LIKELY_REJECTED: "May Need Review",
    "approved": "Approved",
    "rejected": "Rejected",
}


def total_monthly_obligations(profile: ApplicantProfile, annual_rate_pct: float) -> float:
    """
    Existing EMIs plus the EMI of the requested loan.

    A missing (or zero) expected EMI is derived from the loan amount and
    tenure at the default annual rate, paid monthly.
    """
    existing_emis = sum(loan.emi for loan in profile.existing_loans)
    proposed_emi = profile.expected_emi or compute_installment(
        profile.loan_amount,
        annual_rate_pct,
        profile.preferred_tenure_months / 12,
    ).installment_amount
    return existing_emis + proposed_emi


def score_debt_to_income(profile: ApplicantProfile, obligations: float) -> StrategyResult:
    """
    Debt-to-Income: (existing EMIs + proposed EMI) / monthly income.

    Accept below 40%, review 40-50% inclusive, reject above 50%.
    """
    dti = obligations / profile.monthly_income * 100

    if dti < 40:
        return StrategyResult(
            name="debt_to_income",
            score=25,
            max_score=25,
            passed=True,
            reason=f"Excellent DTI ratio of {format_ratio(dti)}%. Your debt obligations are well within acceptable limits.",
        )
    elif dti <= 50:
        return StrategyResult(
            name="debt_to_income",
            score=15,
            max_score=25,
            passed=True,
            reason=f"DTI ratio of {format_ratio(dti)}% is moderate. Consider reducing existing debts.",
            recommendation="Consider paying off some existing loans to improve your debt ratio.",
        )
    else:
        return StrategyResult(
            name="debt_to_income",
            score=5,
            max_score=25,
            passed=False,
            reason=f"High DTI ratio of {format_ratio(dti)}%. Total EMIs exceed 50% of your income.",
            recommendation="Reduce loan amount or clear existing debts before applying.",
        )


def score_foir(profile: ApplicantProfile, obligations: float) -> StrategyResult:
    """Fixed Obligation to Income Ratio against an occupation-specific ceiling"""
    foir = obligations / profile.monthly_income * 100
    max_foir = FOIR_LIMITS.get(profile.occupation, DEFAULT_FOIR_LIMIT)

    if foir <= max_foir:
        return StrategyResult(
            name="foir",
            score=20,
            max_score=20,
            passed=True,
            reason=(
                f"FOIR of {format_ratio(foir)}% is within the acceptable limit of {max_foir}% "
                f"for {profile.occupation} individuals."
            ),
        )

    return StrategyResult(
        name="foir",
        score=5,
        max_score=20,
        passed=False,
        reason=f"FOIR of {format_ratio(foir)}% exceeds the {max_foir}% limit for {profile.occupation} individuals.",
        recommendation="Consider a smaller loan amount or longer tenure to reduce monthly EMI.",
    )


def score_loan_to_income(profile: ApplicantProfile) -> StrategyResult:
    """
    Loan-to-Income: requested amount as a multiple of annual income.

    Caps: 6x for secured loans, 3x for unsecured. Anything up to 60% of the
    cap scores full marks.
    """
    annual_income = profile.monthly_income * 12
    lti = profile.loan_amount / annual_income
    secured = profile.loan_type == "secured"
    max_ratio = SECURED_MAX_LTI if secured else UNSECURED_MAX_LTI
    loan_type_label = "secured" if secured else "unsecured"

    if lti <= max_ratio * 0.6:
        return StrategyResult(
            name="loan_to_income",
            score=20,
            max_score=20,
            passed=True,
            reason=(
                f"Loan amount is {format_ratio(lti)}x your annual income. "
                f"Well within the {max_ratio}x limit for {loan_type_label} loans."
            ),
        )
    elif lti <= max_ratio:
        return StrategyResult(
            name="loan_to_income",
            score=12,
            max_score=20,
            passed=True,
            reason=(
                f"Loan amount is {format_ratio(lti)}x your annual income. "
                f"Within the {max_ratio}x limit but on the higher side."
            ),
            recommendation="Consider reducing loan amount for better approval chances.",
        )
    else:
        return StrategyResult(
            name="loan_to_income",
            score=3,
            max_score=20,
            passed=False,
            reason=(
                f"Loan amount is {format_ratio(lti)}x your annual income. "
                f"Exceeds the {max_ratio}x limit for {loan_type_label} loans."
            ),
            recommendation=(
                f"For {loan_type_label} loans, consider reducing the loan amount "
                f"to within {max_ratio}x your annual income."
            ),
        )


def score_credit_capacity(profile: ApplicantProfile, age: int) -> StrategyResult:
    """
    Credit capacity from work experience, age and occupation stability.

    Sub-scores:
    - Experience: 7 / 4 / 1 (minimum is 1 year salaried, 2 years otherwise)
    - Age: 5 for 25-55, 3 for 21-24 or 56-65, 1 otherwise
    - Occupation: 3 salaried, 2 business/self-employed, 1 otherwise
    """
    score = 0
    reasons: List[str] = []
    recommendations: List[str] = []
    experience = profile.years_of_experience

    min_experience = 1 if profile.occupation == "salaried" else 2
    if experience >= min_experience * 3:
        score += 7
        reasons.append(f"Strong work experience of {format_number(experience)} years.")
    elif experience >= min_experience:
        score += 4
        reasons.append(f"Adequate work experience of {format_number(experience)} years.")
    else:
        score += 1
        reasons.append(f"Limited work experience of {format_number(experience)} years.")
        recommendations.append(
            f"Minimum {min_experience} years of experience recommended for {profile.occupation} individuals."
        )

    if 25 <= age <= 55:
        score += 5
        reasons.append(f"Age {age} is within the optimal range.")
    elif 21 <= age < 25:
        score += 3
        reasons.append(f"Age {age} is acceptable but on the younger side.")
    elif 55 < age <= 65:
        score += 3
        reasons.append(f"Age {age} may limit tenure options.")
        recommendations.append("Consider shorter loan tenure based on retirement age.")
    else:
        score += 1
        reasons.append(f"Age {age} is outside the preferred range.")

    if profile.occupation == "salaried":
        score += 3
        reasons.append("Salaried employment provides stable income.")
    elif profile.occupation in ("business", "self-employed"):
        score += 2
        reasons.append("Self-employment/Business requires additional income verification.")
    else:
        score += 1
        reasons.append("Retired status may require pension proof.")

    return StrategyResult(
        name="credit_capacity",
        score=score,
        max_score=15,
        passed=score >= 8,
        reason=" ".join(reasons),
        recommendation=" ".join(recommendations) if recommendations else None,
    )


def score_debt_load(profile: ApplicantProfile) -> StrategyResult:
    """Existing debt load: number of open loans and outstanding balance vs annual income"""
    number_of_loans = len(profile.existing_loans)
    total_outstanding = sum(loan.outstanding_amount for loan in profile.existing_loans)
    outstanding_to_income = total_outstanding / (profile.monthly_income * 12)

    score = 0
    reasons: List[str] = []
    recommendations: List[str] = []

    if number_of_loans == 0:
        score += 10
        reasons.append("No existing loans. Clean credit profile.")
    elif number_of_loans <= 2:
        score += 7
        reasons.append(f"{number_of_loans} existing loan(s) is manageable.")
    elif number_of_loans == 3:
        score += 4
        reasons.append(f"{number_of_loans} existing loans. Multiple debt obligations noted.")
        recommendations.append("Consider consolidating existing loans.")
    else:
        score += 1
        reasons.append(f"{number_of_loans} existing loans is a red flag. Too many debt obligations.")
        recommendations.append("Clear some existing loans before applying for new credit.")

    if outstanding_to_income <= 0.5:
        score += 10
        reasons.append("Outstanding debt is well within manageable limits.")
    elif outstanding_to_income <= 1:
        score += 6
        reasons.append("Outstanding debt is moderate relative to income.")
    elif outstanding_to_income <= 2:
        score += 3
        reasons.append("Outstanding debt is on the higher side.")
        recommendations.append("Focus on reducing outstanding debt.")
    else:
        reasons.append("Outstanding debt significantly exceeds annual income.")
        recommendations.append("High existing debt load may affect loan approval.")

    return StrategyResult(
        name="debt_load",
        score=score,
        max_score=20,
        passed=score >= 10,
        reason=" ".join(reasons),
        recommendation=" ".join(recommendations) if recommendations else None,
    )


def assess_collateral(profile: ApplicantProfile) -> Tuple[Optional[str], Optional[str]]:
    """
    Informational collateral coverage check for secured loans.

    Returns: (reason, recommendation); both None when not applicable
    """
    if profile.loan_type != "secured" or profile.collateral is None:
        return None, None

    value = profile.collateral.estimated_value
    if value >= profile.loan_amount * 1.5:
        return "Strong collateral coverage improves approval chances.", None
    if value >= profile.loan_amount:
        return "Adequate collateral coverage for the loan amount.", None
    return (
        "Collateral value is less than loan amount.",
        "Consider providing additional collateral or reducing loan amount.",
    )


def determine_status(percentage: int) -> str:
    """Verdict from the aggregate percentage; 60 and above is likely approved"""
    return LIKELY_APPROVED if percentage >= APPROVAL_THRESHOLD_PCT else LIKELY_REJECTED


def status_label(status: str) -> str:
    """Human-readable label for an eligibility or application status"""
    return STATUS_LABELS.get(status, "Pending Review")


def _is_positive_amount(value: float) -> bool:
    # Excludes NaN and infinity
    return math.isfinite(value) and value > 0


def _validate(profile: ApplicantProfile) -> date:
    """Reject profiles no strategy can score; returns the parsed date of birth"""
    if not _is_positive_amount(profile.monthly_income):
        raise InvalidInputError(f"Monthly income must be positive, got {profile.monthly_income}")
    if not _is_positive_amount(profile.loan_amount):
        raise InvalidInputError(f"Loan amount must be positive, got {profile.loan_amount}")
    try:
        return parse_date(profile.date_of_birth)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Invalid date of birth: {profile.date_of_birth!r}") from e


def evaluate(
    profile: ApplicantProfile,
    as_of: date | None = None,
    default_annual_rate_pct: float = DEFAULT_ANNUAL_RATE_PCT,
) -> EligibilityResult:
    """
    Main entry point: run all five strategies and aggregate into a verdict.

    Strategy weights (max score):
    - Debt-to-Income: 25
    - FOIR: 20
    - Loan-to-Income: 20
    - Credit capacity: 15
    - Existing debt load: 20

    percentage = round(100 * total / max_total); 60 or more is likely approved.
    Collateral coverage is appended afterwards and never changes the verdict.

    Raises:
        InvalidInputError: On non-positive income or loan amount, or a malformed date of birth
    """
    date_of_birth = _validate(profile)
    if as_of is None:
        as_of = date.today()

    obligations = total_monthly_obligations(profile, default_annual_rate_pct)
    age = age_in_years(date_of_birth, as_of)

    # Fixed order: reasons and recommendations follow it
    results = [
        score_debt_to_income(profile, obligations),
        score_foir(profile, obligations),
        score_loan_to_income(profile),
        score_credit_capacity(profile, age),
        score_debt_load(profile),
    ]

    for result in results:
        logger.debug(
            "Strategy scored",
            extra={"strategy": result.name, "score": result.score, "passed": result.passed},
        )

    total_score = sum(r.score for r in results)
    max_score = sum(r.max_score for r in results)
    percentage = round_half_up(total_score / max_score * 100)
    status = determine_status(percentage)

    reasons = [r.reason for r in results]
    recommendations = [r.recommendation for r in results if r.recommendation]

    collateral_reason, collateral_recommendation = assess_collateral(profile)
    if collateral_reason:
        reasons.append(collateral_reason)
    if collateral_recommendation:
        recommendations.append(collateral_recommendation)

    return EligibilityResult(
        score=percentage,
        status=status,
        reasons=tuple(reasons),
        recommendations=tuple(recommendations),
        strategies=tuple(results),
    )
