"""Pydantic schemas for caller-supplied application records and serializable results"""

from datetime import date
from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from loan_eligibility.domain.models import ApplicantProfile, Collateral, EligibilityResult, ExistingLoan


class _CamelModel(BaseModel):
    """Accepts both camelCase (form payload) and snake_case field names"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        allow_inf_nan=False,
    )


class ExistingLoanSchema(_CamelModel):
    """Existing loan entry in an application"""

    loan_type: str = ""
    outstanding_amount: float = Field(0.0, ge=0)
    emi: float = Field(0.0, ge=0)
    tenure: str = "monthly"  # repayment frequency of the existing loan

    def to_domain(self) -> ExistingLoan:
        return ExistingLoan(
            loan_type=self.loan_type,
            outstanding_amount=self.outstanding_amount,
            emi=self.emi,
            repayment_frequency=self.tenure,
        )


class CollateralSchema(_CamelModel):
    """Collateral details for secured loans"""

    estimated_value: float = Field(..., ge=0)
    property_type: str = "other"
    ownership_status: str = "self-owned"
    property_address: str = ""

    def to_domain(self) -> Collateral:
        return Collateral(
            estimated_value=self.estimated_value,
            property_type=self.property_type,
            ownership_status=self.ownership_status,
            property_address=self.property_address,
        )


class EligibilityRequest(_CamelModel):
    """Application record submitted for an eligibility check"""

    loan_type: str = "unsecured"
    loan_amount: float = Field(..., gt=0, description="Requested principal")
    preferred_tenure: int = Field(..., gt=0, description="Tenure in months")
    monthly_income: float = Field(..., gt=0)
    occupation: str = ""
    years_of_experience: float = Field(0.0, ge=0)
    date_of_birth: date
    existing_loans: List[ExistingLoanSchema] = Field(default_factory=list)
    collateral: Optional[CollateralSchema] = None
    expected_emi: Optional[float] = Field(None, ge=0, alias="expectedEMI")

    def to_profile(self) -> ApplicantProfile:
        """Build the immutable domain profile from the validated record"""
        return ApplicantProfile(
            loan_type=self.loan_type,
            loan_amount=self.loan_amount,
            preferred_tenure_months=self.preferred_tenure,
            monthly_income=self.monthly_income,
            occupation=self.occupation,
            years_of_experience=self.years_of_experience,
            date_of_birth=self.date_of_birth,
            existing_loans=tuple(loan.to_domain() for loan in self.existing_loans),
            collateral=self.collateral.to_domain() if self.collateral else None,
            expected_emi=self.expected_emi,
        )


class EligibilityResponse(BaseModel):
    """Serializable eligibility outcome"""

    score: int
    status: str
    status_label: str
    reasons: List[str]
    recommendations: List[str]

    @classmethod
    def from_result(cls, result: EligibilityResult, label: str) -> "EligibilityResponse":
        return cls(
            score=result.score,
            status=result.status,
            status_label=label,
            reasons=list(result.reasons),
            recommendations=list(result.recommendations),
        )


class InstallmentRequest(_CamelModel):
    """EMI calculator input"""

    principal: float = Field(..., gt=0)
    annual_rate: float = Field(..., ge=0, description="Annual interest rate in percent")
    tenure_years: float = Field(..., gt=0)
    frequency: str = "monthly"


class InstallmentResponse(BaseModel):
    """EMI calculator output"""

    installment_amount: float
    total_payment: float
    total_interest: float
    payments_per_year: int
    total_payments: int
    frequency_label: str
    breakdown_pct: Tuple[int, int]  # (principal, interest)
