"""Pytest fixtures for testing"""

import dataclasses
from datetime import date
from typing import Callable

import pytest
from loan_eligibility.domain.models import ApplicantProfile, ExistingLoan


# Fixed evaluation date so age-based scoring is reproducible
AS_OF = date(2025, 6, 1)


@pytest.fixture
def as_of() -> date:
    return AS_OF


@pytest.fixture
def salaried_profile() -> ApplicantProfile:
    """Healthy salaried applicant: 30 years old, 5 years experience, no existing debt"""
    return ApplicantProfile(
        loan_type="unsecured",
        loan_amount=150_000,
        preferred_tenure_months=12,
        monthly_income=50_000,
        occupation="salaried",
        years_of_experience=5,
        date_of_birth=date(1995, 1, 15),
    )


@pytest.fixture
def make_profile(salaried_profile: ApplicantProfile) -> Callable[..., ApplicantProfile]:
    """Build a profile from the salaried baseline with selected fields overridden"""

    def _make(**overrides) -> ApplicantProfile:
        return dataclasses.replace(salaried_profile, **overrides)

    return _make


@pytest.fixture
def existing_loans() -> Callable[..., tuple]:
    """Build N identical existing loans"""

    def _loans(count: int, outstanding_amount: float = 0, emi: float = 0) -> tuple:
        return tuple(
            ExistingLoan(loan_type="personal", outstanding_amount=outstanding_amount, emi=emi)
            for _ in range(count)
        )

    return _loans


@pytest.fixture
def application_payload() -> dict:
    """Application record as submitted by the multi-step form (camelCase)"""
    return {
        "phoneNumber": "9876543210",
        "fullName": "Test Applicant",
        "loanType": "unsecured",
        "loanAmount": 150000,
        "preferredTenure": 12,
        "monthlyIncome": 50000,
        "occupation": "salaried",
        "employerName": "Acme Corp",
        "yearsOfExperience": 5,
        "dateOfBirth": "1995-01-15",
        "existingLoans": [],
        "expectedEMI": 0,
    }
