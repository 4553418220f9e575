"""Entry points for calling applications - eligibility checks and EMI calculations"""

import logging
import time
import uuid
from datetime import date
from typing import Any, Mapping

from pydantic import ValidationError

from loan_eligibility.config import settings
from loan_eligibility.domain.amortization import (
    compute_installment,
    frequency_label,
    normalize_frequency,
    payment_breakdown,
)
from loan_eligibility.domain.exceptions import InvalidInputError
from loan_eligibility.domain.scoring import evaluate, status_label
from loan_eligibility.infrastructure.observability.logging import log_evaluation
from loan_eligibility.infrastructure.observability.metrics import (
    installment_counter,
    invalid_input_counter,
    record_evaluation,
)
from loan_eligibility.schemas import (
    EligibilityRequest,
    EligibilityResponse,
    InstallmentRequest,
    InstallmentResponse,
)


def check_eligibility(
    request: EligibilityRequest | Mapping[str, Any],
    as_of: date | None = None,
    request_id: str | None = None,
) -> EligibilityResponse:
    """
    Score an application record.

    Flow:
    1. Validate the record (raw mappings go through EligibilityRequest) and build the profile
    2. Evaluate all strategies (default rate from settings when no EMI given)
    3. Record metrics and a structured log line
    4. Return the serializable response

    Raises:
        ValidationError: Record fails schema validation (counted and logged)
        InvalidInputError: Profile rejected by the scorer, e.g. a request built
            with model_construct (counted and logged)
    """
    start_time = time.time()
    request_id = request_id or str(uuid.uuid4())

    try:
        if not isinstance(request, EligibilityRequest):
            request = EligibilityRequest.model_validate(request)
        result = evaluate(
            request.to_profile(),
            as_of=as_of,
            default_annual_rate_pct=settings.default_annual_rate_pct,
        )
    except (ValidationError, InvalidInputError) as e:
        invalid_input_counter.inc()
        logging.warning(f"Invalid applicant data: {e}", extra={"request_id": request_id})
        raise

    duration = time.time() - start_time
    record_evaluation(result.status, result.score, duration)
    log_evaluation(request_id, result.status, result.score, len(result.recommendations), duration * 1000)

    return EligibilityResponse.from_result(result, status_label(result.status))


def calculate_installment(request: InstallmentRequest) -> InstallmentResponse:
    """Run the EMI calculator for a validated request, with display breakdown"""
    result = compute_installment(
        request.principal,
        request.annual_rate,
        request.tenure_years,
        request.frequency,
    )
    installment_counter.labels(frequency=normalize_frequency(request.frequency)).inc()

    return InstallmentResponse(
        installment_amount=result.installment_amount,
        total_payment=result.total_payment,
        total_interest=result.total_interest,
        payments_per_year=result.payments_per_year,
        total_payments=result.total_payments,
        frequency_label=frequency_label(request.frequency),
        breakdown_pct=payment_breakdown(request.principal, result),
    )
