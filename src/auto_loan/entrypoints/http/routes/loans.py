from fastapi import APIRouter, Depends

from auto_loan.domain.amortization import calculate_monthly_payment, calculate_total_interest
from auto_loan.domain.errors import FieldError, ValidationError
from auto_loan.entrypoints.http.dependencies import get_calculate_loan_summary_use_case
from auto_loan.entrypoints.http.dtos.loan import (
    LoanSummaryRequestDTO,
    LoanSummaryResponseDTO,
    PaymentRequestDTO,
    PaymentResponseDTO,
)
from auto_loan.entrypoints.http.mappers.loan_mapper import LoanMapper, parse_decimal
from auto_loan.use_cases.calculate_loan_summary import CalculateLoanSummary


router = APIRouter(tags=["Loans"])

INVALID_TERM_EXAMPLE = {
    "summary": "Non-positive term",
    "value": {
        "detail": "Validation failed",
        "code": "VALIDATION_ERROR",
        "errors": [
            {
                "field": "term_months",
                "message": "term_months must be a positive integer, got 0",
                "code": "INVALID_TERM",
            }
        ],
    },
}


@router.post(
    "/loans/summary",
    response_model=LoanSummaryResponseDTO,
    summary="Calculate loan summary and amortization schedule",
    description="""
    Price an auto loan and return its full month-by-month schedule.

    ## Monetary Values
    - All monetary values are strings (e.g., "28000.00")
    - Adjustments (down payment, trade-in, amount owed, incentives) may be negative
    - Response money is rounded to cents; nothing is rounded during calculation

    ## Calculation
    - Loan amount = price - down - trade-in + owed - incentives + tax (+ fees when financed)
    - Sales tax applies to price - incentives
    - Monthly payment uses the standard amortization formula (loan amount / term at 0%)
    - Total interest = monthly_payment × term_months - loan amount
    - Total cost = loan amount + total interest (+ fees when paid up front)

    ## Vehicle Label
    - Pass a catalog vehicle_id to label the summary; unknown ids return 404
    """,
    responses={
        404: {"description": "Vehicle not found in catalog"},
        422: {
            "description": "Validation error",
            "content": {"application/json": {"examples": {"invalid_term": INVALID_TERM_EXAMPLE}}},
        },
    },
)
def calculate_loan_summary(
    payload: LoanSummaryRequestDTO,
    use_case: CalculateLoanSummary = Depends(get_calculate_loan_summary_use_case),
) -> LoanSummaryResponseDTO:
    """
    Calculate loan summary endpoint.

    Follows the parse → execute → map → return pattern.
    """
    request = LoanMapper.to_domain_request(payload)

    summary = use_case.execute(request)

    return LoanMapper.to_response(summary)


@router.post(
    "/loans/payment",
    response_model=PaymentResponseDTO,
    summary="Quote a monthly payment",
    description="""
    Monthly payment and total interest for a known principal, without a schedule.

    ## Example
    ```
    POST /v1/loans/payment
    {
        "principal": "25000.00",
        "annual_interest_rate_percent": "5.9",
        "term_months": 24
    }
    ```
    """,
    responses={
        422: {
            "description": "Validation error",
            "content": {"application/json": {"examples": {"invalid_term": INVALID_TERM_EXAMPLE}}},
        },
    },
)
def quote_monthly_payment(payload: PaymentRequestDTO) -> PaymentResponseDTO:
    errors: list[FieldError] = []
    principal = parse_decimal("principal", payload.principal, errors)
    rate = parse_decimal(
        "annual_interest_rate_percent", payload.annual_interest_rate_percent, errors
    )
    if errors:
        raise ValidationError(errors=errors)

    monthly_payment = calculate_monthly_payment(principal, rate, payload.term_months)
    total_interest = calculate_total_interest(principal, monthly_payment, payload.term_months)

    return LoanMapper.to_payment_response(
        principal=principal,
        annual_interest_rate_percent=rate,
        term_months=payload.term_months,
        monthly_payment=monthly_payment,
        total_interest=total_interest,
    )
