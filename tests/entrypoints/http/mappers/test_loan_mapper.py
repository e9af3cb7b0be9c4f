"""
Test suite for LoanMapper.

- Converts request DTOs to domain requests (str → Decimal)
- Converts domain summaries to response DTOs (Decimal → str, rounded to cents)
- Collects every malformed decimal into one ValidationError
- No business logic: term_months is not validated here
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from auto_loan.domain.errors import ValidationError
from auto_loan.domain.loan import AmortizationRow, LoanInputs, LoanSummary
from auto_loan.entrypoints.http.dtos.loan import LoanSummaryRequestDTO
from auto_loan.entrypoints.http.mappers.loan_mapper import (
    LoanMapper,
    format_money,
    parse_decimal,
)


# ==============================================================================
# format_money / parse_decimal
# ==============================================================================


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Decimal("1106.889111"), "1106.89"),
        (Decimal("0.005"), "0.01"),
        (Decimal("-0.005"), "-0.01"),
        (Decimal("1000"), "1000.00"),
        (Decimal("-1E-23"), "0.00"),
        (Decimal("-2000"), "-2000.00"),
    ],
)
def test_format_money(value: Decimal, expected: str) -> None:
    assert format_money(value) == expected


def test_parse_decimal_valid() -> None:
    errors: list[dict[str, str]] = []

    assert parse_decimal("principal", "25000.50", errors) == Decimal("25000.50")
    assert errors == []


def test_parse_decimal_invalid_records_error() -> None:
    errors: list[dict[str, str]] = []

    result = parse_decimal("principal", "abc", errors)

    assert result == Decimal("0")
    assert errors == [
        {"field": "principal", "message": "Must be a valid decimal: abc", "code": "INVALID_DECIMAL"}
    ]


# ==============================================================================
# to_domain_request()
# ==============================================================================


def test_to_domain_request_converts_all_fields() -> None:
    dto = LoanSummaryRequestDTO(
        vehicle_id="corolla-2021",
        vehicle_price="28000.00",
        down_payment="3000.00",
        trade_in_value="5000.00",
        amount_owed_on_trade_in="2000.00",
        cash_incentives="1000.00",
        sales_tax_percent="7.25",
        title_and_fees="850.00",
        include_fees_in_principal=True,
        annual_interest_rate_percent="5.9",
        term_months=60,
    )

    request = LoanMapper.to_domain_request(dto)

    assert request.vehicle_id == "corolla-2021"
    assert request.inputs == LoanInputs(
        vehicle_price=Decimal("28000.00"),
        down_payment=Decimal("3000.00"),
        trade_in_value=Decimal("5000.00"),
        amount_owed_on_trade_in=Decimal("2000.00"),
        cash_incentives=Decimal("1000.00"),
        sales_tax_percent=Decimal("7.25"),
        title_and_fees=Decimal("850.00"),
        include_fees_in_principal=True,
        annual_interest_rate_percent=Decimal("5.9"),
        term_months=60,
    )


def test_to_domain_request_defaults() -> None:
    dto = LoanSummaryRequestDTO(
        vehicle_price="15000", annual_interest_rate_percent="4", term_months=36
    )

    request = LoanMapper.to_domain_request(dto)

    assert request.vehicle_id is None
    assert request.inputs.down_payment == Decimal("0")
    assert request.inputs.include_fees_in_principal is False


def test_to_domain_request_does_not_validate_term() -> None:
    dto = LoanSummaryRequestDTO(
        vehicle_price="15000", annual_interest_rate_percent="4", term_months=0
    )

    assert LoanMapper.to_domain_request(dto).inputs.term_months == 0


def test_to_domain_request_collects_all_decimal_errors() -> None:
    """Bypass pydantic pattern checks to exercise the mapper's own guard."""
    dto = LoanSummaryRequestDTO.model_construct(
        vehicle_id=None,
        vehicle_price="abc",
        down_payment="0",
        trade_in_value="0",
        amount_owed_on_trade_in="0",
        cash_incentives="0",
        sales_tax_percent="x",
        title_and_fees="0",
        include_fees_in_principal=False,
        annual_interest_rate_percent="5",
        term_months=12,
    )

    with pytest.raises(ValidationError) as exc_info:
        LoanMapper.to_domain_request(dto)

    assert exc_info.value.errors is not None
    assert [e["field"] for e in exc_info.value.errors] == ["vehicle_price", "sales_tax_percent"]


# ==============================================================================
# to_response()
# ==============================================================================


def test_to_response_rounds_money_and_keeps_order() -> None:
    inputs = LoanInputs(
        vehicle_price=Decimal("25000"),
        annual_interest_rate_percent=Decimal("5.9"),
        term_months=1,
    )
    summary = LoanSummary(
        vehicle_label="2021 Toyota Corolla",
        inputs=inputs,
        loan_amount=Decimal("25000"),
        monthly_payment=Decimal("25122.916666666666666666666667"),
        total_interest=Decimal("122.916666666666666666666667"),
        total_cost=Decimal("25122.916666666666666666666667"),
        schedule=(
            AmortizationRow(
                month=1,
                payment=Decimal("25122.916666666666666666666667"),
                principal_portion=Decimal("25000.000000000000000000000000"),
                interest_portion=Decimal("122.916666666666666666666667"),
                remaining_balance=Decimal("0"),
            ),
        ),
    )

    dto = LoanMapper.to_response(summary)

    assert dto.vehicle_label == "2021 Toyota Corolla"
    assert dto.vehicle_price == "25000.00"
    assert dto.loan_amount == "25000.00"
    assert dto.annual_interest_rate_percent == "5.9"
    assert dto.monthly_payment == "25122.92"
    assert dto.total_interest == "122.92"
    assert dto.schedule[0].interest_portion == "122.92"
    assert dto.schedule[0].remaining_balance == "0.00"


def test_to_payment_response() -> None:
    dto = LoanMapper.to_payment_response(
        principal=Decimal("10000"),
        annual_interest_rate_percent=Decimal("0"),
        term_months=10,
        monthly_payment=Decimal("1000"),
        total_interest=Decimal("0"),
    )

    assert dto.model_dump() == {
        "principal": "10000.00",
        "annual_interest_rate_percent": "0",
        "term_months": 10,
        "monthly_payment": "1000.00",
        "total_interest": "0.00",
    }
