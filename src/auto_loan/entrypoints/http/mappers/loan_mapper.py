from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from auto_loan.domain.errors import FieldError, ValidationError, field_error
from auto_loan.domain.loan import AmortizationRow, LoanInputs, LoanSummary
from auto_loan.entrypoints.http.dtos.loan import (
    AmortizationRowDTO,
    LoanSummaryRequestDTO,
    LoanSummaryResponseDTO,
    PaymentResponseDTO,
)
from auto_loan.use_cases.calculate_loan_summary import CalculateLoanSummaryRequest

CENTS = Decimal("0.01")


def format_money(value: Decimal) -> str:
    """Round to cents (ROUND_HALF_UP) for display; never renders '-0.00'."""
    rounded = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        rounded = rounded.copy_abs()
    return str(rounded)


def parse_decimal(field: str, value: str, errors: list[FieldError]) -> Decimal:
    """
    Parse a decimal string, recording a field error instead of raising.

    Returns Decimal("0") as a placeholder on failure so that every field
    gets checked before a single ValidationError is raised.
    """
    try:
        return Decimal(value)
    except (InvalidOperation, ValueError):
        errors.append(field_error(field, f"Must be a valid decimal: {value}", "INVALID_DECIMAL"))
        return Decimal("0")


class LoanMapper:
    """Maps between REST DTOs and domain models for loans."""

    @staticmethod
    def to_domain_request(dto: LoanSummaryRequestDTO) -> CalculateLoanSummaryRequest:
        """
        Converts request DTO to the use case request.

        term_months is passed through untouched; the domain decides whether it
        is a valid term.

        Raises:
            ValidationError: If any monetary or percent string is not a valid Decimal
        """
        errors: list[FieldError] = []

        inputs = LoanInputs(
            vehicle_price=parse_decimal("vehicle_price", dto.vehicle_price, errors),
            down_payment=parse_decimal("down_payment", dto.down_payment, errors),
            trade_in_value=parse_decimal("trade_in_value", dto.trade_in_value, errors),
            amount_owed_on_trade_in=parse_decimal(
                "amount_owed_on_trade_in", dto.amount_owed_on_trade_in, errors
            ),
            cash_incentives=parse_decimal("cash_incentives", dto.cash_incentives, errors),
            sales_tax_percent=parse_decimal("sales_tax_percent", dto.sales_tax_percent, errors),
            title_and_fees=parse_decimal("title_and_fees", dto.title_and_fees, errors),
            include_fees_in_principal=dto.include_fees_in_principal,
            annual_interest_rate_percent=parse_decimal(
                "annual_interest_rate_percent", dto.annual_interest_rate_percent, errors
            ),
            term_months=dto.term_months,
        )

        if errors:
            raise ValidationError(errors=errors)

        return CalculateLoanSummaryRequest(inputs=inputs, vehicle_id=dto.vehicle_id)

    @staticmethod
    def to_row_dto(row: AmortizationRow) -> AmortizationRowDTO:
        return AmortizationRowDTO(
            month=row.month,
            payment=format_money(row.payment),
            principal_portion=format_money(row.principal_portion),
            interest_portion=format_money(row.interest_portion),
            remaining_balance=format_money(row.remaining_balance),
        )

    @staticmethod
    def to_response(summary: LoanSummary) -> LoanSummaryResponseDTO:
        """
        Converts a domain LoanSummary to the response DTO.

        Money is rounded to cents here and only here. Percentages are echoed
        as given.
        """
        inputs = summary.inputs
        return LoanSummaryResponseDTO(
            vehicle_label=summary.vehicle_label,
            vehicle_price=format_money(inputs.vehicle_price),
            down_payment=format_money(inputs.down_payment),
            trade_in_value=format_money(inputs.trade_in_value),
            amount_owed_on_trade_in=format_money(inputs.amount_owed_on_trade_in),
            cash_incentives=format_money(inputs.cash_incentives),
            sales_tax_percent=str(inputs.sales_tax_percent),
            title_and_fees=format_money(inputs.title_and_fees),
            loan_amount=format_money(summary.loan_amount),
            annual_interest_rate_percent=str(inputs.annual_interest_rate_percent),
            term_months=inputs.term_months,
            monthly_payment=format_money(summary.monthly_payment),
            total_interest=format_money(summary.total_interest),
            total_cost=format_money(summary.total_cost),
            schedule=[LoanMapper.to_row_dto(row) for row in summary.schedule],
        )

    @staticmethod
    def to_payment_response(
        principal: Decimal,
        annual_interest_rate_percent: Decimal,
        term_months: int,
        monthly_payment: Decimal,
        total_interest: Decimal,
    ) -> PaymentResponseDTO:
        return PaymentResponseDTO(
            principal=format_money(principal),
            annual_interest_rate_percent=str(annual_interest_rate_percent),
            term_months=term_months,
            monthly_payment=format_money(monthly_payment),
            total_interest=format_money(total_interest),
        )
