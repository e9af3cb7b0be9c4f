from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from auto_loan.domain.errors import ValidationError, field_error


class InvalidTerm(ValidationError):
    """Raised when a loan term is not a positive whole number of months.

    The amortization formula divides by ((1 + r)^n - 1) and the zero-rate
    formula divides by n, so neither has a meaning for n <= 0.
    """

    def __init__(self, term_months: object) -> None:
        self.term_months = term_months
        super().__init__(
            errors=[
                field_error(
                    "term_months",
                    f"term_months must be a positive integer, got {term_months!r}",
                    "INVALID_TERM",
                )
            ]
        )


@dataclass(frozen=True, slots=True)
class LoanInputs:
    """Everything needed to price one auto loan.

    Adjustment amounts (down payment, trade-in, amount owed, incentives) are not
    required to be non-negative; negative equity is expressed as an amount owed
    larger than the trade-in value.
    """

    vehicle_price: Decimal
    annual_interest_rate_percent: Decimal
    term_months: int
    down_payment: Decimal = Decimal("0")
    trade_in_value: Decimal = Decimal("0")
    amount_owed_on_trade_in: Decimal = Decimal("0")
    cash_incentives: Decimal = Decimal("0")
    sales_tax_percent: Decimal = Decimal("0")
    title_and_fees: Decimal = Decimal("0")
    include_fees_in_principal: bool = False


@dataclass(frozen=True, slots=True)
class AmortizationRow:
    month: int
    payment: Decimal
    principal_portion: Decimal
    interest_portion: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True, slots=True)
class LoanSummary:
    """
    Result of a full loan calculation.

    Field order mirrors the exported summary block: vehicle label first, then
    the inputs, then the derived figures.
    """

    vehicle_label: str | None
    inputs: LoanInputs
    loan_amount: Decimal
    monthly_payment: Decimal
    total_interest: Decimal
    total_cost: Decimal
    schedule: tuple[AmortizationRow, ...]
