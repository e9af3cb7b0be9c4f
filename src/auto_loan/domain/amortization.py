"""Auto loan amortization.

Pure functions: numbers in, Decimal and dataclasses out. No I/O, no state.

Numeric policy:
- All arithmetic uses full precision Decimal; nothing is rounded per row
- ints are accepted as-is, floats are converted through str() so 5.9 means 5.9
- Rounding to cents belongs to whoever displays the numbers
"""

from __future__ import annotations

from decimal import Decimal, getcontext, localcontext

from auto_loan.domain.loan import AmortizationRow, InvalidTerm, LoanInputs

ZERO = Decimal("0")
HUNDRED = Decimal("100")
MONTHS_PER_YEAR = Decimal("12")
GUARD_DIGITS = 4

Number = Decimal | int | float


def as_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def _validate_term(term_months: object) -> int:
    # bool is an int subclass; True is not a term
    if isinstance(term_months, bool) or not isinstance(term_months, int):
        raise InvalidTerm(term_months)
    if term_months <= 0:
        raise InvalidTerm(term_months)
    return term_months


def monthly_rate(annual_rate_percent: Number) -> Decimal:
    """Periodic rate for a nominal annual percentage (5.9 -> 0.059 / 12)."""
    return as_decimal(annual_rate_percent) / HUNDRED / MONTHS_PER_YEAR


def derive_loan_amount(inputs: LoanInputs) -> Decimal:
    """
    Financed principal for a purchase.

    Sales tax applies to the price after cash incentives. Title and fees are
    financed only when include_fees_in_principal is set; otherwise they are paid
    out of pocket. The result is not floored: credits larger than the price give
    a negative amount.
    """
    price = as_decimal(inputs.vehicle_price)
    incentives = as_decimal(inputs.cash_incentives)

    base_amount = (
        price
        - as_decimal(inputs.down_payment)
        - as_decimal(inputs.trade_in_value)
        + as_decimal(inputs.amount_owed_on_trade_in)
        - incentives
    )
    tax_amount = (price - incentives) * (as_decimal(inputs.sales_tax_percent) / HUNDRED)

    if inputs.include_fees_in_principal:
        return base_amount + tax_amount + as_decimal(inputs.title_and_fees)
    return base_amount + tax_amount


def calculate_monthly_payment(
    principal: Number, annual_rate_percent: Number, term_months: int
) -> Decimal:
    """Fixed payment that amortizes principal over term_months.

    Standard amortized loan payment:
        payment = P * (r * (1 + r)^n) / ((1 + r)^n - 1)

    With r == 0 the formula's denominator is zero and the payment is P / n.
    For rates so small that (n + 1) * r vanishes at the working precision the
    payment is also P / n. Otherwise (1 + r)^n - 1 loses about -log10(n * r)
    digits to cancellation, so it is evaluated with that many extra digits and
    the result is rounded back to the caller's context.

    Raises:
        InvalidTerm: If term_months is not a positive integer
    """
    n = _validate_term(term_months)
    p = as_decimal(principal)
    r = monthly_rate(annual_rate_percent)

    if r == 0:
        return p / Decimal(n)

    growth = abs(r) * (n + 1)
    if growth.adjusted() < -(getcontext().prec + GUARD_DIGITS):
        return p / Decimal(n)

    with localcontext() as ctx:
        ctx.prec += max(0, -growth.adjusted()) + GUARD_DIGITS
        factor = (1 + r) ** n
        payment = p * (r * factor) / (factor - 1)
    return +payment


def generate_amortization_schedule(
    principal: Number, annual_rate_percent: Number, term_months: int
) -> list[AmortizationRow]:
    """
    Month-by-month breakdown of a fixed-payment loan.

    Returns exactly term_months rows, month numbers starting at 1. Only the
    emitted remaining_balance is floored at zero; the running balance keeps any
    sub-cent drift so later rows accrue interest on the true balance.

    Raises:
        InvalidTerm: Before any row is produced, if term_months is not a positive integer
    """
    payment = calculate_monthly_payment(principal, annual_rate_percent, term_months)
    r = monthly_rate(annual_rate_percent)
    balance = as_decimal(principal)

    rows: list[AmortizationRow] = []
    for month in range(1, term_months + 1):
        interest_portion = balance * r
        principal_portion = payment - interest_portion
        balance = balance - principal_portion

        rows.append(
            AmortizationRow(
                month=month,
                payment=payment,
                principal_portion=principal_portion,
                interest_portion=interest_portion,
                remaining_balance=max(balance, ZERO),
            )
        )

    return rows


def calculate_total_interest(
    principal: Number, monthly_payment: Number, term_months: int
) -> Decimal:
    """Interest paid over the life of the loan: payment * term - principal."""
    return as_decimal(monthly_payment) * term_months - as_decimal(principal)


def calculate_total_loan_cost(
    loan_amount: Number,
    total_interest: Number,
    title_and_fees: Number,
    include_fees_in_principal: bool,
) -> Decimal:
    """Everything the buyer pays for the financing.

    Fees already folded into loan_amount are not added a second time.
    """
    total = as_decimal(loan_amount) + as_decimal(total_interest)
    if include_fees_in_principal:
        return total
    return total + as_decimal(title_and_fees)
