from pydantic import BaseModel, ConfigDict, Field

MONEY_PATTERN = r"^\d+(\.\d{1,2})?$"
SIGNED_MONEY_PATTERN = r"^-?\d+(\.\d{1,2})?$"
PERCENT_PATTERN = r"^\d+(\.\d+)?$"
MAX_TERM_MONTHS = 600


class LoanSummaryRequestDTO(BaseModel):
    """Request payload for a full loan summary with schedule."""

    vehicle_id: str | None = Field(
        default=None,
        description="Catalog vehicle id used to label the summary",
        examples=["corolla-2021"],
    )
    vehicle_price: str = Field(
        description="Vehicle price as decimal string",
        examples=["28000.00"],
        pattern=MONEY_PATTERN,
    )
    down_payment: str = Field(
        default="0",
        description="Cash down payment as decimal string",
        examples=["3000.00"],
        pattern=SIGNED_MONEY_PATTERN,
    )
    trade_in_value: str = Field(
        default="0",
        description="Value credited for the trade-in vehicle",
        examples=["5000.00"],
        pattern=SIGNED_MONEY_PATTERN,
    )
    amount_owed_on_trade_in: str = Field(
        default="0",
        description="Outstanding loan balance on the trade-in vehicle",
        examples=["2000.00"],
        pattern=SIGNED_MONEY_PATTERN,
    )
    cash_incentives: str = Field(
        default="0",
        description="Manufacturer or dealer cash incentives",
        examples=["1000.00"],
        pattern=SIGNED_MONEY_PATTERN,
    )
    sales_tax_percent: str = Field(
        default="0",
        description="Sales tax percentage applied to price minus incentives (e.g., '7.25')",
        examples=["7.25"],
        pattern=PERCENT_PATTERN,
    )
    title_and_fees: str = Field(
        default="0",
        description="Title, registration and dealer fees",
        examples=["850.00"],
        pattern=MONEY_PATTERN,
    )
    include_fees_in_principal: bool = Field(
        default=False,
        description="Finance title and fees instead of paying them up front",
    )
    annual_interest_rate_percent: str = Field(
        description="Nominal annual interest rate as a percentage (e.g., '5.9' = 5.9%)",
        examples=["5.9"],
        pattern=PERCENT_PATTERN,
    )
    term_months: int = Field(
        description="Loan term in months. Must be a positive integer, at most 600",
        examples=[60],
        le=MAX_TERM_MONTHS,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vehicle_id": "corolla-2021",
                "vehicle_price": "28000.00",
                "down_payment": "3000.00",
                "trade_in_value": "5000.00",
                "amount_owed_on_trade_in": "2000.00",
                "cash_incentives": "1000.00",
                "sales_tax_percent": "7.25",
                "title_and_fees": "850.00",
                "include_fees_in_principal": True,
                "annual_interest_rate_percent": "5.9",
                "term_months": 60,
            }
        }
    )


class AmortizationRowDTO(BaseModel):
    """One month of the amortization schedule, money rounded to cents."""

    month: int
    payment: str
    principal_portion: str
    interest_portion: str
    remaining_balance: str


class LoanSummaryResponseDTO(BaseModel):
    """Loan summary in export order, followed by the schedule."""

    vehicle_label: str | None = Field(
        description="Vehicle label ('2021 Toyota Corolla'), null when no vehicle given",
        examples=["2021 Toyota Corolla"],
    )
    vehicle_price: str
    down_payment: str
    trade_in_value: str
    amount_owed_on_trade_in: str
    cash_incentives: str
    sales_tax_percent: str
    title_and_fees: str
    loan_amount: str = Field(
        description="Financed principal as decimal string (may be negative)",
        examples=["23807.50"],
    )
    annual_interest_rate_percent: str
    term_months: int
    monthly_payment: str = Field(
        description="Fixed monthly payment rounded to cents",
        examples=["459.16"],
    )
    total_interest: str = Field(
        description="Total interest over the term (monthly_payment * term - loan_amount)",
        examples=["3742.07"],
    )
    total_cost: str = Field(
        description="Loan amount plus interest plus any fees paid out of pocket",
        examples=["27549.57"],
    )
    schedule: list[AmortizationRowDTO]


class PaymentRequestDTO(BaseModel):
    """Request payload for a bare monthly payment quote."""

    principal: str = Field(
        description="Financed principal as decimal string",
        examples=["25000.00"],
        pattern=SIGNED_MONEY_PATTERN,
    )
    annual_interest_rate_percent: str = Field(
        description="Nominal annual interest rate as a percentage",
        examples=["5.9"],
        pattern=PERCENT_PATTERN,
    )
    term_months: int = Field(
        description="Loan term in months. Must be a positive integer, at most 600",
        examples=[24],
        le=MAX_TERM_MONTHS,
    )


class PaymentResponseDTO(BaseModel):
    """Monthly payment quote."""

    principal: str
    annual_interest_rate_percent: str
    term_months: int
    monthly_payment: str
    total_interest: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "principal": "25000.00",
                "annual_interest_rate_percent": "5.9",
                "term_months": 24,
                "monthly_payment": "1106.89",
                "total_interest": "1565.34",
            }
        }
    )
