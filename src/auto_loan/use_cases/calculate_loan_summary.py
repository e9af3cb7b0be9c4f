"""Calculate loan summary use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from auto_loan.domain.amortization import (
    calculate_monthly_payment,
    calculate_total_interest,
    calculate_total_loan_cost,
    derive_loan_amount,
    generate_amortization_schedule,
)
from auto_loan.domain.errors import NotFoundError
from auto_loan.domain.loan import LoanInputs, LoanSummary
from auto_loan.ports.vehicle_catalog import VehicleCatalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CalculateLoanSummaryRequest:
    """Request to price a loan, optionally labeled with a catalog vehicle."""

    inputs: LoanInputs
    vehicle_id: str | None = None


class CalculateLoanSummary:
    """
    Use case for pricing an auto loan end to end.

    Pipeline:
    1. Derive the financed principal from the purchase inputs (once)
    2. Compute the fixed monthly payment from that principal
    3. Generate the full amortization schedule
    4. Aggregate total interest and total cost

    Every run is computed from scratch; nothing is cached between calls.
    """

    def __init__(self, vehicle_catalog: VehicleCatalog | None = None) -> None:
        """
        Initialize use case with dependencies.

        Args:
            vehicle_catalog: Catalog used to label the summary. Optional; without
                one, summaries carry no vehicle label.
        """
        self._catalog = vehicle_catalog

    def execute(self, request: CalculateLoanSummaryRequest) -> LoanSummary:
        """
        Execute the calculation.

        Args:
            request: Loan inputs and optional vehicle id

        Returns:
            LoanSummary with derived figures and the full schedule

        Raises:
            InvalidTerm: If inputs.term_months is not a positive integer
            NotFoundError: If vehicle_id is given but not in the catalog
        """
        vehicle_label = self._resolve_vehicle_label(request.vehicle_id)
        inputs = request.inputs

        loan_amount = derive_loan_amount(inputs)
        monthly_payment = calculate_monthly_payment(
            loan_amount, inputs.annual_interest_rate_percent, inputs.term_months
        )
        schedule = generate_amortization_schedule(
            loan_amount, inputs.annual_interest_rate_percent, inputs.term_months
        )
        total_interest = calculate_total_interest(
            loan_amount, monthly_payment, inputs.term_months
        )
        total_cost = calculate_total_loan_cost(
            loan_amount,
            total_interest,
            inputs.title_and_fees,
            inputs.include_fees_in_principal,
        )

        logger.debug(
            "Loan summary calculated",
            extra={
                "vehicle_id": request.vehicle_id,
                "term_months": inputs.term_months,
                "loan_amount": str(loan_amount),
                "monthly_payment": str(monthly_payment),
            },
        )

        return LoanSummary(
            vehicle_label=vehicle_label,
            inputs=inputs,
            loan_amount=loan_amount,
            monthly_payment=monthly_payment,
            total_interest=total_interest,
            total_cost=total_cost,
            schedule=tuple(schedule),
        )

    def _resolve_vehicle_label(self, vehicle_id: str | None) -> str | None:
        if vehicle_id is None:
            return None
        if self._catalog is None:
            logger.warning(
                "Vehicle id given but no catalog configured",
                extra={"vehicle_id": vehicle_id},
            )
            return None

        vehicle = self._catalog.get_by_id(vehicle_id)
        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=vehicle_id)
        return vehicle.label
