import logging
from dataclasses import dataclass
from typing import Optional

from loan_emi.calculator import Invalid, Outcome
from loan_emi.chart import EmiChart
from loan_emi.formatting import format_currency

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmiSummary:
    """The four currency strings shown on the page."""
    monthly_installment: str
    principal: str
    total_interest: str
    total_payment: str


class EmiPresenter:
    """Pushes calculator outcomes to the summary tiles and the chart it owns."""

    def __init__(self, chart: Optional[EmiChart] = None):
        self.chart = chart or EmiChart()
        self.summary: Optional[EmiSummary] = None
        self.last_error: Optional[str] = None

    def apply(self, outcome: Outcome) -> bool:
        """
        Update the display from one outcome. Invalid outcomes leave the
        previous summary and chart in place and return False.
        """
        if isinstance(outcome, Invalid):
            self.last_error = outcome.reason
            logger.warning(f"Display not updated: {outcome.reason}")
            return False

        result = outcome.result
        self.summary = EmiSummary(
            monthly_installment=format_currency(result.monthly_installment),
            principal=format_currency(result.principal),
            total_interest=format_currency(result.total_interest),
            total_payment=format_currency(result.total_payment),
        )
        self.chart.update(result.principal, result.total_interest)
        self.last_error = None
        return True
