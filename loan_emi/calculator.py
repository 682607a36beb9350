import logging
import math
from dataclasses import dataclass
from typing import Union

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


class InvalidLoanInput(ValueError):
    """Raised when a user-supplied loan value is missing, zero or not a number."""


@dataclass(frozen=True)
class EmiResult:
    principal: float
    annual_rate_percent: float
    tenure_years: float
    monthly_installment: float
    total_payment: float
    total_interest: float

    @property
    def tenure_months(self) -> float:
        return self.tenure_years * MONTHS_PER_YEAR

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate_percent / MONTHS_PER_YEAR / 100


@dataclass(frozen=True)
class Ok:
    result: EmiResult


@dataclass(frozen=True)
class Invalid:
    reason: str


Outcome = Union[Ok, Invalid]


def monthly_installment(principal: float, annual_rate_percent: float, tenure_years: float) -> float:
    """
    Deterministic EMI formula. A zero rate spreads the principal evenly.
    """
    if tenure_years <= 0:
        raise ValueError("tenure_years must be > 0")
    r = annual_rate_percent / MONTHS_PER_YEAR / 100
    n = tenure_years * MONTHS_PER_YEAR
    if r == 0:
        return principal / n
    growth = (1 + r) ** n
    return principal * r * growth / (growth - 1)


def _positive(name: str, raw) -> float:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise InvalidLoanInput(f"{name} is required")
    if isinstance(raw, bool):
        raise InvalidLoanInput(f"{name} must be a number")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise InvalidLoanInput(f"{name} must be a number, got {raw!r}")
    if not math.isfinite(value):
        raise InvalidLoanInput(f"{name} must be a finite number")
    if value <= 0:
        raise InvalidLoanInput(f"{name} must be greater than zero")
    return value


def calculate_emi(principal, annual_rate_percent, tenure_years) -> EmiResult:
    """
    Compute installment, total payment and total interest for one loan.

    Raises InvalidLoanInput when any value is missing, non-numeric or not
    strictly positive, or when the loan is too large to compute.
    """
    p = _positive("Loan amount", principal)
    rate = _positive("Interest rate", annual_rate_percent)
    years = _positive("Loan tenure", tenure_years)

    try:
        emi = monthly_installment(p, rate, years)
        total_payment = emi * years * MONTHS_PER_YEAR
    except OverflowError:
        raise InvalidLoanInput("Loan values are too large to calculate")
    if not (math.isfinite(emi) and math.isfinite(total_payment)):
        raise InvalidLoanInput("Loan values are too large to calculate")
    total_interest = total_payment - p

    return EmiResult(
        principal=p,
        annual_rate_percent=rate,
        tenure_years=years,
        monthly_installment=emi,
        total_payment=total_payment,
        total_interest=total_interest,
    )


def evaluate(principal, annual_rate_percent, tenure_years) -> Outcome:
    """Calculate EMI for raw widget values, returning Ok or Invalid instead of raising."""
    try:
        result = calculate_emi(principal, annual_rate_percent, tenure_years)
    except InvalidLoanInput as e:
        logger.warning(f"EMI input rejected: {e}")
        return Invalid(str(e))

    logger.info(
        f"EMI calculated: P={result.principal}, R={result.annual_rate_percent}%, "
        f"T={result.tenure_years}y -> {result.monthly_installment:.2f}"
    )
    return Ok(result)
