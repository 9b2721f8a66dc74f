import math
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.core.salary_pages import resolve_state
from app.core.tax_calculator import calculate_tax
from app.models.tax_models import CalculationResult, FilingStatus
from app.utils.constants import DEFAULT_STATE


def parse_income(text: Optional[str]) -> float:
    if text is None or not text.strip():
        raise ValueError("Income is required.")
    try:
        income = float(text.replace(",", "").replace("$", "").strip())
    except ValueError:
        raise ValueError(f"Income must be a number, got {text!r}.")
    if math.isnan(income) or math.isinf(income) or income <= 0:
        raise ValueError("Income must be a positive number.")
    return income


class CalculatorForm(BaseModel):
    """Raw calculator input. Results are only produced by calculate()."""

    model_config = ConfigDict(frozen=True)

    income: str = ""
    state: str = DEFAULT_STATE
    filing_status: str = FilingStatus.SINGLE.value

    @classmethod
    def from_salary_page(cls, state_slug: str, amount: str, default_state: str = DEFAULT_STATE) -> "CalculatorForm":
        return cls(
            income=amount,
            state=resolve_state(state_slug, default=default_state),
            filing_status=FilingStatus.SINGLE.value,
        )

    def calculate(self, previous: Optional[CalculationResult] = None) -> Optional[CalculationResult]:
        """Run the estimate for the current input.

        Invalid income leaves ``previous`` in place.
        """
        try:
            gross_income = parse_income(self.income)
        except ValueError:
            return previous
        return calculate_tax(gross_income, self.state, self.filing_status)
