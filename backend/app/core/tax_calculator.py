from typing import Dict, Optional, Tuple, Union

from app.models.tax_models import CalculationResult, FilingStatus, TaxBracket, TaxBreakdown
from app.utils.constants import STATE_TAX_RATES

# Federal brackets for 2026, (upper limit, marginal rate) in ascending order
FEDERAL_BRACKETS: Dict[FilingStatus, Tuple[TaxBracket, ...]] = {
    FilingStatus.SINGLE: (
        TaxBracket(12400, 0.10),
        TaxBracket(50400, 0.12),
        TaxBracket(105700, 0.22),
        TaxBracket(201775, 0.24),
        TaxBracket(256225, 0.32),
        TaxBracket(640600, 0.35),
        TaxBracket(float("inf"), 0.37),
    ),
    FilingStatus.MARRIED: (
        TaxBracket(24800, 0.10),
        TaxBracket(100800, 0.12),
        TaxBracket(211400, 0.22),
        TaxBracket(403550, 0.24),
        TaxBracket(512450, 0.32),
        TaxBracket(768700, 0.35),
        TaxBracket(float("inf"), 0.37),
    ),
    FilingStatus.HEAD_OF_HOUSEHOLD: (
        TaxBracket(17700, 0.10),
        TaxBracket(67450, 0.12),
        TaxBracket(105700, 0.22),
        TaxBracket(201775, 0.24),
        TaxBracket(256225, 0.32),
        TaxBracket(640600, 0.35),
        TaxBracket(float("inf"), 0.37),
    ),
}

STANDARD_DEDUCTIONS: Dict[FilingStatus, float] = {
    FilingStatus.SINGLE: 16100,
    FilingStatus.MARRIED: 32200,
    FilingStatus.HEAD_OF_HOUSEHOLD: 24150,
}

SOCIAL_SECURITY_RATE = 0.062
SOCIAL_SECURITY_WAGE_BASE = 184500
MEDICARE_RATE = 0.0145
ADDITIONAL_MEDICARE_RATE = 0.009
ADDITIONAL_MEDICARE_THRESHOLDS: Dict[FilingStatus, float] = {
    FilingStatus.SINGLE: 200000,
    FilingStatus.MARRIED: 250000,
    FilingStatus.HEAD_OF_HOUSEHOLD: 200000,
}
DEFAULT_ADDITIONAL_MEDICARE_THRESHOLD = 200000


def coerce_filing_status(value: Union[FilingStatus, str, None]) -> Optional[FilingStatus]:
    """Return the matching FilingStatus, or None when the value is not recognized."""
    if isinstance(value, FilingStatus):
        return value
    try:
        return FilingStatus(value)
    except ValueError:
        return None


def standard_deduction(filing_status: Union[FilingStatus, str]) -> float:
    status = coerce_filing_status(filing_status)
    return STANDARD_DEDUCTIONS.get(status, STANDARD_DEDUCTIONS[FilingStatus.SINGLE])


def federal_income_tax(taxable_income: float, filing_status: Union[FilingStatus, str]) -> float:
    """Apply the progressive brackets for the filing status to taxable income."""
    status = coerce_filing_status(filing_status)
    brackets = FEDERAL_BRACKETS.get(status, FEDERAL_BRACKETS[FilingStatus.SINGLE])

    tax = 0.0
    previous_limit = 0.0
    for limit, rate in brackets:
        if taxable_income <= previous_limit:
            break
        tax += (min(taxable_income, limit) - previous_limit) * rate
        previous_limit = limit
    return tax


def fica_components(gross_income: float, filing_status: Union[FilingStatus, str]) -> Tuple[float, float, float]:
    """Return (social security, medicare, additional medicare) for the wages."""
    status = coerce_filing_status(filing_status)
    threshold = ADDITIONAL_MEDICARE_THRESHOLDS.get(status, DEFAULT_ADDITIONAL_MEDICARE_THRESHOLD)

    social_security = min(gross_income, SOCIAL_SECURITY_WAGE_BASE) * SOCIAL_SECURITY_RATE
    medicare = gross_income * MEDICARE_RATE
    additional_medicare = max(0.0, gross_income - threshold) * ADDITIONAL_MEDICARE_RATE
    return social_security, medicare, additional_medicare


def state_tax_rate(state: str) -> float:
    # Exact key lookup; callers normalize free text with resolve_state first.
    return STATE_TAX_RATES.get(state, 0.0)


def calculate_tax(
    gross_income: float,
    state: str,
    filing_status: Union[FilingStatus, str] = FilingStatus.SINGLE,
) -> CalculationResult:
    """Estimate federal, FICA and state tax on a gross annual salary.

    Unknown states are taxed at 0% and unknown filing statuses use the single
    tables. Income is assumed to be finite and non-negative.
    """
    taxable_income = max(0.0, gross_income - standard_deduction(filing_status))
    federal_tax = federal_income_tax(taxable_income, filing_status)

    social_security, medicare, additional_medicare = fica_components(gross_income, filing_status)
    fica_tax = social_security + medicare + additional_medicare

    state_tax = gross_income * state_tax_rate(state)

    total_tax = federal_tax + fica_tax + state_tax
    return CalculationResult(
        gross=gross_income,
        federal=federal_tax,
        fica=fica_tax,
        additional_medicare=additional_medicare,
        state=state_tax,
        total_tax=total_tax,
        net=gross_income - total_tax,
    )


def _round_currency(value: float) -> float:
    # Round consistently to two decimals for currency display
    return round(value, 2)


def summarize(result: CalculationResult, rounded: bool = False) -> TaxBreakdown:
    """Add per-paycheck and effective-rate figures for display."""
    effective_rate = (result.total_tax / result.gross) * 100 if result.gross else 0.0
    values = {
        **result.model_dump(),
        "monthly_net": result.net / 12,
        "biweekly_net": result.net / 26,
        "effective_rate": effective_rate,
    }
    if rounded:
        values = {key: _round_currency(value) for key, value in values.items()}
    return TaxBreakdown(**values)
