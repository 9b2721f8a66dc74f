import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.config import Settings, get_settings
from app.core.calculator_form import parse_income
from app.core.salary_pages import find_state, resolve_state, state_slug
from app.core.tax_calculator import calculate_tax, coerce_filing_status, summarize
from app.models.tax_models import (
    FilingStatus,
    StateTaxRatesResponse,
    TaxCalculationRequest,
    TaxCalculationResponse,
)
from app.utils.constants import DISCLAIMER, STATE_CODES, STATE_TAX_RATES

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tax", tags=["tax"])


def _build_response(gross_income: float, state: str, filing_status: str) -> TaxCalculationResponse:
    result = calculate_tax(gross_income, state, filing_status)
    breakdown = summarize(result, rounded=True)
    return TaxCalculationResponse(
        **breakdown.model_dump(),
        state_name=state,
        filing_status=coerce_filing_status(filing_status) or FilingStatus.SINGLE,
        disclaimer=DISCLAIMER,
    )


@router.post(
    "/calculate",
    response_model=TaxCalculationResponse,
    status_code=status.HTTP_200_OK,
)
def calculate(payload: TaxCalculationRequest) -> TaxCalculationResponse:
    # Unmatched names pass through and are taxed at 0% by the estimator
    state = find_state(payload.state) or payload.state
    if coerce_filing_status(payload.filing_status) is None:
        logger.info("Unknown filing status %r, using single", payload.filing_status)
    logger.debug("Calculating %.2f for %s (%s)", payload.gross_income, state, payload.filing_status)
    return _build_response(payload.gross_income, state, payload.filing_status)


@router.get(
    "/salary/{state_slug_text}/{amount}",
    response_model=TaxCalculationResponse,
    status_code=status.HTTP_200_OK,
)
def salary_scenario(
    state_slug_text: str,
    amount: str,
    settings: Settings = Depends(get_settings),
) -> TaxCalculationResponse:
    try:
        gross_income = parse_income(amount)
    except ValueError as exc:
        # Translate domain validation issues into client-friendly HTTP errors.
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    state = resolve_state(state_slug_text, default=settings.default_state)
    return _build_response(gross_income, state, FilingStatus.SINGLE.value)


@router.get(
    "/state-rates",
    response_model=StateTaxRatesResponse,
    status_code=status.HTTP_200_OK,
)
def list_state_tax_rates() -> StateTaxRatesResponse:
    states = [
        {"code": STATE_CODES[name], "name": name, "slug": state_slug(name), "rate": rate}
        for name, rate in STATE_TAX_RATES.items()
    ]
    states.sort(key=lambda entry: entry["name"])
    return StateTaxRatesResponse(states=states)
