"""
HTML calculator pages.

Routes:
- /                                  empty calculator
- /calculate                         form submission (GET so results are linkable)
- /salary/{state_slug}/{amount}      pre-calculated scenario page
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.config import Settings, get_settings
from app.core.calculator_form import CalculatorForm
from app.core.salary_pages import find_state, page_metadata, popular_links, resolve_state
from app.core.tax_calculator import coerce_filing_status, summarize
from app.models.tax_models import FilingStatus, PageMetadata
from app.utils.constants import DISCLAIMER, STATE_TAX_RATES, TAX_YEAR
from app.utils.formatting import format_amount, format_currency, format_percent

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))
templates.env.filters["currency"] = format_currency
templates.env.filters["amount"] = format_amount
templates.env.filters["percent"] = format_percent

FILING_STATUS_LABELS = {
    FilingStatus.SINGLE.value: "Single",
    FilingStatus.MARRIED.value: "Married",
    FilingStatus.HEAD_OF_HOUSEHOLD.value: "Head of Household",
}


def _render(
    request: Request,
    form: CalculatorForm,
    heading: str,
    metadata: Optional[PageMetadata] = None,
):
    result = form.calculate()
    if form.income and result is None:
        logger.info("Ignoring calculation with invalid income %r", form.income)
    context = {
        "form": form,
        "heading": heading,
        "metadata": metadata,
        "breakdown": summarize(result) if result is not None else None,
        "states": list(STATE_TAX_RATES),
        "filing_statuses": FILING_STATUS_LABELS,
        "links": popular_links(form.state),
        "tax_year": TAX_YEAR,
        "disclaimer": DISCLAIMER,
    }
    return templates.TemplateResponse(request, "calculator.html", context)


@router.get("/", response_class=HTMLResponse)
def index(request: Request, settings: Settings = Depends(get_settings)):
    form = CalculatorForm(state=settings.default_state)
    return _render(request, form, heading=f"US Smart Tax {TAX_YEAR}")


@router.get("/calculate", response_class=HTMLResponse)
def calculate_page(
    request: Request,
    income: str = "",
    state: str = "",
    filing_status: str = FilingStatus.SINGLE.value,
    settings: Settings = Depends(get_settings),
):
    form = CalculatorForm(
        income=income,
        state=resolve_state(state, default=settings.default_state),
        # Show the status the estimate actually used
        filing_status=(coerce_filing_status(filing_status) or FilingStatus.SINGLE).value,
    )
    return _render(request, form, heading=f"US Smart Tax {TAX_YEAR}")


@router.get("/salary/{state_slug}/{amount}", response_class=HTMLResponse)
def salary_page(
    request: Request,
    state_slug: str,
    amount: str,
    settings: Settings = Depends(get_settings),
):
    if find_state(state_slug) is None:
        logger.info("Unknown state slug %r, showing %s", state_slug, settings.default_state)
    form = CalculatorForm.from_salary_page(state_slug, amount, default_state=settings.default_state)
    return _render(
        request,
        form,
        heading=f"Salary after Tax in {form.state}",
        metadata=page_metadata(state_slug, amount),
    )
