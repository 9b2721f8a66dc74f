"""State slugs, scenario links and page metadata for /salary/{state}/{amount} pages."""

import re
from typing import List, Optional

from app.models.tax_models import PageMetadata, SalaryLink
from app.utils.constants import (
    DEFAULT_STATE,
    POPULAR_SALARY_AMOUNTS,
    STATE_CODES,
    STATE_TAX_RATES,
    TAX_YEAR,
)
from app.utils.formatting import format_amount

_STATES_BY_KEY = {name.lower(): name for name in STATE_TAX_RATES}
_STATES_BY_CODE = {code: name for name, code in STATE_CODES.items()}
_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")


def state_slug(state: str) -> str:
    return state.lower().replace(" ", "-")


def find_state(text: Optional[str]) -> Optional[str]:
    """Match free text or a slug to a canonical state name, or None."""
    if not text:
        return None
    cleaned = " ".join(text.replace("-", " ").split())
    if cleaned.upper() in _STATES_BY_CODE:
        return _STATES_BY_CODE[cleaned.upper()]
    return _STATES_BY_KEY.get(cleaned.lower())


def resolve_state(text: Optional[str], default: str = DEFAULT_STATE) -> str:
    return find_state(text) or default


def format_state_slug(slug: str) -> str:
    # "new-york" -> "New York"; mirrors the URL rather than the canonical name
    words = slug.split("-")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def salary_path(state: str, amount: int) -> str:
    return f"/salary/{state_slug(state)}/{amount}"


def popular_links(state: str) -> List[SalaryLink]:
    return [
        SalaryLink(
            amount=amount,
            href=salary_path(state, amount),
            label=f"${format_amount(amount)} in {state}",
        )
        for amount in POPULAR_SALARY_AMOUNTS
    ]


def _display_amount(amount: str) -> str:
    match = _LEADING_INTEGER.match(amount)
    if match is None:
        return "NaN"
    return format_amount(int(match.group(1)))


def page_metadata(state_slug_text: str, amount: str) -> PageMetadata:
    state_name = format_state_slug(state_slug_text)
    formatted_amount = _display_amount(amount)
    return PageMetadata(
        title=f"${formatted_amount} After Tax in {state_name} | {TAX_YEAR} Calculator",
        description=(
            f"Calculate your {TAX_YEAR} take-home pay in {state_name} with a salary of "
            f"${formatted_amount}. See Federal and State tax breakdown instantly."
        ),
    )
