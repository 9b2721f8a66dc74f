def format_currency(value: float) -> str:
    """Format as dollars with cents, e.g. 61592.5 -> '$61,592.50'."""
    if value < 0:
        return f"-${abs(value):,.2f}"
    return f"${value:,.2f}"


def format_amount(value: float) -> str:
    return f"{value:,.0f}"


def format_percent(value: float) -> str:
    return f"{value:.1f}%"
