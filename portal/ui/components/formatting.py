"""Display formatting for amounts and dates."""

from datetime import date, datetime
from decimal import Decimal

from portal.core.config import settings


def format_amount(value: Decimal | float | None) -> str:
    """``49.00 €`` style amount; missing amounts show as zero."""
    return f"{Decimal(str(value or 0)):.2f} {settings.CURRENCY_SYMBOL}"


def format_date(value: date | datetime | None) -> str:
    if value is None:
        return "-"
    if isinstance(value, datetime):
        value = value.date()
    return value.strftime("%d/%m/%Y")


def format_datetime(value: datetime | None) -> str:
    if value is None:
        return "-"
    return value.strftime("%d/%m/%Y %H:%M")
