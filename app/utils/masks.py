"""
Brazilian display masks.

Every mask works on the digits of its input and only applies at its exact
digit length. Any other input is returned untouched.
"""
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Union
from zoneinfo import ZoneInfo

from app.core.config import settings

_NON_DIGITS = re.compile(r"\D")

DateLike = Union[str, date, datetime]


def strip_non_digits(value: Any) -> str:
    return _NON_DIGITS.sub("", str(value))


def format_postal_code(value: str) -> str:
    """01310100 -> 01310-100"""
    digits = strip_non_digits(value)
    if len(digits) != 8:
        return value
    return f"{digits[:5]}-{digits[5:]}"


def format_tax_id(value: str) -> str:
    """CPF: 12345678901 -> 123.456.789-01"""
    digits = strip_non_digits(value)
    if len(digits) != 11:
        return value
    return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"


def format_phone(value: str) -> str:
    """Landline (11) 1234-5678 for 10 digits, mobile (11) 91234-5678 for 11."""
    digits = strip_non_digits(value)
    if len(digits) == 10:
        return f"({digits[:2]}) {digits[2:6]}-{digits[6:]}"
    if len(digits) == 11:
        return f"({digits[:2]}) {digits[2:7]}-{digits[7:]}"
    return value


def format_national_id(value: str) -> str:
    """RG: 123456789 -> 12.345.678-9"""
    digits = strip_non_digits(value)
    if len(digits) != 9:
        return value
    return f"{digits[:2]}.{digits[2:5]}.{digits[5:8]}-{digits[8:]}"


def format_currency(amount: Union[int, float, Decimal, str]) -> str:
    """BRL with pt-BR separators: 1234.5 -> R$ 1.234,50. NaN, infinities and non-numbers come back as text."""
    try:
        value = Decimal(str(amount).strip())
        if not value.is_finite():
            return str(amount)
        value = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # Not a number, or more digits than the decimal context holds
        return str(amount)

    sign = "-" if value < 0 else ""
    # 1,234.50 -> 1.234,50
    text = f"{abs(value):,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    return f"{sign}R$ {text}"


def _to_local_datetime(value: DateLike) -> datetime:
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    elif not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)

    if value.tzinfo is not None:
        value = value.astimezone(ZoneInfo(settings.DISPLAY_TIMEZONE))
    return value


def format_date(value: DateLike) -> str:
    """2026-10-18 -> 18/10/2026"""
    return _to_local_datetime(value).strftime("%d/%m/%Y")


def format_datetime(value: DateLike) -> str:
    """2026-10-18T14:30:00 -> 18/10/2026 14:30"""
    return _to_local_datetime(value).strftime("%d/%m/%Y %H:%M")
