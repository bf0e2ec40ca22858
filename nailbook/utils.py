"""Shared formatting helpers used across the booking configurator."""

import re

from nailbook.config import settings


def normalize_phone(value: str) -> str:
    """Normalize a phone number by stripping everything except digits and a leading +.

    Examples:
        >>> normalize_phone("0912-345-678")
        '0912345678'
        >>> normalize_phone("+886 (912) 345 678")
        '+886912345678'
    """
    value = value.strip()
    if value.startswith("+"):
        return "+" + re.sub(r"[^\d]", "", value[1:])
    return re.sub(r"[^\d]", "", value)


def format_price(amount: int) -> str:
    """Render an integer amount with the configured currency label.

    Examples:
        >>> format_price(1570)
        'NT$ 1,570'
    """
    return f"{settings.salon.currency} {amount:,}"


def format_duration(minutes: int) -> str:
    """Render minutes as hours and minutes.

    Examples:
        >>> format_duration(105)
        '1 hr 45 min'
        >>> format_duration(45)
        '45 min'
    """
    hours, mins = divmod(minutes, 60)
    if hours and mins:
        return f"{hours} hr {mins} min"
    if hours:
        return f"{hours} hr"
    return f"{mins} min"
