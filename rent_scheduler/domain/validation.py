"""Input validation and rent-change normalization for rent agreements"""

import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterable, Mapping, Tuple

from rent_scheduler.domain.exceptions import InvalidDateError, InvalidInputError
from rent_scheduler.domain.models import Amount, Frequency, PaymentMethod, RentChange

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def validate_amount(value: Any) -> Amount:
    """
    Check that a rent amount is a strictly positive number.

    bool is rejected even though it subclasses int. The value is returned
    unchanged: no rounding or currency snapping happens here.
    """
    is_number = isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)
    if not is_number or (isinstance(value, Decimal) and value.is_nan()) or not value > 0:
        raise InvalidInputError("Amount must be a positive number")
    return value


def _parse_choice(value: Any, choices: type, label: str):
    try:
        return choices(str(value).lower())
    except ValueError:
        allowed = ", ".join(choice.value for choice in choices)
        raise InvalidInputError(f"Invalid {label}: '{value}'. Must be one of: {allowed}") from None


def validate_frequency(value: Any) -> Frequency:
    """Case-insensitive match against weekly, fortnightly, monthly"""
    return _parse_choice(value, Frequency, "frequency")


def validate_payment_method(value: Any) -> PaymentMethod:
    """Case-insensitive match against the payment methods; absent means instant"""
    if value is None or value == "":
        return PaymentMethod.INSTANT
    return _parse_choice(value, PaymentMethod, "payment method")


def parse_date(value: Any, field_name: str) -> date:
    """
    Parse a strict YYYY-MM-DD string into a date.

    Both a wrong shape ("2025/07/01") and an impossible calendar day
    ("2025-02-30") are rejected with the same message.
    """
    message = f"Invalid {field_name}: '{value}'. Please use YYYY-MM-DD format"
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        raise InvalidDateError(message)

    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise InvalidDateError(message) from None


def validate_date_range(start: date, end: date) -> None:
    """Start may equal end (single occurrence) but never follow it"""
    if start > end:
        raise InvalidDateError(f"Start date ({start}) cannot be after end date ({end})")


def normalize_rent_changes(changes: Iterable[Mapping[str, Any]]) -> Tuple[RentChange, ...]:
    """
    Validate raw rent changes and order them by effective date.

    Each change is a mapping with rent_amount and effective_date. sorted()
    is stable, so changes sharing an effective date keep their input order
    and the last one listed wins during schedule generation.

    Changes dated on or before the start apply from the first payment and
    changes dated after the end never apply; neither is rejected.
    """
    normalized = [
        RentChange(
            amount=validate_amount(change.get("rent_amount")),
            effective_date=parse_date(change.get("effective_date"), "effective_date"),
        )
        for change in changes
    ]
    return tuple(sorted(normalized, key=lambda c: c.effective_date))


def validate_lead_time(start: date, lead_days: int) -> None:
    """The first payment, lead_days before start, must still be a valid date"""
    if (start - date.min).days < lead_days:
        raise InvalidDateError(
            f"Start date ({start}) leaves no room for a {lead_days}-day payment lead time"
        )
