"""Rent schedule generation - walks a rent agreement from start to end date"""

from datetime import date
from typing import Any, Iterable, List, Mapping, Sequence, Tuple

from rent_scheduler.domain.models import Amount, PaymentRecord, RentChange
from rent_scheduler.domain.validation import (
    normalize_rent_changes,
    parse_date,
    validate_amount,
    validate_date_range,
    validate_lead_time,
    validate_frequency,
    validate_payment_method,
)
from rent_scheduler.utils.date_utils import step_dates, subtract_days


def apply_rent_changes(
    changes: Sequence[RentChange],
    cursor: int,
    current_amount: Amount,
    as_of: date,
) -> Tuple[int, Amount]:
    """
    Advance a forward-only cursor over changes sorted by effective date.

    Applies every change with effective_date <= as_of starting at cursor and
    returns the new (cursor, amount). Callers must visit as_of dates in
    increasing order; the cursor is never rewound.
    """
    while cursor < len(changes) and changes[cursor].effective_date <= as_of:
        current_amount = changes[cursor].amount
        cursor += 1
    return cursor, current_amount


class RentSchedule:
    """
    A validated rent agreement.

    All input is checked when the object is built, so generate() cannot
    fail. Attributes are read-only once construction succeeds.

    Args:
        rent: Mapping with rent_amount, rent_frequency, rent_start_date,
            rent_end_date and optionally payment_method
        rent_changes: Mappings with rent_amount and effective_date

    Raises:
        InvalidInputError: Bad amount, frequency or payment method
        InvalidDateError: Bad date string or start date after end date,
            or a first payment date before the earliest supported date
    """

    def __init__(self, rent: Mapping[str, Any], rent_changes: Iterable[Mapping[str, Any]] = ()):
        self.amount = validate_amount(rent.get("rent_amount"))
        self.frequency = validate_frequency(rent.get("rent_frequency"))
        self.payment_method = validate_payment_method(rent.get("payment_method"))
        self.start_date = parse_date(rent.get("rent_start_date"), "rent_start_date")
        self.end_date = parse_date(rent.get("rent_end_date"), "rent_end_date")
        self.rent_changes = normalize_rent_changes(rent_changes)

        validate_date_range(self.start_date, self.end_date)
        validate_lead_time(self.start_date, self.payment_method.lead_days)
        self._frozen = True

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_frozen", False):
            raise AttributeError(f"{type(self).__name__} is read-only")
        super().__setattr__(name, value)

    def generate(self) -> List[PaymentRecord]:
        """
        Build the payment schedule from scratch.

        Occurrences step from start_date by the frequency while <= end_date.
        Each payment carries the rent in effect on its occurrence date and
        is initiated lead_days earlier, which can put the first payment
        before start_date.
        """
        lead_days = self.payment_method.lead_days
        current_amount = self.amount
        cursor = 0
        payments = []

        for due_date in step_dates(self.start_date, self.end_date, self.frequency.step):
            cursor, current_amount = apply_rent_changes(
                self.rent_changes, cursor, current_amount, due_date
            )
            payments.append(
                PaymentRecord(
                    payment_date=subtract_days(due_date, lead_days),
                    due_date=due_date,
                    amount=current_amount,
                    method=self.payment_method,
                )
            )

        return payments

    calculate_payment_dates = generate

    def __repr__(self) -> str:
        return (
            f"RentSchedule(amount={self.amount!r}, frequency={self.frequency.value!r}, "
            f"start_date={self.start_date}, end_date={self.end_date}, "
            f"payment_method={self.payment_method.value!r}, changes={len(self.rent_changes)})"
        )
