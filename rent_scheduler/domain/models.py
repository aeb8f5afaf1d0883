"""Domain models - pure Python enums and dataclasses for rent scheduling"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Union

from dateutil.relativedelta import relativedelta

Amount = Union[int, float, Decimal]


class Frequency(str, Enum):
    """How often rent falls due"""

    WEEKLY = "weekly"
    FORTNIGHTLY = "fortnightly"
    MONTHLY = "monthly"

    @property
    def step(self) -> relativedelta:
        """Calendar offset between two consecutive occurrences"""
        if self is Frequency.WEEKLY:
            return relativedelta(days=7)
        if self is Frequency.FORTNIGHTLY:
            return relativedelta(days=14)
        return relativedelta(months=1)


class PaymentMethod(str, Enum):
    """How the tenant pays; each method needs a fixed processing lead time"""

    INSTANT = "instant"
    CREDIT_CARD = "credit_card"
    BANK_TRANSFER = "bank_transfer"

    @property
    def lead_days(self) -> int:
        return _LEAD_DAYS[self]


_LEAD_DAYS = {
    PaymentMethod.INSTANT: 0,
    PaymentMethod.CREDIT_CARD: 2,
    PaymentMethod.BANK_TRANSFER: 3,
}


@dataclass(frozen=True)
class RentChange:
    """New rent amount applying from effective_date onward (inclusive)"""

    amount: Amount
    effective_date: date


@dataclass(frozen=True)
class PaymentRecord:
    """Single payment in a rent schedule"""

    payment_date: date  # when funds must be initiated
    due_date: date  # occurrence date the payment settles on
    amount: Amount
    method: PaymentMethod
