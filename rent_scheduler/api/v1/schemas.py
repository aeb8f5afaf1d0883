"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from typing import Any, List, Optional

from rent_scheduler.config import settings
from rent_scheduler.domain.models import Amount


class RentChangeSchema(BaseModel):
    """Mid-lease rent adjustment as submitted by the client"""

    rent_amount: Any = Field(..., description="New rent amount, must be positive")
    effective_date: Any = Field(..., description="YYYY-MM-DD date the new amount applies from")


class ScheduleRequest(BaseModel):
    """
    Request body for POST /v1/schedule.

    Field values are forwarded untouched; RentSchedule is the single place
    where amounts, enums and dates are validated.
    """

    rent_amount: Any = Field(..., description="Base rent amount")
    rent_frequency: Any = Field(..., description="weekly, fortnightly or monthly")
    rent_start_date: Any = Field(..., description="YYYY-MM-DD")
    rent_end_date: Any = Field(..., description="YYYY-MM-DD")
    payment_method: Optional[Any] = Field(None, description="instant, credit_card or bank_transfer")
    rent_changes: List[RentChangeSchema] = Field(default_factory=list, max_length=settings.max_rent_changes)


class PaymentSchema(BaseModel):
    """Single payment in a rent schedule"""

    payment_date: date
    due_date: date
    amount: Amount
    method: str


class ScheduleResponse(BaseModel):
    """Response for POST /v1/schedule"""

    frequency: str
    payment_method: str
    currency: str
    payment_count: int
    total_amount: Amount
    payments: List[PaymentSchema]
