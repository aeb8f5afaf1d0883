"""POST /v1/schedule - rent payment schedule endpoint"""

import time
import logging
from fastapi import APIRouter, HTTPException, Request

from rent_scheduler.api.v1.schemas import ScheduleRequest, ScheduleResponse, PaymentSchema
from rent_scheduler.api.dependencies import get_request_id
from rent_scheduler.config import settings
from rent_scheduler.domain.schedule import RentSchedule
from rent_scheduler.domain.exceptions import InvalidInputError, InvalidDateError
from rent_scheduler.infrastructure.observability.metrics import record_schedule, record_rejection
from rent_scheduler.infrastructure.observability.logging import log_schedule, log_rejection

router = APIRouter()


@router.post("/schedule", response_model=ScheduleResponse)
def create_schedule(request_body: ScheduleRequest, request: Request):
    """
    Calculate rent payment dates and amounts.

    Flow:
    1. Build and validate the rent agreement
    2. Generate the payment schedule
    3. Record metrics and logs
    4. Return the schedule
    """
    start_time = time.time()
    request_id = get_request_id(request)

    rent = request_body.model_dump(exclude={"rent_changes"})
    rent_changes = [change.model_dump() for change in request_body.rent_changes]

    try:
        # 1. Validate input
        schedule = RentSchedule(rent, rent_changes=rent_changes)

        # 2. Generate payments
        payments = schedule.generate()

    except (InvalidInputError, InvalidDateError) as e:
        record_rejection(e)
        log_rejection(request_id, e)
        raise HTTPException(status_code=400, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    # 3. Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    frequency = schedule.frequency.value
    payment_method = schedule.payment_method.value
    record_schedule(frequency, payment_method, len(payments))
    log_schedule(request_id, frequency, payment_method, len(payments), duration_ms)

    return ScheduleResponse(
        frequency=frequency,
        payment_method=payment_method,
        currency=settings.currency,
        payment_count=len(payments),
        total_amount=sum(payment.amount for payment in payments),
        payments=[
            PaymentSchema(
                payment_date=payment.payment_date,
                due_date=payment.due_date,
                amount=payment.amount,
                method=payment.method.value,
            )
            for payment in payments
        ],
    )
