"""Confirm-step read-back and the payload for the submission collaborator."""

from typing import Optional

from nailbook.booking.pricing import PricingEngine, default_engine
from nailbook.booking.state import BookingState
from nailbook.catalog.options import MAIN_SERVICE_OPTIONS, get_option_label
from nailbook.catalog.stylists import get_stylist
from nailbook.schemas.booking_schema import BookingRequest, BookingSummary, SummaryLine
from nailbook.utils import normalize_phone


def build_summary(
    state: BookingState, engine: Optional[PricingEngine] = None
) -> BookingSummary:
    """Collect everything the customer has chosen, with labels and totals."""
    engine = engine or default_engine
    items = engine.itemize(state)
    stylist = get_stylist(state.stylist) if state.stylist else None
    service = MAIN_SERVICE_OPTIONS.get(state.main_service.value) if state.main_service else None
    return BookingSummary(
        service_label=service.label if service else None,
        stylist_name=stylist.name if stylist else state.stylist,
        date=state.date,
        time=state.time,
        lines=[
            SummaryLine(
                label=get_option_label(item.category, item.code, item.part),
                part=item.part,
                quantity=item.quantity,
                price=item.price,
                duration=item.duration,
            )
            for item in items
            # Base service is already the headline; "no removal" is not a line
            if item.category != "base"
            and not (item.category == "removal" and item.code == "none")
        ],
        price=sum(item.price for item in items),
        duration=sum(item.duration for item in items),
    )


def build_booking_request(
    state: BookingState, engine: Optional[PricingEngine] = None
) -> BookingRequest:
    """
    Build the submission payload.

    Raises:
        ValueError: If stylist, date or time is missing. Callers are
            expected to pass the wizard guards first.
    """
    missing = [
        name for name, value in [
            ("stylist", state.stylist), ("date", state.date), ("time", state.time),
        ]
        if not value
    ]
    if missing:
        raise ValueError(f"Cannot build booking request, missing: {', '.join(missing)}")

    engine = engine or default_engine
    items = engine.itemize(state)
    return BookingRequest(
        main_service=state.main_service.value if state.main_service else None,
        stylist_id=state.stylist,
        date=state.date,
        time=state.time,
        price=sum(item.price for item in items),
        duration=sum(item.duration for item in items),
        items=items,
        customer_name=state.customer.name.strip(),
        customer_phone=normalize_phone(state.customer.phone),
        line_id=state.customer.line_id.strip(),
        notes=state.customer.notes.strip(),
    )
