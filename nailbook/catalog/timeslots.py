"""
Time-slot catalogue and selectable-date generation for the time step.

Seat counts are static here. In production they would come from the
salon's scheduling backend.
"""

import calendar
import logging
from datetime import date, timedelta
from typing import Optional

from nailbook.config import settings
from nailbook.schemas.catalog_schema import SlotCategory, TimeSlotOption

logger = logging.getLogger(__name__)

TIME_SLOTS: list[TimeSlotOption] = [
    TimeSlotOption(label="10:30", category=SlotCategory.NORMAL, seats=2),
    TimeSlotOption(label="11:00", category=SlotCategory.REPAIR, seats=3),
    TimeSlotOption(label="12:30", category=SlotCategory.NORMAL, seats=1),
    TimeSlotOption(label="13:00", category=SlotCategory.REPAIR, seats=3),
    TimeSlotOption(label="14:30", category=SlotCategory.NORMAL, seats=0),
    TimeSlotOption(label="15:00", category=SlotCategory.REPAIR, seats=3),
    TimeSlotOption(label="16:30", category=SlotCategory.NORMAL, seats=3),
    TimeSlotOption(label="18:30", category=SlotCategory.NORMAL, seats=3),
    TimeSlotOption(label="19:30", category=SlotCategory.OVERTIME, seats=3),
]


def get_time_slot(label: str) -> Optional[TimeSlotOption]:
    """Look up a slot by its label. Returns None if not in the catalogue."""
    normalized = label.strip()
    for slot in TIME_SLOTS:
        if slot.label == normalized:
            return slot
    return None


def is_slot_full(slot: TimeSlotOption, foot_service: bool) -> bool:
    """Seat counts only constrain foot and combo services."""
    return foot_service and slot.seats == 0


def is_low_availability(slot: TimeSlotOption, foot_service: bool) -> bool:
    """True when a foot service slot is full or nearly full."""
    return foot_service and slot.seats < settings.schedule.low_seats_threshold


def get_selectable_dates(today: Optional[date] = None) -> list[date]:
    """
    Dates the customer may book, starting tomorrow.

    By default the window runs to the end of the current month, so it is
    empty on the month's last day. ``BOOKING_WINDOW_DAYS`` replaces that
    with a fixed number of days.
    """
    today = today or date.today()
    window = settings.schedule.booking_window_days
    if window:
        last = today + timedelta(days=window)
    else:
        last = today.replace(day=calendar.monthrange(today.year, today.month)[1])
    days = (last - today).days
    return [today + timedelta(days=offset) for offset in range(1, days + 1)]
