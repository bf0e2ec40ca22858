"""Shared test fixtures and helpers."""

from dataclasses import replace
from datetime import date
from typing import Optional

import pytest

from nailbook.booking.pricing import PricingEngine
from nailbook.booking.state import (
    BookingState,
    WizardStep,
    increment_extension,
    set_extension,
    set_main_service,
    set_style,
)
from nailbook.booking.wizard import WizardController

# Mid-month, so the default booking window (rest of month) is 21 days
TODAY = date(2025, 3, 10)


@pytest.fixture
def state():
    return BookingState()


@pytest.fixture
def engine():
    return PricingEngine()


@pytest.fixture
def controller():
    return WizardController(today=TODAY, session_id="BOOK-test")


@pytest.fixture
def patterned_hand_state():
    """Hand service, design-pattern style, extension x3."""
    s = set_main_service(BookingState(), "hand")
    s = set_style(s, "hand", "design-pattern")
    s = set_extension(s, "hand", True)
    s = increment_extension(s, "hand")
    return increment_extension(s, "hand")


def make_state(
    step: WizardStep = WizardStep.SERVICE,
    main_service: Optional[str] = "hand",
    stylist: Optional[str] = None,
    day: Optional[date] = None,
    time: Optional[str] = None,
) -> BookingState:
    """Helper to build a state at a given step with the given selections."""
    s = set_main_service(BookingState(), main_service)
    return replace(s, step=step, stylist=stylist, date=day, time=time)
