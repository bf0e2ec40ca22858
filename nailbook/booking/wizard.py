"""
Step-gated wizard over BookingState.

The wizard has four steps (Service -> Stylist -> Time -> Confirm) and
only two transitions, ``advance`` and ``retreat``, each moving a single
step. Every ``advance`` is guarded by a predicate on the state. A failed
guard is an expected outcome, so ``advance`` returns a ValidationError
instead of raising it and the state stays where it was.

Usage:
    result = advance(state)
    if isinstance(result, ValidationError):
        print(result.message)
    else:
        state = result
"""

from dataclasses import dataclass, replace
from datetime import date, datetime, timezone
from typing import Callable, Optional, Union

from nailbook.booking.pricing import PricingEngine, default_engine
from nailbook.booking.state import BookingState, WizardStep, set_date, set_stylist, set_time
from nailbook.booking.summary import build_booking_request
from nailbook.catalog.stylists import get_stylist
from nailbook.catalog.timeslots import get_selectable_dates, get_time_slot, is_slot_full
from nailbook.logging_context import get_session_logger, new_session_id, set_session_id
from nailbook.schemas.booking_schema import BookingRequest, Quote

logger = get_session_logger(__name__)

MSG_SELECT_SERVICE = "Please select at least one service."
MSG_SELECT_STYLIST = "Please select a stylist."
MSG_SELECT_DATE_TIME = "Please select a date and time."
MSG_SLOT_FULL = "The {} slot is fully booked for foot services."


class ValidationError(Exception):
    """A step's guard failed. Recoverable: the caller re-prompts."""

    def __init__(self, step: WizardStep, message: str) -> None:
        super().__init__(message)
        self.step = step
        self.message = message

    def __repr__(self) -> str:
        return f"ValidationError(step={self.step.name}, message={self.message!r})"


Guard = Callable[[BookingState, PricingEngine], Optional[str]]


def _service_selected(state: BookingState, engine: PricingEngine) -> Optional[str]:
    # Duration, not price: a zero-price style is still a selection
    if engine.derive(state).duration <= 0:
        return MSG_SELECT_SERVICE
    return None


def _stylist_selected(state: BookingState, engine: PricingEngine) -> Optional[str]:
    if not state.stylist:
        return MSG_SELECT_STYLIST
    return None


def _date_and_time_selected(state: BookingState, engine: PricingEngine) -> Optional[str]:
    if state.date is None or not state.time:
        return MSG_SELECT_DATE_TIME
    return None


STEP_GUARDS: dict[WizardStep, Guard] = {
    WizardStep.SERVICE: _service_selected,
    WizardStep.STYLIST: _stylist_selected,
    WizardStep.TIME: _date_and_time_selected,
}


def check_step(
    state: BookingState, step: WizardStep, engine: Optional[PricingEngine] = None
) -> Optional[ValidationError]:
    """Run the guard for leaving ``step``. Returns None when it passes."""
    guard = STEP_GUARDS.get(step)
    if guard is None:
        return None
    message = guard(state, engine or default_engine)
    return ValidationError(step, message) if message else None


def advance(
    state: BookingState, engine: Optional[PricingEngine] = None
) -> Union[BookingState, ValidationError]:
    """Move one step forward if the current step's guard passes.

    On the confirm step there is nowhere further to go and the state is
    returned unchanged; finishing the booking is ``confirm``.
    """
    if state.step == WizardStep.CONFIRM:
        return state
    error = check_step(state, state.step, engine)
    if error is not None:
        return error
    return replace(state, step=WizardStep(state.step + 1))


def retreat(state: BookingState) -> BookingState:
    """Move one step back. A no-op on the first step."""
    if state.step == WizardStep.SERVICE:
        return state
    return replace(state, step=WizardStep(state.step - 1))


def confirm(
    state: BookingState, engine: Optional[PricingEngine] = None
) -> Union[BookingRequest, ValidationError]:
    """
    Finish the booking from the confirm step.

    Every guard is checked again, since a date changed on the confirm
    step clears the time. Returns the submission payload on success.
    """
    if state.step != WizardStep.CONFIRM:
        return ValidationError(state.step, "Finish the previous steps before confirming.")
    for step in STEP_GUARDS:
        error = check_step(state, step, engine)
        if error is not None:
            return error
    return build_booking_request(state, engine)


@dataclass
class StepEntry:
    """Recorded history entry for a step visit."""
    step: WizardStep
    entered_at: datetime


class WizardController:
    """
    Owns the current BookingState of one session and drives the wizard.

    Every change replaces the state wholesale, and previous states are
    kept so the last change can be undone. Actions that can be refused
    return ``(ok, message)``.
    """

    def __init__(
        self,
        state: Optional[BookingState] = None,
        engine: Optional[PricingEngine] = None,
        session_id: Optional[str] = None,
        today: Optional[date] = None,
    ) -> None:
        self.engine = engine or default_engine
        self.session_id = session_id or new_session_id()
        self.today = today
        self.confirmed_request: Optional[BookingRequest] = None
        self._state = state or BookingState()
        self._undo_stack: list[BookingState] = []
        self._trace: list[StepEntry] = [
            StepEntry(step=self._state.step, entered_at=datetime.now(timezone.utc))
        ]
        self._bind_session()
        logger.debug("Session started at step %s", self._state.step.label)

    @property
    def state(self) -> BookingState:
        return self._state

    @property
    def step(self) -> WizardStep:
        return self._state.step

    @property
    def quote(self) -> Quote:
        """Totals for the current state, re-derived on every access."""
        return self.engine.derive(self._state)

    def _bind_session(self) -> None:
        # Several controllers may share one context; log under our own id
        set_session_id(self.session_id)

    def _full_slot_message(self) -> Optional[str]:
        """Refusal for a selected slot that the current services cannot use."""
        if not self._state.time:
            return None
        slot = get_time_slot(self._state.time)
        if slot is not None and is_slot_full(slot, self._state.includes_foot_service()):
            return MSG_SLOT_FULL.format(slot.label)
        return None

    def _replace(self, new_state: BookingState) -> BookingState:
        if new_state == self._state:
            return self._state
        self._bind_session()
        self._undo_stack.append(self._state)
        if new_state.step != self._state.step:
            self._trace.append(
                StepEntry(step=new_state.step, entered_at=datetime.now(timezone.utc))
            )
            logger.debug(
                "Step transition: %s -> %s", self._state.step.label, new_state.step.label
            )
        self._state = new_state
        return self._state

    def apply(self, update: Callable[..., BookingState], *args, **kwargs) -> BookingState:
        """Apply a pure mutation such as ``set_style`` to the current state."""
        return self._replace(update(self._state, *args, **kwargs))

    def advance(self) -> tuple[bool, str]:
        self._bind_session()
        result = advance(self._state, self.engine)
        if isinstance(result, ValidationError):
            logger.info("Advance rejected on %s: %s", result.step.label, result.message)
            return False, result.message
        if self.step == WizardStep.TIME:
            # The main service may have changed since the slot was picked
            message = self._full_slot_message()
            if message:
                logger.info("Advance rejected on %s: %s", self.step.label, message)
                return False, message
        self._replace(result)
        return True, f"Moved to {self.step.label}."

    def retreat(self) -> WizardStep:
        self._replace(retreat(self._state))
        return self.step

    def select_stylist(self, stylist_id: str) -> tuple[bool, str]:
        stylist = get_stylist(stylist_id)
        if stylist is None:
            return False, f"No stylist called '{stylist_id}'."
        self.apply(set_stylist, stylist.id)
        return True, f"Stylist: {stylist.name}"

    def select_date(self, day: date) -> tuple[bool, str]:
        """Pick a date from the bookable window. Clears the selected time."""
        if day not in get_selectable_dates(self.today):
            return False, f"{day.isoformat()} is not available for booking."
        self.apply(set_date, day)
        return True, f"Date: {day.isoformat()}"

    def select_time(self, label: str) -> tuple[bool, str]:
        """Pick a time slot on the selected date. Full slots are refused for foot services."""
        if self._state.date is None:
            return False, "Please select a date first."
        slot = get_time_slot(label)
        if slot is None:
            return False, f"'{label}' is not one of our time slots."
        if is_slot_full(slot, self._state.includes_foot_service()):
            return False, MSG_SLOT_FULL.format(slot.label)
        self.apply(set_time, slot.label)
        return True, f"Time: {slot.label}"

    def confirm(
        self, submit: Optional[Callable[[BookingRequest], None]] = None
    ) -> tuple[bool, str]:
        """
        Confirm the booking and hand the payload to ``submit``.

        Submission belongs to the caller; this only builds the payload
        and reports whether the booking could be confirmed.
        """
        self._bind_session()
        result = confirm(self._state, self.engine)
        if isinstance(result, ValidationError):
            logger.info("Confirm rejected: %s", result.message)
            return False, result.message
        message = self._full_slot_message()
        if message:
            logger.info("Confirm rejected: %s", message)
            return False, message
        self.confirmed_request = result
        logger.info(
            "Booking confirmed: %s with %s on %s %s",
            result.main_service or "add-ons only", result.stylist_id,
            result.date.isoformat(), result.time,
        )
        if submit is not None:
            submit(result)
        return True, "Thank you for your booking."

    def undo(self) -> bool:
        """
        Restore the state before the last change.

        Returns False when there is nothing to undo, or once the booking
        is confirmed: the payload has already been submitted.
        """
        self._bind_session()
        if self.confirmed_request is not None:
            logger.info("Undo refused: booking already confirmed")
            return False
        if not self._undo_stack:
            return False
        previous = self._undo_stack.pop()
        if previous.step != self._state.step:
            self._trace.append(
                StepEntry(step=previous.step, entered_at=datetime.now(timezone.utc))
            )
        self._state = previous
        return True

    def get_step_trace(self) -> list[str]:
        """Return the ordered list of step labels visited."""
        return [entry.step.label for entry in self._trace]

    def is_complete(self) -> bool:
        return self.confirmed_request is not None
