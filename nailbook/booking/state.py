"""
Immutable booking state and the mutation operations that replace it.

Every selection the customer makes in the wizard is held in a single
frozen ``BookingState``. Mutation functions never touch the value they
are given; they return a new state built with ``dataclasses.replace``,
so any earlier state can be kept for history or undo.

Usage:
    state = BookingState()
    state = set_main_service(state, "hand")
    state = set_style(state, "hand", "design-pattern")
    state = set_extension(state, "hand", True)
    state = increment_extension(state, "hand")
"""

import logging
from dataclasses import dataclass, field, fields, replace
from datetime import date as Date
from enum import Enum, IntEnum
from typing import Optional, Union

logger = logging.getLogger(__name__)

MIN_EXTENSION_COUNT = 1
MAX_EXTENSION_COUNT = 10


class WizardStep(IntEnum):
    """Pages of the booking wizard, in order."""
    SERVICE = 1
    STYLIST = 2
    TIME = 3
    CONFIRM = 4

    @property
    def label(self) -> str:
        return self.name.title()


class MainService(str, Enum):
    """Base service package."""
    HAND = "hand"
    FOOT = "foot"
    COMBO = "combo"


class BodyPart(str, Enum):
    """Body part that carries its own service configuration."""
    HAND = "hand"
    FOOT = "foot"


class RemovalKind(str, Enum):
    """How a previous manicure or pedicure is removed."""
    NONE = "none"
    LOCAL = "local"
    OTHER = "other"


# Body parts configured for each base service
PARTS_BY_SERVICE: dict[MainService, tuple[BodyPart, ...]] = {
    MainService.HAND: (BodyPart.HAND,),
    MainService.FOOT: (BodyPart.FOOT,),
    MainService.COMBO: (BodyPart.HAND, BodyPart.FOOT),
}

# Parts whose addons replace one another instead of combining
EXCLUSIVE_ADDON_PARTS: frozenset[BodyPart] = frozenset({BodyPart.FOOT})


@dataclass(frozen=True)
class ServiceDetail:
    """Configuration of one body part."""

    removal: RemovalKind = RemovalKind.NONE
    style: Optional[str] = None
    extension: bool = False
    extension_count: int = MIN_EXTENSION_COUNT
    addons: tuple[str, ...] = ()


@dataclass(frozen=True)
class CustomerInfo:
    """Contact details typed in on the confirm step. Not validated here."""

    name: str = ""
    phone: str = ""
    line_id: str = ""
    notes: str = ""


@dataclass(frozen=True)
class BookingState:
    """All selections of one booking session plus the current wizard step."""

    step: WizardStep = WizardStep.SERVICE
    main_service: Optional[MainService] = None
    hand_details: ServiceDetail = field(default_factory=ServiceDetail)
    foot_details: ServiceDetail = field(default_factory=ServiceDetail)
    care_services: tuple[str, ...] = ()
    wax_services: tuple[str, ...] = ()
    stylist: Optional[str] = None
    date: Optional[Date] = None
    time: Optional[str] = None
    customer: CustomerInfo = field(default_factory=CustomerInfo)

    def details_for(self, part: Union[BodyPart, str]) -> ServiceDetail:
        """Return the ServiceDetail of a body part."""
        if BodyPart(part) == BodyPart.HAND:
            return self.hand_details
        return self.foot_details

    def relevant_parts(self) -> tuple[BodyPart, ...]:
        """Body parts whose details count toward the current main service."""
        if self.main_service is None:
            return ()
        return PARTS_BY_SERVICE[self.main_service]

    def includes_foot_service(self) -> bool:
        return BodyPart.FOOT in self.relevant_parts()


_DETAIL_FIELDS: dict[BodyPart, str] = {
    BodyPart.HAND: "hand_details",
    BodyPart.FOOT: "foot_details",
}

_CUSTOMER_FIELDS = frozenset(f.name for f in fields(CustomerInfo))


def _toggle(codes: tuple[str, ...], code: str) -> tuple[str, ...]:
    """Add a code if absent, remove it if present. Keeps selection order."""
    if code in codes:
        return tuple(c for c in codes if c != code)
    return codes + (code,)


def _clamp_extension_count(count: int) -> int:
    clamped = max(MIN_EXTENSION_COUNT, min(MAX_EXTENSION_COUNT, count))
    if clamped != count:
        logger.debug(
            "Extension count %d clamped to %d (allowed %d-%d)",
            count, clamped, MIN_EXTENSION_COUNT, MAX_EXTENSION_COUNT,
        )
    return clamped


def _update_details(
    state: BookingState, part: Union[BodyPart, str], **changes
) -> BookingState:
    body_part = BodyPart(part)
    attr = _DETAIL_FIELDS[body_part]
    details = replace(getattr(state, attr), **changes)
    return replace(state, **{attr: details})


# --- Service step ---------------------------------------------------------


def set_main_service(
    state: BookingState, service: Optional[Union[MainService, str]]
) -> BookingState:
    """Select the base service. Detail sub-structures are kept as they are."""
    main = MainService(service) if service is not None else None
    return replace(state, main_service=main)


def set_removal(
    state: BookingState, part: Union[BodyPart, str], removal: Union[RemovalKind, str]
) -> BookingState:
    return _update_details(state, part, removal=RemovalKind(removal))


def set_style(
    state: BookingState, part: Union[BodyPart, str], style: Optional[str]
) -> BookingState:
    """Choose a style code for a part, or None to clear it."""
    return _update_details(state, part, style=style or None)


def set_extension(
    state: BookingState, part: Union[BodyPart, str], enabled: bool
) -> BookingState:
    """Turn extensions on or off. The unit count is left untouched."""
    return _update_details(state, part, extension=bool(enabled))


def set_extension_count(
    state: BookingState, part: Union[BodyPart, str], count: int
) -> BookingState:
    return _update_details(state, part, extension_count=_clamp_extension_count(count))


def increment_extension(state: BookingState, part: Union[BodyPart, str]) -> BookingState:
    current = state.details_for(part).extension_count
    return set_extension_count(state, part, current + 1)


def decrement_extension(state: BookingState, part: Union[BodyPart, str]) -> BookingState:
    current = state.details_for(part).extension_count
    return set_extension_count(state, part, current - 1)


def toggle_addon(
    state: BookingState, part: Union[BodyPart, str], code: str
) -> BookingState:
    """
    Select or deselect an add-on for a body part.

    Foot add-ons are mutually exclusive: choosing one replaces whatever
    was selected before. Hand add-ons combine freely.
    """
    body_part = BodyPart(part)
    current = state.details_for(body_part).addons
    if code in current:
        addons = tuple(c for c in current if c != code)
    elif body_part in EXCLUSIVE_ADDON_PARTS:
        addons = (code,)
    else:
        addons = current + (code,)
    return _update_details(state, body_part, addons=addons)


def toggle_care_service(state: BookingState, code: str) -> BookingState:
    return replace(state, care_services=_toggle(state.care_services, code))


def toggle_wax_service(state: BookingState, code: str) -> BookingState:
    return replace(state, wax_services=_toggle(state.wax_services, code))


# --- Stylist / time / confirm steps -----------------------------------------


def set_stylist(state: BookingState, stylist_id: Optional[str]) -> BookingState:
    return replace(state, stylist=stylist_id or None)


def set_date(state: BookingState, day: Optional[Date]) -> BookingState:
    """Pick a calendar date. Any selected time slot is cleared."""
    return replace(state, date=day, time=None)


def set_time(state: BookingState, time: Optional[str]) -> BookingState:
    return replace(state, time=time or None)


def set_customer_field(state: BookingState, name: str, value: str) -> BookingState:
    """Set one contact field (name, phone, line_id or notes)."""
    if name not in _CUSTOMER_FIELDS:
        raise ValueError(
            f"Unknown customer field: {name!r}. Valid fields: {sorted(_CUSTOMER_FIELDS)}"
        )
    return replace(state, customer=replace(state.customer, **{name: value}))
