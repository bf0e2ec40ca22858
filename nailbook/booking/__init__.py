from nailbook.booking.pricing import PricingEngine, UnknownCodeWarning, derive
from nailbook.booking.state import (
    BodyPart,
    BookingState,
    CustomerInfo,
    MainService,
    RemovalKind,
    ServiceDetail,
    WizardStep,
)
from nailbook.booking.wizard import ValidationError, WizardController, advance, confirm, retreat

__all__ = [
    "BookingState",
    "ServiceDetail",
    "CustomerInfo",
    "MainService",
    "BodyPart",
    "RemovalKind",
    "WizardStep",
    "PricingEngine",
    "UnknownCodeWarning",
    "derive",
    "WizardController",
    "ValidationError",
    "advance",
    "retreat",
    "confirm",
]
