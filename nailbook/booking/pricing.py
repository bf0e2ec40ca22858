"""
Price and duration derivation from a BookingState.

The rule tables are static and keyed identically for price (whole NT$)
and duration (minutes). ``derive`` is a pure function of the state: it
can be re-run after every change and always gives the same answer.

An unknown code never breaks pricing. It contributes zero, is logged at
WARNING and is emitted as an ``UnknownCodeWarning``, so drift between
the option catalogues and the tables shows up in logs and tests.

Usage:
    quote = derive(state)
    print(quote.price, quote.duration)
"""

import logging
import warnings
from typing import Mapping, Optional

from nailbook.booking.state import BodyPart, BookingState
from nailbook.schemas.booking_schema import LineItem, Quote

logger = logging.getLogger(__name__)

RuleTable = Mapping[str, Mapping[str, int]]

PRICE_TABLE: dict[str, dict[str, int]] = {
    "base": {"hand": 800, "foot": 1000, "combo": 1500},
    "removal": {"none": 0, "local": 0, "other": 100},
    "style": {
        "solid-cat": 0, "solid-mirror": 100, "solid-glitter": 200,
        "design-french": 300, "design-gradient": 400, "design-pattern": 500,
    },
    "care": {
        "hand-edge": 400, "hand-deep": 600,
        "foot-edge": 500, "foot-care": 800, "foot-deep": 1000,
    },
    "wax": {
        "half-arm": 500, "full-arm": 800, "half-leg": 700, "full-leg": 1200,
        "fingers": 200, "foot-fingers": 200, "private": 1000,
    },
    "addons": {"hand-deep": 600, "foot-care": 400, "foot-deep": 899},
}

# Removal time is part of the base service time
DURATION_TABLE: dict[str, dict[str, int]] = {
    "base": {"hand": 60, "foot": 90, "combo": 120},
    "removal": {"none": 0, "local": 0, "other": 0},
    "style": {
        "solid-cat": 0, "solid-mirror": 5, "solid-glitter": 10,
        "design-french": 15, "design-gradient": 20, "design-pattern": 30,
    },
    "care": {
        "hand-edge": 30, "hand-deep": 45,
        "foot-edge": 30, "foot-care": 60, "foot-deep": 75,
    },
    "wax": {
        "half-arm": 30, "full-arm": 45, "half-leg": 45, "full-leg": 60,
        "fingers": 15, "foot-fingers": 15, "private": 45,
    },
    "addons": {"hand-deep": 45, "foot-care": 60, "foot-deep": 75},
}

EXTENSION_UNIT_PRICE = 90
EXTENSION_UNIT_MINUTES = 5

# Frames from warnings.warn up to whoever called derive or itemize:
# _item -> _itemize -> derive/itemize -> caller
_WARNING_STACKLEVEL = 4


class UnknownCodeWarning(UserWarning):
    """A selected code has no entry in a rule table and was priced at zero."""

    def __init__(self, category: str, code: str) -> None:
        self.category = category
        self.code = code
        super().__init__(f"Unknown {category} code {code!r}; contributing zero")


def _validate_tables(prices: RuleTable, durations: RuleTable) -> None:
    """Price and duration tables must share categories and codes."""
    if set(prices) != set(durations):
        raise ValueError(
            f"Price and duration categories differ: {sorted(set(prices) ^ set(durations))}"
        )
    for category in prices:
        mismatch = set(prices[category]) ^ set(durations[category])
        if mismatch:
            raise ValueError(
                f"Price and duration codes differ in '{category}': {sorted(mismatch)}"
            )


class PricingEngine:
    """
    Derives totals from a BookingState using fixed rule tables.

    The default engine uses the module tables. Alternative tables can be
    injected, which is how catalogue drift is exercised in tests.
    """

    def __init__(
        self,
        prices: Optional[RuleTable] = None,
        durations: Optional[RuleTable] = None,
        extension_price: int = EXTENSION_UNIT_PRICE,
        extension_minutes: int = EXTENSION_UNIT_MINUTES,
    ) -> None:
        self.prices = PRICE_TABLE if prices is None else prices
        self.durations = DURATION_TABLE if durations is None else durations
        _validate_tables(self.prices, self.durations)
        self.extension_price = extension_price
        self.extension_minutes = extension_minutes

    def _has(self, category: str, code: str) -> bool:
        return code in self.prices.get(category, {}) and code in self.durations.get(category, {})

    def _item(
        self, category: str, code: str, part: Optional[BodyPart] = None
    ) -> LineItem:
        if not self._has(category, code):
            logger.warning("Unknown %s code '%s' priced at zero", category, code)
            warnings.warn(UnknownCodeWarning(category, code), stacklevel=_WARNING_STACKLEVEL)
            price = duration = 0
        else:
            price = self.prices[category][code]
            duration = self.durations[category][code]
        return LineItem(
            category=category,
            code=code,
            part=part.value if part is not None else None,
            price=price,
            duration=duration,
        )

    def _selected_codes(self, state: BookingState) -> list[tuple[str, str, Optional[BodyPart]]]:
        """(category, code, part) for every table-priced selection, in pricing order."""
        selected: list[tuple[str, str, Optional[BodyPart]]] = []
        if state.main_service is not None:
            selected.append(("base", state.main_service.value, None))
            for part in state.relevant_parts():
                details = state.details_for(part)
                selected.append(("removal", details.removal.value, part))
                if details.style:
                    selected.append(("style", details.style, part))
                # Extension sits between style and add-ons; it has no code
                if details.extension:
                    selected.append(("extension", "extension", part))
                for code in details.addons:
                    selected.append(("addons", code, part))
        selected.extend(("care", code, None) for code in state.care_services)
        selected.extend(("wax", code, None) for code in state.wax_services)
        return selected

    def _itemize(self, state: BookingState) -> list[LineItem]:
        items: list[LineItem] = []
        for category, code, part in self._selected_codes(state):
            if category == "extension":
                count = state.details_for(part).extension_count
                items.append(LineItem(
                    category="extension",
                    code="extension",
                    part=part.value,
                    quantity=count,
                    price=self.extension_price * count,
                    duration=self.extension_minutes * count,
                ))
                continue
            items.append(self._item(category, code, part))
        return items

    def itemize(self, state: BookingState) -> list[LineItem]:
        """Return every contribution to the quote as an ordered line item."""
        return self._itemize(state)

    def derive(self, state: BookingState) -> Quote:
        """Compute total price and duration. Pure and idempotent."""
        items = self._itemize(state)
        return Quote(
            price=sum(item.price for item in items),
            duration=sum(item.duration for item in items),
        )

    def unknown_codes(self, state: BookingState) -> list[tuple[str, str]]:
        """List (category, code) selections missing from the tables, without warning."""
        return [
            (category, code)
            for category, code, _ in self._selected_codes(state)
            if category != "extension" and not self._has(category, code)
        ]


default_engine = PricingEngine()


# Bound methods rather than wrappers, so unknown-code warnings point at
# the caller
derive = default_engine.derive
itemize = default_engine.itemize
