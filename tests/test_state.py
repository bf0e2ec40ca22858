"""Tests for BookingState and its mutation operations."""

import dataclasses
from datetime import date

import pytest

from nailbook.booking.state import (
    MAX_EXTENSION_COUNT,
    MIN_EXTENSION_COUNT,
    BodyPart,
    BookingState,
    MainService,
    RemovalKind,
    WizardStep,
    decrement_extension,
    increment_extension,
    set_customer_field,
    set_date,
    set_extension,
    set_extension_count,
    set_main_service,
    set_removal,
    set_style,
    set_stylist,
    set_time,
    toggle_addon,
    toggle_care_service,
    toggle_wax_service,
)


class TestDefaults:
    def test_starts_on_service_step(self, state):
        assert state.step == WizardStep.SERVICE
        assert state.step == 1

    def test_nothing_selected(self, state):
        assert state.main_service is None
        assert state.care_services == ()
        assert state.wax_services == ()
        assert state.stylist is None
        assert state.date is None
        assert state.time is None

    def test_detail_defaults(self, state):
        for details in (state.hand_details, state.foot_details):
            assert details.removal == RemovalKind.NONE
            assert details.style is None
            assert details.extension is False
            assert details.extension_count == 1
            assert details.addons == ()

    def test_customer_defaults_empty(self, state):
        assert state.customer.name == ""
        assert state.customer.line_id == ""


class TestImmutability:
    def test_state_is_frozen(self, state):
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.stylist = "amy"

    def test_mutation_returns_new_state(self, state):
        updated = set_main_service(state, "hand")
        assert updated is not state
        assert state.main_service is None
        assert updated.main_service == MainService.HAND

    def test_detail_update_leaves_other_part_alone(self, state):
        updated = set_style(state, "hand", "design-french")
        assert updated.hand_details.style == "design-french"
        assert updated.foot_details is state.foot_details


class TestMainService:
    def test_accepts_enum_or_string(self, state):
        assert set_main_service(state, MainService.COMBO).main_service == MainService.COMBO
        assert set_main_service(state, "foot").main_service == MainService.FOOT

    def test_none_clears(self, state):
        assert set_main_service(set_main_service(state, "hand"), None).main_service is None

    def test_invalid_service_raises(self, state):
        with pytest.raises(ValueError):
            set_main_service(state, "care")

    def test_switching_keeps_details(self, state):
        s = set_style(set_main_service(state, "hand"), "hand", "solid-glitter")
        s = set_main_service(s, "foot")
        assert s.hand_details.style == "solid-glitter"

    def test_relevant_parts(self, state):
        assert state.relevant_parts() == ()
        assert set_main_service(state, "hand").relevant_parts() == (BodyPart.HAND,)
        assert set_main_service(state, "foot").relevant_parts() == (BodyPart.FOOT,)
        assert set_main_service(state, "combo").relevant_parts() == (BodyPart.HAND, BodyPart.FOOT)

    def test_includes_foot_service(self, state):
        assert not set_main_service(state, "hand").includes_foot_service()
        assert set_main_service(state, "combo").includes_foot_service()


class TestDetails:
    def test_set_removal(self, state):
        assert set_removal(state, "foot", "other").foot_details.removal == RemovalKind.OTHER

    def test_invalid_removal_raises(self, state):
        with pytest.raises(ValueError):
            set_removal(state, "hand", "acid")

    def test_invalid_part_raises(self, state):
        with pytest.raises(ValueError):
            set_style(state, "knee", "solid-cat")

    def test_empty_style_clears(self, state):
        s = set_style(state, "hand", "solid-cat")
        assert set_style(s, "hand", "").hand_details.style is None
        assert set_style(s, "hand", None).hand_details.style is None

    def test_disabling_extension_keeps_count(self, state):
        s = set_extension_count(set_extension(state, "hand", True), "hand", 4)
        s = set_extension(s, "hand", False)
        assert s.hand_details.extension is False
        assert s.hand_details.extension_count == 4


class TestExtensionClamp:
    def test_increment_stops_at_max(self, state):
        s = state
        for _ in range(15):
            s = increment_extension(s, "hand")
        assert s.hand_details.extension_count == MAX_EXTENSION_COUNT == 10

    def test_decrement_stops_at_min(self, state):
        s = decrement_extension(state, "foot")
        assert s.foot_details.extension_count == MIN_EXTENSION_COUNT == 1

    def test_increment_then_decrement(self, state):
        s = increment_extension(increment_extension(state, "hand"), "hand")
        assert decrement_extension(s, "hand").hand_details.extension_count == 2

    @pytest.mark.parametrize("raw,expected", [(0, 1), (-3, 1), (11, 10), (99, 10), (6, 6)])
    def test_direct_set_is_clamped(self, state, raw, expected):
        assert set_extension_count(state, "hand", raw).hand_details.extension_count == expected


class TestAddons:
    def test_foot_addons_are_exclusive(self, state):
        s = toggle_addon(state, "foot", "foot-care")
        s = toggle_addon(s, "foot", "foot-deep")
        assert s.foot_details.addons == ("foot-deep",)

    def test_toggling_selected_foot_addon_clears_it(self, state):
        s = toggle_addon(state, "foot", "foot-care")
        assert toggle_addon(s, "foot", "foot-care").foot_details.addons == ()

    def test_hand_addons_combine(self, state):
        s = toggle_addon(state, "hand", "hand-deep")
        s = toggle_addon(s, "hand", "hand-paraffin")
        assert s.hand_details.addons == ("hand-deep", "hand-paraffin")

    def test_hand_addon_toggles_off(self, state):
        s = toggle_addon(toggle_addon(state, "hand", "hand-deep"), "hand", "hand-deep")
        assert s.hand_details.addons == ()


class TestCareAndWaxToggles:
    def test_care_toggle_adds_and_removes(self, state):
        s = toggle_care_service(state, "hand-edge")
        s = toggle_care_service(s, "foot-care")
        assert s.care_services == ("hand-edge", "foot-care")
        assert toggle_care_service(s, "hand-edge").care_services == ("foot-care",)

    def test_wax_toggle_never_duplicates(self, state):
        s = toggle_wax_service(state, "private")
        s = toggle_wax_service(s, "private")
        s = toggle_wax_service(s, "private")
        assert s.wax_services == ("private",)

    def test_care_independent_of_main_service(self, state):
        s = toggle_care_service(state, "foot-deep")
        s = set_main_service(s, "hand")
        assert s.care_services == ("foot-deep",)


class TestScheduleAndCustomer:
    def test_set_stylist(self, state):
        assert set_stylist(state, "amy").stylist == "amy"
        assert set_stylist(state, "").stylist is None

    def test_set_date_clears_time(self, state):
        s = set_time(set_date(state, date(2025, 3, 11)), "10:30")
        assert s.time == "10:30"
        s = set_date(s, date(2025, 3, 12))
        assert s.date == date(2025, 3, 12)
        assert s.time is None

    def test_set_time(self, state):
        assert set_time(state, "19:30").time == "19:30"

    def test_set_customer_field(self, state):
        s = set_customer_field(state, "line_id", "@mei")
        s = set_customer_field(s, "notes", "Allergic to acetone")
        assert s.customer.line_id == "@mei"
        assert s.customer.notes == "Allergic to acetone"
        assert state.customer.line_id == ""

    def test_unknown_customer_field_raises(self, state):
        with pytest.raises(ValueError, match="Unknown customer field"):
            set_customer_field(state, "email", "a@b.c")

    def test_customer_not_validated(self, state):
        assert set_customer_field(state, "phone", "not a number").customer.phone == "not a number"

    def test_details_for_accepts_string(self, state):
        assert BookingState().details_for("foot") == state.foot_details
