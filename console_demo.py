"""
Offline console demo: walks the booking wizard from the terminal.

Drives the real WizardController, pricing engine and reference data.
No UI, no network. After every command the running total is printed,
the same way the booking bar shows it on every step.

Usage:
    python console_demo.py
    python console_demo.py --scenario combo
    python console_demo.py --scenario blocked
"""

import argparse
from datetime import date
from typing import Optional

from nailbook.booking.state import (
    decrement_extension,
    increment_extension,
    set_customer_field,
    set_extension,
    set_main_service,
    set_removal,
    set_style,
    toggle_addon,
    toggle_care_service,
    toggle_wax_service,
)
from nailbook.booking.summary import build_summary
from nailbook.booking.wizard import WizardController
from nailbook.catalog.stylists import get_all_stylists
from nailbook.catalog.timeslots import TIME_SLOTS, get_selectable_dates, is_low_availability, is_slot_full
from nailbook.config import settings
from nailbook.schemas.booking_schema import BookingRequest
from nailbook.utils import format_duration, format_price

GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
BLUE = "\033[94m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"

HELP_TEXT = """Commands:
  service hand|foot|combo|none      removal <part> none|local|other
  style <part> <code>|none          ext <part> on|off    ext+ <part>    ext- <part>
  addon <part> <code>               care <code>          wax <code>
  stylist <id>                      date <n>             time <HH:MM>
  name|phone|line|notes <value>     next   back   undo   show   confirm   help"""

CUSTOMER_COMMANDS = {"name": "name", "phone": "phone", "line": "line_id", "notes": "notes"}


class ConsoleSession:
    """Runs one booking session in the terminal."""

    # Pre-scripted scenarios for --scenario flag
    SCENARIOS: dict[str, list[str]] = {
        "hand": [
            "service hand",
            "style hand design-pattern",
            "ext hand on",
            "ext+ hand",
            "ext+ hand",
            "next",
            "stylist amy",
            "next",
            "date 1",
            "time 10:30",
            "next",
            "name Lin Mei",
            "phone 0912-345-678",
            "confirm",
        ],
        "combo": [
            "service combo",
            "removal foot other",
            "addon foot foot-care",
            "addon foot foot-deep",
            "care hand-edge",
            "next",
            "stylist bella",
            "next",
            "date 2",
            "time 14:30",
            "time 15:00",
            "next",
            "name Chen Yu",
            "phone +886 912 000 111",
            "confirm",
        ],
        "spa": [
            "care foot-deep",
            "wax half-leg",
            "wax fingers",
            "next",
            "stylist diana",
            "next",
            "date 1",
            "time 19:30",
            "next",
            "confirm",
        ],
        "blocked": [
            "next",
            "service foot",
            "next",
            "next",
            "stylist coco",
            "next",
            "next",
            "date 1",
            "time 11:00",
            "date 2",
            "next",
            "time 11:00",
            "next",
            "confirm",
        ],
    }

    MAX_INPUT_LENGTH = 200

    def __init__(self, today: Optional[date] = None) -> None:
        self.controller = WizardController(today=today)
        self.today = today
        self.submitted: list[BookingRequest] = []

    def say(self, text: str) -> None:
        print(f"{GREEN}{text}{RESET}")

    def warn(self, text: str) -> None:
        print(f"{YELLOW}{text}{RESET}")

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    def _banner(self, title: str) -> None:
        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  {settings.salon.name} - {title}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

    def _status(self) -> None:
        quote = self.controller.quote
        self.system_log(
            f"Step {int(self.controller.step)} ({self.controller.step.label}) | "
            f"Total {format_price(quote.price)} | {format_duration(quote.duration)}"
        )

    def run_scenario(self, scenario: str) -> bool:
        """Auto-play a pre-scripted scenario. Returns True if the booking was confirmed."""
        steps = self.SCENARIOS.get(scenario)
        if not steps:
            print(f"{RED}Unknown scenario: {scenario}{RESET}")
            return False

        self._banner(f"Scenario: {scenario}")
        for command in steps:
            if self.controller.is_complete():
                break
            print(f"\n{BLUE}[Customer] {RESET}{command}")
            self.handle(command)
            self._status()

        self._finish()
        return self.controller.is_complete()

    def run(self) -> None:
        self._banner("Booking Console")
        print(HELP_TEXT)
        self._status()

        while not self.controller.is_complete():
            command = input(f"\n{BLUE}[Customer] {RESET}").strip()
            if not command:
                continue
            if command.lower() in ("quit", "exit", "q"):
                print(f"\n{DIM}Session ended.{RESET}")
                return
            if len(command) > self.MAX_INPUT_LENGTH:
                self.warn("That command is too long.")
                continue
            self.handle(command)
            self._status()

        self._finish()

    def _finish(self) -> None:
        print(f"\n{BOLD}{'=' * 60}{RESET}")
        print(f"{DIM}  Step trace: {' -> '.join(self.controller.get_step_trace())}{RESET}")
        print(f"{DIM}  Session: {self.controller.session_id}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

    # ------------------------------------------------------------------ #
    # Command dispatch
    # ------------------------------------------------------------------ #

    def handle(self, command: str) -> None:
        verb, _, rest = command.strip().partition(" ")
        verb = verb.lower()
        args = rest.split()

        try:
            if verb == "help":
                print(HELP_TEXT)
            elif verb == "service":
                self._handle_service(args)
            elif verb in ("removal", "style", "ext", "ext+", "ext-", "addon"):
                self._handle_detail(verb, args)
            elif verb == "care":
                self.controller.apply(toggle_care_service, args[0])
                self.say(f"Care services: {', '.join(self.controller.state.care_services) or 'none'}")
            elif verb == "wax":
                self.controller.apply(toggle_wax_service, args[0])
                self.say(f"Wax services: {', '.join(self.controller.state.wax_services) or 'none'}")
            elif verb == "stylist":
                self._report(*self.controller.select_stylist(args[0]))
            elif verb == "date":
                self._handle_date(args[0])
            elif verb == "time":
                self._report(*self.controller.select_time(args[0]))
            elif verb in CUSTOMER_COMMANDS:
                self.controller.apply(set_customer_field, CUSTOMER_COMMANDS[verb], rest.strip())
                self.say(f"Saved {verb}.")
            elif verb == "next":
                self._handle_next()
            elif verb == "back":
                step = self.controller.retreat()
                self.say(f"Back to {step.label}.")
            elif verb == "undo":
                if self.controller.undo():
                    self.say("Undone.")
                else:
                    self.warn("Nothing to undo.")
            elif verb == "show":
                self._show_summary()
            elif verb == "confirm":
                self._report(*self.controller.confirm(submit=self.submitted.append))
            else:
                self.warn(f"Unknown command '{verb}'. Type 'help' for the list.")
        except IndexError:
            self.warn(f"'{verb}' needs more arguments. Type 'help' for the list.")
        except ValueError as exc:
            self.warn(str(exc))

    def _report(self, ok: bool, message: str) -> None:
        if ok:
            self.say(message)
        else:
            self.warn(message)

    def _handle_service(self, args: list[str]) -> None:
        choice = args[0].lower()
        self.controller.apply(set_main_service, None if choice == "none" else choice)
        self.say(f"Main service: {choice}")

    def _handle_detail(self, verb: str, args: list[str]) -> None:
        part = args[0].lower()
        if verb == "removal":
            self.controller.apply(set_removal, part, args[1])
        elif verb == "style":
            self.controller.apply(set_style, part, None if args[1] == "none" else args[1])
        elif verb == "ext":
            self.controller.apply(set_extension, part, args[1].lower() == "on")
        elif verb == "ext+":
            self.controller.apply(increment_extension, part)
        elif verb == "ext-":
            self.controller.apply(decrement_extension, part)
        elif verb == "addon":
            self.controller.apply(toggle_addon, part, args[1])
        details = self.controller.state.details_for(part)
        self.say(
            f"{part.title()}: removal={details.removal.value}, style={details.style or '-'}, "
            f"extension={'x' + str(details.extension_count) if details.extension else 'off'}, "
            f"addons={', '.join(details.addons) or '-'}"
        )

    def _handle_date(self, arg: str) -> None:
        """``date <n>`` picks the n-th bookable date, ``date YYYY-MM-DD`` a specific one."""
        dates = get_selectable_dates(self.today)
        if arg.isdigit():
            index = int(arg) - 1
            if not 0 <= index < len(dates):
                self.warn(f"Only {len(dates)} dates are open for booking.")
                return
            day = dates[index]
        else:
            day = date.fromisoformat(arg)
        self._report(*self.controller.select_date(day))

    def _handle_next(self) -> None:
        ok, message = self.controller.advance()
        self._report(ok, message)
        if ok:
            self._show_step_hints()

    def _show_step_hints(self) -> None:
        step = self.controller.step.label
        if step == "Stylist":
            for s in get_all_stylists():
                self.system_log(f"{s.id}: {s.name} ({s.title}) - {s.specialty}")
        elif step == "Time":
            foot = self.controller.state.includes_foot_service()
            for slot in TIME_SLOTS:
                flag = ""
                if is_slot_full(slot, foot):
                    flag = " [full]"
                elif is_low_availability(slot, foot):
                    flag = f" [{slot.seats} left]"
                self.system_log(f"{slot.label} {slot.category.value}{flag}")
        elif step == "Confirm":
            self._show_summary()

    def _show_summary(self) -> None:
        summary = build_summary(self.controller.state, self.controller.engine)
        self.say(f"Service: {summary.service_label or 'Add-ons only'}")
        for line in summary.lines:
            qty = f" x{line.quantity}" if line.quantity > 1 else ""
            part = f"[{line.part}] " if line.part else ""
            self.system_log(f"{part}{line.label}{qty}: {format_price(line.price)}")
        self.say(f"Stylist: {summary.stylist_name or '-'}")
        when = f"{summary.date.isoformat()} {summary.time or ''}" if summary.date else "-"
        self.say(f"When: {when}")
        self.say(f"Total: {format_price(summary.price)} / {format_duration(summary.duration)}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Nail salon booking console demo")
    parser.add_argument(
        "--scenario",
        choices=sorted(ConsoleSession.SCENARIOS),
        help="Auto-play a scripted booking instead of the interactive loop",
    )
    args = parser.parse_args()

    session = ConsoleSession()
    if args.scenario:
        session.run_scenario(args.scenario)
    else:
        session.run()


if __name__ == "__main__":
    main()
