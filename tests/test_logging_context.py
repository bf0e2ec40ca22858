"""Tests for the session correlation logging context."""

import logging

from nailbook.logging_context import (
    SessionIdFilter,
    get_session_id,
    get_session_logger,
    new_session_id,
    set_session_id,
)


class TestSessionId:
    def test_set_and_get(self):
        set_session_id("BOOK-1234")
        assert get_session_id() == "BOOK-1234"

    def test_new_ids_are_unique(self):
        assert new_session_id() != new_session_id()
        assert new_session_id().startswith("BOOK-")


class TestSessionFilter:
    def test_filter_injects_session_id(self):
        set_session_id("BOOK-abcd")
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        assert SessionIdFilter().filter(record) is True
        assert record.session_id == "BOOK-abcd"

    def test_filter_attached_once(self):
        logger = get_session_logger("nailbook.tests.session")
        get_session_logger("nailbook.tests.session")
        assert sum(isinstance(f, SessionIdFilter) for f in logger.filters) == 1
