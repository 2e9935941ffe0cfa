from __future__ import annotations

from datetime import timedelta

import pytest

from src.shift_tracker.shift_tracker.commands.dispatcher import GENERIC_FAILURE, CommandDispatcher


@pytest.fixture
def dispatcher(engine):
    return CommandDispatcher(engine)


def test_non_commands_are_ignored(dispatcher):
    assert dispatcher.handle("U1", "Alice", "hello there") is None
    assert dispatcher.handle("U1", "Alice", "!unknown") is None
    assert dispatcher.handle("U1", "Alice", "") is None


def test_register_usage_on_missing_args(dispatcher, engine):
    reply = dispatcher.handle("U1", "Alice", "!register Manager")

    assert not reply.ok
    assert "Usage" in reply.text
    assert engine.admin_stats().staff_count == 0


def test_keyword_is_case_insensitive(dispatcher):
    reply = dispatcher.handle("U1", "Alice", "!REGISTER Manager a@x.com")

    assert reply.ok
    assert "Manager" in reply.text


def test_register_twice_reports_conflict(dispatcher):
    dispatcher.handle("U1", "Alice", "!register Manager a@x.com")
    reply = dispatcher.handle("U1", "Alice", "!register Manager a@x.com")

    assert not reply.ok
    assert reply.text == "You are already registered!"


def test_clock_in_requires_registration(dispatcher):
    reply = dispatcher.handle("U2", "Bob", "!clockin")

    assert not reply.ok
    assert "Register first" in reply.text


def test_clock_cycle_and_history(dispatcher, fixed_now):
    dispatcher.handle("U3", "Carol", "!register Cashier c@x.com")
    assert dispatcher.handle("U3", "Carol", "!clockin", now=fixed_now).ok
    assert not dispatcher.handle("U3", "Carol", "!clockin", now=fixed_now).ok

    status = dispatcher.handle("U3", "Carol", "!mystatus", now=fixed_now + timedelta(minutes=30))
    assert "CLOCKED IN" in status.text
    assert "0h 30m" in status.text

    reply = dispatcher.handle("U3", "Carol", "!clockout", now=fixed_now + timedelta(minutes=95))
    assert reply.ok
    assert "1h 35m" in reply.text

    shifts = dispatcher.handle("U3", "Carol", "!myshifts")
    assert shifts.text.splitlines()[0] == "Last 1 shifts"
    assert "1h 35m" in shifts.text


def test_clock_out_without_clock_in(dispatcher):
    dispatcher.handle("U4", "Dan", "!register Cook d@x.com")
    reply = dispatcher.handle("U4", "Dan", "!clockout")

    assert not reply.ok
    assert reply.text == "You are not clocked in!"


def test_myshifts_empty(dispatcher):
    assert dispatcher.handle("U9", "Zed", "!myshifts").text == "No shift history found."


def test_admin_stats_needs_platform_admin_flag(dispatcher):
    assert dispatcher.handle("U1", "Alice", "!admin-stats").text == "Admin only."

    reply = dispatcher.handle("U1", "Alice", "!admin-stats", is_admin=True)
    assert reply.ok
    assert "Staff: 0" in reply.text


def test_help_and_ping(dispatcher):
    assert "!clockin" in dispatcher.handle("U1", "Alice", "!help").text
    assert dispatcher.handle("U1", "Alice", "!ping").text.startswith("Pong")


def test_custom_prefix(engine):
    d = CommandDispatcher(engine, prefix="/")

    assert d.handle("U1", "Alice", "!ping") is None
    assert d.handle("U1", "Alice", "/ping").ok


def test_unexpected_errors_become_generic_reply(dispatcher, engine, monkeypatch, caplog):
    def boom(*args, **kwargs):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(engine, "admin_stats", boom)

    reply = dispatcher.handle("U1", "Alice", "!admin-stats", is_admin=True)

    assert not reply.ok
    assert reply.text == GENERIC_FAILURE
    assert "Command error" in caplog.text


def test_only_known_keywords_parse(dispatcher):
    assert dispatcher.parse("!clockin now") == ("clockin", ["now"])
    assert dispatcher.parse("!commands") is None
