from __future__ import annotations

import pytest

from src.shift_tracker.shift_tracker.core.exceptions import AlreadyRegistered, ValidationError
from src.shift_tracker.shift_tracker.staff.model import StaffMember
from src.shift_tracker.shift_tracker.staff.registry import StaffRegistry


def test_register_then_find(fixed_now):
    reg = StaffRegistry()
    member = reg.register("U1", "Alice", "Manager", "a@x.com", registered_at=fixed_now)

    assert reg.find("U1") == member
    assert member.registered_at == fixed_now
    assert reg.count() == 1


def test_find_unknown_returns_none():
    assert StaffRegistry().find("nobody") is None


def test_duplicate_identity_rejected_and_roster_unchanged(fixed_now):
    reg = StaffRegistry()
    first = reg.register("U1", "Alice", "Manager", "a@x.com", registered_at=fixed_now)

    with pytest.raises(AlreadyRegistered):
        reg.register("U1", "Alice 2", "Cook", "b@x.com", registered_at=fixed_now)

    assert reg.count() == 1
    assert reg.find("U1") == first


def test_all_keeps_registration_order(fixed_now):
    reg = StaffRegistry()
    for identity in ["U3", "U1", "U2"]:
        reg.register(identity, identity, "Staff", f"{identity}@x.com", registered_at=fixed_now)

    assert [m.identity for m in reg.all()] == ["U3", "U1", "U2"]


def test_restore_rejects_duplicates(fixed_now):
    m = StaffMember("U1", "Alice", "Manager", "a@x.com", fixed_now)

    with pytest.raises(ValidationError):
        StaffRegistry().restore([m, m])
