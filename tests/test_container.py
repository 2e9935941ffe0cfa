from __future__ import annotations

import json
from datetime import timedelta

from src.shift_tracker.shift_tracker.container import build_container
from src.shift_tracker.shift_tracker.core.enums import LoadStatus


def test_state_survives_restart_except_open_shifts(data_file, fixed_now):
    c1 = build_container(data_file=data_file, clock=lambda: fixed_now)
    c1.engine.register_staff("U1", "Alice", "Manager", "a@x.com")
    c1.engine.register_staff("U2", "Bob", "Cook", "b@x.com")
    c1.engine.clock_in("U1")
    c1.engine.clock_out("U1", now=fixed_now + timedelta(minutes=95))
    c1.engine.clock_in("U2")

    c2 = build_container(data_file=data_file, clock=lambda: fixed_now)
    stats = c2.engine.admin_stats()

    assert (stats.staff_count, stats.total_shifts, stats.active_count) == (2, 1, 0)
    assert c2.persistence.last_status == LoadStatus.LOADED


def test_corrupt_file_is_overwritten_by_default(data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_text("{{{", encoding="utf-8")

    c = build_container(data_file=data_file)

    assert c.persistence.last_status == LoadStatus.CORRUPT
    assert json.loads(data_file.read_text(encoding="utf-8")) == {"staff": [], "shifts": [], "settings": {}}
    assert list(data_file.parent.glob("*.corrupt-*")) == []


def test_corrupt_file_can_be_preserved(data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_text("{{{", encoding="utf-8")

    build_container(data_file=data_file, preserve_corrupt=True)

    preserved = list(data_file.parent.glob("*.corrupt-*"))
    assert len(preserved) == 1
    assert preserved[0].read_text(encoding="utf-8") == "{{{"
    assert json.loads(data_file.read_text(encoding="utf-8"))["staff"] == []


def test_autosave_flush_persists_settings(data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_text(json.dumps({"staff": [], "shifts": [], "settings": {"guildId": "42"}}), encoding="utf-8")

    c = build_container(data_file=data_file, save_on_mutation=False)
    c.autosave.save_now()

    assert json.loads(data_file.read_text(encoding="utf-8"))["settings"] == {"guildId": "42"}
