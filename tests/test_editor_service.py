"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

import pytest

from services.editor_service import (
    SessionEditor,
    append_segment,
    delete_segment,
    duplicate_segment,
    new_segments,
    next_segment_name,
    set_end_time,
    update_segment,
)
from services.segments import FixedDuration, FixedIntensity


def test_new_segments_start_and_first_leg():
    rows = new_segments(10.0)
    assert [s.name for s in rows] == ["Start", "A"]
    assert rows[0].target_eph == 0.0
    assert rows[1].target_eph == 10.0
    assert rows[1].description == "Start To A"


@pytest.mark.parametrize(
    "previous, expected",
    [
        ("Start", "A"),
        ("A", "B"),
        ("Y", "Z"),
        ("Z", "X"),
        ("B'", "C"),
        ("Summit", "X"),
        ("a", "b"),
        ("y", "z"),
        ("z", "X"),
    ],
)
def test_next_segment_name(previous, expected):
    assert next_segment_name(previous) == expected


def test_editing_target_eph_returns_to_fixed_intensity(segments):
    assert segments[3].is_fixed_duration
    out = update_segment(segments, "07:00", 3, "target_eph", "5")
    leg = out[3]
    assert leg.mode == FixedIntensity(5.0)
    # Duration floats again: EP 5 at 5 EP/h
    assert leg.target_time_hours == pytest.approx(1.0)


def test_numeric_edits_are_coerced(segments):
    out = update_segment(segments, "07:00", 1, "split_dist_km", "abc")
    assert out[1].split_dist_km == 0.0
    out = update_segment(out, "07:00", 1, "split_elev_m", -40)
    assert out[1].split_elev_m == 0.0
    out = update_segment(out, "07:00", 2, "target_eph", "")
    assert out[2].target_eph == 0.0
    assert out[2].target_time_hours == pytest.approx(out[2].ep)


def test_distance_edit_keeps_fixed_duration(segments):
    out = update_segment(segments, "07:00", 3, "split_dist_km", 9)
    assert out[3].is_fixed_duration
    assert out[3].target_time_mins == 45
    assert out[3].ep == pytest.approx(9.5)


def test_text_edit_does_not_change_timeline(segments):
    out = update_segment(segments, "07:00", 2, "name", "Col")
    assert out[2].name == "Col"
    assert [s.end_time for s in out] == [s.end_time for s in segments]


def test_derived_fields_are_not_editable(segments):
    with pytest.raises(ValueError):
        update_segment(segments, "07:00", 1, "ep", 3)


def test_set_end_time_fixes_duration(segments):
    out = set_end_time(segments, "07:00", 1, "09:40")
    leg = out[1]
    assert leg.mode == FixedDuration(minutes=160, target_eph=10.0)
    assert leg.end_time == "09:40"
    assert out[2].start_time == "09:40"
    again = set_end_time(out, "07:00", 1, leg.end_time)
    assert again[1].custom_duration_mins == 160


def test_set_end_time_overnight_and_minimum(segments):
    out = set_end_time(segments, "07:00", 1, "06:00")
    assert out[1].custom_duration_mins == 23 * 60
    out = set_end_time(segments, "07:00", 1, "07:00")
    assert out[1].custom_duration_mins == 1
    assert out[1].end_time == "07:01"


def test_append_segment(segments):
    out = append_segment(segments, "07:00", 10.0)
    assert len(out) == len(segments) + 1
    new = out[-1]
    assert new.name == "D"
    assert new.description == "C To D"
    assert new.split_dist_km == 0 and new.split_elev_m == 0
    assert new.target_eph == 10.0
    assert new.start_time == new.end_time == segments[-1].end_time


def test_duplicate_segment(segments):
    out = duplicate_segment(segments, "07:00", 3)
    copy = out[4]
    assert copy.name == "C'"
    assert copy.id != segments[3].id
    assert copy.mode == segments[3].mode
    assert copy.split_dist_km == segments[3].split_dist_km
    assert copy.start_time == out[3].end_time
    assert out[-1].total_dist_km == pytest.approx(segments[-1].total_dist_km + 4.5)


def test_delete_segment_recalculates(segments):
    out = delete_segment(segments, "07:00", 1)
    assert [s.id for s in out] == ["s0", "s2", "s3"]
    assert out[1].start_time == "07:00"
    assert out[1].end_time == "08:00"


def test_delete_refuses_last_segment(segments):
    single = segments[:1]
    out = delete_segment(single, "07:00", 0)
    assert len(out) == 1
    assert out[0].id == single[0].id


def test_session_editor_defaults():
    editor = SessionEditor(global_start_time="06:30", default_eph=8.0)
    assert [s.name for s in editor.segments] == ["Start", "A"]
    assert editor.segments[0].start_time == "06:30"
    assert editor.segments[1].target_eph == 8.0


def test_session_editor_end_time_on_start_row_moves_global_start():
    editor = SessionEditor()
    editor.update_field(1, "split_dist_km", 10)
    assert editor.set_end_time(0, "08:15")
    assert editor.global_start_time == "08:15"
    assert editor.segments[1].start_time == "08:15"
    assert not editor.segments[0].is_fixed_duration


def test_session_editor_rejects_invalid_times():
    editor = SessionEditor()
    before = list(editor.segments)
    assert not editor.set_start_time("25:99")
    assert not editor.set_end_time(1, "later")
    assert editor.segments == before


def test_session_editor_duration_then_eph_edit():
    editor = SessionEditor(global_start_time="07:00")
    editor.update_field(1, "split_dist_km", 10)
    editor.set_end_time(1, "09:00")
    assert editor.segments[1].target_time_mins == 120
    editor.set_target_eph(1, 5)
    assert editor.segments[1].custom_duration_mins is None
    assert editor.segments[1].target_time_hours == pytest.approx(2.0)
    editor.set_target_eph(1, 20)
    assert editor.segments[1].target_time_hours == pytest.approx(0.5)


def test_session_editor_rows_and_save():
    editor = SessionEditor(name="Hills", global_start_time="07:00")
    editor.update_field(1, "split_dist_km", 10)
    editor.update_field(1, "split_elev_m", 500)
    editor.append()
    editor.update_field(2, "split_dist_km", 5)
    editor.duplicate(2)
    assert [s.name for s in editor.segments] == ["Start", "A", "B", "B'"]
    assert editor.delete(3)
    assert not SessionEditor(segments=editor.segments[:1]).delete(0)

    session = editor.to_session()
    assert session.name == "Hills"
    assert session.total_distance == pytest.approx(15.0)
    assert session.total_elevation == pytest.approx(500)
    assert session.total_ep == pytest.approx(20.0)
    assert session.total_duration_hours == pytest.approx(2.0)
    assert editor.to_session().id == session.id


@pytest.mark.parametrize(
    "field_name, raw",
    [("split_dist_km", "1e308"), ("target_eph", "1e-320")],
)
def test_overflowing_duration_counts_as_zero(segments, field_name, raw):
    out = update_segment(segments, "07:00", 1, field_name, raw)
    leg = out[1]
    assert leg.target_time_mins == 0
    assert leg.end_time == leg.start_time == "07:00"
    assert out[2].start_time == "07:00"
    assert all(len(seg.end_time) == 5 for seg in out)


def test_session_editor_normalizes_clock_strings():
    editor = SessionEditor(global_start_time="6:5")
    assert editor.global_start_time == "06:05"
    assert editor.set_start_time("7:5")
    assert editor.global_start_time == "07:05"
    assert editor.segments[0].start_time == "07:05"
    assert not editor.set_start_time("+7:00")
    assert not editor.set_end_time(1, "0_9:00")
    assert editor.global_start_time == "07:05"
    assert editor.set_end_time(1, "9:5")
    assert editor.segments[1].end_time == "09:05"
