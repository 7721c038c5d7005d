from datetime import timedelta
from types import SimpleNamespace

from punchcard.services import AttendanceService


def _events(*types):
    return [SimpleNamespace(type=t) for t in types]


def test_attendance_for_unknown_user_is_empty(app):
    scans, events = AttendanceService.get_user_attendance("nobody")

    assert scans == []
    assert events == []


def test_attendance_events_are_newest_first(make_event, make_scan, fixed_now):
    old = make_event("learn", start_time=fixed_now - timedelta(days=30))
    new = make_event("serve", start_time=fixed_now - timedelta(days=1))
    middle = make_event("connect", start_time=fixed_now - timedelta(days=10))
    other = make_event("learn")
    for event in (old, new, middle):
        make_scan("abc123", event)
    make_scan("someone-else", other)

    scans, events = AttendanceService.get_user_attendance("abc123")

    assert len(scans) == 3
    assert [e.id for e in events] == [new.id, middle.id, old.id]


def test_tally_counts_each_type_against_thresholds():
    punches = AttendanceService.tally_punches(_events("serve", "learn", "serve", "learn", "learn"))

    assert punches == [
        {"type": "serve", "count": 2, "threshold": 4, "complete": False, "remaining": 2},
        {"type": "learn", "count": 3, "threshold": 2, "complete": True, "remaining": 0},
    ]


def test_tally_omits_categories_with_no_attendance():
    punches = AttendanceService.tally_punches(_events("connect"))

    assert [p["type"] for p in punches] == ["connect"]


def test_tally_of_no_events_is_empty():
    assert AttendanceService.tally_punches([]) == []


def test_tally_type_outside_threshold_table():
    punches = AttendanceService.tally_punches(_events("worship"))

    assert punches == [
        {"type": "worship", "count": 1, "threshold": None, "complete": False, "remaining": None}
    ]


def test_tally_with_custom_thresholds():
    punches = AttendanceService.tally_punches(_events("learn"), {"learn": 1})

    assert punches[0]["complete"] is True


def test_user_punches_from_attendance(attend):
    attend("abc123", ["socialize", "socialize", "discover"])

    punches = {p["type"]: p for p in AttendanceService.get_user_punches("abc123")}

    assert set(punches) == {"socialize", "discover"}
    assert punches["socialize"]["complete"] is True
    assert punches["discover"]["remaining"] == 3
