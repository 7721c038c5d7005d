from datetime import datetime, timedelta

import pytest

from punchcard.exceptions import MissingFieldsError
from punchcard.models import Event
from punchcard.services import EventService


def _event_data(**overrides):
    data = {
        "title": "Service Saturday",
        "type": "serve",
        "startTime": "2024-10-05T14:00:00Z",
        "endTime": "2024-10-05T17:00:00Z",
        "location": "Food Bank",
        "createdBy": "org001",
    }
    data.update(overrides)
    return data


def test_create_event_stamps_audit_fields(organizer, fixed_now):
    event = EventService.create_event(_event_data(notes="Wear closed-toe shoes"), now=fixed_now)

    assert event.id is not None
    assert event.start_time == datetime(2024, 10, 5, 14, 0)
    assert event.created_date == fixed_now
    assert event.edit_date == fixed_now
    assert event.edited_by == "org001"
    assert event.notes == "Wear closed-toe shoes"
    assert event.waiver_url is None


def test_create_event_converts_offsets_to_utc(organizer):
    event = EventService.create_event(
        _event_data(startTime="2024-10-05T10:00:00-04:00", endTime="2024-10-05T12:00:00-04:00")
    )

    assert event.start_time == datetime(2024, 10, 5, 14, 0)


def test_create_event_without_location_inserts_nothing(organizer):
    data = _event_data()
    del data["location"]

    with pytest.raises(MissingFieldsError) as exc:
        EventService.create_event(data)

    assert exc.value.fields == ["location"]
    assert Event.query.count() == 0


def test_create_event_reports_every_missing_field(organizer):
    with pytest.raises(MissingFieldsError) as exc:
        EventService.create_event({"title": "Untitled"})

    assert exc.value.fields == ["type", "startTime", "endTime", "location", "createdBy"]


def test_create_event_rejects_unknown_type(organizer):
    with pytest.raises(MissingFieldsError) as exc:
        EventService.create_event(_event_data(type="party"))

    assert exc.value.fields == ["type"]


def test_create_event_rejects_unparsable_time(organizer):
    with pytest.raises(MissingFieldsError) as exc:
        EventService.create_event(_event_data(endTime="next tuesday"))

    assert exc.value.fields == ["endTime"]


def test_upcoming_events_use_four_hour_grace(make_event, fixed_now):
    started_3h_ago = make_event(start_time=fixed_now - timedelta(hours=3), title="ongoing")
    make_event(start_time=fixed_now - timedelta(hours=5), title="over")
    tomorrow = make_event(start_time=fixed_now + timedelta(days=1), title="tomorrow")
    later = make_event(start_time=fixed_now + timedelta(days=7), title="later")

    events = EventService.get_upcoming_events(now=fixed_now)

    assert [e.id for e in events] == [started_3h_ago.id, tomorrow.id, later.id]


def test_upcoming_events_empty(app, fixed_now):
    assert EventService.get_upcoming_events(now=fixed_now) == []
