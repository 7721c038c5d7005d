import sys
import os

sys.path.append(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)  # relative imports

from datetime import timedelta
from random import choice, randrange
from punchcard import create_app, db
from punchcard.models import User, Event
from punchcard.models.enums import EventType
from punchcard.services import EventService, ScanService
from punchcard.utils.dates import utcnow

app = create_app()

# Print the database URI the app is configured to use
with app.app_context():
    print(f"INFO: Connecting to database: {app.config['SQLALCHEMY_DATABASE_URI']}")


def create_test_users(count=20):
    """Create an organizer plus ``count`` students"""
    organizer = User(net_id="org001", first_name="Olivia", last_name="Organizer", email="org001@example.edu")
    students = [
        User(
            net_id=f"stu{i + 1:03d}",
            first_name=f"Student{i + 1}",
            last_name="Test",
            email=f"stu{i + 1:03d}@example.edu",
            class_year=2025 + i % 4,
        )
        for i in range(count)
    ]
    db.session.add(organizer)
    db.session.add_all(students)
    db.session.commit()
    print(f"Created {len(students)} test students and organizer {organizer.net_id}")
    return organizer, students


def create_test_events(organizer, per_type=3):
    """Create ``per_type`` past events of each category plus two upcoming ones"""
    now = utcnow()
    events = []
    days_ago = 60
    for i in range(per_type):
        for event_type in EventType:
            start = now - timedelta(days=days_ago)
            events.append(
                EventService.create_event(
                    {
                        "title": f"{event_type.value.title()} Night {i + 1}",
                        "type": event_type.value,
                        "startTime": start.isoformat(),
                        "endTime": (start + timedelta(hours=2)).isoformat(),
                        "location": "Student Center",
                        "createdBy": organizer.net_id,
                    }
                )
            )
            days_ago -= 3

    for offset in (2, 9):
        start = now + timedelta(days=offset)
        events.append(
            EventService.create_event(
                {
                    "title": f"Upcoming {offset}",
                    "type": choice(EventType.values()),
                    "startTime": start.isoformat(),
                    "endTime": (start + timedelta(hours=2)).isoformat(),
                    "location": "Quad",
                    "createdBy": organizer.net_id,
                    "notes": "Bring a friend!",
                }
            )
        )
    print(f"Created {len(events)} test events")
    return events


def create_test_scans(students, events):
    """Scan each student into a random subset of the past events"""
    past_events = [event for event in events if event.start_time < utcnow()]
    created = 0
    for student in students:
        for event in past_events:
            if randrange(3) == 0:
                continue
            ScanService.insert_scan(
                {
                    "netId": student.net_id,
                    "eventId": event.id,
                    "scannerId": "seed-scanner",
                    "plusOne": randrange(3),
                },
                now=event.start_time + timedelta(minutes=randrange(90)),
            )
            created += 1
    print(f"Created {created} test scans")


def create_test_data():
    with app.app_context():
        db.create_all()
        if Event.query.first():
            print("Test data already present, skipping")
            return
        organizer, students = create_test_users()
        events = create_test_events(organizer)
        create_test_scans(students, events)


if __name__ == "__main__":
    create_test_data()
