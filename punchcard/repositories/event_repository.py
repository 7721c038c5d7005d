from datetime import datetime
from typing import List
from punchcard.extensions import db
from punchcard.models import Event


class EventRepository:
    @staticmethod
    def get_event(event_id: int) -> Event:
        return Event.query.filter_by(id=event_id).first()

    @staticmethod
    def find_by_ids_latest_first(event_ids: List[int]) -> List[Event]:
        if not event_ids:
            return []
        return (
            Event.query.filter(Event.id.in_(event_ids))
            .order_by(Event.start_time.desc())
            .all()
        )

    @staticmethod
    def find_starting_after(cutoff: datetime) -> List[Event]:
        return (
            Event.query.filter(Event.start_time > cutoff)
            .order_by(Event.start_time.asc())
            .all()
        )

    @staticmethod
    def find_most_recent(limit: int) -> List[Event]:
        return Event.query.order_by(Event.start_time.desc()).limit(limit).all()

    @staticmethod
    def create_event(attrs):
        event = Event(**attrs)
        db.session.add(event)
        db.session.commit()
        return event
