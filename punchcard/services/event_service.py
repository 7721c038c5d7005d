import logging
from datetime import timedelta
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from punchcard.exceptions import MissingFieldsError, UnknownError
from punchcard.extensions import db
from punchcard.models import Event
from punchcard.models.enums import EventType
from punchcard.repositories import EventRepository
from punchcard.utils.dates import parse_datetime, utcnow
from punchcard.utils.validation import is_missing, require_fields

logger = logging.getLogger(__name__)

# Events that started within this window still count as upcoming.
UPCOMING_GRACE = timedelta(hours=4)


class EventService:
    REQUIRED_FIELDS = ["title", "type", "startTime", "endTime", "location", "createdBy"]

    @staticmethod
    def get_upcoming_events(now=None) -> List[Event]:
        cutoff = (now or utcnow()) - UPCOMING_GRACE
        return EventRepository.find_starting_after(cutoff)

    @staticmethod
    def create_event(data, now=None) -> Event:
        require_fields(data, EventService.REQUIRED_FIELDS)

        event_type = str(data["type"]).strip().lower()
        if event_type not in EventType.values():
            logger.warning(f"Rejected event with unknown type: {data['type']!r}")
            raise MissingFieldsError(
                ["type"], f"type must be one of {', '.join(EventType.values())}"
            )

        times = {}
        for field in ("startTime", "endTime"):
            try:
                times[field] = parse_datetime(data[field])
            except ValueError:
                logger.warning(f"Rejected event with unparsable {field}: {data[field]!r}")
                raise MissingFieldsError([field], f"{field} must be an ISO-8601 datetime")

        created_at = now or utcnow()
        created_by = str(data["createdBy"]).strip()
        notes = data.get("notes")
        waiver_url = data.get("waiverUrl")

        try:
            event = EventRepository.create_event(
                {
                    "title": data["title"],
                    "type": event_type,
                    "notes": None if is_missing(notes) else notes,
                    "start_time": times["startTime"],
                    "end_time": times["endTime"],
                    "location": data["location"],
                    "created_by": created_by,
                    "created_date": created_at,
                    "edited_by": created_by,
                    "edit_date": created_at,
                    "waiver_url": None if is_missing(waiver_url) else waiver_url,
                }
            )
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Unexpected error creating event '{data['title']}': {str(e)}")
            raise UnknownError()

        logger.info(f"Event {event.id} '{event.title}' created by {created_by}")
        return event
