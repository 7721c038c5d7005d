import logging

from punchcard.repositories import EventRepository, ScanRepository
from punchcard.services.eligibility import EligibilityService

logger = logging.getLogger(__name__)

SUMMARY_EVENT_LIMIT = 5


class SummaryService:
    @staticmethod
    def get_scans_per_event(limit: int = SUMMARY_EVENT_LIMIT) -> dict:
        """Scan counts for the ``limit`` most recently started events.

        Keyed by event id. Plus-ones are not counted, and an event with no
        scans does not appear.
        """
        events = EventRepository.find_most_recent(limit)
        events_by_id = {event.id: event for event in events}
        scans = ScanRepository.find_by_event_ids(list(events_by_id))

        scans_per_event = {}
        for scan in scans:
            event = events_by_id[scan.event_id]
            entry = scans_per_event.setdefault(
                event.id,
                {
                    "numScans": 0,
                    "name": event.title,
                    "date": event.start_time.isoformat() if event.start_time else None,
                },
            )
            entry["numScans"] += 1
        return scans_per_event

    @staticmethod
    def get_event_summaries() -> dict:
        # Only the per-event counts are limited to recent events; attendance
        # and raffle eligibility cover every scan.
        summaries = {
            "scansPerEvent": SummaryService.get_scans_per_event(),
            "totalAttendance": ScanRepository.total_attendance(),
            "raffleEligibleStudents": EligibilityService.get_raffle_eligible_net_ids(),
        }
        logger.info(
            f"Summaries built for {len(summaries['scansPerEvent'])} events, "
            f"total attendance {summaries['totalAttendance']}"
        )
        return summaries
