import logging
from collections import Counter
from typing import Dict, List

from punchcard.models import Event
from punchcard.repositories import EventRepository, ScanRepository
from punchcard.services.eligibility import PUNCH_THRESHOLDS

logger = logging.getLogger(__name__)


class AttendanceService:
    @staticmethod
    def get_user_attendance(net_id: str):
        """Return ``(scans, events)`` for a user, events newest first.

        A user who has never been scanned gets two empty lists.
        """
        scans = ScanRepository.find_by_net_id(net_id)
        events = EventRepository.find_by_ids_latest_first(
            [scan.event_id for scan in scans]
        )
        logger.info(f"User {net_id} has {len(scans)} scans across {len(events)} events")
        return scans, events

    @staticmethod
    def tally_punches(events: List[Event], thresholds: Dict[str, int] = None) -> List[dict]:
        """Count attended events per type and compare against the punch thresholds.

        Types are reported in order of first appearance in ``events``. A
        category with no attended events is left out entirely rather than
        reported as zero.
        """
        if thresholds is None:
            thresholds = PUNCH_THRESHOLDS

        counts = Counter(event.type for event in events)
        punches = []
        for event_type, count in counts.items():
            threshold = thresholds.get(event_type)
            complete = threshold is not None and count >= threshold
            punches.append(
                {
                    "type": event_type,
                    "count": count,
                    "threshold": threshold,
                    "complete": complete,
                    "remaining": None if threshold is None else max(threshold - count, 0),
                }
            )
        return punches

    @staticmethod
    def get_user_punches(net_id: str) -> List[dict]:
        _, events = AttendanceService.get_user_attendance(net_id)
        return AttendanceService.tally_punches(events)
