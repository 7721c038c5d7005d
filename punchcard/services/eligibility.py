"""Raffle eligibility and punch-card thresholds.

The raffle rule is generated from ``RAFFLE_THRESHOLDS``: each entry becomes
one ``HAVING`` condition, so adding a category to the table extends the
rule without touching any query code.
"""
import csv
import io
import logging
from typing import Dict, List

from sqlalchemy import and_, case, distinct, func

from punchcard.models import Event, User
from punchcard.models.enums import EventType
from punchcard.repositories import ScanRepository, UserRepository

logger = logging.getLogger(__name__)

# Minimum attended events per category to enter the raffle.
RAFFLE_THRESHOLDS: Dict[str, int] = {event_type: 1 for event_type in EventType.values()}
RAFFLE_MIN_TOTAL_EVENTS = 10

# Punches shown on a student's dashboard card.
PUNCH_THRESHOLDS: Dict[str, int] = {
    EventType.SOCIALIZE.value: 2,
    EventType.LEARN.value: 2,
    EventType.SERVE.value: 4,
    EventType.DISCOVER.value: 4,
    EventType.CONNECT.value: 3,
}

RAFFLE_CSV_FILENAME = "raffleEligibleStudents.csv"
RAFFLE_CSV_FIELDS = ["netId", "firstName", "lastName", "email", "classYear"]


def build_raffle_having_clause(thresholds=None, min_total_events=None):
    """AND together one attendance condition per category plus the total-events floor."""
    if thresholds is None:
        thresholds = RAFFLE_THRESHOLDS
    if min_total_events is None:
        min_total_events = RAFFLE_MIN_TOTAL_EVENTS

    conditions = [
        func.sum(case((Event.type == category, 1), else_=0)) >= minimum
        for category, minimum in thresholds.items()
    ]
    conditions.append(func.count(distinct(Event.id)) >= min_total_events)
    return and_(*conditions)


class EligibilityService:
    @staticmethod
    def get_raffle_eligible_net_ids(thresholds=None, min_total_events=None) -> List[str]:
        clause = build_raffle_having_clause(thresholds, min_total_events)
        net_ids = ScanRepository.find_net_ids_having(clause)
        logger.info(f"{len(net_ids)} students are raffle eligible")
        return net_ids

    @staticmethod
    def get_raffle_eligible_users() -> List[User]:
        return UserRepository.find_by_net_ids(
            EligibilityService.get_raffle_eligible_net_ids()
        )

    @staticmethod
    def export_raffle_csv() -> str:
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=RAFFLE_CSV_FIELDS)
        writer.writeheader()
        for user in EligibilityService.get_raffle_eligible_users():
            writer.writerow(user.to_dict())
        return output.getvalue()
