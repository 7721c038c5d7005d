import logging
from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from punchcard.exceptions import DuplicateScanError, MissingFieldsError, UnknownError
from punchcard.extensions import db
from punchcard.models import Scan
from punchcard.repositories import ScanRepository
from punchcard.utils.dates import utcnow
from punchcard.utils.validation import is_missing, parse_whole_number, require_fields

logger = logging.getLogger(__name__)


class ScanService:
    REQUIRED_FIELDS = ["netId", "scannerId", "eventId"]

    @staticmethod
    def get_scans() -> List[Scan]:
        return ScanRepository.get_scans()

    @staticmethod
    def _parse_event_id(value) -> int:
        event_id = parse_whole_number(value)
        if event_id is None or event_id <= 0:
            logger.warning(f"Rejected scan with invalid eventId: {value!r}")
            raise MissingFieldsError(["eventId"], "eventId must be a positive integer")
        return event_id

    @staticmethod
    def _parse_plus_one(value) -> int:
        if is_missing(value) or value is False:
            return 0
        plus_one = parse_whole_number(value)
        if plus_one is None or plus_one < 0:
            logger.warning(f"Rejected scan with invalid plusOne: {value!r}")
            raise MissingFieldsError(["plusOne"], "plusOne must be a non-negative integer")
        return plus_one

    @staticmethod
    def insert_scan(data, now=None) -> Scan:
        require_fields(data, ScanService.REQUIRED_FIELDS)

        event_id = ScanService._parse_event_id(data["eventId"])
        plus_one = ScanService._parse_plus_one(data.get("plusOne"))
        net_id = str(data["netId"]).strip()

        try:
            scan = ScanRepository.insert_scan(
                {
                    "net_id": net_id,
                    "event_id": event_id,
                    "scanner_id": str(data["scannerId"]).strip(),
                    "timestamp": now or utcnow(),
                    "plus_one": plus_one,
                }
            )
        except IntegrityError as e:
            db.session.rollback()
            # The unique (net_id, event_id) constraint is the only one a
            # well-formed scan can hit besides the foreign keys.
            if ScanRepository.find_by_net_id_and_event(net_id, event_id):
                logger.warning(f"Duplicate scan for user {net_id} at event {event_id}")
                raise DuplicateScanError()
            logger.error(f"Constraint failure inserting scan for {net_id}: {str(e)}")
            raise UnknownError()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Unexpected error inserting scan for {net_id}: {str(e)}")
            raise UnknownError()

        logger.info(f"Recorded scan for user {net_id} at event {event_id} (+{plus_one})")
        return scan
