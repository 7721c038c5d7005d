from typing import List
from sqlalchemy import func
from punchcard.extensions import db
from punchcard.models import Event, Scan


class ScanRepository:
    @staticmethod
    def get_scans() -> List[Scan]:
        return Scan.query.order_by(Scan.timestamp.asc()).all()

    @staticmethod
    def find_by_net_id(net_id: str) -> List[Scan]:
        return Scan.query.filter_by(net_id=net_id).order_by(Scan.timestamp.asc()).all()

    @staticmethod
    def find_by_net_id_and_event(net_id: str, event_id: int) -> Scan:
        return Scan.query.filter_by(net_id=net_id, event_id=event_id).first()

    @staticmethod
    def find_by_event_ids(event_ids: List[int]) -> List[Scan]:
        if not event_ids:
            return []
        return Scan.query.filter(Scan.event_id.in_(event_ids)).all()

    @staticmethod
    def insert_scan(attrs):
        """Insert a scan and commit. IntegrityError propagates to the caller."""
        scan = Scan(**attrs)
        db.session.add(scan)
        db.session.commit()
        return scan

    @staticmethod
    def total_attendance() -> int:
        """Every scanned person plus the guests they brought, across all events."""
        total = db.session.query(
            func.count(Scan.id) + func.coalesce(func.sum(Scan.plus_one), 0)
        ).scalar()
        return int(total or 0)

    @staticmethod
    def find_net_ids_having(having_clause) -> List[str]:
        rows = (
            db.session.query(Scan.net_id)
            .join(Event, Scan.event_id == Event.id)
            .group_by(Scan.net_id)
            .having(having_clause)
            .all()
        )
        return [row.net_id for row in rows]
