from punchcard.extensions import db


class Scan(db.Model):
    __tablename__ = "scans"
    __table_args__ = (
        db.UniqueConstraint("net_id", "event_id", name="uq_scans_net_id_event_id"),
    )

    id = db.Column(db.Integer, primary_key=True)
    net_id = db.Column(db.String(50), db.ForeignKey("users.net_id"), nullable=False, index=True)
    event_id = db.Column(db.Integer, db.ForeignKey("events.id"), nullable=False, index=True)
    scanner_id = db.Column(db.String(50), nullable=False)
    timestamp = db.Column(db.DateTime, nullable=False)
    plus_one = db.Column(db.Integer, nullable=False, default=0)

    user = db.relationship("User", back_populates="scans")
    event = db.relationship("Event", back_populates="scans")

    def to_dict(self):
        return {
            "netId": self.net_id,
            "eventId": self.event_id,
            "scannerId": self.scanner_id,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "plusOne": self.plus_one,
        }

    def __repr__(self):
        return (
            f"Scan("
            f"net_id={self.net_id}, "
            f"event_id={self.event_id}, "
            f"scanner_id={self.scanner_id}, "
            f"timestamp={self.timestamp}, "
            f"plus_one={self.plus_one}"
            f")"
        )
