from punchcard.extensions import db


def _isoformat(value):
    return value.isoformat() if value else None


class Event(db.Model):
    __tablename__ = "events"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    type = db.Column(db.String(20), nullable=False, index=True)
    notes = db.Column(db.Text, nullable=True)
    start_time = db.Column(db.DateTime, nullable=False, index=True)
    end_time = db.Column(db.DateTime, nullable=False)
    location = db.Column(db.String(255), nullable=False)
    created_by = db.Column(db.String(50), db.ForeignKey("users.net_id"), nullable=False)
    created_date = db.Column(db.DateTime, nullable=False)
    edited_by = db.Column(db.String(50), db.ForeignKey("users.net_id"), nullable=False)
    edit_date = db.Column(db.DateTime, nullable=False)
    waiver_url = db.Column(db.String(500), nullable=True)

    scans = db.relationship("Scan", back_populates="event", lazy=True)

    def to_dict(self):
        return {
            "eventId": self.id,
            "title": self.title,
            "type": self.type,
            "notes": self.notes,
            "startTime": _isoformat(self.start_time),
            "endTime": _isoformat(self.end_time),
            "location": self.location,
            "createdBy": self.created_by,
            "createdDate": _isoformat(self.created_date),
            "editedBy": self.edited_by,
            "editDate": _isoformat(self.edit_date),
            "waiverUrl": self.waiver_url,
        }

    def __repr__(self):
        return f"Event(id={self.id}, title='{self.title}', type={self.type}, start_time={self.start_time})"
