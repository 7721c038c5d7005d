from punchcard.extensions import db


class User(db.Model):
    __tablename__ = "users"

    net_id = db.Column(db.String(50), primary_key=True)
    first_name = db.Column(db.String(50), nullable=False)
    last_name = db.Column(db.String(50), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=True)
    class_year = db.Column(db.Integer, nullable=True)
    created_at = db.Column(
        db.DateTime, nullable=False, server_default=db.func.now()
    )

    scans = db.relationship("Scan", back_populates="user", lazy=True)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, User):
            return self.net_id == other.net_id
        return False

    def __hash__(self):
        return hash(self.net_id)

    def to_dict(self):
        return {
            "netId": self.net_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "classYear": self.class_year,
        }

    def __repr__(self):
        return (
            f"User("
            f"net_id='{self.net_id}', "
            f"first_name='{self.first_name}', "
            f"last_name='{self.last_name}'"
            f")"
        )
