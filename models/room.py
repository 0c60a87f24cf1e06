from datetime import datetime
from models.db import db

class Room(db.Model):
    __tablename__ = "rooms"

    id = db.Column(db.Integer, primary_key=True)

    number = db.Column(db.String(20), unique=True, nullable=False, index=True)
    type = db.Column(db.String(40), nullable=False)  # e.g. single, double, suite
    price = db.Column(db.Float, nullable=False, default=0)  # nightly rate

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def summary(self):
        return {"id": self.id, "number": self.number, "type": self.type, "price": self.price}

    def to_dict(self):
        return {
            **self.summary(),
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
