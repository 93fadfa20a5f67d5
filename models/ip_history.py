from datetime import datetime, timezone
from models.db import db


def _utcnow():
    return datetime.now(timezone.utc)


class IpHistory(db.Model):
    __tablename__ = "ip_history"

    id = db.Column(db.Integer, primary_key=True)
    ip_address = db.Column(db.Text, nullable=False)
    created_at = db.Column(
        db.DateTime(timezone=True),
        default=_utcnow,
        server_default=db.func.now(),
        nullable=False,
    )

    @classmethod
    def newest_first(cls):
        return cls.query.order_by(cls.created_at.desc(), cls.id.desc()).all()

    def to_dict(self) -> dict:
        created_at = self.created_at
        # SQLite hands back naive datetimes; everything is stored as UTC
        if created_at is not None and created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return {
            "id": self.id,
            "ip_address": self.ip_address,
            "created_at": created_at.isoformat() if created_at else None,
        }
