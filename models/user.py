from models.db import db

class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)

    email = db.Column(db.Text, unique=True, nullable=False)
    # bcrypt hash; column keeps the historical "password" name
    password_hash = db.Column("password", db.Text, nullable=False)

    def to_public_dict(self) -> dict:
        return {"id": self.id, "email": self.email}
