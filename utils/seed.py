import logging

from flask import current_app
from sqlalchemy.exc import IntegrityError, ProgrammingError

from models import db
from models.user import User
from security.password import hash_password

logger = logging.getLogger(__name__)


def seed_default_user() -> bool:
    """Insert the configured seed account unless it already exists.

    Returns True when a row was inserted.
    """
    email = current_app.config["SEED_USER_EMAIL"].strip().lower()
    password = current_app.config["SEED_USER_PASSWORD"]

    if User.query.filter_by(email=email).first():
        return False

    db.session.add(User(email=email, password_hash=hash_password(password)))
    try:
        db.session.commit()
    except IntegrityError:
        # another worker won the race; same outcome as ON CONFLICT DO NOTHING
        db.session.rollback()
        return False

    logger.info("Seeded default user %s", email)
    return True


def init_db():
    """Create missing tables and seed the default user. Safe to run repeatedly.

    Multi-worker deploys should run `flask init-db` or `flask db upgrade` once
    before starting workers; startup creation only tolerates the race.
    """
    try:
        db.create_all()
    except (ProgrammingError, IntegrityError) as exc:
        # a sibling worker created the tables between the existence check and CREATE
        db.session.rollback()
        logger.warning("Concurrent schema creation detected: %s", exc.orig)
    seed_default_user()
