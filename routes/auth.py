from flask import Blueprint, request, jsonify, current_app

from models.user import User
from security.password import verify_password
from utils.audit import log_event


auth_bp = Blueprint("auth", __name__, url_prefix="/api")


@auth_bp.post("/login")
def login():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        data = {}
    email = data.get("email")
    password = data.get("password")

    if not isinstance(email, str) or not isinstance(password, str):
        return jsonify(error="Email and password required"), 400
    email = email.strip().lower()
    if not email or not password:
        return jsonify(error="Email and password required"), 400

    try:
        user = User.query.filter_by(email=email).first()
        if not user:
            log_event("LOGIN_FAIL", metadata={"email": email, "reason": "not_found"})
            return jsonify(error="User not found"), 401

        if not verify_password(password, user.password_hash):
            log_event("LOGIN_FAIL", user_id=user.id, metadata={"email": email, "reason": "bad_password"})
            return jsonify(error="Invalid password"), 401
    except Exception:
        current_app.logger.exception("Login failed for %s", email)
        return jsonify(error="Server error"), 500

    log_event("LOGIN_SUCCESS", user_id=user.id)
    return jsonify(message="Login successful", user=user.to_public_dict()), 200
