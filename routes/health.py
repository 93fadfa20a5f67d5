from flask import Blueprint, jsonify, current_app

health_bp = Blueprint("health", __name__)


@health_bp.get("/")
def health():
    return jsonify(ok=True, service=current_app.config.get("SERVICE_NAME", "ip-app-api")), 200


@health_bp.get("/health")
def health_alias():
    return health()
