from flask import Blueprint, request, jsonify, current_app

from models import db
from models.ip_history import IpHistory
from services.ipinfo import fetch_ip_info
from utils.audit import log_event
from utils.ip import is_valid_ip, is_public_ip

home_bp = Blueprint("home", __name__, url_prefix="/api/home")

LOOKUP_FAILED = "Failed to fetch IP info. Make sure the IP is valid."


def _history() -> list:
    return [entry.to_dict() for entry in IpHistory.newest_first()]


def _ip_from_request():
    """Returns (ip, error_response)."""
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        data = {}
    ip = data.get("ip")

    if ip is None or (isinstance(ip, str) and not ip.strip()):
        return None, (jsonify(error="IP address is required"), 400)
    if not is_valid_ip(ip):
        return None, (jsonify(error="Invalid IP address format"), 400)

    ip = ip.strip()
    if current_app.config.get("REJECT_PRIVATE_IPS") and not is_public_ip(ip):
        return None, (jsonify(error="Private or reserved IP addresses cannot be looked up"), 400)
    return ip, None


def _coerce_id(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None


def parse_history_ids(raw_ids) -> list:
    ids = []
    for value in raw_ids:
        parsed = _coerce_id(value)
        if parsed is not None and parsed > 0 and parsed not in ids:
            ids.append(parsed)
    return ids


@home_bp.get("")
def home():
    try:
        ip_data = fetch_ip_info()
        history = _history()
    except Exception:
        current_app.logger.exception("Failed to load home data")
        db.session.rollback()
        return jsonify(error="Failed to fetch IP info"), 500

    return jsonify(
        message="IP address of user and history",
        ipData=ip_data,
        ip_history=history,
    ), 200


@home_bp.post("/search")
def search():
    ip, error = _ip_from_request()
    if error:
        return error

    try:
        ip_data = fetch_ip_info(ip)

        # record what the provider resolved, not the raw input
        db.session.add(IpHistory(ip_address=ip_data.get("ip") or ip))
        db.session.commit()

        history = _history()
    except Exception:
        current_app.logger.exception("Search failed for %s", ip)
        db.session.rollback()
        return jsonify(error=LOOKUP_FAILED), 500

    return jsonify(message="IP info fetched", ipData=ip_data, ip_history=history), 200


@home_bp.post("/lookup")
def lookup():
    ip, error = _ip_from_request()
    if error:
        return error

    try:
        ip_data = fetch_ip_info(ip)
    except Exception:
        current_app.logger.exception("Lookup failed for %s", ip)
        return jsonify(error=LOOKUP_FAILED), 500

    return jsonify(message="IP info fetched", ipData=ip_data), 200


@home_bp.delete("/history")
def delete_history():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        data = {}
    raw_ids = data.get("ids")

    if not isinstance(raw_ids, list) or len(raw_ids) == 0:
        return jsonify(error="At least one history item must be selected"), 400

    ids = parse_history_ids(raw_ids)
    if not ids:
        return jsonify(error="Invalid history IDs"), 400

    try:
        deleted = (
            IpHistory.query
            .filter(IpHistory.id.in_(ids))
            .delete(synchronize_session=False)
        )
        db.session.commit()

        history = _history()
    except Exception:
        current_app.logger.exception("Failed to delete history ids %s", ids)
        db.session.rollback()
        return jsonify(error="Failed to delete selected history items"), 500

    log_event("HISTORY_DELETE", metadata={"ids": ids, "deleted": deleted})
    return jsonify(message="Selected history items deleted", ip_history=history), 200
