import json
import logging
from flask import request

audit_logger = logging.getLogger("audit")

def log_event(action: str, user_id=None, metadata=None):
    ip = request.headers.get("X-Forwarded-For", request.remote_addr)
    user_agent = request.headers.get("User-Agent", "")

    audit_logger.info(
        "%s user_id=%s ip=%s user_agent=%s metadata=%s",
        action,
        user_id,
        ip,
        user_agent[:255] if user_agent else None,
        json.dumps(metadata) if metadata else None,
    )
