"""Client for the ipinfo.io geolocation API."""
import logging

import requests
from flask import current_app

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://ipinfo.io"
DEFAULT_TIMEOUT_SECONDS = 10


class GeolocationError(Exception):
    """Raised when the provider cannot be reached or returns an unusable response."""


def build_geo_url(ip=None, base_url=DEFAULT_BASE_URL) -> str:
    base = base_url.rstrip("/")
    if ip:
        return f"{base}/{ip}/geo"
    # without an IP the provider resolves the address the request came from
    return f"{base}/geo"


def fetch_ip_info(ip=None) -> dict:
    """Fetch geolocation data for ``ip`` (or the caller) and return the JSON body as-is."""
    config = current_app.config
    url = build_geo_url(ip, config.get("IPINFO_BASE_URL", DEFAULT_BASE_URL))
    token = config.get("IPINFO_TOKEN")
    params = {"token": token} if token else None

    headers = {"Accept": "application/json"}
    timeout = config.get("IPINFO_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)

    try:
        response = requests.get(url, params=params, headers=headers, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        logger.warning("ipinfo request for %s failed: %s", ip or "caller", exc)
        raise GeolocationError(f"ipinfo request failed: {exc}") from exc

    try:
        data = response.json()
    except ValueError as exc:
        raise GeolocationError("ipinfo returned a non-JSON body") from exc

    if not isinstance(data, dict):
        raise GeolocationError("ipinfo returned an unexpected payload")
    return data
