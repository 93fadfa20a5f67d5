import ipaddress


def parse_ip(value):
    """Return an ip_address object for a valid IPv4/IPv6 string, else None."""
    if not isinstance(value, str):
        return None
    try:
        return ipaddress.ip_address(value.strip())
    except ValueError:
        return None


def is_valid_ip(value) -> bool:
    return parse_ip(value) is not None


def is_public_ip(value) -> bool:
    ip = parse_ip(value)
    if ip is None:
        return False
    return not (
        ip.is_private
        or ip.is_loopback
        or ip.is_link_local
        or ip.is_multicast
        or ip.is_reserved
        or ip.is_unspecified
    )
