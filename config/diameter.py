# File location: config/diameter.py
# Diameter / Gy protocol defaults
# Centralized so the charging client and the Gy model agree on them

DIAMETER_DEFAULTS = {
    # Transport
    "port": 3868,

    # Gy (RFC 4006 / 3GPP TS 32.299)
    "service_context_id": "32251@3gpp.org",  # Packet-Switch service context
    "service_id": 0,
    "auth_application_id": 4,  # Diameter Credit Control Application
}


def get_default(name: str):
    """Get a protocol-level default by name."""
    return DIAMETER_DEFAULTS.get(name.lower())
