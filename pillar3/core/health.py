"""Health payload served by the ping endpoint."""

from pillar3 import __version__
from pillar3.config import get_settings


def get_health() -> dict:
    """Static liveness payload; the engine has no dependencies to probe."""
    return {
        "message": "pong",
        "service": get_settings().service_name,
        "version": __version__,
    }
