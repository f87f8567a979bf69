"""
Metaltrace configuration.

Usage in settings.py:
    METALTRACE = {
        "TRACKING_STORE": "metaltrace.adapters.orm.DjangoTrackingStore",
        "TOKEN_MAX_AGE": 7 * 24 * 3600,
        "RECENT_MOVEMENTS_LIMIT": 10,
        "ENFORCE_CONTROL_POINT_TYPES": True,
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class MetaltraceSettings:
    """Metaltrace configuration settings."""

    # Storage backend for control points, elements and movements (dotted path)
    TRACKING_STORE: str = "metaltrace.adapters.orm.DjangoTrackingStore"

    # Bearer token lifetime in seconds
    TOKEN_MAX_AGE: int = 7 * 24 * 3600

    # Salt for django.core.signing tokens
    TOKEN_SALT: str = "metaltrace.auth"

    # Default size of the dashboard "recent movements" feed
    RECENT_MOVEMENTS_LIMIT: int = 10

    # Reject control point types outside ControlPointType on create
    ENFORCE_CONTROL_POINT_TYPES: bool = True


def get_metaltrace_settings() -> MetaltraceSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "METALTRACE", {})
    return MetaltraceSettings(**{
        k: v for k, v in user_settings.items()
        if k in MetaltraceSettings.__dataclass_fields__
    })


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_metaltrace_settings(), name)


metaltrace_settings = _LazySettings()
