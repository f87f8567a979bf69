"""
Metaltrace Adapters.

Implementations of the TrackingStore protocol, and the loader for the
configured one.

Usage:
    from metaltrace.adapters import get_tracking_store

    store = get_tracking_store()

Settings:
    METALTRACE = {
        "TRACKING_STORE": "metaltrace.adapters.orm.DjangoTrackingStore",
    }
"""

from __future__ import annotations

import logging
import threading

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from metaltrace.conf import metaltrace_settings
from metaltrace.protocols.store import TrackingStore

logger = logging.getLogger(__name__)


# Cached store instance
_lock = threading.Lock()
_tracking_store: TrackingStore | None = None


def get_tracking_store() -> TrackingStore:
    """
    Return the configured tracking store.

    Returns:
        TrackingStore instance

    Raises:
        ImproperlyConfigured: If TRACKING_STORE is empty or import fails
    """
    global _tracking_store

    if _tracking_store is None:
        with _lock:
            if _tracking_store is None:  # double-checked
                store_path = metaltrace_settings.TRACKING_STORE

                if not store_path:
                    raise ImproperlyConfigured(
                        "METALTRACE['TRACKING_STORE'] must be configured. "
                        "Example: 'metaltrace.adapters.orm.DjangoTrackingStore'"
                    )

                try:
                    store_class = import_string(store_path)
                except ImportError as e:
                    raise ImproperlyConfigured(
                        f"Failed to import tracking store '{store_path}': {e}"
                    ) from e

                _tracking_store = store_class()
                logger.debug("Loaded tracking store: %s", store_path)

    return _tracking_store


def reset_tracking_store() -> None:
    """Reset the cached store. Useful for testing."""
    global _tracking_store
    _tracking_store = None


__all__ = [
    "get_tracking_store",
    "reset_tracking_store",
]
