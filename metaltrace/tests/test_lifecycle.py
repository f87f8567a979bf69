"""
Tests for status derivation.
"""

import pytest

from metaltrace.lifecycle import status_for_location
from metaltrace.models import ControlPointType, ElementStatus


@pytest.mark.parametrize('location_type, expected', [
    (ControlPointType.FACTORY, ElementStatus.PRODUCTION),
    (ControlPointType.STORAGE, ElementStatus.IN_STORAGE),
    (ControlPointType.USAGE_SITE, ElementStatus.IN_OPERATION),
    ('factory', ElementStatus.PRODUCTION),
    ('usage_site', ElementStatus.IN_OPERATION),
    ('warehouse', ElementStatus.IN_STORAGE),
    ('', ElementStatus.IN_STORAGE),
    (None, ElementStatus.IN_STORAGE),
])
def test_status_for_location(location_type, expected):
    """Status depends only on the destination type."""
    assert status_for_location(location_type) == expected


def test_never_derives_transit_states():
    """No control point type yields a transit status."""
    derived = {status_for_location(t) for t in ControlPointType.values}
    assert ElementStatus.IN_TRANSIT not in derived
    assert ElementStatus.READY_TO_SHIP not in derived
