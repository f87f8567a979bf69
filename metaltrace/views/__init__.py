"""
Metaltrace JSON API views.
"""

from metaltrace.views.accounts import CurrentUserView, LoginView, RegisterView
from metaltrace.views.base import NotFoundView
from metaltrace.views.tracking import (
    ControlPointCollectionView,
    ControlPointDetailView,
    DashboardStatsView,
    ElementByCodeView,
    ElementCollectionView,
    ElementDetailView,
    ElementMovementsView,
    ElementStatusView,
    MovementCollectionView,
    RecentMovementsView,
)

__all__ = [
    'LoginView',
    'RegisterView',
    'CurrentUserView',
    'ElementCollectionView',
    'ElementDetailView',
    'ElementByCodeView',
    'ElementStatusView',
    'MovementCollectionView',
    'ElementMovementsView',
    'ControlPointCollectionView',
    'ControlPointDetailView',
    'DashboardStatsView',
    'RecentMovementsView',
    'NotFoundView',
]
