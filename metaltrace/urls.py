"""
Metaltrace URLs.

Usage in the project urls.py:
    path('', include('metaltrace.urls')),
"""

from django.urls import path, re_path

from metaltrace import views

app_name = 'metaltrace'

urlpatterns = [
    # Accounts
    path('api/auth/login', views.LoginView.as_view(), name='login'),
    path('api/auth/register', views.RegisterView.as_view(), name='register'),
    path('api/auth/user', views.CurrentUserView.as_view(), name='current-user'),

    # Elements
    path('api/elements', views.ElementCollectionView.as_view(), name='elements'),
    path('api/elements/code/<str:code>', views.ElementByCodeView.as_view(), name='element-by-code'),
    path('api/elements/<int:pk>', views.ElementDetailView.as_view(), name='element-detail'),
    path('api/elements/<int:pk>/status', views.ElementStatusView.as_view(), name='element-status'),

    # Movements
    path('api/movements', views.MovementCollectionView.as_view(), name='movements'),
    path('api/movements/element/<int:element_id>', views.ElementMovementsView.as_view(),
         name='element-movements'),

    # Control points
    path('api/control-points', views.ControlPointCollectionView.as_view(), name='control-points'),
    path('api/control-points/<int:pk>', views.ControlPointDetailView.as_view(),
         name='control-point-detail'),

    # Dashboard
    path('api/dashboard/stats', views.DashboardStatsView.as_view(), name='dashboard-stats'),
    path('api/dashboard/recent-movements', views.RecentMovementsView.as_view(),
         name='recent-movements'),

    # Anything else under api/
    re_path(r'^api/', views.NotFoundView.as_view(), name='not-found'),
]
