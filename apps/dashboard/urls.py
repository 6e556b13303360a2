from django.urls import path
from . import views

app_name = 'dashboard'

urlpatterns = [
    # ── Auth ──────────────────────────────────────────────────────────────
    path('login/',   views.dashboard_login,  name='login'),
    path('logout/',  views.dashboard_logout, name='logout'),

    # ── Bookings ──────────────────────────────────────────────────────────
    path('',                                     views.booking_list,          name='booking_list'),
    path('bookings/<int:booking_id>/status/',    views.booking_update_status, name='booking_status'),
    path('bookings/<int:booking_id>/delete/',    views.booking_delete,        name='booking_delete'),

    # ── Admin passwords ───────────────────────────────────────────────────
    path('settings/',                                 views.admin_settings,  name='settings'),
    path('settings/passwords/<int:password_id>/delete/', views.password_delete, name='password_delete'),
]
