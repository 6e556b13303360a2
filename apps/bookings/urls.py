"""
Booking URLs.

  /bookings/           Booking request form (?service=<id> pre-selects a service)
  /bookings/status/    Booking status lookup (?booking_number=<number>)
"""
from django.urls import path
from . import views

app_name = 'bookings'

urlpatterns = [
    path('',         views.booking_form,   name='book'),
    path('status/',  views.booking_status, name='status'),
]
