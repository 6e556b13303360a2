"""
Public booking views — booking request form and booking status lookup.
"""
from urllib.parse import urlencode

from django.contrib import messages
from django.shortcuts import redirect, render
from django.urls import reverse

from apps.services.catalog import get_service

from .engine import create_booking, get_booking_by_number
from .forms import BookingForm, StatusLookupForm


def _status_url(booking_number: str) -> str:
    return f"{reverse('bookings:status')}?{urlencode({'booking_number': booking_number})}"


def booking_form(request):
    if request.method == 'POST':
        form = BookingForm(request.POST)
        if form.is_valid():
            booking = create_booking(**form.booking_fields())
            if booking is not None:
                messages.success(
                    request,
                    f'Thank you! Your booking request has been received. '
                    f'Your booking number is {booking.booking_number}.',
                )
                return redirect(_status_url(booking.booking_number))
            messages.error(request, 'We could not submit your booking right now. Please try again shortly.')
    else:
        # ?service=<id> from the services page pre-selects the service
        service = get_service(request.GET.get('service', ''))
        form = BookingForm(initial={'service': service.id} if service else None)

    return render(request, 'bookings/book.html', {'form': form})


def booking_status(request):
    """
    Look up a booking by its booking number.
    GET ?booking_number=... looks up directly (links from the confirmation redirect).
    """
    booking = None
    error = ''
    booking_number = request.GET.get('booking_number')
    form = StatusLookupForm(initial={'booking_number': booking_number or ''})

    if request.method == 'POST':
        form = StatusLookupForm(request.POST)
        if form.is_valid():
            return redirect(_status_url(form.cleaned_data['booking_number'].strip()))
        error = 'Please enter a booking number.'
    elif booking_number is not None:
        booking_number = booking_number.strip()
        if not booking_number:
            error = 'Please enter a booking number.'
        else:
            booking = get_booking_by_number(booking_number)
            if booking is None:
                error = f'No booking found with number "{booking_number}".'

    return render(request, 'bookings/status.html', {
        'form': form,
        'booking': booking,
        'error': error,
    })
