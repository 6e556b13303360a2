"""
Admin Dashboard views — password login/logout, booking review and admin
password settings. Everything except login is behind dashboard_admin_required.
"""
import logging

from django.contrib import messages
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST

from apps.bookings.engine import delete_booking, list_bookings, update_booking_status

from .decorators import dashboard_admin_required
from .exceptions import PasswordsNotReady
from .forms import LoginForm, PasswordForm, StatusUpdateForm
from .gate import AuthorizationGate

logger = logging.getLogger(__name__)


def _safe_next(request, next_url: str) -> str:
    if next_url and url_has_allowed_host_and_scheme(
        next_url, allowed_hosts={request.get_host()}, require_https=request.is_secure(),
    ):
        return next_url
    return 'dashboard:booking_list'


# ─────────────────────────────────────────────────────────────────────────────
# Auth views
# ─────────────────────────────────────────────────────────────────────────────

def dashboard_login(request):
    """Password login page. Already-authorized visitors go straight to ?next or the dashboard."""
    gate = AuthorizationGate(request.session)
    next_url = request.POST.get('next', '') or request.GET.get('next', '')

    if gate.is_authorized:
        return redirect(_safe_next(request, next_url))

    form = LoginForm(request.POST or None)
    if request.method == 'POST' and form.is_valid():
        try:
            ok = gate.login(form.cleaned_data['password'])
        except PasswordsNotReady:
            logger.exception('Admin login aborted — password list not loaded')
            messages.error(request, 'Something went wrong. Please try again.')
        else:
            if ok:
                return redirect(_safe_next(request, next_url))
            messages.error(request, 'Invalid password')

    return render(request, 'dashboard/login.html', {
        'form': form,
        'next': next_url,
    })


def dashboard_logout(request):
    AuthorizationGate(request.session).logout()
    return redirect('pages:home')


# ─────────────────────────────────────────────────────────────────────────────
# Bookings
# ─────────────────────────────────────────────────────────────────────────────

@dashboard_admin_required
def booking_list(request):
    bookings = list_bookings()
    load_failed = bookings is None
    if load_failed:
        messages.error(request, 'Failed to load bookings. Please check backend connection.')

    return render(request, 'dashboard/booking_list.html', {
        'bookings': bookings or [],
        'load_failed': load_failed,
        'page': 'bookings',
    })


@require_POST
@dashboard_admin_required
def booking_update_status(request, booking_id):
    form = StatusUpdateForm(request.POST)
    if not form.is_valid():
        messages.error(request, 'Invalid status.')
    elif update_booking_status(booking_id, form.cleaned_data['status']):
        messages.success(request, f"Booking marked as {form.cleaned_data['status']}.")
    else:
        messages.error(request, 'Failed to update booking status.')
    return redirect('dashboard:booking_list')


@require_POST
@dashboard_admin_required
def booking_delete(request, booking_id):
    if delete_booking(booking_id):
        messages.success(request, 'Booking deleted.')
    else:
        messages.error(request, 'Failed to delete booking.')
    return redirect('dashboard:booking_list')


# ─────────────────────────────────────────────────────────────────────────────
# Admin password settings
# ─────────────────────────────────────────────────────────────────────────────

@dashboard_admin_required
def admin_settings(request):
    gate = AuthorizationGate(request.session)
    form = PasswordForm(request.POST or None)

    try:
        gate.registry.wait_until_ready()
    except PasswordsNotReady:
        messages.error(request, 'Admin passwords are still loading. Please refresh in a moment.')
    else:
        if request.method == 'POST' and form.is_valid():
            if gate.add_secret(form.cleaned_data['password']):
                messages.success(request, 'Password added successfully.')
                return redirect('dashboard:settings')
            messages.error(request, 'Password cannot be empty or already exist.')

    passwords = gate.passwords
    return render(request, 'dashboard/settings.html', {
        'form': form,
        'passwords': passwords,
        'can_remove': len(passwords) > 1,
        'page': 'settings',
    })


@require_POST
@dashboard_admin_required
def password_delete(request, password_id):
    gate = AuthorizationGate(request.session)
    try:
        gate.registry.wait_until_ready()
    except PasswordsNotReady:
        messages.error(request, 'Admin passwords are still loading. Please refresh in a moment.')
        return redirect('dashboard:settings')

    if gate.delete_secret(password_id):
        messages.success(request, 'Password removed successfully.')
    elif len(gate.passwords) <= 1:
        messages.error(request, 'Cannot remove the last password.')
    else:
        messages.error(request, 'Failed to remove password.')
    return redirect('dashboard:settings')
