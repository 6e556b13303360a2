"""
Dashboard authorization decorator.

Redirects every request without the admin session marker to the dashboard
login page at /dashboard/login/, preserving the ?next= URL for post-login
redirect.
"""
from functools import wraps
from urllib.parse import urlencode

from django.shortcuts import redirect
from django.urls import reverse

from .gate import AdminSession


def dashboard_admin_required(view_func):
    """Require an authorized admin session. Redirect to dashboard login otherwise."""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if not AdminSession(request.session).is_authorized:
            login_url = reverse('dashboard:login')
            return redirect(f"{login_url}?{urlencode({'next': request.get_full_path()})}")
        return view_func(request, *args, **kwargs)
    return wrapper
