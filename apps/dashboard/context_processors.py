from .gate import AdminSession


def admin_session(request):
    """Expose `is_admin` to every template (header switches to dashboard links)."""
    return {'is_admin': AdminSession(request.session).is_authorized}
