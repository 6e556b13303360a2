"""
Custom exceptions for the admin authorization gate.
Raised in gate.py and caught in views.py.
"""


class AuthGateError(Exception):
    """Base exception for all admin gate errors."""
    pass


class PasswordsNotReady(AuthGateError):
    """Raised when the admin password list did not finish loading within the timeout."""
    pass
