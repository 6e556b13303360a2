"""
Remote store exceptions.
Raised by apps.core.store and caught by the booking engine and the password
registry, which turn them into None / False results for the views.
"""


class RemoteStoreError(Exception):
    """Base exception for anything that went wrong talking to the remote store."""
    pass


class StoreUnavailable(RemoteStoreError):
    """Raised when the request never got a response (connect error, timeout)."""
    pass


class StoreResponseError(RemoteStoreError):
    """Raised on a non-2xx response or a 2xx body without the expected payload."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class RecordNotFound(StoreResponseError):
    """Raised when the remote store answers 404."""
    pass
