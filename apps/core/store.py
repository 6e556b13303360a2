"""
Remote store client — the only module that speaks HTTP.

Every booking and admin password lives in an external JSON API. Each method
below maps onto exactly one endpoint:

  GET    /bookings                          list_bookings()
  GET    /bookings/number/{bookingNumber}   get_booking_by_number(number)
  POST   /bookings                          create_booking(fields)
  PUT    /bookings/{id}/status?status=...   update_booking_status(id, status)
  DELETE /bookings/{id}                     delete_booking(id)
  POST   /api/auth/login                    check_password(password)
  GET    /api/auth/getallpasswords          list_passwords()
  POST   /api/auth/passwords                create_password(password)
  DELETE /api/auth/passwords/{id}           delete_password(id)

Methods return the raw `data` payload (dicts / lists of dicts) and raise
RemoteStoreError subclasses on failure. Converting failures into None / False
is the caller's job.
"""
import logging
import threading
from urllib.parse import quote

import httpx
from django.conf import settings

from .exceptions import RecordNotFound, StoreResponseError, StoreUnavailable

logger = logging.getLogger(__name__)


class RemoteStore:

    def __init__(self, base_url: str, timeout: float = 10.0, transport: httpx.BaseTransport = None):
        self.base_url = base_url
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={'Accept': 'application/json'},
        )

    def close(self):
        self._client.close()

    # ── Transport helpers ─────────────────────────────────────────────────────

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning('Remote store %s %s failed: %s', method, path, exc)
            raise StoreUnavailable(f'{method} {path} failed: {exc}') from exc

        if response.status_code == 404:
            raise RecordNotFound(f'{method} {path} returned 404', status_code=404)
        if response.is_error:
            logger.warning('Remote store %s %s returned %s', method, path, response.status_code)
            raise StoreResponseError(
                f'{method} {path} returned {response.status_code}',
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _json(response: httpx.Response) -> dict:
        try:
            body = response.json()
        except ValueError as exc:
            raise StoreResponseError(
                f'{response.request.method} {response.request.url.path} returned invalid JSON',
                status_code=response.status_code,
            ) from exc
        if not isinstance(body, dict):
            raise StoreResponseError(
                f'{response.request.method} {response.request.url.path} returned a non-object body',
                status_code=response.status_code,
            )
        return body

    def _data(self, response: httpx.Response):
        body = self._json(response)
        if body.get('data') is None:
            raise StoreResponseError(
                f'{response.request.method} {response.request.url.path} returned no data',
                status_code=response.status_code,
            )
        return body['data']

    # ── Bookings ──────────────────────────────────────────────────────────────

    def list_bookings(self) -> list:
        data = self._data(self._request('GET', '/bookings'))
        if not isinstance(data, list):
            raise StoreResponseError('GET /bookings returned a non-list payload')
        return data

    def get_booking_by_number(self, booking_number: str) -> dict:
        path = f"/bookings/number/{quote(booking_number, safe='')}"
        return self._data(self._request('GET', path))

    def create_booking(self, fields: dict) -> dict:
        return self._data(self._request('POST', '/bookings', json=fields))

    def update_booking_status(self, booking_id: int, status: str) -> None:
        self._request('PUT', f'/bookings/{booking_id}/status', params={'status': status})

    def delete_booking(self, booking_id: int) -> None:
        self._request('DELETE', f'/bookings/{booking_id}')

    # ── Admin passwords ───────────────────────────────────────────────────────

    def check_password(self, password: str) -> bool:
        """
        Ask the store itself whether `password` is valid.
        Any non-success reply (401, 404, bad body) counts as rejected;
        only StoreUnavailable propagates.
        """
        try:
            body = self._json(self._request('POST', '/api/auth/login', json={'password': password}))
        except StoreResponseError as exc:
            logger.info('Remote login refused: %s', exc)
            return False
        return body.get('success') is True

    def list_passwords(self) -> list:
        data = self._data(self._request('GET', '/api/auth/getallpasswords'))
        if not isinstance(data, list):
            raise StoreResponseError('GET /api/auth/getallpasswords returned a non-list payload')
        return data

    def create_password(self, password: str) -> dict:
        return self._data(self._request('POST', '/api/auth/passwords', json={'password': password}))

    def delete_password(self, password_id: int) -> None:
        self._request('DELETE', f'/api/auth/passwords/{password_id}')


_store = None
_store_lock = threading.Lock()


def get_store() -> RemoteStore:
    """Process-wide client built from settings on first use."""
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                _store = RemoteStore(settings.SPARKLE_API_BASE, timeout=settings.SPARKLE_API_TIMEOUT)
    return _store
