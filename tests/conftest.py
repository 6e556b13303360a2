"""
Test fixtures.

The remote store is replaced by FakeRemoteStore, an in-memory implementation
of the booking/password API served through httpx.MockTransport, so no test
touches the network.
"""
import itertools
import json
import re
import threading
import uuid

import httpx
import pytest
from django.urls import reverse

from apps.core import store as store_module
from apps.core.store import RemoteStore
from apps.dashboard.gate import registry


class FakeRemoteStore:
    """Minimal stand-in for the remote booking API. Enforces no business rules."""

    ROUTES = [
        ('GET',    r'/bookings',                         'list_bookings'),
        ('POST',   r'/bookings',                         'create_booking'),
        ('GET',    r'/bookings/number/(?P<number>[^/]+)', 'get_booking'),
        ('PUT',    r'/bookings/(?P<id>\d+)/status',      'update_status'),
        ('DELETE', r'/bookings/(?P<id>\d+)',             'delete_booking'),
        ('POST',   r'/api/auth/login',                   'login'),
        ('GET',    r'/api/auth/getallpasswords',         'list_passwords'),
        ('POST',   r'/api/auth/passwords',               'create_password'),
        ('DELETE', r'/api/auth/passwords/(?P<id>\d+)',   'delete_password'),
    ]

    def __init__(self):
        self.bookings = {}
        self.passwords = {}
        self.requests = []
        self.offline = False
        self.fail_status = None
        self.block = None
        self._booking_ids = itertools.count(1)
        self._password_ids = itertools.count(1)

    # ── Seeding helpers ───────────────────────────────────────────────────────

    def add_password(self, value, password_id=None):
        password_id = password_id or next(self._password_ids)
        self.passwords[password_id] = {'id': password_id, 'password': value}
        return self.passwords[password_id]

    def add_booking(self, **overrides):
        booking = {
            'name': 'Sam Customer',
            'email': 'sam@example.com',
            'phone': '555-0000',
            'address': '9 Elm St',
            'service': 'deep-cleaning',
            'date': '2025-07-01',
            'time': '09:00',
        }
        booking.update(overrides)
        return self._store_booking(booking)

    def _store_booking(self, fields):
        booking_id = fields.pop('id', None) or next(self._booking_ids)
        number = fields.pop('bookingNumber', None) or self._new_number()
        record = {'status': 'Pending', **fields, 'id': booking_id, 'bookingNumber': number}
        self.bookings[booking_id] = record
        return record

    def _new_number(self):
        taken = {b['bookingNumber'] for b in self.bookings.values()}
        while True:
            number = 'SPK' + uuid.uuid4().hex[:5].upper()
            if number not in taken:
                return number

    # ── Transport ─────────────────────────────────────────────────────────────

    @property
    def transport(self):
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.block is not None:
            self.block.wait(5)
        if self.offline:
            raise httpx.ConnectError('store offline', request=request)
        if self.fail_status:
            return httpx.Response(self.fail_status, json={'error': 'boom'})

        for method, pattern, name in self.ROUTES:
            match = re.fullmatch(pattern, request.url.path)
            if method == request.method and match:
                return getattr(self, name)(request, **match.groupdict())
        return httpx.Response(404, json={'error': 'not found'})

    @staticmethod
    def _body(request):
        return json.loads(request.content or b'{}')

    def list_bookings(self, request):
        return httpx.Response(200, json={'data': list(self.bookings.values())})

    def create_booking(self, request):
        return httpx.Response(201, json={'data': self._store_booking(self._body(request))})

    def get_booking(self, request, number):
        for booking in self.bookings.values():
            if booking['bookingNumber'] == number:
                return httpx.Response(200, json={'data': booking})
        return httpx.Response(404, json={'error': 'not found'})

    def update_status(self, request, id):
        booking = self.bookings.get(int(id))
        if booking is None:
            return httpx.Response(404, json={'error': 'not found'})
        booking['status'] = request.url.params['status']
        return httpx.Response(200, json={'data': booking})

    def delete_booking(self, request, id):
        if self.bookings.pop(int(id), None) is None:
            return httpx.Response(404, json={'error': 'not found'})
        return httpx.Response(204)

    def login(self, request):
        candidate = self._body(request).get('password')
        ok = any(p['password'] == candidate for p in self.passwords.values())
        return httpx.Response(200, json={'success': ok})

    def list_passwords(self, request):
        return httpx.Response(200, json={'data': list(self.passwords.values())})

    def create_password(self, request):
        return httpx.Response(201, json={'data': self.add_password(self._body(request)['password'])})

    def delete_password(self, request, id):
        if self.passwords.pop(int(id), None) is None:
            return httpx.Response(404, json={'error': 'not found'})
        return httpx.Response(204)


@pytest.fixture
def remote():
    return FakeRemoteStore()


@pytest.fixture(autouse=True)
def store(remote, monkeypatch):
    """Point get_store() at the fake for every test."""
    client = RemoteStore('http://store.test', timeout=2.0, transport=remote.transport)
    monkeypatch.setattr(store_module, '_store', client)
    yield client
    client.close()


@pytest.fixture(autouse=True)
def clean_registry():
    registry.reset()
    yield
    registry.reset()


@pytest.fixture
def stalled_store(remote):
    """Unblocks a deliberately stalled fake store at teardown."""
    remote.block = threading.Event()
    yield remote.block
    remote.block.set()


@pytest.fixture
def logged_in_client(client, remote):
    """Django test client that has logged in through the dashboard login page."""
    remote.add_password('abc')
    response = client.post(reverse('dashboard:login'), {'password': 'abc'})
    assert response.status_code == 302
    return client
