from io import StringIO

import httpx
import pytest
from django.core.management import call_command
from django.core.management.base import CommandError


def _run(*args):
    out = StringIO()
    call_command('check_store', *args, stdout=out)
    return out.getvalue()


def test_reports_counts(remote):
    remote.add_booking()
    remote.add_booking()
    remote.add_password('abc')

    output = _run()

    assert 'bookings:        2' in output
    assert 'admin passwords: 1' in output
    assert 'check_store: remote store OK' in output


def test_warns_when_no_passwords_configured():
    output = _run()

    assert 'no admin passwords configured' in output


def test_password_option_checks_remote_login(remote):
    remote.add_password('abc')

    assert 'password: accepted' in _run('--password', 'abc')
    assert 'password: rejected' in _run('--password', 'nope')


def test_unreachable_store_fails(remote):
    remote.offline = True

    with pytest.raises(CommandError, match='Remote store check failed'):
        _run()


def test_password_refused_with_401_is_reported_rejected(remote, monkeypatch):
    remote.add_password('abc')
    monkeypatch.setattr(remote, 'login', lambda request: httpx.Response(401, json={'success': False}))

    output = _run('--password', 'wrong')

    assert 'password: rejected' in output
    assert 'check_store: remote store OK' in output


def test_password_check_fails_when_store_goes_offline(remote, monkeypatch):
    def offline_login(request):
        raise httpx.ConnectError('store offline', request=request)

    monkeypatch.setattr(remote, 'login', offline_login)

    with pytest.raises(CommandError, match='Password check failed'):
        _run('--password', 'abc')
