"""
Admin authorization gate.

Access to the dashboard is controlled by a short list of shared admin
passwords kept in the remote store. The list is fetched once per process
(PasswordRegistry) and a successful match sets a marker in the visitor's
session (AdminSession). AuthorizationGate ties the two together for views.

  Anonymous ──login(correct password)──▶ Authorized
  Authorized ──logout()──────────────────▶ Anonymous

Known weak points:
  - passwords are compared in plaintext (the store returns them as-is)
  - a session marker is trusted without re-checking the password
"""
import hmac
import logging
import threading
from dataclasses import dataclass

from django.conf import settings

from apps.core.exceptions import RemoteStoreError
from apps.core.store import get_store

from .exceptions import PasswordsNotReady

logger = logging.getLogger(__name__)

SESSION_KEY = 'is_admin'


@dataclass(frozen=True)
class Password:
    id: int
    password: str

    @classmethod
    def from_api(cls, data: dict) -> 'Password':
        try:
            return cls(id=int(data['id']), password=str(data['password']))
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError('Password payload is missing id/password') from exc


def _same_secret(a: str, b: str) -> bool:
    return hmac.compare_digest(a.encode('utf-8'), b.encode('utf-8'))


# ─────────────────────────────────────────────────────────────────────────────
# Password registry (process-wide)
# ─────────────────────────────────────────────────────────────────────────────

class PasswordRegistry:
    """
    Cached copy of the admin password list with an explicit "ready" signal.

    Invariants:
      - the list is never reduced to zero entries
      - no empty or duplicate (exact match) password is ever added
      - the local list changes only after the remote store confirms
    """

    def __init__(self):
        self._passwords = []
        self._lock = threading.Lock()
        # Serializes add/delete across their store calls; _lock only guards the list.
        self._mutation_lock = threading.Lock()
        self._ready = threading.Event()
        self._loader = None
        self._started = False
        self.load_failed = False

    @property
    def passwords(self) -> list:
        with self._lock:
            return list(self._passwords)

    @property
    def is_ready(self) -> bool:
        return self._ready.is_set()

    # ── Loading ───────────────────────────────────────────────────────────────

    def start_loading(self):
        """Fetch the password list on a background thread (once at a time)."""
        with self._lock:
            if self._loader is not None and self._loader.is_alive():
                return
            self._started = True
            self._ready.clear()
            self._loader = threading.Thread(target=self.load, name='admin-password-loader', daemon=True)
            self._loader.start()

    def load(self):
        """Fetch the password list synchronously. Always leaves the registry ready."""
        with self._lock:
            self._started = True
        try:
            rows = get_store().list_passwords()
            passwords = [Password.from_api(row) for row in rows]
        except (RemoteStoreError, ValueError):
            logger.exception('Failed to load admin passwords')
            with self._lock:
                self._passwords = []
                self.load_failed = True
        else:
            with self._lock:
                self._passwords = passwords
                self.load_failed = False
            logger.info('Loaded %d admin password(s)', len(passwords))
        finally:
            self._ready.set()

    def wait_until_ready(self, timeout: float = None):
        """
        Block until the password list has loaded.
        Starts a load if none has run yet, or if the last one failed.
        Raises PasswordsNotReady if loading takes longer than `timeout` seconds.
        """
        if timeout is None:
            timeout = settings.SPARKLE_PASSWORDS_READY_TIMEOUT
        if not self._started or (self.load_failed and self._ready.is_set()):
            self.start_loading()
        if not self._ready.wait(timeout):
            raise PasswordsNotReady(f'Admin passwords did not load within {timeout}s')

    def reset(self):
        """Forget everything; the next wait_until_ready() reloads."""
        loader = self._loader
        if loader is not None:
            loader.join(timeout=5)
        with self._lock:
            self._passwords = []
            self._ready.clear()
            self._loader = None
            self._started = False
            self.load_failed = False

    # ── Queries / mutations ───────────────────────────────────────────────────

    def matches(self, candidate: str) -> bool:
        if not candidate:
            return False
        # No early exit.
        found = False
        for entry in self.passwords:
            if _same_secret(entry.password, candidate):
                found = True
        return found

    def add(self, value: str) -> bool:
        if not value:
            return False
        with self._mutation_lock:
            if any(p.password == value for p in self.passwords):
                return False
            try:
                created = Password.from_api(get_store().create_password(value))
            except (RemoteStoreError, ValueError):
                logger.exception('Failed to add admin password')
                return False
            with self._lock:
                self._passwords.append(created)
        logger.info('Admin password %s added', created.id)
        return True

    def delete(self, password_id: int) -> bool:
        with self._mutation_lock:
            if len(self.passwords) <= 1:
                logger.warning('Refusing to remove admin password %s — it is the last one', password_id)
                return False
            try:
                get_store().delete_password(password_id)
            except RemoteStoreError:
                logger.exception('Failed to remove admin password %s', password_id)
                return False
            with self._lock:
                self._passwords = [p for p in self._passwords if p.id != password_id]
        logger.info('Admin password %s removed', password_id)
        return True


registry = PasswordRegistry()


# ─────────────────────────────────────────────────────────────────────────────
# Session marker
# ─────────────────────────────────────────────────────────────────────────────

class AdminSession:
    """The "is admin" flag in a visitor's session. Lives until logout or browser close."""

    def __init__(self, session):
        self.session = session

    @property
    def is_authorized(self) -> bool:
        return self.session.get(SESSION_KEY) is True

    def authorize(self):
        # New session key on privilege change
        self.session.cycle_key()
        self.session[SESSION_KEY] = True
        self.session.modified = True

    def clear(self):
        self.session.pop(SESSION_KEY, None)
        self.session.modified = True


# ─────────────────────────────────────────────────────────────────────────────
# Gate
# ─────────────────────────────────────────────────────────────────────────────

class AuthorizationGate:

    def __init__(self, session, registry: PasswordRegistry = registry, ready_timeout: float = None):
        self.admin_session = AdminSession(session)
        self.registry = registry
        self.ready_timeout = ready_timeout

    @property
    def is_authorized(self) -> bool:
        return self.admin_session.is_authorized

    @property
    def passwords(self) -> list:
        return self.registry.passwords

    def login(self, candidate: str) -> bool:
        """
        Authorize the session if `candidate` equals one of the admin passwords.
        Waits for the password list to finish loading first.
        Raises PasswordsNotReady if it does not load in time.
        """
        self.registry.wait_until_ready(self.ready_timeout)
        if not self.registry.matches(candidate):
            logger.info('Admin login failed')
            return False
        self.admin_session.authorize()
        logger.info('Admin login succeeded')
        return True

    def logout(self):
        self.admin_session.clear()
        logger.info('Admin logout')

    def add_secret(self, value: str) -> bool:
        return self.registry.add(value)

    def delete_secret(self, password_id: int) -> bool:
        return self.registry.delete(password_id)
