"""
management command: check_store

Probes the remote store the site depends on and reports what it holds.

  python manage.py check_store
  python manage.py check_store --password <secret>   # also verify an admin password

Exits non-zero when the store cannot be reached or answers with an error,
so it can be used as a deploy-time health check.
"""
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from apps.core.exceptions import RemoteStoreError
from apps.core.store import get_store


class Command(BaseCommand):
    help = 'Check that the remote booking store is reachable and report record counts'

    def add_arguments(self, parser):
        parser.add_argument(
            '--password',
            help='Also ask the store whether this admin password is valid',
        )

    def handle(self, *args, **options):
        store = get_store()
        self.stdout.write(f'Checking remote store at {settings.SPARKLE_API_BASE}...')

        try:
            bookings = store.list_bookings()
            passwords = store.list_passwords()
        except RemoteStoreError as exc:
            raise CommandError(f'Remote store check failed: {exc}') from exc

        self.stdout.write(f'  bookings:        {len(bookings)}')
        self.stdout.write(f'  admin passwords: {len(passwords)}')
        if not passwords:
            self.stdout.write(self.style.WARNING('  no admin passwords configured; nobody can log in'))

        if options['password'] is not None:
            try:
                valid = store.check_password(options['password'])
            except RemoteStoreError as exc:
                raise CommandError(f'Password check failed: {exc}') from exc
            if valid:
                self.stdout.write(self.style.SUCCESS('  password: accepted'))
            else:
                self.stdout.write(self.style.ERROR('  password: rejected'))

        self.stdout.write(self.style.SUCCESS('check_store: remote store OK'))
