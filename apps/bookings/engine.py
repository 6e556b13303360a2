"""
Booking engine — booking lifecycle operations against the remote store.
No HTTP/request awareness; views call these and render the outcome.

Public API:
  create_booking(name, email, phone, address, service, date, time)
  get_booking_by_number(booking_number)
  list_bookings()
  update_booking_status(booking_id, status)
  delete_booking(booking_id)

None of these raise for remote failures. Every RemoteStoreError is logged
here and turned into None / False, so a view only has to check the result.
"""
import logging

from apps.core.exceptions import RecordNotFound, RemoteStoreError
from apps.core.store import get_store

from .models import BOOKING_FIELDS, Booking, BookingStatus

logger = logging.getLogger(__name__)


def create_booking(**fields):
    """
    Submit a new booking request. Returns the store-assigned Booking
    (with id, booking_number and status Pending) or None.

    All seven customer fields are required and must be non-blank;
    anything else is left to the store.
    """
    cleaned = {}
    for field in BOOKING_FIELDS:
        value = fields.get(field)
        value = str(value).strip() if value is not None else ''
        if not value:
            logger.warning('Booking rejected — required field "%s" is empty', field)
            return None
        cleaned[field] = value

    try:
        booking = Booking.from_api(get_store().create_booking(cleaned))
    except RemoteStoreError:
        logger.exception('Failed to create booking (service=%s)', cleaned['service'])
        return None
    except ValueError:
        logger.exception('Remote store returned a malformed booking on create')
        return None

    logger.info('Booking %s created (id=%s, service=%s)', booking.booking_number, booking.id, booking.service)
    return booking


def get_booking_by_number(booking_number: str):
    """Public status lookup. Returns the Booking or None when no such number exists."""
    booking_number = (booking_number or '').strip()
    if not booking_number:
        return None

    try:
        data = get_store().get_booking_by_number(booking_number)
    except RecordNotFound:
        logger.info('No booking found with number %s', booking_number)
        return None
    except RemoteStoreError as exc:
        logger.error('Lookup of booking %s failed: %s', booking_number, exc)
        return None

    try:
        return Booking.from_api(data)
    except ValueError as exc:
        logger.error('Malformed booking %s from remote store: %s', booking_number, exc)
        return None


def list_bookings():
    """
    Every booking, newest (highest id) first.
    Returns None when the store could not be read, [] when it holds no bookings.
    """
    try:
        rows = get_store().list_bookings()
    except RemoteStoreError as exc:
        logger.error('Failed to load bookings: %s', exc)
        return None

    bookings = []
    for row in rows:
        try:
            bookings.append(Booking.from_api(row))
        except ValueError as exc:
            logger.warning('Skipping malformed booking record: %s', exc)
    bookings.sort(key=lambda b: b.id, reverse=True)
    return bookings


def update_booking_status(booking_id: int, status: str) -> bool:
    """Set a booking's status. The caller re-fetches to see the result."""
    if status not in BookingStatus.values:
        logger.warning('Refusing to set booking %s to unknown status "%s"', booking_id, status)
        return False

    try:
        get_store().update_booking_status(booking_id, status)
    except RemoteStoreError as exc:
        logger.error('Failed to set booking %s to %s: %s', booking_id, status, exc)
        return False

    logger.info('Booking %s status set to %s', booking_id, status)
    return True


def delete_booking(booking_id: int) -> bool:
    try:
        get_store().delete_booking(booking_id)
    except RemoteStoreError as exc:
        logger.error('Failed to delete booking %s: %s', booking_id, exc)
        return False

    logger.info('Booking %s deleted', booking_id)
    return True
