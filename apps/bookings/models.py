"""
Booking records as seen by this site.

The remote store is the source of truth; a Booking here is a transient view
built from the store's JSON (`Booking.from_api`). Nothing is persisted locally.

Lifecycle:
  created           → Pending    (public booking form)
  Pending           → Approved   (admin dashboard)
  Pending           → Rejected   (admin dashboard)
"""
from dataclasses import dataclass
from datetime import datetime

from django.db import models

from apps.services.catalog import get_service


class BookingStatus(models.TextChoices):
    PENDING  = 'Pending',  'Pending'
    APPROVED = 'Approved', 'Approved'
    REJECTED = 'Rejected', 'Rejected'


# Fields a customer fills in; the store assigns id, bookingNumber and status.
BOOKING_FIELDS = ('name', 'email', 'phone', 'address', 'service', 'date', 'time')


@dataclass
class Booking:
    id: int
    booking_number: str
    name: str
    email: str
    phone: str
    address: str
    service: str
    date: str
    time: str
    status: str = BookingStatus.PENDING

    @classmethod
    def from_api(cls, data: dict) -> 'Booking':
        """
        Build a Booking from the remote store's wire shape.
        Raises ValueError if the identity fields are missing or the status is unknown.
        """
        if not isinstance(data, dict):
            raise ValueError(f'Booking payload must be an object, got {type(data).__name__}')
        try:
            booking_id = int(data['id'])
            booking_number = data['bookingNumber']
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f'Booking payload is missing id/bookingNumber: {data!r}') from exc
        if booking_number is None or not str(booking_number).strip():
            raise ValueError(f'Booking {booking_id} has no booking number')
        booking_number = str(booking_number)

        status = data.get('status') or BookingStatus.PENDING
        if status not in BookingStatus.values:
            raise ValueError(f"Booking {booking_number} has unknown status '{status}'")

        return cls(
            id=booking_id,
            booking_number=booking_number,
            status=BookingStatus(status),
            **{field: str(data.get(field) or '') for field in BOOKING_FIELDS},
        )

    @property
    def is_pending(self):
        return self.status == BookingStatus.PENDING

    @property
    def service_title(self):
        service = get_service(self.service)
        return service.title if service else self.service

    @property
    def scheduled_date(self):
        """The requested date as a date object, or None if the store sent something unparseable."""
        try:
            return datetime.strptime(self.date[:10], '%Y-%m-%d').date()
        except ValueError:
            return None
