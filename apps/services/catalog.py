"""
Service catalog — the fixed list of cleaning services offered.

Booking records carry the service `id` only; titles and descriptions are
resolved here at render time. Price labels are free-form and not
authoritative (several services are quoted on request).
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Service:
    id: str
    title: str
    description: str
    price: str = ''

    @property
    def summary(self):
        """First 80 characters of the description, for cards on the home page."""
        if len(self.description) <= 80:
            return self.description
        return self.description[:80].rstrip() + '...'


SERVICES = (
    Service('deep-cleaning', 'Deep Cleaning',
            'A thorough cleaning of your entire home, top to bottom.'),
    Service('carpet-cleaning', 'Carpet Cleaning',
            'Professional steam cleaning for your carpets.', '$90'),
    Service('kitchen-cleaning', 'Kitchen Cleaning',
            'We sanitize all surfaces and clean appliances.'),
    Service('bathroom-cleaning', 'Bathroom Cleaning',
            'A complete disinfection and cleaning of bathrooms.', '$100'),
    Service('window-cleaning', 'Window Cleaning',
            'Streak-free cleaning for all interior and exterior windows.', '$150'),
    Service('office-cleaning', 'Office Cleaning',
            'Customized cleaning plans for commercial spaces.', 'Contact for Quote'),
)

_BY_ID = {s.id: s for s in SERVICES}


def get_service(service_id: str):
    """Return the catalog entry for `service_id`, or None if unknown."""
    return _BY_ID.get(service_id)


def service_choices():
    """(id, title) pairs for form select fields."""
    return [(s.id, s.title) for s in SERVICES]
