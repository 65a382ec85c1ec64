"""
BookingService class for business logic.
Handles booking a spot at an event.
"""
import logging
from typing import Optional, Dict, Tuple

from devevent.models.booking import Booking
from devevent.models.event import Event
from devevent.repositories.booking_repository import BookingRepository
from devevent.repositories.event_repository import EventRepository

logger = logging.getLogger(__name__)


class BookingService:
    """Service class for booking business logic."""

    def __init__(
        self,
        repository: Optional[BookingRepository] = None,
        event_repository: Optional[EventRepository] = None,
    ):
        self.repository = repository or BookingRepository()
        self.event_repository = event_repository or EventRepository()

    def book(self, slug: str, email: str) -> Tuple[Optional[Booking], Dict[str, str]]:
        """
        Book a spot at the event with the given slug.
        Returns tuple of (booking, errors).
        """
        event = self.event_repository.find_by_slug(slug)
        if not event:
            return None, {'event': 'Event not found'}

        booking = Booking(event_id=event.id, email=email)
        errors = booking.validate()
        if errors:
            return None, errors

        booking_id = self.repository.create(booking)
        if booking_id is None:
            return None, {'email': 'You have already booked a spot for this event'}
        booking.id = booking_id

        logger.info("Booked spot %s for event %s", booking.id, event.slug)
        return booking, {}

    def count(self, event: Event) -> int:
        """Number of people who booked a spot at the event."""
        return self.repository.count_for_event(event.id)
