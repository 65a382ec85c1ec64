"""Services package for DevEvent."""
from .image_store import ImageStore
from .event_service import EventService
from .booking_service import BookingService
