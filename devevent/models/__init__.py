"""Models package for DevEvent."""
from .event import Event
from .booking import Booking
