"""Repositories package for DevEvent."""
from .event_repository import EventRepository
from .booking_repository import BookingRepository
