"""
Booking entity class.
A visitor's reserved spot at an event, identified by email address.
"""
import re
from datetime import datetime
from typing import Optional, Dict, Any

EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')


class Booking:
    """Entity class representing a booked spot."""

    def __init__(
        self,
        event_id: int,
        email: str,
        id: Optional[int] = None,
        created_at: Optional[str] = None
    ):
        self.id = id
        self.event_id = event_id
        self.email = (email or '').strip().lower()
        self.created_at = created_at or datetime.now().isoformat()

    def validate(self) -> Dict[str, str]:
        """Validate the booking. Empty dictionary means validation passed."""
        errors = {}
        if not self.email:
            errors['email'] = "Email is required"
        elif not EMAIL_PATTERN.match(self.email):
            errors['email'] = "Please enter a valid email address"
        return errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'event_id': self.event_id,
            'email': self.email,
            'created_at': self.created_at
        }

    def __repr__(self) -> str:
        return f"Booking(id={self.id}, event_id={self.event_id}, email='{self.email}')"
