"""
Event entity class with validation methods.
Represents a listed event in the DevEvent system.
"""
import json
import re
from datetime import date, datetime
from typing import Optional, List, Dict, Any

from devevent.config import VALID_MODES, TITLE_MAX_LENGTH, DESCRIPTION_MAX_LENGTH

_TIME_FORMATS = ('%H:%M', '%H:%M:%S', '%I:%M %p', '%I:%M%p', '%I %p', '%I%p')

# Text fields that must be present and non-blank, with their labels
REQUIRED_TEXT_FIELDS = {
    'title': 'Title',
    'description': 'Description',
    'overview': 'Overview',
    'image': 'Image',
    'venue': 'Venue',
    'location': 'Location',
    'date': 'Date',
    'time': 'Time',
    'mode': 'Mode',
    'audience': 'Audience',
    'organizer': 'Organizer',
}


def slugify(title: str) -> str:
    """Turn a title into a URL slug: 'Dev Summit 2026!' -> 'dev-summit-2026'."""
    slug = re.sub(r'[^a-z0-9]+', '-', (title or '').lower())
    return slug.strip('-')


def normalize_date(value: Optional[str]) -> Optional[str]:
    """Return the date as YYYY-MM-DD, or None if it cannot be parsed."""
    if not value or not value.strip():
        return None
    value = value.strip()
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date().isoformat()
    except ValueError:
        return None


def normalize_time(value: Optional[str]) -> Optional[str]:
    """Return the time as 24h HH:MM, or None if it cannot be parsed."""
    if not value or not value.strip():
        return None
    value = value.strip().upper()
    for fmt in _TIME_FORMATS:
        try:
            return datetime.strptime(value, fmt).strftime('%H:%M')
        except ValueError:
            continue
    return None


class Event:
    """
    Entity class representing an event.
    Contains validation methods and conversion to/from database rows.
    """

    def __init__(
        self,
        title: str,
        description: str,
        overview: str,
        venue: str,
        location: str,
        date: str,
        time: str,
        mode: str,
        audience: str,
        organizer: str,
        id: Optional[int] = None,
        slug: Optional[str] = None,
        image: Optional[str] = None,
        agenda: Optional[List[str]] = None,
        tags: Optional[List[str]] = None,
        created_at: Optional[str] = None,
        updated_at: Optional[str] = None
    ):
        self.id = id
        self.title = title
        self.slug = slug or slugify(title)
        self.description = description
        self.overview = overview
        self.image = image
        self.venue = venue
        self.location = location
        self.date = date
        self.time = time
        self.mode = mode
        self.audience = audience
        self.organizer = organizer
        self.agenda = agenda or []
        self.tags = tags or []

        now = datetime.now().isoformat()
        self.created_at = created_at or now
        self.updated_at = updated_at or now

    def normalize(self) -> None:
        """Trim text fields and bring date, time and mode to canonical form."""
        for field in REQUIRED_TEXT_FIELDS:
            value = getattr(self, field)
            if isinstance(value, str):
                setattr(self, field, value.strip())
        self.mode = (self.mode or '').lower()
        self.date = normalize_date(self.date) or self.date
        self.time = normalize_time(self.time) or self.time

    def validate(self, require_image: bool = True) -> Dict[str, str]:
        """
        Validate the event data.
        Returns a dictionary of field names to error messages.
        Empty dictionary means validation passed.
        """
        errors = {}

        for field, label in REQUIRED_TEXT_FIELDS.items():
            if field == 'image' and not require_image:
                continue
            value = getattr(self, field)
            if not value or not str(value).strip():
                errors[field] = f"{label} is required"

        if 'title' not in errors and len(self.title) > TITLE_MAX_LENGTH:
            errors['title'] = f"Title cannot exceed {TITLE_MAX_LENGTH} characters"

        if 'description' not in errors and len(self.description) > DESCRIPTION_MAX_LENGTH:
            errors['description'] = f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters"

        if 'title' not in errors and not self.slug:
            errors['title'] = "Title must contain at least one letter or number"

        if 'mode' not in errors and self.mode not in VALID_MODES:
            errors['mode'] = "Mode must be one of: " + ', '.join(VALID_MODES)

        if 'date' not in errors and normalize_date(self.date) is None:
            errors['date'] = "Date must be a valid date (YYYY-MM-DD)"

        if 'time' not in errors and normalize_time(self.time) is None:
            errors['time'] = "Time must be a valid time (HH:MM)"

        if not self.agenda:
            errors['agenda'] = "At least one agenda item is required"

        if not self.tags:
            errors['tags'] = "At least one tag is required"

        return errors

    def shares_tags_with(self, other: 'Event') -> bool:
        """Check if the two events have at least one tag in common."""
        return bool(set(self.tags) & set(other.tags))

    def to_dict(self) -> Dict[str, Any]:
        """Convert the Event to a dictionary (database row)."""
        data = self.to_json()
        data['agenda'] = json.dumps(self.agenda)
        data['tags'] = json.dumps(self.tags)
        return data

    def to_json(self) -> Dict[str, Any]:
        """Convert the Event to its API representation."""
        return {
            'id': self.id,
            'title': self.title,
            'slug': self.slug,
            'description': self.description,
            'overview': self.overview,
            'image': self.image,
            'venue': self.venue,
            'location': self.location,
            'date': self.date,
            'time': self.time,
            'mode': self.mode,
            'audience': self.audience,
            'agenda': list(self.agenda),
            'organizer': self.organizer,
            'tags': list(self.tags),
            'created_at': self.created_at,
            'updated_at': self.updated_at
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Event':
        """Create an Event from a dictionary (database row)."""
        agenda = json.loads(data.get('agenda') or '[]')
        tags = json.loads(data.get('tags') or '[]')

        return cls(
            id=data.get('id'),
            title=data.get('title', ''),
            slug=data.get('slug'),
            description=data.get('description', ''),
            overview=data.get('overview', ''),
            image=data.get('image'),
            venue=data.get('venue', ''),
            location=data.get('location', ''),
            date=data.get('date', ''),
            time=data.get('time', ''),
            mode=data.get('mode', ''),
            audience=data.get('audience', ''),
            agenda=agenda,
            organizer=data.get('organizer', ''),
            tags=tags,
            created_at=data.get('created_at'),
            updated_at=data.get('updated_at')
        )

    def __repr__(self) -> str:
        return f"Event(id={self.id}, slug='{self.slug}', date='{self.date}')"
