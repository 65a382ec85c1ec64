"""
EventService class for business logic.
Handles event creation and lookup with validation.
"""
import logging
from typing import Optional, List, Dict, Tuple

from werkzeug.datastructures import FileStorage

from devevent.config import RESERVED_SLUGS
from devevent.models.event import Event
from devevent.repositories.event_repository import EventRepository
from devevent.services.image_store import ImageStore

logger = logging.getLogger(__name__)

# Plain text form fields accepted when creating an event
EVENT_TEXT_FIELDS = (
    'title', 'description', 'overview', 'venue', 'location',
    'date', 'time', 'mode', 'audience', 'organizer',
)

# Inserts tried before giving up when concurrent requests keep taking the slug
SLUG_ATTEMPTS = 5


class EventService:
    """
    Service class for event business logic.
    Validates events, stores their images and assigns unique slugs.
    """

    def __init__(
        self,
        repository: Optional[EventRepository] = None,
        image_store: Optional[ImageStore] = None,
    ):
        """Initialize service with repository and image store."""
        self.repository = repository or EventRepository()
        self.image_store = image_store or ImageStore()

    def _unique_slug(self, base: str, suffix: int = 1) -> Tuple[str, int]:
        """
        First free slug among base, base-2, base-3, ... starting at suffix.
        Returns tuple of (slug, suffix_used).
        """
        slug = base if suffix < 2 else f"{base}-{suffix}"
        while slug in RESERVED_SLUGS or self.repository.slug_exists(slug):
            suffix = max(suffix, 1) + 1
            slug = f"{base}-{suffix}"
        return slug, suffix

    def _insert_with_unique_slug(self, event: Event) -> None:
        """Insert the event, moving to the next slug if another request took it first."""
        base = event.slug
        suffix = 1
        for _ in range(SLUG_ATTEMPTS):
            event.slug, suffix = self._unique_slug(base, suffix)
            event.id = self.repository.create(event)
            if event.id is not None:
                return
            logger.info("Slug %s was taken concurrently, retrying", event.slug)
            suffix = max(suffix, 1) + 1
        raise RuntimeError(f"Could not find a free slug for '{base}'")

    def create_event(
        self,
        fields: Dict[str, str],
        tags: List[str],
        agenda: List[str],
        image: Optional[FileStorage] = None,
    ) -> Tuple[Optional[Event], Dict[str, str]]:
        """
        Create a new event with validation.
        Returns tuple of (created_event, errors).
        """
        event = Event(
            tags=tags,
            agenda=agenda,
            **{name: fields.get(name) or '' for name in EVENT_TEXT_FIELDS}
        )
        event.normalize()

        errors = event.validate(require_image=False)
        image_errors = self.image_store.validate(image)
        if image_errors:
            errors['image'] = '; '.join(image_errors)
        if errors:
            return None, errors

        image_url, image_errors = self.image_store.save(image)
        if image_errors:
            return None, {'image': '; '.join(image_errors)}
        event.image = image_url

        try:
            self._insert_with_unique_slug(event)
        except Exception:
            # Don't leave an orphaned upload behind
            self.image_store.delete(image_url)
            raise

        logger.info("Created event %s (id=%s)", event.slug, event.id)
        return event, {}

    def list_events(self) -> List[Event]:
        """All events, newest first."""
        return self.repository.find_all()

    def get_event(self, slug: str) -> Optional[Event]:
        """Get an event by slug."""
        if not slug or not slug.strip():
            return None
        return self.repository.find_by_slug(slug.strip())

    def similar_events(self, slug: str) -> List[Event]:
        """
        Events sharing a tag with the event at slug.
        Returns an empty list for unknown slugs or when the lookup fails.
        """
        try:
            event = self.get_event(slug)
            if not event:
                return []
            return self.repository.find_similar(event)
        except Exception:
            logger.exception("Failed to load similar events for %s", slug)
            return []
