"""
EventRepository class for SQLite CRUD operations.
Handles all database interactions for events.
"""
import sqlite3
import os
from typing import Optional, List

from devevent.config import DATABASE_PATH
from devevent.models.event import Event


class EventRepository:
    def __init__(self, db_path: str = DATABASE_PATH):
        """Initialize the repository with database path."""
        self.db_path = db_path
        self._ensure_data_dir()

    def _ensure_data_dir(self) -> None:
        """Ensure the data directory exists."""
        data_dir = os.path.dirname(self.db_path)
        if data_dir and not os.path.exists(data_dir):
            os.makedirs(data_dir)

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection with row factory."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def create(self, event: Event) -> Optional[int]:
        """
        Create a new event in the database.
        Returns the ID of the created event, or None if its slug is already taken.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            data = event.to_dict()
            del data['id']

            columns = ', '.join(data.keys())
            placeholders = ', '.join(['?' for _ in data])

            cursor.execute(
                f"INSERT INTO events ({columns}) VALUES ({placeholders})",
                list(data.values())
            )
            conn.commit()
            return cursor.lastrowid
        except sqlite3.IntegrityError as e:
            if 'events.slug' in str(e):
                return None
            raise
        finally:
            conn.close()

    def find_by_id(self, event_id: int) -> Optional[Event]:
        """Find an event by its ID."""
        conn = self._get_connection()
        try:
            row = conn.execute("SELECT * FROM events WHERE id = ?", (event_id,)).fetchone()
            return Event.from_dict(dict(row)) if row else None
        finally:
            conn.close()

    def find_by_slug(self, slug: str) -> Optional[Event]:
        """Find an event by its slug."""
        conn = self._get_connection()
        try:
            row = conn.execute("SELECT * FROM events WHERE slug = ?", (slug,)).fetchone()
            return Event.from_dict(dict(row)) if row else None
        finally:
            conn.close()

    def slug_exists(self, slug: str) -> bool:
        """Check if an event already uses this slug."""
        conn = self._get_connection()
        try:
            row = conn.execute("SELECT 1 FROM events WHERE slug = ?", (slug,)).fetchone()
            return row is not None
        finally:
            conn.close()

    def find_all(self) -> List[Event]:
        """Find all events, newest first."""
        conn = self._get_connection()
        try:
            rows = conn.execute(
                "SELECT * FROM events ORDER BY created_at DESC, id DESC"
            ).fetchall()
            return [Event.from_dict(dict(row)) for row in rows]
        finally:
            conn.close()

    def find_similar(self, event: Event) -> List[Event]:
        """
        Find other events sharing at least one tag with the given event.
        Newest first; the event itself is never included.
        """
        if not event.tags:
            return []
        return [
            other for other in self.find_all()
            if other.id != event.id and other.shares_tags_with(event)
        ]
