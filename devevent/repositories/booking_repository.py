"""
BookingRepository class for SQLite CRUD operations.
Handles all database interactions for bookings.
"""
import sqlite3
import os
from typing import Optional

from devevent.config import DATABASE_PATH
from devevent.models.booking import Booking


class BookingRepository:
    def __init__(self, db_path: str = DATABASE_PATH):
        """Initialize the repository with database path."""
        self.db_path = db_path
        data_dir = os.path.dirname(self.db_path)
        if data_dir and not os.path.exists(data_dir):
            os.makedirs(data_dir)

    def _get_connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def create(self, booking: Booking) -> Optional[int]:
        """
        Store a booking.
        Returns the new ID, or None if this email already booked the event.
        """
        conn = self._get_connection()
        try:
            data = booking.to_dict()
            del data['id']

            columns = ', '.join(data.keys())
            placeholders = ', '.join(['?' for _ in data])

            cursor = conn.execute(
                f"INSERT INTO bookings ({columns}) VALUES ({placeholders})",
                list(data.values())
            )
            conn.commit()
            return cursor.lastrowid
        except sqlite3.IntegrityError:
            return None
        finally:
            conn.close()

    def count_for_event(self, event_id: int) -> int:
        """Number of spots booked for an event."""
        conn = self._get_connection()
        try:
            row = conn.execute(
                "SELECT COUNT(*) AS count FROM bookings WHERE event_id = ?", (event_id,)
            ).fetchone()
            return row['count'] if row else 0
        finally:
            conn.close()

