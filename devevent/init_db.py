"""
DevEvent Database Initialization
Creates the events and bookings tables.
"""
import logging
import os
import sqlite3

from devevent.config import DATABASE_PATH

logger = logging.getLogger(__name__)


def init_db(db_path: str = DATABASE_PATH) -> None:
    """Initialize the DevEvent tables in the database at db_path."""
    data_dir = os.path.dirname(db_path)
    if data_dir and not os.path.exists(data_dir):
        os.makedirs(data_dir)

    conn = sqlite3.connect(db_path)
    try:
        cursor = conn.cursor()

        # Events table; tags and agenda are JSON-encoded lists
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS events (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                title TEXT NOT NULL,
                slug TEXT UNIQUE NOT NULL,
                description TEXT NOT NULL,
                overview TEXT NOT NULL,
                image TEXT NOT NULL,
                venue TEXT NOT NULL,
                location TEXT NOT NULL,
                date TEXT NOT NULL,
                time TEXT NOT NULL,
                mode TEXT NOT NULL,
                audience TEXT NOT NULL,
                agenda TEXT NOT NULL,
                organizer TEXT NOT NULL,
                tags TEXT NOT NULL,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
        ''')

        # Bookings table
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS bookings (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                event_id INTEGER NOT NULL,
                email TEXT NOT NULL,
                created_at TEXT NOT NULL,
                FOREIGN KEY (event_id) REFERENCES events(id),
                UNIQUE(event_id, email)
            )
        ''')

        cursor.execute('CREATE INDEX IF NOT EXISTS idx_events_created_at ON events (created_at)')

        conn.commit()
    finally:
        conn.close()
    logger.info("DevEvent tables initialized at %s", db_path)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    init_db()
