"""
DevEvent - Developer event listings
Handles event creation, event pages and booking a spot.
"""

from flask import Blueprint

events_bp = Blueprint(
    'events',
    __name__,
    template_folder='templates',
)

# Import routes after blueprint is created to avoid circular imports
from devevent import routes  # noqa: E402,F401
