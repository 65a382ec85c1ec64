"""
DevEvent Configuration
"""
import logging
import os
import secrets

logger = logging.getLogger(__name__)

# Base directory of the package
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Database path
DATABASE_PATH = os.environ.get(
    'DEVEVENT_DATABASE_PATH',
    os.path.join(BASE_DIR, 'data', 'devevent.db')
)

# Upload folder for event images and the URL they are served under
UPLOAD_FOLDER = os.environ.get(
    'DEVEVENT_UPLOAD_FOLDER',
    os.path.join(BASE_DIR, 'static', 'uploads', 'DevEvent')
)
IMAGE_URL_PREFIX = '/uploads/'

# Max request size and max size of a single event image
MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # 16MB
MAX_IMAGE_SIZE = 10 * 1024 * 1024  # 10MB

ALLOWED_IMAGE_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp'}
ALLOWED_IMAGE_TYPES = {'image/jpeg', 'image/png', 'image/gif', 'image/webp'}

# Event rules
VALID_MODES = ['online', 'offline', 'hybrid']
TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000

# Slugs that collide with fixed page routes
RESERVED_SLUGS = {'new'}

# Flask secret key (MUST be set in production via environment variable)
SECRET_KEY = os.environ.get('FLASK_SECRET_KEY')
if not SECRET_KEY:
    # Development fallback - random key per process
    SECRET_KEY = secrets.token_hex(32)
    logger.warning(
        "Using auto-generated SECRET_KEY. Set FLASK_SECRET_KEY environment variable in production!"
    )
