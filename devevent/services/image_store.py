"""
ImageStore class for event banner uploads.
Validates uploaded images and stores them in the upload folder.
"""
import os
import uuid
from typing import Optional, List, Tuple

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from devevent.config import (
    UPLOAD_FOLDER, IMAGE_URL_PREFIX, MAX_IMAGE_SIZE,
    ALLOWED_IMAGE_EXTENSIONS, ALLOWED_IMAGE_TYPES
)

# Magic bytes for image detection (imghdr was removed in Python 3.13)
_IMAGE_SIGNATURES = {
    b'\xff\xd8\xff': 'jpeg',
    b'\x89PNG\r\n\x1a\n': 'png',
    b'GIF87a': 'gif',
    b'GIF89a': 'gif',
    b'RIFF': 'webp',  # WebP starts with RIFF....WEBP
}


def detect_image_type(file) -> Optional[str]:
    """Sniff the image format from the file header; the stream position is kept at 0."""
    header = file.read(12)
    file.seek(0)
    for signature, fmt in _IMAGE_SIGNATURES.items():
        if header[:len(signature)] == signature:
            if fmt == 'webp' and header[8:12] != b'WEBP':
                continue
            return fmt
    return None


class ImageStore:
    """Stores event images on disk and hands back their public URL."""

    def __init__(
        self,
        upload_folder: str = UPLOAD_FOLDER,
        url_prefix: str = IMAGE_URL_PREFIX,
        max_size: int = MAX_IMAGE_SIZE
    ):
        self.upload_folder = upload_folder
        self.url_prefix = url_prefix
        self.max_size = max_size

    def _ensure_upload_folder(self) -> None:
        if not os.path.exists(self.upload_folder):
            os.makedirs(self.upload_folder)

    @staticmethod
    def _allowed_file(filename: str) -> bool:
        return '.' in filename and \
               filename.rsplit('.', 1)[1].lower() in ALLOWED_IMAGE_EXTENSIONS

    def validate(self, file: Optional[FileStorage]) -> List[str]:
        """Return a list of problems with the upload; empty means it can be saved."""
        if not file or not file.filename:
            return ["Image file is required"]

        if not self._allowed_file(file.filename):
            return [f"Invalid file type: {file.filename}"]

        file.seek(0, 2)
        size = file.tell()
        file.seek(0)

        if size == 0:
            return [f"Empty file: {file.filename}"]
        if size > self.max_size:
            return [f"File too large: {file.filename} (max {self.max_size // (1024 * 1024)}MB)"]

        content_type = file.content_type or ''
        if content_type not in ALLOWED_IMAGE_TYPES:
            return [f"Invalid content type for {file.filename}: {content_type}"]

        if detect_image_type(file) is None:
            return [f"File content doesn't match image type: {file.filename}"]

        return []

    def save(self, file: Optional[FileStorage]) -> Tuple[Optional[str], List[str]]:
        """
        Validate and store an uploaded image.
        Returns tuple of (public_url, errors).
        """
        errors = self.validate(file)
        if errors:
            return None, errors

        self._ensure_upload_folder()
        unique_name = secure_filename(f"{uuid.uuid4().hex}_{file.filename}")
        file.save(os.path.join(self.upload_folder, unique_name))
        return f"{self.url_prefix}{unique_name}", []

    def delete(self, url: Optional[str]) -> bool:
        """Remove a stored image by its public URL. Returns True if a file was removed."""
        if not url or not url.startswith(self.url_prefix):
            return False
        path = os.path.join(self.upload_folder, url[len(self.url_prefix):])
        if os.path.exists(path):
            os.remove(path)
            return True
        return False
