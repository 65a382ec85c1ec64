import io
import os

import pytest
from werkzeug.datastructures import FileStorage

from devevent.init_db import init_db

PNG_BYTES = b'\x89PNG\r\n\x1a\n' + b'\x00' * 64


@pytest.fixture
def db_path(tmp_path):
    path = os.path.join(str(tmp_path), 'devevent.db')
    init_db(path)
    return path


@pytest.fixture
def upload_folder(tmp_path):
    return os.path.join(str(tmp_path), 'uploads')


@pytest.fixture
def app(db_path, upload_folder):
    from app import create_app

    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test',
        'WTF_CSRF_ENABLED': False,
        'DATABASE_PATH': db_path,
        'UPLOAD_FOLDER': upload_folder,
    })
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_image():
    def _make(filename='banner.png', data=PNG_BYTES, content_type='image/png'):
        return FileStorage(stream=io.BytesIO(data), filename=filename, content_type=content_type)
    return _make


@pytest.fixture
def event_fields():
    return {
        'title': 'PyCon Summit 2026',
        'description': 'A gathering of Python developers from around the world.',
        'overview': 'Talks, workshops and sprints over three days.',
        'venue': 'Convention Center',
        'location': 'Berlin, Germany',
        'date': '2026-11-20',
        'time': '09:30',
        'mode': 'offline',
        'audience': 'Python developers',
        'organizer': 'Python Software Community',
    }


@pytest.fixture
def upload_form(event_fields):
    """Multipart payload for the test client, image included."""
    def _make(**overrides):
        data = dict(event_fields)
        data['tags'] = '["python", "web"]'
        data['agenda'] = 'Registration\nKeynote\nWorkshops'
        data['image'] = (io.BytesIO(PNG_BYTES), 'banner.png', 'image/png')
        data.update(overrides)
        return data
    return _make
