"""
Services: ImageStore upload validation and storage
"""
import os

from devevent.services.image_store import ImageStore, detect_image_type


def test_save_stores_file_and_returns_public_url(upload_folder, make_image):
    store = ImageStore(upload_folder=upload_folder, url_prefix='/uploads/')
    url, errors = store.save(make_image('My Banner.png'))

    assert errors == []
    assert url.startswith('/uploads/')
    assert url.endswith('_My_Banner.png')
    assert os.path.exists(os.path.join(upload_folder, url[len('/uploads/'):]))


def test_missing_file_is_rejected(upload_folder):
    assert ImageStore(upload_folder=upload_folder).save(None) == (None, ['Image file is required'])


def test_invalid_uploads_are_rejected(upload_folder, make_image):
    store = ImageStore(upload_folder=upload_folder, max_size=100)

    assert store.validate(make_image('notes.txt'))[0].startswith('Invalid file type')
    assert store.validate(make_image(data=b''))[0].startswith('Empty file')
    assert store.validate(make_image(data=b'\x89PNG\r\n\x1a\n' + b'\x00' * 200))[0].startswith('File too large')
    assert store.validate(make_image(content_type='text/plain'))[0].startswith('Invalid content type')
    assert store.validate(make_image(data=b'plain text here'))[0].startswith("File content doesn't match")
    assert not os.path.exists(upload_folder)


def test_detect_image_type(make_image):
    assert detect_image_type(make_image(data=b'GIF89a' + b'\x00' * 10)) == 'gif'
    assert detect_image_type(make_image(data=b'RIFF\x00\x00\x00\x00WEBP')) == 'webp'
    assert detect_image_type(make_image(data=b'RIFF\x00\x00\x00\x00WAVE')) is None


def test_delete(upload_folder, make_image):
    store = ImageStore(upload_folder=upload_folder, url_prefix='/uploads/')
    url, _ = store.save(make_image())

    assert store.delete(url) is True
    assert store.delete(url) is False
    assert store.delete('https://elsewhere.example/x.png') is False
