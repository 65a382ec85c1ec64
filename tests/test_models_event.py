"""
Models: Event entity
"""
import pytest

from devevent.models.event import Event, normalize_date, normalize_time, slugify


def _event(event_fields, **overrides):
    data = dict(event_fields)
    data.update(image='/uploads/banner.png', tags=['python'], agenda=['Keynote'])
    data.update(overrides)
    return Event(**data)


@pytest.mark.parametrize("title, expected", [
    ("PyCon Summit 2026", "pycon-summit-2026"),
    ("  Hello,   World!  ", "hello-world"),
    ("React & Node: Deep-Dive", "react-node-deep-dive"),
    ("!!!", ""),
])
def test_slugify(title, expected):
    assert slugify(title) == expected


@pytest.mark.parametrize("value, expected", [
    ("2026-11-20", "2026-11-20"),
    (" 2026-11-20 ", "2026-11-20"),
    ("2026-11-20T18:30:00", "2026-11-20"),
    ("20/11/2026", None),
    ("", None),
    (None, None),
])
def test_normalize_date(value, expected):
    assert normalize_date(value) == expected


@pytest.mark.parametrize("value, expected", [
    ("09:30", "09:30"),
    ("9:30", "09:30"),
    ("18:45:00", "18:45"),
    ("6:45 pm", "18:45"),
    ("10 AM", "10:00"),
    ("25:00", None),
    ("soon", None),
    (None, None),
])
def test_normalize_time(value, expected):
    assert normalize_time(value) == expected


def test_valid_event_has_no_errors(event_fields):
    event = _event(event_fields)
    assert event.validate() == {}
    assert event.slug == "pycon-summit-2026"


def test_missing_fields_are_reported(event_fields):
    event = _event(event_fields, overview="  ", organizer="", image=None, tags=[], agenda=[])
    errors = event.validate()
    assert errors["overview"] == "Overview is required"
    assert errors["organizer"] == "Organizer is required"
    assert errors["image"] == "Image is required"
    assert errors["tags"] == "At least one tag is required"
    assert errors["agenda"] == "At least one agenda item is required"


def test_image_can_be_left_out_of_validation(event_fields):
    event = _event(event_fields, image=None)
    assert "image" not in event.validate(require_image=False)


def test_length_mode_date_and_time_rules(event_fields):
    event = _event(
        event_fields,
        title="x" * 101,
        description="y" * 1001,
        mode="in-person",
        date="next week",
        time="whenever",
    )
    errors = event.validate()
    assert set(errors) == {"title", "description", "mode", "date", "time"}


def test_title_without_letters_or_numbers_is_rejected(event_fields):
    assert "title" in _event(event_fields, title="???").validate()


def test_normalize_trims_and_canonicalizes(event_fields):
    event = _event(event_fields, title="  Meetup  ", mode="Online", date="2026-11-20T10:00", time="7:05 pm")
    event.normalize()
    assert event.title == "Meetup"
    assert event.mode == "online"
    assert event.date == "2026-11-20"
    assert event.time == "19:05"


def test_to_dict_and_from_dict(event_fields):
    event = _event(event_fields, id=3, tags=["python", "web"], agenda=["Intro, welcome", "Talks"])
    row = event.to_dict()
    assert row["tags"] == '["python", "web"]'

    restored = Event.from_dict(row)
    assert restored.tags == ["python", "web"]
    assert restored.agenda == ["Intro, welcome", "Talks"]
    assert restored.to_json() == event.to_json()


def test_shares_tags_with(event_fields):
    first = _event(event_fields, tags=["python", "web"])
    assert first.shares_tags_with(_event(event_fields, tags=["web"]))
    assert not first.shares_tags_with(_event(event_fields, tags=["rust"]))
