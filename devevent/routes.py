"""
DevEvent - Flask Blueprint routes
JSON API for events plus the listing, detail, create and booking pages.
"""
import logging

from flask import (
    render_template, request, redirect, url_for, flash, jsonify,
    current_app, abort, send_from_directory
)
from werkzeug.exceptions import HTTPException

from devevent import events_bp
from devevent.forms import BookingForm
from devevent.init_db import init_db
from devevent.list_fields import read_list_field
from devevent.repositories.booking_repository import BookingRepository
from devevent.repositories.event_repository import EventRepository
from devevent.services.booking_service import BookingService
from devevent.services.event_service import EventService
from devevent.services.image_store import ImageStore

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Service helpers (built from the running app's config)
# ---------------------------------------------------------------------------
def _event_service() -> EventService:
    config = current_app.config
    return EventService(
        repository=EventRepository(config['DATABASE_PATH']),
        image_store=ImageStore(
            upload_folder=config['UPLOAD_FOLDER'],
            url_prefix=config['IMAGE_URL_PREFIX'],
            max_size=config['MAX_IMAGE_SIZE'],
        ),
    )


def _booking_service() -> BookingService:
    db_path = current_app.config['DATABASE_PATH']
    return BookingService(
        repository=BookingRepository(db_path),
        event_repository=EventRepository(db_path),
    )


def _create_from_request(service: EventService):
    """Run the submitted multipart form through EventService.create_event."""
    return service.create_event(
        fields=request.form,
        tags=read_list_field(request.form, 'tags'),
        agenda=read_list_field(request.form, 'agenda'),
        image=request.files.get('image'),
    )


# ---------------------------------------------------------------------------
# Initialize DB on first request
# ---------------------------------------------------------------------------
# Database files whose tables were already created by this process
_initialized_databases = set()


@events_bp.before_app_request
def _init_events_db_once():
    """Initialize the events tables on first request (runs once per database)."""
    db_path = current_app.config['DATABASE_PATH']
    if db_path not in _initialized_databases:
        init_db(db_path)
        _initialized_databases.add(db_path)


# ---------------------------------------------------------------------------
# Routes - JSON API
# ---------------------------------------------------------------------------
@events_bp.route('/api/events', methods=['POST'])
def api_create_event():
    """Create an event from a multipart form with an image upload."""
    try:
        image = request.files.get('image')
        if not image or not image.filename:
            return jsonify({'message': 'Image file is required'}), 400

        event, errors = _create_from_request(_event_service())
        if errors:
            return jsonify({'message': 'Invalid event data', 'errors': errors}), 400

        return jsonify({
            'message': 'Event created successfully',
            'event': event.to_json()
        }), 201
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error handling POST request")
        return jsonify({'message': 'Event creation Failed', 'error': str(e)}), 500


@events_bp.route('/api/events', methods=['GET'])
def api_list_events():
    """List all events, newest first."""
    try:
        events = _event_service().list_events()
        return jsonify({
            'message': 'Events fetched successfully',
            'events': [event.to_json() for event in events]
        }), 200
    except Exception as e:
        logger.exception("Failed to fetch events")
        return jsonify({'message': 'Failed to fetch events', 'error': str(e)}), 500


@events_bp.route('/api/events/<slug>', methods=['GET'])
def api_get_event(slug):
    """Get a single event by slug."""
    try:
        event = _event_service().get_event(slug)
        if not event:
            return jsonify({'message': f"Event with slug '{slug}' not found"}), 404
        return jsonify({'message': 'Event fetched successfully', 'event': event.to_json()}), 200
    except Exception as e:
        logger.exception("Failed to fetch event %s", slug)
        return jsonify({'message': 'Failed to fetch event', 'error': str(e)}), 500


@events_bp.route('/api/events/<slug>/similar', methods=['GET'])
def api_similar_events(slug):
    """Events sharing at least one tag with the given event."""
    events = _event_service().similar_events(slug)
    return jsonify({'events': [event.to_json() for event in events]}), 200


# ---------------------------------------------------------------------------
# Routes - Pages
# ---------------------------------------------------------------------------
@events_bp.route('/', endpoint='index')
def index():
    """Home page with the featured events."""
    events = []
    try:
        events = _event_service().list_events()
    except Exception:
        logger.exception("Failed to fetch events")
    return render_template('index.html', events=events)


@events_bp.route('/events/new', methods=['GET', 'POST'])
def create_event():
    """Organizer form for creating an event."""
    if request.method == 'POST':
        event, errors = _create_from_request(_event_service())
        if errors:
            return render_template(
                'create_event.html',
                errors=errors,
                form_data=request.form
            ), 400

        flash('Event created successfully!', 'success')
        return redirect(url_for('events.event_detail', slug=event.slug))

    return render_template('create_event.html', errors={}, form_data={})


@events_bp.route('/events/<slug>')
def event_detail(slug):
    """Event detail page with the booking card."""
    service = _event_service()
    event = service.get_event(slug)
    if not event:
        abort(404)

    booking_count = _booking_service().count(event)
    similar_events = service.similar_events(slug)

    return render_template(
        'event_detail.html',
        event=event,
        booking_count=booking_count,
        similar_events=similar_events,
        form=BookingForm()
    )


@events_bp.route('/events/<slug>/book', methods=['POST'])
def book_event(slug):
    """Book a spot at an event."""
    form = BookingForm()
    if not form.validate_on_submit():
        for messages in form.errors.values():
            for message in messages:
                flash(message, 'danger')
        return redirect(url_for('events.event_detail', slug=slug))

    _, errors = _booking_service().book(slug, form.email.data)
    if 'event' in errors:
        abort(404)
    if errors:
        for message in errors.values():
            flash(message, 'danger')
    else:
        flash('Thank you for signing up!', 'success')
    return redirect(url_for('events.event_detail', slug=slug))


@events_bp.route('/uploads/<path:filename>')
def uploaded_image(filename):
    """Serve a stored event image."""
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)
