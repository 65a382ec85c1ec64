"""
DevEvent - The Hub for Every Dev Event
Main Flask Application File

Lists hackathons, meetups, workshops and conferences, lets organizers
publish events and lets visitors book a spot.
"""

import logging

from flask import Flask, render_template
from flask_wtf.csrf import CSRFProtect

from devevent import config, events_bp

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

csrf = CSRFProtect()


def create_app(test_config=None):
    """
    Build the Flask application.
    test_config overrides the values taken from devevent.config.
    """
    app = Flask(__name__)

    app.config.from_mapping(
        SECRET_KEY=config.SECRET_KEY,
        DATABASE_PATH=config.DATABASE_PATH,
        UPLOAD_FOLDER=config.UPLOAD_FOLDER,
        IMAGE_URL_PREFIX=config.IMAGE_URL_PREFIX,
        MAX_CONTENT_LENGTH=config.MAX_CONTENT_LENGTH,
        MAX_IMAGE_SIZE=config.MAX_IMAGE_SIZE,
        # API clients post multipart forms without CSRF tokens;
        # FlaskForm still checks its own token on the booking form.
        WTF_CSRF_CHECK_DEFAULT=False,
    )
    if test_config:
        app.config.update(test_config)

    csrf.init_app(app)
    app.register_blueprint(events_bp)

    # ==================== ERROR HANDLERS ====================

    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 errors"""
        return render_template('404.html'), 404

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors"""
        logger.error("Internal server error: %s", error)
        return render_template('500.html'), 500

    return app


# ==================== MAIN ====================

if __name__ == '__main__':
    app = create_app()
    logger.info("Starting DevEvent at http://127.0.0.1:5000")
    app.run(debug=True, host='0.0.0.0', port=5000)
