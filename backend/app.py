"""
Flight Search Flask Application.

Main entry point for the web application. Wires up:
- API routes (flight search, fares, routes)
- JSON error handling
- Static file serving for the search UI

Usage:
    python -m backend.app

Or with gunicorn:
    gunicorn 'backend.app:create_app()'
"""

import logging

from flask import Flask, jsonify, send_from_directory
from flask_cors import CORS

from backend.api import flights_bp, prices_bp, routes_bp
from backend.config import config, load_config
from backend.errors import ApiError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
# urllib3 debug lines include request URLs, which carry provider API keys
logging.getLogger('urllib3').setLevel(logging.INFO)
logger = logging.getLogger(__name__)


def create_app() -> Flask:
    """
    Application factory for Flask.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(
        __name__,
        static_folder='../frontend',
        static_url_path='',
    )

    # Enable CORS for API endpoints
    CORS(app, resources={r'/api/*': {'origins': '*'}})

    # Register API blueprints
    app.register_blueprint(flights_bp)
    app.register_blueprint(prices_bp)
    app.register_blueprint(routes_bp)

    settings = load_config()
    for name, provider in (('Aviation Stack', settings.aviationstack), ('FlightAPI.io', settings.flightapi)):
        if not provider.is_configured:
            logger.warning(f'{name} API key not configured - its endpoints will answer 500')

    # -------------------------------------------------------------------------
    # Frontend routes
    # -------------------------------------------------------------------------

    @app.route('/')
    def index():
        """Serve the search page."""
        return send_from_directory(app.static_folder, 'index.html')

    @app.route('/health')
    def health():
        """Health check, including which providers have keys set."""
        current = load_config()
        return {
            'status': 'ok',
            'providers': {
                'aviationstack': current.aviationstack.is_configured,
                'flightapi': current.flightapi.is_configured,
            },
        }

    # -------------------------------------------------------------------------
    # Error handlers
    # -------------------------------------------------------------------------

    @app.errorhandler(ApiError)
    def api_error(e: ApiError):
        if e.status_code >= 500:
            logger.error(f'{type(e).__name__}: {e.message}')
        else:
            logger.info(f'{type(e).__name__} ({e.status_code}): {e.message}')
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(404)
    def not_found(e):
        return {'error': 'Not found'}, 404

    @app.errorhandler(500)
    def server_error(e):
        logger.error(f'Server error: {e}')
        return {'error': 'Internal server error'}, 500

    return app


def run_development_server():
    """Run the development server."""
    app = create_app()

    logger.info(f'Starting Flight Search on http://localhost:{config.port}')

    app.run(
        host='0.0.0.0',
        port=config.port,
        debug=config.debug,
    )


if __name__ == '__main__':
    run_development_server()
