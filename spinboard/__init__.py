"""
Flask Application Factory with SocketIO initialization.
"""

from flask import Flask
from flask_socketio import SocketIO

from config import SECRET_KEY, ASYNC_MODE

socketio = SocketIO()


def create_app(async_mode=None, testing=False):
    app = Flask(__name__)

    app.config['SECRET_KEY'] = SECRET_KEY
    app.config['TESTING'] = testing

    from spinboard.routes import main_bp
    app.register_blueprint(main_bp)

    socketio.init_app(app, cors_allowed_origins="*", async_mode=async_mode or ASYNC_MODE)

    from spinboard import socketio_handlers  # noqa: F401

    @app.after_request
    def add_no_cache_headers(response):
        """Statistics change on every spin; never let the browser cache them."""
        if 'application/json' in response.content_type:
            response.headers['Cache-Control'] = 'no-cache, no-store, must-revalidate'
            response.headers['Pragma'] = 'no-cache'
            response.headers['Expires'] = '0'
        return response

    return app
