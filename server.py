#!/usr/bin/env python3
"""Wedding invitation server: public RSVP API plus the password-protected admin API.
Port configurable via PORT in .env."""

from types import SimpleNamespace

from flask import Flask, jsonify, send_from_directory

from wedding_site.api.routes import api_bp
from wedding_site.config import CONFIG_FILE, CORS_ORIGIN, DATABASE_FILE, HOST, PORT, PUBLIC_DIR
from wedding_site.logging import setup_logging
from wedding_site.services.admin_service import AdminQueryService
from wedding_site.services.config_store import ConfigStore
from wedding_site.services.response_store import ResponseStore
from wedding_site.services.rsvp_service import RsvpService


def create_app(config_store=None, response_store=None):
    config_store = config_store or ConfigStore(CONFIG_FILE)
    response_store = response_store or ResponseStore(DATABASE_FILE)
    response_store.load()

    app = Flask(__name__, static_folder=str(PUBLIC_DIR), static_url_path="")
    app.config["CORS_ORIGIN"] = CORS_ORIGIN
    app.extensions["wedding_site"] = SimpleNamespace(
        config=config_store,
        store=response_store,
        rsvp=RsvpService(response_store),
        admin=AdminQueryService(response_store, config_store),
    )

    @app.route("/")
    def index():
        return send_from_directory(PUBLIC_DIR, "index.html")

    @app.route("/healthz")
    def healthz():
        return jsonify({"status": "healthy"})

    app.register_blueprint(api_bp)
    return app


if __name__ == "__main__":
    setup_logging()
    app = create_app()
    app.logger.info(f"Wedding invitation server running at http://localhost:{PORT}")
    app.logger.info(f"Admin panel available at http://localhost:{PORT}/admin.html")
    app.run(host=HOST, port=PORT, debug=False)
