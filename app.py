from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import RequestEntityTooLarge
import logging
import os

from config import Config
from logging_config import setup_logging
from routes.merge_pdf import merge_pdf_bp

logger = logging.getLogger(__name__)


def create_app(overrides=None):
    app = Flask(__name__, static_folder="static", static_url_path="/static")
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    setup_logging(app.config["LOG_LEVEL"])

    CORS(app, origins=app.config["CORS_ORIGINS"])
    os.makedirs(app.config["UPLOAD_FOLDER"], exist_ok=True)

    app.register_blueprint(merge_pdf_bp)

    # =========================
    # CLIENT PAGE
    # =========================
    @app.route("/", methods=["GET"])
    @app.route("/index.html", methods=["GET"])
    def index():
        return app.send_static_file("index.html")

    # =========================
    # HEALTH CHECK
    # =========================
    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({
            "status": "PDF merge service running",
            "endpoints": ["/api/merge"]
        })

    @app.errorhandler(RequestEntityTooLarge)
    def too_large(e):
        limit_mb = app.config["MAX_CONTENT_LENGTH"] // (1024 * 1024)
        return jsonify({"message": f"Upload exceeds the {limit_mb} MB limit."}), 413

    return app


# =========================
# START SERVER
# =========================
if __name__ == "__main__":
    app = create_app()
    port = app.config["PORT"]
    logger.info(f"Server is running at http://localhost:{port}")
    logger.info(f"Open your browser to http://localhost:{port}/index.html")
    app.run(host="0.0.0.0", port=port, debug=app.config["DEBUG"])
