"""
project: Image Maze
module: __init__.py
License: Apache-2.0

Flask application factory and configuration.

Configuration is sourced from environment variables (optionally from a local
.env file) with defaults suitable for development. A local `instance/`
directory holds runtime data such as the rotating log file.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, render_template

# Load .env if present so `SECRET_KEY`, `MAZE_MAX_UPLOAD_BYTES`, etc. can be
# supplied without exporting shell variables during development.
load_dotenv()

app = Flask(__name__, instance_relative_config=True)

try:
    os.makedirs(app.instance_path, exist_ok=True)
except OSError:
    # Read-only deployments still serve mazes; only file logging needs it
    pass

max_upload_bytes = int(os.getenv("MAZE_MAX_UPLOAD_BYTES", str(2 * 1024 * 1024)))

app.config.update(
    SECRET_KEY=os.getenv("SECRET_KEY", "dev-secret-change-me"),
    TEMPLATES_AUTO_RELOAD=True,
    MAZE_MAX_UPLOAD_BYTES=max_upload_bytes,
    # Multipart framing and the other form fields ride on top of the image
    MAX_CONTENT_LENGTH=max_upload_bytes + 64 * 1024,
    MAZE_ENABLE_METRICS=bool(os.getenv("MAZE_ENABLE_METRICS", "1") == "1"),
    MAZE_MIN_DIM=int(os.getenv("MAZE_MIN_DIM", "11")),
    MAZE_MAX_DIM=int(os.getenv("MAZE_MAX_DIM", "501")),
)

from imagemaze.routes import main  # noqa: E402

app.register_blueprint(main.bp)


def create_app():
    """Return the Flask app instance."""
    return app


@app.errorhandler(413)
def too_large(e):
    from imagemaze.logging_utils import log

    log.warn(event="image_rejected", reason="too_large", limit=app.config["MAZE_MAX_UPLOAD_BYTES"])
    return main.render_index(error=f"Image too large (max. {app.config['MAZE_MAX_UPLOAD_BYTES']} bytes)."), 413


# Error handling: in non-debug mode, show a simple 500 page and log details
@app.errorhandler(500)
def internal_error(e):
    error_id = uuid.uuid4().hex[:8]
    logging.exception("Unhandled exception (id=%s)", error_id)
    return render_template("500.html", error_id=error_id), 500
