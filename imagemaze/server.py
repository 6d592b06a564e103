"""
project: Image Maze
module: server.py
License: Apache-2.0

Server bootstrap.

Exposes helpers to start the web server and configure application logging.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from imagemaze import app


def start_server(host="0.0.0.0", port=5000, debug: bool = False):  # pragma: no cover (runtime only)
    """Start the Flask server.

    When debug=True, Flask's debugger and reloader provide verbose tracebacks.
    Also configures application logging to a rotating file and console.
    """
    with app.app_context():
        _configure_logging()
    try:
        print(f"[INFO] Starting maze server on {host}:{port}")
        app.run(host=host, port=port, debug=debug, threaded=True)
    except KeyboardInterrupt:
        print("\n[INFO] Server stopped by user (Ctrl+C)")
        sys.exit(0)


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_STDLIB_LEVELS = {"debug": logging.DEBUG, "info": logging.INFO, "warn": logging.WARNING, "error": logging.ERROR}


def _configure_logging(level: str | None = None):
    """Send stdlib logging (Flask, werkzeug, 500 tracebacks) to the console and instance/app.log.

    The level follows MAZE_LOG_LEVEL so both loggers agree. The file rotates at
    ~1MB keeping three backups; when instance/ is not writable only the console
    handler is installed. Safe to call repeatedly.
    """
    level = level or os.getenv("MAZE_LOG_LEVEL", "info")
    lvl = _STDLIB_LEVELS.get(level.lower(), logging.INFO)
    try:
        os.makedirs(app.instance_path, exist_ok=True)
    except OSError:
        pass

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler()]
    log_path = os.path.join(app.instance_path, "app.log")
    try:
        handlers.append(RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3))
    except OSError as e:
        # Read-only deployments keep console logging
        print(f"[WARN] File logging disabled, cannot open {log_path}: {e}")

    root = logging.getLogger()
    root.setLevel(lvl)
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        h.setLevel(lvl)
        h.setFormatter(formatter)
        root.addHandler(h)
