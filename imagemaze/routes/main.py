"""
project: Image Maze
module: main.py
License: Apache-2.0

Maze form page and upload handler.

`GET /` renders a maze from the default image, `POST /` from the uploaded
one. Both return the parameter form prefilled with the resolved size.
"""

from typing import Optional

from flask import Blueprint, abort, current_app, jsonify, render_template, request
from PIL import Image

from imagemaze.imaging import ImageDecodeError, ImageTooLarge, decode_image, default_image
from imagemaze.logging_utils import log
from imagemaze.maze import Maze, MazeConfig, resolve_dimensions

bp = Blueprint("main", __name__)


def _get_int(name: str) -> Optional[int]:
    try:
        return int(request.values.get(name, ""))
    except ValueError:
        return None


def _get_bool(name: str) -> bool:
    return request.values.get(name) == name


def _load_image(max_bytes: int) -> Image.Image:
    upload = request.files.get("upimage")
    if upload is None or not upload.filename:
        return default_image()
    return decode_image(upload.stream, max_bytes)


def render_index(
    maze_uri: Optional[str] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    custom_size: bool = False,
    error: Optional[str] = None,
):
    return render_template(
        "index.html",
        maze_uri=maze_uri,
        width=width,
        height=height,
        custom_size=custom_size,
        error=error,
    )


@bp.route("/", methods=["GET", "POST"])
def index():
    cfg = MazeConfig.from_mapping(current_app.config)
    req_log = log.bind(method=request.method, path=request.path)
    custom_size = _get_bool("custom-size")
    req_width, req_height = _get_int("width"), _get_int("height")

    try:
        img = _load_image(cfg.max_upload_bytes)
    except ImageTooLarge:
        abort(413)
    except ImageDecodeError as e:
        req_log.warn(event="image_rejected", reason="decode", error=str(e))
        return (
            render_index(width=req_width, height=req_height, custom_size=custom_size, error=str(e)),
            400,
        )

    width, height = resolve_dimensions(
        img.width,
        img.height,
        custom_size,
        req_width,
        req_height,
        lo=cfg.min_dim,
        hi=cfg.max_dim,
    )
    maze = Maze.from_image(
        img,
        width,
        height,
        enable_metrics=cfg.enable_metrics,
        min_dim=cfg.min_dim,
        max_dim=cfg.max_dim,
    )
    maze.generate()
    req_log.info(
        event="maze_generated",
        width=width,
        height=height,
        runtime_ms=maze.metrics.get("runtime_ms"),
        rooms=maze.metrics.get("rooms_carved"),
    )
    return render_index(maze_uri=maze.to_data_uri(), width=width, height=height, custom_size=custom_size)


@bp.route("/healthz")
def healthz():
    return jsonify({"status": "ok"})
