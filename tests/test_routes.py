import base64
import io
import re

from PIL import Image


def _png_upload(size, color=(120, 120, 120), name="test.png"):
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, format="PNG")
    buf.seek(0)
    return buf, name


def _maze_img(html):
    m = re.search(r'<img alt="maze" width="(\d+)" height="(\d+)" src="data:image/png;base64,([^"]+)"', html)
    assert m, "No maze image in page"
    png = base64.b64decode(m.group(3))
    return int(m.group(1)), int(m.group(2)), Image.open(io.BytesIO(png))


def test_index_renders_default_maze(client):
    r = client.get("/")
    assert r.status_code == 200
    html = r.get_data(as_text=True)
    assert "Image based maze generator" in html
    w, h, img = _maze_img(html)
    # default gradient is 256x256 -> 257x257
    assert (w, h) == (257, 257)
    assert img.size == (257, 257)
    assert 'disabled="disabled"' in html


def test_upload_follows_image_size(client):
    r = client.post(
        "/",
        data={"upimage": _png_upload((40, 20))},
        content_type="multipart/form-data",
    )
    assert r.status_code == 200
    w, h, img = _maze_img(r.get_data(as_text=True))
    # 40 -> 41, 40*0.5 = 20 -> 21
    assert (w, h) == (41, 21)
    assert img.mode == "P"


def test_upload_with_custom_width(client):
    r = client.post(
        "/",
        data={"upimage": _png_upload((40, 20)), "custom-size": "custom-size", "width": "15"},
        content_type="multipart/form-data",
    )
    assert r.status_code == 200
    html = r.get_data(as_text=True)
    w, h, _ = _maze_img(html)
    # 15*0.5 = 7 -> clamped to 11
    assert (w, h) == (15, 11)
    assert 'checked="checked"' in html
    assert 'id="width" value="15"' in html


def test_custom_size_values_ignored_without_checkbox(client):
    r = client.post(
        "/",
        data={"upimage": _png_upload((40, 20)), "width": "99", "height": "99"},
        content_type="multipart/form-data",
    )
    w, h, _ = _maze_img(r.get_data(as_text=True))
    assert (w, h) == (41, 21)


def test_custom_size_from_query_string(client):
    r = client.get("/?custom-size=custom-size&width=31&height=abc")
    w, h, _ = _maze_img(r.get_data(as_text=True))
    # height unparsable -> derived from the default image's square ratio
    assert (w, h) == (31, 31)


def test_broken_upload_reports_error(client):
    r = client.post(
        "/",
        data={"upimage": (io.BytesIO(b"not an image at all"), "bad.png")},
        content_type="multipart/form-data",
    )
    assert r.status_code == 400
    html = r.get_data(as_text=True)
    assert "Error:" in html
    assert 'alt="maze"' not in html


def test_upload_over_cap_rejected(client, test_app, monkeypatch):
    monkeypatch.setitem(test_app.config, "MAZE_MAX_UPLOAD_BYTES", 64)
    r = client.post(
        "/",
        data={"upimage": _png_upload((200, 200))},
        content_type="multipart/form-data",
    )
    assert r.status_code == 413
    assert "too large" in r.get_data(as_text=True)


def test_request_over_content_length_rejected(client, test_app, monkeypatch):
    monkeypatch.setitem(test_app.config, "MAX_CONTENT_LENGTH", 1024)
    r = client.post(
        "/",
        data={"upimage": (io.BytesIO(b"\0" * 4096), "big.png")},
        content_type="multipart/form-data",
    )
    assert r.status_code == 413


def test_empty_file_field_uses_default_image(client):
    r = client.post(
        "/",
        data={"upimage": (io.BytesIO(b""), "")},
        content_type="multipart/form-data",
    )
    assert r.status_code == 200
    w, h, _ = _maze_img(r.get_data(as_text=True))
    assert (w, h) == (257, 257)


def test_healthz(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.get_json() == {"status": "ok"}


def test_unhandled_error_renders_error_page(client, test_app, monkeypatch):
    from imagemaze.maze import Maze

    def boom(self):
        raise RuntimeError("carver exploded")

    monkeypatch.setattr(Maze, "generate", boom)
    monkeypatch.setitem(test_app.config, "PROPAGATE_EXCEPTIONS", False)
    r = client.get("/")
    assert r.status_code == 500
    assert "Error id:" in r.get_data(as_text=True)


def test_configured_max_dim_caps_maze(client, test_app, monkeypatch):
    monkeypatch.setitem(test_app.config, "MAZE_MAX_DIM", 51)
    r = client.get("/")
    assert r.status_code == 200
    w, h, _ = _maze_img(r.get_data(as_text=True))
    assert (w, h) == (51, 51)
