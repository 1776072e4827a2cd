"""Shade-scale engine behind a small JSON API (Flask).

Endpoints
---------
GET  /scale?base=3b82f6&kind=default|custom|neutral
POST /curves           {"base": "#3b82f6", "lightness": [...], "chroma": [...]}
POST /control-points   {"points": [{"x": 0, "y": 32}], "chroma": false}
POST /palette          {"primary": "#3b82f6", "accent": "#ec4899"}

Usage
-----
$ pip install -e .
$ python main.py          # starts on http://127.0.0.1:5000

Every response is computed from the request alone; nothing is stored between
calls. Set COLOR_SCALES_CANVAS_WIDTH / COLOR_SCALES_CANVAS_HEIGHT to change the
editor canvas the pixel coordinates are measured against.
"""

from __future__ import annotations

from color_scales.app import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=True, threaded=True)
