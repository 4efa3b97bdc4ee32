"""Draw a traversal onto an image to check it before stringing."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import cv2
import numpy as np

from .document import ArtworkDocument
from .sequence import DirectedStep

Color = tuple[int, int, int]


def _canvas_size(document: ArtworkDocument) -> tuple[int, int]:
    """(width, height) of the renderer image, or the pin bounding box."""
    xs = [x for x, _ in document.pin_locations]
    ys = [y for _, y in document.pin_locations]
    width = document.image_width or (max(xs, default=0) + 1)
    height = document.image_height or (max(ys, default=0) + 1)
    return int(np.ceil(width)), int(np.ceil(height))


def _point(document: ArtworkDocument, pin: int) -> tuple[int, int]:
    x, y = document.pin_locations[pin]
    return int(round(x)), int(round(y))


def _rim(document: ArtworkDocument) -> tuple[tuple[float, float], float]:
    """Centre and radius of the circle the pins sit on."""
    pins = np.asarray(document.pin_locations, dtype=np.float64).reshape(-1, 2)
    centre = pins.mean(axis=0)
    radius = float(np.hypot(*(pins - centre).T).mean())
    return (float(centre[0]), float(centre[1])), radius


def _draw_wrap(
    canvas: np.ndarray,
    document: ArtworkDocument,
    rim: tuple[tuple[float, float], float],
    from_pin: int,
    to_pin: int,
    color: Color,
) -> None:
    """Draw the short-way arc along the rim from *from_pin* to *to_pin*."""
    (cx, cy), radius = rim
    angles = []
    for pin in (from_pin, to_pin):
        x, y = document.pin_locations[pin]
        angles.append(np.degrees(np.arctan2(y - cy, x - cx)))
    start = angles[0]
    sweep = (angles[1] - angles[0] + 180.0) % 360.0 - 180.0
    cv2.ellipse(
        canvas,
        (int(round(cx)), int(round(cy))),
        (int(round(radius)), int(round(radius))),
        0.0,
        float(min(start, start + sweep)),
        float(max(start, start + sweep)),
        color,
        1,
        cv2.LINE_AA,
    )


def render_traversal(
    document: ArtworkDocument,
    traversal: Sequence[DirectedStep],
    *,
    line_color: Color = (40, 40, 40),
    wrap_color: Color = (0, 0, 220),
    pin_color: Color = (160, 160, 160),
    background: Color = (255, 255, 255),
    thickness: int = 1,
) -> np.ndarray:
    """Render *traversal* as a BGR image.

    Strung steps are drawn as straight lines in *line_color*.  Wraps, where
    the thread moves along the rim to a step that does not chain, are drawn
    as thin arcs along the pin circle in *wrap_color*.  Pins are small dots.

    Returns:
        ``(height, width, 3)`` uint8 array.
    """
    width, height = _canvas_size(document)
    canvas = np.empty((height, width, 3), dtype=np.uint8)
    canvas[:] = background

    for pin in range(len(document.pin_locations)):
        cv2.circle(canvas, _point(document, pin), 2, pin_color, -1)

    rim = _rim(document)
    last_point: int | None = None
    for step in traversal:
        if last_point is not None and last_point != step[0]:
            _draw_wrap(canvas, document, rim, last_point, step[0], wrap_color)
        cv2.line(
            canvas,
            _point(document, step[0]),
            _point(document, step[1]),
            line_color,
            thickness,
            cv2.LINE_AA,
        )
        last_point = step[1]

    return canvas


def save_preview(image: np.ndarray, path: Path) -> None:
    """Write *image* to *path*, creating parent directories.

    Raises:
        OSError: If OpenCV cannot encode or write the file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not cv2.imwrite(str(path), image):
        raise OSError(f"Could not write preview image: {path}")
