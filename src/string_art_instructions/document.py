"""Load and validate renderer output, resolving segments to pin indices.

The renderer writes a JSON document with the run arguments, the pixel
coordinates of every pin and the chosen line segments.  Segments reference
pins by coordinate, so each endpoint is looked up by value in the pin list
(first matching pin wins) and the resulting index pair is stored sorted
ascending.  Orientation is decided later by the sequencer.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .constants import CIRCLE_ARRANGEMENT

logger = logging.getLogger(__name__)

Coordinate = tuple[float, float]
Segment = tuple[int, int]


class InstructionError(ValueError):
    """Raised when a document cannot be turned into stringing instructions."""


@dataclass(frozen=True)
class ArtworkDocument:
    """Validated, indexed contents of a renderer output document."""

    pin_locations: tuple[Coordinate, ...]
    pin_count: int
    segments: tuple[Segment, ...]
    image_width: float | None = None
    image_height: float | None = None


def _coordinate_key(value: Any) -> Coordinate | None:
    """Normalise ``{"x": .., "y": ..}`` or ``[x, y]`` to an ``(x, y)`` tuple.

    Returns ``None`` for anything that is not a coordinate.
    """
    if isinstance(value, dict):
        if set(value) >= {"x", "y"}:
            x, y = value["x"], value["y"]
        else:
            return None
    elif isinstance(value, (list, tuple)) and len(value) == 2:
        x, y = value
    else:
        return None
    for v in (x, y):
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            return None
    return (x, y)


def _segment_endpoints(raw: Any, index: int) -> tuple[Any, Any]:
    # The renderer's own writer wraps the pair as {"points": [...], "rgb": ...}.
    if isinstance(raw, dict) and "points" in raw:
        raw = raw["points"]
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise InstructionError(
            f"Line segment {index} must have exactly two endpoints, got {raw!r}."
        )
    return raw[0], raw[1]


def build_pin_lookup(pin_locations: list[Any]) -> dict[Coordinate, int]:
    """Map each distinct coordinate to the index of its first occurrence."""
    lookup: dict[Coordinate, int] = {}
    for i, location in enumerate(pin_locations):
        key = _coordinate_key(location)
        if key is None:
            raise InstructionError(f"Pin {i} has an invalid location: {location!r}.")
        if key in lookup:
            logger.warning(
                "Pins %d and %d share location %s; endpoints resolve to pin %d",
                lookup[key],
                i,
                key,
                lookup[key],
            )
            continue
        lookup[key] = i
    return lookup


def resolve_segment(
    raw: Any, index: int, lookup: dict[Coordinate, int]
) -> Segment:
    """Resolve one raw segment to a canonical ``(low, high)`` pin pair.

    Raises:
        InstructionError: If an endpoint is not one of the pin locations,
            or both endpoints land on the same pin.
    """
    pins: list[int] = []
    for endpoint in _segment_endpoints(raw, index):
        key = _coordinate_key(endpoint)
        pin = lookup.get(key) if key is not None else None
        if pin is None:
            raise InstructionError(
                f"pin not found: {endpoint!r} (line segment {index})"
            )
        pins.append(pin)
    a, b = sorted(pins)
    if a == b:
        raise InstructionError(
            f"Line segment {index} starts and ends at pin {a}."
        )
    return (a, b)


def _require_list(data: dict[str, Any], key: str) -> list[Any]:
    if key not in data:
        raise InstructionError(f"Document is missing '{key}'.")
    value = data[key]
    if not isinstance(value, list):
        raise InstructionError(f"Expected '{key}' to be a list.")
    return value


def _optional_dimension(data: dict[str, Any], key: str) -> float | None:
    value = data.get(key)
    if value is None or isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def index_document(data: dict[str, Any]) -> ArtworkDocument:
    """Validate a parsed renderer document and index its segments.

    Args:
        data: Parsed JSON document.

    Returns:
        ArtworkDocument with segments in input order, each a sorted pin pair.

    Raises:
        InstructionError: On the first precondition that does not hold.
    """
    if not isinstance(data, dict):
        raise InstructionError("Expected the document to be a JSON object.")
    args = data.get("args")
    if not isinstance(args, dict):
        args = {}

    arrangement = args.get("pin_arrangement")
    if not isinstance(arrangement, str) or arrangement.lower() != CIRCLE_ARRANGEMENT:
        raise InstructionError(
            "Can only generate instructions for circular pin arrangements "
            f"(got {arrangement!r})."
        )

    colors = args.get("foreground_colors")
    if not isinstance(colors, list) or len(colors) != 1:
        raise InstructionError("Can only generate instructions for single-color pieces.")

    pin_count = args.get("pin_count")
    if isinstance(pin_count, bool) or not isinstance(pin_count, int):
        raise InstructionError("Expected pin count to be an integer.")
    if pin_count <= 0:
        raise InstructionError("Expected pin count to be positive.")

    pin_locations = _require_list(data, "pin_locations")
    line_segments = _require_list(data, "line_segments")
    if not line_segments:
        raise InstructionError("Document has no line segments to string.")

    if len(pin_locations) != pin_count:
        logger.warning(
            "pin_count is %d but %d pin locations were given",
            pin_count,
            len(pin_locations),
        )

    lookup = build_pin_lookup(pin_locations)
    segments = tuple(
        resolve_segment(raw, i, lookup) for i, raw in enumerate(line_segments)
    )
    logger.debug("Indexed %d segments over %d pins", len(segments), pin_count)

    return ArtworkDocument(
        pin_locations=tuple(
            (float(x), float(y)) for x, y in map(_coordinate_key, pin_locations)
        ),
        pin_count=pin_count,
        segments=segments,
        image_width=_optional_dimension(data, "image_width"),
        image_height=_optional_dimension(data, "image_height"),
    )


def load_document(path: Path) -> ArtworkDocument:
    """Read a renderer JSON file from *path* and index it.

    Raises:
        FileNotFoundError: If *path* does not exist.
        InstructionError: If the file is not valid JSON or fails validation.
    """
    if not path.exists():
        raise FileNotFoundError(f"Document not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InstructionError(f"Could not parse {path}: {exc}") from exc
    return index_document(data)
