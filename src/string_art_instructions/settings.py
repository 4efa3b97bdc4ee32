"""Preview settings: built-in defaults, optionally overridden by a JSON file."""

from __future__ import annotations

import json
from pathlib import Path

from .document import InstructionError

SETTINGS_PATH = Path("string_art.json")

# Colours are BGR, as OpenCV expects.
DEFAULTS: dict[str, object] = {
    "preview_line_color": [40, 40, 40],
    "preview_wrap_color": [0, 0, 220],
    "preview_pin_color": [160, 160, 160],
    "preview_background": [255, 255, 255],
    "preview_thickness": 1,
}


def _is_color(value: object) -> bool:
    return (
        isinstance(value, list)
        and len(value) == 3
        and all(
            isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255
            for c in value
        )
    )


def _check_value(key: str, value: object, path: Path) -> None:
    if key == "preview_thickness":
        ok = isinstance(value, int) and not isinstance(value, bool) and value > 0
        expected = "a positive integer"
    else:
        ok = _is_color(value)
        expected = "a [B, G, R] list of integers in 0-255"
    if not ok:
        raise InstructionError(
            f"Setting '{key}' in {path} must be {expected}, got {value!r}."
        )


def load_defaults(path: Path | None = None) -> dict[str, object]:
    """Return settings, preferring values saved in *path* (or ``string_art.json``).

    Raises:
        InstructionError: If the file is not a JSON object, names a setting
            that does not exist, or holds a value of the wrong type.
    """
    path = path or SETTINGS_PATH
    if not path.exists():
        return dict(DEFAULTS)
    try:
        saved = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InstructionError(f"Could not parse settings {path}: {exc}") from exc
    if not isinstance(saved, dict):
        raise InstructionError(f"Settings file {path} must hold a JSON object.")
    unknown = sorted(set(saved) - set(DEFAULTS))
    if unknown:
        raise InstructionError(f"Unknown settings in {path}: {', '.join(unknown)}")
    for key, value in saved.items():
        _check_value(key, value, path)
    return {**DEFAULTS, **saved}
