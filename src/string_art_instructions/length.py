"""Estimate how much thread a traversal consumes on a physical board.

Each step is a straight chord between two pins, measured in image pixels
and scaled by ``width_inches / image_width``.  When a step does not start
where the previous one ended, the thread is routed along the rim instead of
being cut; that wrap is approximated as the short-way pin gap times the
arc spacing between neighbouring pins (``π × width / pin_count``).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from .constants import INCHES_PER_KILOMETER
from .document import Coordinate, InstructionError
from .sequence import DirectedStep, circular_distance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThreadEstimate:
    """Total thread length for one traversal."""

    inches: float
    chord_inches: float = 0.0
    wrap_inches: float = 0.0

    @property
    def rounded_inches(self) -> int:
        return int(round(self.inches))

    @property
    def kilometers(self) -> float:
        return round(self.inches / INCHES_PER_KILOMETER, 3)


def _check_dimensions(width_inches: float, image_width: float | None) -> None:
    if width_inches <= 0:
        raise InstructionError(
            f"Physical width must be positive, got {width_inches}."
        )
    if image_width is None or image_width <= 0:
        raise InstructionError(
            "Document needs a positive 'image_width' to estimate thread length."
        )


def chord_lengths(
    pin_locations: Sequence[Coordinate], traversal: Sequence[DirectedStep]
) -> np.ndarray:
    """Euclidean pixel length of every step."""
    steps = np.asarray(traversal, dtype=np.intp).reshape(-1, 2)
    locations = np.asarray(pin_locations, dtype=np.float64).reshape(-1, 2)
    delta = locations[steps[:, 1]] - locations[steps[:, 0]]
    return np.hypot(delta[:, 0], delta[:, 1])


def wrap_pin_gaps(traversal: Sequence[DirectedStep], pin_count: int) -> np.ndarray:
    """Pins skipped before each step; zero for the first and for chained steps."""
    gaps = np.zeros(len(traversal), dtype=np.int64)
    for i in range(1, len(traversal)):
        prev_end, start = traversal[i - 1][1], traversal[i][0]
        if prev_end != start:
            gaps[i] = circular_distance(prev_end, start, pin_count)
    return gaps


def step_parts(
    width_inches: float,
    image_width: float | None,
    pin_locations: Sequence[Coordinate],
    pin_count: int,
    traversal: Sequence[DirectedStep],
) -> tuple[np.ndarray, np.ndarray]:
    """Per-step chord inches and wrap inches, as two parallel arrays.

    Raises:
        InstructionError: If *width_inches* or *image_width* is not positive.
    """
    _check_dimensions(width_inches, image_width)
    inches_per_pixel = width_inches / image_width
    pin_spacing = math.pi * width_inches / pin_count
    chords = chord_lengths(pin_locations, traversal) * inches_per_pixel
    wraps = wrap_pin_gaps(traversal, pin_count) * pin_spacing
    return chords, wraps


def step_lengths(
    width_inches: float,
    image_width: float | None,
    pin_locations: Sequence[Coordinate],
    pin_count: int,
    traversal: Sequence[DirectedStep],
) -> np.ndarray:
    """Thread consumed by each step, in inches, including any wrap before it."""
    chords, wraps = step_parts(
        width_inches, image_width, pin_locations, pin_count, traversal
    )
    return chords + wraps


def estimate_thread_length(
    width_inches: float,
    image_width: float | None,
    pin_locations: Sequence[Coordinate],
    pin_count: int,
    traversal: Sequence[DirectedStep],
) -> ThreadEstimate:
    """Total thread needed to string *traversal* on a board *width_inches* across."""
    chords, wraps = step_parts(
        width_inches, image_width, pin_locations, pin_count, traversal
    )
    chord_total, wrap_total = float(chords.sum()), float(wraps.sum())
    estimate = ThreadEstimate(
        inches=float((chords + wraps).sum()),
        chord_inches=chord_total,
        wrap_inches=wrap_total,
    )
    logger.info(
        "Estimated %d inches of thread (%.3f km)",
        estimate.rounded_inches,
        estimate.kilometers,
    )
    return estimate
