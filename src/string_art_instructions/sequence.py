"""Greedy ordering of undirected segments into one directed stringing path.

Starting from the first input segment, the sequencer repeatedly picks the
remaining segment with an endpoint nearest (around the board) to the pin the
string currently rests on, and orients it so that nearer endpoint comes
first.  A segment touching the current pin is taken immediately: distance 0
is the minimum of the metric, so no later candidate can beat it.

This is a nearest-fragment heuristic, not a shortest-path solver; it has no
lookahead or backtracking and runs in O(n²) for n segments.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

Segment = tuple[int, int]
DirectedStep = tuple[int, int]


def circular_distance(a: int, b: int, pin_count: int) -> int:
    """Number of pins between *a* and *b* going the short way around."""
    return min((a - b) % pin_count, (b - a) % pin_count)


def select_next(
    current_point: int, remaining: Sequence[Segment], pin_count: int
) -> int:
    """Return the position in *remaining* of the segment to string next.

    The first segment sharing *current_point* wins outright; otherwise the
    segment whose nearer endpoint is closest wins, earliest on ties.
    """
    best_index = -1
    best_distance = pin_count + 1
    for i, (a, b) in enumerate(remaining):
        distance = min(
            circular_distance(current_point, a, pin_count),
            circular_distance(current_point, b, pin_count),
        )
        if distance == 0:
            return i
        if distance < best_distance:
            best_index, best_distance = i, distance
    if best_index < 0:
        raise ValueError("No segments remain to select from.")
    return best_index


def orient(segment: Segment, current_point: int, pin_count: int) -> DirectedStep:
    """Order *segment* so the endpoint nearer *current_point* comes first."""
    a, b = segment
    if circular_distance(current_point, b, pin_count) < circular_distance(
        current_point, a, pin_count
    ):
        return (b, a)
    return (a, b)


@dataclass
class SequencerState:
    """Accumulated traversal plus the pool of segments not yet strung."""

    traversal: list[DirectedStep] = field(default_factory=list)
    remaining: list[Segment] = field(default_factory=list)

    @classmethod
    def start(cls, segments: Sequence[Segment]) -> SequencerState:
        """Begin with the first segment in its canonical orientation."""
        if not segments:
            raise ValueError("Cannot sequence an empty list of segments.")
        first, *rest = segments
        return cls(traversal=[tuple(first)], remaining=list(rest))

    @property
    def current_point(self) -> int:
        return self.traversal[-1][1]

    @property
    def done(self) -> bool:
        return not self.remaining

    def advance(self, pin_count: int) -> DirectedStep:
        """Move one segment from the pool onto the end of the traversal."""
        point = self.current_point
        segment = self.remaining.pop(select_next(point, self.remaining, pin_count))
        step = orient(segment, point, pin_count)
        self.traversal.append(step)
        return step


def sequence_segments(
    segments: Sequence[Segment], pin_count: int
) -> list[DirectedStep]:
    """Order *segments* into a single directed traversal.

    Args:
        segments: Canonical ``(low, high)`` pin pairs in input order.
        pin_count: Number of pins on the circular board.

    Returns:
        One directed step per input segment.

    Raises:
        ValueError: If *segments* is empty.
    """
    state = SequencerState.start(segments)
    while not state.done:
        state.advance(pin_count)
    logger.debug(
        "Sequenced %d segments with %d wraps",
        len(state.traversal),
        count_wraps(state.traversal),
    )
    return state.traversal


def count_wraps(traversal: Sequence[DirectedStep]) -> int:
    """Count transitions where a step does not start where the last one ended."""
    return sum(
        1 for prev, step in zip(traversal, traversal[1:]) if prev[1] != step[0]
    )
