"""Render a traversal as line-oriented stringing instructions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from .labels import LabelEncoder
from .length import ThreadEstimate
from .sequence import DirectedStep


def progress_line(strung: int, total: int) -> str:
    return f"You have strung {strung} strings (there are {total - strung} left)."


def wrap_line(from_pin: int, to_pin: int) -> str:
    return f"(Around from pin '{from_pin}' to pin '{to_pin}')"


def step_line(label: str, step: DirectedStep) -> str:
    return f"[{label}] From pin '{step[0]}' to pin '{step[1]}'."


def summary_line(estimate: ThreadEstimate) -> str:
    return (
        f"Total thread: {estimate.rounded_inches} inches "
        f"({estimate.kilometers:.3f} km)."
    )


def instruction_lines(
    traversal: Sequence[DirectedStep],
    encoder: LabelEncoder,
    estimate: ThreadEstimate | None = None,
) -> Iterator[str]:
    """Yield instruction lines for *traversal*.

    A blank line starts every group of ``base`` steps and a progress line
    every ``base²`` steps, so the label's last word cycles once per group.
    """
    total = len(traversal)
    group = encoder.base
    block = encoder.base**2
    last_point = traversal[0][0] if traversal else None

    for i, step in enumerate(traversal):
        if i % group == 0:
            yield ""
        if i % block == 0:
            yield progress_line(i, total)
        if step[0] != last_point:
            yield wrap_line(last_point, step[0])
        yield step_line(encoder.encode(i), step)
        last_point = step[1]

    if estimate is not None:
        yield summary_line(estimate)


def write_instructions(lines: Iterable[str], stream: TextIO) -> int:
    """Write *lines* to *stream* one at a time; return the count written."""
    count = 0
    for line in lines:
        stream.write(line + "\n")
        stream.flush()
        count += 1
    return count
