"""Full processing pipeline: load → validate → sequence → label → estimate."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .document import ArtworkDocument, load_document
from .labels import LabelEncoder
from .length import ThreadEstimate, estimate_thread_length
from .printer import instruction_lines
from .sequence import DirectedStep, count_wraps, sequence_segments

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstructionResult:
    """Everything needed to print instructions for one artwork."""

    document: ArtworkDocument
    traversal: tuple[DirectedStep, ...]
    encoder: LabelEncoder
    estimate: ThreadEstimate | None = None

    @property
    def total_steps(self) -> int:
        return len(self.traversal)

    @property
    def wraps(self) -> int:
        return count_wraps(self.traversal)

    def lines(self) -> Iterator[str]:
        return instruction_lines(self.traversal, self.encoder, self.estimate)


def build_instructions(
    document: ArtworkDocument, width_inches: float | None = None
) -> InstructionResult:
    """Sequence *document* and, when *width_inches* is given, estimate thread.

    All validation happens here, before any line is produced.
    """
    traversal = tuple(sequence_segments(document.segments, document.pin_count))
    encoder = LabelEncoder.for_steps(len(traversal))
    logger.info(
        "%d steps, labels use base %d with %d digit(s)",
        len(traversal),
        encoder.base,
        encoder.digits,
    )

    estimate = None
    if width_inches is not None:
        estimate = estimate_thread_length(
            width_inches,
            document.image_width,
            document.pin_locations,
            document.pin_count,
            traversal,
        )

    return InstructionResult(
        document=document,
        traversal=traversal,
        encoder=encoder,
        estimate=estimate,
    )


def process_document(
    path: Path, width_inches: float | None = None
) -> InstructionResult:
    """Load the renderer output at *path* and build its instructions.

    Raises:
        FileNotFoundError: If *path* does not exist.
        InstructionError: If the document or *width_inches* is invalid.
    """
    return build_instructions(load_document(path), width_inches)
