from string_art_instructions.document import (
    ArtworkDocument,
    InstructionError,
    index_document,
    load_document,
)
from string_art_instructions.labels import LabelEncoder
from string_art_instructions.length import ThreadEstimate, estimate_thread_length
from string_art_instructions.pipeline import (
    InstructionResult,
    build_instructions,
    process_document,
)
from string_art_instructions.printer import instruction_lines, write_instructions
from string_art_instructions.sequence import circular_distance, sequence_segments

__all__ = [
    "ArtworkDocument",
    "InstructionError",
    "InstructionResult",
    "LabelEncoder",
    "ThreadEstimate",
    "build_instructions",
    "circular_distance",
    "estimate_thread_length",
    "index_document",
    "instruction_lines",
    "load_document",
    "main",
    "process_document",
    "sequence_segments",
    "write_instructions",
]


def main() -> None:
    """CLI entry point."""
    from string_art_instructions.cli import app

    app()
