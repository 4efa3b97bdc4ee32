"""Tests for the pipeline module."""

import json
from pathlib import Path

import pytest

from string_art_instructions.document import InstructionError, index_document
from string_art_instructions.labels import LabelEncoder
from string_art_instructions.pipeline import (
    InstructionResult,
    build_instructions,
    process_document,
)

_PINS = [{"x": 100, "y": 50}, {"x": 75, "y": 93}, {"x": 25, "y": 93},
         {"x": 0, "y": 50}, {"x": 25, "y": 7}, {"x": 75, "y": 7}]


def _data(pairs, image_width=101) -> dict:
    data = {
        "args": {"pin_arrangement": "Circle", "foreground_colors": ["#000"], "pin_count": 6},
        "pin_locations": _PINS,
        "line_segments": [[_PINS[a], _PINS[b]] for a, b in pairs],
    }
    if image_width is not None:
        data["image_width"] = image_width
    return data


class TestBuildInstructions:
    def test_plain_variant(self):
        result = build_instructions(index_document(_data([(0, 1), (3, 4), (4, 5), (1, 2)])))
        assert isinstance(result, InstructionResult)
        assert result.traversal == ((0, 1), (1, 2), (3, 4), (4, 5))
        assert result.encoder == LabelEncoder(total_steps=4, base=4, digits=1)
        assert result.estimate is None
        assert result.total_steps == 4
        assert result.wraps == 1

    def test_length_variant(self):
        result = build_instructions(index_document(_data([(0, 1), (1, 2)])), 20.0)
        assert result.estimate is not None
        assert result.estimate.inches > 0
        assert list(result.lines())[-1].startswith("Total thread: ")

    def test_length_variant_needs_image_width(self):
        doc = index_document(_data([(0, 1)], image_width=None))
        with pytest.raises(InstructionError, match="image_width"):
            build_instructions(doc, 20.0)

    def test_lines_are_generated_lazily(self):
        result = build_instructions(index_document(_data([(0, 1)])))
        lines = result.lines()
        assert next(lines) == ""


class TestProcessDocument:
    def test_reads_path(self, tmp_path: Path):
        path = tmp_path / "art.json"
        path.write_text(json.dumps(_data([(0, 1), (1, 2)])))
        assert process_document(path).traversal == ((0, 1), (1, 2))

    def test_nonexistent_path_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            process_document(tmp_path / "missing.json")
