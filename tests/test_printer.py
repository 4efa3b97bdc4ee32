"""Tests for instruction line rendering."""

import io

from string_art_instructions.labels import LabelEncoder
from string_art_instructions.length import ThreadEstimate
from string_art_instructions.printer import instruction_lines, write_instructions


def _lines(traversal, estimate=None) -> list[str]:
    return list(
        instruction_lines(traversal, LabelEncoder.for_steps(len(traversal)), estimate)
    )


class TestInstructionLines:
    def test_chained_example(self):
        lines = _lines([(0, 1), (1, 2), (2, 3), (3, 4)])
        assert lines == [
            "",
            "You have strung 0 strings (there are 4 left).",
            "[Alfa] From pin '0' to pin '1'.",
            "[Bravo] From pin '1' to pin '2'.",
            "[Charlie] From pin '2' to pin '3'.",
            "[Delta] From pin '3' to pin '4'.",
        ]

    def test_no_wrap_lines_when_chained(self):
        lines = _lines([(0, 1), (1, 2), (2, 3), (3, 4)])
        assert not any(line.startswith("(Around") for line in lines)

    def test_wrap_before_non_chaining_step(self):
        lines = _lines([(0, 1), (1, 2), (3, 4), (4, 5)])
        wrap = "(Around from pin '2' to pin '3')"
        assert lines.count(wrap) == 1
        assert lines[lines.index(wrap) + 1] == "[Charlie] From pin '3' to pin '4'."

    def test_groups_and_progress(self):
        # 9 steps: base 9, one digit, so one blank + one progress line.
        traversal = [(i, i + 1) for i in range(9)]
        lines = _lines(traversal)
        assert lines.count("") == 1
        assert sum(line.startswith("You have strung") for line in lines) == 1

    def test_groups_with_two_digit_labels(self):
        # 30 steps: base 6, two digits -> blank every 6 steps, progress every 36.
        traversal = [(i % 40, (i + 1) % 40) for i in range(30)]
        lines = _lines(traversal)
        assert lines.count("") == 5
        assert lines[1] == "You have strung 0 strings (there are 30 left)."
        assert lines[2] == "[Alfa Alfa] From pin '0' to pin '1'."
        assert "[Alfa Foxtrot] From pin '5' to pin '6'." in lines
        assert lines[lines.index("[Alfa Foxtrot] From pin '5' to pin '6'.") + 1] == ""

    def test_single_step(self):
        assert _lines([(3, 7)]) == [
            "",
            "You have strung 0 strings (there are 1 left).",
            "[Alfa] From pin '3' to pin '7'.",
        ]

    def test_summary_line_with_estimate(self):
        lines = _lines([(0, 1)], ThreadEstimate(inches=5000.4))
        assert lines[-1] == "Total thread: 5000 inches (0.127 km)."

    def test_no_summary_without_estimate(self):
        assert not any(line.startswith("Total thread") for line in _lines([(0, 1)]))


class TestWriteInstructions:
    def test_writes_each_line(self):
        stream = io.StringIO()
        count = write_instructions(iter(["", "a", "b"]), stream)
        assert count == 3
        assert stream.getvalue() == "\na\nb\n"
