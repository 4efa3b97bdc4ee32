"""Phonetic step labels.

Step indices are written as fixed-width numerals whose digits are words of
the NATO phonetic alphabet ("Alfa Bravo", "Alfa Charlie", …), which are much
harder to misread than bare numbers over thousands of steps.  With only 26
words available the base is capped at 26, so every run picks the smallest
digit count that fits, then the smallest base that covers all steps with
that many digits.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import MAX_BASE, PHONETIC_ALPHABET


def label_digits(total_steps: int) -> int:
    """Smallest digit count ``D >= 1`` with ``26**D >= total_steps``."""
    digits = 1
    while MAX_BASE**digits < total_steps:
        digits += 1
    return digits


def label_base(total_steps: int, digits: int) -> int:
    """Smallest base ``B`` with ``B**digits >= total_steps``."""
    base = 1
    while base**digits < total_steps:
        base += 1
    return base


@dataclass(frozen=True)
class LabelEncoder:
    """Fixed-width phonetic numeral system sized for one traversal."""

    total_steps: int
    base: int
    digits: int

    @classmethod
    def for_steps(cls, total_steps: int) -> LabelEncoder:
        if total_steps < 1:
            raise ValueError(f"Need at least one step to label, got {total_steps}.")
        digits = label_digits(total_steps)
        return cls(
            total_steps=total_steps,
            base=label_base(total_steps, digits),
            digits=digits,
        )

    @property
    def alphabet(self) -> tuple[str, ...]:
        return PHONETIC_ALPHABET[: self.base]

    def to_digits(self, index: int) -> list[int]:
        """Base-``self.base`` digits of *index*, most significant first, padded."""
        if not 0 <= index < self.total_steps:
            raise ValueError(
                f"Step {index} is outside [0, {self.total_steps})."
            )
        out = [0] * self.digits
        # Base 1 only ever labels index 0.
        if self.base > 1:
            for pos in range(self.digits - 1, -1, -1):
                index, out[pos] = divmod(index, self.base)
        return out

    def encode(self, index: int) -> str:
        """Return the space-joined phonetic label for step *index*."""
        words = self.alphabet
        return " ".join(words[d] for d in self.to_digits(index))
