"""Shared constants for instruction generation."""

# Tag the renderer writes to ``args.pin_arrangement`` for round boards.
CIRCLE_ARRANGEMENT: str = "circle"

# NATO phonetic alphabet, used as numeral digits for step labels.
PHONETIC_ALPHABET: tuple[str, ...] = (
    "Alfa",
    "Bravo",
    "Charlie",
    "Delta",
    "Echo",
    "Foxtrot",
    "Golf",
    "Hotel",
    "India",
    "Juliett",
    "Kilo",
    "Lima",
    "Mike",
    "November",
    "Oscar",
    "Papa",
    "Quebec",
    "Romeo",
    "Sierra",
    "Tango",
    "Uniform",
    "Victor",
    "Whiskey",
    "Xray",
    "Yankee",
    "Zulu",
)

MAX_BASE: int = len(PHONETIC_ALPHABET)

INCHES_PER_KILOMETER: float = 39370.1
