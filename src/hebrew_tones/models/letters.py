"""Letter metadata model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LetterMetadata:
    """Symbolic metadata for one Hebrew letter."""

    symbol: str  # single character, e.g. "א"
    display_name: str  # transliterated name, e.g. "Alef"
    numeric_value: int  # gematria value (1-400)
    meaning: str  # pictographic meaning, e.g. "Ox, Leader"
