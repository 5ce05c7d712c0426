"""Hebrew letter metadata table.

The 22 letters of the Hebrew alphabet with their names, gematria values and
traditional pictographic meanings. Final forms, vowel points and
cantillation marks are not letters in this table; lookups for them return
None and callers skip them.
"""

from hebrew_tones.models.letters import LetterMetadata

_LETTERS: tuple[LetterMetadata, ...] = (
    LetterMetadata("א", "Alef", 1, "Ox, Leader"),
    LetterMetadata("ב", "Bet", 2, "House, In"),
    LetterMetadata("ג", "Gimel", 3, "Camel, Pride"),
    LetterMetadata("ד", "Dalet", 4, "Door, Pathway"),
    LetterMetadata("ה", "He", 5, "Window, Reveal"),
    LetterMetadata("ו", "Vav", 6, "Hook, Connect"),
    LetterMetadata("ז", "Zayin", 7, "Weapon, Cut"),
    LetterMetadata("ח", "Chet", 8, "Fence, Separate"),
    LetterMetadata("ט", "Tet", 9, "Snake, Surround"),
    LetterMetadata("י", "Yod", 10, "Hand, Work"),
    LetterMetadata("כ", "Kaf", 20, "Palm, Open"),
    LetterMetadata("ל", "Lamed", 30, "Staff, Teach"),
    LetterMetadata("מ", "Mem", 40, "Water, Chaos"),
    LetterMetadata("נ", "Nun", 50, "Fish, Activity"),
    LetterMetadata("ס", "Samekh", 60, "Support, Trust"),
    LetterMetadata("ע", "Ayin", 70, "Eye, See"),
    LetterMetadata("פ", "Pe", 80, "Mouth, Speak"),
    LetterMetadata("צ", "Tsade", 90, "Fish hook, Catch"),
    LetterMetadata("ק", "Qof", 100, "Back of head, Last"),
    LetterMetadata("ר", "Resh", 200, "Head, Highest"),
    LetterMetadata("ש", "Shin", 300, "Tooth, Sharp"),
    LetterMetadata("ת", "Tav", 400, "Cross, Sign"),
)

LETTER_TABLE: dict[str, LetterMetadata] = {letter.symbol: letter for letter in _LETTERS}


def lookup(symbol: str) -> LetterMetadata | None:
    """Return metadata for a letter, or None if the symbol is not a letter."""
    return LETTER_TABLE.get(symbol)


def is_hebrew_letter(symbol: str) -> bool:
    return symbol in LETTER_TABLE


def all_letters() -> list[LetterMetadata]:
    """All letters in alphabetical order."""
    return list(_LETTERS)
