"""
transliterate.py

Cyrillic to Latin transliteration for contact names. Bulgarian conventions
(щ -> sht, ъ -> a), with the Russian-only letters added.
"""

CYRILLIC_TO_LATIN = {
    # lowercase
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e", "ж": "zh",
    "з": "z", "и": "i", "й": "y", "к": "k", "л": "l", "м": "m", "н": "n",
    "о": "o", "п": "p", "р": "r", "с": "s", "т": "t", "у": "u", "ф": "f",
    "х": "h", "ц": "ts", "ч": "ch", "ш": "sh", "щ": "sht", "ъ": "a",
    "ь": "y", "ю": "yu", "я": "ya",
    # uppercase
    "А": "A", "Б": "B", "В": "V", "Г": "G", "Д": "D", "Е": "E", "Ж": "Zh",
    "З": "Z", "И": "I", "Й": "Y", "К": "K", "Л": "L", "М": "M", "Н": "N",
    "О": "O", "П": "P", "Р": "R", "С": "S", "Т": "T", "У": "U", "Ф": "F",
    "Х": "H", "Ц": "Ts", "Ч": "Ch", "Ш": "Sh", "Щ": "Sht", "Ъ": "A",
    "Ь": "Y", "Ю": "Yu", "Я": "Ya",
    # Russian
    "ё": "yo", "ы": "y", "э": "e",
    "Ё": "Yo", "Ы": "Y", "Э": "E",
}


def transliterate(text):
    """Replace Cyrillic letters in `text`; everything else passes through."""
    return "".join(CYRILLIC_TO_LATIN.get(char, char) for char in text)
