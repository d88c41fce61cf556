"""Low-level text helpers used across the chat engine.

No dependency on schemas, models, or any other project module.
"""

import re
import unicodedata


EDGE_PUNCTUATION = " \t\r\n¡!¿?.,;:…\"'()"

SPANISH_STOP_WORDS = frozenset({
    "el", "la", "los", "las", "un", "una", "unos", "unas", "y", "o", "pero",
    "porque", "como", "que", "en", "con", "para", "por", "a", "de", "del", "al",
    "sobre", "tus", "sus", "este", "esta", "esto", "eso", "hay", "cual", "cuales",
    "donde", "cuando", "quien", "tiene", "tienes", "eres", "cuentame",
    "hablame", "dime", "puedes", "puede", "mucho", "tambien", "algo",
})


def normalize_whitespace(text: str) -> str:
    return " ".join((text or "").split()).strip()


def strip_diacritics(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text or "")
    return "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")


def normalize_message(text: str) -> str:
    """Lowercase *text* and remove combining diacritical marks.

    ``"¿Cuéntame?"`` becomes ``"¿cuentame?"``. Applying it twice gives the
    same result as applying it once.
    """
    return strip_diacritics((text or "").lower())


def strip_edge_punctuation(text: str) -> str:
    return (text or "").strip(EDGE_PUNCTUATION)


def keyword_tokens(text: str) -> list[str]:
    """Lowercased words longer than three letters, minus stop words and numbers."""
    cleaned = re.sub(r"[^\w\s]", " ", (text or "").lower())
    return [
        w for w in cleaned.split()
        if len(w) > 3 and w not in SPANISH_STOP_WORDS and not w.isdigit()
    ]

