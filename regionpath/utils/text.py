import re
import unicodedata

_NON_ALNUM = re.compile(r"[\W_]+")


def normalize_for_search(value: str) -> str:
    """Lowercase, strip accents and collapse punctuation/whitespace to single spaces"""
    value = unicodedata.normalize("NFD", value.lower())
    value = "".join(ch for ch in value if not unicodedata.combining(ch))
    return _NON_ALNUM.sub(" ", value).strip()
