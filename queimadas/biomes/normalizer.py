"""
Queimadas - Biome Name Normalization
Canonical keys for comparing biome labels coming from different datasets.
"""

import re
import unicodedata
from typing import Optional

# Unicode replacement character, left behind by a broken encoding in the
# outline dataset where "Ô" used to be (e.g. "AMAZ�NIA").
REPLACEMENT_CHAR = "\ufffd"
REPLACEMENT_FIX = "Ô"

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")


def normalize_biome_name(name: Optional[str]) -> Optional[str]:
    """
    Standardize a biome label into a comparable key.

    Replaces the encoding replacement character with "Ô", strips accents
    and uppercases the result. Whitespace is kept as is.

    Args:
        name: Raw biome label, possibly None

    Returns:
        Normalized key, or None if the label is missing, empty or not text
    """
    if not name or not isinstance(name, str):
        return None

    clean_name = name.replace(REPLACEMENT_CHAR, REPLACEMENT_FIX)
    clean_name = _COMBINING_MARKS.sub("", unicodedata.normalize("NFD", clean_name))
    return clean_name.upper()


def same_biome(first: Optional[str], second: Optional[str]) -> bool:
    """Check if two raw labels name the same biome. Missing labels never match."""
    first_key = normalize_biome_name(first)
    return first_key is not None and first_key == normalize_biome_name(second)
