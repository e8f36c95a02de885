"""Locale-style string ordering for names and source titles."""

import unicodedata

# Punctuation in root-collation order, all ranked below digits and letters
_PUNCTUATION_ORDER = " _-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"
_PUNCTUATION_KEYS = str.maketrans(
    {ch: chr(rank + 1) for rank, ch in enumerate(_PUNCTUATION_ORDER)} | {"\t": chr(1)}
)


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def locale_key(text: str) -> tuple[str, str, str]:
    """Sort key approximating a root-locale collation.

    Compares base letters case-insensitively first, then accents, then
    case (lowercase before uppercase), so "apple" < "banana" < "Banana"
    and "resume" < "résumé".

    ASCII punctuation sorts before digits and letters in the root order
    ("a b" < "a_b" < "a-b" < "a.b" < "a1"). Other symbols keep their code
    point order, and contractions or expansions are not modelled.
    """
    folded = text.casefold().translate(_PUNCTUATION_KEYS)
    return (_strip_accents(folded), folded, text.swapcase())
