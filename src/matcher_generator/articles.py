"""Pick the indefinite article used in generated factory method names."""

from __future__ import annotations

_VOWELS = "aeiou"


def select_article(class_name: str) -> str:
    """Return ``"an"`` when ``class_name`` starts with a vowel, else ``"a"``.

    Only the first letter is inspected, so names such as ``Union`` get
    ``"an"`` even though they are spoken with a consonant sound.
    """

    if not class_name:
        raise ValueError("Class name must not be empty")
    return "an" if class_name[0].lower() in _VOWELS else "a"


def uses_an(class_name: str) -> bool:
    return select_article(class_name) == "an"


__all__ = ["select_article", "uses_an"]
