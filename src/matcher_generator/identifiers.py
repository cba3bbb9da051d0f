"""Identifier syntax rules for generated class names."""

from __future__ import annotations

JAVA_KEYWORDS = frozenset(
    {
        "abstract", "assert", "boolean", "break", "byte", "case", "catch",
        "char", "class", "const", "continue", "default", "do", "double",
        "else", "enum", "extends", "final", "finally", "float", "for", "goto",
        "if", "implements", "import", "instanceof", "int", "interface", "long",
        "native", "new", "package", "private", "protected", "public", "return",
        "short", "static", "strictfp", "super", "switch", "synchronized",
        "this", "throw", "throws", "transient", "try", "void", "volatile",
        "while", "_",
    }
)
JAVA_LITERALS = frozenset({"true", "false", "null"})


def _is_start(char: str) -> bool:
    return char.isalpha() or char in "_$"


def _is_part(char: str) -> bool:
    return char.isalnum() or char in "_$"


def is_java_identifier(text: str) -> bool:
    """Return True if ``text`` is a legal Java identifier."""

    if not text or not _is_start(text[0]):
        return False
    if not all(_is_part(char) for char in text[1:]):
        return False
    return text not in JAVA_KEYWORDS and text not in JAVA_LITERALS


__all__ = ["is_java_identifier", "JAVA_KEYWORDS", "JAVA_LITERALS"]
