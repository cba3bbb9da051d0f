"""Validation helpers for matcher generation options."""

from __future__ import annotations

from typing import Callable, Optional

from loguru import logger

from .models import OptionsField, ValidationCode, ValidationInfo

IdentifierChecker = Callable[[str], bool]

EMPTY_NAME_MESSAGE = "Class name is empty"
INVALID_IDENTIFIER_MESSAGE = "Class name is not a valid identifier"


def validate_class_name(
    raw_class_name: str, identifier_checker: IdentifierChecker
) -> Optional[ValidationInfo]:
    """Check a proposed class name, returning ``None`` when it is acceptable.

    Surrounding whitespace is ignored. Identifier grammar is delegated to
    ``identifier_checker``.
    """

    class_name = raw_class_name.strip()
    if not class_name:
        logger.debug("Rejected empty class name {!r}", raw_class_name)
        return ValidationInfo(ValidationCode.EMPTY_NAME, EMPTY_NAME_MESSAGE, OptionsField.CLASS_NAME)

    if not identifier_checker(class_name):
        logger.debug("Rejected class name {!r}: not an identifier", class_name)
        return ValidationInfo(
            ValidationCode.INVALID_IDENTIFIER,
            INVALID_IDENTIFIER_MESSAGE,
            OptionsField.CLASS_NAME,
        )

    return None


__all__ = [
    "IdentifierChecker",
    "validate_class_name",
    "EMPTY_NAME_MESSAGE",
    "INVALID_IDENTIFIER_MESSAGE",
]
