"""Shared models for matcher generation options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class SourceRootKind(str, Enum):
    """Classification of a destination source root."""

    TEST = "test"
    MAIN = "main"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class MatchedClassInfo:
    """The class a matcher is being generated for."""

    name: str
    is_abstract: bool = False


@dataclass(eq=False, slots=True)
class SourceRootCandidate:
    """A selectable destination folder.

    Candidates compare by identity: the data source hands back the same
    instance for the default root that it lists among the candidates.
    """

    path: Path
    label: str
    kind: SourceRootKind = SourceRootKind.OTHER


class OptionsField(str, Enum):
    """Input controls a validation message can point at."""

    CLASS_NAME = "class_name"
    PACKAGE = "package"
    SOURCE_ROOT = "source_root"
    SUPER_CLASS = "super_class"


class ValidationCode(str, Enum):
    EMPTY_NAME = "empty_name"
    INVALID_IDENTIFIER = "invalid_identifier"


@dataclass(frozen=True, slots=True)
class ValidationInfo:
    """A single validation failure and the field it concerns."""

    code: ValidationCode
    message: str
    field: OptionsField


@dataclass(frozen=True, slots=True)
class GeneratorOptions:
    """Finalized options handed to matcher generation."""

    class_name: str
    package_name: str
    source_root: SourceRootCandidate
    extensible: bool
    uses_an: bool
    super_class_name: Optional[str] = None


__all__ = [
    "SourceRootKind",
    "MatchedClassInfo",
    "SourceRootCandidate",
    "OptionsField",
    "ValidationCode",
    "ValidationInfo",
    "GeneratorOptions",
]
