"""Presentation independent state behind the matcher options panel."""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Protocol, Sequence, Tuple

from loguru import logger

from .articles import uses_an as _starts_with_vowel
from .config import ConfigError
from .identifiers import is_java_identifier
from .models import GeneratorOptions, MatchedClassInfo, SourceRootCandidate, ValidationInfo
from .validators import IdentifierChecker, validate_class_name

ExtendsListener = Callable[[bool], None]


class OptionsDataSource(Protocol):
    """Supplies the defaults a panel session starts from."""

    @property
    def default_class_name(self) -> str: ...

    @property
    def default_is_extensible(self) -> bool: ...

    @property
    def matched_class(self) -> MatchedClassInfo: ...

    @property
    def candidate_roots(self) -> Sequence[SourceRootCandidate]: ...

    @property
    def default_root(self) -> Optional[SourceRootCandidate]: ...

    @property
    def package_name(self) -> str: ...

    @property
    def recents_key(self) -> Any: ...

    @property
    def project(self) -> Any: ...


class NoCandidateRootsError(ConfigError):
    """Raised when a data source offers no destination source roots."""


class OptionsValidationError(Exception):
    """Raised by :meth:`OptionsModel.finalize` when the options are invalid."""

    def __init__(self, info: ValidationInfo) -> None:
        super().__init__(info.message)
        self.info = info


def _pick_default_root(
    candidates: Sequence[SourceRootCandidate], default: Optional[SourceRootCandidate]
) -> SourceRootCandidate:
    for candidate in candidates:
        if candidate is default:
            return candidate
    return candidates[0]


class OptionsModel:
    """Mutable selection state for one options panel session.

    ``class_name`` and ``package_name`` are stored exactly as typed; use
    :meth:`finalize` to obtain trimmed values. The superclass text survives
    toggling ``extends_superclass`` off and on again, but is only reported by
    :meth:`get_super_class_name` while the toggle is on.
    """

    def __init__(
        self,
        data_source: OptionsDataSource,
        *,
        identifier_checker: IdentifierChecker = is_java_identifier,
    ) -> None:
        candidates = tuple(data_source.candidate_roots)
        if not candidates:
            raise NoCandidateRootsError("No candidate source roots are available for the matcher")

        matched = data_source.matched_class
        self._data_source = data_source
        self._identifier_checker = identifier_checker
        self._matched_class = matched
        self._candidate_roots: Tuple[SourceRootCandidate, ...] = candidates
        self._listeners: List[ExtendsListener] = []

        self.class_name: str = data_source.default_class_name
        self.package_name: str = data_source.package_name
        # Matchers for abstract classes are almost always meant to be extended.
        self.extensible: bool = True if matched.is_abstract else data_source.default_is_extensible
        self.super_class_text: str = ""

        self._article_enabled = not matched.is_abstract
        self._uses_an = _starts_with_vowel(matched.name) if self._article_enabled else False
        self._extends_superclass = False
        self._selected_root = _pick_default_root(candidates, data_source.default_root)

        logger.debug(
            "Initialised matcher options for {}: class={!r} package={!r} extensible={} an={} root={}",
            matched.name,
            self.class_name,
            self.package_name,
            self.extensible,
            self._uses_an if self._article_enabled else None,
            self._selected_root.label,
        )

    @property
    def data_source(self) -> OptionsDataSource:
        return self._data_source

    @property
    def matched_class(self) -> MatchedClassInfo:
        return self._matched_class

    @property
    def candidate_roots(self) -> Tuple[SourceRootCandidate, ...]:
        return self._candidate_roots

    # ------------------------------------------------------------------
    # Article choice
    # ------------------------------------------------------------------
    @property
    def article_choice_enabled(self) -> bool:
        return self._article_enabled

    def article_choices(self) -> Tuple[str, str]:
        name = self._matched_class.name
        return f"a {name}", f"an {name}"

    @property
    def uses_an(self) -> bool:
        return self._uses_an

    @uses_an.setter
    def uses_an(self, value: bool) -> None:
        if not self._article_enabled:
            raise ValueError("The article cannot be chosen for an abstract matched class")
        self._uses_an = bool(value)

    # ------------------------------------------------------------------
    # Extends toggle and superclass
    # ------------------------------------------------------------------
    @property
    def extends_superclass(self) -> bool:
        return self._extends_superclass

    @extends_superclass.setter
    def extends_superclass(self, value: bool) -> None:
        value = bool(value)
        if value == self._extends_superclass:
            return
        self._extends_superclass = value
        logger.debug("Superclass field {}", "enabled" if value else "disabled")
        for listener in list(self._listeners):
            listener(value)

    @property
    def super_class_enabled(self) -> bool:
        return self._extends_superclass

    def add_extends_listener(self, listener: ExtendsListener) -> None:
        """Register ``listener`` to be told when the superclass field is enabled or disabled."""

        self._listeners.append(listener)

    def remove_extends_listener(self, listener: ExtendsListener) -> None:
        self._listeners.remove(listener)

    def get_super_class_name(self) -> Optional[str]:
        """Return the trimmed superclass text, or ``None`` when not extending."""

        if not self._extends_superclass:
            return None
        return self.super_class_text.strip()

    # ------------------------------------------------------------------
    # Destination root
    # ------------------------------------------------------------------
    @property
    def selected_root(self) -> SourceRootCandidate:
        return self._selected_root

    def select_root(self, candidate: SourceRootCandidate) -> None:
        if not any(candidate is root for root in self._candidate_roots):
            raise ValueError(f"{candidate.label!r} is not one of the candidate source roots")
        self._selected_root = candidate

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def do_validate(self) -> Optional[ValidationInfo]:
        return validate_class_name(self.class_name, self._identifier_checker)

    def finalize(self) -> GeneratorOptions:
        """Validate and snapshot the options for matcher generation."""

        info = self.do_validate()
        if info is not None:
            raise OptionsValidationError(info)
        return GeneratorOptions(
            class_name=self.class_name.strip(),
            package_name=self.package_name.strip(),
            source_root=self._selected_root,
            extensible=self.extensible,
            uses_an=self._uses_an,
            super_class_name=self.get_super_class_name(),
        )


__all__ = [
    "OptionsDataSource",
    "OptionsModel",
    "NoCandidateRootsError",
    "OptionsValidationError",
    "ExtendsListener",
]
