"""Configuration loading and validation for the matcher options panel."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .models import MatchedClassInfo, SourceRootCandidate, SourceRootKind

DEFAULT_RECENTS_KEY = "MatcherGenerator.RecentPackages"


class ProjectConfig(BaseModel):
    """Project level metadata."""

    name: str
    root: Path = Path(".")


class MatchedClassConfig(BaseModel):
    """The class the matcher is generated for."""

    name: str
    abstract: bool = False

    @field_validator("name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Matched class name cannot be empty")
        return value


class DefaultsConfig(BaseModel):
    """Initial values offered by the panel."""

    class_name: Optional[str] = None
    extensible: bool = False
    package: str = ""
    recents_key: str = DEFAULT_RECENTS_KEY


class SourceRootConfig(BaseModel):
    """A destination source root offered to the user."""

    path: Path
    kind: SourceRootKind = SourceRootKind.OTHER


class Config(BaseModel):
    """Top-level configuration."""

    project: ProjectConfig
    matched_class: MatchedClassConfig
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    source_roots: List[SourceRootConfig]
    default_root: Optional[Path] = None

    @field_validator("source_roots")
    @classmethod
    def _ensure_source_roots(cls, value: List[SourceRootConfig]) -> List[SourceRootConfig]:
        if not value:
            raise ValueError("At least one source root must be configured")
        return value


class ConfigError(Exception):
    """Raised when a configuration file is invalid."""


def load_config(path: Path) -> Config:
    """Load configuration from YAML file."""

    try:
        data = yaml.safe_load(path.read_text())
    except FileNotFoundError as exc:
        raise ConfigError(f"Configuration file not found: {path}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse YAML: {exc}") from exc

    try:
        return Config.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def save_config(config: Config, path: Path) -> None:
    """Persist configuration to disk as YAML."""

    rendered = config.model_dump(mode="json", exclude_none=True)
    path.write_text(yaml.safe_dump(rendered, sort_keys=False))


def _relative_label(path: Path, project_root: Path) -> str:
    try:
        return path.relative_to(project_root).as_posix()
    except ValueError:
        return path.as_posix()


class ConfiguredDataSource:
    """Options data source backed by a :class:`Config`."""

    def __init__(self, config: Config) -> None:
        self._config = config
        root = config.project.root
        self._candidates: Tuple[SourceRootCandidate, ...] = tuple(
            SourceRootCandidate(
                path=self._resolve(entry.path),
                label=_relative_label(self._resolve(entry.path), root),
                kind=entry.kind,
            )
            for entry in config.source_roots
        )
        self._default_root = self._find_default_root()

    def _resolve(self, path: Path) -> Path:
        return path if path.is_absolute() else self._config.project.root / path

    def _find_default_root(self) -> Optional[SourceRootCandidate]:
        if self._config.default_root is None:
            return None
        wanted = self._resolve(self._config.default_root)
        for candidate in self._candidates:
            if candidate.path == wanted:
                return candidate
        # Not offered as a candidate; the panel falls back to the first root.
        return SourceRootCandidate(
            path=wanted,
            label=_relative_label(wanted, self._config.project.root),
        )

    @property
    def config(self) -> Config:
        return self._config

    @property
    def default_class_name(self) -> str:
        configured = self._config.defaults.class_name
        if configured is not None:
            return configured
        return f"{self._config.matched_class.name}Matcher"

    @property
    def default_is_extensible(self) -> bool:
        return self._config.defaults.extensible

    @property
    def matched_class(self) -> MatchedClassInfo:
        matched = self._config.matched_class
        return MatchedClassInfo(name=matched.name, is_abstract=matched.abstract)

    @property
    def candidate_roots(self) -> Tuple[SourceRootCandidate, ...]:
        return self._candidates

    @property
    def default_root(self) -> Optional[SourceRootCandidate]:
        return self._default_root

    @property
    def package_name(self) -> str:
        return self._config.defaults.package

    @property
    def recents_key(self) -> str:
        return self._config.defaults.recents_key

    @property
    def project(self) -> ProjectConfig:
        return self._config.project


def example_config() -> Config:
    return Config(
        project=ProjectConfig(name="example", root=Path(".")),
        matched_class=MatchedClassConfig(name="Widget"),
        defaults=DefaultsConfig(package="com.example.matchers"),
        source_roots=[
            SourceRootConfig(path=Path("src/main/java"), kind=SourceRootKind.MAIN),
            SourceRootConfig(path=Path("src/test/java"), kind=SourceRootKind.TEST),
        ],
        default_root=Path("src/test/java"),
    )


__all__ = [
    "Config",
    "ConfigError",
    "ConfiguredDataSource",
    "DefaultsConfig",
    "MatchedClassConfig",
    "ProjectConfig",
    "SourceRootConfig",
    "example_config",
    "load_config",
    "save_config",
]
