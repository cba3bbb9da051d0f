"""Recently used destination packages."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import yaml
from loguru import logger

from .config import ConfigError

DEFAULT_LIMIT = 10


class RecentPackages:
    """Package history grouped by recents key and persisted as YAML."""

    def __init__(self, path: Path, *, limit: int = DEFAULT_LIMIT) -> None:
        self._path = path
        self._limit = limit
        self._entries: Dict[str, List[str]] = self._load()

    def _load(self) -> Dict[str, List[str]]:
        if not self._path.exists():
            return {}
        try:
            data = yaml.safe_load(self._path.read_text()) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Failed to parse recent packages file {self._path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Recent packages file {self._path} must contain a mapping")
        entries: Dict[str, List[str]] = {}
        for key, value in data.items():
            if value is None:
                value = []
            if not isinstance(value, list):
                raise ConfigError(f"Recent packages for {key!r} in {self._path} must be a list")
            entries[str(key)] = [str(item) for item in value]
        return entries

    def get(self, key: str) -> List[str]:
        return list(self._entries.get(key, []))

    def record(self, key: str, package: str) -> None:
        package = package.strip()
        if not package:
            return
        history = [item for item in self._entries.get(key, []) if item != package]
        history.insert(0, package)
        self._entries[key] = history[: self._limit]

    def save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(yaml.safe_dump(self._entries, sort_keys=True))
        logger.debug("Saved recent packages to {}", self._path)


__all__ = ["RecentPackages", "DEFAULT_LIMIT"]
