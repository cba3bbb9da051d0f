from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

import pytest

from matcher_generator.models import MatchedClassInfo, SourceRootCandidate, SourceRootKind


@dataclass
class StubDataSource:
    matched_class: MatchedClassInfo
    candidate_roots: List[SourceRootCandidate]
    default_root: Optional[SourceRootCandidate] = None
    default_class_name: str = "WidgetMatcher"
    default_is_extensible: bool = False
    package_name: str = "com.example.matchers"
    recents_key: Any = "recents"
    project: Any = None


@pytest.fixture()
def roots() -> List[SourceRootCandidate]:
    return [
        SourceRootCandidate(Path("/p/src/main/java"), "src/main/java", SourceRootKind.MAIN),
        SourceRootCandidate(Path("/p/src/test/java"), "src/test/java", SourceRootKind.TEST),
        SourceRootCandidate(Path("/p/gen"), "gen", SourceRootKind.OTHER),
    ]


@pytest.fixture()
def data_source_factory(roots: List[SourceRootCandidate]):
    def _factory(
        name: str = "Widget",
        *,
        abstract: bool = False,
        **overrides: Any,
    ) -> StubDataSource:
        values = {"candidate_roots": roots, "default_root": roots[1]}
        values.update(overrides)
        return StubDataSource(matched_class=MatchedClassInfo(name, abstract), **values)

    return _factory


CONFIG_YAML = """\
project:
  name: demo
  root: /work/demo
matched_class:
  name: Order
  abstract: false
defaults:
  extensible: false
  package: com.example.matchers
source_roots:
  - path: src/main/java
    kind: main
  - path: src/test/java
    kind: test
default_root: src/test/java
"""


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "matcher.yaml"
    path.write_text(CONFIG_YAML)
    return path
