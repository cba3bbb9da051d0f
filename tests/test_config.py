from pathlib import Path

import pytest

from matcher_generator.config import (
    ConfigError,
    ConfiguredDataSource,
    example_config,
    load_config,
    save_config,
)
from matcher_generator.models import SourceRootKind
from matcher_generator.options import OptionsModel


def test_load_config(config_file: Path) -> None:
    config = load_config(config_file)
    assert config.project.name == "demo"
    assert config.matched_class.name == "Order"
    assert [root.kind for root in config.source_roots] == [SourceRootKind.MAIN, SourceRootKind.TEST]


def test_missing_config(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml")


def test_directory_as_config(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Cannot read"):
        load_config(tmp_path)


def test_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("project: [unclosed")
    with pytest.raises(ConfigError, match="parse YAML"):
        load_config(path)


def test_empty_source_roots_rejected(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("project: {name: x}\nmatched_class: {name: Widget}\nsource_roots: []\n")
    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_config(path)


def test_blank_matched_class_rejected(tmp_path: Path) -> None:
    path = tmp_path / "blank.yaml"
    path.write_text("project: {name: x}\nmatched_class: {name: '  '}\nsource_roots: [{path: src}]\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_data_source_from_config(config_file: Path) -> None:
    source = ConfiguredDataSource(load_config(config_file))
    assert source.default_class_name == "OrderMatcher"
    assert source.default_is_extensible is False
    assert source.matched_class.name == "Order"
    assert not source.matched_class.is_abstract
    assert [root.label for root in source.candidate_roots] == ["src/main/java", "src/test/java"]
    assert source.candidate_roots[0].path == Path("/work/demo/src/main/java")
    assert source.default_root is source.candidate_roots[1]
    assert source.package_name == "com.example.matchers"
    assert source.project.name == "demo"


def test_unlisted_default_root_falls_back(config_file: Path) -> None:
    config = load_config(config_file)
    config.default_root = Path("src/other")
    source = ConfiguredDataSource(config)
    assert source.default_root is not None
    assert all(source.default_root is not root for root in source.candidate_roots)
    assert OptionsModel(source).selected_root is source.candidate_roots[0]


def test_save_and_reload_example(tmp_path: Path) -> None:
    path = tmp_path / "example.yaml"
    save_config(example_config(), path)
    config = load_config(path)
    assert config.matched_class.name == "Widget"
    assert config.default_root == Path("src/test/java")
    assert "kind: test" in path.read_text()
