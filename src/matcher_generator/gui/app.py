"""Application bootstrap for the matcher options dialog."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger
from PySide6.QtWidgets import QApplication, QMessageBox

from ..config import ConfigError, ConfiguredDataSource, load_config
from ..options import OptionsModel
from ..recents import RecentPackages
from .forms import OptionsDialog, OptionsPanel

STATE_DIR = Path.home() / ".matcher_generator"


def _init_logging() -> None:
    """Configure loguru to play nicely with the GUI."""

    # Remove default stderr handler so log messages flow through custom sinks.
    logger.remove()
    STATE_DIR.mkdir(parents=True, exist_ok=True)
    logger.add(STATE_DIR / "gui.log", rotation="1 week", retention=5, level="INFO")


def main(argv: list[str] | None = None) -> int:
    """Entry point used by setuptools."""

    argv = list(sys.argv if argv is None else argv)
    _init_logging()
    app = QApplication(argv)
    app.setApplicationName("Matcher Generator")

    if len(argv) < 2:
        QMessageBox.critical(None, "Missing configuration", "Usage: matcher-generator-gui CONFIG")
        return 2
    try:
        data_source = ConfiguredDataSource(load_config(Path(argv[1])))
        model = OptionsModel(data_source)
        recents = RecentPackages(STATE_DIR / "recent_packages.yaml")
    except ConfigError as exc:
        logger.exception("Failed to load config")
        QMessageBox.critical(None, "Config error", str(exc))
        return 4

    panel = OptionsPanel(model, recent_packages=recents.get(data_source.recents_key))
    dialog = OptionsDialog(panel)
    if dialog.exec() != OptionsDialog.DialogCode.Accepted:
        return 1

    options = dialog.options()
    recents.record(data_source.recents_key, options.package_name)
    recents.save()
    print(f"{options.package_name}.{options.class_name}" if options.package_name else options.class_name)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
