"""Reusable Qt widgets for the matcher options panel."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QInputDialog,
    QLineEdit,
    QPushButton,
    QStyle,
    QWidget,
)

from ..models import SourceRootCandidate, SourceRootKind

ReferenceChooser = Callable[[QWidget, str], Optional[str]]


def _ask_for_reference(parent: QWidget, current: str) -> Optional[str]:
    text, accepted = QInputDialog.getText(parent, "Choose Class", "Fully qualified class name:", text=current)
    return text if accepted else None


class ReferenceEditor(QWidget):
    """Line edit with a browse button for class references."""

    text_changed = Signal(str)

    def __init__(
        self,
        *,
        chooser: ReferenceChooser | None = None,
        placeholder: str | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._chooser = chooser or _ask_for_reference
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self._edit = QLineEdit(self)
        if placeholder:
            self._edit.setPlaceholderText(placeholder)
        layout.addWidget(self._edit, stretch=1)
        self._button = QPushButton("…", self)
        self._button.clicked.connect(self._choose)
        layout.addWidget(self._button)
        self._edit.textChanged.connect(self.text_changed.emit)

    def text(self) -> str:
        return self._edit.text()

    def set_text(self, text: str) -> None:
        self._edit.setText(text)

    def setFocus(self) -> None:  # noqa: N802 - Qt naming
        self._edit.setFocus()

    def _choose(self) -> None:
        chosen = self._chooser(self, self._edit.text())
        if chosen:
            self._edit.setText(chosen)


class PackageCombo(QComboBox):
    """Editable package chooser pre-filled with recently used packages."""

    def __init__(self, package: str, recent: Sequence[str], *, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setEditable(True)
        for item in recent:
            self.addItem(item)
        self.setEditText(package)

    def text(self) -> str:
        return self.currentText()


_ROOT_ICONS = {
    SourceRootKind.TEST: QStyle.StandardPixmap.SP_DirLinkIcon,
    SourceRootKind.MAIN: QStyle.StandardPixmap.SP_DirIcon,
    SourceRootKind.OTHER: QStyle.StandardPixmap.SP_DirClosedIcon,
}


class SourceRootCombo(QComboBox):
    """Combo box listing destination source roots with an icon per kind."""

    root_selected = Signal(object)

    def __init__(
        self,
        candidates: Sequence[SourceRootCandidate],
        selected: SourceRootCandidate,
        *,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._candidates = list(candidates)
        for index, candidate in enumerate(self._candidates):
            icon = self.style().standardIcon(_ROOT_ICONS[candidate.kind])
            self.addItem(icon, candidate.label)
            if candidate is selected:
                self.setCurrentIndex(index)
        self.currentIndexChanged.connect(self._emit_selection)

    def selected_root(self) -> SourceRootCandidate:
        return self._candidates[self.currentIndex()]

    def _emit_selection(self, index: int) -> None:
        if index >= 0:
            self.root_selected.emit(self._candidates[index])


__all__ = ["ReferenceEditor", "PackageCombo", "SourceRootCombo"]
