"""Options panel binding Qt widgets to an :class:`OptionsModel`."""

from __future__ import annotations

from typing import Optional, Sequence

from loguru import logger
from PySide6.QtWidgets import (
    QButtonGroup,
    QCheckBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from ..models import GeneratorOptions, OptionsField, ValidationInfo
from ..options import OptionsModel
from .widgets import PackageCombo, ReferenceChooser, ReferenceEditor, SourceRootCombo

PANEL_WIDTH_CHARS = 60


class OptionsPanel(QWidget):
    """Widgets for editing matcher options. All state lives in the model."""

    def __init__(
        self,
        model: OptionsModel,
        *,
        recent_packages: Sequence[str] = (),
        super_class_chooser: ReferenceChooser | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._model = model
        layout = QFormLayout(self)
        width = self.fontMetrics().averageCharWidth() * PANEL_WIDTH_CHARS

        self._class_name_edit = QLineEdit(model.class_name, self)
        self._class_name_edit.setMinimumWidth(width)
        layout.addRow("Class name", self._class_name_edit)

        self._package_combo = PackageCombo(model.package_name, recent_packages, parent=self)
        self._package_combo.setMinimumWidth(width)
        layout.addRow("Package", self._package_combo)

        self._root_combo = SourceRootCombo(model.candidate_roots, model.selected_root, parent=self)
        layout.addRow("Destination", self._root_combo)

        a_text, an_text = model.article_choices()
        self._matches_label = QLabel("Matches", self)
        self._a_radio = QRadioButton(a_text, self)
        self._an_radio = QRadioButton(an_text, self)
        self._article_group = QButtonGroup(self)
        self._article_group.addButton(self._a_radio)
        self._article_group.addButton(self._an_radio)
        article_layout = QHBoxLayout()
        article_layout.addWidget(self._a_radio)
        article_layout.addWidget(self._an_radio)
        layout.addRow(self._matches_label, article_layout)
        enabled = model.article_choice_enabled
        self._matches_label.setEnabled(enabled)
        self._a_radio.setEnabled(enabled)
        self._an_radio.setEnabled(enabled)
        if enabled:
            (self._an_radio if model.uses_an else self._a_radio).setChecked(True)

        self._extensible_checkbox = QCheckBox("Make extensible", self)
        self._extensible_checkbox.setChecked(model.extensible)
        layout.addRow("", self._extensible_checkbox)

        self._extends_checkbox = QCheckBox("Extends", self)
        self._extends_checkbox.setChecked(model.extends_superclass)
        self._super_class_editor = ReferenceEditor(chooser=super_class_chooser, parent=self)
        self._super_class_editor.set_text(model.super_class_text)
        self._super_class_editor.setEnabled(model.super_class_enabled)
        layout.addRow(self._extends_checkbox, self._super_class_editor)

        self._class_name_edit.textChanged.connect(self._on_class_name_changed)
        self._package_combo.editTextChanged.connect(self._on_package_changed)
        self._root_combo.root_selected.connect(model.select_root)
        self._an_radio.toggled.connect(self._on_article_changed)
        self._extensible_checkbox.toggled.connect(self._on_extensible_changed)
        self._extends_checkbox.toggled.connect(self._on_extends_toggled)
        self._super_class_editor.text_changed.connect(self._on_super_class_changed)
        model.add_extends_listener(self._super_class_editor.setEnabled)

    @property
    def model(self) -> OptionsModel:
        return self._model

    def field_widget(self, field: OptionsField) -> QWidget:
        return {
            OptionsField.CLASS_NAME: self._class_name_edit,
            OptionsField.PACKAGE: self._package_combo,
            OptionsField.SOURCE_ROOT: self._root_combo,
            OptionsField.SUPER_CLASS: self._super_class_editor,
        }[field]

    def _on_class_name_changed(self, text: str) -> None:
        self._model.class_name = text

    def _on_package_changed(self, text: str) -> None:
        self._model.package_name = text

    def _on_article_changed(self, checked: bool) -> None:
        if self._model.article_choice_enabled:
            self._model.uses_an = checked

    def _on_extensible_changed(self, checked: bool) -> None:
        self._model.extensible = checked

    def _on_extends_toggled(self, checked: bool) -> None:
        self._model.extends_superclass = checked

    def _on_super_class_changed(self, text: str) -> None:
        self._model.super_class_text = text


class OptionsDialog(QDialog):
    """Dialog hosting an :class:`OptionsPanel` and validating on OK."""

    def __init__(self, panel: OptionsPanel, *, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(f"Generate Matcher for {panel.model.matched_class.name}")
        self._panel = panel
        self._options: Optional[GeneratorOptions] = None
        layout = QVBoxLayout(self)
        layout.addWidget(panel)
        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel, self)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def options(self) -> Optional[GeneratorOptions]:
        return self._options

    def _show_validation(self, info: ValidationInfo) -> None:
        QMessageBox.warning(self, "Invalid options", info.message)
        self._panel.field_widget(info.field).setFocus()

    def accept(self) -> None:
        info = self._panel.model.do_validate()
        if info is not None:
            logger.info("Options rejected: {}", info.message)
            self._show_validation(info)
            return
        self._options = self._panel.model.finalize()
        logger.debug("Accepted matcher options: {}", self._options)
        super().accept()


__all__ = ["OptionsPanel", "OptionsDialog"]
