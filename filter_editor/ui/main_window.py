"""
Main window for the CSS filter editor.

Holds a text field for the raw CSS filter value, the filter editor widget
and a read-only view of the serialized result.
"""

import logging
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QGroupBox,
)

from ..core import FilterEditorError
from ..filters import FilterListModel, NONE_VALUE
from ..services import Settings
from .widgets import FilterEditorWidget


logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, initial_value: Optional[str] = None, settings: Optional[Settings] = None):
        super().__init__()
        self.setWindowTitle("CSS Filter Editor")
        self.resize(520, 460)

        self.settings = settings or Settings()
        self.model = FilterListModel()
        self._load_initial_value(initial_value or self.settings.get_last_filter_value())

        self._build_ui()
        self._on_value_changed(self.model.to_css())

    def _load_initial_value(self, css: str) -> None:
        try:
            self.model.from_css(css, skip_unknown=True)
        except FilterEditorError as e:
            logger.warning("Ignoring stored filter value %r: %s", css, e)
            self.model.from_css(NONE_VALUE)

    def _build_ui(self) -> None:
        central = QWidget()
        layout = QVBoxLayout(central)

        # CSS input
        input_group = QGroupBox("CSS filter value")
        input_layout = QHBoxLayout(input_group)
        self.css_input = QLineEdit(self.model.to_css())
        self.css_input.returnPressed.connect(self._on_apply_clicked)
        input_layout.addWidget(self.css_input, 1)
        self.btn_apply = QPushButton("Apply")
        self.btn_apply.clicked.connect(self._on_apply_clicked)
        input_layout.addWidget(self.btn_apply)
        layout.addWidget(input_group)

        # Filters
        filters_group = QGroupBox("Filters (applied in order)")
        filters_layout = QVBoxLayout(filters_group)
        self.editor = FilterEditorWidget(self.model, self.settings)
        self.editor.value_changed.connect(self._on_value_changed)
        self.editor.error_reported.connect(self._on_error)
        filters_layout.addWidget(self.editor)
        layout.addWidget(filters_group, 1)

        # Output
        output_layout = QHBoxLayout()
        output_layout.addWidget(QLabel("filter:"))
        self.css_output = QLineEdit()
        self.css_output.setReadOnly(True)
        output_layout.addWidget(self.css_output, 1)
        layout.addLayout(output_layout)

        self.setCentralWidget(central)

    def _on_apply_clicked(self) -> None:
        if self.editor.set_css_value(self.css_input.text()):
            self.statusBar().showMessage("Filter value applied", 3000)

    def _on_value_changed(self, css: str) -> None:
        self.css_output.setText(css)

    def _on_error(self, message: str) -> None:
        self.statusBar().showMessage(message, 5000)

    def closeEvent(self, event) -> None:
        self.settings.set_last_filter_value(self.model.to_css())
        super().closeEvent(event)
