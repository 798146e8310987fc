"""
Filter editor widget for displaying and managing the active filters.

Shows the filters of a FilterListModel in order, one row per filter, with
controls for adding, removing, re-ordering and editing them. Rows are
re-ordered by dragging their grip; numeric values can also be changed by
dragging the filter's label left or right (hold Alt for fine steps, Shift
for coarse ones).
"""

import logging
import math
from typing import Dict, Optional, Tuple

from PySide6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QDoubleSpinBox,
    QComboBox,
    QPushButton,
)
from PySide6.QtCore import Qt, Signal

from ...core import EntryView, FilterDefinition, FilterEditorError
from ...filters import (
    FilterListModel,
    LabelDrag,
    drag_destination,
    filter_names,
    format_number,
    round_tenths,
    value_multiplier,
)
from ...services import Settings


logger = logging.getLogger(__name__)

# Spin box limit used for filters without an upper bound
_UNBOUNDED_MAX = 1e9


def _modifier_state(event) -> Tuple[bool, bool]:
    """(alt, shift) held during a mouse event."""
    modifiers = event.modifiers()
    return (
        bool(modifiers & Qt.KeyboardModifier.AltModifier),
        bool(modifiers & Qt.KeyboardModifier.ShiftModifier),
    )


class _DragHandle(QLabel):
    """Row grip reporting the vertical distance of a finished drag."""

    drag_finished = Signal(float)  # pixel delta

    def __init__(self):
        super().__init__("≡")
        self.setToolTip("Drag up or down to re-order filters")
        self.setCursor(Qt.CursorShape.SizeVerCursor)
        self._start_y: Optional[float] = None

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self._start_y = event.globalPosition().y()
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event) -> None:
        start_y, self._start_y = self._start_y, None
        if start_y is not None:
            self.drag_finished.emit(event.globalPosition().y() - start_y)
        super().mouseReleaseEvent(event)


class _DragLabel(QLabel):
    """Filter name label that reports horizontal drags with modifier state."""

    drag_started = Signal(float, bool, bool)  # x, alt, shift
    drag_moved = Signal(float, bool, bool)  # x, alt, shift
    drag_finished = Signal()

    def __init__(self, text: str):
        super().__init__(text)
        self.setToolTip("Drag left or right to decrease or increase the value")
        self.setCursor(Qt.CursorShape.SizeHorCursor)
        self._dragging = False

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self._dragging = True
            self.drag_started.emit(event.globalPosition().x(), *_modifier_state(event))
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event) -> None:
        if self._dragging:
            self.drag_moved.emit(event.globalPosition().x(), *_modifier_state(event))
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event) -> None:
        if self._dragging:
            self._dragging = False
            self.drag_finished.emit()
        super().mouseReleaseEvent(event)


class FilterEditorWidget(QWidget):
    """Add, remove, re-order and edit the filters of a FilterListModel."""

    # Signals
    value_changed = Signal(str)  # serialized CSS value after each change
    error_reported = Signal(str)

    def __init__(self, model: FilterListModel, settings: Optional[Settings] = None):
        super().__init__()
        self.model = model
        self.settings = settings or Settings()
        self.value_editors: Dict[int, QWidget] = {}
        self._label_drag: Optional[LabelDrag] = None
        self._label_drag_modifiers: Tuple[bool, bool] = (False, False)
        self._build_ui()
        self._refresh_list()

    def _build_ui(self) -> None:
        """Build the editor UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.rows_widget = QWidget()
        self.rows_layout = QVBoxLayout(self.rows_widget)
        self.rows_layout.setContentsMargins(0, 0, 0, 0)
        # Rows must be exactly row_height apart for drag_destination
        self.rows_layout.setSpacing(0)
        layout.addWidget(self.rows_widget)

        self.empty_label = QLabel("No filter specified\nAdd a filter using the list below")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.empty_label)

        layout.addStretch(1)

        # Add controls
        add_layout = QHBoxLayout()
        self.filter_select = QComboBox()
        self.filter_select.addItems(filter_names())
        add_layout.addWidget(self.filter_select, 1)

        self.btn_add = QPushButton("+ Add")
        self.btn_add.clicked.connect(self._on_add_clicked)
        add_layout.addWidget(self.btn_add)
        layout.addLayout(add_layout)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color: #c0392b;")
        layout.addWidget(self.status_label)

    # ========== Public API ==========

    def set_model(self, model: FilterListModel) -> None:
        """Update the model reference."""
        self.model = model
        self._refresh_list()
        self._emit_change()

    def set_css_value(self, css: str) -> bool:
        """Parse a CSS filter value into the model. Returns success."""
        try:
            self.model.from_css(css)
        except FilterEditorError as e:
            self._report_error(str(e))
            return False
        self._refresh_list()
        self._emit_change()
        return True

    def get_css_value(self) -> str:
        return self.model.to_css()

    # ========== Rendering ==========

    def _refresh_list(self) -> None:
        """Rebuild the rows from the model."""
        self._clear_layout(self.rows_layout)
        self.value_editors.clear()

        for view in self.model.entries():
            definition = self.model.definition_of(view.id)
            self.rows_layout.addWidget(self._create_row(view, definition))

        self.empty_label.setVisible(self.model.is_empty())

    def _clear_layout(self, layout) -> None:
        """Remove all row widgets from a layout."""
        while layout.count():
            item = layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                # Deferred, a row may be deleted from inside its own event handler
                widget.hide()
                widget.deleteLater()

    def _create_row(self, view: EntryView, definition: FilterDefinition) -> QWidget:
        """Create the controls for one filter."""
        row = QWidget()
        row.setFixedHeight(self.settings.get_row_height())
        layout = QHBoxLayout(row)
        layout.setContentsMargins(4, 0, 4, 0)

        handle = _DragHandle()
        handle.drag_finished.connect(
            lambda delta, entry_id=view.id: self._on_row_dropped(entry_id, delta)
        )
        layout.addWidget(handle)

        if definition.is_numeric:
            label = _DragLabel(view.name)
            label.drag_started.connect(
                lambda x, alt, shift, entry_id=view.id: self._on_label_drag_started(entry_id, x, alt, shift)
            )
            label.drag_moved.connect(
                lambda x, alt, shift, entry_id=view.id: self._on_label_dragged(entry_id, x, alt, shift)
            )
            label.drag_finished.connect(self._on_label_drag_finished)
            editor = self._create_number_editor(view, definition)
        else:
            label = QLabel(view.name)
            editor = self._create_text_editor(view, definition)

        label.setMinimumWidth(90)
        layout.addWidget(label)
        layout.addWidget(editor, 1)
        self.value_editors[view.id] = editor

        if definition.is_numeric:
            layout.addWidget(QLabel(view.unit))

        btn_remove = QPushButton("✕")
        btn_remove.setToolTip("Remove filter")
        btn_remove.clicked.connect(lambda _=False, entry_id=view.id: self._on_remove(entry_id))
        layout.addWidget(btn_remove)

        return row

    def _create_number_editor(self, view: EntryView, definition: FilterDefinition) -> QDoubleSpinBox:
        spin = QDoubleSpinBox()
        min_value, max_value = definition.bounds
        spin.setMinimum(min_value if min_value is not None else -_UNBOUNDED_MAX)
        if max_value is None or math.isinf(max_value):
            spin.setMaximum(_UNBOUNDED_MAX)
        else:
            spin.setMaximum(max_value)
        spin.setDecimals(1)
        spin.setSingleStep(0.1)
        spin.setValue(float(view.value))
        spin.valueChanged.connect(
            lambda value, entry_id=view.id: self._on_number_edited(entry_id, value)
        )
        return spin

    def _create_text_editor(self, view: EntryView, definition: FilterDefinition) -> QLineEdit:
        edit = QLineEdit(str(view.value))
        edit.setPlaceholderText(definition.placeholder)
        edit.editingFinished.connect(
            lambda entry_id=view.id: self._apply_update(entry_id, self.value_editors[entry_id].text())
        )
        return edit

    # ========== Event handlers ==========

    def _on_add_clicked(self) -> None:
        """Append the selected filter with its default value."""
        name = self.filter_select.currentText()
        if not name:
            return
        try:
            self.model.add(name)
        except FilterEditorError as e:
            self._report_error(str(e))
            return
        self._refresh_list()
        self._emit_change()

        editor = self.value_editors.get(self.model.ids()[-1])
        if editor is not None:
            editor.setFocus()

    def _on_remove(self, entry_id: int) -> None:
        """Remove a filter."""
        try:
            self.model.remove(entry_id)
        except FilterEditorError as e:
            self._report_error(str(e))
            return
        self._refresh_list()
        self._emit_change()

    def _on_row_dropped(self, entry_id: int, pixel_delta: float) -> None:
        """Move a filter to the row it was dropped on."""
        if entry_id not in self.model:
            return
        index = self.model.position_of(entry_id)
        destination = drag_destination(
            index, pixel_delta, len(self.model), self.settings.get_row_height()
        )
        if destination == index:
            return
        self.model.move_to(entry_id, destination)
        self._refresh_list()
        self._emit_change()

    def _on_number_edited(self, entry_id: int, value: float) -> None:
        unit = self.model.get(entry_id).unit
        self._apply_update(entry_id, format_number(value) + unit)

    def _on_label_drag_started(self, entry_id: int, x: float, alt: bool, shift: bool) -> None:
        self._label_drag = LabelDrag(
            start_x=x,
            start_value=float(self.model.get(entry_id).value),
            multiplier=self._multiplier(alt, shift),
        )
        self._label_drag_modifiers = (alt, shift)

    def _on_label_dragged(self, entry_id: int, x: float, alt: bool, shift: bool) -> None:
        """Photoshop-style value change while the label is dragged."""
        drag = self._label_drag
        if drag is None or entry_id not in self.model:
            return

        if (alt, shift) != self._label_drag_modifiers:
            self._label_drag_modifiers = (alt, shift)
            drag.rebase(self._multiplier(alt, shift), float(self.model.get(entry_id).value))

        value = round_tenths(drag.value_at(x, self.model.definition_of(entry_id).bounds))
        if not self._apply_update(entry_id, format_number(value) + self.model.get(entry_id).unit):
            return

        spin = self.value_editors.get(entry_id)
        if isinstance(spin, QDoubleSpinBox):
            spin.blockSignals(True)
            spin.setValue(float(self.model.get(entry_id).value))
            spin.blockSignals(False)

    def _on_label_drag_finished(self) -> None:
        self._label_drag = None

    # ========== Helpers ==========

    def _multiplier(self, alt: bool, shift: bool) -> float:
        return value_multiplier(
            alt,
            shift,
            slow=self.settings.get_slow_multiplier(),
            fast=self.settings.get_fast_multiplier(),
        )

    def _apply_update(self, entry_id: int, raw_value: str) -> bool:
        """Push an edited value into the model. Returns success."""
        try:
            self.model.update(entry_id, raw_value)
        except FilterEditorError as e:
            self._report_error(str(e))
            return False
        self._emit_change()
        return True

    def _report_error(self, message: str) -> None:
        logger.warning("Filter edit rejected: %s", message)
        self.status_label.setText(message)
        self.error_reported.emit(message)

    def _emit_change(self) -> None:
        self.status_label.clear()
        self.value_changed.emit(self.model.to_css())
