from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QEvent, QObject, Qt
from PyQt6.QtGui import QAction, QFont, QKeyEvent, QKeySequence
from PyQt6.QtWidgets import (
    QComboBox,
    QLabel,
    QMainWindow,
    QSizePolicy,
    QStatusBar,
    QTextEdit,
    QToolBar,
    QWidget,
)

from pytxt.utils.constants import CREDIT_TEXT, HINT_TEXT, STATS_READY, THEME_COLOR

if TYPE_CHECKING:
    from pytxt.services.ui.presenters.main_presenter import MainPresenter


class MainWindow(QMainWindow):
    """Thin PyQt window; every decision is delegated to the attached presenter."""

    def __init__(self, *, app_title: str = "PyTextEditor") -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(950, 650)

        self._presenter: MainPresenter | None = None

        # Widgets
        self.editor = QTextEdit(self)
        self.editor.setAcceptRichText(False)
        self.editor.setLineWrapMode(QTextEdit.LineWrapMode.WidgetWidth)
        self.editor.setFont(QFont("Segoe UI", 15))
        self.editor.installEventFilter(self)
        self.setCentralWidget(self.editor)

        self.format_selector = QComboBox(self)
        self.format_selector.setFocusPolicy(Qt.FocusPolicy.NoFocus)

        self.stats_label = QLabel(STATS_READY, self)
        self.credit_label = QLabel(CREDIT_TEXT, self)

        # UI
        self._build_actions()
        self._build_toolbar()
        self._build_status_bar()

        # Signals
        self.editor.textChanged.connect(self._on_text_changed)
        self.format_selector.currentIndexChanged.connect(self._on_format_changed)

    # ---------- UI creation ----------
    def _build_actions(self):
        self.act_save = QAction(
            "SAVE", self, shortcut=QKeySequence.StandardKey.Save, triggered=self._save
        )

    def _build_toolbar(self):
        tb = QToolBar("Main", self)
        tb.setMovable(False)

        hint = QLabel(HINT_TEXT, self)
        hint.setStyleSheet("color: gray; font-style: italic;")
        tb.addWidget(hint)

        spacer = QWidget(self)
        spacer.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        tb.addWidget(spacer)

        tb.addWidget(QLabel("RECORDING FORMAT : ", self))
        tb.addWidget(self.format_selector)
        tb.addSeparator()
        tb.addAction(self.act_save)
        self.addToolBar(tb)

    def _build_status_bar(self):
        sb = QStatusBar(self)
        sb.setStyleSheet(f"QStatusBar {{ background: {THEME_COLOR}; }} QLabel {{ color: white; }}")
        self.stats_label.setStyleSheet("font-weight: bold;")
        self.credit_label.setStyleSheet("font-style: italic; color: #c8c8c8;")
        sb.addWidget(self.stats_label, 1)
        sb.addPermanentWidget(self.credit_label)
        self.setStatusBar(sb)

    # ---------- Presenter wiring ----------
    def attach_presenter(self, presenter: MainPresenter) -> None:
        self._presenter = presenter
        self.format_selector.blockSignals(True)
        self.format_selector.clear()
        self.format_selector.addItems(presenter.format_labels())
        self.format_selector.setCurrentIndex(presenter.format_index())
        self.format_selector.blockSignals(False)

    # ---------- IMainView ----------
    def get_editor_text(self) -> str:
        return self.editor.toPlainText()

    def set_stats_text(self, text: str) -> None:
        self.stats_label.setText(text)

    # ---------- Actions ----------
    def _on_text_changed(self):
        if self._presenter is not None:
            self._presenter.on_text_changed(self.editor.toPlainText())

    def _on_format_changed(self, index: int):
        if self._presenter is not None and index >= 0:
            self._presenter.select_format(index)

    def _save(self):
        if self._presenter is not None:
            self._presenter.save_via_dialog()

    def _copy(self):
        if self._presenter is None:
            return
        c = self.editor.textCursor()
        selected = c.selectedText().replace("\u2029", "\n") if c.hasSelection() else None
        self._presenter.copy(selected)

    def _paste(self):
        if self._presenter is None:
            return
        c = self.editor.textCursor()
        c.insertText(self._presenter.paste())
        self.editor.setTextCursor(c)

    # ---------- Close ----------
    def closeEvent(self, event):
        if self._presenter is not None:
            self._presenter.detach()
            self._presenter = None
        super().closeEvent(event)

    # ---------- Copy/paste interception ----------
    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if (
            obj is self.editor
            and isinstance(event, QKeyEvent)
            and event.type() == QEvent.Type.KeyPress
        ):
            if event.matches(QKeySequence.StandardKey.Copy):
                self._copy()
                return True
            if event.matches(QKeySequence.StandardKey.Paste):
                self._paste()
                return True
        return super().eventFilter(obj, event)
