"""
デバッグトレースを表示するウィジェット。
"""
from PySide6.QtGui import QFontDatabase
from PySide6.QtWidgets import QPlainTextEdit, QVBoxLayout, QWidget

from chip8_tracer.core.trace import DebugTrace

# @intent:responsibility インタプリタのデバッグトレースを読み取り専用で表示します。
class TraceView(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.text_edit = QPlainTextEdit()
        self.text_edit.setReadOnly(True)
        self.text_edit.setFont(QFontDatabase.systemFont(QFontDatabase.FixedFont))
        self.text_edit.setStyleSheet("background-color: #121212; color: #BBBBBB;")
        layout.addWidget(self.text_edit)

    def update_trace(self, trace: DebugTrace) -> None:
        if not trace.enabled:
            self.text_edit.setPlainText("(diagnostics disabled)")
            return
        self.text_edit.setPlainText("\n".join(trace.entries()))
        # 最新行を表示
        scroll_bar = self.text_edit.verticalScrollBar()
        scroll_bar.setValue(scroll_bar.maximum())
