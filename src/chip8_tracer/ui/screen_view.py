"""
CHIP-8 画面ウィジェット。

64x32 のモノクロフレームバッファを、指定倍率で拡大して描画します。
"""
from typing import Sequence

from PySide6.QtCore import QSize
from PySide6.QtGui import QColor, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget

from chip8_tracer.core.state import DISPLAY_WIDTH, DISPLAY_HEIGHT, FRAMEBUFFER_SIZE

# --- 色定義 ---
COLOR_BG = "#101010"
COLOR_PIXEL = "#99FF99"

# @intent:responsibility フレームバッファを拡大表示するウィジェットを提供します。
class ScreenView(QWidget):
    """
    フレームバッファ（行優先、上の行から）をそのまま描画します。
    QtのY軸は下向きなので、座標系の反転は不要です。
    """
    def __init__(self, scale: int = 10, parent=None):
        super().__init__(parent)
        self._scale = scale
        self._pixels = [False] * FRAMEBUFFER_SIZE
        self.setFixedSize(self.sizeHint())

    def sizeHint(self) -> QSize:
        return QSize(DISPLAY_WIDTH * self._scale, DISPLAY_HEIGHT * self._scale)

    # @intent:responsibility 新しいフレームバッファを受け取り、再描画を要求します。
    def update_framebuffer(self, framebuffer: Sequence[bool]) -> None:
        if len(framebuffer) != FRAMEBUFFER_SIZE:
            raise ValueError(f"Framebuffer must have {FRAMEBUFFER_SIZE} cells, got {len(framebuffer)}.")
        self._pixels = list(framebuffer)
        self.update()

    def lit_pixels(self):
        """点灯しているピクセルの (x, y) 座標を返します。"""
        return [(index % DISPLAY_WIDTH, index // DISPLAY_WIDTH)
                for index, lit in enumerate(self._pixels) if lit]

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(COLOR_BG))
        color = QColor(COLOR_PIXEL)
        for x, y in self.lit_pixels():
            painter.fillRect(x * self._scale, y * self._scale, self._scale, self._scale, color)
        painter.end()
