# src/retro_chip8/ui/display_view.py
"""
表示バッファを描画するウィジェット。
"""
from array import array
from typing import Optional, Sequence

from PySide6.QtWidgets import QWidget
from PySide6.QtGui import QImage, QPainter
from PySide6.QtCore import Qt

from retro_chip8.common.types import SCREEN_WIDTH, SCREEN_HEIGHT
from retro_chip8.host.scaling import COLOR_ON, COLOR_OFF, scale_display

# QImage.Format_RGB32 は 0xffRRGGBB 形式
_OPAQUE = 0xFF000000
_PIXEL_ON = _OPAQUE | COLOR_ON
_PIXEL_OFF = _OPAQUE | COLOR_OFF


# @intent:responsibility 64×32の表示バッファを scale 倍に拡大して描画します。
# @intent:rationale 画像は1セル1ピクセルで保持し、拡大は描画時にQtが行います。
class DisplayView(QWidget):
    def __init__(self, scale: int, parent=None):
        super().__init__(parent)
        self._scale = scale
        self._image: Optional[QImage] = None
        self.setFixedSize(SCREEN_WIDTH * scale, SCREEN_HEIGHT * scale)
        self.setFocusPolicy(Qt.NoFocus)

    @property
    def scale(self) -> int:
        return self._scale

    def image(self) -> Optional[QImage]:
        return self._image

    # @intent:responsibility 表示バッファから等倍の画像を作り直し、再描画を要求します。
    def update_frame(self, buffer: Sequence[bool]) -> None:
        pixels = array('I', scale_display(buffer, 1, on_color=_PIXEL_ON, off_color=_PIXEL_OFF))
        # QImage は渡したバッファを参照するだけなので、copy() で所有させる
        self._image = QImage(pixels.tobytes(), SCREEN_WIDTH, SCREEN_HEIGHT,
                             SCREEN_WIDTH * 4, QImage.Format_RGB32).copy()
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        if self._image is None:
            painter.fillRect(self.rect(), Qt.black)
        else:
            painter.setRenderHint(QPainter.SmoothPixmapTransform, False)
            painter.drawImage(self.rect(), self._image)
        painter.end()
