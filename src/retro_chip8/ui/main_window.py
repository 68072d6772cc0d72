# src/retro_chip8/ui/main_window.py
"""
メインウィンドウの実装。
フレームタイマーでマシンを駆動し、キーボード入力を CHIP-8 のキーに変換して渡します。
"""
import logging
from typing import Dict, Optional

from PySide6.QtWidgets import QMainWindow, QMessageBox
from PySide6.QtGui import QKeyEvent
from PySide6.QtCore import Qt, QTimer, Slot

from retro_chip8.common.errors import MachineError
from retro_chip8.config.models import DEFAULT_FPS, DEFAULT_SCALE
from retro_chip8.host.keymap import KEY_MAP, key_name_for_code
from retro_chip8.host.runner import FrameRunner
from .display_view import DisplayView

logger = logging.getLogger(__name__)


# @intent:responsibility アプリケーションのメインウィンドウを定義し、表示と入力をマシンに接続します。
class MainWindow(QMainWindow):
    """
    CHIP-8 表示ウィンドウ。Escキーで終了します。
    """
    def __init__(self, runner: FrameRunner,
                 key_map: Optional[Dict[str, int]] = None,
                 fps: int = DEFAULT_FPS,
                 scale: int = DEFAULT_SCALE,
                 parent=None):
        super(MainWindow, self).__init__(parent)
        self.setWindowTitle("Chip-8 Emulator")

        self._runner = runner
        self._machine = runner.machine
        self._key_map = key_map or KEY_MAP
        self._halted = False

        self.display_view = DisplayView(scale, self)
        self.setCentralWidget(self.display_view)
        self.display_view.update_frame(self._machine.read_display())

        self._timer = QTimer(self)
        self._timer.setInterval(max(1, round(1000 / fps)))
        self._timer.timeout.connect(self._on_frame)

    @property
    def halted(self) -> bool:
        return self._halted

    def start(self) -> None:
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    # @intent:responsibility 1フレームを実行して表示を更新します。
    # @intent:rationale マシンの致命的エラーは回復できないため、タイマーを止めてユーザーに通知します。
    @Slot()
    def _on_frame(self) -> None:
        try:
            buffer = self._runner.run_frame()
        except MachineError as e:
            self._halt(e)
            return
        self.display_view.update_frame(buffer)

    def _halt(self, error: MachineError) -> None:
        self._timer.stop()
        self._halted = True
        logger.error("Emulation halted: %s", error)
        self.statusBar().showMessage(f"Halted: {error}")
        QMessageBox.critical(self, "Emulation Error", str(error))

    def _key_index(self, event: QKeyEvent) -> Optional[int]:
        name = key_name_for_code(int(event.key()))
        if name is None:
            return None
        return self._key_map.get(name)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() == Qt.Key_Escape:
            self.close()
            return
        if event.isAutoRepeat():
            return
        index = self._key_index(event)
        if index is None:
            super().keyPressEvent(event)
            return
        self._machine.set_key(index, True)

    def keyReleaseEvent(self, event: QKeyEvent) -> None:
        if event.isAutoRepeat():
            return
        index = self._key_index(event)
        if index is None:
            super().keyReleaseEvent(event)
            return
        self._machine.set_key(index, False)

    def closeEvent(self, event) -> None:
        self._timer.stop()
        super().closeEvent(event)
