# src/retro_chip8/host/runner.py
"""
フレーム単位の実行制御。

表示更新(60Hz)1回につき、一定数の命令を実行してからタイマーを1回だけ進めます。
実時間での待機（フレームレート制御）は呼び出し側（UIのタイマー）の責務です。
"""
from retro_chip8.common.types import DisplayBuffer
from retro_chip8.config.models import DEFAULT_TICKS_PER_FRAME
from retro_chip8.core.machine import Chip8Machine


# @intent:responsibility 1フレーム分の「命令実行バースト + タイマー更新」を行います。
class FrameRunner:
    def __init__(self, machine: Chip8Machine, ticks_per_frame: int = DEFAULT_TICKS_PER_FRAME):
        if ticks_per_frame <= 0:
            raise ValueError("ticks_per_frame must be a positive integer.")
        self._machine = machine
        self._ticks_per_frame = ticks_per_frame
        self._frame_count = 0

    @property
    def machine(self) -> Chip8Machine:
        return self._machine

    @property
    def ticks_per_frame(self) -> int:
        return self._ticks_per_frame

    @property
    def frame_count(self) -> int:
        return self._frame_count

    # @intent:responsibility 1フレームを進め、更新後の表示バッファを返します。
    # @intent:post-condition 命令実行中の MachineError はそのまま呼び出し側へ伝播します。
    def run_frame(self) -> DisplayBuffer:
        for _ in range(self._ticks_per_frame):
            self._machine.execute_step()
        self._machine.tick_timers()
        self._frame_count += 1
        return self._machine.read_display()
