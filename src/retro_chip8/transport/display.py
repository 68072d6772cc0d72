# src/retro_chip8/transport/display.py
"""
Transport Layer (フレームバッファ)

64×32 のモノクロ表示バッファを保持します。
ピクセルの更新は XOR のみで行われ、消灯したピクセルを衝突として報告します。
"""
from collections.abc import Sequence

from retro_chip8.common.types import SCREEN_WIDTH, SCREEN_HEIGHT


# @intent:utility_class 表示バッファへの読み取り専用ビューです。
# @intent:rationale ホストは毎フレーム表示を読み出すため、コピーせず内部リストを直接参照します。
#                  ビューは実行に伴って変化するので、呼び出し側は保持し続けないこと。
class FrameBufferView(Sequence):
    def __init__(self, cells: list):
        self._cells = cells

    def __getitem__(self, index):
        return self._cells[index]

    def __len__(self) -> int:
        return len(self._cells)


# @intent:responsibility 行優先のフラットなセル配列として表示状態を管理します。
class FrameBuffer:
    """
    CHIP-8の表示バッファ。セル (x, y) のインデックスは y * width + x です。
    """
    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT):
        if width <= 0 or height <= 0:
            raise ValueError("FrameBuffer dimensions must be positive.")
        self._width = width
        self._height = height
        self._cells = [False] * (width * height)
        self._view = FrameBufferView(self._cells)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    # @intent:responsibility 全セルを消灯します。
    # @intent:rationale リストを作り直さずスライス代入で更新し、既存のビューを有効なまま保ちます。
    def clear(self) -> None:
        self._cells[:] = [False] * len(self._cells)

    def get_pixel(self, x: int, y: int) -> bool:
        return self._cells[(y % self._height) * self._width + (x % self._width)]

    # @intent:responsibility セル (x, y) を反転します。座標は画面端で折り返します。
    # @intent:return 点灯していたセルが消灯した場合（衝突）にTrue。
    def toggle(self, x: int, y: int) -> bool:
        idx = (y % self._height) * self._width + (x % self._width)
        was_set = self._cells[idx]
        self._cells[idx] = not was_set
        return was_set

    def view(self) -> FrameBufferView:
        return self._view
