# src/retro_chip8/instructions/graphics.py
"""
表示命令（画面クリア、スプライト描画）の実装。
"""
from retro_chip8.core.operation import Operation
from retro_chip8.transport.bus import Bus
from retro_chip8.core.state import Chip8State

SPRITE_WIDTH = 8


# --- CLS (00E0) ---
def execute_cls(state: Chip8State, bus: Bus, op: Operation) -> None:
    bus.display.clear()


# --- DRW Vx, Vy, nibble (DXYN) ---
# @intent:responsibility メモリ[I]からNバイトのスプライトを (Vx, Vy) にXOR描画します。
# @intent:rationale 画面外にはみ出した部分はクリップせず、反対側の端に折り返して描画します。
#                  点灯していたセルが1つでも消灯した場合にVF=1、それ以外はVF=0とします。
def execute_drw(state: Chip8State, bus: Bus, op: Operation) -> None:
    x_coord = state.v[op.x]
    y_coord = state.v[op.y]
    display = bus.display

    # 表示を変更する前にスプライト全体を読み出す
    bus.check_range(state.i, op.n)
    sprite = [bus.read(state.i + row) for row in range(op.n)]

    collision = False
    for row, pixels in enumerate(sprite):
        for col in range(SPRITE_WIDTH):
            if pixels & (0x80 >> col):
                collision |= display.toggle(x_coord + col, y_coord + row)

    state.vf = 1 if collision else 0
