# src/retro_chip8/instructions/load.py
"""
転送命令（レジスタ、インデックスレジスタ、タイマー、メモリブロック）の実装。
"""
from retro_chip8.core.operation import Operation
from retro_chip8.transport.bus import Bus
from retro_chip8.core.state import Chip8State
from retro_chip8.common.types import GLYPH_HEIGHT


# --- LD Vx, byte (6XNN) ---
def execute_ld_byte(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.v[op.x] = op.nn


# --- LD Vx, Vy (8XY0) ---
def execute_ld_reg(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.v[op.x] = state.v[op.y]


# --- LD I, addr (ANNN) ---
def execute_ld_i(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.i = op.nnn


# --- LD Vx, DT (FX07) ---
def execute_ld_vx_dt(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.v[op.x] = state.delay_timer


# --- LD DT, Vx (FX15) ---
def execute_ld_dt_vx(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.delay_timer = state.v[op.x]


# --- LD ST, Vx (FX18) ---
def execute_ld_st_vx(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.sound_timer = state.v[op.x]


# --- ADD I, Vx (FX1E) ---
# @intent:responsibility IにVxを加算します。16ビットで折り返し、VFは変更しません。
def execute_add_i_vx(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.i = (state.i + state.v[op.x]) & 0xFFFF


# --- LD F, Vx (FX29) ---
# @intent:responsibility Vxの文字フォントの先頭アドレスをIに設定します。
def execute_ld_f_vx(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.i = state.v[op.x] * GLYPH_HEIGHT


# --- LD B, Vx (FX33) ---
# @intent:responsibility Vxを10進数の百・十・一の位に分解し、I, I+1, I+2 に格納します。
# @intent:pre-condition I〜I+2 がメモリ内にない場合は、何も書き込まずに MemoryAccessError。
def execute_ld_b_vx(state: Chip8State, bus: Bus, op: Operation) -> None:
    value = state.v[op.x]
    bus.check_range(state.i, 3)
    bus.write(state.i, value // 100)
    bus.write(state.i + 1, (value // 10) % 10)
    bus.write(state.i + 2, value % 10)


# --- LD [I], Vx (FX55) ---
# @intent:responsibility V0〜Vx（両端を含む）をIから始まるメモリに書き込みます。Iは変更しません。
def execute_ld_mem_vx(state: Chip8State, bus: Bus, op: Operation) -> None:
    bus.check_range(state.i, op.x + 1)
    for idx in range(op.x + 1):
        bus.write(state.i + idx, state.v[idx])


# --- LD Vx, [I] (FX65) ---
def execute_ld_vx_mem(state: Chip8State, bus: Bus, op: Operation) -> None:
    bus.check_range(state.i, op.x + 1)
    for idx in range(op.x + 1):
        state.v[idx] = bus.read(state.i + idx)
