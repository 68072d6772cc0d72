# src/retro_chip8/instructions/alu.py
"""
算術論理演算命令の実装。

全ての演算は8ビットで折り返します。VFへのフラグ書き込みは結果の書き込みの後に行うため、
x = F の場合はフラグ値が残ります（シフト命令のみ逆順で、シフト結果が残ります）。
"""
from retro_chip8.core.operation import Operation
from retro_chip8.transport.bus import Bus
from retro_chip8.core.state import Chip8State


# --- ADD Vx, byte (7XNN) ---
# @intent:responsibility 即値を加算します。VFは変更しません。
def execute_add_byte(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.v[op.x] = (state.v[op.x] + op.nn) & 0xFF


# --- OR / AND / XOR (8XY1, 8XY2, 8XY3) ---
def execute_or(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.v[op.x] |= state.v[op.y]


def execute_and(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.v[op.x] &= state.v[op.y]


def execute_xor(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.v[op.x] ^= state.v[op.y]


# --- ADD Vx, Vy (8XY4) ---
# @intent:responsibility Vx + Vy を計算し、桁あふれした場合にVF=1とします。
def execute_add_reg(state: Chip8State, bus: Bus, op: Operation) -> None:
    res = state.v[op.x] + state.v[op.y]
    state.v[op.x] = res & 0xFF
    state.vf = 1 if res > 0xFF else 0


# --- SUB Vx, Vy (8XY5) ---
# @intent:responsibility Vx - Vy を計算します。VFは借りが発生しなかった場合に1です（反転ボロー）。
def execute_sub(state: Chip8State, bus: Bus, op: Operation) -> None:
    v1 = state.v[op.x]
    v2 = state.v[op.y]
    state.v[op.x] = (v1 - v2) & 0xFF
    state.vf = 0 if v1 < v2 else 1


# --- SUBN Vx, Vy (8XY7) ---
# @intent:responsibility Vy - Vx をVxに格納します。フラグの規則は SUB と同じです。
def execute_subn(state: Chip8State, bus: Bus, op: Operation) -> None:
    v1 = state.v[op.x]
    v2 = state.v[op.y]
    state.v[op.x] = (v2 - v1) & 0xFF
    state.vf = 0 if v2 < v1 else 1


# --- SHR Vx (8X_6) ---
# @intent:responsibility シフトアウトされる最下位ビットをVFに入れてから右シフトします。Vyは使用しません。
def execute_shr(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.vf = state.v[op.x] & 0x01
    state.v[op.x] >>= 1


# --- SHL Vx (8X_E) ---
def execute_shl(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.vf = state.v[op.x] >> 7
    state.v[op.x] = (state.v[op.x] << 1) & 0xFF


# --- RND Vx, byte (CXNN) ---
# @intent:responsibility バスの乱数源から得た1バイトと即値のANDをVxに格納します。
def execute_rnd(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.v[op.x] = bus.random_byte() & op.nn
