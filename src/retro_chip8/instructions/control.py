# src/retro_chip8/instructions/control.py
"""
制御命令（ジャンプ、サブルーチン、条件スキップ、キー待ち）の実装。

実行時点で state.pc は既に次の命令を指しています（フェッチ時に +2 済み）。
"""
from retro_chip8.core.operation import Operation
from retro_chip8.transport.bus import Bus
from retro_chip8.core.state import Chip8State
from .base import INSTRUCTION_LENGTH, skip_next


# --- NOP (0000) ---
def execute_nop(state: Chip8State, bus: Bus, op: Operation) -> None:
    # Intentional: NOP (No Operation)
    pass


# --- RET (00EE) ---
# @intent:responsibility スタックから戻りアドレスを取り出してPCに設定します。
def execute_ret(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.pc = state.pop()


# --- JP addr (1NNN) ---
def execute_jp(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.pc = op.nnn


# --- CALL addr (2NNN) ---
# @intent:responsibility 戻りアドレス（CALLの次の命令）を積んでからジャンプします。
def execute_call(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.push(state.pc)
    state.pc = op.nnn


# --- JP V0, addr (BNNN) ---
def execute_jp_v0(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.pc = (op.nnn + state.v[0]) & 0xFFFF


# --- SE Vx, byte (3XNN) ---
def execute_se_byte(state: Chip8State, bus: Bus, op: Operation) -> None:
    if state.v[op.x] == op.nn:
        skip_next(state)


# --- SNE Vx, byte (4XNN) ---
def execute_sne_byte(state: Chip8State, bus: Bus, op: Operation) -> None:
    if state.v[op.x] != op.nn:
        skip_next(state)


# --- SE Vx, Vy (5XY0) ---
def execute_se_reg(state: Chip8State, bus: Bus, op: Operation) -> None:
    if state.v[op.x] == state.v[op.y]:
        skip_next(state)


# --- SNE Vx, Vy (9XY0) ---
def execute_sne_reg(state: Chip8State, bus: Bus, op: Operation) -> None:
    if state.v[op.x] != state.v[op.y]:
        skip_next(state)


# --- SKP Vx (EX9E) ---
# @intent:pre-condition Vxは0〜15であること。範囲外のキー番号はInvalidKeyErrorになります。
def execute_skp(state: Chip8State, bus: Bus, op: Operation) -> None:
    if bus.keypad.is_pressed(state.v[op.x]):
        skip_next(state)


# --- SKNP Vx (EXA1) ---
def execute_sknp(state: Chip8State, bus: Bus, op: Operation) -> None:
    if not bus.keypad.is_pressed(state.v[op.x]):
        skip_next(state)


# --- LD Vx, K (FX0A) ---
# @intent:responsibility キーが押されるまで同じ命令を繰り返し実行させます。
# @intent:rationale 実行を中断せず、PCを1命令分巻き戻すことで待機を表現します。
#                  ホストの「1フレームあたりの実行ステップ数」はこの再実行も1ステップとして数えます。
def execute_ld_vx_k(state: Chip8State, bus: Bus, op: Operation) -> None:
    key = bus.keypad.first_pressed()
    if key is None:
        state.pc = (state.pc - INSTRUCTION_LENGTH) & 0xFFFF
    else:
        state.v[op.x] = key
