# src/retro_chip8/core/state.py
"""
Core Layer (マシン状態)

このモジュールは、CHIP-8のレジスタ群・コールスタック・タイマーを保持するデータ構造を定義します。
メモリ、表示、キー入力は Transport Layer のデバイスが保持します。
"""
from dataclasses import dataclass, field
from typing import List

from retro_chip8.common.errors import StackOverflowError, StackUnderflowError
from retro_chip8.common.types import (
    FLAG_REGISTER, NUM_REGISTERS, PROGRAM_START, STACK_SIZE,
)


# @intent:responsibility CHIP-8の全てのレジスタ（PC, I, V0〜VF, SP）とタイマーの状態を保持します。
@dataclass
class Chip8State:
    """
    CHIP-8のレジスタ状態を保持するデータクラス。
    """
    pc: int = PROGRAM_START   # Program Counter
    sp: int = 0               # Stack Pointer (スタックの深さ 0〜16)
    i: int = 0x0000           # Index Register
    v: List[int] = field(default_factory=lambda: [0] * NUM_REGISTERS)
    stack: List[int] = field(default_factory=lambda: [0] * STACK_SIZE)
    delay_timer: int = 0
    sound_timer: int = 0

    # @intent:accessor フラグレジスタ(VF)へのアクセサ。格納先は通常のレジスタ配列のままです。
    @property
    def vf(self) -> int:
        return self.v[FLAG_REGISTER]

    @vf.setter
    def vf(self, value: int) -> None:
        self.v[FLAG_REGISTER] = value & 0xFF

    # @intent:responsibility 戻りアドレスをコールスタックに積みます。
    # @intent:pre-condition スタックの深さが16未満であること。
    def push(self, address: int) -> None:
        if self.sp >= STACK_SIZE:
            raise StackOverflowError(f"Call stack overflow at depth {self.sp} (pushing {address:#05x}).")
        self.stack[self.sp] = address & 0xFFFF
        self.sp += 1

    # @intent:responsibility コールスタックから戻りアドレスを取り出します。
    def pop(self) -> int:
        if self.sp <= 0:
            raise StackUnderflowError("Return with an empty call stack.")
        self.sp -= 1
        return self.stack[self.sp]
