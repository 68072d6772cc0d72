"""
共通の型定義と定数を提供するモジュール。
プロジェクト全体（Core、Instruction、Host、UI）で使用される値をまとめて定義します。
"""
from dataclasses import dataclass
from typing import Callable, Sequence

SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32

MEMORY_SIZE = 4096
NUM_REGISTERS = 16
NUM_KEYS = 16
STACK_SIZE = 16

PROGRAM_START = 0x200
MAX_PROGRAM_SIZE = MEMORY_SIZE - PROGRAM_START

FLAG_REGISTER = 0xF

# @intent:constant 0〜Fの16進数字フォント。1文字5バイト、各バイトの上位4ビットが1行分のピクセルです。
# FX29 は「Vx × 5」で文字のアドレスを算出するため、この並びとアドレス0からの配置は変更できません。
GLYPH_TABLE = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
])
GLYPH_HEIGHT = 5

# @intent:data_structure 0〜255の乱数を1つ返す呼び出し可能オブジェクト。CXNN が使用します。
RandomByteSource = Callable[[], int]

# @intent:data_structure 表示バッファの読み取り専用ビュー（行優先、index = y * 64 + x）。
DisplayBuffer = Sequence[bool]


# @intent:data_structure 互換性に関わる挙動の切り替えスイッチ。
@dataclass(frozen=True)
class Quirks:
    # True の場合、9XY0 を「Vx == Vy ならスキップ」として実行します（5XY0 と同じ条件）。
    legacy_skip_equal_9xy0: bool = False
