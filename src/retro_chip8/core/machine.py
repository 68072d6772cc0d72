# src/retro_chip8/core/machine.py
"""
Core Layer (CHIP-8 仮想マシン)

このモジュールは、マシン状態の生成・リセット・プログラムのロードと、
命令サイクル（フェッチ→デコード→実行）の駆動を提供します。
具体的な命令の振る舞いは Instruction Layer に委譲されます。
"""
import logging
from typing import Callable, Optional

from retro_chip8.common.errors import ProgramTooLargeError
from retro_chip8.common.types import (
    DisplayBuffer, GLYPH_TABLE, MAX_PROGRAM_SIZE, PROGRAM_START, Quirks, RandomByteSource,
)
from retro_chip8.core.operation import Operation
from retro_chip8.core.state import Chip8State
from retro_chip8.instructions import decode_opcode, execute_instruction
from retro_chip8.instructions.base import INSTRUCTION_LENGTH, read_word
from retro_chip8.transport.bus import Bus

logger = logging.getLogger(__name__)


# @intent:responsibility CHIP-8マシン全体（状態とバス）を所有し、ホストに公開する唯一の窓口です。
class Chip8Machine:
    """
    CHIP-8 仮想マシン。

    ホストは 1フレームごとに execute_step() を一定回数呼び、続けて tick_timers() を1回呼んだ後、
    read_display() で表示バッファを読み出します。
    """
    # @intent:responsibility バス、初期状態、フォントを準備します。
    # @intent:pre-condition random_byte は0〜255を返す引数なしの呼び出し可能オブジェクトであること。
    def __init__(self,
                 random_byte: Optional[RandomByteSource] = None,
                 quirks: Optional[Quirks] = None,
                 on_sound_stop: Optional[Callable[[], None]] = None):
        self._bus = Bus(random_byte)
        self._quirks = quirks or Quirks()
        self._on_sound_stop = on_sound_stop
        self._state: Chip8State = self._create_initial_state()
        self._install_glyphs()

    def _create_initial_state(self) -> Chip8State:
        return Chip8State()

    def _install_glyphs(self) -> None:
        self._bus.load_block(0x000, GLYPH_TABLE)

    # @intent:responsibility マシンを生成直後と同一の状態に戻します。
    # @intent:rationale 状態を作り直してからフォントを再配置することで、初期化処理を一元化します。
    def reset(self) -> None:
        self._bus.reset()
        self._state = self._create_initial_state()
        self._install_glyphs()
        logger.debug("Machine reset")

    # @intent:responsibility プログラムのバイト列を 0x200 から配置します。
    # @intent:pre-condition len(program) <= 3584。超える場合はメモリに触れる前に ProgramTooLargeError。
    def load(self, program: bytes) -> None:
        if len(program) > MAX_PROGRAM_SIZE:
            raise ProgramTooLargeError(
                f"Program of {len(program)} bytes exceeds the {MAX_PROGRAM_SIZE} bytes available at {PROGRAM_START:#05x}."
            )
        self._bus.load_block(PROGRAM_START, bytes(program))
        logger.debug("Loaded %d bytes at %#05x", len(program), PROGRAM_START)

    def get_state(self) -> Chip8State:
        return self._state

    def get_bus(self) -> Bus:
        return self._bus

    @property
    def quirks(self) -> Quirks:
        return self._quirks

    # @intent:responsibility PCから2バイトをビッグエンディアンで読み、PCを進めます。
    # @intent:post-condition メモリ範囲外のPCは MemoryAccessError になります。
    def _fetch(self) -> int:
        opcode = read_word(self._bus, self._state.pc)
        self._state.pc = (self._state.pc + INSTRUCTION_LENGTH) & 0xFFFF
        return opcode

    def _decode(self, opcode: int) -> Operation:
        return decode_opcode(opcode, self._quirks)

    def _execute(self, operation: Operation) -> None:
        execute_instruction(operation, self._state, self._bus)

    # @intent:responsibility 1命令サイクル（フェッチ→デコード→実行）を実行します。
    # @intent:flow キー待ち命令も他の命令と同様に毎回正常に戻ります（PCの巻き戻しで再実行されます）。
    def execute_step(self) -> None:
        opcode = self._fetch()
        operation = self._decode(opcode)
        if operation.kind is None:
            logger.error("Unknown opcode %s at %#05x", operation.opcode_hex, self._state.pc - INSTRUCTION_LENGTH)
        self._execute(operation)

    # @intent:responsibility 遅延タイマーとサウンドタイマーを1ずつ減らします（0未満にはなりません）。
    def tick_timers(self) -> None:
        state = self._state
        if state.delay_timer > 0:
            state.delay_timer -= 1

        if state.sound_timer > 0:
            if state.sound_timer == 1 and self._on_sound_stop is not None:
                # 音声出力は外部の責務。ここでは停止のタイミングを通知するだけです。
                self._on_sound_stop()
            state.sound_timer -= 1

    def set_key(self, index: int, pressed: bool) -> None:
        self._bus.keypad.set_key(index, pressed)

    # @intent:responsibility 表示バッファ（2048セル、index = y * 64 + x）の読み取り専用ビューを返します。
    def read_display(self) -> DisplayBuffer:
        return self._bus.display.view()
