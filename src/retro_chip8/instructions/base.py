# src/retro_chip8/instructions/base.py
"""
CHIP-8命令実装用の共通ユーティリティ。
"""
from retro_chip8.transport.bus import Bus
from retro_chip8.core.state import Chip8State

# @intent:constant 1命令のバイト長。スキップ命令もこの単位でPCを進めます。
INSTRUCTION_LENGTH = 2


# @intent:utility_function バスから16ビットワードをビッグエンディアン形式で読み込みます。
def read_word(bus: Bus, addr: int) -> int:
    """Big-endian 16-bit read."""
    return (bus.read(addr) << 8) | bus.read(addr + 1)


# @intent:utility_function 次の命令を読み飛ばします。
def skip_next(state: Chip8State) -> None:
    state.pc = (state.pc + INSTRUCTION_LENGTH) & 0xFFFF
