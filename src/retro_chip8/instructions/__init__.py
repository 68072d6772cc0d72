"""
CHIP-8命令セット実装パッケージ。
"""
from typing import Optional

from retro_chip8.common.errors import UnknownOpcodeError
from retro_chip8.common.types import Quirks
from retro_chip8.core.operation import InstructionKind, Operation
from retro_chip8.core.state import Chip8State
from retro_chip8.transport.bus import Bus
from .maps import DECODE_MAP, EXECUTE_MAP

_DEFAULT_QUIRKS = Quirks()


# @intent:responsibility 16ビットのオペコードをCHIP-8の命令としてデコードします。
def decode_opcode(opcode: int, quirks: Optional[Quirks] = None) -> Operation:
    """
    オペコードを4つのニブルに分解し、命令形式を判別してOperationを返します。
    どの形式にも一致しない場合は kind=None（"UNKNOWN"）を返します。
    """
    quirks = quirks or _DEFAULT_QUIRKS
    kind = None
    for mask, pattern, candidate in DECODE_MAP.get((opcode >> 12) & 0xF, []):
        if opcode & mask == pattern:
            kind = candidate
            break

    if kind is InstructionKind.SNE_REG and quirks.legacy_skip_equal_9xy0:
        kind = InstructionKind.SE_REG

    return Operation(
        opcode=opcode,
        kind=kind,
        x=(opcode >> 8) & 0xF,
        y=(opcode >> 4) & 0xF,
        n=opcode & 0xF,
        nn=opcode & 0xFF,
        nnn=opcode & 0xFFF,
    )


# @intent:responsibility デコードされたCHIP-8命令を実行し、状態を変更します。
# @intent:pre-condition state.pc は既に次の命令を指していること。
def execute_instruction(operation: Operation, state: Chip8State, bus: Bus) -> None:
    executor = EXECUTE_MAP.get(operation.kind)
    if executor is None:
        raise UnknownOpcodeError(operation.opcode, (state.pc - 2) & 0xFFFF)
    executor(state, bus, operation)
