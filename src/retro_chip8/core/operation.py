# src/retro_chip8/core/operation.py
"""
デコード済み命令の不変データ構造

このモジュールは、CHIP-8の35種類の命令形式（閉じた列挙）と、
オペコードを分解した結果を保持する Operation を定義します。
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


# @intent:responsibility CHIP-8命令セットの全形式を列挙します。値はアセンブラ表記です。
class InstructionKind(Enum):
    NOP = "NOP"
    CLS = "CLS"
    RET = "RET"
    JP = "JP addr"
    CALL = "CALL addr"
    SE_BYTE = "SE Vx, byte"
    SNE_BYTE = "SNE Vx, byte"
    SE_REG = "SE Vx, Vy"
    LD_BYTE = "LD Vx, byte"
    ADD_BYTE = "ADD Vx, byte"
    LD_REG = "LD Vx, Vy"
    OR = "OR Vx, Vy"
    AND = "AND Vx, Vy"
    XOR = "XOR Vx, Vy"
    ADD_REG = "ADD Vx, Vy"
    SUB = "SUB Vx, Vy"
    SHR = "SHR Vx"
    SUBN = "SUBN Vx, Vy"
    SHL = "SHL Vx"
    SNE_REG = "SNE Vx, Vy"
    LD_I = "LD I, addr"
    JP_V0 = "JP V0, addr"
    RND = "RND Vx, byte"
    DRW = "DRW Vx, Vy, nibble"
    SKP = "SKP Vx"
    SKNP = "SKNP Vx"
    LD_VX_DT = "LD Vx, DT"
    LD_VX_K = "LD Vx, K"
    LD_DT_VX = "LD DT, Vx"
    LD_ST_VX = "LD ST, Vx"
    ADD_I_VX = "ADD I, Vx"
    LD_F_VX = "LD F, Vx"
    LD_B_VX = "LD B, Vx"
    LD_MEM_VX = "LD [I], Vx"
    LD_VX_MEM = "LD Vx, [I]"


# @intent:responsibility 1つのオペコードをニブル単位に分解した結果を記録します。
@dataclass(frozen=True)
class Operation:
    """
    デコード済みの命令。kind が None の場合は未定義のオペコードです。
    """
    opcode: int
    kind: Optional[InstructionKind]
    x: int = 0      # 第2ニブル
    y: int = 0      # 第3ニブル
    n: int = 0      # 第4ニブル
    nn: int = 0     # 下位8ビット
    nnn: int = 0    # 下位12ビット

    @property
    def opcode_hex(self) -> str:
        return f"{self.opcode:04X}"

    @property
    def mnemonic(self) -> str:
        return self.kind.value if self.kind else "UNKNOWN"
