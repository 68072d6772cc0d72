# src/retro_chip8/common/errors.py
"""
仮想マシンが送出する例外の定義。

全ての例外は MachineError を基底とし、同種の問題に対して標準の組み込み例外
（IndexError / ValueError）も継承します。ホスト側は MachineError を捕捉するだけで
致命的エラーを一括して扱えます。
"""


# @intent:responsibility 仮想マシンの致命的エラーの基底クラスです。
class MachineError(Exception):
    pass


# @intent:responsibility メモリ範囲外へのアクセスを表します。
class MemoryAccessError(MachineError, IndexError):
    def __init__(self, address: int, size: int):
        super().__init__(f"Address {address:#06x} out of bounds for RAM of size {size}.")
        self.address = address


# @intent:responsibility コールスタックの溢れ（CALLの入れ子が深すぎる）を表します。
class StackOverflowError(MachineError, IndexError):
    pass


# @intent:responsibility 空のコールスタックからのRETを表します。
class StackUnderflowError(MachineError, IndexError):
    pass


# @intent:responsibility 0〜15の範囲外のキー番号を表します。
class InvalidKeyError(MachineError, IndexError):
    def __init__(self, index: int):
        super().__init__(f"Key index {index} out of range (0-15).")
        self.index = index


# @intent:responsibility プログラム領域（0x200〜0xFFF）に収まらないプログラムを表します。
class ProgramTooLargeError(MachineError, ValueError):
    pass


# @intent:responsibility 命令セットに存在しないオペコードを表します。
class UnknownOpcodeError(MachineError):
    def __init__(self, opcode: int, address: int):
        super().__init__(f"Unknown opcode {opcode:04X} at {address:#05x}.")
        self.opcode = opcode
        self.address = address
