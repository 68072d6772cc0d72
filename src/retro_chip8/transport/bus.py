# src/retro_chip8/transport/bus.py
"""
Transport Layer (共通バス)

このモジュールは、CHIP-8の4KBメモリ空間と周辺デバイス（表示・キー入力・乱数源）を
一つのバスにまとめ、命令実装からのアクセスを仲介する責務を負います。
"""
import random
from typing import Optional

from retro_chip8.common.errors import MemoryAccessError
from retro_chip8.common.types import MEMORY_SIZE, RandomByteSource
from retro_chip8.transport.display import FrameBuffer
from retro_chip8.transport.keypad import Keypad


# @intent:responsibility 基本的なRAMデバイスの機能を提供します。
class RAM:
    """
    固定サイズのRAMデバイス。範囲外アクセスは MemoryAccessError になります。
    """
    # @intent:pre-condition sizeは正の整数である必要があります。
    def __init__(self, size: int):
        if not isinstance(size, int) or size <= 0:
            raise ValueError("RAM size must be a positive integer.")
        self._memory = bytearray(size)
        self._size = size

    # @intent:responsibility 指定されたアドレスから8bitのデータを読み出します。
    def read(self, address: int) -> int:
        if not 0 <= address < self._size:
            raise MemoryAccessError(address, self._size)
        return self._memory[address]

    # @intent:responsibility 指定されたアドレスに8bitのデータを書き込みます。
    # @intent:pre-condition データは8bit値である必要があります。
    def write(self, address: int, data: int) -> None:
        if not 0 <= address < self._size:
            raise MemoryAccessError(address, self._size)
        if not 0 <= data <= 0xFF:
            raise ValueError(f"Data {data} is not an 8-bit value.")
        self._memory[address] = data

    # @intent:responsibility address から count バイトの範囲がメモリ内に収まることを検査します。
    def check_range(self, address: int, count: int) -> None:
        end = address + count
        if address < 0 or end > self._size:
            raise MemoryAccessError(max(address, end - 1), self._size)

    # @intent:responsibility バイト列をまとめて書き込みます。書き込み前に範囲全体を検査します。
    def load_block(self, address: int, data: bytes) -> None:
        self.check_range(address, len(data))
        self._memory[address:address + len(data)] = data

    def clear(self) -> None:
        self._memory[:] = bytes(self._size)

    def get_size(self) -> int:
        return self._size


def _default_random_byte() -> int:
    return random.getrandbits(8)


# @intent:responsibility メモリと周辺デバイスへのアクセスをまとめる共通バス。
# @intent:rationale 命令実装は (state, bus, operation) のみを受け取るため、
#                  乱数源もバス経由で注入し、テストから決定的な値を与えられるようにします。
class Bus:
    """
    RAM(4KB)、FrameBuffer、Keypad、乱数源を保持するバス。
    """
    def __init__(self, random_byte: Optional[RandomByteSource] = None):
        self.ram = RAM(MEMORY_SIZE)
        self.display = FrameBuffer()
        self.keypad = Keypad()
        self._random_byte = random_byte or _default_random_byte

    def read(self, address: int) -> int:
        return self.ram.read(address)

    def write(self, address: int, data: int) -> None:
        self.ram.write(address, data)

    def load_block(self, address: int, data: bytes) -> None:
        self.ram.load_block(address, data)

    def check_range(self, address: int, count: int) -> None:
        self.ram.check_range(address, count)

    # @intent:responsibility 注入された乱数源から1バイトを取得します。
    def random_byte(self) -> int:
        return self._random_byte() & 0xFF

    # @intent:responsibility メモリ・表示・キー状態を電源投入直後の状態に戻します。
    def reset(self) -> None:
        self.ram.clear()
        self.display.clear()
        self.keypad.release_all()
