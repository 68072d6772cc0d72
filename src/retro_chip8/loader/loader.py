# src/retro_chip8/loader/loader.py
"""
ROMローダーモジュール。
CHIP-8のプログラムはヘッダを持たない生のバイナリで、0x200から配置されます。
"""
import logging

from retro_chip8.common.types import MAX_PROGRAM_SIZE
from retro_chip8.core.machine import Chip8Machine

logger = logging.getLogger(__name__)


class RomLoader:
    """
    生バイナリ形式のROMファイルを読み込み、マシンにロードするローダー。
    """
    def load_file(self, file_path: str) -> bytes:
        with open(file_path, 'rb') as f:
            data = f.read()

        if not data:
            raise ValueError(f"ROM file is empty: {file_path}")
        if len(data) > MAX_PROGRAM_SIZE:
            raise ValueError(
                f"ROM file {file_path} is {len(data)} bytes; at most {MAX_PROGRAM_SIZE} bytes fit in memory."
            )

        logger.info("Loaded ROM %s (%d bytes)", file_path, len(data))
        return data

    def load_into(self, file_path: str, machine: Chip8Machine) -> int:
        data = self.load_file(file_path)
        machine.load(data)
        return len(data)
