# src/retro_chip8/transport/keypad.py
"""
Transport Layer (16キー入力)
"""
from typing import Optional

from retro_chip8.common.errors import InvalidKeyError
from retro_chip8.common.types import NUM_KEYS


# @intent:responsibility 0〜Fの16キーの押下状態を保持します。
class Keypad:
    def __init__(self):
        self._keys = [False] * NUM_KEYS

    @staticmethod
    def _check_index(index: int) -> None:
        if not 0 <= index < NUM_KEYS:
            raise InvalidKeyError(index)

    # @intent:responsibility ホストからのキー押下/解放イベントを反映します。
    # @intent:pre-condition indexは0〜15であること。範囲外はInvalidKeyError。
    def set_key(self, index: int, pressed: bool) -> None:
        self._check_index(index)
        self._keys[index] = bool(pressed)

    def is_pressed(self, index: int) -> bool:
        self._check_index(index)
        return self._keys[index]

    # @intent:responsibility 押下中のキーのうち最も小さい番号を返します（なければNone）。
    def first_pressed(self) -> Optional[int]:
        for index, pressed in enumerate(self._keys):
            if pressed:
                return index
        return None

    def release_all(self) -> None:
        self._keys[:] = [False] * NUM_KEYS
