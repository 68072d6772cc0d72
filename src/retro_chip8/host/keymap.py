# src/retro_chip8/host/keymap.py
"""
キーボードのキー名から CHIP-8 のキー番号(0〜F)への対応表。

    キーボード          CHIP-8
    1 2 3 4            1 2 3 C
    Q W E R     ->     4 5 6 D
    A S D F            7 8 9 E
    Z X C V            A 0 B F
"""
from typing import Dict, Mapping, Optional

# 対応表のキー名になれるのは、空白を除く印字可能なASCII文字1字です。
_FIRST_KEY_CODE = 0x21
_LAST_KEY_CODE = 0x7E

KEY_MAP: Dict[str, int] = {
    "1": 0x1, "2": 0x2, "3": 0x3, "4": 0xC,
    "Q": 0x4, "W": 0x5, "E": 0x6, "R": 0xD,
    "A": 0x7, "S": 0x8, "D": 0x9, "F": 0xE,
    "Z": 0xA, "X": 0x0, "C": 0xB, "V": 0xF,
}


# @intent:responsibility 既定の対応表に設定ファイルの上書きを重ねた対応表を作ります。
def build_key_map(overrides: Optional[Mapping[str, int]] = None) -> Dict[str, int]:
    key_map = dict(KEY_MAP)
    if overrides:
        key_map.update({name.upper(): index for name, index in overrides.items()})
    return key_map


# @intent:responsibility Qtのキーコードをキー名に変換します。印字可能なASCII以外はNone。
# @intent:rationale Qtの英数字・記号キーのコードはASCIIの大文字コードと一致します。
def key_name_for_code(code: int) -> Optional[str]:
    if not _FIRST_KEY_CODE <= code <= _LAST_KEY_CODE:
        return None
    return chr(code).upper()


def is_key_name(name: str) -> bool:
    return len(name) == 1 and key_name_for_code(ord(name)) is not None


def key_to_index(name: str, key_map: Optional[Mapping[str, int]] = None) -> Optional[int]:
    return (key_map or KEY_MAP).get(name.upper())
