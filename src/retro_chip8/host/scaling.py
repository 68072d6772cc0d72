# src/retro_chip8/host/scaling.py
"""
表示バッファの拡大。
"""
from typing import List, Sequence

from retro_chip8.common.types import SCREEN_WIDTH, SCREEN_HEIGHT

COLOR_ON = 0xFFFFFF
COLOR_OFF = 0x000000


# @intent:responsibility 1セルを scale × scale ピクセルに拡大した 0xRRGGBB のピクセル配列を生成します。
# @intent:pre-condition len(buffer) == width * height、scale >= 1。
def scale_display(buffer: Sequence[bool], scale: int,
                  width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                  on_color: int = COLOR_ON, off_color: int = COLOR_OFF) -> List[int]:
    if scale < 1:
        raise ValueError("scale must be >= 1")
    if len(buffer) != width * height:
        raise ValueError(f"Display buffer has {len(buffer)} cells, expected {width * height}.")

    out_width = width * scale
    pixels = [off_color] * (out_width * height * scale)
    for y in range(height):
        # 1行分を作ってから scale 行ぶん複製する
        row = []
        for x in range(width):
            row.extend([on_color if buffer[y * width + x] else off_color] * scale)
        for dy in range(scale):
            start = (y * scale + dy) * out_width
            pixels[start:start + out_width] = row
    return pixels
