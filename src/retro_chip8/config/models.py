from dataclasses import dataclass, field
from typing import Dict, Optional

from retro_chip8.common.types import Quirks

DEFAULT_TICKS_PER_FRAME = 10
DEFAULT_FPS = 60
DEFAULT_SCALE = 10


@dataclass
class Chip8Config:
    ticks_per_frame: int = DEFAULT_TICKS_PER_FRAME  # 1フレームあたりの実行ステップ数
    fps: int = DEFAULT_FPS
    scale: int = DEFAULT_SCALE
    seed: Optional[int] = None  # 指定時は乱数源を固定シードで生成
    quirks: Quirks = field(default_factory=Quirks)
    keymap: Dict[str, int] = field(default_factory=dict)  # キー名 -> キー番号 の上書き
