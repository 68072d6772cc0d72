import random
from typing import Dict, Tuple

from retro_chip8.core.machine import Chip8Machine
from retro_chip8.host.keymap import build_key_map
from retro_chip8.host.runner import FrameRunner
from .models import Chip8Config


# @intent:responsibility システム構成（Config）に基づいて、マシンとフレーム実行器を生成・接続します。
class MachineBuilder:
    def build(self, config: Chip8Config) -> Tuple[Chip8Machine, FrameRunner]:
        random_byte = None
        if config.seed is not None:
            # 乱数列を再現可能にするため、マシン専用の生成器を用意する
            rng = random.Random(config.seed)
            random_byte = lambda: rng.getrandbits(8)

        machine = Chip8Machine(random_byte=random_byte, quirks=config.quirks)
        runner = FrameRunner(machine, ticks_per_frame=config.ticks_per_frame)
        return machine, runner

    def build_key_map(self, config: Chip8Config) -> Dict[str, int]:
        return build_key_map(config.keymap)
