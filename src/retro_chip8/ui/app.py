# src/retro_chip8/ui/app.py
"""
アプリケーションのエントリポイント。
設定とROMを読み込んでマシンを構築し、メインウィンドウを起動します。
"""
import argparse
import logging
import sys
from typing import List, Optional

import yaml

from PySide6.QtWidgets import QApplication

from retro_chip8.config.builder import MachineBuilder
from retro_chip8.config.loader import ConfigLoader
from retro_chip8.config.models import Chip8Config
from retro_chip8.loader.loader import RomLoader
from .main_window import MainWindow

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="retro-chip8", description="CHIP-8 virtual machine")
    parser.add_argument("rom", help="Path to a raw CHIP-8 program")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--scale", type=int, help="Display scale factor")
    parser.add_argument("--ticks", type=int, help="Instructions executed per frame")
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging")
    return parser.parse_args(argv)


# @intent:responsibility コマンドライン引数で設定ファイルの値を上書きします。
def resolve_config(args: argparse.Namespace) -> Chip8Config:
    config = ConfigLoader().load_from_file(args.config) if args.config else Chip8Config()
    if args.scale is not None:
        if args.scale <= 0:
            raise ValueError("--scale must be a positive integer")
        config.scale = args.scale
    if args.ticks is not None:
        if args.ticks <= 0:
            raise ValueError("--ticks must be a positive integer")
        config.ticks_per_frame = args.ticks
    return config


# @intent:responsibility アプリケーションを起動し、メインウィンドウを表示します。
def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    builder = MachineBuilder()
    try:
        config = resolve_config(args)
        machine, runner = builder.build(config)
        RomLoader().load_into(args.rom, machine)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error("Failed to start: %s", e)
        sys.exit(1)

    app = QApplication(sys.argv[:1])
    main_win = MainWindow(runner, key_map=builder.build_key_map(config), fps=config.fps, scale=config.scale)
    main_win.show()
    main_win.start()
    logger.info("Emulation starting")
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
