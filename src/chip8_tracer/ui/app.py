# src/chip8_tracer/ui/app.py
"""
アプリケーションのエントリポイント。
引数と設定ファイルからインタプリタを組み立て、メインウィンドウを起動します。
"""
import argparse
import logging
import sys
from typing import List, Optional

from chip8_tracer.common.errors import EmulationError
from chip8_tracer.config.builder import SystemBuilder
from chip8_tracer.config.loader import ConfigLoader
from chip8_tracer.config.models import EmulatorConfig

logger = logging.getLogger(__name__)

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chip8-tracer", description="CHIP-8 interpreter with trace view")
    parser.add_argument("rom", nargs="?", help="path to a CHIP-8 ROM file")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--debug", action="store_true", help="enable the debug trace")
    parser.add_argument("--log-level", default="INFO", help="logging level (default: INFO)")
    return parser

# @intent:responsibility コマンドライン引数を設定ファイルの値に上書き適用します。
def resolve_config(args: argparse.Namespace) -> EmulatorConfig:
    config = ConfigLoader().load_from_file(args.config) if args.config else EmulatorConfig()
    if args.rom:
        config.rom_path = args.rom
    if args.debug:
        config.debug_enabled = True
    return config

# @intent:responsibility アプリケーションを起動し、メインウィンドウを表示します。
def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = resolve_config(args)
        cpu = SystemBuilder().build_system(config)
    except (OSError, ValueError, EmulationError) as e:
        logger.error("Failed to start: %s", e)
        return 1

    from PySide6.QtWidgets import QApplication
    from .main_window import MainWindow

    app = QApplication(sys.argv[:1])
    main_win = MainWindow(cpu, config)
    main_win.show()
    if config.rom_path:
        main_win.start()
    return app.exec()

if __name__ == '__main__':
    sys.exit(main())
