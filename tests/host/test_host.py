# tests/host/test_host.py
"""
フレーム実行器、キー対応表、表示拡大の検証。
"""
from unittest.mock import MagicMock

import pytest

from retro_chip8.core.machine import Chip8Machine
from retro_chip8.common.errors import UnknownOpcodeError
from retro_chip8.host.keymap import KEY_MAP, build_key_map, is_key_name, key_name_for_code, key_to_index
from retro_chip8.host.runner import FrameRunner
from retro_chip8.host.scaling import COLOR_ON, COLOR_OFF, scale_display


class TestFrameRunner:
    def test_steps_then_one_timer_tick(self):
        machine = MagicMock(spec=Chip8Machine)
        runner = FrameRunner(machine, ticks_per_frame=10)
        runner.run_frame()
        names = [c[0] for c in machine.method_calls]
        assert names == ["execute_step"] * 10 + ["tick_timers", "read_display"]
        assert runner.frame_count == 1

    def test_run_frame_returns_display(self):
        machine = Chip8Machine()
        machine.load(b"\x12\x00")  # 自分自身へのジャンプ
        runner = FrameRunner(machine)
        assert runner.run_frame() is machine.read_display()

    def test_key_wait_consumes_every_step(self):
        machine = Chip8Machine()
        machine.load(b"\xF0\x0A")
        machine.get_state().delay_timer = 3
        runner = FrameRunner(machine, ticks_per_frame=10)
        runner.run_frame()
        runner.run_frame()
        assert machine.get_state().pc == 0x200
        assert machine.get_state().delay_timer == 1

    def test_machine_errors_propagate(self):
        machine = Chip8Machine()
        machine.load(b"\xFF\xFF")
        with pytest.raises(UnknownOpcodeError):
            FrameRunner(machine).run_frame()

    def test_invalid_ticks(self):
        with pytest.raises(ValueError):
            FrameRunner(Chip8Machine(), ticks_per_frame=0)


class TestKeyMap:
    def test_layout(self):
        assert len(KEY_MAP) == 16
        assert sorted(KEY_MAP.values()) == list(range(16))
        assert KEY_MAP["X"] == 0x0
        assert KEY_MAP["4"] == 0xC
        assert KEY_MAP["V"] == 0xF

    def test_key_to_index(self):
        assert key_to_index("q") == 0x4
        assert key_to_index("P") is None

    def test_key_name_for_code(self):
        assert key_name_for_code(0x51) == "Q"  # Qt.Key_Q
        assert key_name_for_code(0x31) == "1"
        assert key_name_for_code(0x20) is None  # Space
        assert key_name_for_code(0x01000013) is None  # Up

    def test_is_key_name(self):
        assert is_key_name("m")
        assert is_key_name(";")
        assert not is_key_name("SPACE")
        assert not is_key_name(" ")
        assert not is_key_name("")

    def test_build_key_map_overrides(self):
        key_map = build_key_map({"p": 0x1})
        assert key_map["P"] == 0x1
        assert key_to_index("p", key_map) == 0x1
        assert KEY_MAP.get("P") is None


class TestScaleDisplay:
    def test_scale_one_is_identity(self):
        buffer = [False] * 2048
        buffer[5] = True
        pixels = scale_display(buffer, 1)
        assert len(pixels) == 2048
        assert pixels[5] == COLOR_ON
        assert pixels[4] == COLOR_OFF

    def test_cell_becomes_block(self):
        buffer = [False] * 2048
        buffer[1 * 64 + 2] = True  # (2, 1)
        pixels = scale_display(buffer, 3)
        width = 64 * 3
        assert len(pixels) == width * 32 * 3
        lit = {(k % width, k // width) for k, p in enumerate(pixels) if p == COLOR_ON}
        assert lit == {(x, y) for x in range(6, 9) for y in range(3, 6)}

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            scale_display([False] * 2048, 0)
        with pytest.raises(ValueError):
            scale_display([False] * 10, 2)
