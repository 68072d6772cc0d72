# tests/instructions/test_instructions_control.py
"""
制御命令（ジャンプ、サブルーチン、条件スキップ、キー待ち）の検証。
"""
import pytest

from retro_chip8.core.machine import Chip8Machine
from retro_chip8.common.errors import InvalidKeyError
from retro_chip8.common.types import Quirks


def _program(*words: int) -> bytes:
    return b"".join(w.to_bytes(2, "big") for w in words)


def _step(machine: Chip8Machine, opcode: int) -> int:
    """0x200 に1命令を置いて実行し、実行後のPCを返します。"""
    machine.get_state().pc = 0x200
    machine.load(_program(opcode))
    machine.execute_step()
    return machine.get_state().pc


@pytest.fixture
def machine():
    return Chip8Machine()


class TestJumps:
    def test_jp(self, machine):
        assert _step(machine, 0x1ABC) == 0xABC

    def test_jp_v0(self, machine):
        machine.get_state().v[0] = 0x10
        assert _step(machine, 0xB300) == 0x310

    def test_call_pushes_return_address(self, machine):
        assert _step(machine, 0x2400) == 0x400
        state = machine.get_state()
        assert state.sp == 1
        assert state.stack[0] == 0x202


class TestSkips:
    @pytest.mark.parametrize("value, expected_pc", [(0x12, 0x204), (0x13, 0x202)])
    def test_se_byte(self, machine, value, expected_pc):
        machine.get_state().v[0] = value
        assert _step(machine, 0x3012) == expected_pc

    @pytest.mark.parametrize("value, expected_pc", [(0x12, 0x202), (0x13, 0x204)])
    def test_sne_byte(self, machine, value, expected_pc):
        machine.get_state().v[0] = value
        assert _step(machine, 0x4012) == expected_pc

    @pytest.mark.parametrize("vy, expected_pc", [(0x42, 0x204), (0x43, 0x202)])
    def test_se_reg(self, machine, vy, expected_pc):
        machine.get_state().v[0] = 0x42
        machine.get_state().v[1] = vy
        assert _step(machine, 0x5010) == expected_pc

    @pytest.mark.parametrize("vy, expected_pc", [(0x42, 0x202), (0x43, 0x204)])
    def test_sne_reg_skips_when_not_equal(self, machine, vy, expected_pc):
        machine.get_state().v[0] = 0x42
        machine.get_state().v[1] = vy
        assert _step(machine, 0x9010) == expected_pc

    @pytest.mark.parametrize("vy, expected_pc", [(0x42, 0x204), (0x43, 0x202)])
    def test_9xy0_legacy_quirk_skips_when_equal(self, vy, expected_pc):
        machine = Chip8Machine(quirks=Quirks(legacy_skip_equal_9xy0=True))
        machine.get_state().v[0] = 0x42
        machine.get_state().v[1] = vy
        assert _step(machine, 0x9010) == expected_pc

    def test_skp(self, machine):
        machine.get_state().v[2] = 0xA
        assert _step(machine, 0xE29E) == 0x202
        machine.set_key(0xA, True)
        assert _step(machine, 0xE29E) == 0x204

    def test_sknp(self, machine):
        machine.get_state().v[2] = 0xA
        assert _step(machine, 0xE2A1) == 0x204
        machine.set_key(0xA, True)
        assert _step(machine, 0xE2A1) == 0x202

    def test_key_skip_with_out_of_range_register(self, machine):
        machine.get_state().v[2] = 0x20
        with pytest.raises(InvalidKeyError):
            _step(machine, 0xE29E)


class TestKeyWait:
    def test_no_key_keeps_pc(self, machine):
        machine.load(_program(0xF30A))
        for _ in range(5):
            machine.execute_step()
            assert machine.get_state().pc == 0x200
        assert machine.get_state().v[3] == 0

    def test_lowest_pressed_key_is_taken(self, machine):
        machine.load(_program(0xF30A))
        machine.execute_step()
        machine.set_key(9, True)
        machine.set_key(5, True)
        machine.execute_step()
        assert machine.get_state().pc == 0x202
        assert machine.get_state().v[3] == 5

    def test_key_zero_is_detected(self, machine):
        machine.set_key(0, True)
        machine.get_state().v[3] = 0xFF
        assert _step(machine, 0xF30A) == 0x202
        assert machine.get_state().v[3] == 0
