# tests/core/test_machine.py
"""
retro_chip8.core.machineモジュールの単体テスト。
"""
import pytest

from retro_chip8.core.machine import Chip8Machine
from retro_chip8.common.errors import (
    InvalidKeyError, MachineError, MemoryAccessError, ProgramTooLargeError,
    StackOverflowError, StackUnderflowError, UnknownOpcodeError,
)
from retro_chip8.common.types import (
    GLYPH_TABLE, MAX_PROGRAM_SIZE, MEMORY_SIZE, PROGRAM_START, SCREEN_WIDTH, SCREEN_HEIGHT,
)

# @intent:test_suite マシンのライフサイクル（生成・リセット・ロード）と命令サイクルの駆動を検証します。


def _program(*words: int) -> bytes:
    return b"".join(w.to_bytes(2, "big") for w in words)


def _observable(machine: Chip8Machine):
    """マシンの観測可能な全状態をタプルにまとめます。"""
    state = machine.get_state()
    bus = machine.get_bus()
    return (
        state.pc, state.sp, state.i, list(state.v), list(state.stack),
        state.delay_timer, state.sound_timer,
        bytes(bus.read(a) for a in range(MEMORY_SIZE)),
        list(machine.read_display()),
        [bus.keypad.is_pressed(k) for k in range(16)],
    )


@pytest.fixture
def machine():
    return Chip8Machine()


class TestLifecycle:
    def test_initial_state(self, machine):
        state = machine.get_state()
        bus = machine.get_bus()
        assert state.pc == 0x200
        assert state.sp == 0
        assert state.i == 0
        assert state.v == [0] * 16
        assert state.delay_timer == 0
        assert state.sound_timer == 0
        assert bytes(bus.read(a) for a in range(len(GLYPH_TABLE))) == GLYPH_TABLE
        assert all(bus.read(a) == 0 for a in range(len(GLYPH_TABLE), MEMORY_SIZE))
        assert not any(machine.read_display())

    def test_glyph_table_is_80_bytes(self):
        assert len(GLYPH_TABLE) == 80

    def test_reset_matches_fresh_machine(self, machine):
        machine.load(_program(
            0x60FF,  # V0 = FF
            0xA300,  # I = 300
            0xF033,  # BCD -> 300..302
            0xF015,  # DT = FF
            0xF018,  # ST = FF
            0xD005,  # draw
            0x2210,  # CALL 210
        ))
        for _ in range(7):
            machine.execute_step()
        machine.set_key(3, True)
        assert _observable(machine) != _observable(Chip8Machine())

        machine.reset()
        assert _observable(machine) == _observable(Chip8Machine())

    def test_reset_is_idempotent(self, machine):
        machine.reset()
        machine.reset()
        assert _observable(machine) == _observable(Chip8Machine())

    def test_reset_restores_overwritten_glyphs(self, machine):
        machine.get_bus().write(0x000, 0x00)
        machine.reset()
        assert machine.get_bus().read(0x000) == GLYPH_TABLE[0]

    def test_load_places_program_at_0x200(self, machine):
        machine.load(b"\x12\x34\x56")
        bus = machine.get_bus()
        assert [bus.read(PROGRAM_START + k) for k in range(3)] == [0x12, 0x34, 0x56]
        assert bus.read(PROGRAM_START + 3) == 0

    def test_load_fills_program_area_exactly(self, machine):
        machine.load(bytes([0xAA]) * MAX_PROGRAM_SIZE)
        assert machine.get_bus().read(MEMORY_SIZE - 1) == 0xAA

    def test_load_too_large_is_rejected_before_writing(self, machine):
        with pytest.raises(ProgramTooLargeError):
            machine.load(bytes([0xAA]) * (MAX_PROGRAM_SIZE + 1))
        assert machine.get_bus().read(PROGRAM_START) == 0

    def test_program_too_large_is_value_error(self, machine):
        with pytest.raises(ValueError):
            machine.load(bytes(MAX_PROGRAM_SIZE + 1))


class TestExecuteStep:
    def test_fetch_is_big_endian_and_advances_pc(self, machine):
        machine.load(b"\x6A\x42")
        machine.execute_step()
        assert machine.get_state().v[0xA] == 0x42
        assert machine.get_state().pc == 0x202

    def test_fetch_past_end_of_memory_is_fatal(self, machine):
        machine.get_state().pc = MEMORY_SIZE - 1
        with pytest.raises(MemoryAccessError):
            machine.execute_step()

    def test_fetch_out_of_range_pc_is_machine_error(self, machine):
        machine.get_state().pc = 0x1000
        with pytest.raises(MachineError):
            machine.execute_step()

    @pytest.mark.parametrize("opcode", [0x0123, 0x5121, 0x8008, 0x9001, 0xE000, 0xF000, 0xFFFF])
    def test_unknown_opcode_is_fatal(self, machine, opcode):
        machine.load(_program(opcode))
        with pytest.raises(UnknownOpcodeError) as excinfo:
            machine.execute_step()
        assert excinfo.value.opcode == opcode
        assert excinfo.value.address == 0x200

    def test_nop_only_advances_pc(self, machine):
        machine.load(_program(0x0000))
        before = machine.get_state().v[:]
        machine.execute_step()
        assert machine.get_state().pc == 0x202
        assert machine.get_state().v == before

    @pytest.mark.parametrize("target", [0x204, 0x300, 0x7FE, 0xFFE])
    def test_call_then_return_restores_pc(self, machine, target):
        machine.load(_program(0x2000 | target))
        machine.get_bus().write(target, 0x00)
        machine.get_bus().write(target + 1, 0xEE)
        machine.execute_step()
        assert machine.get_state().pc == target
        assert machine.get_state().sp == 1
        machine.execute_step()
        assert machine.get_state().pc == 0x202
        assert machine.get_state().sp == 0

    def test_call_stack_overflow(self, machine):
        machine.load(_program(0x2200))  # 自分自身を呼び出し続ける
        for _ in range(16):
            machine.execute_step()
        assert machine.get_state().sp == 16
        with pytest.raises(StackOverflowError):
            machine.execute_step()

    def test_return_with_empty_stack(self, machine):
        machine.load(_program(0x00EE))
        with pytest.raises(StackUnderflowError):
            machine.execute_step()

    def test_injected_random_source(self):
        values = iter([0xAB, 0xFF])
        machine = Chip8Machine(random_byte=lambda: next(values))
        machine.load(_program(0xC00F, 0xC1F0))
        machine.execute_step()
        machine.execute_step()
        assert machine.get_state().v[0] == 0x0B
        assert machine.get_state().v[1] == 0xF0


class TestTimers:
    def test_timers_count_down_and_stop_at_zero(self, machine):
        state = machine.get_state()
        state.delay_timer = 2
        state.sound_timer = 1
        machine.tick_timers()
        assert (state.delay_timer, state.sound_timer) == (1, 0)
        machine.tick_timers()
        machine.tick_timers()
        assert (state.delay_timer, state.sound_timer) == (0, 0)

    def test_sound_stop_hook_fires_once(self):
        calls = []
        machine = Chip8Machine(on_sound_stop=lambda: calls.append(True))
        machine.get_state().sound_timer = 3
        for _ in range(5):
            machine.tick_timers()
        assert calls == [True]

    def test_timers_are_independent_of_steps(self, machine):
        machine.load(_program(0x6005, 0xF015, 0x1204))
        for _ in range(10):
            machine.execute_step()
        assert machine.get_state().delay_timer == 5


class TestHostInterface:
    def test_set_key_rejects_out_of_range(self, machine):
        with pytest.raises(InvalidKeyError):
            machine.set_key(16, True)
        with pytest.raises(InvalidKeyError):
            machine.set_key(-1, True)

    def test_set_key_updates_keypad(self, machine):
        machine.set_key(0xF, True)
        assert machine.get_bus().keypad.is_pressed(0xF)
        machine.set_key(0xF, False)
        assert not machine.get_bus().keypad.is_pressed(0xF)

    def test_read_display_is_live_view(self, machine):
        view = machine.read_display()
        assert len(view) == SCREEN_WIDTH * SCREEN_HEIGHT
        machine.load(_program(0xD001))  # I = 0 (グリフ'0'の1行目 0xF0)
        machine.execute_step()
        assert view[0] is True
        assert view[3] is True
        assert view[4] is False
