import logging as lg

import pytest

import synacor.runtime.cpu as cpu
from synacor.common.ops import Opcode as Op
from synacor.runtime.faults import DivisionByZero, UnknownOpcode

from fixtures import with_storage, with_cpu  # noqa: F401


R0, R1, R2, R3 = 32768, 32769, 32770, 32771


def boot(proc: cpu.CPU, words, start: int = 0) -> int:
    proc.storage.load(words)
    return proc.run(start)


def test_set_output_halt(with_cpu, caplog):  # noqa: F811
    caplog.set_level(lg.INFO)
    executed = boot(with_cpu, [Op.SET, R0, 4, Op.OUTPUT, R0, Op.HALT])

    assert executed == 3
    assert with_cpu.console.output == bytearray([4])
    assert with_cpu.fault is None
    assert not with_cpu.running
    assert cpu.HALT_NOTICE in caplog.text


def test_add(with_cpu):  # noqa: F811
    boot(with_cpu, [Op.ADD, R0, 5, 6, Op.HALT])
    assert with_cpu.storage.get_reg(0) == 11


def test_add_wraps(with_cpu):  # noqa: F811
    boot(with_cpu, [Op.ADD, R0, 32760, 10, Op.HALT])
    assert with_cpu.storage.get_reg(0) == 2


@pytest.mark.parametrize('b, c', [(0, 0), (32767, 32767), (32767, 1), (181, 182), (12345, 6789)])
def test_add_mult_closure(with_cpu, b, c):  # noqa: F811
    boot(with_cpu, [Op.ADD, R0, b, c, Op.MULT, R1, b, c, Op.HALT])

    assert with_cpu.storage.get_reg(0) == (b + c) % 32768
    assert with_cpu.storage.get_reg(1) == (b * c) % 32768
    assert 0 <= with_cpu.storage.get_reg(1) <= 32767


def test_mod(with_cpu):  # noqa: F811
    boot(with_cpu, [Op.MOD, R0, 10, 3, Op.MOD, R1, 32767, 32767, Op.HALT])
    assert with_cpu.storage.get_reg(0) == 1
    assert with_cpu.storage.get_reg(1) == 0


def test_mod_by_zero(with_cpu, caplog):  # noqa: F811
    boot(with_cpu, [Op.SET, R0, 7, Op.MOD, R0, 10, 0, Op.HALT])

    assert isinstance(with_cpu.fault, DivisionByZero)
    assert with_cpu.storage.get_reg(0) == 7
    assert 'division by zero' in caplog.text


def test_bitwise(with_cpu):  # noqa: F811
    boot(with_cpu, [
        Op.AND, R0, 0b1100, 0b1010,
        Op.OR, R1, 0b1100, 0b1010,
        Op.NOT, R2, 0,
        Op.NOT, R3, 0x5555,
        Op.HALT
    ])

    assert with_cpu.storage.get_reg(0) == 0b1000
    assert with_cpu.storage.get_reg(1) == 0b1110
    assert with_cpu.storage.get_reg(2) == 0x7FFF
    assert with_cpu.storage.get_reg(3) == 0x2AAA


@pytest.mark.parametrize('value', [0, 1, 0x2AAA, 0x5555, 12345, 32767])
def test_not_twice(with_cpu, value):  # noqa: F811
    boot(with_cpu, [Op.NOT, R0, value, Op.NOT, R0, R0, Op.HALT])
    assert with_cpu.storage.get_reg(0) == value


def test_not_keeps_15_bits(with_cpu):  # noqa: F811
    # Registers can hold 16-bit values read from memory
    with_cpu.storage.set_mem(100, 0xFFFF)
    boot(with_cpu, [Op.RMEM, R0, 100, Op.NOT, R1, R0, Op.HALT])
    assert with_cpu.storage.get_reg(1) == 0


def test_eq_gt(with_cpu):  # noqa: F811
    boot(with_cpu, [
        Op.EQ, R0, 5, 5,
        Op.EQ, R1, 5, 6,
        Op.GT, R2, 6, 5,
        Op.GT, R3, 5, 5,
        Op.HALT
    ])

    assert list(with_cpu.storage.registers[:4]) == [1, 0, 1, 0]


@pytest.mark.parametrize('value', [0, 1, 32767])
def test_push_pop(with_cpu, value):  # noqa: F811
    boot(with_cpu, [
        Op.PUSH, value,
        Op.POP, R0,
        Op.SET, R1, value,
        Op.PUSH, R1,
        Op.POP, R2,
        Op.HALT
    ])

    assert with_cpu.storage.get_reg(0) == value
    assert with_cpu.storage.get_reg(2) == value
    assert with_cpu.storage.empty()


def test_jmp(with_cpu):  # noqa: F811
    boot(with_cpu, [Op.JMP, 5, Op.OUTPUT, 65, Op.HALT, Op.OUTPUT, 66, Op.HALT])
    assert with_cpu.console.text() == 'B'


def test_jmp_target_is_raw(with_cpu):  # noqa: F811
    with_cpu.storage.load([Op.SET, R0, 10, Op.JMP, R0])
    with_cpu.step()
    with_cpu.step()

    assert with_cpu.pc == R0


def test_jt_jf(with_cpu):  # noqa: F811
    boot(with_cpu, [
        Op.SET, R0, 17,
        Op.JT, 0, R0,           # not taken
        Op.JF, 0, R0,           # taken, target through a register
        Op.OUTPUT, 65,
        Op.JT, 1, 16,           # taken
        Op.OUTPUT, 66,
        Op.HALT,
        Op.OUTPUT, 67,
        Op.JF, 1, 0,            # not taken
        Op.HALT
    ])

    assert with_cpu.console.text() == 'C'


def test_call_ret(with_cpu):  # noqa: F811
    with_cpu.storage.load([Op.CALL, 10, Op.HALT] + [Op.NOOP] * 7 + [Op.RET])

    with_cpu.step()
    assert with_cpu.pc == 10
    assert with_cpu.storage.top() == 2

    with_cpu.step()
    assert with_cpu.pc == 2
    assert with_cpu.storage.empty()


def test_call_through_register(with_cpu):  # noqa: F811
    boot(with_cpu, [Op.SET, R0, 8, Op.CALL, R0, Op.OUTPUT, 33, Op.HALT, Op.OUTPUT, 63, Op.RET])
    assert with_cpu.console.text() == '?!'


def test_rmem_wmem(with_cpu):  # noqa: F811
    boot(with_cpu, [
        Op.SET, R0, 1000,
        Op.WMEM, R0, 4242,
        Op.RMEM, R1, 1000,
        Op.RMEM, R2, 0,
        Op.HALT
    ])

    assert with_cpu.storage.get_mem(1000) == 4242
    assert with_cpu.storage.get_reg(1) == 4242
    assert with_cpu.storage.get_reg(2) == Op.SET


def test_self_modifying_code(with_cpu):  # noqa: F811
    # Overwrites the NOOP at address 3 with HALT
    boot(with_cpu, [Op.WMEM, 3, Op.HALT, Op.NOOP, Op.OUTPUT, 65, Op.HALT])
    assert with_cpu.console.output == bytearray()


def test_output_truncates_to_byte(with_cpu):  # noqa: F811
    boot(with_cpu, [Op.OUTPUT, 0x141, Op.HALT])
    assert with_cpu.console.text() == 'A'


def test_input(with_cpu):  # noqa: F811
    with_cpu.console.input = b'hi'
    boot(with_cpu, [Op.INPUT, R0, Op.INPUT, R1, Op.INPUT, R2, Op.HALT])

    assert with_cpu.storage.get_reg(0) == ord('h')
    assert with_cpu.storage.get_reg(1) == ord('i')
    assert with_cpu.storage.get_reg(2) == 0xFFFF


def test_noop(with_cpu):  # noqa: F811
    assert boot(with_cpu, [Op.NOOP, Op.NOOP, Op.HALT]) == 3
    assert with_cpu.pc == 3


def test_unknown_opcode(with_cpu, caplog):  # noqa: F811
    boot(with_cpu, [Op.NOOP, 22])

    assert isinstance(with_cpu.fault, UnknownOpcode)
    assert with_cpu.fault.address == 1
    assert 'unknown opcode 22' in caplog.text


def test_program_counter_wraps(with_cpu):  # noqa: F811
    with_cpu.storage.set_mem(0xFFFF, Op.NOOP)
    with_cpu.storage.load([Op.JMP, 0xFFFF], address=10)

    assert with_cpu.run(10) == 3
    assert with_cpu.pc == 1
    assert with_cpu.fault is None


def test_run_resets_fault(with_cpu):  # noqa: F811
    boot(with_cpu, [Op.RET])
    assert with_cpu.fault is not None

    with_cpu.storage.load([Op.HALT])
    with_cpu.run(0)
    assert with_cpu.fault is None
