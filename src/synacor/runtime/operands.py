''' Operand typing: literal values vs. register references '''

from enum import Enum

from synacor.common.hwconf import MOD, REGISTER_BASE, REGISTER_LIMIT
from synacor.runtime.storage import Storage
from synacor.runtime.faults import MalformedOperand, InvalidWriteTarget


class OperandType(Enum):
    LITERAL = 'literal'
    REGISTER = 'register'
    INVALID = 'invalid'


def classify(code: int) -> OperandType:
    if 0 <= code < MOD:
        return OperandType.LITERAL

    if REGISTER_BASE <= code < REGISTER_LIMIT:
        return OperandType.REGISTER

    return OperandType.INVALID


def register_index(code: int) -> int:
    assert classify(code) == OperandType.REGISTER, f'{code} is not a register'
    return code - REGISTER_BASE


def register_code(index: int) -> int:
    return REGISTER_BASE + index


class Resolver:
    ''' Typed access to the storage an operand code denotes '''
    storage: Storage

    def __init__(self, storage: Storage):
        self.storage = storage

    def read(self, code: int) -> int:
        ty = classify(code)

        if ty == OperandType.LITERAL:
            return code

        if ty == OperandType.REGISTER:
            return self.storage.get_reg(register_index(code))

        raise MalformedOperand(code)

    def write(self, dest: int, value: int):
        if classify(dest) != OperandType.REGISTER:
            raise InvalidWriteTarget(dest, value)

        self.storage.set_reg(register_index(dest), value)
