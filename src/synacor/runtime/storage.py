from array import array
import itertools
import logging as lg
from typing import List, Sequence

from synacor.common.hwconf import MEMORY_SIZE, REGISTERS, WORD_MASK
from synacor.runtime.faults import StackUnderflow


class Storage:
    memory: array   # 16-bit cells, instructions and data
    registers: array
    stack: List[int]

    def __init__(self):
        self.memory = array('H', itertools.repeat(0, MEMORY_SIZE))
        self.registers = array('H', itertools.repeat(0, REGISTERS))
        self.stack = []

    def load(self, words: Sequence[int], address: int = 0):
        end = address + len(words)

        if address < 0 or end > MEMORY_SIZE:
            raise ValueError(f'Image of {len(words)} words does not fit at {address}')

        self.memory[address:end] = array('H', words)
        lg.debug(f'Loaded {len(words)} words @ 0x{address:04X}')

    # - Memory - #

    def get_mem(self, address: int) -> int:
        return self.memory[address & WORD_MASK]

    def set_mem(self, address: int, value: int):
        self.memory[address & WORD_MASK] = value & WORD_MASK

    # - Registers - #

    def get_reg(self, index: int) -> int:
        return self.registers[index]

    def set_reg(self, index: int, value: int):
        self.registers[index] = value & WORD_MASK

    # - Stack - #

    def push(self, value: int):
        self.stack.append(value & WORD_MASK)

    def top(self) -> int:
        if not self.stack:
            raise StackUnderflow()

        return self.stack[-1]

    def pop(self) -> int:
        if not self.stack:
            raise StackUnderflow()

        return self.stack.pop()

    def empty(self) -> bool:
        return len(self.stack) == 0
