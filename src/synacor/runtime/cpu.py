import logging as lg
from typing import Callable

from synacor.common.ops import Opcode
from synacor.common.hwconf import MOD, LITERAL_MASK, WORD_MASK
from synacor.runtime.storage import Storage
from synacor.runtime.console import Console
from synacor.runtime.operands import Resolver
from synacor.runtime.faults import MachineFault, UnknownOpcode, DivisionByZero


HALT_NOTICE = 'computer is halted.'


class CPU():
    pc: int                         # Program counter
    running: bool
    fault: MachineFault | None      # Set when the last run ended on an error

    def __init__(self, storage: Storage, console: Console):
        self.storage = storage      # Ref. to memory, registers and stack
        self.console = console      # Ref. to character I/O
        self.resolver = Resolver(storage)

        self.pc = 0
        self.running = False
        self.fault = None

    # - Helpers - #

    def next(self) -> int:
        ''' Raw code at the program counter, advancing past it '''
        word = self.storage.get_mem(self.pc)
        self.pc = (self.pc + 1) & WORD_MASK
        return word

    def next_value(self) -> int:
        return self.resolver.read(self.next())

    def compare(self, op: Callable[[int, int], bool]):
        a = self.next()
        b = self.next_value()
        c = self.next_value()
        self.resolver.write(a, 1 if op(b, c) else 0)

    def arithm_pair(self, op: Callable[[int, int], int]):
        a = self.next()
        b = self.next_value()
        c = self.next_value()
        self.resolver.write(a, op(b, c))

    # - Operations - #

    def halt(self):
        lg.info(HALT_NOTICE)
        self.running = False

    def set(self):
        a = self.next()
        self.resolver.write(a, self.next_value())

    def push(self):
        self.storage.push(self.next_value())

    def pop(self):
        # The stack is left intact unless the destination accepts the value
        value = self.storage.top()
        self.resolver.write(self.next(), value)
        self.storage.pop()

    def eq(self):
        self.compare(lambda b, c: b == c)

    def gt(self):
        self.compare(lambda b, c: b > c)

    def jmp(self):
        # Target is taken raw, registers are not dereferenced
        self.pc = self.next()

    def jt(self):
        cond = self.next_value()
        addr = self.next_value()

        if cond != 0:
            self.pc = addr

    def jf(self):
        cond = self.next_value()
        addr = self.next_value()

        if cond == 0:
            self.pc = addr

    def call(self):
        addr = self.next_value()
        self.storage.push(self.pc)
        self.pc = addr

    def ret(self):
        self.pc = self.storage.pop()

    def rmem(self):
        a = self.next()
        addr = self.next_value()
        self.resolver.write(a, self.storage.get_mem(addr))

    def wmem(self):
        addr = self.next_value()
        value = self.next_value()
        self.storage.set_mem(addr, value)

    def output(self):
        self.console.write_char(self.next_value())

    def input(self):
        a = self.next()
        self.resolver.write(a, self.console.read_char())

    def noop(self):
        pass

    # - Arithmetic - #

    def add(self):
        self.arithm_pair(lambda b, c: (b + c) % MOD)

    def mult(self):
        self.arithm_pair(lambda b, c: (b * c) % MOD)

    def mod(self):
        def remainder(b: int, c: int) -> int:
            if c == 0:
                raise DivisionByZero(b)

            return b % c

        self.arithm_pair(remainder)

    def band(self):
        self.arithm_pair(lambda b, c: b & c)

    def bor(self):
        self.arithm_pair(lambda b, c: b | c)

    def inv(self):
        a = self.next()
        b = self.next_value()
        self.resolver.write(a, ~b & LITERAL_MASK)

    HANDLERS = {
        Opcode.HALT: halt,
        Opcode.SET: set,
        Opcode.PUSH: push,
        Opcode.POP: pop,
        Opcode.EQ: eq,
        Opcode.GT: gt,
        Opcode.JMP: jmp,
        Opcode.JT: jt,
        Opcode.JF: jf,
        Opcode.ADD: add,
        Opcode.MULT: mult,
        Opcode.MOD: mod,
        Opcode.AND: band,
        Opcode.OR: bor,
        Opcode.NOT: inv,
        Opcode.RMEM: rmem,
        Opcode.WMEM: wmem,
        Opcode.CALL: call,
        Opcode.RET: ret,
        Opcode.OUTPUT: output,
        Opcode.INPUT: input,
        Opcode.NOOP: noop
    }

    # -- Implementation -- #

    def exec_next(self):
        address = self.pc
        op = self.next()

        try:
            opcode = Opcode(op)
        except ValueError:
            raise UnknownOpcode(op, address) from None

        handler = self.HANDLERS[opcode]
        handler(self)

    def step(self):
        ''' Executes one instruction, a fault stops the machine '''
        try:
            self.exec_next()

        except MachineFault as e:
            lg.error(f'error: {e}')
            self.fault = e
            self.running = False

    def run(self, start: int = 0) -> int:
        '''
        Fetch-execute loop from `start` until the machine halts.
        Returns the number of instructions executed.
        '''
        self.pc = start & WORD_MASK
        self.fault = None
        self.running = True
        executed = 0

        lg.debug(f'Execution starts @ 0x{self.pc:04X}')

        try:
            while self.running:
                self.step()
                executed += 1

        except KeyboardInterrupt:
            self.running = False
            lg.info('Execution interrupted by the user')
            raise

        finally:
            self.console.close()

        return executed
