from enum import IntEnum


class Opcode(IntEnum):
    HALT = 0x00     # stop
    SET = 0x01      # b -> a
    PUSH = 0x02     # b -> stack
    POP = 0x03      # stack -> a
    EQ = 0x04       # b == c -> a
    GT = 0x05       # b > c -> a
    JMP = 0x06      # goto x (raw)
    JT = 0x07       # if b != 0 goto x
    JF = 0x08       # if b == 0 goto x
    ADD = 0x09      # b + c -> a
    MULT = 0x0A     # b * c -> a
    MOD = 0x0B      # b % c -> a
    AND = 0x0C      # b & c -> a
    OR = 0x0D       # b | c -> a
    NOT = 0x0E      # ~b -> a
    RMEM = 0x0F     # M[x] -> a
    WMEM = 0x10     # b -> M[x]
    CALL = 0x11     # push pc; goto x
    RET = 0x12      # goto pop
    OUTPUT = 0x13   # b -> console
    INPUT = 0x14    # console -> a
    NOOP = 0x15


# Number of operand words following each opcode
OPERANDS = {
    Opcode.HALT: 0,
    Opcode.SET: 2,
    Opcode.PUSH: 1,
    Opcode.POP: 1,
    Opcode.EQ: 3,
    Opcode.GT: 3,
    Opcode.JMP: 1,
    Opcode.JT: 2,
    Opcode.JF: 2,
    Opcode.ADD: 3,
    Opcode.MULT: 3,
    Opcode.MOD: 3,
    Opcode.AND: 3,
    Opcode.OR: 3,
    Opcode.NOT: 2,
    Opcode.RMEM: 2,
    Opcode.WMEM: 2,
    Opcode.CALL: 1,
    Opcode.RET: 0,
    Opcode.OUTPUT: 1,
    Opcode.INPUT: 1,
    Opcode.NOOP: 0
}

# Assembler mnemonics
MNEMONICS = {
    'halt': Opcode.HALT,
    'set': Opcode.SET,
    'push': Opcode.PUSH,
    'pop': Opcode.POP,
    'eq': Opcode.EQ,
    'gt': Opcode.GT,
    'jmp': Opcode.JMP,
    'jt': Opcode.JT,
    'jf': Opcode.JF,
    'add': Opcode.ADD,
    'mult': Opcode.MULT,
    'mod': Opcode.MOD,
    'and': Opcode.AND,
    'or': Opcode.OR,
    'not': Opcode.NOT,
    'rmem': Opcode.RMEM,
    'wmem': Opcode.WMEM,
    'call': Opcode.CALL,
    'ret': Opcode.RET,
    'out': Opcode.OUTPUT,
    'in': Opcode.INPUT,
    'noop': Opcode.NOOP
}
