''' Fail-stop conditions raised while executing a program '''


class MachineFault(Exception):
    ''' Fatal to the current run '''
    pass


class MalformedOperand(MachineFault):
    def __init__(self, code: int):
        super().__init__(f'malformed operand {code}')
        self.code = code


class InvalidWriteTarget(MachineFault):
    def __init__(self, dest: int, value: int):
        super().__init__(f'can only write to register, dest: {dest} value: {value}')
        self.dest = dest
        self.value = value


class StackUnderflow(MachineFault):
    def __init__(self):
        super().__init__('empty stack')


class UnknownOpcode(MachineFault):
    def __init__(self, op: int, address: int):
        super().__init__(f'unknown opcode {op} at {address}')
        self.op = op
        self.address = address


class DivisionByZero(MachineFault):
    def __init__(self, dividend: int):
        super().__init__(f'division by zero, dividend: {dividend}')
        self.dividend = dividend
