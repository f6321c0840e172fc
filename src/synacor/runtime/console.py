import sys
import logging as lg
from typing import BinaryIO

from synacor.common.hwconf import CHAR_MASK, EOF_VALUE


class Console:
    ''' Character device behind OUTPUT and INPUT '''

    def write_char(self, char: int):
        raise NotImplementedError()

    def read_char(self) -> int:
        raise NotImplementedError()

    def close(self):
        pass


class StdConsole(Console):
    ''' Blocking byte I/O over binary streams, the process' own by default '''
    in_stream: BinaryIO
    out_stream: BinaryIO

    def __init__(self, in_stream: BinaryIO | None = None, out_stream: BinaryIO | None = None):
        self.in_stream = in_stream if in_stream is not None else sys.stdin.buffer
        self.out_stream = out_stream if out_stream is not None else sys.stdout.buffer

    def write_char(self, char: int):
        byte = char & CHAR_MASK
        self.out_stream.write(bytes((byte,)))

        if byte == ord('\n'):
            self.out_stream.flush()

    def read_char(self) -> int:
        # Prompts without a newline must be visible before blocking
        self.out_stream.flush()
        buf = self.in_stream.read(1)

        if not buf:
            lg.warning('Console input exhausted')
            return EOF_VALUE

        return buf[0]

    def close(self):
        self.out_stream.flush()


class BufferConsole(Console):
    ''' In-memory console with scripted input '''
    input: bytes
    output: bytearray

    def __init__(self, feed: bytes | str = b''):
        if isinstance(feed, str):
            feed = feed.encode('latin-1')

        self.input = feed
        self.position = 0
        self.output = bytearray()

    def write_char(self, char: int):
        self.output.append(char & CHAR_MASK)

    def read_char(self) -> int:
        if self.position >= len(self.input):
            lg.warning('Console input exhausted')
            return EOF_VALUE

        char = self.input[self.position]
        self.position += 1
        return char

    def text(self) -> str:
        return self.output.decode('latin-1')
