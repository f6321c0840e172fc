import logging as lg
from pathlib import Path
import struct
from typing import List

import click
import pyparsing as pp

import synacor.sasm.grammar as grammar
from synacor.sasm.fpp import FPP, AsmError


def resolve(first_pass: FPP) -> List[int]:
    words = []

    for word in first_pass.words:
        if isinstance(word, str):
            if word not in first_pass.label_dict:
                raise AsmError(f'Unknown label {word}')

            word = first_pass.label_dict[word]

        words.append(word)

    return words


def assemble(source: str) -> List[int]:
    first_pass = FPP()

    try:
        actions = grammar.program.parse_string(source)
    except pp.ParseBaseException as e:
        raise AsmError(f'Syntax error at line {e.lineno}, col {e.col}: {e.line.strip()}') from e

    for (func, arg) in actions:
        func(first_pass, arg)

    return resolve(first_pass)


def compile_source(source: str) -> bytes:
    words = assemble(source)
    return struct.pack(f'<{len(words)}H', *words)


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.argument('source', type=Path)
@click.argument('binary', type=Path)
def compile(verbose: bool, source: Path, binary: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('SYNACOR ASM')

    bytestr = compile_source(source.read_text())
    binary.parent.mkdir(parents=True, exist_ok=True)
    binary.write_bytes(bytestr)
    lg.info(f'Wrote {len(bytestr) // 2} words to {binary}')


if __name__ == '__main__':
    compile()
