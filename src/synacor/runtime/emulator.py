import sys
from pathlib import Path
import logging as lg
from typing import Sequence

import click

from synacor.runtime.storage import Storage
from synacor.runtime.console import Console, StdConsole
from synacor.runtime.loader import LoadError, load_file, unpack_image
import synacor.runtime.cpu as cpu


EXIT_HALT = 0
EXIT_LOAD_ERROR = 2
EXIT_KEYBOARD = 3
EXIT_EXEC_ERROR = 100


def execute(image: bytes | Sequence[int], console: Console, start: int = 0) -> cpu.CPU:
    ''' Loads an image (raw bytes or words) into a fresh machine and runs it '''
    if isinstance(image, (bytes, bytearray)):
        image = unpack_image(bytes(image))

    storage = Storage()
    storage.load(image)

    proc = cpu.CPU(storage, console)
    proc.run(start)
    return proc


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-s', '--start', type=click.IntRange(0, 0xFFFF), default=0, help='Start address')
@click.option('-i', '--input', 'input_file', type=click.File('rb'),
              help='Feed INPUT from a file instead of stdin')
@click.argument('image_filename', type=Path)
def run(verbose: bool, start: int, input_file, image_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('SYNACOR VM')

    try:
        words = load_file(image_filename)

    except LoadError as e:
        lg.error(str(e))
        sys.exit(EXIT_LOAD_ERROR)

    console = StdConsole(in_stream=input_file)

    try:
        proc = execute(words, console, start)

    except KeyboardInterrupt:
        return sys.exit(EXIT_KEYBOARD)

    if proc.fault is not None:
        lg.info(f'Execution halted on error: {proc.fault}')
        sys.exit(EXIT_EXEC_ERROR)

    lg.info('Execution halted gracefully')
    sys.exit(EXIT_HALT)


if __name__ == '__main__':
    run()
