''' Program image loading '''

import struct
import logging as lg
from pathlib import Path
from typing import List

from synacor.common.hwconf import MEMORY_SIZE, WORD_SIZE


class LoadError(Exception):
    pass


def unpack_image(data: bytes) -> List[int]:
    count = len(data) // WORD_SIZE

    if count > MEMORY_SIZE:
        raise LoadError(f'Image of {count} words exceeds memory of {MEMORY_SIZE} words')

    if len(data) % WORD_SIZE:
        lg.warning(f'Ignoring trailing odd byte of a {len(data)}-byte image')

    return list(struct.unpack(f'<{count}H', data[:count * WORD_SIZE]))


def load_file(path: str | Path) -> List[int]:
    if isinstance(path, str):
        path = Path(path)

    try:
        data = path.read_bytes()
    except OSError as e:
        raise LoadError(f'cannot open file {path}: {e.strerror}') from e

    lg.info(f'Loaded {path} ({len(data)} bytes)')
    return unpack_image(data)
