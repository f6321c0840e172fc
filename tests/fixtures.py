# type: ignore
import pytest

from synacor.runtime.storage import Storage
from synacor.runtime.console import BufferConsole
import synacor.runtime.cpu as cpu


@pytest.fixture
def with_storage():
    yield Storage()


@pytest.fixture
def with_cpu(with_storage):
    yield cpu.CPU(with_storage, BufferConsole())
