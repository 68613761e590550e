"""Output sinks for remittance files.

A sink is any object with ``write(name, content)`` and an awaitable
``write_async(name, content)``; both return where the file ended up.
"""

from typing import Protocol

from cnab_gen.sinks.console import ConsoleSink
from cnab_gen.sinks.memory import MemorySink
from cnab_gen.sinks.text_file import TextFileSink


class Sink(Protocol):
    def write(self, name: str, content: str): ...

    async def write_async(self, name: str, content: str): ...


__all__ = ["ConsoleSink", "MemorySink", "Sink", "TextFileSink"]
