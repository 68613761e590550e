"""In-memory sink, used by tests and when embedding the encoder."""

from __future__ import annotations


class MemorySink:
    """Keep written files in a dict keyed by file name."""

    def __init__(self) -> None:
        self.files: dict[str, str] = {}

    def write(self, name: str, content: str) -> str:
        self.files[name] = content
        return name

    async def write_async(self, name: str, content: str) -> str:
        return self.write(name, content)

    def read(self, name: str) -> str:
        return self.files[name]

    def close(self) -> None:
        pass
