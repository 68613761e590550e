"""Text file sink for writing remittance files to disk."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from cnab_gen.exceptions import SinkError

logger = logging.getLogger(__name__)


class TextFileSink:
    """Write remittance files into a directory."""

    def __init__(self, output_dir: str | Path, encoding: str = "latin-1") -> None:
        """Initialize text file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write files into; created on first write.
        encoding : str
            Text encoding of the written files.
        """
        self.output_dir = Path(output_dir)
        self.encoding = encoding
        self._written: list[Path] = []

    @property
    def written(self) -> list[Path]:
        return list(self._written)

    def write(self, name: str, content: str) -> Path:
        """Write ``content`` to ``output_dir / name`` and return the path."""
        file_path = self.output_dir / name
        try:
            data = content.encode(self.encoding)
        except UnicodeEncodeError as exc:
            raise SinkError(f"Content cannot be encoded as {self.encoding}: {exc}") from exc

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            file_path.write_bytes(data)
        except OSError as exc:
            raise SinkError(f"Failed to write {file_path}: {exc}") from exc

        self._written.append(file_path)
        logger.info("Wrote %s (%d bytes)", file_path, len(data), extra={"path": str(file_path)})
        return file_path

    async def write_async(self, name: str, content: str) -> Path:
        """Same as :meth:`write`, run in a worker thread."""
        return await asyncio.to_thread(self.write, name, content)

    def close(self) -> None:
        """Print summary."""
        print(f"Remittance files written to: {self.output_dir}")
        for path in self._written:
            print(f"  {path.name}")
