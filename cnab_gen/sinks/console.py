"""Console sink for debugging and development."""

from __future__ import annotations


class ConsoleSink:
    """Print remittance files to stdout for debugging."""

    def __init__(self, max_lines: int | None = None, ruler: bool = False) -> None:
        """Initialize console sink.

        Parameters
        ----------
        max_lines : int | None
            Maximum lines to print per file (None for all).
        ruler : bool
            Print a column ruler above the lines to help locate positions.
        """
        self.max_lines = max_lines
        self.ruler = ruler
        self._counts: dict[str, int] = {}

    def write(self, name: str, content: str) -> str:
        """Print a file to console."""
        lines = content.split("\n")
        print(f"\n{'='*60}")
        print(f"File: {name} ({len(lines)} lines)")
        print("=" * 60)

        if self.ruler:
            print("".join(str(i % 10) for i in range(1, 241)))

        display_lines = lines[: self.max_lines] if self.max_lines else lines
        for line in display_lines:
            print(line)

        if self.max_lines and len(lines) > self.max_lines:
            print(f"... and {len(lines) - self.max_lines} more lines")

        self._counts[name] = len(lines)
        return name

    async def write_async(self, name: str, content: str) -> str:
        return self.write(name, content)

    def close(self) -> None:
        """Print summary and close."""
        print(f"\n{'='*60}")
        print("Console Sink Summary")
        print("=" * 60)
        for name, count in self._counts.items():
            print(f"  {name}: {count} lines")
