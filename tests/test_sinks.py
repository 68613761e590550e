"""Tests for sinks."""

import asyncio
from pathlib import Path

import pytest

from cnab_gen.exceptions import SinkError
from cnab_gen.sinks import ConsoleSink, MemorySink, TextFileSink

CONTENT = "\n".join(["A" * 240, "B" * 240])


class TestTextFileSink:
    """Tests for TextFileSink."""

    def test_init_does_not_create_directory(self, tmp_path: Path) -> None:
        sink = TextFileSink(tmp_path / "out")

        assert sink.encoding == "latin-1"
        assert not (tmp_path / "out").exists()

    def test_write_creates_directory(self, tmp_path: Path) -> None:
        sink = TextFileSink(tmp_path / "nested" / "out")
        path = sink.write("file.rem", CONTENT)

        assert path == tmp_path / "nested" / "out" / "file.rem"
        assert path.read_text(encoding="latin-1") == CONTENT
        assert sink.written == [path]

    def test_latin1_bytes(self, tmp_path: Path) -> None:
        path = TextFileSink(tmp_path).write("file.rem", "AÇÃO")
        assert path.read_bytes() == "AÇÃO".encode("latin-1")

    def test_unencodable_content(self, tmp_path: Path) -> None:
        sink = TextFileSink(tmp_path, encoding="ascii")
        with pytest.raises(SinkError, match="ascii"):
            sink.write("file.rem", "Ç")

    def test_os_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        sink = TextFileSink(blocker / "sub")
        with pytest.raises(SinkError, match="Failed to write"):
            sink.write("file.rem", CONTENT)

    def test_write_async(self, tmp_path: Path) -> None:
        sink = TextFileSink(tmp_path)
        path = asyncio.run(sink.write_async("async.rem", CONTENT))

        assert path.read_text(encoding="latin-1") == CONTENT

    def test_close_prints_summary(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        sink = TextFileSink(tmp_path)
        sink.write("file.rem", CONTENT)
        sink.close()

        captured = capsys.readouterr()
        assert "file.rem" in captured.out


class TestMemorySink:
    """Tests for MemorySink."""

    def test_write_and_read(self) -> None:
        sink = MemorySink()

        assert sink.write("a.rem", CONTENT) == "a.rem"
        assert sink.read("a.rem") == CONTENT

    def test_write_async(self) -> None:
        sink = MemorySink()
        asyncio.run(sink.write_async("a.rem", CONTENT))
        assert sink.files == {"a.rem": CONTENT}


class TestConsoleSink:
    """Tests for ConsoleSink."""

    def test_init_default(self) -> None:
        sink = ConsoleSink()

        assert sink.max_lines is None
        assert sink.ruler is False
        assert sink._counts == {}

    def test_write(self, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink()
        sink.write("file.rem", CONTENT)
        captured = capsys.readouterr()

        assert "file.rem (2 lines)" in captured.out
        assert "A" * 240 in captured.out
        assert sink._counts["file.rem"] == 2

    def test_max_lines(self, capsys: pytest.CaptureFixture) -> None:
        ConsoleSink(max_lines=1).write("file.rem", CONTENT)
        captured = capsys.readouterr()

        assert "B" * 240 not in captured.out
        assert "... and 1 more lines" in captured.out

    def test_ruler(self, capsys: pytest.CaptureFixture) -> None:
        ConsoleSink(ruler=True).write("file.rem", CONTENT)
        assert "1234567890" * 24 in capsys.readouterr().out

    def test_close(self, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink()
        sink.write("file.rem", CONTENT)
        sink.close()

        assert "file.rem: 2 lines" in capsys.readouterr().out
