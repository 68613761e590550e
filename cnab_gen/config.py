"""Configuration management for cnab-gen."""

from dataclasses import dataclass, field
from pathlib import Path

from cnab_gen.exceptions import ConfigurationError


@dataclass
class LayoutConfig:
    """Constants written into file and batch headers."""

    file_layout_version: str = "089"
    batch_layout_version: str = "045"
    recording_density: str = "01600"
    default_bank_name: str = "BANCO"
    file_sequence: int = 1

    def __post_init__(self) -> None:
        for name in ("file_layout_version", "batch_layout_version"):
            value = getattr(self, name)
            if not (value.isdigit() and len(value) == 3):
                raise ConfigurationError(f"{name} must be 3 digits, got {value!r}")
        if not (self.recording_density.isdigit() and len(self.recording_density) == 5):
            raise ConfigurationError(
                f"recording_density must be 5 digits, got {self.recording_density!r}"
            )
        if not 0 < self.file_sequence <= 999999:
            raise ConfigurationError(
                f"file_sequence must be between 1 and 999999, got {self.file_sequence}"
            )


@dataclass
class OutputConfig:
    """Output configuration."""

    output_dir: Path = field(default_factory=lambda: Path("output"))
    encoding: str = "latin-1"
    filename_prefix: str = "cnab240"

    def __post_init__(self) -> None:
        import codecs

        self.output_dir = Path(self.output_dir)
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ConfigurationError(f"Unknown output encoding: {self.encoding}") from exc


@dataclass
class CnabGenConfig:
    """Main configuration for cnab-gen."""

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "CnabGenConfig":
        """Create config from environment variables."""
        import os

        sequence = os.getenv("CNAB_FILE_SEQUENCE", "1")
        if not sequence.isdigit():
            raise ConfigurationError(f"CNAB_FILE_SEQUENCE must be numeric, got {sequence!r}")

        layout = LayoutConfig(
            file_layout_version=os.getenv("CNAB_FILE_LAYOUT", "089"),
            batch_layout_version=os.getenv("CNAB_BATCH_LAYOUT", "045"),
            recording_density=os.getenv("CNAB_DENSITY", "01600"),
            default_bank_name=os.getenv("CNAB_BANK_NAME", "BANCO"),
            file_sequence=int(sequence),
        )

        output = OutputConfig(
            output_dir=Path(os.getenv("CNAB_OUTPUT_DIR", "output")),
            encoding=os.getenv("CNAB_ENCODING", "latin-1"),
            filename_prefix=os.getenv("CNAB_FILENAME_PREFIX", "cnab240"),
        )

        return cls(
            layout=layout,
            output=output,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
