"""File orchestration: header, batches, trailer and hand-off to a sink."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from cnab_gen.config import CnabGenConfig
from cnab_gen.exceptions import CnabGenError, MissingFieldError
from cnab_gen.models.batch import Batch, BatchResult, EncodingResult, GenerationReport, Record
from cnab_gen.models.company import Company
from cnab_gen.processors import processor_for
from cnab_gen.records.file import file_header, file_trailer
from cnab_gen.sinks import Sink, TextFileSink

logger = logging.getLogger(__name__)

FILE_EXTENSION = ".rem"


class FileOrchestrator:
    """Assemble complete CNAB 240 files.

    Parameters
    ----------
    config : CnabGenConfig | None
        Layout and output settings; defaults when omitted.
    clock : Callable[[], datetime] | None
        Source of the generation timestamp written in the file header and
        used for default file names. Inject a fixed clock for
        reproducible output.
    """

    def __init__(
        self,
        config: CnabGenConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.config = config or CnabGenConfig()
        self.clock = clock or datetime.now

    def encode(self, company: Company, batches: Sequence[Batch]) -> EncodingResult:
        """Encode a file in memory.

        Batches are numbered 1..N in the given order. Any error raised
        while a batch is encoded carries that batch's number.

        Raises
        ------
        MissingFieldError
            If the company or the batch list is missing or empty.
        UnsupportedVariantError
            If a batch's service type or payments cannot be encoded.
        """
        if company is None:
            raise MissingFieldError("Company is required")
        if not batches:
            raise MissingFieldError("At least one batch is required")

        layout = self.config.layout
        generated_at = self.clock()
        records: list[Record] = [file_header(company, generated_at, layout)]
        results: list[BatchResult] = []

        for number, batch in enumerate(batches, start=1):
            try:
                processor = processor_for(batch.family, layout)
                result = processor.process(company, batch, number)
            except CnabGenError as exc:
                raise exc.with_batch(number)
            logger.debug(
                "Batch %d (%s): %d records",
                number,
                result.family.value,
                result.record_count,
                extra={
                    "batch_number": number,
                    "family": result.family.value,
                    "record_count": result.record_count,
                },
            )
            records.extend(result.records)
            results.append(result)

        records.append(file_trailer(company.bank_code, len(results), len(records) + 1))
        encoded = EncodingResult(records, results, generated_at)
        logger.info(
            "Encoded file: %d batches, %d records, total %s",
            encoded.batch_count,
            encoded.record_count,
            encoded.total_amount,
            extra={"record_count": encoded.record_count},
        )
        return encoded

    def default_filename(self, batches: Sequence[Batch], generated_at: datetime) -> str:
        """``<prefix>_<family>_<YYYYMMDDHHMMSS>.rem``; ``mixed`` for several families."""
        families = {batch.family for batch in batches}
        label = families.pop().value.lower() if len(families) == 1 else "mixed"
        stamp = generated_at.strftime("%Y%m%d%H%M%S")
        return f"{self.config.output.filename_prefix}_{label}_{stamp}{FILE_EXTENSION}"

    def _report(
        self, result: EncodingResult, location, sink: Sink
    ) -> GenerationReport:
        encoding = getattr(sink, "encoding", self.config.output.encoding)
        return GenerationReport(result, location, result.byte_size(encoding))

    def generate(
        self,
        company: Company,
        batches: Sequence[Batch],
        sink: Sink,
        filename: str | None = None,
    ) -> GenerationReport:
        """Encode a file and write it with a single ``sink.write`` call.

        Nothing reaches the sink when encoding fails.
        """
        result = self.encode(company, batches)
        name = filename or self.default_filename(batches, result.generated_at)
        location = sink.write(name, result.content)
        return self._report(result, location, sink)

    async def generate_async(
        self,
        company: Company,
        batches: Sequence[Batch],
        sink: Sink,
        filename: str | None = None,
    ) -> GenerationReport:
        """Async variant of :meth:`generate`; awaits ``sink.write_async``."""
        result = self.encode(company, batches)
        name = filename or self.default_filename(batches, result.generated_at)
        location = await sink.write_async(name, result.content)
        return self._report(result, location, sink)


def generate_file(
    company: Company,
    batches: Sequence[Batch],
    sink: Sink | None = None,
    filename: str | None = None,
    config: CnabGenConfig | None = None,
    clock: Callable[[], datetime] | None = None,
) -> GenerationReport:
    """Encode and write a remittance file in one call.

    Without a sink the file goes to a :class:`TextFileSink` on the
    configured output directory and encoding.
    """
    config = config or CnabGenConfig()
    if sink is None:
        sink = TextFileSink(config.output.output_dir, config.output.encoding)
    return FileOrchestrator(config, clock).generate(company, batches, sink, filename)
