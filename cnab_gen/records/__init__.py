"""Record builders: one function per CNAB 240 record kind."""

from cnab_gen.records.base import assemble, detail_prefix
from cnab_gen.records.batch import batch_header, batch_trailer
from cnab_gen.records.boleto import segment_j, segment_j52, segment_j52_pix
from cnab_gen.records.file import file_header, file_trailer
from cnab_gen.records.payroll import segment_p, segment_q, segment_r
from cnab_gen.records.tax import segment_n, segment_o, segment_w
from cnab_gen.records.transfer import (
    segment_a,
    segment_b_address,
    segment_b_pix,
    segment_c,
    segment_d,
)

__all__ = [
    "assemble",
    "batch_header",
    "batch_trailer",
    "detail_prefix",
    "file_header",
    "file_trailer",
    "segment_a",
    "segment_b_address",
    "segment_b_pix",
    "segment_c",
    "segment_d",
    "segment_j",
    "segment_j52",
    "segment_j52_pix",
    "segment_n",
    "segment_o",
    "segment_p",
    "segment_q",
    "segment_r",
    "segment_w",
]
