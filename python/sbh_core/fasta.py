"""FASTA input and output for reads and contigs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Union

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_reads(path: PathLike, read_length: int = 30) -> List[str]:
    """Load upper-cased reads, keeping only those exactly ``read_length`` long."""

    reads: List[str] = []
    skipped = 0
    for record in SeqIO.parse(str(path), "fasta"):
        sequence = str(record.seq).upper()
        if len(sequence) != read_length:
            skipped += 1
            continue
        reads.append(sequence)
    if skipped:
        logger.debug("Skipped %d reads that were not %d symbols long", skipped, read_length)
    return reads


def write_contigs(path: PathLike, contigs: Iterable[str]) -> int:
    """Write contigs as ``>sequence1``, ``>sequence2``, ... one line per sequence."""

    records = (
        SeqRecord(Seq(contig), id=f"sequence{i}", description="")
        for i, contig in enumerate(contigs, start=1)
    )
    return SeqIO.write(records, str(path), "fasta-2line")
