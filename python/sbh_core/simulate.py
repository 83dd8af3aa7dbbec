"""Synthetic genomes and hybridization spectra for exercising the assembler."""

from __future__ import annotations

import random
from typing import List, Optional

from .kmer import SYMBOLS


def generate_genome_sequence(n: int, seed: Optional[int] = None) -> str:
    """Random sequence of ``n`` symbols over ``A``, ``C``, ``G`` and ``T``."""

    rng = random.Random(seed)
    return "".join(rng.choice(SYMBOLS) for _ in range(n))


def sbh_spectrum(
    sequence: str,
    read_length: int = 30,
    *,
    shuffle: bool = True,
    seed: Optional[int] = None,
) -> List[str]:
    """Every ``read_length`` window of ``sequence``, as a hybridization chip reports it.

    Repeated windows are reported once per occurrence. The order carries no
    information on a real chip so it is shuffled unless ``shuffle`` is false.
    """

    reads = [sequence[i : i + read_length] for i in range(len(sequence) - read_length + 1)]
    if shuffle:
        random.Random(seed).shuffle(reads)
    return reads
