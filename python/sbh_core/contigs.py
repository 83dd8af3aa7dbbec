"""Turn extracted walks into raw contigs."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .kmer import KMER_LENGTH, decode


def path_to_contig(path: Sequence[int], k: int = KMER_LENGTH) -> str:
    # every node contributes its whole k-mer; overlaps are collapsed by condensation
    return "".join(decode(key, k) for key in path)


def build_contigs(
    paths: Iterable[Sequence[int]],
    cycles: Iterable[Sequence[int]],
    k: int = KMER_LENGTH,
) -> List[str]:
    contigs = [path_to_contig(path, k) for path in paths]
    contigs.extend(path_to_contig(cycle, k) for cycle in cycles)
    return contigs
