"""Sequencing-by-hybridization assembler: reads in, condensed contigs out."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .condense import CondenseResult, condense, merge, remove_contained
from .contigs import build_contigs
from .kmer import Read
from .multigraph import Multigraph
from .traversal import PathType, Walk, populate

logger = logging.getLogger(__name__)


@dataclass
class AssemblyConfig:
    kmer_length: int = 15
    read_length: int = 30
    min_overlap: int = 15
    min_path_length: int = 5
    min_cycle_length: int = 3
    max_workers: int = 1

    def __post_init__(self) -> None:
        for name, value in vars(self).items():
            if value < 1:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.read_length != 2 * self.kmer_length:
            raise ValueError(
                f"read_length ({self.read_length}) must be twice "
                f"kmer_length ({self.kmer_length})"
            )


class Assembler:
    """Holds the multigraph and every intermediate collection of one run.

    The steps can be driven one by one (as the command line does, to report
    on each) or all at once through :meth:`run`.
    """

    def __init__(self, reads: Iterable[Read], config: Optional[AssemblyConfig] = None) -> None:
        self.config = config or AssemblyConfig()
        self.graph = Multigraph.from_reads(reads, k=self.config.kmer_length)
        self.paths: List[Walk] = []
        self.cycles: List[Walk] = []
        self.contigs: List[str] = []
        self.condensed: Optional[CondenseResult] = None

    def populate(self, path_type: PathType) -> List[Walk]:
        if path_type is PathType.PATH:
            found = populate(self.graph, path_type, self.config.min_path_length)
            self.paths.extend(found)
        else:
            found = populate(self.graph, path_type, self.config.min_cycle_length)
            self.cycles.extend(found)
        return found

    def build_contigs(self) -> List[str]:
        self.contigs.extend(build_contigs(self.paths, self.cycles, self.config.kmer_length))
        logger.info("Built %d raw contigs", len(self.contigs))
        return self.contigs

    def remove_contained(self) -> int:
        self.contigs, removed = remove_contained(
            self.contigs, max_workers=self.config.max_workers
        )
        return removed

    def merge(self, min_overlap: Optional[int] = None) -> int:
        if min_overlap is None:
            min_overlap = self.config.min_overlap
        self.contigs, merged = merge(
            self.contigs, min_overlap, max_workers=self.config.max_workers
        )
        return merged

    def condense(self) -> CondenseResult:
        self.condensed = condense(
            self.contigs, self.config.min_overlap, max_workers=self.config.max_workers
        )
        self.contigs = self.condensed.contigs
        return self.condensed

    def run(self) -> List[str]:
        self.populate(PathType.PATH)
        self.populate(PathType.CYCLE)
        self.build_contigs()
        self.condense()
        return self.contigs
