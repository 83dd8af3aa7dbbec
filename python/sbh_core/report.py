"""Assembly statistics, reference scoring and the metrics CSV."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import numpy as np
from fastDamerauLevenshtein import damerauLevenshtein as damerau_levenshtein_distance

from .assembler import Assembler

STAGES = ("graph", "paths", "cycles", "contigs", "condense", "total")


def n50(lengths: Sequence[int]) -> int:
    """Length ``L`` such that contigs of at least ``L`` hold half of all symbols."""

    if len(lengths) == 0:
        return 0
    ordered = np.sort(np.asarray(lengths, dtype=np.int64))[::-1]
    covered = np.cumsum(ordered)
    return int(ordered[np.searchsorted(covered, covered[-1] / 2)])


def reference_edit_distance(contig: str, reference: str) -> int:
    return int(damerau_levenshtein_distance(contig, reference, similarity=False))


@dataclass
class AssemblyReport:
    reads: int = 0
    nodes: int = 0
    edges: int = 0
    components: int = 0
    paths: int = 0
    cycles: int = 0
    longest_path: int = 0
    longest_cycle: int = 0
    raw_contigs: int = 0
    contigs: int = 0
    longest_contig: int = 0
    total_length: int = 0
    n50: int = 0
    rounds: int = 0
    edit_distance: Optional[int] = None
    timings: Dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_assembler(
        cls,
        assembler: Assembler,
        *,
        reads: int,
        raw_contigs: int,
        timings: Optional[Dict[str, float]] = None,
    ) -> "AssemblyReport":
        summary = assembler.graph.summary()
        lengths = [len(contig) for contig in assembler.contigs]
        return cls(
            reads=reads,
            nodes=summary["nodes"],
            edges=summary["edges"],
            components=summary["components"],
            paths=len(assembler.paths),
            cycles=len(assembler.cycles),
            longest_path=max((len(p) for p in assembler.paths), default=0),
            longest_cycle=max((len(c) for c in assembler.cycles), default=0),
            raw_contigs=raw_contigs,
            contigs=len(lengths),
            longest_contig=max(lengths, default=0),
            total_length=sum(lengths),
            n50=n50(lengths),
            rounds=len(assembler.condensed.rounds) if assembler.condensed else 0,
            timings=dict(timings or {}),
        )

    def header(self) -> List[str]:
        names = [name for name in self.__dataclass_fields__ if name != "timings"]
        return names + [f"{stage}_time" for stage in STAGES]

    def row(self) -> List[str]:
        values = [
            "" if getattr(self, name) is None else str(getattr(self, name))
            for name in self.__dataclass_fields__
            if name != "timings"
        ]
        values.extend(
            f"{self.timings[stage]:.6f}" if stage in self.timings else "" for stage in STAGES
        )
        return values


def ensure_header(csv_path: Path, header: Sequence[str]) -> None:
    if not csv_path.exists() or csv_path.stat().st_size == 0:
        csv_path.parent.mkdir(parents=True, exist_ok=True)
        with csv_path.open("w", encoding="utf-8") as handle:
            handle.write(",".join(header) + "\n")


def append_metrics(csv_path: Path, report: AssemblyReport) -> None:
    csv_path = Path(csv_path)
    ensure_header(csv_path, report.header())
    with csv_path.open("a", encoding="utf-8") as handle:
        handle.write(",".join(report.row()) + "\n")
