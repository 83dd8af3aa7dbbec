"""Contig condensation: drop contained contigs and merge overlapping ones.

Both reductions are written as a parallel "detect" map over a fixed view of
the contig list followed by a sequential "apply" step. Pass ``max_workers``
above 1 to run the detect step on a thread pool; the sequential path is
deterministic and gives the same result.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

DEFAULT_MIN_OVERLAP = 15


def _pool(max_workers: int):
    if max_workers > 1:
        return ThreadPoolExecutor(max_workers=max_workers)
    return nullcontext()


def _map(executor: Optional[Executor], fn: Callable[[T], R], items: Iterable[T]) -> List[R]:
    if executor is None:
        return [fn(item) for item in items]
    return list(executor.map(fn, items))


def contains(contig: str, sub: str) -> bool:
    """Exact substring test."""

    if len(contig) < len(sub):
        return False
    return sub in contig


def remove_contained(
    contigs: Sequence[str],
    *,
    max_workers: int = 1,
) -> Tuple[List[str], int]:
    """Drop every contig that is a substring of another one.

    Contigs are sorted longest first. For each pair ``i < j`` the shorter
    ``j`` is marked when ``i`` contains it, otherwise ``i`` is marked when
    ``j`` contains it (only possible for equal copies, so the last copy
    survives). Marks only ever go from false to true, which is what lets the
    outer loop run on several threads without locking.

    Returns the surviving contigs, longest first, and the number removed.
    """

    ordered = sorted(contigs, key=len, reverse=True)
    marked = np.zeros(len(ordered), dtype=bool)

    def mark_from(i: int) -> None:
        if marked[i]:
            return
        outer = ordered[i]
        for j in range(i + 1, len(ordered)):
            if marked[j]:
                continue
            inner = ordered[j]
            if len(outer) > len(inner) and contains(outer, inner):
                marked[j] = True
            elif contains(inner, outer):
                marked[i] = True
                break

    with _pool(max_workers) as executor:
        _map(executor, mark_from, range(len(ordered)))

    survivors = [contig for contig, drop in zip(ordered, marked) if not drop]
    removed = int(marked.sum())
    logger.debug("Removed %d contained contigs, %d remain", removed, len(survivors))
    return survivors, removed


def merge_if_overlap(c1: str, c2: str, min_overlap: int) -> Optional[Tuple[int, str]]:
    """Join ``c1`` and ``c2`` on the shortest overlap of at least ``min_overlap``.

    At each overlap length the end of ``c2`` against the start of ``c1`` is
    tried before the end of ``c1`` against the start of ``c2``. Returns the
    overlap length and the joined contig, or ``None``.
    """

    # shorter overlaps can never qualify, so the scan starts at the threshold
    for overlap in range(max(min_overlap, 1), min(len(c1), len(c2)) + 1):
        if c1.startswith(c2[-overlap:]):
            return overlap, c2[:-overlap] + c1
        if c2.startswith(c1[-overlap:]):
            return overlap, c1[:-overlap] + c2
    return None


def merge(
    contigs: Sequence[str],
    min_overlap: int = DEFAULT_MIN_OVERLAP,
    *,
    max_workers: int = 1,
) -> Tuple[List[str], int]:
    """Repeatedly join overlapping contigs until no pair overlaps.

    With the list sorted longest first, contig ``i`` is tested against every
    later ``j``. The lowest ``j`` that overlaps is merged: both are removed,
    the joined contig is appended and the scan restarts at ``i = 0``. Each
    merge counts as 2, one per consumed contig.
    """

    working = sorted(contigs, key=len, reverse=True)
    merged = 0
    i = 0
    with _pool(max_workers) as executor:
        while i < len(working):
            current = working[i]
            candidates = range(i + 1, len(working))
            # detect on a frozen view, then apply on this thread only
            overlaps = _map(
                executor,
                lambda j: merge_if_overlap(current, working[j], min_overlap),
                candidates,
            )
            hit = next(
                ((j, found) for j, found in zip(candidates, overlaps) if found is not None),
                None,
            )
            if hit is None:
                i += 1
                continue
            j, (overlap, joined) = hit
            logger.debug("Merged contigs %d and %d on %d symbols", i, j, overlap)
            del working[j]
            del working[i]
            working.append(joined)
            merged += 2
            i = 0
    return working, merged


@dataclass
class CondenseResult:
    contigs: List[str]
    rounds: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def removed(self) -> int:
        return sum(removed for removed, _ in self.rounds)

    @property
    def merged(self) -> int:
        return sum(merged for _, merged in self.rounds)


def condense(
    contigs: Sequence[str],
    min_overlap: int = DEFAULT_MIN_OVERLAP,
    *,
    max_workers: int = 1,
    max_rounds: Optional[int] = None,
) -> CondenseResult:
    """Alternate :func:`remove_contained` and :func:`merge` until the count stops shrinking.

    Only the contig count decides convergence; ``rounds`` records the
    ``(removed, merged)`` pair of every round.
    """

    result = CondenseResult(list(contigs))
    previous = None
    while max_rounds is None or len(result.rounds) < max_rounds:
        result.contigs, removed = remove_contained(result.contigs, max_workers=max_workers)
        result.contigs, merged = merge(result.contigs, min_overlap, max_workers=max_workers)
        result.rounds.append((removed, merged))
        logger.info(
            "Round %d: removed %d contained, merged %d, %d contigs left",
            len(result.rounds),
            removed,
            merged,
            len(result.contigs),
        )
        if previous == len(result.contigs):
            break
        previous = len(result.contigs)
    return result
