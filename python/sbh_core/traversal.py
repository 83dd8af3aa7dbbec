"""Greedy path and cycle extraction over the read multigraph."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Optional

from .multigraph import Multigraph

logger = logging.getLogger(__name__)

Walk = List[int]


class PathType(Enum):
    PATH = "path"
    CYCLE = "cycle"


MIN_LENGTH: Dict[PathType, int] = {PathType.PATH: 5, PathType.CYCLE: 3}


def start_nodes(graph: Multigraph, path_type: PathType) -> List[int]:
    """Keys of every node a walk of ``path_type`` may start from, ascending.

    Paths start at net sources (``out_degree > in_degree``); cycles start at
    any node with both degrees positive.
    """

    if path_type is PathType.PATH:
        keys = [n.idx for n in graph.nodes.values() if n.out_degree > n.in_degree]
    else:
        keys = [n.idx for n in graph.nodes.values() if n.out_degree > 0 and n.in_degree > 0]
    return sorted(keys)


def walk(graph: Multigraph, start: int, path_type: PathType) -> Walk:
    """Consume unused edges from ``start`` until stuck or, for cycles, back at ``start``.

    Every step uses one edge for good, so the walk is bounded by the edge count.
    """

    nodes = [start]
    current = start
    while True:
        edge = graph.next_edge(current)
        if edge is None:
            break
        graph.consume(edge)
        nodes.append(edge.destination)
        # closure is decided on the key, the degrees have moved since the start
        if path_type is PathType.CYCLE and edge.destination == start:
            break
        current = edge.destination
    return nodes


def populate(
    graph: Multigraph,
    path_type: PathType,
    min_length: Optional[int] = None,
) -> List[Walk]:
    """Run one walk per qualifying start and keep those of at least ``min_length`` nodes."""

    if min_length is None:
        min_length = MIN_LENGTH[path_type]
    starts = start_nodes(graph, path_type)
    kept = []
    for start in starts:
        nodes = walk(graph, start, path_type)
        if len(nodes) >= min_length:
            kept.append(nodes)
    logger.info(
        "Kept %d of %d %ss (minimum %d nodes)", len(kept), len(starts), path_type.value, min_length
    )
    return kept
