"""Read multigraph: k-mer nodes joined by one edge per read."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional

import networkx as nx

from .kmer import KMER_LENGTH, KmerEnd, Read, encode

logger = logging.getLogger(__name__)


@dataclass(unsafe_hash=True)
class Node:
    """A k-mer vertex. Identity is the key alone; the degrees are live counters."""

    idx: int
    in_degree: int = field(default=0, compare=False)
    out_degree: int = field(default=0, compare=False)


@dataclass
class Edge:
    """One read, directed from its prefix k-mer to its suffix k-mer."""

    source: int
    destination: int
    used: bool = False


Adjacency = Dict[int, Dict[int, List[Edge]]]


class Multigraph:
    """Arena of nodes keyed by k-mer plus edges bucketed by (source, destination).

    Edges refer to their endpoints by key so that consuming an edge updates the
    arena in place. The graph is only mutated through :meth:`consume`.
    """

    def __init__(self, k: int = KMER_LENGTH) -> None:
        self.k = k
        self.nodes: Dict[int, Node] = {}
        self.edges: Adjacency = {}
        self.edge_count = 0

    @classmethod
    def from_reads(cls, reads: Iterable[Read], k: int = KMER_LENGTH) -> "Multigraph":
        graph = cls(k)
        for read in reads:
            graph.add_read(read)
        logger.debug(
            "Built multigraph with %d nodes and %d edges", len(graph.nodes), graph.edge_count
        )
        return graph

    def add_read(self, read: Read) -> Edge:
        prefix = encode(read, KmerEnd.PREFIX, self.k)
        suffix = encode(read, KmerEnd.SUFFIX, self.k)
        self._node(prefix).out_degree += 1
        self._node(suffix).in_degree += 1
        edge = Edge(prefix, suffix)
        self.edges.setdefault(prefix, {}).setdefault(suffix, []).append(edge)
        self.edge_count += 1
        return edge

    def _node(self, key: int) -> Node:
        node = self.nodes.get(key)
        if node is None:
            node = self.nodes[key] = Node(key)
        return node

    def consume(self, edge: Edge) -> None:
        """Mark ``edge`` used and decrement the degrees of both endpoints."""

        if edge.used:
            raise ValueError(f"edge {edge.source} -> {edge.destination} was already used")
        edge.used = True
        self.nodes[edge.source].out_degree -= 1
        self.nodes[edge.destination].in_degree -= 1

    def next_edge(self, key: int) -> Optional[Edge]:
        """Return an unused edge out of ``key``, preferring the smallest destination."""

        buckets = self.edges.get(key)
        if not buckets:
            return None
        for destination in sorted(buckets):
            for edge in buckets[destination]:
                if not edge.used:
                    return edge
        return None

    def iter_edges(self) -> Iterator[Edge]:
        for buckets in self.edges.values():
            for bucket in buckets.values():
                yield from bucket

    def unused_out_degree(self, key: int) -> int:
        return sum(
            not edge.used
            for bucket in self.edges.get(key, {}).values()
            for edge in bucket
        )

    def unused_in_degree(self, key: int) -> int:
        return sum(
            not edge.used
            for buckets in self.edges.values()
            for edge in buckets.get(key, ())
        )

    def to_networkx(self) -> nx.MultiDiGraph:
        """Export as a networkx multigraph with one edge per read."""

        exported = nx.MultiDiGraph()
        for node in self.nodes.values():
            exported.add_node(node.idx, in_degree=node.in_degree, out_degree=node.out_degree)
        for edge in self.iter_edges():
            exported.add_edge(edge.source, edge.destination, used=edge.used)
        return exported

    def summary(self) -> Dict[str, int]:
        exported = self.to_networkx()
        components = (
            nx.number_weakly_connected_components(exported) if exported.number_of_nodes() else 0
        )
        return {
            "nodes": exported.number_of_nodes(),
            "edges": exported.number_of_edges(),
            "components": components,
        }
