"""Core of the sequencing-by-hybridization assembler."""

from .kmer import (
    InvalidSymbolError,
    KmerEnd,
    decode,
    encode,
)
from .multigraph import (
    Edge,
    Multigraph,
    Node,
)
from .traversal import (
    MIN_LENGTH,
    PathType,
    populate,
    start_nodes,
    walk,
)
from .contigs import (
    build_contigs,
    path_to_contig,
)
from .condense import (
    CondenseResult,
    condense,
    contains,
    merge,
    merge_if_overlap,
    remove_contained,
)
from .assembler import (
    AssemblyConfig,
    Assembler,
)

__all__ = [
    "InvalidSymbolError",
    "KmerEnd",
    "decode",
    "encode",
    "Edge",
    "Multigraph",
    "Node",
    "MIN_LENGTH",
    "PathType",
    "populate",
    "start_nodes",
    "walk",
    "build_contigs",
    "path_to_contig",
    "CondenseResult",
    "condense",
    "contains",
    "merge",
    "merge_if_overlap",
    "remove_contained",
    "AssemblyConfig",
    "Assembler",
]
