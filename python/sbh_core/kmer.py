"""Integer codec for the fixed-length k-mers that key the assembly graph."""

from __future__ import annotations

from enum import Enum
from typing import Union

Read = Union[str, bytes]

KMER_LENGTH = 15
SYMBOLS = "ACGT"
SYMBOL_VALUES = {symbol: value for value, symbol in enumerate(SYMBOLS)}


class KmerEnd(Enum):
    PREFIX = "prefix"
    SUFFIX = "suffix"


class InvalidSymbolError(ValueError):
    """Raised when a read holds a symbol outside of ``A``, ``C``, ``G`` and ``T``."""

    def __init__(self, symbol: str, position: int) -> None:
        super().__init__(
            f"invalid symbol {symbol!r} at position {position}: "
            f"reads may only contain {', '.join(SYMBOLS)}"
        )
        self.symbol = symbol
        self.position = position


def encode(read: Read, end: KmerEnd = KmerEnd.PREFIX, k: int = KMER_LENGTH) -> int:
    """Return the integer key of the first or last ``k`` symbols of ``read``.

    Symbol ``i`` of the k-mer contributes ``value * 4**i`` so the first symbol
    is the least significant base-4 digit. Bytes and strings encode alike.
    """

    if isinstance(read, (bytes, bytearray)):
        read = read.decode("ascii", errors="replace")
    if len(read) < k:
        raise ValueError(f"read of length {len(read)} is shorter than k={k}")
    offset = 0 if end is KmerEnd.PREFIX else len(read) - k
    key = 0
    for i in range(k):
        symbol = read[offset + i]
        value = SYMBOL_VALUES.get(symbol)
        if value is None:
            raise InvalidSymbolError(symbol, offset + i)
        key += value * 4**i
    return key


def decode(key: int, k: int = KMER_LENGTH) -> str:
    """Inverse of :func:`encode`: emit ``k`` symbols, least significant digit first."""

    if key < 0:
        raise ValueError(f"k-mer keys are unsigned, got {key}")
    if key >= 4**k:
        raise ValueError(f"key {key} does not fit in {k} symbols")
    symbols = []
    for _ in range(k):
        key, value = divmod(key, 4)
        symbols.append(SYMBOLS[value])
    return "".join(symbols)
