"""
Canonical Huffman codes.

Only the bit length of each symbol's code matters. Symbols are ordered by
(length, symbol) and numbered consecutively: each code is the previous code
plus one, shifted left by the growth in length. The result is fully described
by the per-symbol lengths, which is what makes it cheap to transmit.
"""

from dataclasses import dataclass
from typing import Dict, Hashable, Mapping, Sequence, Tuple

from huffcode.errors import InvalidCanonicalizationError
from huffcode.utils.bits_utils import int_to_bitstring
from huffcode.utils.debug import _dbg


@dataclass(frozen=True)
class CanonicalEntry:
    """
    One row of a canonical table.

    - symbol: the coded symbol
    - length: code length in bits (leading zeros are significant)
    - code: numeric value of the code
    """
    symbol: Hashable
    length: int
    code: int

    @property
    def bits(self) -> str:
        return int_to_bitstring(self.code, self.length)


CanonicalTable = Tuple[CanonicalEntry, ...]


def canonicalize(table: Mapping[Hashable, str]) -> CanonicalTable:
    """
    Renumber a code table canonically. The table's bit patterns are ignored,
    only their lengths are kept.
    """
    return canonicalize_lengths({symbol: len(bits) for symbol, bits in table.items()})


def _next_code(code: int, prev_length: int, length: int) -> int:
    """Code following `code` (of `prev_length` bits) at `length` bits."""
    shift = length - prev_length
    if shift < 0:
        raise InvalidCanonicalizationError(
            f"Code lengths are not non-decreasing: {prev_length} followed by {length}"
        )
    return (code + 1) << shift


def canonicalize_lengths(lengths: Mapping[Hashable, int]) -> CanonicalTable:
    """
    Assign canonical codes to symbols given their code lengths.
    """
    ordered = sorted(lengths.items(), key=lambda item: (item[1], item[0]))
    entries = []
    code = 0
    prev_length = 0
    for index, (symbol, length) in enumerate(ordered):
        if length < 1:
            raise InvalidCanonicalizationError(
                f"Code length of {symbol!r} must be at least 1, got {length}"
            )
        if index:
            code = _next_code(code, prev_length, length)
        if code.bit_length() > length:
            raise InvalidCanonicalizationError(
                f"Code lengths overflow at {symbol!r}: value {code} needs more than {length} bits"
            )
        entries.append(CanonicalEntry(symbol=symbol, length=length, code=code))
        prev_length = length

    _dbg(f"canonicalized {len(entries)} symbols, max length {prev_length}")
    return tuple(entries)


def canonical_code_table(entries: Sequence[CanonicalEntry]) -> Dict[Hashable, str]:
    """Canonical table -> code table of bitstrings, usable by the encoder."""
    return {entry.symbol: entry.bits for entry in entries}


def validate_canonical_table(entries: Sequence[CanonicalEntry]) -> None:
    """
    Check the invariants of a canonical table received from elsewhere:
    sorted by (length, symbol), strictly increasing codes, every code fitting
    its declared length, no repeated symbol.
    """
    seen = set()
    prev = None
    for entry in entries:
        if entry.length < 1:
            raise InvalidCanonicalizationError(
                f"Code length of {entry.symbol!r} must be at least 1, got {entry.length}"
            )
        if entry.code < 0 or entry.code.bit_length() > entry.length:
            raise InvalidCanonicalizationError(
                f"Code {entry.code} of {entry.symbol!r} does not fit in {entry.length} bits"
            )
        if entry.symbol in seen:
            raise InvalidCanonicalizationError(f"Symbol {entry.symbol!r} appears twice")
        seen.add(entry.symbol)
        if prev is not None:
            if (entry.length, entry.symbol) < (prev.length, prev.symbol):
                raise InvalidCanonicalizationError(
                    "Canonical table is not sorted by (length, symbol)"
                )
            # Compare codes left-aligned at the longer length.
            if entry.code <= prev.code << (entry.length - prev.length):
                raise InvalidCanonicalizationError(
                    f"Canonical codes are not strictly increasing at {entry.symbol!r}"
                )
        prev = entry
