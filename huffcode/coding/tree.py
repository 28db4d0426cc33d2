"""
Huffman code tree construction.

The tree is stored as an arena: a flat tuple of nodes where internal nodes
reference their children by index, plus the index of the root. This keeps the
structure immutable and lets every traversal run as a plain loop.

Priority order used while merging (lowest first):

    (weight, kind, tiebreak)

- kind is 0 for leaves and 1 for internal nodes, so at equal weight leaves are
  merged before subtrees;
- tiebreak is the symbol for leaves and the creation sequence number for
  internal nodes.

The first node popped becomes the left child and the second the right child,
so the same frequency table always produces the same tree.
"""

import heapq
from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional, Sequence, Tuple, Union

from huffcode.coding.canonical import CanonicalEntry, validate_canonical_table
from huffcode.coding.frequency import FrequencyTable
from huffcode.errors import EmptyAlphabetError, InvalidCanonicalizationError
from huffcode.utils.debug import _dbg

# Code assigned to the only symbol of a one-symbol alphabet.
SINGLE_SYMBOL_CODE = "0"

_LEAF = 0
_INTERNAL = 1


@dataclass(frozen=True)
class Leaf:
    symbol: Hashable
    weight: int


@dataclass(frozen=True)
class Internal:
    weight: int
    left: int
    right: int


Node = Union[Leaf, Internal]


@dataclass(frozen=True)
class CodeTree:
    """
    Arena-backed Huffman tree.

    - nodes: every node of the tree; children are indices into this tuple
    - root: index of the root node
    """
    nodes: Tuple[Node, ...]
    root: int

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def root_node(self) -> Node:
        return self.nodes[self.root]

    @property
    def is_single_leaf(self) -> bool:
        """True for the one-symbol alphabet, where the root itself is a leaf."""
        return isinstance(self.root_node, Leaf)


def build_tree(freq: FrequencyTable) -> CodeTree:
    """
    Greedily merge the two lightest nodes until a single root remains.
    """
    if not freq:
        raise EmptyAlphabetError("Cannot build a Huffman tree from an empty frequency table")

    nodes: List[Node] = []
    heap: List[tuple] = []
    for symbol in sorted(freq):
        weight = freq[symbol]
        if weight <= 0:
            raise ValueError(f"Frequency of {symbol!r} must be positive, got {weight}")
        heap.append((weight, _LEAF, symbol, len(nodes)))
        nodes.append(Leaf(symbol=symbol, weight=weight))
    heapq.heapify(heap)

    sequence = 0
    while len(heap) > 1:
        left_weight, _, _, left = heapq.heappop(heap)
        right_weight, _, _, right = heapq.heappop(heap)
        weight = left_weight + right_weight
        heapq.heappush(heap, (weight, _INTERNAL, sequence, len(nodes)))
        nodes.append(Internal(weight=weight, left=left, right=right))
        sequence += 1

    root = heap[0][3]
    _dbg(f"built tree: symbols={len(freq)} nodes={len(nodes)} root_weight={nodes[root].weight}")
    return CodeTree(nodes=tuple(nodes), root=root)


def tree_from_canonical(entries: Sequence[CanonicalEntry]) -> CodeTree:
    """
    Rebuild a decoding tree from a canonical table.

    Each entry's code is inserted as a root-to-leaf path. The table has to
    describe a complete prefix code, i.e. every internal node ends up with two
    children. Frequencies are not part of a canonical table, so all weights
    are 0.
    """
    if not entries:
        raise EmptyAlphabetError("Cannot rebuild a Huffman tree from an empty canonical table")
    validate_canonical_table(entries)

    if len(entries) == 1:
        entry = entries[0]
        if entry.bits != SINGLE_SYMBOL_CODE:
            raise InvalidCanonicalizationError(
                f"A single-symbol table must use code {SINGLE_SYMBOL_CODE!r}, got {entry.bits!r}"
            )
        return CodeTree(nodes=(Leaf(symbol=entry.symbol, weight=0),), root=0)

    # Mutable arena while inserting: children[i] is [left, right] for internal
    # nodes and None for leaves.
    children: List[Optional[List[Optional[int]]]] = [[None, None]]
    symbols: Dict[int, Hashable] = {}

    for entry in entries:
        cursor = 0
        bits = entry.bits
        for depth, bit in enumerate(bits):
            slots = children[cursor]
            if slots is None:
                raise InvalidCanonicalizationError(
                    f"Code {bits!r} of {entry.symbol!r} extends the code of {symbols[cursor]!r}"
                )
            side = int(bit)
            last = depth == len(bits) - 1
            nxt = slots[side]
            if nxt is None:
                nxt = len(children)
                children.append(None if last else [None, None])
                slots[side] = nxt
                if last:
                    symbols[nxt] = entry.symbol
            elif last:
                raise InvalidCanonicalizationError(
                    f"Code {bits!r} of {entry.symbol!r} collides with another code"
                )
            cursor = nxt

    nodes: List[Node] = []
    for index, slots in enumerate(children):
        if slots is None:
            nodes.append(Leaf(symbol=symbols[index], weight=0))
            continue
        left, right = slots
        if left is None or right is None:
            raise InvalidCanonicalizationError(
                "Canonical table is incomplete: an internal node has a single child"
            )
        nodes.append(Internal(weight=0, left=left, right=right))

    _dbg(f"rebuilt tree from canonical table: symbols={len(entries)} nodes={len(nodes)}")
    return CodeTree(nodes=tuple(nodes), root=0)
