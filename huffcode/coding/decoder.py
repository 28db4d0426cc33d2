from typing import Hashable, Iterable, List

from huffcode.coding.tree import CodeTree, Leaf
from huffcode.errors import CorruptBitstreamError

# Matched with ==; any other item, hashable or not, is an invalid bit.
_LEFT = ("0", 0)
_RIGHT = ("1", 1)


def decode(bits: Iterable, tree: CodeTree) -> List[Hashable]:
    """
    Walk the tree bit by bit, emitting a symbol at every leaf and restarting
    from the root.

    `bits` is a bitstring or any iterable of 0/1 values. Raises
    CorruptBitstreamError for anything else, and when the stream stops in the
    middle of a code.
    """
    nodes = tree.nodes
    root = tree.root
    out: List[Hashable] = []

    if tree.is_single_leaf:
        # Every symbol was written as SINGLE_SYMBOL_CODE ('0').
        symbol = nodes[root].symbol
        for position, bit in enumerate(bits):
            if bit not in _LEFT:
                raise CorruptBitstreamError(
                    f"Unexpected bit {bit!r} at position {position} for a single-symbol code",
                    position=position,
                )
            out.append(symbol)
        return out

    cursor = root
    position = -1
    for position, bit in enumerate(bits):
        node = nodes[cursor]
        if bit in _LEFT:
            cursor = node.left
        elif bit in _RIGHT:
            cursor = node.right
        else:
            raise CorruptBitstreamError(
                f"Invalid bit {bit!r} at position {position}", position=position
            )
        leaf = nodes[cursor]
        if isinstance(leaf, Leaf):
            out.append(leaf.symbol)
            cursor = root

    if cursor != root:
        raise CorruptBitstreamError(
            f"Bitstream ends in the middle of a code after {position + 1} bits",
            position=position + 1,
        )
    return out
