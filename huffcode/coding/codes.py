from typing import Dict, Hashable, List, Mapping, Tuple

from huffcode.coding.tree import SINGLE_SYMBOL_CODE, CodeTree, Leaf

CodeTable = Dict[Hashable, str]


def derive_codes(tree: CodeTree) -> CodeTable:
    """
    Walk every root-to-leaf path and record the bits taken to reach each leaf
    ('0' for left, '1' for right).

    Uses an explicit stack of (node, depth, bit) and one shared path buffer,
    so skewed trees deeper than the interpreter's recursion limit are fine and
    working memory stays proportional to the depth.
    """
    if tree.is_single_leaf:
        return {tree.root_node.symbol: SINGLE_SYMBOL_CODE}

    codes: CodeTable = {}
    path: List[str] = []
    stack: List[Tuple[int, int, str]] = [(tree.root, 0, "")]
    while stack:
        index, depth, bit = stack.pop()
        if depth:
            # path[:depth - 1] already leads to this node's parent
            del path[depth - 1:]
            path.append(bit)
        node = tree.nodes[index]
        if isinstance(node, Leaf):
            codes[node.symbol] = "".join(path)
            continue
        # right first so the left subtree is visited first
        stack.append((node.right, depth + 1, "1"))
        stack.append((node.left, depth + 1, "0"))
    return codes


def code_lengths(table: Mapping[Hashable, str]) -> Dict[Hashable, int]:
    return {symbol: len(bits) for symbol, bits in table.items()}


def is_prefix_free(table: Mapping[Hashable, str]) -> bool:
    """
    Check that no code is a prefix of another one.

    After sorting, a code that is a prefix of others sorts directly before
    one of them, so comparing neighbours is enough.
    """
    codes = sorted(table.values())
    return all(not b.startswith(a) for a, b in zip(codes, codes[1:]))
