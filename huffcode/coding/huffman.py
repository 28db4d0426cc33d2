from dataclasses import dataclass
from typing import Dict, Hashable, List, Sequence

from huffcode.coding.canonical import CanonicalTable, canonical_code_table, canonicalize
from huffcode.coding.codes import derive_codes
from huffcode.coding.decoder import decode
from huffcode.coding.encoder import encode
from huffcode.coding.frequency import FrequencyTable, build_frequency_table
from huffcode.coding.tree import CodeTree, build_tree, tree_from_canonical


@dataclass
class HuffmanEncoded:
    """
    Container for Huffman-encoded data.

    - bits: encoded bit string (e.g. '010101...')
    - frequencies: symbol counts the code was built from
    - tree: the tree built from `frequencies`
    - code_table: symbol -> bits actually used to produce `bits`
    - canonical: canonical table when canonical codes were used, else empty
    - symbol_mode: "text" when the symbols are characters, "bytes" for byte values
    """
    bits: str
    frequencies: FrequencyTable
    tree: CodeTree
    code_table: Dict[Hashable, str]
    canonical: CanonicalTable = ()
    symbol_mode: str = "text"


def huffman_encode(
    message: Sequence[Hashable],
    canonical: bool = True,
    symbol_mode: str = "text",
) -> HuffmanEncoded:
    """
    Build a Huffman code for `message` and encode it.

    With `canonical=True` the message is written with canonical codes, so the
    canonical table alone is enough to decode it.
    """
    frequencies = build_frequency_table(message)
    tree = build_tree(frequencies)
    code_table = derive_codes(tree)
    entries: CanonicalTable = ()
    if canonical:
        entries = canonicalize(code_table)
        code_table = canonical_code_table(entries)
    bits = encode(message, code_table)
    return HuffmanEncoded(
        bits=bits,
        frequencies=frequencies,
        tree=tree,
        code_table=code_table,
        canonical=entries,
        symbol_mode=symbol_mode,
    )


def huffman_decode(encoded: HuffmanEncoded) -> List[Hashable]:
    """
    Decode HuffmanEncoded back to the original symbols.

    Canonically coded data is decoded with a tree rebuilt from the canonical
    table, everything else with the original tree.
    """
    if encoded.canonical:
        tree = tree_from_canonical(encoded.canonical)
    else:
        tree = encoded.tree
    return decode(encoded.bits, tree)
