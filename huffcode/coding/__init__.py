from huffcode.coding.canonical import (
    CanonicalEntry,
    canonical_code_table,
    canonicalize,
    canonicalize_lengths,
    validate_canonical_table,
)
from huffcode.coding.codes import code_lengths, derive_codes, is_prefix_free
from huffcode.coding.decoder import decode
from huffcode.coding.encoder import encode
from huffcode.coding.frequency import build_frequency_table, merge_frequency_tables
from huffcode.coding.huffman import HuffmanEncoded, huffman_decode, huffman_encode
from huffcode.coding.tree import (
    SINGLE_SYMBOL_CODE,
    CodeTree,
    Internal,
    Leaf,
    build_tree,
    tree_from_canonical,
)

__all__ = [
    "CanonicalEntry",
    "CodeTree",
    "HuffmanEncoded",
    "Internal",
    "Leaf",
    "SINGLE_SYMBOL_CODE",
    "build_frequency_table",
    "build_tree",
    "canonical_code_table",
    "canonicalize",
    "canonicalize_lengths",
    "code_lengths",
    "decode",
    "derive_codes",
    "encode",
    "huffman_decode",
    "huffman_encode",
    "is_prefix_free",
    "merge_frequency_tables",
    "tree_from_canonical",
    "validate_canonical_table",
]
