"""Minimum-redundancy (Huffman) prefix codes with canonical renumbering."""

from huffcode.coding import (
    CanonicalEntry,
    CodeTree,
    HuffmanEncoded,
    build_frequency_table,
    build_tree,
    canonical_code_table,
    canonicalize,
    decode,
    derive_codes,
    encode,
    huffman_decode,
    huffman_encode,
    tree_from_canonical,
)
from huffcode.errors import (
    CorruptBitstreamError,
    EmptyAlphabetError,
    EmptyInputError,
    HuffmanError,
    InvalidCanonicalizationError,
    SymbolNotInTableError,
)

__version__ = "0.1.0"

__all__ = [
    "CanonicalEntry",
    "CodeTree",
    "CorruptBitstreamError",
    "EmptyAlphabetError",
    "EmptyInputError",
    "HuffmanEncoded",
    "HuffmanError",
    "InvalidCanonicalizationError",
    "SymbolNotInTableError",
    "build_frequency_table",
    "build_tree",
    "canonical_code_table",
    "canonicalize",
    "decode",
    "derive_codes",
    "encode",
    "huffman_decode",
    "huffman_encode",
    "tree_from_canonical",
]
