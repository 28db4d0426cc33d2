"""Utility helpers shared across pipeline components."""

from huffcode.utils.bits_utils import int_to_bitstring
from huffcode.utils.file_utils import derived_path, iter_files

__all__ = [
    "derived_path",
    "int_to_bitstring",
    "iter_files",
]
