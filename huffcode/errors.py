"""
Error kinds raised by the Huffman coding pipeline.

All of them derive from `HuffmanError`, which is a `ValueError`, so callers
that already guard pipeline calls with `except ValueError` keep working.
"""

from typing import Any, Optional


class HuffmanError(ValueError):
    """Base class for every failure reported by the coding pipeline."""


class EmptyInputError(HuffmanError):
    """The message to count has zero symbols."""


class EmptyAlphabetError(HuffmanError):
    """A tree was requested from an empty frequency or canonical table."""


class InvalidCanonicalizationError(HuffmanError):
    """Code lengths (or a canonical table) cannot form a valid prefix code."""


class SymbolNotInTableError(HuffmanError):
    """A message symbol has no entry in the code table."""

    def __init__(self, symbol: Any, position: int):
        super().__init__(f"Symbol {symbol!r} at position {position} is not in the code table")
        self.symbol = symbol
        self.position = position


class CorruptBitstreamError(HuffmanError):
    """The bitstream holds a non-bit value or ends in the middle of a code."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position
