from typing import Hashable, Iterable, Mapping

from huffcode.errors import SymbolNotInTableError


def encode(message: Iterable[Hashable], table: Mapping[Hashable, str]) -> str:
    """
    Encode `message` by concatenating each symbol's code, back to back.
    """
    parts = []
    for position, symbol in enumerate(message):
        try:
            parts.append(table[symbol])
        except KeyError:
            raise SymbolNotInTableError(symbol, position) from None
    return "".join(parts)
