from collections import Counter
from types import MappingProxyType
from typing import Hashable, Iterable, Mapping

from huffcode.errors import EmptyInputError

FrequencyTable = Mapping[Hashable, int]


def build_frequency_table(message: Iterable[Hashable]) -> FrequencyTable:
    """
    Count how often every distinct symbol occurs in `message`.

    A `str` is counted per character and `bytes` per byte value. The result is
    a read-only mapping.
    """
    counts = Counter(message)
    if not counts:
        raise EmptyInputError("Cannot build a frequency table from an empty message")
    return MappingProxyType(dict(counts))


def merge_frequency_tables(*tables: FrequencyTable) -> FrequencyTable:
    """
    Sum several frequency tables, e.g. counted over shards of one message.
    """
    merged: Counter = Counter()
    for table in tables:
        merged.update(table)
    if not merged:
        raise EmptyInputError("Cannot merge frequency tables without any symbols")
    return MappingProxyType(dict(merged))
