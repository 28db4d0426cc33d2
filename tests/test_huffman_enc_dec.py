import heapq
import random
import sys

import pytest
from dahuffman import HuffmanCodec

from huffcode.coding.canonical import canonical_code_table, canonicalize
from huffcode.coding.codes import derive_codes
from huffcode.coding.decoder import decode
from huffcode.coding.encoder import encode
from huffcode.coding.frequency import build_frequency_table
from huffcode.coding.huffman import huffman_decode, huffman_encode
from huffcode.coding.tree import build_tree, tree_from_canonical
from huffcode.errors import CorruptBitstreamError, SymbolNotInTableError

SKEWED = "a" * 10 + "b" + "c" * 17 + "d" * 7


def _optimal_cost(freq):
    # The cost of an optimal prefix code equals the sum of all merged weights.
    heap = list(freq.values())
    heapq.heapify(heap)
    cost = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        cost += merged
        heapq.heappush(heap, merged)
    return cost


def _roundtrip(message):
    tree = build_tree(build_frequency_table(message))
    bits = encode(message, derive_codes(tree))
    return bits, decode(bits, tree)


def test_roundtrip_hello_world():
    message = "hello world"
    _, decoded = _roundtrip(message)
    assert "".join(decoded) == message


def test_roundtrip_bytes():
    data = bytes(range(256)) * 3 + b"huffman"
    _, decoded = _roundtrip(data)
    assert bytes(decoded) == data


def test_roundtrip_random_messages():
    rng = random.Random(2024)
    alphabet = "abcdefghijklmnopqrstuvwxyz ÄÖÜß€"
    for _ in range(30):
        message = "".join(rng.choice(alphabet[: rng.randint(1, len(alphabet))]) for _ in range(rng.randint(1, 400)))
        _, decoded = _roundtrip(message)
        assert "".join(decoded) == message


def test_single_symbol_message():
    message = "aaaa"
    freq = build_frequency_table(message)
    assert dict(freq) == {"a": 4}
    tree = build_tree(freq)
    assert tree.is_single_leaf
    codes = derive_codes(tree)
    assert codes == {"a": "0"}
    bits = encode(message, codes)
    assert bits == "0000"
    assert "".join(decode(bits, tree)) == message


def test_skewed_message_is_optimal():
    freq = build_frequency_table(SKEWED)
    assert dict(freq) == {"a": 10, "b": 1, "c": 17, "d": 7}
    codes = derive_codes(build_tree(freq))
    lengths = {symbol: len(bits) for symbol, bits in codes.items()}
    assert min(lengths, key=lengths.get) == "c"
    assert lengths["b"] == max(lengths.values())

    bits = encode(SKEWED, codes)
    assert len(bits) == sum(freq[s] * lengths[s] for s in freq) == _optimal_cost(freq) == 61


def test_never_worse_than_reference_codec():
    rng = random.Random(7)
    for _ in range(20):
        message = "".join(rng.choice("etaoinshrdlu") for _ in range(rng.randint(2, 300)))
        freq = build_frequency_table(message)
        if len(freq) < 2:
            continue
        ours = len(encode(message, derive_codes(build_tree(freq))))
        assert ours == _optimal_cost(freq)

        # dahuffman adds an end-of-file symbol; its code restricted to our
        # symbols is still a prefix code, so it can never beat ours.
        reference = HuffmanCodec.from_frequencies(dict(freq)).get_code_table()
        assert ours <= sum(count * reference[s][0] for s, count in freq.items())


def test_equal_frequencies_reproducible():
    message = "abc"
    first = _roundtrip(message)[0]
    for _ in range(5):
        assert _roundtrip(message)[0] == first
    assert first == "10" + "11" + "0"


def test_encode_unknown_symbol():
    with pytest.raises(SymbolNotInTableError) as info:
        encode("abz", {"a": "0", "b": "1"})
    assert info.value.symbol == "z"
    assert info.value.position == 2


def test_decode_empty_bitstream():
    tree = build_tree(build_frequency_table("abc"))
    assert decode("", tree) == []


def test_decode_accepts_int_bits():
    tree = build_tree(build_frequency_table("abc"))
    assert decode([1, 0, 1, 1, 0], tree) == ["a", "b", "c"]


def test_decode_rejects_invalid_character():
    tree = build_tree(build_frequency_table("abc"))
    with pytest.raises(CorruptBitstreamError) as info:
        decode("10x1", tree)
    assert info.value.position == 2


def test_decode_rejects_truncated_stream():
    tree = build_tree(build_frequency_table("abc"))
    with pytest.raises(CorruptBitstreamError):
        decode("101", tree)


def test_decode_rejects_unhashable_items():
    tree = build_tree({"a": 1, "b": 2})
    with pytest.raises(CorruptBitstreamError) as info:
        decode([1, [0]], tree)
    assert info.value.position == 1

    single = build_tree({"a": 3})
    with pytest.raises(CorruptBitstreamError) as info:
        decode([0, {}], single)
    assert info.value.position == 1


def test_single_symbol_decode_rejects_one_bit():
    tree = build_tree(build_frequency_table("aaaa"))
    with pytest.raises(CorruptBitstreamError) as info:
        decode("01", tree)
    assert info.value.position == 1


def test_canonical_roundtrip_through_rebuilt_tree():
    message = "canonical huffman codes only need their lengths"
    entries = canonicalize(derive_codes(build_tree(build_frequency_table(message))))
    bits = encode(message, canonical_code_table(entries))
    assert "".join(decode(bits, tree_from_canonical(entries))) == message


def test_deep_tree_roundtrip():
    n = sys.getrecursionlimit() + 100
    freq = {}
    a, b = 1, 1
    for symbol in range(n):
        freq[symbol] = a
        a, b = b, a + b
    tree = build_tree(freq)
    message = list(range(n))
    bits = encode(message, derive_codes(tree))
    assert decode(bits, tree) == message


def test_huffman_encode_decode_canonical():
    data = b"hello huffman!"
    encoded = huffman_encode(data)
    assert encoded.canonical
    assert encoded.code_table == canonical_code_table(encoded.canonical)
    assert bytes(huffman_decode(encoded)) == data


def test_huffman_encode_decode_tree_codes():
    data = "hello huffman!"
    encoded = huffman_encode(data, canonical=False)
    assert encoded.canonical == ()
    assert encoded.code_table == derive_codes(encoded.tree)
    assert "".join(huffman_decode(encoded)) == data
