from typing import Hashable, List, Optional, Sequence, Tuple, Union

from huffcode.coding.huffman import HuffmanEncoded, huffman_decode, huffman_encode
from huffcode.pipeline.config import CodecConfig
from huffcode.utils.debug import _dbg

Message = Union[str, bytes, bytearray]

SYMBOL_MODES = ("text", "bytes")


def _symbol_mode(mode: str) -> str:
    normalized = mode.lower()
    if normalized not in SYMBOL_MODES:
        raise ValueError(f"Unsupported symbol mode: {mode}")
    return normalized


def to_symbols(message: Message, cfg: CodecConfig) -> Sequence[Hashable]:
    """
    Turn a message into the symbol sequence for the configured mode:
    characters for "text", byte values for "bytes".
    """
    mode = _symbol_mode(cfg.symbol_mode)
    if mode == "text":
        if isinstance(message, (bytes, bytearray)):
            return bytes(message).decode(cfg.text_encoding)
        return message
    if isinstance(message, str):
        return message.encode(cfg.text_encoding)
    return bytes(message)


def from_symbols(symbols: List[Hashable], symbol_mode: str) -> Message:
    """Inverse of `to_symbols`: decoded symbols -> str or bytes."""
    if _symbol_mode(symbol_mode) == "text":
        return "".join(symbols)
    return bytes(symbols)


def encode_message(message: Message, cfg: Optional[CodecConfig] = None) -> HuffmanEncoded:
    """
    Dispatch encoding based on cfg.symbol_mode.
    """
    if cfg is None:
        cfg = CodecConfig()
    mode = _symbol_mode(cfg.symbol_mode)
    symbols = to_symbols(message, cfg)
    encoded = huffman_encode(symbols, canonical=cfg.canonical, symbol_mode=mode)
    _dbg(
        f"encoded {len(symbols)} symbols ({mode}) into {len(encoded.bits)} bits, "
        f"alphabet={len(encoded.code_table)} canonical={cfg.canonical}"
    )
    return encoded


def decode_message(encoded: HuffmanEncoded) -> Message:
    """Decode with the symbol mode recorded at encoding time."""
    return from_symbols(huffman_decode(encoded), encoded.symbol_mode)


def encode_decode(
    message: Message,
    cfg: Optional[CodecConfig] = None,
) -> Tuple[HuffmanEncoded, Message]:
    """
    Encode and decode a single message.
    Returns (encoded, decoded).
    """
    encoded = encode_message(message, cfg)
    decoded = decode_message(encoded)
    return encoded, decoded
