from dataclasses import dataclass
from typing import Tuple


@dataclass
class CodecConfig:
    """
    Configuration for the Huffman coding pipeline.
    """
    # "text": one symbol per Unicode character, "bytes": one symbol per byte value
    symbol_mode: str = "text"
    # Encode with canonical codes and decode from the canonical table alone
    canonical: bool = True
    # Text encoding used when files are read in "text" mode
    text_encoding: str = "utf-8"
    report_formats: Tuple[str, ...] = ("csv", "json")
