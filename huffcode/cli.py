from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from huffcode.errors import HuffmanError
from huffcode.pipeline.config import CodecConfig
from huffcode.pipeline.runner import encode_decode, to_symbols
from huffcode.reporting.report import code_statistics, code_table_frame


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="huffcode",
        description="Build a canonical Huffman code for a message and encode it.",
    )
    parser.add_argument("message", nargs="?", help="Message to encode.")
    parser.add_argument("--file", default="", help="Read the message from this file instead.")
    parser.add_argument(
        "--bytes",
        action="store_true",
        help="Code raw byte values instead of Unicode characters.",
    )
    parser.add_argument(
        "--no-canonical",
        action="store_true",
        help="Encode with the tree's own codes and decode with the original tree.",
    )
    parser.add_argument("--batch-input", default="", help="Encode every file below this folder.")
    parser.add_argument(
        "--batch-output",
        default="",
        help="Output folder for batch mode (default: <batch-input>_huffman).",
    )
    parser.add_argument(
        "--formats",
        default="csv,json",
        help="Comma-separated report formats for batch mode: csv,json (default: csv,json).",
    )
    return parser.parse_args(argv)


def _run_batch(args: argparse.Namespace, cfg: CodecConfig) -> int:
    # Lazy import: batch mode is the only user of the file-walking helpers.
    from huffcode.utils.batch import run_batch_on_folder

    input_root = Path(args.batch_input)
    output_root = Path(args.batch_output) if args.batch_output else Path(f"{input_root}_huffman")
    rows = run_batch_on_folder(input_root=input_root, output_root=output_root, cfg=cfg)
    failed = [row for row in rows if not row.get("success")]
    print(f"Report written to {output_root / 'report'}")
    print(f"Files: {len(rows)}  failed: {len(failed)}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    formats = tuple(fmt.strip() for fmt in args.formats.split(",") if fmt.strip())
    cfg = CodecConfig(
        symbol_mode="bytes" if args.bytes else "text",
        canonical=not args.no_canonical,
        report_formats=formats,
    )

    if args.batch_input:
        return _run_batch(args, cfg)

    if args.file:
        message = Path(args.file).read_bytes()
    elif args.message is not None:
        message = args.message
    else:
        print("error: give a message or --file", file=sys.stderr)
        return 2

    try:
        encoded, decoded = encode_decode(message, cfg)
    except (HuffmanError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Input: {message!r}")
    print(f"Frequency map: {dict(encoded.frequencies)}")
    frame = code_table_frame(
        encoded.frequencies,
        encoded.code_table,
        canonical=encoded.canonical or None,
    )
    print(frame.to_string(index=False))
    print(f"Encoded bits: {encoded.bits}")
    print("Roundtrip OK? ", decoded == to_symbols(message, cfg))

    stats = code_statistics(encoded.frequencies, encoded.code_table)
    print(
        f"{stats['encoded_bits']} bits, {stats['average_length']:.3f} bits/symbol, "
        f"entropy {stats['entropy_bits']:.3f}, efficiency {stats['efficiency']:.3f}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
