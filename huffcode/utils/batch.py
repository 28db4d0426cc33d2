from pathlib import Path
from typing import Dict, List

from huffcode.errors import HuffmanError
from huffcode.pipeline.config import CodecConfig
from huffcode.pipeline.runner import decode_message, encode_message, to_symbols
from huffcode.reporting.report import code_statistics, code_table_frame, generate_report
from huffcode.utils.file_utils import derived_path, iter_files


def run_batch_on_folder(
    input_root: Path,
    output_root: Path,
    cfg: CodecConfig | None = None,
    report: bool = True,
) -> List[Dict[str, object]]:
    """
    Encode and decode every file below `input_root`.

    Writes, mirroring the input tree:
    - out_encoded/<name>_encoded.txt: the bitstring
    - out_encoded/<name>_table.csv: per-symbol counts, lengths and codes
    - out_decoded/<name>_decoded.<ext>: the decoded file
    and, with `report=True`, report.csv / report.json under output_root/report.
    Returns one stats row per file.
    """
    if cfg is None:
        cfg = CodecConfig()

    input_root = input_root.resolve()
    output_root = output_root.resolve()

    out_encoded_root = output_root / "out_encoded"
    out_decoded_root = output_root / "out_decoded"

    rows: List[Dict[str, object]] = []
    for in_path in iter_files(input_root):
        print("Processing:", in_path)
        rows.append(
            process_file(
                in_path=in_path,
                rel_path=in_path.relative_to(input_root),
                out_encoded_root=out_encoded_root,
                out_decoded_root=out_decoded_root,
                cfg=cfg,
            )
        )

    if report:
        generate_report(rows, output_root / "report", formats=cfg.report_formats)
    return rows


def process_file(
    in_path: Path,
    rel_path: Path,
    out_encoded_root: Path,
    out_decoded_root: Path,
    cfg: CodecConfig,
) -> Dict[str, object]:
    row: Dict[str, object] = {
        "input_path": str(rel_path),
        "status": "ok",
        "symbol_mode": cfg.symbol_mode,
    }

    data = in_path.read_bytes()
    try:
        encoded = encode_message(data, cfg)
    except UnicodeDecodeError:
        row["status"] = "not_text"
        row["success"] = False
        return row
    except HuffmanError as exc:
        # Empty files have nothing to code.
        row["status"] = f"encode_failed: {exc}"
        row["success"] = False
        return row

    row.update(code_statistics(encoded.frequencies, encoded.code_table))

    encoded_path = derived_path(out_encoded_root, rel_path, "_encoded", ".txt")
    encoded_path.parent.mkdir(parents=True, exist_ok=True)
    encoded_path.write_text(encoded.bits, encoding="utf-8")

    table_path = derived_path(out_encoded_root, rel_path, "_table", ".csv")
    frame = code_table_frame(
        encoded.frequencies,
        encoded.code_table,
        canonical=encoded.canonical or None,
    )
    frame.to_csv(table_path, index=False)

    try:
        decoded = decode_message(encoded)
    except HuffmanError as exc:
        row["status"] = f"decode_failed: {exc}"
        row["success"] = False
        return row

    decoded_path = derived_path(out_decoded_root, rel_path, "_decoded")
    decoded_path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(decoded, str):
        decoded_path.write_text(decoded, encoding=cfg.text_encoding, newline="")
    else:
        decoded_path.write_bytes(decoded)

    row["success"] = decoded == to_symbols(data, cfg)
    return row
