from __future__ import annotations

import json
import math
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Hashable, List, Mapping, Optional, Sequence

import pandas as pd

from huffcode.coding.canonical import CanonicalEntry

TABLE_COLUMNS = ["symbol", "count", "length", "code"]

REPORT_COLUMNS = [
    "input_path",
    "status",
    "symbol_mode",
    "message_length",
    "symbols",
    "encoded_bits",
    "average_length",
    "entropy_bits",
    "efficiency",
    "max_length",
    "success",
]


def code_table_frame(
    freq: Mapping[Hashable, int],
    table: Mapping[Hashable, str],
    canonical: Optional[Sequence[CanonicalEntry]] = None,
) -> pd.DataFrame:
    """
    One row per symbol with its count, code length and code, ordered by
    (length, symbol) like a canonical table.
    """
    rows = [
        {"symbol": symbol, "count": freq.get(symbol, 0), "length": len(bits), "code": bits}
        for symbol, bits in sorted(table.items(), key=lambda item: (len(item[1]), item[0]))
    ]
    columns = list(TABLE_COLUMNS)
    if canonical is not None:
        canonical_bits = {entry.symbol: entry.bits for entry in canonical}
        for row in rows:
            row["canonical_code"] = canonical_bits.get(row["symbol"], "")
        columns.append("canonical_code")
    return pd.DataFrame(rows, columns=columns)


def code_statistics(freq: Mapping[Hashable, int], table: Mapping[Hashable, str]) -> Dict[str, object]:
    """
    Size and efficiency of a code for the message it was built from.

    efficiency is entropy / average code length (1.0 means the code reaches the
    entropy bound; a one-symbol alphabet has zero entropy).
    """
    total = sum(freq.values())
    encoded_bits = sum(count * len(table[symbol]) for symbol, count in freq.items())
    entropy = 0.0
    for count in freq.values():
        p = count / total
        entropy -= p * math.log2(p)
    average = encoded_bits / total if total else 0.0
    return {
        "symbols": len(freq),
        "message_length": total,
        "encoded_bits": encoded_bits,
        "average_length": average,
        "entropy_bits": entropy,
        "efficiency": (entropy / average) if average else 0.0,
        "max_length": max((len(bits) for bits in table.values()), default=0),
    }


def generate_report(
    rows: Sequence[Mapping[str, object]],
    report_dir: Path,
    formats: Sequence[str] = ("csv", "json"),
) -> Dict[str, object]:
    """
    Write per-file rows from a batch run plus a summary block to
    `report_dir` as report.csv and/or report.json.
    """
    report_dir = report_dir.resolve()
    report_dir.mkdir(parents=True, exist_ok=True)
    formats = [fmt.lower() for fmt in formats]

    df = pd.DataFrame(list(rows), columns=REPORT_COLUMNS)
    ok = df[df["status"] == "ok"]

    summary = {
        "total_files": int(len(df)),
        "success_count": int(df["success"].eq(True).sum()),
        "total_message_length": int(ok["message_length"].sum()),
        "total_encoded_bits": int(ok["encoded_bits"].sum()),
        "avg_efficiency": float(ok["efficiency"].mean()) if len(ok) else 0.0,
        "median_average_length": float(ok["average_length"].median()) if len(ok) else 0.0,
    }
    summary["success_rate"] = (summary["success_count"] / summary["total_files"]) if len(df) else 0.0

    meta = {
        "report_dir": str(report_dir),
        "generated_at_utc": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    }

    if "csv" in formats:
        df.to_csv(report_dir / "report.csv", index=False)

    if "json" in formats:
        files: List[Dict[str, object]] = [dict(row) for row in rows]
        report_payload = {"meta": meta, "summary": summary, "files": files}
        (report_dir / "report.json").write_text(
            json.dumps(report_payload, indent=2, default=str), encoding="utf-8"
        )

    return {"meta": meta, "summary": summary, "files": list(rows)}
