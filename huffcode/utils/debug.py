import os
import sys

# Debug logging controlled by environment variable HUFFCODE_DEBUG
_DEBUG = os.environ.get("HUFFCODE_DEBUG", "").lower() in {"1", "true", "yes"}


def _dbg(msg: str) -> None:
    if _DEBUG:
        print(f"[HUFF] {msg}", file=sys.stderr)
