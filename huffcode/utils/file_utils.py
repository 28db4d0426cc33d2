from pathlib import Path
from typing import Iterable, Optional


def iter_files(root: Path) -> Iterable[Path]:
    """All regular files below `root`, in a stable order."""
    return sorted(p for p in root.rglob("*") if p.is_file())


def derived_path(
    out_root: Path,
    rel_path: Path,
    suffix: str,
    extension: Optional[str] = None,
) -> Path:
    """
    Path of an output file derived from an input file, mirroring its
    relative directory under `out_root`.

    Example:
        out_root='out/out_encoded', rel_path='docs/readme.txt', suffix='_encoded'
        -> 'out/out_encoded/docs/readme_encoded.txt'

    `extension` (e.g. '.csv') replaces the original extension when given.
    """
    name = rel_path.name
    stem, ext = (rel_path.stem, rel_path.suffix) if rel_path.suffix else (name, "")
    if extension is not None:
        ext = extension
    return out_root / rel_path.parent / f"{stem}{suffix}{ext}"
