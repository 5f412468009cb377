"""
CSV Utilities

Header-first CSV writing for catalog exports.
"""

import csv
from pathlib import Path
from typing import Dict, Iterable, Sequence


def write_csv(
    file_path: str | Path,
    rows: Iterable[Dict[str, str]],
    fieldnames: Sequence[str],
    encoding: str = 'utf-8'
) -> int:
    """
    Write a header row followed by `rows`.

    The header is always written, so an empty feed still produces a
    loadable file. Missing parent directories are created. Rows are
    streamed, and a key outside `fieldnames` raises ValueError.

    Returns:
        Number of data rows written
    """
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    written = 0
    with open(path, 'w', encoding=encoding, newline='') as f:
        writer = csv.DictWriter(f, fieldnames=list(fieldnames))
        writer.writeheader()
        for row in rows:
            writer.writerow(row)
            written += 1

    return written
