import os, csv, json, math
from typing import Iterable, Dict, List

from trustnet.datasource.schema import RatingRecord, RECORD_FIELDS


class RecordParseError(ValueError):
    """A rating row that cannot be turned into a RatingRecord."""

    def __init__(self, path: str, line: int, reason: str):
        super().__init__(f"{path}:{line}: {reason}")
        self.path, self.line, self.reason = path, line, reason


def ensure_dir(path: str):
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)

def read_records(path: str) -> List[RatingRecord]:
    """Read a headerless source,target,rating,time CSV, keeping file order."""
    out: List[RatingRecord] = []
    with open(path, "r", newline="") as f:
        for lineno, row in enumerate(csv.reader(f), start=1):
            if not row or all(not c.strip() for c in row):
                continue
            if len(row) != len(RECORD_FIELDS):
                raise RecordParseError(path, lineno, f"expected {len(RECORD_FIELDS)} columns, got {len(row)}")
            try:
                source, target, rating, ts = (int(c.strip()) for c in row)
            except ValueError:
                raise RecordParseError(path, lineno, f"non-integer field in {row!r}") from None
            out.append(RatingRecord(source=source, target=target, rating=rating, time=ts))
    return out

def format_score(v: float) -> str:
    return "inf" if math.isinf(v) else repr(float(v))

def write_csv(path: str, rows: Iterable[Dict], fieldnames: List[str]) -> int:
    ensure_dir(os.path.dirname(path))
    n = 0
    with open(path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        for r in rows:
            w.writerow({k: r.get(k) for k in fieldnames})
            n += 1
    return n

def read_csv_rows(path: str):
    """Return (header, rows) of a CSV as raw string lists."""
    with open(path, "r", newline="") as f:
        it = csv.reader(f)
        header = next(it, None)
        rows = [r for r in it if r]
    return header, rows

def save_json(path: str, obj):
    ensure_dir(os.path.dirname(path))
    with open(path, "w") as f:
        json.dump(obj, f, indent=2)
