"""Sanity checks for an exported trust-score matrix."""
import math
from collections import Counter
from typing import Dict, List

from trustnet.core.io import read_csv_rows
from trustnet.core.utils import to_float

START_COL = "start"


def check_shape(header: List[str], rows: List[List[str]]) -> Dict:
    bad = [(i, len(r)) for i, r in enumerate(rows) if len(r) != len(header)]
    return {"width": len(header), "bad": bad[:10], "bad_count": len(bad)}


def check_unique_start(rows: List[List[str]]) -> Dict:
    c = Counter(r[0] for r in rows if r)
    dups = [k for k, v in c.items() if v > 1]
    return {"unique": len(dups) == 0, "dup_count": len(dups), "dup_examples": dups[:5]}


def check_scores(header: List[str], rows: List[List[str]]) -> Dict:
    """Every cell must be a non-negative float or inf."""
    bad = []
    inf_cnt = total = 0
    for r in rows:
        for col, v in zip(header[1:], r[1:]):
            total += 1
            f = to_float(v)
            if f is None or math.isnan(f):
                bad.append(("not_float", r[0], col, v))
            elif math.isinf(f):
                if f < 0:
                    bad.append(("negative_inf", r[0], col, v))
                else:
                    inf_cnt += 1
            elif f < 0.0:
                bad.append(("negative", r[0], col, f))
    return {"total": total, "unreachable": inf_cnt, "bad": bad[:10], "bad_count": len(bad)}


def check_diagonal(header: List[str], rows: List[List[str]]) -> Dict:
    """A start actor's own column must read 0."""
    pos = {c: i for i, c in enumerate(header)}
    bad = []
    checked = 0
    for r in rows:
        i = pos.get(r[0])
        if i is None or i == 0 or i >= len(r):
            continue
        checked += 1
        if to_float(r[i]) != 0.0:
            bad.append((r[0], r[i]))
    return {"checked": checked, "bad": bad[:10], "bad_count": len(bad)}


def validate_matrix(path: str) -> Dict:
    header, rows = read_csv_rows(path)
    if not header:
        raise ValueError(f"[scores] CSV is empty: {path}")
    if header[0] != START_COL:
        raise ValueError(f"[scores] first column must be {START_COL!r}, got {header[0]!r}")

    shape = check_shape(header, rows)
    unique = check_unique_start(rows)
    scores = check_scores(header, rows)
    diagonal = check_diagonal(header, rows)
    return {
        "counts": {"rows": len(rows), "columns": len(header) - 1},
        "shape": shape,
        "unique_start": unique,
        "scores": scores,
        "diagonal": diagonal,
        "ok": (shape["bad_count"] == 0 and unique["unique"]
               and scores["bad_count"] == 0 and diagonal["bad_count"] == 0),
    }
