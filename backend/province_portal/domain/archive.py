from typing import Dict, Iterable, List, Tuple


def group_archive(rows: Iterable[Tuple[int, int, int]]) -> Dict[int, List[dict]]:
    """
    Build ``{year: [{"month": m, "count": n}, ...]}`` from (year, month, count) rows.

    Years and months come out newest first regardless of input order; repeated
    (year, month) rows are summed.
    """
    counts: Dict[Tuple[int, int], int] = {}
    for year, month, count in rows:
        key = (int(year), int(month))
        counts[key] = counts.get(key, 0) + int(count)

    archive: Dict[int, List[dict]] = {}
    for (year, month) in sorted(counts, reverse=True):
        archive.setdefault(year, []).append({"month": month, "count": counts[(year, month)]})

    return archive
