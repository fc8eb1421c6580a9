# utils/parse_utils.py
from typing import List


def parse_serials(text: str, count: int) -> List[int]:
    """
    Bill serial numbers (SL/NO, 1-based) picked by the user.

    '1, 3-5' with count=4 -> [1, 3, 4]
    Ranges may be written backwards ('5-3'); serials outside 1..count,
    junk tokens and repeats are dropped. Result is ascending.
    """
    picked = set()
    for tok in text.replace(" ", "").split(","):
        lo, sep, hi = tok.partition("-")
        if not lo.isdigit() or (sep and not hi.isdigit()):
            continue
        start, end = int(lo), int(hi) if sep else int(lo)
        if start > end:
            start, end = end, start
        picked.update(n for n in range(max(start, 1), min(end, count) + 1))
    return sorted(picked)
