from __future__ import annotations

from typing import Callable, List, Optional

from .models import MultipleHit, MultipleScan


def qualifying_values(scan: Optional[MultipleScan] = None) -> List[MultipleHit]:
    scan = scan or MultipleScan()
    hits = []
    for i in range(scan.start, scan.stop + 1):
        v = i * scan.factor
        if v % scan.divisor == 0:
            hits.append(MultipleHit(index=i, value=v, divisor=scan.divisor))
    return hits


def print_multiples(
    scan: Optional[MultipleScan] = None, write: Callable[[str], None] = print
) -> None:
    for hit in qualifying_values(scan):
        write(hit.line())
