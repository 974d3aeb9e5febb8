"""
linear_search.py — Linear Search
=================================
Walks the array left to right.  The cursor is shown with `highlight`;
a hit is reported by also marking that index as sorted, then the
generator stops.  A miss ends with a bare step (no markers at all).
"""

from typing import Generator, List, Optional

from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "def linear_search(arr, target):",                # 0
    "    for i in 0 .. n-1:",                         # 1
    "        if arr[i] == target:",                   # 2
    "            return i",                           # 3
    "    return NOT FOUND",                           # 4
]


def linear_search(array: List[int], target: Optional[int]) -> Generator[Step, None, None]:
    arr = list(array)
    sb  = StepBuilder(arr)

    for i in range(len(arr)):
        yield sb.build(
            highlight=[i],
            line=2,
            explanation=f"Check index {i}: is {arr[i]} equal to {target}?",
        )

        if arr[i] == target:
            yield sb.build(
                highlight=[i],
                sorted=[i],
                line=3,
                explanation=f"🎯 Found {target} at index {i} after {i + 1} check(s).",
                is_final=True,
            )
            return

    yield sb.build(
        line=4,
        explanation=f"Checked all {len(arr)} values. {target} is NOT in the array.",
        is_final=True,
    )
