"""
binary_search.py — Binary Search
=================================
Binary search needs ordered input, so the generator sorts its own copy
first.  The array shown for this algorithm is therefore the ascending
version of the caller's array, not the original order.

Each probe highlights `mid` and marks everything already ruled out
([0, left) and (right, n)) as sorted, so the live window shrinks
visibly.  A hit, or running out of window, ends with every index marked.
"""

from typing import Generator, List, Optional

from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "def binary_search(arr, target):",                # 0
    "    arr ← sorted(arr)",                          # 1
    "    left ← 0; right ← n - 1",                    # 2
    "    while left ≤ right:",                        # 3
    "        mid ← (left + right) // 2",              # 4
    "        if arr[mid] == target: return mid",      # 5
    "        if arr[mid] < target: left ← mid + 1",   # 6
    "        else: right ← mid - 1",                  # 7
    "    return NOT FOUND",                           # 8
]


def binary_search(array: List[int], target: Optional[int]) -> Generator[Step, None, None]:
    arr = sorted(array)
    n   = len(arr)
    sb  = StepBuilder(arr)

    left, right = 0, n - 1

    while left <= right:
        mid = (left + right) // 2
        excluded = list(range(left)) + list(range(right + 1, n))

        yield sb.build(
            highlight=[mid],
            sorted=excluded,
            line=4,
            explanation=(
                f"Window is [{left}..{right}]. Probe the middle, "
                f"index {mid} (value {arr[mid]})."
            ),
        )

        if arr[mid] == target:
            yield sb.build(
                highlight=[mid],
                sorted=sb.full_range(),
                line=5,
                explanation=f"🎯 {arr[mid]} == {target}: found at index {mid}.",
                is_final=True,
            )
            return

        # without a target nothing matches; keep halving to the left
        if target is not None and arr[mid] < target:
            left = mid + 1
        else:
            right = mid - 1

    yield sb.build(
        sorted=sb.full_range(),
        line=8,
        explanation=f"The window is empty. {target} is NOT in the array.",
        is_final=True,
    )
