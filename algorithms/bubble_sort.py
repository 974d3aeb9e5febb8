"""
bubble_sort.py — Bubble Sort
=============================
Generator-based bubble sort.  Yields a Step at every meaningful event:
  1. Compare two neighbours          →  compared=[j, j+1]
  2. Swap them if out of order       →  swapped=[j, j+1]
  3. Final step                      →  every index sorted

After pass i the largest i values have bubbled to the end of the array,
so those trailing indices are reported as sorted on every step of the
following pass.
"""

from typing import Generator, List

from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "def bubble_sort(arr):",                          # 0
    "    for i in 0 .. n-1:",                         # 1
    "        for j in 0 .. n-i-2:",                   # 2
    "            if arr[j] > arr[j+1]:",              # 3
    "                swap(arr[j], arr[j+1])",         # 4
    "    return arr",                                 # 5
]


def bubble_sort(array: List[int]) -> Generator[Step, None, None]:
    """
    Yields Step snapshots for every comparison and swap.

    Args:
        array : Values to sort.  Not modified.
    """
    arr = list(array)
    n   = len(arr)
    sb  = StepBuilder(arr)

    for i in range(n):
        settled = sb.suffix(i)
        for j in range(n - i - 1):
            yield sb.build(
                compared=[j, j + 1],
                sorted=settled,
                line=3,
                explanation=(
                    f"Compare neighbours at {j} and {j + 1} "
                    f"({arr[j]} vs {arr[j + 1]})."
                ),
            )

            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                yield sb.build(
                    swapped=[j, j + 1],
                    sorted=settled,
                    line=4,
                    explanation=(
                        f"{arr[j + 1]} > {arr[j]}: swap them so the larger "
                        f"value keeps bubbling to the right."
                    ),
                )

    yield sb.final(line=5, explanation="No more passes needed. The array is sorted.")
