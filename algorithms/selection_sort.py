"""
selection_sort.py — Selection Sort
===================================
Splits the array into a sorted prefix and an unsorted remainder.  Each
pass scans the remainder for its minimum and moves it to the end of the
prefix.

Steps:
  1. Compare the running minimum with the next candidate  →  compared=[min_idx, j]
  2. Move the minimum into place                           →  swapped=[i, min_idx]
     (or a plain step when it was already there)
  3. Final step                                            →  every index sorted
"""

from typing import Generator, List

from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "def selection_sort(arr):",                       # 0
    "    for i in 0 .. n-2:",                         # 1
    "        min_idx ← i",                            # 2
    "        for j in i+1 .. n-1:",                   # 3
    "            if arr[j] < arr[min_idx]:",          # 4
    "                min_idx ← j",                    # 5
    "        if min_idx ≠ i:",                        # 6
    "            swap(arr[i], arr[min_idx])",         # 7
    "    return arr",                                 # 8
]


def selection_sort(array: List[int]) -> Generator[Step, None, None]:
    arr = list(array)
    n   = len(arr)
    sb  = StepBuilder(arr)

    for i in range(n - 1):
        min_idx = i

        for j in range(i + 1, n):
            yield sb.build(
                compared=[min_idx, j],
                sorted=sb.prefix(i),
                line=4,
                explanation=(
                    f"Is {arr[j]} (index {j}) smaller than the current "
                    f"minimum {arr[min_idx]} (index {min_idx})?"
                ),
            )
            if arr[j] < arr[min_idx]:
                min_idx = j

        if min_idx != i:
            arr[i], arr[min_idx] = arr[min_idx], arr[i]
            yield sb.build(
                swapped=[i, min_idx],
                sorted=sb.prefix(i + 1),
                line=7,
                explanation=(
                    f"Minimum of the unsorted part is {arr[i]}: "
                    f"swap it into position {i}."
                ),
            )
        else:
            yield sb.build(
                sorted=sb.prefix(i + 1),
                line=6,
                explanation=f"{arr[i]} is already the minimum. Position {i} is final.",
            )

    yield sb.final(line=8, explanation="Every position holds its final value.")
