"""
quick_sort.py — Quick Sort
===========================
Recursive quick sort with Lomuto partitioning around the last element.

Partition steps:
  1. Announce the pivot                  →  highlight=[high]
  2. Compare each element to the pivot   →  compared=[j, high]
  3. Move smaller elements left          →  swapped=[i, j]
  4. Drop the pivot into its slot        →  swapped=[i+1, high]

`sorted_indices` is one list shared by the whole recursion tree.  Each
time a sub-range shrinks to a single index that index is appended, so
positions finalised in one branch stay marked while later partitions run.
"""

from typing import Generator, List

from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "def quick_sort(arr, low, high):",                # 0
    "    if low < high:",                             # 1
    "        p ← partition(arr, low, high)",          # 2
    "        quick_sort(arr, low, p-1)",              # 3
    "        quick_sort(arr, p+1, high)",             # 4
    "def partition(arr, low, high):",                 # 5
    "    pivot ← arr[high]; i ← low - 1",             # 6
    "    for j in low .. high-1:",                    # 7
    "        if arr[j] < pivot:",                     # 8
    "            i ← i + 1; swap(arr[i], arr[j])",    # 9
    "    swap(arr[i+1], arr[high])",                  # 10
    "    return i + 1",                               # 11
]


def quick_sort(array: List[int]) -> Generator[Step, None, None]:
    arr = list(array)
    sb  = StepBuilder(arr)

    # a one-element array has nothing to partition and no base case to report
    if len(arr) > 1:
        yield from _quick_sort(arr, sb, 0, len(arr) - 1, [])

    yield sb.final(line=0, explanation="Every partition is resolved. The array is sorted.")


def _quick_sort(
    arr: List[int],
    sb: StepBuilder,
    low: int,
    high: int,
    sorted_indices: List[int],
) -> Generator[Step, None, None]:
    if low < high:
        p = yield from _partition(arr, sb, low, high, sorted_indices)
        yield from _quick_sort(arr, sb, low, p - 1, sorted_indices)
        yield from _quick_sort(arr, sb, p + 1, high, sorted_indices)
    elif low == high:
        sorted_indices.append(low)
        yield sb.build(
            sorted=sorted_indices,
            line=1,
            explanation=f"Range [{low}..{high}] holds a single value: index {low} is final.",
        )


def _partition(
    arr: List[int],
    sb: StepBuilder,
    low: int,
    high: int,
    sorted_indices: List[int],
) -> Generator[Step, None, int]:
    pivot = arr[high]
    i = low - 1

    yield sb.build(
        highlight=[high],
        sorted=sorted_indices,
        line=6,
        explanation=f"Partition [{low}..{high}] around pivot {pivot} (index {high}).",
    )

    for j in range(low, high):
        yield sb.build(
            compared=[j, high],
            sorted=sorted_indices,
            line=8,
            explanation=f"Is {arr[j]} smaller than the pivot {pivot}?",
        )

        if arr[j] < pivot:
            i += 1
            arr[i], arr[j] = arr[j], arr[i]
            yield sb.build(
                swapped=[i, j],
                sorted=sorted_indices,
                line=9,
                explanation=f"Yes: move {arr[i]} into the low side at index {i}.",
            )

    arr[i + 1], arr[high] = arr[high], arr[i + 1]
    yield sb.build(
        swapped=[i + 1, high],
        sorted=sorted_indices,
        line=10,
        explanation=f"Place the pivot {pivot} at index {i + 1}: smaller values sit to its left.",
    )

    return i + 1
