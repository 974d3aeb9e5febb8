"""
merge_sort.py — Merge Sort
===========================
Top-down merge sort on the inclusive range [start, end].

Splitting emits nothing; all the action is in the merge.  For every
element taken while both halves still have values we yield two steps:
the comparison of the two heads, then the array right after the write.
Elements copied over from a leftover half yield only the post-write step.

Every merge step carries the `sorted_indices` list handed down from the
root call.  Nothing is ever added to it, so the bars only turn "sorted"
on the final step.
"""

from typing import Generator, List

from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "def merge_sort(arr, start, end):",               # 0
    "    if start ≥ end: return",                     # 1
    "    mid ← (start + end) // 2",                   # 2
    "    merge_sort(arr, start, mid)",                # 3
    "    merge_sort(arr, mid+1, end)",                # 4
    "    while left and right not empty:",            # 5
    "        take the smaller head into arr[k]",      # 6
    "    copy what is left of either half",           # 7
    "    return arr",                                 # 8
]


def merge_sort(array: List[int]) -> Generator[Step, None, None]:
    arr = list(array)
    sb  = StepBuilder(arr)

    yield from _merge_sort(arr, sb, 0, len(arr) - 1, [])

    yield sb.final(line=8, explanation="All runs merged. The array is sorted.")


def _merge_sort(
    arr: List[int],
    sb: StepBuilder,
    start: int,
    end: int,
    sorted_indices: List[int],
) -> Generator[Step, None, None]:
    if start >= end:
        return

    mid = (start + end) // 2
    yield from _merge_sort(arr, sb, start, mid, sorted_indices)
    yield from _merge_sort(arr, sb, mid + 1, end, sorted_indices)

    left  = arr[start:mid + 1]
    right = arr[mid + 1:end + 1]
    i = j = 0
    k = start

    while i < len(left) and j < len(right):
        yield sb.build(
            compared=[start + i, mid + 1 + j],
            sorted=sorted_indices,
            line=5,
            explanation=(
                f"Merge [{start}..{mid}] with [{mid + 1}..{end}]: "
                f"compare heads {left[i]} and {right[j]}."
            ),
        )

        if left[i] <= right[j]:
            arr[k] = left[i]
            i += 1
        else:
            arr[k] = right[j]
            j += 1
        k += 1

        yield sb.build(
            sorted=sorted_indices,
            line=6,
            explanation=f"Write {arr[k - 1]} into index {k - 1}.",
        )

    while i < len(left):
        arr[k] = left[i]
        i += 1
        k += 1
        yield sb.build(
            sorted=sorted_indices,
            line=7,
            explanation=f"Right half used up: copy {arr[k - 1]} into index {k - 1}.",
        )

    while j < len(right):
        arr[k] = right[j]
        j += 1
        k += 1
        yield sb.build(
            sorted=sorted_indices,
            line=7,
            explanation=f"Left half used up: copy {arr[k - 1]} into index {k - 1}.",
        )
