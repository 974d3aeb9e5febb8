"""
insertion_sort.py — Insertion Sort
===================================
Grows a sorted prefix one element at a time.  The element just past the
prefix (the key) is highlighted, then larger prefix values are shifted
right one by one until the key's slot is found.
"""

from typing import Generator, List

from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "def insertion_sort(arr):",                       # 0
    "    for i in 1 .. n-1:",                         # 1
    "        key ← arr[i]",                           # 2
    "        j ← i - 1",                              # 3
    "        while j ≥ 0 and arr[j] > key:",          # 4
    "            arr[j+1] ← arr[j]",                  # 5
    "            j ← j - 1",                          # 6
    "        arr[j+1] ← key",                         # 7
    "    return arr",                                 # 8
]


def insertion_sort(array: List[int]) -> Generator[Step, None, None]:
    arr = list(array)
    sb  = StepBuilder(arr)

    for i in range(1, len(arr)):
        key = arr[i]
        j   = i - 1

        yield sb.build(
            highlight=[i],
            sorted=sb.prefix(i),
            line=2,
            explanation=f"Pick {key} (index {i}) as the key to insert into the sorted prefix.",
        )

        while j >= 0 and arr[j] > key:
            yield sb.build(
                compared=[j, j + 1],
                sorted=sb.prefix(i),
                line=4,
                explanation=f"{arr[j]} > {key}: shift {arr[j]} one slot to the right.",
            )
            arr[j + 1] = arr[j]
            j -= 1

        arr[j + 1] = key

        yield sb.build(
            sorted=sb.prefix(i + 1),
            line=7,
            explanation=f"Insert {key} at index {j + 1}. The first {i + 1} values are in order.",
        )

    yield sb.final(line=8, explanation="The sorted prefix now covers the whole array.")
