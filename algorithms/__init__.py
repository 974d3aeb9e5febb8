"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm, generate

REGISTRY is a dict keyed by the AlgorithmId values:
    {
        "bubbleSort": AlgoInfo(key, name, category, complexity, fn, pseudocode, …),
        …
    }

The set of algorithms is closed: AlgorithmId lists all seven, and the
module refuses to import if REGISTRY and AlgorithmId ever drift apart.
Unknown keys are not an error here — lookups return None.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional

from algorithms.step import Step
from algorithms.bubble_sort    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.selection_sort import selection_sort as _selection, PSEUDOCODE as _selection_pc
from algorithms.insertion_sort import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc
from algorithms.merge_sort     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from algorithms.quick_sort     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc
from algorithms.linear_search  import linear_search  as _linear,    PSEUDOCODE as _linear_pc
from algorithms.binary_search  import binary_search  as _binary,    PSEUDOCODE as _binary_pc


# ---------------------------------------------------------------------------
# Identifiers & categories
# ---------------------------------------------------------------------------
class AlgorithmId(Enum):
    BUBBLE_SORT    = "bubbleSort"
    SELECTION_SORT = "selectionSort"
    INSERTION_SORT = "insertionSort"
    MERGE_SORT     = "mergeSort"
    QUICK_SORT     = "quickSort"
    LINEAR_SEARCH  = "linearSearch"
    BINARY_SEARCH  = "binarySearch"


class Category(Enum):
    SORTING   = "sorting"
    SEARCHING = "searching"


@dataclass(frozen=True)
class Complexity:
    best:    str
    average: str
    worst:   str


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgoInfo:
    key:              str                 # registry key, e.g. "bubbleSort"
    name:             str                 # display name, e.g. "Bubble Sort"
    category:         Category
    complexity:       Complexity          # time: best / average / worst
    fn:               Callable            # the generator function
    pseudocode:       List[str]           # lines for the side-panel
    complexity_space: str  = ""           # e.g. "O(n)"
    stable:           bool = False        # keeps equal values in input order?
    description:      str  = ""           # one-liner for the UI card

    @property
    def is_search(self) -> bool:
        return self.category is Category.SEARCHING

    def to_dict(self) -> Dict[str, object]:
        return {
            "key":      self.key,
            "name":     self.name,
            "category": self.category.value,
            "complexity": {
                "best":    self.complexity.best,
                "average": self.complexity.average,
                "worst":   self.complexity.worst,
            },
            "space":       self.complexity_space,
            "stable":      self.stable,
            "description": self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    AlgorithmId.BUBBLE_SORT.value: AlgoInfo(
        key="bubbleSort", name="Bubble Sort", category=Category.SORTING,
        complexity=Complexity("O(n)", "O(n²)", "O(n²)"),
        fn=_bubble, pseudocode=_bubble_pc,
        complexity_space="O(1)", stable=True,
        description="Repeatedly compares neighbours and swaps them when out of order.",
    ),

    AlgorithmId.SELECTION_SORT.value: AlgoInfo(
        key="selectionSort", name="Selection Sort", category=Category.SORTING,
        complexity=Complexity("O(n²)", "O(n²)", "O(n²)"),
        fn=_selection, pseudocode=_selection_pc,
        complexity_space="O(1)",
        description="Finds the minimum of the unsorted part and moves it to the front.",
    ),

    AlgorithmId.INSERTION_SORT.value: AlgoInfo(
        key="insertionSort", name="Insertion Sort", category=Category.SORTING,
        complexity=Complexity("O(n)", "O(n²)", "O(n²)"),
        fn=_insertion, pseudocode=_insertion_pc,
        complexity_space="O(1)", stable=True,
        description="Builds the sorted array one item at a time by inserting each into place.",
    ),

    AlgorithmId.MERGE_SORT.value: AlgoInfo(
        key="mergeSort", name="Merge Sort", category=Category.SORTING,
        complexity=Complexity("O(n log n)", "O(n log n)", "O(n log n)"),
        fn=_merge, pseudocode=_merge_pc,
        complexity_space="O(n)", stable=True,
        description="Divide and conquer: split in half, sort each half, merge the results.",
    ),

    AlgorithmId.QUICK_SORT.value: AlgoInfo(
        key="quickSort", name="Quick Sort", category=Category.SORTING,
        complexity=Complexity("O(n log n)", "O(n log n)", "O(n²)"),
        fn=_quick, pseudocode=_quick_pc,
        complexity_space="O(log n)",
        description="Partitions around a pivot, then sorts each side recursively.",
    ),

    AlgorithmId.LINEAR_SEARCH.value: AlgoInfo(
        key="linearSearch", name="Linear Search", category=Category.SEARCHING,
        complexity=Complexity("O(1)", "O(n)", "O(n)"),
        fn=_linear, pseudocode=_linear_pc,
        complexity_space="O(1)",
        description="Checks every element in turn until the target turns up.",
    ),

    AlgorithmId.BINARY_SEARCH.value: AlgoInfo(
        key="binarySearch", name="Binary Search", category=Category.SEARCHING,
        complexity=Complexity("O(1)", "O(log n)", "O(log n)"),
        fn=_binary, pseudocode=_binary_pc,
        complexity_space="O(1)",
        description="Halves the search window of a sorted array on every probe.",
    ),
}

if list(REGISTRY) != [a.value for a in AlgorithmId]:
    raise RuntimeError("REGISTRY does not cover AlgorithmId exactly")


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithm_ids() -> List[str]:
    """Registry keys in declaration order."""
    return list(REGISTRY)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_category(category: Category) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if a.category is category]


def generate(key: str, array: List[int], target: Optional[int] = None) -> Optional[Iterator[Step]]:
    """
    Start a fresh trace for `key` over `array`.

    Search algorithms receive `target`; sorting algorithms ignore it.
    Returns None when `key` is not a registered algorithm.  The returned
    generator is lazy — drain it (list(...)) before playback.
    """
    info = REGISTRY.get(key)
    if info is None:
        return None
    if info.is_search:
        return info.fn(array, target)
    return info.fn(array)


__all__ = [
    "AlgorithmId",
    "Category",
    "Complexity",
    "AlgoInfo",
    "REGISTRY",
    "Step",
    "get_algorithm",
    "list_algorithm_ids",
    "list_algorithms",
    "algorithms_by_category",
    "generate",
]
