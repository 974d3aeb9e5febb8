"""
step.py — Algorithm Step Snapshot
==================================
Every algorithm is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything the visualizer
needs to render one frame of the bar chart:

    • The whole array as it looks right now
    • Which indices are being compared / were just swapped
    • Which indices are already in their final position
    • Which indices are "of interest" (pivot, insertion key, search cursor)
    • Which line of pseudocode is executing right now
    • A plain-English explanation of *why* this step happened
      (Learning Mode reads this)

Design decisions:
  - Step is a plain frozen dataclass.  It is a SNAPSHOT: `array` is a
    copy taken when the step is built, never the list the algorithm
    keeps mutating.
  - The four marker fields are Optional.  None means "not part of this
    step", which is different from an empty list (merge sort emits
    sorted=[] on purpose).  to_dict() drops the None ones.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Any, Iterable


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        array           : Full array state at this instant.
        compared        : Indices being compared (at most 2), or None.
        swapped         : Indices whose values were just exchanged (at most 2), or None.
        sorted          : Indices known to hold their final value, or None.
        highlight       : Indices of interest with no compare/swap meaning, or None.
        step_number     : 0-based index of this step in the run.
        pseudocode_line : 0-based index of the pseudocode line executing now.
        explanation     : Human-readable "why" text for Learning Mode.
        is_final        : True on the very last step of the run.
    """

    array:            List[int]
    compared:         Optional[List[int]] = None
    swapped:          Optional[List[int]] = None
    sorted:           Optional[List[int]] = None
    highlight:        Optional[List[int]] = None
    step_number:      int                 = 0
    pseudocode_line:  int                 = 0
    explanation:      str                 = ""
    is_final:         bool                = False

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"array": list(self.array)}
        for name in ("compared", "swapped", "sorted", "highlight"):
            value = getattr(self, name)
            if value is not None:
                data[name] = list(value)
        data["step_number"] = self.step_number
        data["pseudocode_line"] = self.pseudocode_line
        data["explanation"] = self.explanation
        data["is_final"] = self.is_final
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Step":
        return cls(
            array=list(data["array"]),
            compared=data.get("compared"),
            swapped=data.get("swapped"),
            sorted=data.get("sorted"),
            highlight=data.get("highlight"),
            step_number=data.get("step_number", 0),
            pseudocode_line=data.get("pseudocode_line", 0),
            explanation=data.get("explanation", ""),
            is_final=data.get("is_final", False),
        )


# ---------------------------------------------------------------------------
# Convenience builder so algorithms don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Per-run helper that algorithms use to construct Steps cleanly.

    It holds a reference to the working array (so every build() takes a
    fresh snapshot of it) and numbers the steps as they are produced.

    Usage inside an algorithm generator:
        arr = list(array)
        sb = StepBuilder(arr)
        yield sb.build(compared=[j, j + 1], sorted=sb.suffix(i),
                       line=3, explanation="Compare neighbours.")
    """

    def __init__(self, arr: List[int]):
        self.arr = arr
        self.step_no = 0

    def build(
        self,
        compared: Optional[Iterable[int]] = None,
        swapped: Optional[Iterable[int]] = None,
        sorted: Optional[Iterable[int]] = None,
        highlight: Optional[Iterable[int]] = None,
        line: int = 0,
        explanation: str = "",
        is_final: bool = False,
    ) -> Step:
        step = Step(
            array=list(self.arr),
            compared=_opt_list(compared),
            swapped=_opt_list(swapped),
            sorted=_opt_list(sorted),
            highlight=_opt_list(highlight),
            step_number=self.step_no,
            pseudocode_line=line,
            explanation=explanation,
            is_final=is_final,
        )
        self.step_no += 1
        return step

    def final(self, line: int = 0, explanation: str = "") -> Step:
        """The closing step of a sort: every index marked sorted."""
        return self.build(
            sorted=self.full_range(),
            line=line,
            explanation=explanation,
            is_final=True,
        )

    # -- index-range helpers --
    def full_range(self) -> List[int]:
        return list(range(len(self.arr)))

    def prefix(self, length: int) -> List[int]:
        """Indices [0, length)."""
        return list(range(length))

    def suffix(self, length: int) -> List[int]:
        """The last `length` indices, listed from the end inward."""
        n = len(self.arr)
        return [n - 1 - k for k in range(length)]


def _opt_list(values: Optional[Iterable[int]]) -> Optional[List[int]]:
    if values is None:
        return None
    return list(values)
