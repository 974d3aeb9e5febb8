"""Tests for the Step snapshot and StepBuilder."""

from algorithms.step import Step, StepBuilder


class TestStepDict:
    def test_absent_markers_are_omitted(self):
        data = Step(array=[1, 2], highlight=[0]).to_dict()
        assert data["highlight"] == [0]
        assert "compared" not in data
        assert "swapped" not in data
        assert "sorted" not in data

    def test_empty_marker_is_kept(self):
        data = Step(array=[1, 2], sorted=[]).to_dict()
        assert data["sorted"] == []

    def test_from_dict_restores_step(self):
        step = Step(array=[3, 1], compared=[0, 1], sorted=[], step_number=4,
                    pseudocode_line=2, explanation="x")
        assert Step.from_dict(step.to_dict()) == step


class TestStepBuilder:
    def test_snapshots_are_independent_of_working_array(self):
        arr = [3, 1]
        sb = StepBuilder(arr)
        first = sb.build()
        arr[0], arr[1] = arr[1], arr[0]
        second = sb.build()
        assert first.array == [3, 1]
        assert second.array == [1, 3]

    def test_marker_lists_are_copied(self):
        acc = [0]
        step = StepBuilder([1, 2]).build(sorted=acc)
        acc.append(1)
        assert step.sorted == [0]

    def test_numbers_steps(self):
        sb = StepBuilder([1])
        assert [sb.build().step_number for _ in range(3)] == [0, 1, 2]

    def test_range_helpers(self):
        sb = StepBuilder([9, 8, 7, 6])
        assert sb.prefix(2) == [0, 1]
        assert sb.suffix(2) == [3, 2]
        assert sb.full_range() == [0, 1, 2, 3]

    def test_final_marks_all(self):
        step = StepBuilder([2, 1, 3]).final()
        assert step.sorted == [0, 1, 2]
        assert step.is_final
