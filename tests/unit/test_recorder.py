"""Tests for the Recorder and run comparison."""

import json

import pytest

from engine.recorder import Recorder, RunMetrics, compare


def recorded(key, array, target=None):
    rec = Recorder()
    rec.start(key, array, target)
    rec.run_to_completion()
    return rec


class TestRecorder:
    def test_unknown_algorithm_raises(self):
        with pytest.raises(ValueError):
            Recorder().start("shellSort", [1, 2])

    def test_run_before_start_raises(self):
        with pytest.raises(RuntimeError):
            Recorder().run_to_completion()

    def test_get_metrics_before_and_after_run(self):
        rec = Recorder()
        rec.start("insertionSort", [2, 1])
        assert rec.get_metrics() is None
        m = rec.run_to_completion()
        assert rec.get_metrics() is m

    def test_sorting_metrics(self):
        rec = recorded("bubbleSort", [3, 2, 1])
        m = rec.metrics
        assert m.algo_name == "Bubble Sort"
        assert m.category == "sorting"
        assert m.array_size == 3
        assert m.total_steps == 7
        assert (m.comparisons, m.swaps) == (4, 6)
        assert m.target is None
        assert m.found is False
        assert m.memory_bytes > 0

    def test_search_found(self):
        m = recorded("linearSearch", [5, 3, 8, 1], 8).metrics
        assert m.found is True
        assert m.found_index == 2
        assert m.target == 8

    def test_search_not_found(self):
        m = recorded("binarySearch", [5, 3, 8, 1], 4).metrics
        assert m.found is False
        assert m.found_index is None

    def test_input_array_untouched(self):
        values = [9, 1, 5]
        recorded("quickSort", values)
        assert values == [9, 1, 5]

    def test_export_is_json_serialisable(self):
        rec = recorded("mergeSort", [4, 1, 3])
        data = json.loads(json.dumps(rec.export()))
        assert data["algo_key"] == "mergeSort"
        assert data["array"] == [4, 1, 3]
        assert len(data["steps"]) == rec.metrics.total_steps
        assert data["steps"][-1]["sorted"] == [0, 1, 2]
        assert data["metrics"]["total_steps"] == rec.metrics.total_steps


class TestCompare:
    def test_winners(self):
        left = recorded("bubbleSort", [5, 4, 3, 2, 1])
        right = recorded("insertionSort", [5, 4, 3, 2, 1])
        result = compare(left, right)
        assert result.left.algo_name == "Bubble Sort"
        assert result.right.algo_name == "Insertion Sort"
        assert result.winner_steps in ("Bubble Sort", "Insertion Sort", "tie")
        assert result.winner_swaps == "Insertion Sort"

    def test_tie(self):
        left = recorded("mergeSort", [1, 2, 3])
        right = recorded("mergeSort", [1, 2, 3])
        result = compare(left, right)
        assert result.winner_comparisons == "tie"
        assert result.winner_steps == "tie"

    def test_missing_metrics_default(self):
        result = compare(Recorder(), Recorder())
        assert result.left == RunMetrics()
        assert result.winner_swaps == "tie"
