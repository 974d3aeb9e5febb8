"""Tests for the algorithm registry and the generate() entry point."""

import types

import pytest

from algorithms import (
    REGISTRY,
    AlgorithmId,
    Category,
    algorithms_by_category,
    generate,
    get_algorithm,
    list_algorithm_ids,
    list_algorithms,
)
from algorithms.step import Step

EXPECTED_IDS = [
    "bubbleSort",
    "selectionSort",
    "insertionSort",
    "mergeSort",
    "quickSort",
    "linearSearch",
    "binarySearch",
]


class TestLookup:
    def test_ids_in_declaration_order(self):
        assert list_algorithm_ids() == EXPECTED_IDS
        assert [a.value for a in AlgorithmId] == EXPECTED_IDS

    def test_known_key(self):
        info = get_algorithm("quickSort")
        assert info.name == "Quick Sort"
        assert info.category is Category.SORTING
        assert info.complexity.worst == "O(n²)"

    def test_unknown_key_is_none(self):
        assert get_algorithm("bogoSort") is None

    def test_every_entry_keyed_by_its_own_key(self):
        for key, info in REGISTRY.items():
            assert info.key == key
            assert info.pseudocode

    def test_descriptors_are_immutable(self):
        info = get_algorithm("bubbleSort")
        with pytest.raises(AttributeError):
            info.name = "Renamed"

    def test_list_algorithms_matches_ids(self):
        assert [a.key for a in list_algorithms()] == EXPECTED_IDS


class TestCategories:
    def test_sorting(self):
        keys = [a.key for a in algorithms_by_category(Category.SORTING)]
        assert keys == EXPECTED_IDS[:5]

    def test_searching(self):
        keys = [a.key for a in algorithms_by_category(Category.SEARCHING)]
        assert keys == ["linearSearch", "binarySearch"]
        assert all(get_algorithm(k).is_search for k in keys)

    def test_to_dict_shape(self):
        data = get_algorithm("binarySearch").to_dict()
        assert data["category"] == "searching"
        assert data["complexity"] == {"best": "O(1)", "average": "O(log n)", "worst": "O(log n)"}


class TestGenerate:
    def test_unknown_key_returns_none(self):
        assert generate("nope", [1, 2, 3]) is None

    def test_returns_lazy_generator(self):
        trace = generate("bubbleSort", [3, 1, 2])
        assert isinstance(trace, types.GeneratorType)
        assert isinstance(next(trace), Step)

    @pytest.mark.parametrize("key", EXPECTED_IDS[:5])
    def test_sorting_ignores_target(self, key):
        assert list(generate(key, [4, 2, 9], target=2)) == list(generate(key, [4, 2, 9]))

    def test_search_receives_target(self):
        steps = list(generate("linearSearch", [5, 3, 8, 1], 8))
        assert steps[-1].sorted == [2]

    @pytest.mark.parametrize("key", EXPECTED_IDS)
    def test_every_algorithm_ends_with_final_step(self, key):
        steps = list(generate(key, [6, 2, 9, 4], 9))
        assert steps[-1].is_final
