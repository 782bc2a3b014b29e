import random

import pytest

from pqbench.benchmark import (
    SizeResult,
    clear_structure,
    fill_sorted_structure,
    fill_structure,
    format_results,
    main,
    measure_cases,
    measure_random,
)
from pqbench.binary_heap import BinaryHeap
from pqbench.dynamic_array import DynamicArrayQueue
from pqbench.linked_list import LinkedListQueue

STRUCTURES = [
    ("LinkedListQueue", LinkedListQueue),
    ("DynamicArrayQueue", DynamicArrayQueue),
    ("BinaryHeap", BinaryHeap),
]


@pytest.mark.parametrize("name, factory", STRUCTURES)
def test_fill_structure_adds_bounded_entries(name, factory):
    structure = factory()
    fill_structure(structure, 30, random.Random(7))
    entries = list(structure)
    assert len(entries) == 30
    assert all(0 <= p < 30 and 0 <= v < 30 for p, v in entries)


def test_fill_structure_is_reproducible_with_seed():
    first, second = DynamicArrayQueue(), DynamicArrayQueue()
    fill_structure(first, 25, random.Random(3))
    fill_structure(second, 25, random.Random(3))
    assert list(first) == list(second)


def test_fill_sorted_structure_pushes_identity_pairs():
    structure = DynamicArrayQueue()
    fill_sorted_structure(structure, 12)
    assert list(structure) == [(i, i) for i in range(12)]


@pytest.mark.parametrize("name, factory", STRUCTURES)
def test_clear_structure_empties(name, factory):
    structure = factory()
    fill_sorted_structure(structure, 15)
    clear_structure(structure)
    assert structure.is_empty()
    assert len(structure) == 0


@pytest.mark.parametrize("name, factory", STRUCTURES)
def test_measure_random_reports_each_size(name, factory):
    structure = factory()
    sizes = [10, 20]
    results = measure_random(structure, sizes, 5, random.Random(1))
    assert [r.size for r in results] == sizes
    for result in results:
        assert set(result.timings) == {"push", "pop", "modify_priority", "peek"}
        assert all(ns >= 0 for ns in result.timings.values())
    assert structure.is_empty()


@pytest.mark.parametrize("name, factory", STRUCTURES)
def test_measure_random_survives_more_reps_than_elements(name, factory):
    structure = factory()
    results = measure_random(structure, [2], 10, random.Random(5))
    assert len(results) == 1
    assert structure.is_empty()


@pytest.mark.parametrize("name, factory", STRUCTURES)
def test_measure_cases_reports_two_groups(name, factory):
    structure = factory()
    results = measure_cases(name, structure, [8, 16], 4)
    assert [r.size for r in results] == [8, 16]
    for result in results:
        assert len(result.groups) == 2
        assert len(result.timings) == 6
        assert all(ns >= 0 for ns in result.timings.values())
    assert structure.is_empty()


def test_measure_cases_rejects_unknown_name():
    with pytest.raises(ValueError):
        measure_cases("NoSuchQueue", DynamicArrayQueue(), [5], 1)


def test_format_results_contains_every_timing():
    results = [
        SizeResult(7, [{"push": 11, "pop": 13}]),
        SizeResult(9, [{"push": 17}, {"pop": 19}]),
    ]
    text = format_results("Sample", results)
    assert "Sample" in text.splitlines()[0]
    for value in ("7", "9", "11", "13", "17", "19"):
        assert value in text
    assert text.count("\n\n") == 2


def test_format_results_single_group_has_no_blank_lines():
    text = format_results("Q", [SizeResult(3, [{"peek": 5}])])
    assert "" not in text.splitlines()
    assert len(text.splitlines()) == 3


def test_main_writes_both_reports(tmp_path):
    results_path = tmp_path / "random.txt"
    cases_path = tmp_path / "cases.txt"
    status = main([
        "--sizes", "10", "20",
        "--reps", "3",
        "--seed", "2",
        "--results", str(results_path),
        "--cases", str(cases_path),
    ])
    assert status == 0
    for path in (results_path, cases_path):
        text = path.read_text(encoding="utf-8")
        for name, _ in STRUCTURES:
            assert name in text


def test_main_fails_when_report_cannot_be_opened(tmp_path):
    status = main([
        "--sizes", "5",
        "--reps", "1",
        "--results", str(tmp_path),
        "--cases", str(tmp_path / "cases.txt"),
    ])
    assert status == 1
    assert not (tmp_path / "cases.txt").exists()


def test_main_rejects_non_positive_size():
    with pytest.raises(SystemExit):
        main(["--sizes", "0"])