import pytest

from ekit.sliceset import (
    contains,
    contains_all,
    contains_all_func,
    contains_any,
    contains_any_func,
    contains_func,
    diff_set,
    diff_set_func,
    intersect_set,
    intersect_set_func,
    symmetric_diff_set,
    symmetric_diff_set_func,
    union_set,
    union_set_func,
)


def eq(a, b):
    return a == b


CONTAINS_CASES = [
    ([1, 4, 6, 2, 6], 4, True),
    ([1, 4, 6, 2, 6], 3, False),
    ([], 4, False),
    (None, 4, False),
]


@pytest.mark.parametrize("src, dst, want", CONTAINS_CASES)
def test_contains(src, dst, want):
    assert contains(src, dst) is want


@pytest.mark.parametrize("src, dst, want", CONTAINS_CASES)
def test_contains_func(src, dst, want):
    assert contains_func(src, lambda v: v == dst) is want


CONTAINS_ANY_CASES = [
    ([1, 4, 6, 2, 6], [1, 6], True),
    ([1, 4, 6, 2, 6], [7, 0], False),
    ([1, 1, 8], [1, 1], True),
    ([], [1], False),
    (None, [1], False),
]


@pytest.mark.parametrize("src, dst, want", CONTAINS_ANY_CASES)
def test_contains_any(src, dst, want):
    assert contains_any(src, dst) is want


@pytest.mark.parametrize("src, dst, want", CONTAINS_ANY_CASES)
def test_contains_any_func(src, dst, want):
    assert contains_any_func(src, dst, eq) is want


CONTAINS_ALL_CASES = [
    ([1, 4, 6, 2, 6], [1, 4, 6, 2], True),
    ([1, 4, 6, 2, 6], [1, 4, 6, 2, 6, 7], False),
    ([], [1], False),
    (None, [], True),
    (None, None, True),
]


@pytest.mark.parametrize("src, dst, want", CONTAINS_ALL_CASES)
def test_contains_all(src, dst, want):
    assert contains_all(src, dst) is want


@pytest.mark.parametrize("src, dst, want", CONTAINS_ALL_CASES)
def test_contains_all_func(src, dst, want):
    assert contains_all_func(src, dst, eq) is want


def test_contains_examples():
    assert contains([1, 2, 3], 3) is True
    assert contains_func([1, 2, 3], lambda v: v == 3) is True
    assert contains_all([1, 2, 3], [3, 1]) is True
    assert contains_all([1, 2, 3], [3, 1, 4]) is False
    assert contains_all_func([1, 2, 3], [3, 1], eq) is True
    assert contains_all_func([1, 2, 3], [3, 1, 4], eq) is False
    assert contains_any([1, 2, 3], [3, 6]) is True
    assert contains_any([1, 2, 3], [4, 5, 9]) is False
    assert contains_any_func([1, 2, 3], [3, 1], eq) is True
    assert contains_all_func([1, 2, 3], [4, 7, 6], eq) is False


DIFF_CASES = [
    ([1, 3, 5, 7], [1, 3, 5], [7]),
    ([1, 3, 5], [1, 3, 5, 7], []),
    ([1, 3, 5, 7, 7], [1, 3, 5], [7]),
    ([1, 1, 3, 5, 7], [1, 3, 5, 5], [7]),
]


@pytest.mark.parametrize("src, dst, want", DIFF_CASES)
def test_diff_set(src, dst, want):
    assert sorted(diff_set(src, dst)) == want


@pytest.mark.parametrize("src, dst, want", DIFF_CASES)
def test_diff_set_func(src, dst, want):
    assert sorted(diff_set_func(src, dst, eq)) == want


def test_diff_examples():
    assert sorted(diff_set([1, 3, 2, 2, 4], [3, 4, 5, 6])) == [1, 2]
    assert diff_set_func([1, 3, 2, 2, 4], [3, 4, 5, 6], eq) == [1, 2]


INTERSECT_CASES = [
    ([1, 3, 5, 7], [1, 3, 5], [1, 3, 5]),
    ([], [1, 3, 5, 7], []),
    (None, [1, 3, 5, 7], []),
    ([1, 3, 5, 5], [1, 3, 5], [1, 3, 5]),
    ([1, 3, 5, 5], [], []),
    ([1, 3, 5, 5], None, []),
    ([1, 1, 3, 5, 7], [1, 3, 5, 5], [1, 3, 5]),
]


@pytest.mark.parametrize("src, dst, want", INTERSECT_CASES)
def test_intersect_set(src, dst, want):
    assert sorted(intersect_set(src, dst)) == want


@pytest.mark.parametrize("src, dst, want", INTERSECT_CASES)
def test_intersect_set_func(src, dst, want):
    assert sorted(intersect_set_func(src, dst, eq)) == want


def test_intersect_examples():
    assert sorted(intersect_set([1, 2, 3, 3, 4], [1, 1, 3])) == [1, 3]
    assert intersect_set([1, 2, 3, 3, 4], [5, 7]) == []
    assert sorted(intersect_set_func([1, 2, 3, 3, 4], [1, 1, 3], eq)) == [1, 3]
    assert intersect_set_func([1, 2, 3, 3, 4], [5, 7], eq) == []


SYMMETRIC_CASES = [
    ([1, 2, 3], [4, 5, 6], [1, 2, 3, 4, 5, 6]),
    ([1, 2, 3], [3, 4, 5], [1, 2, 4, 5]),
    ([1, 2, 3], [2, 3], [1]),
    ([4], [4, 5, 6], [5, 6]),
    ([1, 2, 3], [1, 2, 3], []),
    ([1, 2, 3], [], [1, 2, 3]),
    ([], [4, 5, 6], [4, 5, 6]),
    ([], [], []),
    (None, [4, 5, 6], [4, 5, 6]),
    ([4, 5, 6], None, [4, 5, 6]),
    (None, None, []),
]


@pytest.mark.parametrize("src, dst, want", SYMMETRIC_CASES)
def test_symmetric_diff_set(src, dst, want):
    assert sorted(symmetric_diff_set(src, dst)) == want


@pytest.mark.parametrize("src, dst, want", SYMMETRIC_CASES)
def test_symmetric_diff_set_func(src, dst, want):
    assert sorted(symmetric_diff_set_func(src, dst, eq)) == want


def test_symmetric_diff_examples():
    assert sorted(symmetric_diff_set([1, 3, 4, 2], [2, 5, 7, 3])) == [1, 4, 5, 7]
    assert sorted(symmetric_diff_set_func([1, 3, 4, 2], [2, 5, 7, 3], eq)) == [
        1,
        4,
        5,
        7,
    ]


UNION_CASES = [
    ([1, 2, 3], [4, 5, 6, 1], [1, 2, 3, 4, 5, 6]),
    ([], [1, 3], [1, 3]),
    ([1, 3], [], [1, 3]),
    ([], [], []),
]


@pytest.mark.parametrize("src, dst, want", UNION_CASES)
def test_union_set(src, dst, want):
    assert sorted(union_set(src, dst)) == want


@pytest.mark.parametrize("src, dst, want", UNION_CASES)
def test_union_set_func(src, dst, want):
    assert sorted(union_set_func(src, dst, eq)) == want


def test_union_examples():
    assert sorted(union_set([1, 3, 4, 5], [1, 4, 7])) == [1, 3, 4, 5, 7]
    assert sorted(union_set_func([1, 3, 4, 5], [1, 4, 7], eq)) == [1, 3, 4, 5, 7]


def test_func_variants_work_on_unhashable_elements():
    src = [{"id": 1}, {"id": 2}, {"id": 2}]
    dst = [{"id": 2}, {"id": 3}]

    def same_id(a, b):
        return a["id"] == b["id"]

    assert diff_set_func(src, dst, same_id) == [{"id": 1}]
    assert intersect_set_func(src, dst, same_id) == [{"id": 2}]
    assert sorted(
        item["id"] for item in symmetric_diff_set_func(src, dst, same_id)
    ) == [1, 3]
    assert sorted(item["id"] for item in union_set_func(src, dst, same_id)) == [
        1,
        2,
        3,
    ]


def test_set_results_have_no_duplicates():
    src = [1, 1, 2, 2, 3]
    dst = [2, 2, 4, 4]
    for result in (
        diff_set(src, dst),
        intersect_set(src, dst),
        symmetric_diff_set(src, dst),
        union_set(src, dst),
    ):
        assert len(result) == len(set(result))