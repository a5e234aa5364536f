import pytest

from echolab.sorting import DEMO_VALUES, bubble_sort, format_values, main, selection_sort

SOURCE_LISTS = [
    [9, 1, 10, 6, 32, 11, 0, 34, 22, 18],
    [9, 1, 10, 6, 32, 11, 0, 34, 22, 18, -7, -21],
    [9, 1, 10, 68, 32, 11, 0, 34, 22, 18, -12, 5],
    [1, 4, -5, 65, 11, -89, 12, 3, 16],
    [],
    [42],
    [3, 3, 1, 1, 2, 2],
    [5, 4, 3, 2, 1],
]


@pytest.mark.parametrize("values", SOURCE_LISTS)
def test_bubble_sort_matches_builtin_sorted(values):
    assert bubble_sort(values) == sorted(values)


@pytest.mark.parametrize("values", SOURCE_LISTS)
def test_selection_sort_matches_builtin_sorted(values):
    assert selection_sort(values) == sorted(values)


def test_source_lists_pinned():
    assert bubble_sort([9, 1, 10, 6, 32, 11, 0, 34, 22, 18, -7, -21]) == [
        -21, -7, 0, 1, 6, 9, 10, 11, 18, 22, 32, 34,
    ]
    assert selection_sort([1, 4, -5, 65, 11, -89, 12, 3, 16]) == [
        -89, -5, 1, 3, 4, 11, 12, 16, 65,
    ]


def test_bubble_sort_input_is_not_modified():
    values = [3, 1, 2]
    assert bubble_sort(values) == [1, 2, 3]
    assert values == [3, 1, 2]


def test_selection_sort_input_is_not_modified():
    values = [3, 1, 2]
    assert selection_sort(values) == [1, 2, 3]
    assert values == [3, 1, 2]


def test_bubble_sort_accepts_any_iterable():
    assert bubble_sort(iter((2, -1, 0))) == [-1, 0, 2]


def test_selection_sort_accepts_any_iterable():
    assert selection_sort(iter((2, -1, 0))) == [-1, 0, 2]


def test_bubble_sort_result_is_permutation():
    values = [7, -3, 7, 0, 12, -3]
    result = bubble_sort(values)
    assert sorted(result) == sorted(values)
    assert all(a <= b for a, b in zip(result, result[1:]))


def test_selection_sort_result_is_permutation():
    values = [7, -3, 7, 0, 12, -3]
    result = selection_sort(values)
    assert sorted(result) == sorted(values)
    assert all(a <= b for a, b in zip(result, result[1:]))


def test_format_values_trailing_space():
    assert format_values([0, 1, -7]) == "0 1 -7 "


def test_format_values_empty():
    assert format_values([]) == ""


def test_main_default_demo(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "0 1 6 9 10 11 18 22 32 34 \n"


def test_main_selection_with_numbers(capsys):
    assert main(["--algorithm", "selection", "4", "-5", "1"]) == 0
    assert capsys.readouterr().out == "-5 1 4 \n"


def test_main_demo_values_sorted(capsys):
    main(["--algorithm", "bubble"])
    printed = capsys.readouterr().out.split()
    assert [int(x) for x in printed] == sorted(DEMO_VALUES)


def test_main_rejects_non_integer():
    with pytest.raises(SystemExit):
        main(["abc"])