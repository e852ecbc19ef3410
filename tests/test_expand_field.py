from cron_expander.core.errors import ParseError
from cron_expander.core.expand.expand_field import expand_field


def test_wildcard_covers_full_bounds():
    assert expand_field("*", 0, 59) == list(range(0, 60))
    assert expand_field("*", 1, 12) == list(range(1, 13))
    assert expand_field("*", 0, 6) == [0, 1, 2, 3, 4, 5, 6]


def test_single_value():
    assert expand_field("0", 0, 23) == [0]
    assert expand_field("31", 1, 31) == [31]


def test_range_is_inclusive():
    assert expand_field("1-5", 0, 6) == [1, 2, 3, 4, 5]
    assert expand_field("7-7", 0, 59) == [7]


def test_list_mixes_values_and_ranges():
    assert expand_field("1,2-5,10", 0, 59) == [1, 2, 3, 4, 5, 10]
    assert expand_field("1,15", 1, 31) == [1, 15]


def test_list_dedupes_and_sorts():
    assert expand_field("1-5,3-7", 0, 59) == [1, 2, 3, 4, 5, 6, 7]
    assert expand_field("30,10,10,20", 0, 59) == [10, 20, 30]


def test_list_elements_are_stripped():
    assert expand_field("1, 2", 0, 59) == [1, 2]


def test_list_with_wildcard_element():
    assert expand_field("*,5", 0, 6) == [0, 1, 2, 3, 4, 5, 6]


def test_step_over_wildcard():
    assert expand_field("*/15", 0, 59) == [0, 15, 30, 45]
    assert expand_field("*/5", 1, 12) == [1, 6, 11]


def test_step_over_range():
    assert expand_field("0-30/10", 0, 59) == [0, 10, 20, 30]
    assert expand_field("10-20/3", 0, 59) == [10, 13, 16, 19]


def test_step_over_bare_start_runs_to_field_max():
    assert expand_field("5/10", 0, 59) == [5, 15, 25, 35, 45, 55]
    assert expand_field("20/2", 0, 23) == [20, 22]


def test_step_larger_than_span():
    assert expand_field("*/100", 0, 59) == [0]


def test_value_out_of_bounds():
    for expr, lo, hi in [("70", 0, 59), ("0", 1, 31), ("13", 1, 12), ("7", 0, 6)]:
        try:
            expand_field(expr, lo, hi)
            assert False, f"expected ParseError for {expr}"
        except ParseError as e:
            assert e.code == "E_INVALID_VALUE"
            assert f"Must be between {lo} and {hi}" in e.message


def test_range_out_of_bounds():
    try:
        expand_field("50-70", 0, 59)
        assert False, "expected ParseError"
    except ParseError as e:
        assert e.code == "E_RANGE_OUT_OF_BOUNDS"
        assert e.message == "Range 50-70 is out of bounds (0-59)"


def test_range_reversed_is_out_of_bounds():
    try:
        expand_field("5-1", 0, 59)
        assert False, "expected ParseError"
    except ParseError as e:
        assert e.code == "E_RANGE_OUT_OF_BOUNDS"


def test_range_below_min():
    try:
        expand_field("0-5", 1, 31)
        assert False, "expected ParseError"
    except ParseError as e:
        assert e.code == "E_RANGE_OUT_OF_BOUNDS"


def test_non_numeric_range():
    try:
        expand_field("a-5", 0, 59)
        assert False, "expected ParseError"
    except ParseError as e:
        assert e.code == "E_INVALID_RANGE"
        assert e.message == "Invalid range: a-5"


def test_non_numeric_value():
    try:
        expand_field("abc", 0, 59)
        assert False, "expected ParseError"
    except ParseError as e:
        assert e.code == "E_INVALID_VALUE"


def test_zero_step_rejected():
    try:
        expand_field("*/0", 0, 59)
        assert False, "expected ParseError"
    except ParseError as e:
        assert e.code == "E_INVALID_STEP"
        assert e.message == "Invalid step value: 0"


def test_non_numeric_step_rejected():
    try:
        expand_field("*/x", 0, 59)
        assert False, "expected ParseError"
    except ParseError as e:
        assert e.code == "E_INVALID_STEP"


def test_list_element_error_propagates():
    try:
        expand_field("1,99", 0, 59)
        assert False, "expected ParseError"
    except ParseError as e:
        assert e.code == "E_INVALID_VALUE"
        assert e.expression == "99"
