import pytest

from algobox.stacks import (
    MOD,
    asteroid_collision,
    infix_to_postfix,
    is_valid,
    largest_rectangle_area,
    next_greater_element,
    next_greater_elements,
    precedence,
    sum_subarray_mins,
)


def _operands(text):
    return [c for c in text if c.isalnum()]


# asteroid_collision

@pytest.mark.parametrize("rocks", [[1, 2, 3], [-1, -2, -3], [-4, -1, 2, 7]])
def test_asteroids_that_never_meet_survive(rocks):
    assert asteroid_collision(rocks) == rocks


def test_equal_asteroids_destroy_each_other():
    assert asteroid_collision([8, -8]) == []


def test_smaller_left_mover_is_destroyed():
    assert asteroid_collision([5, 10, -5]) == [5, 10]


def test_larger_left_mover_survives():
    assert asteroid_collision([3, 2, -9]) == [-9]


@pytest.mark.parametrize("rocks", [[10, 2, -5], [1, -2, -2, -2], [4, 7, 1, 1, 2, -3, -7, 17, 15, -16]])
def test_collision_result_is_stable(rocks):
    result = asteroid_collision(rocks)
    assert asteroid_collision(result) == result
    assert all(not (a > 0 > b) for a, b in zip(result, result[1:]))
    assert all(value in rocks for value in result)


# sum_subarray_mins

def test_sum_subarray_mins_example():
    assert sum_subarray_mins([3, 1, 2, 4]) == 17


def test_sum_subarray_mins_single_element():
    assert sum_subarray_mins([42]) == 42


def test_sum_subarray_mins_empty():
    assert sum_subarray_mins([]) == 0


@pytest.mark.parametrize("arr", [[11, 81, 94, 43, 3], [5, 5, 2, 9, 2], [1, 2, 3, 4, 5, 6]])
def test_sum_subarray_mins_is_reversal_invariant(arr):
    assert sum_subarray_mins(arr) == sum_subarray_mins(arr[::-1])


def test_sum_subarray_mins_stays_below_modulus():
    result = sum_subarray_mins([30000] * 3000)
    assert 0 <= result < MOD


def test_sum_subarray_mins_grows_when_prepending_larger():
    base = [4, 2, 6]
    assert sum_subarray_mins([9] + base) > sum_subarray_mins(base)


# precedence and infix_to_postfix

@pytest.mark.parametrize("op, rank", [("^", 3), ("*", 2), ("/", 2), ("+", 1), ("-", 1), ("(", -1), ("%", -1)])
def test_precedence(op, rank):
    assert precedence(op) == rank


def test_infix_single_operand():
    assert infix_to_postfix("x") == "x"


def test_infix_simple_sum():
    assert infix_to_postfix("a+b") == "ab+"


def test_infix_example_expression():
    assert infix_to_postfix("a+b*(c^d-e)^(f+g*h)-i") == "abcd^e-fgh*+^*+i-"


@pytest.mark.parametrize("expr", ["a+b*c", "(a+b)*c", "A*(B+C)/D-9", "a^b^c"])
def test_infix_keeps_operand_order_and_drops_parens(expr):
    result = infix_to_postfix(expr)
    assert _operands(result) == _operands(expr)
    assert "(" not in result and ")" not in result
    assert sorted(c for c in result if not c.isalnum()) == sorted(
        c for c in expr if not c.isalnum() and c not in "()"
    )


def test_infix_higher_precedence_binds_first():
    assert infix_to_postfix("a+b*c").endswith("*+")
    assert infix_to_postfix("(a+b)*c").endswith("*")


def test_infix_unmatched_closing_paren_raises():
    with pytest.raises(ValueError):
        infix_to_postfix("a+b)")


# largest_rectangle_area

def test_largest_rectangle_example():
    assert largest_rectangle_area([2, 1, 5, 6, 2, 3]) == 10


def test_largest_rectangle_empty():
    assert largest_rectangle_area([]) == 0


def test_largest_rectangle_single_bar():
    assert largest_rectangle_area([7]) == 7


@pytest.mark.parametrize("heights", [[2, 4], [6, 2, 5, 4, 5, 1, 6], [1, 1, 1, 9]])
def test_largest_rectangle_reversal_and_bounds(heights):
    area = largest_rectangle_area(heights)
    assert area == largest_rectangle_area(heights[::-1])
    assert area >= max(heights)
    assert area >= min(heights) * len(heights)


# next_greater_element

def test_next_greater_element_example():
    assert next_greater_element([4, 1, 2], [1, 3, 4, 2]) == [-1, 3, -1]


def test_next_greater_element_zero_reported_as_missing():
    assert next_greater_element([-1], [-1, 0]) == [-1]


@pytest.mark.parametrize("nums2", [[1, 3, 4, 2], [9, 8, 7], [2, 7, 1, 8, 2, 8]])
def test_next_greater_element_results_are_greater(nums2):
    result = next_greater_element(nums2, nums2)
    for value, found in zip(nums2, result):
        assert found == -1 or (found > value and found in nums2)


def test_next_greater_element_missing_query():
    assert next_greater_element([100], [1, 2, 3]) == [-1]


# next_greater_elements

def test_next_greater_elements_example():
    assert next_greater_elements([1, 2, 1]) == [2, -1, 2]


def test_next_greater_elements_empty():
    assert next_greater_elements([]) == []


@pytest.mark.parametrize("nums", [[1, 2, 3, 4, 3], [5, 4, 3, 2, 1], [3, 3, 3]])
def test_next_greater_elements_invariants(nums):
    result = next_greater_elements(nums)
    assert len(result) == len(nums)
    assert result[nums.index(max(nums))] == -1
    for value, found in zip(nums, result):
        assert found == -1 or found > value


# is_valid

@pytest.mark.parametrize("text", ["", "()", "()[]{}", "{[()]}", "([]{})"])
def test_is_valid_accepts_balanced(text):
    assert is_valid(text) is True


@pytest.mark.parametrize("text", ["(]", "([)]", "(", ")", "{{}"])
def test_is_valid_rejects_unbalanced(text):
    assert is_valid(text) is False