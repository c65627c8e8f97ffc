import pytest
from hypothesis import given
from hypothesis import strategies as st

from puzzlekit.integers import is_palindrome, reverse_integer

INT32_MAX = 2147483647
INT32_MIN = -2147483648


def test_reverse_integer_example():
    assert reverse_integer(123) == 321


@given(st.integers(min_value=-99999, max_value=99999).filter(lambda v: v % 10 != 0))
def test_reverse_is_an_involution_without_trailing_zeros(x):
    assert reverse_integer(reverse_integer(x)) == x


@given(st.integers(min_value=0, max_value=10**6))
def test_reverse_keeps_sign(x):
    assert reverse_integer(-x) == -reverse_integer(x)


@given(st.integers(min_value=-10**6, max_value=10**6))
def test_trailing_zeros_are_dropped(x):
    assert reverse_integer(x * 10) == reverse_integer(x)


@pytest.mark.parametrize("x", [INT32_MAX, INT32_MIN, 1534236469])
def test_overflow_gives_zero(x):
    assert reverse_integer(x) == 0


@given(st.integers(min_value=-10**9, max_value=10**9))
def test_reverse_stays_in_32_bit_range(x):
    assert INT32_MIN <= reverse_integer(x) <= INT32_MAX


@given(st.integers(max_value=-1))
def test_negative_numbers_are_not_palindromes(x):
    assert is_palindrome(x) is False


@given(st.integers(min_value=1, max_value=10**5))
def test_mirrored_digits_form_palindrome(x):
    text = str(x)
    assert is_palindrome(int(text + text[::-1])) is True


@given(st.integers(min_value=0, max_value=10**8).filter(lambda v: v % 10 != 0))
def test_palindrome_matches_reversal(x):
    assert is_palindrome(x) == (reverse_integer(x) == x)


def test_number_with_trailing_zero_is_not_palindrome():
    assert is_palindrome(10) is False