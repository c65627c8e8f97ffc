"""Puzzles on the decimal digits of integers."""

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign.

    Returns 0 when the reversed value does not fit in a signed 32-bit integer.
    """
    sign = -1 if x < 0 else 1
    reversed_value = sign * int(str(abs(x))[::-1])
    if not INT32_MIN <= reversed_value <= INT32_MAX:
        return 0
    return reversed_value


def is_palindrome(x: int) -> bool:
    """Return True if ``x`` reads the same forwards and backwards in base 10."""
    if x < 0:
        return False
    text = str(x)
    return text == text[::-1]