"""Puzzles on lists of integers."""

import heapq
import operator
from collections.abc import Sequence
from functools import reduce


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices ``(i, j)``, ``i < j``, with ``nums[i] + nums[j] == target``.

    The pair found first while scanning left to right is returned; None if there is none.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen[value] = index
    return None


def single_number(nums: Sequence[int]) -> int:
    """Return the value that appears an odd number of times when all others pair up."""
    return reduce(operator.xor, nums, 0)


def missing_number(nums: Sequence[int]) -> int:
    """Return the one value of ``0..len(nums)`` absent from ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def minimum_difference(nums: Sequence[int]) -> int:
    """Remove ``n/3`` elements and minimise (sum of first half) - (sum of second half).

    ``nums`` must have a length that is a positive multiple of three.
    """
    n = len(nums)
    if n == 0 or n % 3:
        raise ValueError("length of nums must be a positive multiple of 3")
    k = n // 3
    middle = nums[k : n - k]

    # Smallest k-sum of every prefix ending between k-1 and n-k-1.
    left_heap = [-value for value in nums[:k]]
    heapq.heapify(left_heap)
    left_sum = sum(nums[:k])
    left_mins = [left_sum]
    for value in middle:
        if value < -left_heap[0]:
            largest = -heapq.heapreplace(left_heap, -value)
            left_sum += value - largest
        left_mins.append(left_sum)

    # Largest k-sum of every suffix starting between k and n-k.
    right_heap = list(nums[n - k :])
    heapq.heapify(right_heap)
    right_sum = sum(right_heap)
    right_maxs = [right_sum]
    for value in reversed(middle):
        if value > right_heap[0]:
            smallest = heapq.heapreplace(right_heap, value)
            right_sum += value - smallest
        right_maxs.append(right_sum)
    right_maxs.reverse()

    return min(left - right for left, right in zip(left_mins, right_maxs))


def maximum_valid_subsequence_length(nums: Sequence[int], k: int) -> int:
    """Longest subsequence whose adjacent pair sums all share one residue modulo ``k``."""
    if k <= 0:
        raise ValueError("k must be positive")
    # best[a][b]: longest such subsequence ending with residues ..., a, b.
    best = [[0] * k for _ in range(k)]
    longest = 0
    for value in nums:
        current = value % k
        for previous, row in enumerate(best):
            row[current] = best[current][previous] + 1
            longest = max(longest, row[current])
    return longest


def max_unique_sum(nums: Sequence[int]) -> int:
    """Maximum sum of a subarray of distinct values after deleting any elements.

    Raises ValueError for an empty list.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    positives = {value for value in nums if value > 0}
    if positives:
        return sum(positives)
    return max(nums)


def sort_array(nums: Sequence[int]) -> list[int]:
    """Return a new list with the values of ``nums`` in ascending order (merge sort)."""
    items = list(nums)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return list(heapq.merge(sort_array(items[:mid]), sort_array(items[mid:])))