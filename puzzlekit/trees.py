"""Puzzles on trees."""

from collections.abc import Sequence
from functools import reduce
from itertools import combinations
from operator import xor


def minimum_score(nums: Sequence[int], edges: Sequence[Sequence[int]]) -> int:
    """Cut two edges of a tree and minimise the spread of the three component XORs.

    ``nums[i]`` is the value of node ``i``; ``edges`` must form a tree on
    at least three nodes.
    """
    n = len(nums)
    if n < 3:
        raise ValueError("the tree must have at least three nodes")
    if len(edges) != n - 1:
        raise ValueError("a tree on n nodes has exactly n - 1 edges")

    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)

    parent = [-1] * n
    visited = [False] * n
    visited[0] = True
    order: list[int] = []
    stack = [0]
    while stack:
        node = stack.pop()
        order.append(node)
        for neighbour in adjacency[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                parent[neighbour] = node
                stack.append(neighbour)
    if len(order) != n:
        raise ValueError("edges do not connect all nodes")

    entry = {node: position for position, node in enumerate(order)}
    size = [1] * n
    subtree_xor = list(nums)
    for node in reversed(order):
        if parent[node] >= 0:
            size[parent[node]] += size[node]
            subtree_xor[parent[node]] ^= subtree_xor[node]

    def contains(ancestor: int, node: int) -> bool:
        return entry[ancestor] <= entry[node] < entry[ancestor] + size[ancestor]

    total = reduce(xor, nums, 0)
    cuts = [v if parent[v] == u else u for u, v in edges]

    def spread(a: int, c: int) -> int:
        if contains(a, c):
            parts = (subtree_xor[c], subtree_xor[a] ^ subtree_xor[c], total ^ subtree_xor[a])
        elif contains(c, a):
            parts = (subtree_xor[a], subtree_xor[c] ^ subtree_xor[a], total ^ subtree_xor[c])
        else:
            parts = (subtree_xor[a], subtree_xor[c], total ^ subtree_xor[a] ^ subtree_xor[c])
        return max(parts) - min(parts)

    return min(spread(a, c) for a, c in combinations(cuts, 2))