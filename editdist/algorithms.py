"""Insert/delete edit distance between two strings, computed four ways.

Only insertions and deletions cost 1 each. There is no substitution, so the
distance between ``a`` and ``b`` is ``len(a) + len(b) - 2 * LCS(a, b)``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

__all__ = [
    "ALGORITHMS",
    "edit_distance_dp",
    "edit_distance_dp_optimized",
    "edit_distance_memo",
    "edit_distance_recursive",
    "get_algorithm",
]


def edit_distance_recursive(str1: Sequence, str2: Sequence) -> int:
    """Plain exponential-time recursion; only usable on short inputs."""

    def solve(i: int, j: int) -> int:
        if i == 0:
            return j
        if j == 0:
            return i
        if str1[i - 1] == str2[j - 1]:
            return solve(i - 1, j - 1)
        return 1 + min(solve(i, j - 1), solve(i - 1, j))

    return solve(len(str1), len(str2))


def edit_distance_memo(str1: Sequence, str2: Sequence) -> int:
    """Top-down recursion with memoisation, driven by an explicit stack."""
    memo: dict[tuple[int, int], int] = {}

    def known(i: int, j: int) -> int | None:
        if i == 0:
            return j
        if j == 0:
            return i
        return memo.get((i, j))

    start = (len(str1), len(str2))
    result = known(*start)
    if result is not None:
        return result

    stack = [start]
    while stack:
        i, j = stack[-1]
        if (i, j) in memo:
            stack.pop()
            continue
        if str1[i - 1] == str2[j - 1]:
            diagonal = known(i - 1, j - 1)
            if diagonal is None:
                stack.append((i - 1, j - 1))
                continue
            memo[(i, j)] = diagonal
        else:
            insert_cost = known(i, j - 1)
            delete_cost = known(i - 1, j)
            if insert_cost is None or delete_cost is None:
                if insert_cost is None:
                    stack.append((i, j - 1))
                if delete_cost is None:
                    stack.append((i - 1, j))
                continue
            memo[(i, j)] = 1 + min(insert_cost, delete_cost)
        stack.pop()

    return memo[start]


def edit_distance_dp(str1: Sequence, str2: Sequence) -> int:
    """Bottom-up dynamic programming over the full table."""
    l1, l2 = len(str1), len(str2)
    table = [[0] * (l2 + 1) for _ in range(l1 + 1)]
    for i, row in enumerate(table):
        row[0] = i
    table[0] = list(range(l2 + 1))

    for i, c1 in enumerate(str1, start=1):
        row, above = table[i], table[i - 1]
        for j, c2 in enumerate(str2, start=1):
            if c1 == c2:
                row[j] = above[j - 1]
            else:
                row[j] = 1 + min(row[j - 1], above[j])

    return table[l1][l2]


def edit_distance_dp_optimized(str1: Sequence, str2: Sequence) -> int:
    """Bottom-up dynamic programming keeping only two rows."""
    previous = list(range(len(str2) + 1))
    for i, c1 in enumerate(str1, start=1):
        current = [i] + [0] * len(str2)
        for j, c2 in enumerate(str2, start=1):
            if c1 == c2:
                current[j] = previous[j - 1]
            else:
                current[j] = 1 + min(current[j - 1], previous[j])
        previous = current
    return previous[-1]


ALGORITHMS: dict[str, Callable[[Sequence, Sequence], int]] = {
    "recursive": edit_distance_recursive,
    "memo": edit_distance_memo,
    "dp": edit_distance_dp,
    "dpopt": edit_distance_dp_optimized,
}


def get_algorithm(name: str) -> Callable[[Sequence, Sequence], int]:
    """Return the algorithm registered under ``name``."""
    try:
        return ALGORITHMS[name]
    except KeyError:
        choices = ", ".join(ALGORITHMS)
        raise ValueError(f"unknown algorithm {name!r}; choose one of: {choices}") from None