"""Dynamic-programming problems: 0/1 knapsack and longest common subsequence."""

from collections.abc import Sequence


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the greatest total value of items fitting in ``capacity``, each used once."""
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    if len(weights) != len(values):
        raise ValueError(f"got {len(weights)} weights but {len(values)} values")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def longest_common_subsequence(first: Sequence, second: Sequence) -> int:
    """Return the length of the longest subsequence shared by both sequences."""
    previous = [0] * (len(second) + 1)
    for item in first:
        current = [0]
        for j, other in enumerate(second, start=1):
            if item == other:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]