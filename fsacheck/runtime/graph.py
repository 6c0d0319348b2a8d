"""Graph traversal over an automaton's transition table."""

from collections import deque
from typing import List, Optional, Sequence


def reachable(table: Sequence[Sequence[Optional[str]]], start: int) -> List[bool]:
    """
    Breadth-first traversal from ``start`` following edges ``source -> target``.

    :param table: Square transition table; a non-None cell is an edge.
    :param start: Index of the state to start from.
    :return: Visited flags, one per state.
    """
    size = len(table)
    visited = [False] * size
    visited[start] = True
    queue = deque([start])

    while queue:
        current = queue.popleft()
        for target, symbol in enumerate(table[current]):
            if symbol is None or visited[target]:
                continue
            visited[target] = True
            queue.append(target)

    return visited


def unreachable(table: Sequence[Sequence[Optional[str]]], start: int) -> List[int]:
    """Indices of the states the traversal from ``start`` never visits."""
    return [index for index, seen in enumerate(reachable(table, start)) if not seen]
