"""Multi-pattern string search with the Aho-Corasick automaton."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class _State:
    children: dict[str, _State] = field(default_factory=dict)
    suffix: Optional[_State] = None
    output: Optional[_State] = None
    pattern: Optional[int] = None


class AhoCorasick:
    """An automaton that finds every occurrence of a set of patterns in one pass.

    A pattern listed more than once is matched only under its last position
    in the list; the earlier copies get no matches.
    """

    def __init__(self, patterns: Iterable[str]) -> None:
        self.patterns = list(patterns)
        self._root = _State()
        self._build_trie()
        self._build_links()

    def _build_trie(self) -> None:
        for index, pattern in enumerate(self.patterns):
            if not pattern:
                raise ValueError("patterns must not be empty")
            state = self._root
            for char in pattern:
                state = state.children.setdefault(char, _State())
            state.pattern = index

    def _build_links(self) -> None:
        root = self._root
        root.suffix = root
        queue: deque[_State] = deque()
        for child in root.children.values():
            child.suffix = root
            queue.append(child)
        while queue:
            state = queue.popleft()
            assert state.suffix is not None
            for char, child in state.children.items():
                fallback = state.suffix
                while char not in fallback.children and fallback is not root:
                    assert fallback.suffix is not None
                    fallback = fallback.suffix
                child.suffix = fallback.children.get(char, root)
                queue.append(child)
            link = state.suffix
            state.output = link if link.pattern is not None else link.output

    def search(self, text: str) -> list[list[int]]:
        """Return, for each pattern, the start indices of its occurrences in ``text``.

        Occurrences may overlap; each list is in increasing order.
        """
        results: list[list[int]] = [[] for _ in self.patterns]
        root = self._root
        state = root
        position = 0
        while position < len(text):
            char = text[position]
            following = state.children.get(char)
            if following is not None:
                state = following
                if state.pattern is not None:
                    self._record(results, state.pattern, position)
                link = state.output
                while link is not None:
                    assert link.pattern is not None
                    self._record(results, link.pattern, position)
                    link = link.output
                position += 1
                continue
            while state is not root and char not in state.children:
                assert state.suffix is not None
                state = state.suffix
            if char not in state.children:
                position += 1
        return results

    def _record(self, results: list[list[int]], index: int, end: int) -> None:
        results[index].append(end - len(self.patterns[index]) + 1)


def find_all(patterns: Iterable[str], text: str) -> list[list[int]]:
    """Return the start indices of every pattern's occurrences in ``text``."""
    return AhoCorasick(patterns).search(text)