from typing import Dict, Iterator, List, Optional, Tuple

from .edge_algebra import merge

EdgeKey = Tuple[int, int]


class TransitionIndex:
    """
    Regex-labelled edges of a GNFA keyed by (from_state, to_state).

    There is at most one edge per ordered pair: inserting a parallel edge
    merges its label into the existing one by alternation. A missing edge
    and an epsilon edge are different things, ``label()`` returns None for
    the former and '' for the latter.
    """

    def __init__(self):
        self._edges: Dict[EdgeKey, str] = {}

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[Tuple[int, int, str]]:
        for (from_state, to_state), label in self._edges.items():
            yield from_state, to_state, label

    def __contains__(self, key: EdgeKey) -> bool:
        return key in self._edges

    def label(self, from_state: int, to_state: int) -> Optional[str]:
        return self._edges.get((from_state, to_state))

    def insert(self, from_state: int, to_state: int, regex: str) -> str:
        """
        Add an edge, merging with an existing (from_state, to_state) edge.

        Returns:
            str: The label now stored on the edge
        """
        key = (from_state, to_state)
        if key in self._edges:
            self._edges[key] = merge(self._edges[key], regex)
        else:
            self._edges[key] = regex
        return self._edges[key]

    def edges_from(self, state: int) -> List[Tuple[int, str]]:
        """Outgoing (to_state, label) pairs of ``state``, self-loop excluded."""
        return [
            (to_state, label)
            for (from_state, to_state), label in self._edges.items()
            if from_state == state and to_state != state
        ]

    def edges_to(self, state: int) -> List[Tuple[int, str]]:
        """Incoming (from_state, label) pairs of ``state``, self-loop excluded."""
        return [
            (from_state, label)
            for (from_state, to_state), label in self._edges.items()
            if to_state == state and from_state != state
        ]

    def self_loop(self, state: int) -> Optional[str]:
        return self._edges.get((state, state))

    def degree(self, state: int) -> int:
        """Number of edges touching ``state``, a self-loop counted once."""
        return sum(1 for key in self._edges if state in key)

    def remove_state(self, state: int) -> int:
        """
        Drop every edge incident to ``state``.

        Returns:
            int: The number of edges removed
        """
        incident = [key for key in self._edges if state in key]
        for key in incident:
            del self._edges[key]
        return len(incident)
