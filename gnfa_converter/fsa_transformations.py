from collections import defaultdict, deque
from typing import Set

from .automaton import Automaton, Edge, State


def _restrict(automaton: Automaton, keep: Set[int]) -> Automaton:
    """Copy of the automaton holding only the states in ``keep``."""
    return Automaton(
        start=automaton.start,
        states=[State(state.id, state.accept) for state in automaton.states if state.id in keep],
        edges=[
            Edge(edge.from_state, edge.to_state, edge.label)
            for edge in automaton.edges
            if edge.from_state in keep and edge.to_state in keep
        ],
        accept=[state for state in automaton.accept if state in keep],
    )


def remove_unreachable_states(automaton: Automaton) -> Automaton:
    """Remove states that are unreachable from the start state."""
    if not automaton.states:
        return _restrict(automaton, set())

    successors = defaultdict(set)
    for edge in automaton.edges:
        successors[edge.from_state].add(edge.to_state)

    # BFS from start state to find all reachable states
    reachable = {automaton.start}
    queue = deque([automaton.start])

    while queue:
        current = queue.popleft()
        for target in successors[current]:
            if target not in reachable:
                reachable.add(target)
                queue.append(target)

    return _restrict(automaton, reachable)


def remove_dead_states(automaton: Automaton) -> Automaton:
    """
    Remove states that cannot reach any accepting state.

    The start state is always kept so the result stays well-formed; if it is
    dead itself the result is a lone non-accepting start state.
    """
    if not automaton.states:
        return _restrict(automaton, set())

    # Build reverse graph
    reverse_graph = defaultdict(set)
    for edge in automaton.edges:
        reverse_graph[edge.to_state].add(edge.from_state)

    # BFS backwards from accepting states
    alive_states = set(automaton.accept)
    queue = deque(automaton.accept)

    while queue:
        state = queue.popleft()
        for predecessor in reverse_graph[state]:
            if predecessor not in alive_states:
                alive_states.add(predecessor)
                queue.append(predecessor)

    alive_states.add(automaton.start)
    return _restrict(automaton, alive_states)


def remove_useless_states(automaton: Automaton) -> Automaton:
    """Remove unreachable states first, then dead ones."""
    return remove_dead_states(remove_unreachable_states(automaton))
