from collections import deque
from typing import Dict, FrozenSet, Iterable, Set, Tuple


def epsilon_closure(fsa: Dict, states: Iterable[str]) -> FrozenSet[str]:
    """Compute the epsilon closure of a set of states."""
    closure = set(states)
    stack = list(closure)

    while stack:
        state = stack.pop()
        for epsilon_target in fsa['transitions'].get(state, {}).get('', []):
            if epsilon_target not in closure:
                closure.add(epsilon_target)
                stack.append(epsilon_target)

    return frozenset(closure)


def move(fsa: Dict, states: Iterable[str], symbol: str) -> FrozenSet[str]:
    """Compute all states reachable from given states on given symbol"""
    result = set()
    for state in states:
        result.update(fsa['transitions'].get(state, {}).get(symbol, []))
    return frozenset(result)


def _initial(fsa: Dict) -> FrozenSet[str]:
    if fsa['startingState'] not in fsa['states']:
        return frozenset()
    return epsilon_closure(fsa, [fsa['startingState']])


def _is_accepting(fsa: Dict, states: FrozenSet[str]) -> bool:
    return bool(states & set(fsa['acceptingStates']))


def accepts(fsa: Dict, input_string: str) -> bool:
    """Run an epsilon-NFA on a string of single-character symbols."""
    current = _initial(fsa)
    for symbol in input_string:
        current = epsilon_closure(fsa, move(fsa, current, symbol))
        if not current:
            return False
    return _is_accepting(fsa, current)


def are_automata_equivalent(automaton1: Dict, automaton2: Dict) -> Tuple[bool, Dict]:
    """
    Check if two epsilon-NFAs accept the same language.

    Both automata are determinised on the fly with the subset construction
    and explored in lockstep; the first reachable pair of subsets that
    disagree on acceptance gives a shortest distinguishing string.

    Args:
        automaton1: First automaton in FSA dictionary format
        automaton2: Second automaton in FSA dictionary format

    Returns:
        A tuple of (is_equivalent, details) where details holds the
        alphabet, the number of explored subset pairs and, when the
        languages differ, a 'counterexample' string and which side accepts it.
    """
    alphabet = sorted(set(automaton1['alphabet']) | set(automaton2['alphabet']))
    details = {
        'automaton1_states': len(automaton1['states']),
        'automaton2_states': len(automaton2['states']),
        'alphabet': alphabet,
    }

    start = (_initial(automaton1), _initial(automaton2))
    visited: Set[Tuple[FrozenSet[str], FrozenSet[str]]] = {start}
    queue = deque([(start, '')])

    while queue:
        (states1, states2), word = queue.popleft()
        accepting1 = _is_accepting(automaton1, states1)
        accepting2 = _is_accepting(automaton2, states2)

        if accepting1 != accepting2:
            details['explored_pairs'] = len(visited)
            details['counterexample'] = word
            details['accepted_by'] = 'automaton1' if accepting1 else 'automaton2'
            details['reason'] = f"'{word}' is accepted by only one automaton"
            return False, details

        for symbol in alphabet:
            pair = (epsilon_closure(automaton1, move(automaton1, states1, symbol)),
                    epsilon_closure(automaton2, move(automaton2, states2, symbol)))
            if pair not in visited:
                visited.add(pair)
                queue.append((pair, word + symbol))

    details['explored_pairs'] = len(visited)
    details['reason'] = 'Subset constructions agree on every reachable pair'
    return True, details
