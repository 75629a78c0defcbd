from dataclasses import dataclass, field
from typing import Dict, List

from .exceptions import MalformedAutomaton


@dataclass
class State:
    id: int
    accept: bool = False


@dataclass
class Edge:
    from_state: int
    to_state: int
    label: str = ''


@dataclass
class Automaton:
    """
    A labeled NFA as handed to the converter.

    Edge labels are regular expressions over the input alphabet; the empty
    label is an epsilon edge. The ``accept`` list is authoritative for
    conversion, the per-state flags mirror it.
    """
    start: int
    states: List[State] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    accept: List[int] = field(default_factory=list)

    def state_ids(self) -> List[int]:
        return [state.id for state in self.states]

    @classmethod
    def from_dict(cls, data: Dict) -> 'Automaton':
        """
        Build an automaton from its JSON form.

        Args:
            data: A dictionary with the following keys:
                - start: The starting state identifier
                - states: List of {'id': int, 'accept': bool}
                - edges: List of {'from': int, 'to': int, 'label': str}
                - accept: Optional list of accepting identifiers. When omitted
                  it is derived from the states' accept flags.

        Returns:
            Automaton: The parsed automaton (not yet validated against its
            own references, see ``validate_automaton``)

        Raises:
            MalformedAutomaton: If keys are missing or values have the wrong type
        """
        if not isinstance(data, dict):
            raise MalformedAutomaton('Automaton must be a dictionary')

        for key in ('start', 'states', 'edges'):
            if key not in data:
                raise MalformedAutomaton(f'Missing required key: {key}')

        if not _is_identifier(data['start']):
            raise MalformedAutomaton('start must be an integer')
        if not isinstance(data['states'], list):
            raise MalformedAutomaton('states must be a list')
        if not isinstance(data['edges'], list):
            raise MalformedAutomaton('edges must be a list')

        states = []
        for entry in data['states']:
            if not isinstance(entry, dict) or not _is_identifier(entry.get('id')) \
                    or not isinstance(entry.get('accept', False), bool):
                raise MalformedAutomaton(f'Invalid state entry: {entry!r}')
            states.append(State(entry['id'], entry.get('accept', False)))

        edges = []
        for entry in data['edges']:
            if not isinstance(entry, dict):
                raise MalformedAutomaton(f'Invalid edge entry: {entry!r}')
            from_state, to_state = entry.get('from'), entry.get('to')
            label = entry.get('label', '')
            if not _is_identifier(from_state) or not _is_identifier(to_state):
                raise MalformedAutomaton(f'Edge endpoints must be integers: {entry!r}')
            if not isinstance(label, str):
                raise MalformedAutomaton(f'Edge label must be a string: {entry!r}')
            edges.append(Edge(from_state, to_state, label))

        if 'accept' in data:
            accept = data['accept']
            if not isinstance(accept, list) or not all(_is_identifier(a) for a in accept):
                raise MalformedAutomaton('accept must be a list of integers')
            accept = list(dict.fromkeys(accept))
            for state in states:
                state.accept = state.id in accept
        else:
            accept = [state.id for state in states if state.accept]

        return cls(start=data['start'], states=states, edges=edges, accept=accept)

    def to_dict(self) -> Dict:
        return {
            'start': self.start,
            'states': [{'id': state.id, 'accept': state.accept} for state in self.states],
            'edges': [
                {'from': edge.from_state, 'to': edge.to_state, 'label': edge.label}
                for edge in self.edges
            ],
            'accept': list(self.accept),
        }


def _is_identifier(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_automaton(automaton: Automaton) -> Dict:
    """
    Validates that every reference inside the automaton points at a real state.

    Args:
        automaton: The automaton to validate

    Returns:
        Dict: Validation result with 'valid' boolean and optional 'error' message
    """
    ids = automaton.state_ids()
    known = set(ids)

    if len(known) != len(ids):
        return {'valid': False, 'error': 'Duplicate state identifier'}

    # An empty automaton has nothing for the start state to point at
    if ids and automaton.start not in known:
        return {'valid': False, 'error': f'Starting state {automaton.start} not in states list'}

    for state in automaton.accept:
        if state not in known:
            return {'valid': False, 'error': f'Accepting state {state} not in states list'}

    for edge in automaton.edges:
        if edge.from_state not in known or edge.to_state not in known:
            return {
                'valid': False,
                'error': f'Edge {edge.from_state} -> {edge.to_state} references an unknown state'
            }

    return {'valid': True}


def check_automaton(automaton: Automaton) -> None:
    """Raise ``MalformedAutomaton`` unless ``validate_automaton`` passes."""
    validation = validate_automaton(automaton)
    if not validation['valid']:
        raise MalformedAutomaton(validation['error'])


def coerce_automaton(data) -> Automaton:
    """Accept either an ``Automaton`` or its dictionary form."""
    if isinstance(data, Automaton):
        return data
    return Automaton.from_dict(data)
