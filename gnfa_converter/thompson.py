from typing import Dict, Iterable, List, Optional, Set, Tuple

from .automaton import Automaton
from .edge_algebra import EPSILON
from .exceptions import InvalidRegex

Fragment = Tuple[str, str]


class NFABuilder:
    """
    Accumulates an epsilon-NFA in the FSA dictionary format.

    States created by the construction itself are numbered after
    ``fresh_prefix``; states standing for the states of another automaton
    come from ``named_state`` and keep that automaton's identifiers.
    """

    def __init__(self, fresh_prefix: str = 'q'):
        self.fresh_prefix = fresh_prefix
        self.fresh_count = 0
        self.states: Set[str] = set()
        self.alphabet: Set[str] = set()
        self.transitions: Dict[str, Dict[str, List[str]]] = {}

    def new_state(self) -> str:
        state = f"{self.fresh_prefix}{self.fresh_count}"
        self.fresh_count += 1
        self.states.add(state)
        return state

    def named_state(self, key, prefix: str = 'n') -> str:
        if prefix == self.fresh_prefix:
            raise ValueError(f"Prefix {prefix!r} is reserved for fresh states")
        state = f"{prefix}{key}"
        self.states.add(state)
        return state

    def add_transition(self, from_state: str, symbol: str, to_state: str):
        self.transitions.setdefault(from_state, {}).setdefault(symbol, []).append(to_state)
        if symbol != EPSILON:
            self.alphabet.add(symbol)

    def link(self, from_state: str, to_state: str):
        """Join two states with an epsilon transition."""
        self.add_transition(from_state, EPSILON, to_state)

    def fragment(self, symbol: str = EPSILON) -> Fragment:
        """Two fresh states joined by a single transition on ``symbol``."""
        start, accept = self.new_state(), self.new_state()
        self.add_transition(start, symbol, accept)
        return start, accept

    def to_dict(self, start_state: str, accept_states: Iterable[str]) -> Dict:
        return {
            'states': sorted(self.states),
            'alphabet': sorted(self.alphabet),
            'transitions': self.transitions,
            'startingState': start_state,
            'acceptingStates': sorted(accept_states)
        }


class RegexParser:
    """
    Regex parser that builds an epsilon-NFA with Thompson's construction.

    Understands the expressions the converter emits: literal symbols,
    implicit concatenation, '|', postfix '*' and parentheses. An empty
    operand, such as either side of '()|(a)', stands for epsilon.
    """

    def __init__(self, regex: str, nfa: NFABuilder):
        self.regex = regex
        self.pos = 0
        self.nfa = nfa

    def peek(self) -> Optional[str]:
        return self.regex[self.pos] if self.pos < len(self.regex) else None

    def consume(self) -> Optional[str]:
        char = self.peek()
        if char is not None:
            self.pos += 1
        return char

    def parse(self) -> Fragment:
        """Parse the whole expression and return its (start, accept) states."""
        fragment = self.parse_union()
        if self.pos < len(self.regex):
            raise InvalidRegex(f"Unexpected character '{self.regex[self.pos]}' at position {self.pos}")
        return fragment

    def parse_union(self) -> Fragment:
        branches = [self.parse_concat()]
        while self.peek() == '|':
            self.consume()
            branches.append(self.parse_concat())

        if len(branches) == 1:
            return branches[0]

        start, accept = self.nfa.new_state(), self.nfa.new_state()
        for branch_start, branch_accept in branches:
            self.nfa.link(start, branch_start)
            self.nfa.link(branch_accept, accept)
        return start, accept

    def parse_concat(self) -> Fragment:
        # Empty operand
        if self.peek() in (None, '|', ')'):
            return self.nfa.fragment()

        start, accept = self.parse_postfix()
        while self.peek() not in (None, '|', ')'):
            next_start, next_accept = self.parse_postfix()
            self.nfa.link(accept, next_start)
            accept = next_accept
        return start, accept

    def parse_postfix(self) -> Fragment:
        inner_start, inner_accept = self.parse_atom()

        while self.peek() == '*':
            self.consume()
            # The fragment's own epsilon edge is the bypass
            start, accept = self.nfa.fragment()
            self.nfa.link(start, inner_start)
            self.nfa.link(inner_accept, accept)
            self.nfa.link(inner_accept, inner_start)
            inner_start, inner_accept = start, accept

        return inner_start, inner_accept

    def parse_atom(self) -> Fragment:
        char = self.peek()

        if char == '(':
            self.consume()
            fragment = self.parse_union()
            if self.peek() != ')':
                raise InvalidRegex(f"Expected ')' at position {self.pos}")
            self.consume()
            return fragment

        if char == '*':
            raise InvalidRegex(f"Unexpected '*' at position {self.pos} - postfix operators require a preceding element")

        return self.nfa.fragment(self.consume())


def regex_to_epsilon_nfa(regex: str) -> Dict:
    """
    Convert a regular expression to an epsilon-NFA using Thompson's construction.

    Args:
        regex (str): The regular expression to convert. The empty string is epsilon.

    Returns:
        Dict: An epsilon-NFA in the FSA dictionary format ('states', 'alphabet',
        'transitions', 'startingState', 'acceptingStates')

    Raises:
        InvalidRegex: If the expression is not well-formed
    """
    nfa_builder = NFABuilder()
    start_state, accept_state = RegexParser(regex, nfa_builder).parse()
    return nfa_builder.to_dict(start_state, [accept_state])


def empty_language_nfa() -> Dict:
    """An NFA that accepts nothing."""
    nfa_builder = NFABuilder()
    return nfa_builder.to_dict(nfa_builder.new_state(), [])


def automaton_to_epsilon_nfa(automaton: Automaton) -> Dict:
    """
    Expand a regex-labelled automaton into a plain epsilon-NFA.

    Each edge label is built with Thompson's construction and spliced in
    between the edge's endpoints with epsilon transitions. Original state n
    becomes 'n<n>' in the result.

    Raises:
        InvalidRegex: If an edge label is not a well-formed expression
    """
    if not automaton.states:
        return empty_language_nfa()

    nfa_builder = NFABuilder()
    named = {state.id: nfa_builder.named_state(state.id) for state in automaton.states}

    for edge in automaton.edges:
        try:
            label_start, label_accept = RegexParser(edge.label, nfa_builder).parse()
        except InvalidRegex as e:
            raise InvalidRegex(f"Edge {edge.from_state} -> {edge.to_state} label '{edge.label}': {e}")
        nfa_builder.link(named[edge.from_state], label_start)
        nfa_builder.link(label_accept, named[edge.to_state])

    return nfa_builder.to_dict(named[automaton.start], [named[state] for state in automaton.accept])
