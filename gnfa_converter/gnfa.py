import logging
from typing import Dict, List, Optional, Set

from .automaton import Automaton, check_automaton
from .conf import get_setting
from .edge_algebra import EPSILON
from .transition_index import TransitionIndex

logger = logging.getLogger(__name__)


class GNFA:
    """Generalised NFA for the state elimination algorithm."""

    def __init__(self, start_state: Optional[int] = None):
        self.states: Dict[int, bool] = {}  # state -> accept flag, insertion ordered
        self.transitions = TransitionIndex()
        self.start_state = start_state
        self.accept_states: Set[int] = set()

    def add_state(self, state: int, accept: bool = False):
        """Add a state to the GNFA."""
        self.states[state] = accept
        if accept:
            self.accept_states.add(state)

    def add_transition(self, from_state: int, to_state: int, regex: str) -> str:
        """Add a transition labelled with a regex, merging parallel edges."""
        return self.transitions.insert(from_state, to_state, regex)

    def remove_state(self, state: int):
        """Drop a state and every transition touching it."""
        del self.states[state]
        self.accept_states.discard(state)
        self.transitions.remove_state(state)

    def new_state_id(self) -> int:
        """An identifier larger than any state in the GNFA."""
        return max(self.states) + 1 if self.states else 0

    @property
    def accept_state(self) -> Optional[int]:
        """The single accept state, once normalised."""
        if len(self.accept_states) != 1:
            return None
        return next(iter(self.accept_states))

    def is_interior(self, state: int) -> bool:
        return state != self.start_state and not self.states[state]

    def interior_states(self) -> List[int]:
        return sorted(state for state in self.states if self.is_interior(state))

    def __repr__(self):
        return (f"GNFA(start={self.start_state}, accept={sorted(self.accept_states)}, "
                f"states={len(self.states)}, transitions={len(self.transitions)})")


def automaton_to_gnfa(automaton: Automaton) -> GNFA:
    """Copy an automaton into a GNFA, collapsing parallel edges."""
    gnfa = GNFA(automaton.start)
    accept = set(automaton.accept)

    for state in automaton.states:
        gnfa.add_state(state.id, state.id in accept)

    for edge in automaton.edges:
        gnfa.add_transition(edge.from_state, edge.to_state, edge.label)

    return gnfa


def add_super_accept(gnfa: GNFA) -> int:
    """
    Replace several accept states with a single fresh one.

    Every prior accept state gets an epsilon edge to the new state and loses
    its accept flag.

    Returns:
        int: The identifier of the new accept state
    """
    previous = sorted(gnfa.accept_states)
    super_accept = gnfa.new_state_id()

    for state in previous:
        gnfa.states[state] = False
    gnfa.accept_states.clear()

    gnfa.add_state(super_accept, accept=True)
    for state in previous:
        gnfa.add_transition(state, super_accept, EPSILON)

    logger.debug("Merged accept states %s into super-accept %s", previous, super_accept)
    return super_accept


def needs_super_start(gnfa: GNFA) -> bool:
    """True if the start state accepts or can be re-entered along an edge."""
    start = gnfa.start_state
    if gnfa.states[start]:
        return True
    return any(to_state == start for _, to_state, _ in gnfa.transitions)


def add_super_start(gnfa: GNFA) -> int:
    """Put a fresh non-accepting start state in front of the current one."""
    super_start = gnfa.new_state_id()
    gnfa.add_state(super_start)
    gnfa.add_transition(super_start, gnfa.start_state, EPSILON)
    logger.debug("Added super-start %s in front of %s", super_start, gnfa.start_state)
    gnfa.start_state = super_start
    return super_start


def normalise_gnfa(gnfa: GNFA, super_start: Optional[bool] = None) -> GNFA:
    """
    Prepare a GNFA for state elimination, in place.

    Several accept states are funnelled into a single fresh accept state and,
    when ``super_start`` is enabled, a fresh start state is added if the
    original start accepts or has incoming edges.

    Args:
        gnfa: A GNFA built from a well-formed automaton
        super_start: Overrides the SUPER_START setting when not None
    """
    if not gnfa.states:
        return gnfa

    if len(gnfa.accept_states) > 1:
        add_super_accept(gnfa)

    if super_start is None:
        super_start = get_setting('SUPER_START')

    if super_start and gnfa.accept_states and needs_super_start(gnfa):
        add_super_start(gnfa)

    logger.debug("Normalised %r", gnfa)
    return gnfa


def normalise(automaton: Automaton, super_start: Optional[bool] = None) -> GNFA:
    """
    Validate an automaton and turn it into a normalised GNFA.

    Returns:
        GNFA: A fresh GNFA; the automaton itself is left untouched

    Raises:
        MalformedAutomaton: If the automaton references unknown states
    """
    check_automaton(automaton)
    return normalise_gnfa(automaton_to_gnfa(automaton), super_start)
