import logging
from typing import Iterable, List, Optional

from .conf import get_setting
from .edge_algebra import concat, star
from .gnfa import GNFA

logger = logging.getLogger(__name__)


def eliminate_state(gnfa: GNFA, state: int):
    """
    Remove an interior state, rerouting every path that went through it.

    For each incoming edge (u, state, r) and outgoing edge (state, v, s) the
    bypass edge (u, v, r L* s) is merged into the GNFA, where L is the
    self-loop label of the removed state. When u == v the bypass becomes a
    self-loop on u.

    Raises:
        ValueError: If the state is the start state, an accept state, or unknown
    """
    if state not in gnfa.states:
        raise ValueError(f"State {state} is not in the GNFA")
    if not gnfa.is_interior(state):
        raise ValueError(f"State {state} is a start or accept state and cannot be eliminated")

    loop = gnfa.transitions.self_loop(state) or ''
    loop_star = star(loop)

    incoming = gnfa.transitions.edges_to(state)
    outgoing = gnfa.transitions.edges_from(state)

    for from_state, in_regex in incoming:
        prefix = concat(in_regex, loop_star)
        for to_state, out_regex in outgoing:
            gnfa.add_transition(from_state, to_state, concat(prefix, out_regex))

    gnfa.remove_state(state)
    logger.debug("Eliminated state %s (%d in, %d out, self-loop %r)",
                 state, len(incoming), len(outgoing), loop)


def choose_state(gnfa: GNFA, order: Optional[str] = None) -> Optional[int]:
    """
    Pick the next interior state to eliminate.

    Args:
        gnfa: The GNFA being reduced
        order: 'lowest' for the lowest-numbered interior state, or
            'fewest_edges' for the interior state touching the fewest edges
            (ties go to the lowest number). Defaults to ELIMINATION_ORDER.

    Returns:
        The chosen state, or None if no interior state is left
    """
    candidates = gnfa.interior_states()
    if not candidates:
        return None

    if order is None:
        order = get_setting('ELIMINATION_ORDER')

    if order == 'fewest_edges':
        return min(candidates, key=lambda state: (gnfa.transitions.degree(state), state))
    if order == 'lowest':
        return candidates[0]
    raise ValueError(f"Unknown elimination order: {order}")


def eliminate_states(gnfa: GNFA, order=None) -> List[int]:
    """
    Eliminate interior states until only the start and accept states remain.

    Args:
        gnfa: A normalised GNFA, reduced in place
        order: Either the name of an ordering strategy (see ``choose_state``)
            or an explicit sequence of states. States left over after an
            explicit sequence are eliminated lowest-first.

    Returns:
        List[int]: The states in the order they were eliminated
    """
    eliminated = []

    if order is not None and not isinstance(order, str):
        for state in _explicit_order(gnfa, order):
            eliminate_state(gnfa, state)
            eliminated.append(state)
        order = 'lowest'

    while True:
        state = choose_state(gnfa, order)
        if state is None:
            break
        eliminate_state(gnfa, state)
        eliminated.append(state)

    return eliminated


def _explicit_order(gnfa: GNFA, order: Iterable[int]) -> List[int]:
    states = list(order)
    if len(set(states)) != len(states):
        raise ValueError("Elimination order lists a state more than once")
    for state in states:
        if state not in gnfa.states or not gnfa.is_interior(state):
            raise ValueError(f"State {state} is not an interior state of the GNFA")
    return states
