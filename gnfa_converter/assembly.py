from .edge_algebra import EPSILON, concat, star
from .gnfa import GNFA


def assemble_regex(gnfa: GNFA) -> str:
    """
    Read the final expression off a fully reduced GNFA.

    With A the start self-loop, B the start->accept edge, C the accept
    self-loop and D the accept->start edge, the language is
    A* (B C* D A*)* B C*, which shrinks to A* B C* when there is no D.
    An empty result stands for both epsilon and the empty language; the
    caller tells them apart (see ``has_path_to_accept``).
    """
    if not gnfa.states:
        return EPSILON

    start = gnfa.start_state
    accept = gnfa.accept_state
    if accept is None:
        return EPSILON

    loop_a = gnfa.transitions.self_loop(start) or EPSILON

    if accept == start:
        return star(loop_a)

    forward = gnfa.transitions.label(start, accept)
    if forward is None:
        return EPSILON

    loop_c = gnfa.transitions.self_loop(accept) or EPSILON
    back = gnfa.transitions.label(accept, start)

    tail = concat(forward, star(loop_c))
    if back is None:
        return concat(star(loop_a), tail)

    cycle = concat(concat(tail, back), star(loop_a))
    return concat(concat(star(loop_a), star(cycle)), tail)


def has_path_to_accept(gnfa: GNFA) -> bool:
    """Whether the reduced GNFA accepts anything at all."""
    if not gnfa.states or gnfa.accept_state is None:
        return False
    if gnfa.accept_state == gnfa.start_state:
        return True
    return gnfa.transitions.label(gnfa.start_state, gnfa.accept_state) is not None
