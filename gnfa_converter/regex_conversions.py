import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .assembly import assemble_regex, has_path_to_accept
from .automaton import Automaton, check_automaton, coerce_automaton
from .conf import get_setting
from .edge_algebra import EPSILON
from .elimination import eliminate_states
from .exceptions import ConversionError
from .fsa_equivalence import are_automata_equivalent
from .fsa_transformations import remove_useless_states
from .gnfa import automaton_to_gnfa, normalise_gnfa
from .thompson import automaton_to_epsilon_nfa, empty_language_nfa, regex_to_epsilon_nfa

logger = logging.getLogger(__name__)


@dataclass
class Conversion:
    """Outcome of one run of the state elimination pipeline."""
    regex: str
    empty_language: bool
    eliminated_states: List[int] = field(default_factory=list)


def run_conversion(automaton: Automaton, order=None, prune: Optional[bool] = None,
                   super_start: Optional[bool] = None) -> Conversion:
    """
    Convert an automaton by state elimination and keep the bookkeeping.

    Args:
        automaton: The automaton to convert; it is not modified
        order: Elimination order, see ``eliminate_states``
        prune: Overrides the PRUNE_USELESS_STATES setting when not None
        super_start: Overrides the SUPER_START setting when not None

    Raises:
        MalformedAutomaton: If the automaton references unknown states
    """
    check_automaton(automaton)

    if not automaton.states or not automaton.accept:
        logger.debug("No accept states, the language is empty")
        return Conversion(EPSILON, True)

    if prune is None:
        prune = get_setting('PRUNE_USELESS_STATES')
    if prune:
        pruned = remove_useless_states(automaton)
        logger.debug("Pruned %d useless states", len(automaton.states) - len(pruned.states))
        automaton = pruned

    gnfa = normalise_gnfa(automaton_to_gnfa(automaton), super_start)
    logger.debug("Raw -> Normalized: %r", gnfa)

    if gnfa.interior_states():
        logger.debug("Normalized -> Reducing")
    eliminated = eliminate_states(gnfa, order)
    logger.debug("Reducing -> TwoState after eliminating %s: %r", eliminated, gnfa)

    regex = assemble_regex(gnfa)
    empty_language = not has_path_to_accept(gnfa)
    logger.debug("TwoState -> Done")

    return Conversion(regex, empty_language, eliminated)


def convert(automaton, order=None) -> str:
    """
    Convert an NFA to an equivalent regular expression.

    Args:
        automaton: An ``Automaton`` or its dictionary form
        order: Optional elimination order, see ``eliminate_states``

    Returns:
        str: The regular expression. The empty string denotes epsilon, and is
        also returned when the automaton accepts nothing.

    Raises:
        MalformedAutomaton: If the automaton is malformed
    """
    return run_conversion(coerce_automaton(automaton), order).regex


def verify(automaton: Automaton, conversion: Conversion) -> Dict:
    """
    Check that a conversion result denotes the automaton's language.

    The regex is rebuilt as an epsilon-NFA with Thompson's construction and
    compared with the expanded automaton by language equivalence.
    """
    try:
        expected = automaton_to_epsilon_nfa(automaton)
        if conversion.empty_language:
            actual = empty_language_nfa()
        else:
            actual = regex_to_epsilon_nfa(conversion.regex)
    except ConversionError as e:
        return {'equivalent': False, 'error': str(e)}

    is_equivalent, details = are_automata_equivalent(expected, actual)
    return {'equivalent': is_equivalent, 'details': details}


def nfa_to_regex(data, verify_result: Optional[bool] = None, order=None) -> Dict:
    """
    Convert an NFA to a regular expression and report on the conversion.

    Args:
        data: An ``Automaton`` or its dictionary form
        verify_result: Check the result by language equivalence. Defaults to
            the VERIFY setting.
        order: Optional elimination order, see ``eliminate_states``

    Returns:
        Dict: {'regex', 'valid', 'empty_language', 'original_states',
        'eliminated_states', 'verification', 'error'}
    """
    result = {
        'regex': '',
        'valid': False,
        'empty_language': False,
        'original_states': 0,
        'eliminated_states': [],
        'verification': {},
        'error': None
    }

    try:
        automaton = coerce_automaton(data)
        result['original_states'] = len(automaton.states)
        conversion = run_conversion(automaton, order)
    except ConversionError as e:
        result['error'] = str(e)
        return result

    result['regex'] = conversion.regex
    result['valid'] = True
    result['empty_language'] = conversion.empty_language
    result['eliminated_states'] = conversion.eliminated_states

    if verify_result is None:
        verify_result = get_setting('VERIFY')

    if verify_result:
        result['verification'] = verify(automaton, conversion)
        if not result['verification']['equivalent']:
            logger.warning("Regex %r failed verification: %s", conversion.regex, result['verification'])

    logger.info("Converted %d-state automaton to %r", len(automaton.states), conversion.regex)
    return result
