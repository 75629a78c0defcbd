import re
from itertools import product

from gnfa_converter.automaton import Automaton, Edge, State
from gnfa_converter.fsa_equivalence import accepts, are_automata_equivalent
from gnfa_converter.thompson import automaton_to_epsilon_nfa, empty_language_nfa, regex_to_epsilon_nfa


def build_automaton(states, start, accept, edges):
    """Shorthand for the boundary-scenario tables: edges are (from, to, label)."""
    accept = list(accept)
    return Automaton(
        start=start,
        states=[State(state, state in accept) for state in states],
        edges=[Edge(from_state, to_state, label) for from_state, to_state, label in edges],
        accept=accept,
    )


class LanguageAssertionsMixin:
    """Compare an automaton with a regex by language, never by text."""

    max_sample_length = 6

    def assertSameLanguage(self, automaton, regex, empty_language=False):
        expected = automaton_to_epsilon_nfa(automaton)
        actual = empty_language_nfa() if empty_language else regex_to_epsilon_nfa(regex)

        is_equivalent, details = are_automata_equivalent(expected, actual)
        self.assertTrue(is_equivalent, f"{regex!r} differs from the automaton: {details}")

        # Independent check of the regex through Python's re engine
        symbols = sorted(set(expected['alphabet']) | set(actual['alphabet'])) or ['a']
        compiled = re.compile(regex)
        for length in range(self.max_sample_length + 1):
            for letters in product(symbols, repeat=length):
                word = ''.join(letters)
                in_regex = not empty_language and compiled.fullmatch(word) is not None
                self.assertEqual(accepts(expected, word), in_regex,
                                 f"{regex!r} disagrees with the automaton on {word!r}")

    def assertRegexLanguage(self, regex, reference):
        """Check ``regex`` against a hand-written reference expression."""
        is_equivalent, details = are_automata_equivalent(
            regex_to_epsilon_nfa(regex), regex_to_epsilon_nfa(reference))
        self.assertTrue(is_equivalent, f"{regex!r} is not {reference!r}: {details}")
