from django.test import TestCase
from gnfa_converter.fsa_equivalence import (
    accepts, are_automata_equivalent, epsilon_closure, move
)
from gnfa_converter.thompson import regex_to_epsilon_nfa


class TestFsaEquivalence(TestCase):

    def setUp(self):
        self.nfa = {
            'states': ['S0', 'S1', 'S2'],
            'alphabet': ['a', 'b'],
            'transitions': {
                'S0': {'a': ['S0', 'S1'], 'b': ['S0'], '': ['S2']},
                'S1': {'b': ['S2']},
                'S2': {}
            },
            'startingState': 'S0',
            'acceptingStates': ['S2']
        }

    def test_epsilon_closure_and_move(self):
        self.assertEqual(epsilon_closure(self.nfa, ['S0']), frozenset({'S0', 'S2'}))
        self.assertEqual(move(self.nfa, ['S0', 'S1'], 'b'), frozenset({'S0', 'S2'}))
        self.assertEqual(move(self.nfa, ['S2'], 'a'), frozenset())

    def test_accepts(self):
        self.assertTrue(accepts(self.nfa, ''))
        self.assertTrue(accepts(self.nfa, 'ab'))
        self.assertTrue(accepts(self.nfa, 'bba'))
        self.assertFalse(accepts(self.nfa, 'c'))

    def test_missing_start_state_accepts_nothing(self):
        nfa = dict(self.nfa, startingState='')
        self.assertFalse(accepts(nfa, ''))

    def test_equivalent_expressions(self):
        """Different texts, same language"""
        pairs = [
            ('(a)*', 'a*'),
            ('(ab)*(()|(a))', '(ab)*|(ab)*a'),
            ('(b)*a((a)|(b))*', 'b*a(a|b)*'),
            ('((a)|(a))', 'a'),
            ('(x)*(a(c)*b(x)*)*a(c)*', '(x|a(c)*b)*a(c)*'),
        ]
        for left, right in pairs:
            is_equivalent, details = are_automata_equivalent(
                regex_to_epsilon_nfa(left), regex_to_epsilon_nfa(right))
            self.assertTrue(is_equivalent, f"{left} vs {right}: {details}")
            self.assertNotIn('counterexample', details)

    def test_shortest_counterexample(self):
        is_equivalent, details = are_automata_equivalent(
            regex_to_epsilon_nfa('(ab)*'), regex_to_epsilon_nfa('(ab)*a'))
        self.assertFalse(is_equivalent)
        self.assertEqual(details['counterexample'], '')
        self.assertEqual(details['accepted_by'], 'automaton1')

        is_equivalent, details = are_automata_equivalent(
            regex_to_epsilon_nfa('a(b)*'), regex_to_epsilon_nfa('ab*|ba'))
        self.assertFalse(is_equivalent)
        self.assertEqual(details['counterexample'], 'ba')
        self.assertEqual(details['accepted_by'], 'automaton2')

    def test_different_alphabets(self):
        is_equivalent, details = are_automata_equivalent(
            regex_to_epsilon_nfa('a'), regex_to_epsilon_nfa('a|b'))
        self.assertFalse(is_equivalent)
        self.assertEqual(details['alphabet'], ['a', 'b'])
        self.assertEqual(details['counterexample'], 'b')
