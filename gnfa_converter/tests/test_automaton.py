from django.test import TestCase
from gnfa_converter.automaton import (
    Automaton, Edge, State, check_automaton, coerce_automaton, validate_automaton
)
from gnfa_converter.exceptions import MalformedAutomaton


class TestAutomatonFromDict(TestCase):

    def setUp(self):
        self.data = {
            'start': 0,
            'states': [{'id': 0, 'accept': False}, {'id': 1, 'accept': True}],
            'edges': [{'from': 0, 'to': 1, 'label': 'a'}, {'from': 1, 'to': 1, 'label': 'b'}],
            'accept': [1],
        }

    def test_parse_full_definition(self):
        """All parts of the JSON form are read"""
        automaton = Automaton.from_dict(self.data)
        self.assertEqual(automaton.start, 0)
        self.assertEqual(automaton.states, [State(0, False), State(1, True)])
        self.assertEqual(automaton.edges, [Edge(0, 1, 'a'), Edge(1, 1, 'b')])
        self.assertEqual(automaton.accept, [1])

    def test_accept_derived_from_flags(self):
        """Without an accept list the state flags decide"""
        del self.data['accept']
        automaton = Automaton.from_dict(self.data)
        self.assertEqual(automaton.accept, [1])

    def test_accept_list_overrides_flags(self):
        """An explicit accept list wins and the flags follow it"""
        self.data['accept'] = [0, 0]
        automaton = Automaton.from_dict(self.data)
        self.assertEqual(automaton.accept, [0])
        self.assertEqual(automaton.states, [State(0, True), State(1, False)])

    def test_accept_flag_must_be_boolean(self):
        """A string flag such as 'false' is rejected, not read as truthy"""
        del self.data['accept']
        for flag in ('false', '0', 'true'):
            self.data['states'][0]['accept'] = flag
            with self.assertRaises(MalformedAutomaton) as context:
                Automaton.from_dict(self.data)
            self.assertIn('Invalid state entry', str(context.exception))

    def test_missing_label_is_epsilon(self):
        self.data['edges'] = [{'from': 0, 'to': 1}]
        automaton = Automaton.from_dict(self.data)
        self.assertEqual(automaton.edges, [Edge(0, 1, '')])

    def test_round_trip_through_dict(self):
        automaton = Automaton.from_dict(self.data)
        self.assertEqual(Automaton.from_dict(automaton.to_dict()), automaton)

    def test_structural_errors(self):
        """Badly shaped input raises MalformedAutomaton"""
        bad_inputs = [
            [],
            {'states': [], 'edges': []},
            {'start': 0, 'edges': []},
            {'start': 0, 'states': []},
            {'start': '0', 'states': [], 'edges': []},
            {'start': True, 'states': [], 'edges': []},
            {'start': 0, 'states': {}, 'edges': []},
            {'start': 0, 'states': [{'accept': True}], 'edges': []},
            {'start': 0, 'states': [{'id': 0, 'accept': 1}], 'edges': []},
            {'start': 0, 'states': [{'id': 0}], 'edges': [{'from': 0, 'to': 'x'}]},
            {'start': 0, 'states': [{'id': 0}], 'edges': [{'from': 0, 'to': 0, 'label': 1}]},
            {'start': 0, 'states': [{'id': 0}], 'edges': ['0 0 a']},
            {'start': 0, 'states': [{'id': 0}], 'edges': [], 'accept': 0},
        ]
        for data in bad_inputs:
            with self.assertRaises(MalformedAutomaton, msg=repr(data)):
                Automaton.from_dict(data)

    def test_coerce_automaton(self):
        automaton = Automaton.from_dict(self.data)
        self.assertIs(coerce_automaton(automaton), automaton)
        self.assertEqual(coerce_automaton(self.data), automaton)


class TestValidateAutomaton(TestCase):

    def test_valid_automaton(self):
        automaton = Automaton(0, [State(0), State(1, True)], [Edge(0, 1, 'a')], [1])
        self.assertEqual(validate_automaton(automaton), {'valid': True})
        check_automaton(automaton)

    def test_empty_automaton_is_valid(self):
        self.assertTrue(validate_automaton(Automaton(0))['valid'])

    def test_start_not_in_states(self):
        automaton = Automaton(5, [State(0)], [], [])
        result = validate_automaton(automaton)
        self.assertFalse(result['valid'])
        self.assertIn('Starting state 5', result['error'])

    def test_accept_not_in_states(self):
        automaton = Automaton(0, [State(0)], [], [3])
        result = validate_automaton(automaton)
        self.assertFalse(result['valid'])
        self.assertIn('Accepting state 3', result['error'])

    def test_edge_to_unknown_state(self):
        automaton = Automaton(0, [State(0, True)], [Edge(0, 7, 'a')], [0])
        with self.assertRaises(MalformedAutomaton) as context:
            check_automaton(automaton)
        self.assertIn('0 -> 7', str(context.exception))

    def test_duplicate_state(self):
        automaton = Automaton(0, [State(0), State(0, True)], [], [0])
        self.assertEqual(validate_automaton(automaton)['error'], 'Duplicate state identifier')

    def test_malformed_is_a_value_error(self):
        self.assertTrue(issubclass(MalformedAutomaton, ValueError))
