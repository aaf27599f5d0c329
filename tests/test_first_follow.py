import preamble
import unittest

from llkit import Grammar, FirstFollow, LanguageError, EPSILON, END
from llkit import analyze, expression_grammar


class TestFirstFollow(unittest.TestCase):

    def test_epsilon(self):
        g = Grammar.from_lines(['S -> A b', 'A -> a | eps'])
        ff = FirstFollow(g)
        self.assertIn(EPSILON, ff.first['A'])
        self.assertEqual(ff.first['A'], {'a', EPSILON})
        self.assertTrue(ff.follow['A'] >= {'b'})
        self.assertEqual(ff.first['S'], {'a', 'b'})
        self.assertEqual(ff.follow['S'], {END})
        self.assertEqual(ff.nullable, {'A'})

    def test_expression(self):
        g = analyze(expression_grammar()).grammar
        ff = FirstFollow(g)
        self.assertEqual(ff.first['E'], {'(', 'id'})
        self.assertEqual(ff.first['T'], {'(', 'id'})
        self.assertEqual(ff.first['F'], {'(', 'id'})
        self.assertEqual(ff.first["E'"], {'+', EPSILON})
        self.assertEqual(ff.first["T'"], {'*', EPSILON})
        self.assertEqual(ff.follow['E'], {END, ')'})
        self.assertEqual(ff.follow["E'"], {END, ')'})
        self.assertEqual(ff.follow['T'], {'+', END, ')'})
        self.assertEqual(ff.follow["T'"], {'+', END, ')'})
        self.assertEqual(ff.follow['F'], {'*', '+', END, ')'})

    def test_left_recursive_grammar(self):
        ff = FirstFollow(expression_grammar())
        self.assertEqual(ff.first['E'], {'(', 'id'})
        self.assertEqual(ff.follow['E'], {'+', ')', END})
        self.assertEqual(ff.follow['F'], {'*', '+', ')', END})

    def test_terminals_and_epsilon(self):
        ff = FirstFollow(expression_grammar())
        self.assertEqual(ff.first['id'], {'id'})
        self.assertEqual(ff.first[EPSILON], {EPSILON})

    def test_first_of_sequence(self):
        g = Grammar.from_lines(['S -> A B c', 'A -> a | eps', 'B -> b | eps'])
        ff = FirstFollow(g)
        self.assertEqual(ff.first_of(('A', 'B')), {'a', 'b', EPSILON})
        self.assertEqual(ff.first_of(('A', 'B', 'c')), {'a', 'b', 'c'})
        self.assertEqual(ff.first_of(()), {EPSILON})
        self.assertEqual(ff.first_of((EPSILON,)), {EPSILON})
        # Unknown symbols count as terminals.
        self.assertEqual(ff.first_of(('zzz', 'A')), {'zzz'})
        self.assertEqual(ff.follow['A'], {'b', 'c'})
        self.assertEqual(ff.follow['B'], {'c'})

    def test_nullable_chain(self):
        g = Grammar.from_lines(['S -> A B', 'A -> B | eps', 'B -> A | b'])
        ff = FirstFollow(g)
        self.assertEqual(ff.first['S'], {'b', EPSILON})
        self.assertEqual(ff.nullable, {'S', 'A', 'B'})
        self.assertEqual(ff.follow['A'], {'b', END})

    def test_idempotent(self):
        g = analyze(expression_grammar()).grammar
        self.assertEqual(FirstFollow(g), FirstFollow(g))
        g = Grammar.from_lines(['S -> A b', 'A -> a | eps'])
        self.assertEqual(FirstFollow(g), FirstFollow(g))

    def test_missing_start(self):
        g = Grammar.from_lines(['A -> a'], start='S')
        with self.assertRaises(LanguageError):
            FirstFollow(g)

    def test_iteration_ceiling(self):
        with self.assertRaises(LanguageError):
            FirstFollow(expression_grammar(), max_iterations=1)

    def test_show(self):
        text = FirstFollow(Grammar.from_lines(['S -> A b', 'A -> a | eps'])).show()
        self.assertIn('FIRST(A) = { a eps }', text)
        self.assertIn('FOLLOW(A) = { b }', text)
        self.assertIn('FOLLOW(S) = { $ }', text)


if __name__ == '__main__':
    unittest.main()
