import preamble
import unittest

from llkit import Grammar, LanguageError, EPSILON
from llkit import common_prefix, left_factor, eliminate_left_recursion
from llkit import left_recursive, expression_grammar, if_then_else_grammar


def first_symbols_distinct(g):
    for A in g.nonterminals:
        alts = set(g[A])
        heads = [rhs[0] for rhs in alts]
        if len(heads) != len(set(heads)):
            return False
    return True


class TestLeftFactoring(unittest.TestCase):

    def test_common_prefix(self):
        self.assertEqual(common_prefix(('a', 'b', 'c'), ('a', 'b', 'd')),
                         ('a', 'b'))
        self.assertEqual(common_prefix(('a',), ('b',)), ())
        self.assertEqual(common_prefix((EPSILON,), (EPSILON,)), ())

    def test_if_then_else(self):
        g = left_factor(if_then_else_grammar())
        self.assertEqual(g.nonterminals, ['S', 'E', "S'"])
        self.assertEqual(g['S'], [('a',), ('i', 'E', 't', 'S', "S'")])
        self.assertEqual(g["S'"], [(EPSILON,), ('e', 'S')])
        self.assertEqual(g['E'], [('b',)])
        self.assertEqual(g.terminals, {'a', 'b', 'e', 'i', 't'})

    def test_shortest_member_becomes_epsilon(self):
        g = left_factor(Grammar.from_lines(['S -> a | a b']))
        self.assertEqual(g['S'], [('a', "S'")])
        self.assertEqual(g["S'"], [(EPSILON,), ('b',)])

    def test_nested_prefixes(self):
        g = left_factor(Grammar.from_lines([
            'A -> x y z | x y w | x q | r',
        ]))
        self.assertEqual(g['A'], [('r',), ('x', 'A1')])
        self.assertEqual(g['A1'], [('q',), ('y', "A'")])
        self.assertEqual(g["A'"], [('z',), ('w',)])
        self.assertTrue(first_symbols_distinct(g))

    def test_fixed_point(self):
        g = Grammar.from_lines([
            'S -> a B c | a B d | a e | b',
            'B -> b b | b c | b',
        ])
        left_factor(g)
        self.assertTrue(first_symbols_distinct(g))
        before = g.copy()
        left_factor(g)
        self.assertEqual(g, before)

    def test_iteration_ceiling(self):
        g = Grammar.from_lines(['S -> a | a b'])
        with self.assertRaises(LanguageError):
            left_factor(g, max_iterations=1)


class TestLeftRecursion(unittest.TestCase):

    def test_expression(self):
        g = eliminate_left_recursion(expression_grammar())
        self.assertEqual(g.nonterminals, ['E', 'T', 'F', "E'", "T'"])
        self.assertEqual(g['E'], [('T', "E'")])
        self.assertEqual(g["E'"], [('+', 'T', "E'"), (EPSILON,)])
        self.assertEqual(g['T'], [('F', "T'")])
        self.assertEqual(g["T'"], [('*', 'F', "T'"), (EPSILON,)])
        self.assertEqual(g['F'], [('(', 'E', ')'), ('id',)])
        self.assertEqual(left_recursive(g), set())

    def test_detects_left_recursion(self):
        self.assertEqual(left_recursive(expression_grammar()), {'E', 'T'})
        g = Grammar.from_lines([
            'S -> A a | b',
            'A -> A c | S d | eps',
        ])
        self.assertEqual(left_recursive(g), {'S', 'A'})

    def test_indirect(self):
        g = eliminate_left_recursion(Grammar.from_lines([
            'S -> A a | b',
            'A -> A c | S d | eps',
        ]))
        self.assertEqual(g['S'], [('A', 'a'), ('b',)])
        self.assertEqual(g['A'], [('b', 'd', "A'"), ("A'",)])
        self.assertEqual(g["A'"], [('c', "A'"), ('a', 'd', "A'"), (EPSILON,)])
        self.assertEqual(left_recursive(g), set())

    def test_indirect_through_chain(self):
        g = eliminate_left_recursion(Grammar.from_lines([
            'A -> B x | y',
            'B -> C z',
            'C -> A w | v',
        ]))
        self.assertEqual(left_recursive(g), set())
        self.assertEqual(g['C'], [('y', 'w', "C'"), ('v', "C'")])
        self.assertEqual(g["C'"], [('z', 'x', 'w', "C'"), (EPSILON,)])

    def test_epsilon_beta(self):
        g = eliminate_left_recursion(Grammar.from_lines(['L -> L a | eps']))
        self.assertEqual(g['L'], [("L'",)])
        self.assertEqual(g["L'"], [('a', "L'"), (EPSILON,)])

    def test_self_loop_dropped(self):
        g = eliminate_left_recursion(Grammar.from_lines(['A -> A | A eps | x']))
        self.assertEqual(g['A'], [('x',)])
        self.assertEqual(g.nonterminals, ['A'])

    def test_only_self_loop(self):
        g = eliminate_left_recursion(Grammar.from_lines(['A -> A']))
        self.assertEqual(g['A'], [])
        self.assertEqual(left_recursive(g), set())

    def test_non_recursive_untouched(self):
        g = Grammar.from_lines(['S -> a S b | c'])
        before = g.copy()
        eliminate_left_recursion(g)
        self.assertEqual(g, before)

    def test_then_factor(self):
        g = Grammar.from_lines(['S -> S a b | S a c | d'])
        eliminate_left_recursion(g)
        left_factor(g)
        self.assertEqual(g['S'], [('d', "S'")])
        self.assertEqual(g["S'"], [(EPSILON,), ('a', "S''")])
        self.assertEqual(g["S''"], [('b', "S'"), ('c', "S'")])
        self.assertTrue(first_symbols_distinct(g))
        self.assertEqual(left_recursive(g), set())


if __name__ == '__main__':
    unittest.main()
