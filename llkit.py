#!/usr/bin/env python3

import re
import sys
import enum
import argparse
import itertools
import warnings

from pprint import pformat

from collections import namedtuple
from collections import OrderedDict as odict


# Reserved symbols.
EPSILON = 'eps'
END = '$'

# Accepted spellings of the empty right-hand side.
EPSILON_SPELLINGS = frozenset(['eps', 'epsilon', '@', 'ε'])

# Separators between left- and right-hand side, tried in order.
ARROWS = ('->', '→')

# Ceiling for every fixed-point loop.
MAX_ITERATIONS = 10000


class Role(enum.Enum):
    TERMINAL = 'terminal'
    NONTERMINAL = 'nonterminal'
    EPSILON = 'epsilon'
    END = 'end'


class Token(namedtuple('Token', 'pos symbol lexeme value')):

    def __repr__(self):
        return "({}, {})".format(
            repr(self.symbol), repr(self.value))


class Rule(namedtuple('Rule', 'lhs rhs')):

    def __repr__(self):
        return '({} = {})'.format(
            self.lhs, ' '.join(self.rhs))

    def __str__(self):
        return '{} -> {}'.format(self.lhs, ' '.join(self.rhs))


# Special token delivered by the tokenizer after the input.
END_TOKEN = Token(-1, END, '', None)


class LanguageError(Exception):
    pass


class RuleError(LanguageError):
    pass


class GrammarWarning(UserWarning):
    pass


def _rounds(limit, what):
    """Counts the rounds of a fixed-point loop, raising once `limit`
    rounds went by without the loop breaking out."""
    for n in range(limit):
        yield n
    raise LanguageError(
        '{} did not reach a fixed point within {} iterations; '
        'the grammar is probably malformed.'.format(what, limit))


class Lexer(object):

    class Error(Exception):
        pass

    def __init__(self, names=None, patterns=None, handlers=None):
        """The Lexer object bookkeeps 3 same-sized parallel lists:

            :names:

                The terminal symbols delivered for the patterns with
                same indexing.  A name of None delivers the matched
                lexeme itself as the symbol, and the name 'IGNORED'
                delivers nothing.

            :patterns:

                Compiled regular expressions, tried in order.

            :handlers:

                Called with the lexeme to compute the token value.

        """

        self.names = names if names else []
        self.patterns = patterns if patterns else []
        self.handlers = handlers if handlers else []

    def __repr__(self):
        return 'Lexer{{\n{}}}'.format(
            pformat(list(zip(self.names, self.patterns))))

    def register(self, name, pattern, handler=None):
        """Registers lexical pattern directly."""
        self.names.append(name)
        self.patterns.append(re.compile(pattern))
        self.handlers.append(handler)

    def tokenize(self, inp, with_end=False):
        """Prepares a generator object, which iteratively finds possible
        lexical patterns given input.

        :with_end:

            means delivering the END_TOKEN after reading over the input.

        """
        pos = 0
        while pos < len(inp):
            for nm, rgx, hdl in zip(self.names, self.patterns, self.handlers):
                match = rgx.match(inp, pos=pos)
                if match:
                    break
            else:
                raise Lexer.Error(
                    "No pattern for unrecognized: {}th char in input: '{}'\n"
                    .format(pos, inp[pos]))
            lxm = match.group()
            if nm != 'IGNORED':
                val = hdl(lxm) if hdl else lxm
                yield Token(pos, lxm if nm is None else nm, lxm, val)
            pos = match.end()
        if with_end:
            yield END_TOKEN


def _as_symbol(lexeme):
    return EPSILON if lexeme in EPSILON_SPELLINGS else lexeme


# Symbols of a rule's right-hand side.
RULE_LEXER = Lexer()
RULE_LEXER.register('IGNORED', r'\s+')
RULE_LEXER.register(None, r"[\w']+", _as_symbol)
RULE_LEXER.register(None, r'[()+*\-/|]')
RULE_LEXER.register(None, r'.', _as_symbol)

# Terminals of the expression alphabet fed to the predictive parser.
EXPRESSION_LEXER = Lexer()
EXPRESSION_LEXER.register('IGNORED', r'\s+')
EXPRESSION_LEXER.register('id', r'[A-Za-z_][A-Za-z0-9_]*')
EXPRESSION_LEXER.register('id', r'[0-9][0-9.]*')
EXPRESSION_LEXER.register(None, r'[+*()]')
EXPRESSION_LEXER.register(None, r'.')


def normalize(rhs):
    """Drop epsilon from a multi-symbol sequence; an empty sequence
    becomes the single epsilon."""
    rhs = tuple(rhs)
    if len(rhs) > 1:
        rhs = tuple(X for X in rhs if X != EPSILON)
    return rhs or (EPSILON,)


def tokenize_alternative(text):
    return normalize(tok.value for tok in RULE_LEXER.tokenize(text))


def parse_rule(line):
    """Parse a declaration like `E -> E + T | T` into `(lhs, [rhs...])`.

    Raises RuleError for a missing separator or an unusable left-hand
    side.
    """
    line = line.strip()
    for arrow in ARROWS:
        at = line.find(arrow)
        if at >= 0:
            break
    else:
        raise RuleError('Invalid rule (missing ->): {}'.format(line))
    lhs = line[:at].strip()
    if not lhs:
        raise RuleError('Invalid rule (empty LHS): {}'.format(line))
    if lhs in EPSILON_SPELLINGS or lhs == END:
        raise RuleError(
            'Invalid rule (reserved symbol {} as LHS): {}'.format(lhs, line))
    rest = line[at + len(arrow):]
    return lhs, [tokenize_alternative(seg) for seg in rest.split('|')]


class Grammar(object):

    def __init__(self, start=None):
        """A `Grammar` object has these attributes:

            :start:
                The start nonterminal. Defaults to the first declared
                left-hand side.
            :group: OrderedDict
                Alternatives (tuples of symbols) grouped by left-hand
                side, in declaration order.
            :nonterminals: list
                Left-hand sides in declaration order.
            :terminals: set
                Right-hand side symbols which are neither nonterminals
                nor epsilon.

        `nonterminals` and `terminals` are derived from `group` by
        `recompute`, which must be called after structural edits.

        """
        self.start = start
        self.group = odict()
        self.nonterminals = []
        self.terminals = set()
        self._nonterminal_set = frozenset()

    @classmethod
    def from_lines(cls, lines, start=None):
        """Build a grammar from rule lines. Blank lines and lines starting
        with '#' are skipped; a malformed line is reported with a
        GrammarWarning and skipped."""
        G = cls(start)
        for n, line in enumerate(lines, 1):
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            try:
                lhs, alts = parse_rule(line)
            except RuleError as e:
                warnings.warn(
                    'Skipping line {}: {}'.format(n, e), GrammarWarning)
                continue
            for rhs in alts:
                G.add(lhs, rhs)
        G.recompute()
        return G

    @classmethod
    def from_text(cls, text, start=None):
        return cls.from_lines(text.splitlines(), start)

    def __repr__(self):
        return pformat(self.rules)

    def __getitem__(self, A):
        return self.group[A]

    def __eq__(self, other):
        return isinstance(other, Grammar) and \
            self.start == other.start and \
            list(self.group.items()) == list(other.group.items())

    def _check_lhs(self, lhs):
        if lhs in (EPSILON, END):
            raise LanguageError(
                'Reserved symbol {} cannot be a left-hand side.'.format(lhs))

    def add(self, lhs, rhs):
        self._check_lhs(lhs)
        if self.start is None:
            self.start = lhs
        self.group.setdefault(lhs, []).append(normalize(rhs))

    def replace(self, lhs, alternatives):
        self._check_lhs(lhs)
        if self.start is None:
            self.start = lhs
        self.group[lhs] = [normalize(rhs) for rhs in alternatives]

    def recompute(self):
        self.nonterminals = list(self.group)
        self._nonterminal_set = frozenset(self.nonterminals)
        self.terminals = {
            X
            for alts in self.group.values()
            for rhs in alts
            for X in rhs
            if X not in self._nonterminal_set and X != EPSILON
        }

    @property
    def rules(self):
        return [Rule(A, rhs)
                for A, alts in self.group.items()
                for rhs in alts]

    @property
    def symbols(self):
        return set(self.group).union(
            X for alts in self.group.values() for rhs in alts for X in rhs)

    def role(self, X):
        if X == EPSILON:
            return Role.EPSILON
        elif X == END:
            return Role.END
        elif X in self._nonterminal_set:
            return Role.NONTERMINAL
        else:
            return Role.TERMINAL

    def is_nonterminal(self, X):
        return self.role(X) is Role.NONTERMINAL

    def is_terminal(self, X):
        return self.role(X) is Role.TERMINAL

    def fresh(self, base):
        """A name derived from `base` that no symbol of the grammar uses:
        base', then base1, base'1, base2, base'2, ..."""
        taken = self.symbols
        cand = base + "'"
        if cand not in taken:
            return cand
        for k in itertools.count(1):
            for cand in ('{}{}'.format(base, k), "{}'{}".format(base, k)):
                if cand not in taken:
                    return cand

    def copy(self):
        G = Grammar(self.start)
        for A, alts in self.group.items():
            G.group[A] = list(alts)
        G.recompute()
        return G

    def show(self):
        lines = ['Start symbol: {}'.format(self.start)]
        for A, alts in self.group.items():
            lines.append('{} -> {}'.format(
                A, ' | '.join(' '.join(rhs) for rhs in alts)))
        lines.append('Nonterminals: {}'.format(' '.join(self.nonterminals)))
        lines.append('Terminals: {}'.format(' '.join(sorted(self.terminals))))
        return '\n'.join(lines)


def expression_grammar():
    'Textbook left-recursive grammar for arithmetic expressions.'
    return Grammar.from_lines([
        'E -> E + T | T',
        'T -> T * F | F',
        'F -> ( E ) | id',
    ])


def if_then_else_grammar():
    'Dangling-else grammar which needs left factoring.'
    return Grammar.from_lines([
        'S -> i E t S | i E t S e S | a',
        'E -> b',
    ])


# Left factoring

def common_prefix(a, b):
    n = 0
    for x, y in zip(a, b):
        if x != y or x == EPSILON:
            break
        n += 1
    return tuple(a[:n])


def left_factor_once(G):
    """Factor out the longest prefix shared by alternatives of the first
    nonterminal that has one. Returns whether a rewrite took place."""
    for A in G.nonterminals:
        alts = G.group[A]
        if len(alts) < 2:
            continue
        best = ()
        for i, a in enumerate(alts):
            for b in alts[i+1:]:
                prefix = common_prefix(a, b)
                if len(prefix) > len(best):
                    best = prefix
        if not best:
            continue
        k = len(best)
        shared = [rhs for rhs in alts if rhs[:k] == best]
        rest = [rhs for rhs in alts if rhs[:k] != best]
        if len(shared) < 2:
            continue
        A1 = G.fresh(A)
        G.replace(A, rest + [best + (A1,)])
        G.replace(A1, [rhs[k:] for rhs in shared])
        G.recompute()
        return True
    return False


def left_factor(G, max_iterations=MAX_ITERATIONS):
    G.recompute()
    for _ in _rounds(max_iterations, 'Left factoring'):
        if not left_factor_once(G):
            break
    return G


# Left recursion

def substitute(G, ai, aj):
    """Replace each alternative `ai -> aj gamma` by `ai -> delta gamma`
    for every alternative delta of `aj`."""
    alts = []
    for rhs in G.group[ai]:
        if rhs[0] == aj:
            gamma = rhs[1:]
            for delta in G.group[aj]:
                if delta == (EPSILON,):
                    delta = ()
                alts.append(delta + gamma)
        else:
            alts.append(rhs)
    G.replace(ai, alts)


def eliminate_direct(G, A):
    """Rewrite `A -> A alpha | beta` as `A -> beta A'` and
    `A' -> alpha A' | eps`. Returns the new nonterminal, or None when
    A is not directly left-recursive.

    A bare self-loop `A -> A` derives nothing and is dropped, even when
    it leaves A without alternatives.
    """
    alpha, beta = [], []
    for rhs in G.group[A]:
        if rhs[0] == A:
            if len(rhs) > 1:
                alpha.append(rhs[1:])
        else:
            beta.append(rhs)
    if not alpha:
        if len(beta) < len(G.group[A]):
            G.replace(A, beta)
        return None
    A1 = G.fresh(A)
    G.replace(A, [(A1,) if b == (EPSILON,) else b + (A1,) for b in beta])
    G.replace(A1, [a + (A1,) for a in alpha] + [(EPSILON,)])
    return A1


def eliminate_left_recursion(G, max_iterations=MAX_ITERATIONS):
    """Classic ordered elimination of direct and indirect left recursion.

    Nonterminals are processed in declaration order. Each one first has
    the alternatives of all earlier nonterminals substituted into its
    leading position, then loses its direct left recursion. A nonterminal
    introduced on the way is inserted right after the one it was made
    for, so that later nonterminals substitute it as well.
    """
    G.recompute()
    order = list(G.nonterminals)
    i = 0
    rounds = _rounds(max_iterations, 'Left recursion elimination')
    while i < len(order):
        next(rounds)
        ai = order[i]
        for aj in order[:i]:
            substitute(G, ai, aj)
        A1 = eliminate_direct(G, ai)
        if A1 is not None:
            order.insert(order.index(ai) + 1, A1)
        i = order.index(ai) + 1
    G.recompute()
    return G


def nullable_nonterminals(G):
    NULLABLE = set()
    while 1:
        has_new = False
        for lhs, rhs in G.rules:
            if lhs not in NULLABLE and \
               all(X == EPSILON or X in NULLABLE for X in rhs):
                NULLABLE.add(lhs)
                has_new = True
        if not has_new:
            break
    return NULLABLE


def left_recursive(G):
    """Nonterminals A with A =>+ A alpha, looking through nullable
    leading nonterminals."""
    NULLABLE = nullable_nonterminals(G)
    leads = {A: set() for A in G.nonterminals}
    for lhs, rhs in G.rules:
        for X in rhs:
            if G.is_nonterminal(X):
                leads[lhs].add(X)
            if X not in NULLABLE:
                break
    found = set()
    for A in G.nonterminals:
        seen = set()
        todo = list(leads[A])
        while todo:
            X = todo.pop()
            if X == A:
                found.add(A)
                break
            if X not in seen:
                seen.add(X)
                todo.extend(leads[X])
    return found


# FIRST and FOLLOW

class FirstFollow(object):

    def __init__(self, grammar, max_iterations=MAX_ITERATIONS):
        """Computes by naive iteration to the fixed point:

            :first: dict
                FIRST set of every terminal, of epsilon and of every
                nonterminal.
            :follow: dict
                FOLLOW set of every nonterminal. FOLLOW(start) contains
                the END marker.

        """
        G = self.grammar = grammar
        if not G.is_nonterminal(G.start):
            raise LanguageError(
                'Start symbol {} has no rules.'.format(G.start))

        self.first = FIRST = {}
        for t in G.terminals:
            FIRST[t] = {t}
        FIRST[EPSILON] = {EPSILON}
        for A in G.nonterminals:
            FIRST[A] = set()
        for _ in _rounds(max_iterations, 'FIRST'):
            has_new = False
            for lhs, rhs in G.rules:
                F = self.first_of(rhs)
                if not F <= FIRST[lhs]:
                    FIRST[lhs] |= F
                    has_new = True
            if not has_new:
                break

        self.follow = FOLLOW = {A: set() for A in G.nonterminals}
        FOLLOW[G.start].add(END)
        for _ in _rounds(max_iterations, 'FOLLOW'):
            has_new = False
            for lhs, rhs in G.rules:
                for i, B in enumerate(rhs):
                    if not G.is_nonterminal(B):
                        continue
                    F = self.first_of(rhs[i+1:])
                    new = F - {EPSILON}
                    if EPSILON in F:
                        new |= FOLLOW[lhs]
                    if not new <= FOLLOW[B]:
                        FOLLOW[B] |= new
                        has_new = True
            if not has_new:
                break

    def first_of(self, seq):
        s = set()
        # `for-else` structure: the `else` runs only when every symbol
        # was nullable.
        for X in seq:
            if X == EPSILON:
                s.add(EPSILON)
                break
            if not self.grammar.is_nonterminal(X):
                # Terminals and symbols unknown to the grammar alike.
                s.add(X)
                break
            F = self.first[X]
            s.update(F - {EPSILON})
            if EPSILON not in F:
                break
        else:
            s.add(EPSILON)
        return s

    @property
    def nullable(self):
        return {A for A in self.grammar.nonterminals
                if EPSILON in self.first[A]}

    def __eq__(self, other):
        return isinstance(other, FirstFollow) and \
            self.first == other.first and self.follow == other.follow

    def show(self):
        nts = self.grammar.nonterminals
        lines = ['--- FIRST sets ---']
        for A in nts:
            lines.append('FIRST({}) = {{ {} }}'.format(
                A, ' '.join(sorted(self.first[A]))))
        lines.append('--- FOLLOW sets ---')
        for A in nts:
            lines.append('FOLLOW({}) = {{ {} }}'.format(
                A, ' '.join(sorted(self.follow[A]))))
        return '\n'.join(lines)


# LL(1) table

class Cell(namedtuple('Cell', 'rule conflicts')):

    @property
    def status(self):
        return 'conflict' if self.conflicts else 'filled'

    @property
    def candidates(self):
        return (self.rule,) + self.conflicts


class LL1Table(object):

    def __init__(self, grammar, sets=None):
        G = self.grammar = grammar
        self.sets = sets if sets else FirstFollow(G)
        self.columns = sorted(G.terminals | {END})
        self.table = {A: {} for A in G.nonterminals}
        for rule in G.rules:
            F = self.sets.first_of(rule.rhs)
            looks = F - {EPSILON}
            if EPSILON in F:
                looks |= self.sets.follow[rule.lhs]
            for a in sorted(looks):
                self._enter(rule, a)

    def _enter(self, rule, a):
        row = self.table[rule.lhs]
        cell = row.get(a)
        if cell is None:
            row[a] = Cell(rule, ())
        elif rule not in cell.candidates:
            row[a] = cell._replace(conflicts=cell.conflicts + (rule,))

    def __getitem__(self, A):
        return self.table[A]

    def lookup(self, A, a):
        return self.table.get(A, {}).get(a)

    def status(self, A, a):
        cell = self.lookup(A, a)
        return cell.status if cell else 'empty'

    @property
    def conflicts(self):
        return [(A, a, cell)
                for A in self.grammar.nonterminals
                for a, cell in sorted(self.table[A].items())
                if cell.conflicts]

    @property
    def is_ll1(self):
        return not self.conflicts

    def show(self, width=12):
        lines = ['--- LL(1) Parsing Table ---']
        lines.append('{:>10}'.format('NT\\T') + ''.join(
            '{:>{}}'.format(a, width) for a in self.columns))
        for A in self.grammar.nonterminals:
            row = '{:>10}'.format(A)
            for a in self.columns:
                cell = self.lookup(A, a)
                if cell is None:
                    text = '.'
                elif cell.conflicts:
                    text = 'CONFLICT'
                else:
                    text = '{}->{}'.format(A, ' '.join(cell.rule.rhs))
                    if len(text) > width - 2:
                        text = text[:width - 3] + '..'
                row += '{:>{}}'.format(text, width)
            lines.append(row)
        if self.is_ll1:
            lines.append('No conflicts detected. Grammar looks LL(1).')
        else:
            lines.append('WARNING: Conflicts detected. Grammar is NOT LL(1).')
            for A, a, cell in self.conflicts:
                lines.append('  [{}, {}]: {}'.format(
                    A, a, ' / '.join(str(r) for r in cell.candidates)))
        return '\n'.join(lines)


# Predictive parsing

Step = namedtuple('Step', 'stack input action')


class ParseError(namedtuple('ParseError', 'symbol expected position message')):

    """Why a predictive parse was rejected: the input `symbol` at
    `position` did not fit the stack top `expected`."""

    def __str__(self):
        return self.message


class ParseResult(namedtuple('ParseResult', 'accepted steps error')):

    def __bool__(self):
        return self.accepted

    def show(self):
        lines = ['--- Predictive Parsing Steps ---',
                 '{:<30}{:<35}{}'.format('STACK', 'INPUT', 'ACTION'),
                 '-' * 80]
        for stack, inp, action in self.steps:
            lines.append('{:<30}{:<35}{}'.format(
                ' '.join(stack), ' '.join(inp), action))
        lines.append('RESULT: String {}'.format(
            'ACCEPTED' if self.accepted else 'REJECTED'))
        return '\n'.join(lines)


def tokenize_expression(text):
    """Terminal stream for the expression alphabet: identifiers and
    numbers become `id`, every other character stands for itself."""
    return [tok.symbol for tok in EXPRESSION_LEXER.tokenize(text, True)]


class PredictiveParser(object):

    def __init__(self, table):
        if not table.is_ll1:
            msg = ('Cannot run a predictive parser over a table with '
                   'conflicts:\n{}').format(pformat([
                       (A, a, cell.candidates)
                       for A, a, cell in table.conflicts]))
            raise LanguageError(msg)
        self.table = table
        self.grammar = table.grammar

    def parse(self, tokens, trace=True):
        """Run the table-driven parser over a terminal sequence.

        The stack starts as [END, start]. Each step either matches the
        terminal on top of the stack against the input, expands the
        nonterminal on top by the table entry for the current input
        symbol, or accepts once both are END at the end of the input.
        Every failure ends the parse with a rejected ParseResult.
        """
        G = self.grammar
        inp = list(tokens)
        if not inp or inp[-1] != END:
            inp.append(END)
        stack = [END, G.start]
        steps = []
        pos = 0

        def record(action):
            # Configuration before the action is applied.
            if trace:
                steps.append(Step(tuple(stack), tuple(inp[pos:]), action))

        while 1:
            X = stack[-1]
            a = inp[pos] if pos < len(inp) else END

            if X == END and a == END:
                if pos == len(inp) - 1:
                    record('ACCEPT')
                    return ParseResult(True, steps, None)
                # An END inside the input, with more input after it.
                b = inp[pos + 1]
                record('ERROR (input continues after {})'.format(END))
                return ParseResult(False, steps, ParseError(
                    b, END, pos + 1,
                    'input continues after {} with {}'.format(END, b)))

            if not G.is_nonterminal(X):
                if X != a:
                    record('ERROR (expected {})'.format(X))
                    return ParseResult(False, steps, ParseError(
                        a, X, pos, 'expected {} but found {}'.format(X, a)))
                record('match {}'.format(a))
                stack.pop()
                pos += 1
                continue

            cell = self.table.lookup(X, a)
            if cell is None or cell.conflicts:
                record('ERROR (no rule for [{}, {}])'.format(X, a))
                return ParseResult(False, steps, ParseError(
                    a, X, pos, 'no rule for ({}, {})'.format(X, a)))
            record(str(cell.rule))
            stack.pop()
            if cell.rule.rhs != (EPSILON,):
                stack.extend(reversed(cell.rule.rhs))


Analysis = namedtuple('Analysis', 'grammar sets table')


def analyze(G, preprocess=True):
    """Derive FIRST/FOLLOW and the LL(1) table of `G`, after eliminating
    left recursion and left factoring it in place unless `preprocess`
    is false."""
    if preprocess:
        eliminate_left_recursion(G)
        left_factor(G)
    G.recompute()
    sets = FirstFollow(G)
    return Analysis(G, sets, LL1Table(G, sets))


def predictive_parse(G, text, trace=True):
    table = LL1Table(G)
    return PredictiveParser(table).parse(tokenize_expression(text), trace)


def main(argv=None):
    ap = argparse.ArgumentParser(
        prog='llkit',
        description='Analyze a context-free grammar for LL(1) parsing.')
    ap.add_argument('grammar', nargs='?',
                    help='file of rules "A -> x y | z", "-" for stdin; '
                    'the expression grammar when omitted')
    ap.add_argument('-i', '--input', action='append', default=[],
                    help='string to run through the predictive parser '
                    '(repeatable)')
    ap.add_argument('--raw', action='store_true',
                    help='skip left recursion elimination and left factoring')
    args = ap.parse_args(argv)

    if args.grammar is None:
        G = expression_grammar()
    elif args.grammar == '-':
        G = Grammar.from_lines(sys.stdin)
    else:
        with open(args.grammar) as f:
            G = Grammar.from_lines(f)
    if not G.nonterminals:
        print('No valid rules in grammar.', file=sys.stderr)
        return 2

    print(G.show())
    analysis = analyze(G, preprocess=not args.raw)
    if not args.raw:
        print('\nAfter left recursion elimination and left factoring:')
        print(G.show())
    print()
    print(analysis.sets.show())
    print()
    print(analysis.table.show())

    status = 0
    if args.input:
        if not analysis.table.is_ll1:
            print('\nCannot safely run predictive parser: '
                  'table has conflicts (not LL(1)).')
            return 1
        parser = PredictiveParser(analysis.table)
        for text in args.input:
            print()
            res = parser.parse(tokenize_expression(text))
            print(res.show())
            if not res.accepted:
                status = 1
    return status


if __name__ == '__main__':
    sys.exit(main())
