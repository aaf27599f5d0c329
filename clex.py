#!/usr/bin/env python3

# Text scanning for C-like source code:

# - strip_comments removes `//` and `/* */` comments while leaving
#   string and character literals untouched;
# - tokenize classifies the remaining text into tokens carrying the
#   line they start on.

import sys
import argparse

from collections import namedtuple

from llkit import Lexer


KEYWORD = 'KEYWORD'
IDENTIFIER = 'IDENTIFIER'
NUMBER = 'NUMBER'
STRING_LITERAL = 'STRING_LITERAL'
CHAR_LITERAL = 'CHAR_LITERAL'
OPERATOR = 'OPERATOR'
SEPARATOR = 'SEPARATOR'
PREPROCESSOR = 'PREPROCESSOR'
UNKNOWN = 'UNKNOWN'

IGNORED = 'IGNORED'

KEYWORDS = frozenset('''
    auto break case char const continue default do double else enum
    extern float for goto if inline int long register restrict return
    short signed sizeof static struct switch typedef union unsigned void
    volatile while _Bool _Complex _Imaginary
    class namespace public private protected template typename using new
    delete try catch throw this operator friend virtual override nullptr
    bool
'''.split())


class CToken(namedtuple('CToken', 'kind lexeme line')):

    def __repr__(self):
        return '({}, {}, {})'.format(self.kind, repr(self.lexeme), self.line)


def strip_comments(code):
    """Remove comments from C code.

    A `//` comment runs up to, but not including, the end of line; a
    `/* */` comment vanishes entirely. Comment markers inside string or
    character literals are kept, as is every other character.
    """
    out = []
    i, n = 0, len(code)
    in_line = in_block = False
    quote = None
    escaped = False
    while i < n:
        c = code[i]
        nxt = code[i+1] if i + 1 < n else ''
        if in_line:
            if c == '\n':
                in_line = False
                out.append(c)
        elif in_block:
            if c == '*' and nxt == '/':
                in_block = False
                i += 1
        elif quote:
            out.append(c)
            if not escaped and c == quote:
                quote = None
            escaped = not escaped and c == '\\'
        elif c in '"\'':
            quote = c
            escaped = False
            out.append(c)
        elif c == '/' and nxt == '/':
            in_line = True
            i += 1
        elif c == '/' and nxt == '*':
            in_block = True
            i += 1
        else:
            out.append(c)
        i += 1
    return ''.join(out)


# Tried in order; the first match wins.
C_LEXER = Lexer()
C_LEXER.register(IGNORED, r'\s+')
C_LEXER.register(PREPROCESSOR, r'#[^\n]*')
C_LEXER.register(IDENTIFIER, r'[A-Za-z_][A-Za-z0-9_]*')
C_LEXER.register(NUMBER, r'[0-9]+(?:\.[0-9]*)?(?:[eE][+-]?[0-9]*)?')
C_LEXER.register(STRING_LITERAL, r'(?s)"(?:\\.|[^"\\])*(?:"|\\?\Z)')
C_LEXER.register(CHAR_LITERAL, r"(?s)'(?:\\.|[^'\\])*(?:'|\\?\Z)")
C_LEXER.register(OPERATOR, r'<<=|>>=|\.\.\.')
C_LEXER.register(OPERATOR, r'\+\+|--|==|!=|<=|>=|&&|\|\||\+=|-=|\*=|/=|%='
                 r'|<<|>>|->|::|&=|\|=|\^=|##')
C_LEXER.register(SEPARATOR, r'[;,(){}\[\]:?.]')
C_LEXER.register(OPERATOR, r'[-+*/%<>=!&|^~]')
C_LEXER.register(UNKNOWN, r'.')


def tokenize(code):
    tokens = []
    line, last = 1, 0
    for tok in C_LEXER.tokenize(code):
        line += code.count('\n', last, tok.pos)
        last = tok.pos
        kind = tok.symbol
        if kind == IDENTIFIER and tok.lexeme in KEYWORDS:
            kind = KEYWORD
        tokens.append(CToken(kind, tok.lexeme, line))
    return tokens


def show_tokens(tokens):
    lines = ['{:<6}{:<18}{}'.format('Line', 'Type', 'Lexeme'), '-' * 60]
    for tok in tokens:
        lines.append('{:<6}{:<18}{}'.format(tok.line, tok.kind, tok.lexeme))
    return '\n'.join(lines)


def main(argv=None):
    ap = argparse.ArgumentParser(
        prog='clex',
        description='Strip comments from C code and list its tokens.')
    ap.add_argument('source', help='C source file, "-" for stdin')
    ap.add_argument('--strip', action='store_true',
                    help='only print the code with comments removed')
    args = ap.parse_args(argv)

    if args.source == '-':
        code = sys.stdin.read()
    else:
        with open(args.source) as f:
            code = f.read()
    cleaned = strip_comments(code)
    if args.strip:
        print(cleaned)
    else:
        print(show_tokens(tokenize(cleaned)))
    return 0


if __name__ == '__main__':
    sys.exit(main())
