from ply import lex, yacc

from witc import ast
from witc.errors import WitSyntaxError
from witc.log import get_logger

logger = get_logger(__name__)

keywords = {
    'func': 'FUNC',
}

tokens = (
    *keywords.values(),
    'ID',
    'MINUS',
    'COLON',
    'COMMA',
    'LPAREN',
    'RPAREN',
    'ARROW',
)

token_descriptions = {
    'FUNC': '"func"',
    'ID': 'identifier',
    'MINUS': '"-"',
    'COLON': '":"',
    'COMMA': '","',
    'LPAREN': '"("',
    'RPAREN': '")"',
    'ARROW': '"->"',
    '$end': 'end of input',
}

t_MINUS = r'-'
t_COLON = r':'
t_COMMA = r'\,'
t_LPAREN = r'\('
t_RPAREN = r'\)'
t_ARROW = r'->'

t_ignore = ' \t\r'


def t_ID(t):
    r"""[^\W\d]\w*"""
    keyword_type = keywords.get(t.value)
    if keyword_type is not None:
        t.type = keyword_type
    return t


def t_newline(t):
    r"""\n+"""
    t.lexer.lineno += len(t.value)


def t_comment(t):
    r"""//[^\n]*|/\*[\s\S]*?\*/"""
    t.lexer.lineno += t.value.count('\n')


def t_error(t):
    raise _Unexpected(t)


def p_declarations_empty(p):
    """declarations :"""
    p[0] = []


def p_declarations(p):
    """declarations : declarations declaration"""
    p[1].append(p[2])
    p[0] = p[1]


def p_declaration(p):
    """declaration : function_declaration"""
    p[0] = p[1]


def p_function_declaration(p):
    """function_declaration : name COLON FUNC LPAREN arglist RPAREN function_return_type"""
    p[0] = ast.function_declaration(p[1], p[5], p[7], p.lineno(1))


def p_arglist_empty(p):
    """arglist :"""
    p[0] = []


def p_arglist(p):
    """
    arglist : arguments
            | arguments COMMA
    """
    p[0] = p[1]


def p_arguments(p):
    """
    arguments : arguments COMMA argument
              | argument
    """
    if len(p) == 2:
        p[0] = [p[1]]
    else:
        p[1].append(p[3])
        p[0] = p[1]


def p_argument(p):
    """argument : name COLON type"""
    p[0] = ast.argument(p[1], p[3], p.lineno(1))


def p_function_return_type(p):
    """function_return_type : ARROW type"""
    p[0] = ast.return_value(p[2])


def p_function_return_type_void(p):
    """function_return_type :"""
    p[0] = None


def p_name(p):
    """
    name : name MINUS segment
         | segment
    """
    if len(p) == 2:
        p[0] = p[1]
    else:
        p[0] = '%s-%s' % (p[1], p[3])
    p.set_lineno(0, p.lineno(1))


def p_segment(p):
    """
    segment : ID
            | FUNC
    """
    p[0] = p[1]
    p.set_lineno(0, p.lineno(1))


def p_type(p):
    """type : ID"""
    p[0] = p[1]


def p_error(p):
    raise _Unexpected(p)


class _Unexpected(Exception):
    def __init__(self, token):
        super().__init__(token)
        self.token = token


class Lexer:
    def __init__(self, debug=False):
        self.debug = debug
        self.lexer = lex.lex()
        self.source = ''

    def input(self, s):
        self.source = s
        self.lexer.lineno = 1
        self.lexer.input(s)

    def token(self):
        token = self.lexer.token()
        if self.debug and token is not None:
            logger.debug('%s', token)
        return token

    def column(self, lexpos):
        line_start = self.source.rfind('\n', 0, lexpos) + 1
        return lexpos - line_start + 1

    def end_position(self):
        lexpos = len(self.source)
        return self.source.count('\n') + 1, self.column(lexpos)


class Parser(object):
    def __init__(self, debug=False):
        self.debug = debug
        self.lexer = Lexer(debug=self.debug)
        self.parser = yacc.yacc(
            start='declarations',
            debug=False,
            write_tables=False,
            errorlog=yacc.NullLogger(),
        )

    def parse(self, code, filename='<string>'):
        self.lexer.input(code)
        try:
            result = self.parser.parse(lexer=self.lexer, debug=logger if self.debug else False)
        except _Unexpected as e:
            raise self._syntax_error(e.token, filename) from None
        return ast.module(result)

    def _syntax_error(self, token, filename):
        if token is None:
            lineno, column = self.lexer.end_position()
            return WitSyntaxError(
                'unexpected end of input',
                filename=filename,
                lineno=lineno,
                column=column,
                expected=self._expected(),
            )

        column = self.lexer.column(token.lexpos)
        if token.type == 'error':
            return WitSyntaxError(
                'illegal character %r' % token.value[0],
                filename=filename,
                lineno=token.lineno,
                column=column,
                token=token.value[0],
            )

        return WitSyntaxError(
            'unexpected %s %r' % (token_descriptions.get(token.type, token.type), token.value),
            filename=filename,
            lineno=token.lineno,
            column=column,
            token=token.value,
            expected=self._expected(),
        )

    def _expected(self):
        state = self.parser.statestack[-1]
        names = sorted(self.parser.action[state])
        return [token_descriptions.get(name, name) for name in names]
