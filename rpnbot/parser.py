'''
Conversion of whitespace separated infix expressions to postfix notation
and evaluation of the resulting postfix expressions
'''

import enum
import logging
import math
import operator
import re

logger = logging.getLogger(__name__)


def power(a, b):
    '''
    Floating point exponentiation that returns inf/nan instead of raising
    '''
    odd = b.is_integer() and b % 2 == 1
    try:
        return math.pow(a, b)
    except OverflowError:
        return math.copysign(math.inf, a) if odd else math.inf
    except ValueError:
        if a == 0:
            return math.copysign(math.inf, a) if odd else math.inf
        return math.nan


operations = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '/': operator.truediv,
    '^': power,
}

precedence = {
    '+': 2,
    '-': 2,
    '*': 1,
    '/': 1,
    '^': 3,
    '(': 0,
    ')': 0,
}


class Error (enum.Enum):
    InvalidExpression = 1
    UnclosedParentheses = 2
    InvalidOperator = 3
    DivisionByZero = 4


class ParserError (Exception):
    kind = None

    def __str__(self):
        if self.args:
            return '{}: {}'.format(self.kind.name, self.args[0])
        return self.kind.name


class InvalidExpression (ParserError):
    kind = Error.InvalidExpression


class UnclosedParentheses (ParserError):
    kind = Error.UnclosedParentheses


class InvalidOperator (ParserError):
    kind = Error.InvalidOperator


class DivisionByZero (ParserError):
    kind = Error.DivisionByZero


number = re.compile(r'[+-]?(?:inf(?:inity)?|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)', re.IGNORECASE)


def is_number(token):
    '''
    Checks for a decimal, inf or nan literal
    '''
    return number.fullmatch(token) is not None


def get_precedence(op):
    '''
    Gets the precedence of an operator or parenthesis
    '''
    try:
        return precedence[op]
    except KeyError:
        logger.warning('Unknown operator: %s', op)
        raise InvalidOperator(op) from None


def shunting_yard(expression):
    '''
    Converts an infix expression to a space separated postfix expression

    Operators are pushed in input order and only drained by a closing
    parenthesis or the end of the expression, so grouping comes from
    parentheses alone
    '''
    output = []
    stack = []

    for token in expression.split():
        if is_number(token):
            output.append(token)
        elif token == '(':
            stack.append(token)
        elif token == ')':
            while stack and stack[-1] != '(':
                output.append(stack.pop())
            if stack:
                stack.pop()
        elif token in operations:
            stack.append(token)
        else:
            get_precedence(token)
        logger.debug('%s -> output: %s, stack: %s', token, output, stack)

    output.extend(reversed(stack))
    if '(' in output:
        raise UnclosedParentheses(expression)

    return ' '.join(output)


def solve_postfix(postfix):
    '''
    Evaluates a space separated postfix expression

    The more recently pushed operand is the right hand side of each operator
    '''
    stack = []

    for token in postfix.split():
        if is_number(token):
            stack.append(float(token))
            continue

        b, a = stack.pop(), stack.pop()
        if token not in operations:
            raise InvalidExpression(token)
        if token == '/' and b == 0.0:
            raise DivisionByZero(postfix)
        stack.append(operations[token](a, b))

    return stack[0]


class Parser:
    '''
    An infix expression together with its postfix form
    The postfix form is computed once, on construction
    '''

    def __init__(self, expression):
        self._expr = expression
        self._postfix = shunting_yard(expression)

    @property
    def expr(self):
        return self._expr

    @property
    def postfix(self):
        return self._postfix

    def eval(self):
        '''
        Evaluates the stored postfix expression
        '''
        return solve_postfix(self._postfix)

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self._expr)

    def __str__(self):
        return self._postfix


def solve(expression):
    '''
    Solves an infix expression
    '''
    return Parser(expression).eval()


if __name__ == '__main__':
    print(solve(input('Eq: ')))
