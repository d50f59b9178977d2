#!/usr/bin/env python3

import argparse
import logging
import sys

from .parser import Parser, ParserError

example = '( ( 1 + 2 ) * 3 / 4 ) ^ 5'


def get_parser():
    parser = argparse.ArgumentParser(
        description='Converts an infix expression to postfix and evaluates it',
        epilog='Every number, operator and parenthesis must be separated by spaces. '
        'Evaluates "%s" if no expression is given.' % example)
    parser.add_argument(
        'expression', nargs='*',
        help='The infix expression to evaluate')
    parser.add_argument(
        '-p', '--postfix', dest='postfix', action='store_true',
        help='only print the postfix expression')
    parser.add_argument(
        '-v', '--verbose', dest='verbose', action='store_true',
        help='log the conversion steps')
    return parser


def main(argv=None):
    args = get_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    expression = ' '.join(args.expression) if args.expression else example
    try:
        parser = Parser(expression)
        if args.postfix:
            print(parser.postfix)
        else:
            result = parser.eval()
            print('prefix: {}, postfix: {}, eval: {}'.format(parser.expr, parser.postfix, result))
    except ParserError as e:
        print('error: {}'.format(e.kind.name), file=sys.stderr)
        return 1
    except IndexError:
        print('error: not enough operands in {}'.format(parser.postfix), file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
