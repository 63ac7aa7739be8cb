#!/usr/bin/env python3

import logging
import argparse
import sys

from dynfrac.errors import FractionError
from dynfrac.fraction import Fraction, fmin, fmax


BINARY_OPS = {
    'add': Fraction.add,
    'sub': Fraction.sub,
    'mul': Fraction.mul,
    'div': Fraction.div,
    'cmp': Fraction.cmp,
    'min': fmin,
    'max': fmax,
}

UNARY_OPS = {
    'neg': Fraction.negate,
    'abs': Fraction.abs,
    'inv': Fraction.reciprocal,
    'floor': Fraction.floor,
    'ceil': Fraction.ceil,
    'trunc': Fraction.trunc,
    'round': Fraction.round,
    'whole': Fraction.whole_part,
    'frac': Fraction.fractional_part,
    'float': Fraction.to_double,
    'hash': Fraction.frac_hash,
    'sign': Fraction.sign,
}


def run_op(op, args, max_denominator=None):
    """Evaluate one operation on fraction texts, return printable result."""
    if op == 'from-double':
        if len(args) != 1:
            raise ValueError("from-double takes one argument")
        return Fraction.from_double(float(args[0]), max_denominator)

    if op == 'pow':
        if len(args) != 2:
            raise ValueError("pow takes a fraction and an integer exponent")
        return Fraction.parse(args[0]).pow(int(args[1]))

    if op in BINARY_OPS:
        if len(args) != 2:
            raise ValueError("{} takes two arguments".format(op))
        a, b = (Fraction.parse(arg) for arg in args)
        return BINARY_OPS[op](a, b)

    if len(args) != 1:
        raise ValueError("{} takes one argument".format(op))
    return UNARY_OPS[op](Fraction.parse(args[0]))


def main(argv=None):
    argparser = argparse.ArgumentParser(formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    ops = sorted(list(BINARY_OPS) + list(UNARY_OPS) + ['pow', 'from-double'])
    argparser.add_argument('op', choices=ops)
    argparser.add_argument('args', nargs='+', help='fractions in canonical form, e.g., "7/3"; put -- before negative values')
    argparser.add_argument('--max-denominator', type=int, help='denominator bound for from-double')
    argparser.add_argument('--verbose', '-v', action='count', default=0, help='loglevel (0=warning, 1=info, 2=debug)')
    args = argparser.parse_args(argv)

    if args.verbose == 1:
        loglevel = logging.INFO
    elif args.verbose >= 2:
        loglevel = logging.DEBUG
    else:
        loglevel = logging.WARNING
    logging.basicConfig(
        level=loglevel,
        format='%(asctime)s:%(levelname)s:%(name)s:%(message)s',
    )
    logging.info('args: %s', args)

    try:
        result = run_op(args.op, args.args, args.max_denominator)
    except (FractionError, ValueError) as exc:
        print('error: {}'.format(exc), file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
