"""groebnerzx is a Python package for computing bases of ideals in Z[x].

Polynomials with arbitrary-precision integer coefficients are provided by
module polynomial, including lazy evaluation of sums, differences, scalar
multiples, and shifts, and a Karatsuba-style multiplication algorithm.

Module basis provides ideal bases, which keep polynomials ordered by decreasing
leading term, and module buchberger provides a Buchberger-style algorithm to
rewrite an ideal basis into a reduced, near-canonical form. For example,
the ideal generated by x^2 + 5, x - 1, and 2 has basis x + 1, 2.

The package can also be used from the command line, entering the generators
one per line as lists of integer coefficients:

    python -m groebnerzx
"""

__version__ = '1.0.0'
__license__ = 'GNU General Public License v3'

import os
import sys
import argparse
import logging


def get_arg_parser():
    """Return parser for command line arguments of groebnerzx."""
    parser = argparse.ArgumentParser(prog='groebnerzx', add_help=False, allow_abbrev=False)

    group = parser.add_argument_group('groebnerzx help')
    group.add_argument('-V', '--VERSION', action='store_true',
                       help='print groebnerzx version number and exit')
    group.add_argument('-H', '--HELP', '-h', '--help', action='store_true',
                       help='print this help message and exit')

    group = parser.add_argument_group('groebnerzx configuration')
    group.add_argument('--max-iterations', type=int, metavar='n',
                       help='stop after n rewrite steps, n=0 for no limit')
    group.add_argument('--timeout', type=float, metavar='s',
                       help='stop rewriting after s seconds')

    group = parser.add_argument_group('groebnerzx logging')
    group.add_argument('--log-level', type=str, metavar='ll',
                       help='logging level ll=debug/info/warning(default)/error')
    group.add_argument('--no-log', action='store_true',
                       help='disable logging messages')

    parser.set_defaults(max_iterations=100000, log_level='warning')
    return parser


if os.getenv('GROEBNERZX_NOARGV') != '1':
    options = get_arg_parser().parse_known_args()[0]
    if options.VERSION or options.HELP:
        options.no_log = True

    # Set logging level as early as possible.
    if options.no_log:
        logging.basicConfig(level=logging.CRITICAL)
    else:
        ch = options.log_level[0].upper()
        ch = {'N': '0', 'D': '1', 'I': '2', 'W': '3', 'E': '4', 'C': '5'}.get(ch, ch)
        ch = ch if '0' <= ch <= '5' else '3'  # default to '3'
        level = int(ch)
        level = (logging.NOTSET, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
                 logging.CRITICAL)[level]
        if sys.flags.dev_mode:
            # Switch to debug mode, just like asyncio does in development mode.
            level = logging.DEBUG
        logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stderr)
        logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')
        del ch, level

    del options
