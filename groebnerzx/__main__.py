"""Compute a reduced basis for an ideal in Z[x] from the command line.

Run as:

    python -m groebnerzx [--max-iterations n] [--timeout s]

Enter the generators of the ideal one per line, each as a list of integer
coefficients separated by whitespace, highest exponent first. For example,
enter x^5 - 3x^2 + x as: 1 0 0 -3 1 0

The list of generators ends with a blank line or end of input, after which
the generators and the resulting basis are printed, as in:

    < x + 16, x + 10 > = < x + 4, 6 >
"""

import sys
import groebnerzx
from groebnerzx.polynomial import Polynomial
from groebnerzx.basis import IdealBasis
from groebnerzx.buchberger import buchberger

BANNER = f"""groebnerzx {groebnerzx.__version__}
This program comes with ABSOLUTELY NO WARRANTY.
This is free software, and you are welcome to redistribute it
under the conditions of the {groebnerzx.__license__}

Enter the list of polynomials, one on each line as a list of coefficients
e.g. enter x^5 - 3x^2 + x as: 1 0 0 -3 1 0
Then end the list with a blank line or EOF
"""


def read_polynomials(lines):
    """Read polynomials from given lines of coefficients, up to the first blank line."""
    polynomials = []
    for n, line in enumerate(lines, start=1):
        if not line.strip():
            break

        try:
            coeffs = [int(c) for c in line.split()]
        except ValueError as exc:
            raise ValueError(f'line {n}: integer coefficients expected') from exc

        polynomials.append(Polynomial(coeffs))
    return polynomials


def main(argv=None, stdin=None, stdout=None):
    """Run groebnerzx on the generators read from stdin, returning the exit status."""
    parser = groebnerzx.get_arg_parser()
    options = parser.parse_args(argv)
    if options.HELP:
        parser.print_help(stdout)
        return 0

    if options.VERSION:
        print(f'groebnerzx {groebnerzx.__version__}', file=stdout)
        return 0

    if stdin is None:
        stdin = sys.stdin
    if stdin.isatty():
        print(BANNER, file=stdout)

    try:
        polynomials = read_polynomials(stdin)
    except ValueError as exc:
        print(f'groebnerzx: error: {exc}', file=sys.stderr)
        return 2

    print('< ' + ', '.join(map(str, polynomials)) + ' > = ', end='', file=stdout, flush=True)
    basis = IdealBasis(polynomials)
    converged = buchberger(basis, max_iterations=options.max_iterations or None,
                           timeout=options.timeout)
    if not converged:
        print(basis, '(did not converge)', file=stdout)
        return 1

    print(basis, file=stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
