"""This module implements a Buchberger-style algorithm for ideals in Z[x].

Given an ideal basis, the algorithm rewrites the basis one step at a time,
until no further rewrite applies. Each step either reduces a basis element
modulo the elements following it, or adds a new element found by raising
a later element to the degree of an earlier one and reducing the result.
The latter step generalizes the use of S-polynomials in the classical
Buchberger algorithm, where the coefficient ring is a field.

Reduction over Z uses rounded quotients, as the leading coefficient of
the divisor need not divide the coefficients of the dividend. For instance,
the basis x + 16, x + 10 is rewritten to x + 4, 6 in this way, and the basis
16, 10 to 2.

Termination of the rewrite loop is not guaranteed in general. Therefore,
the number of rewrite steps and the running time can be bounded.
"""

import time
import datetime
import itertools
import logging
import gmpy2
from groebnerzx.polynomial import Polynomial, times_x_to


def reduce_mod(p, q):
    """Reduce polynomial p modulo polynomial q, in-place.

    Multiples quotient * x^i * q are subtracted from p for i running from
    deg(p) - deg(q) down to 0, where quotient is the coefficient c of x^(i+deg(q))
    in p divided by the leading coefficient of q, rounded toward zero and then
    lowered by one if c - quotient * lc(q) would be negative. For a positive
    leading coefficient of q, this is floor division and these coefficients of p
    end up in the range [0, lc(q)), but in general the result is not a canonical
    remainder.

    Reduction modulo the zero polynomial leaves p unchanged.
    """
    n = q.degree()
    if n < 0:
        return

    q_n = q.leading_coefficient()
    for i in range(p.degree() - n, -1, -1):
        c = p.coefficient(i + n)
        quotient = gmpy2.t_div(c, q_n)
        if c - quotient * q_n < 0:
            quotient -= 1
        if quotient:
            p -= times_x_to(q, i) * quotient


def polymod(p, q):
    """Return polynomial p reduced modulo polynomial q, see reduce_mod()."""
    r = Polynomial(p)
    reduce_mod(r, q)
    return r


def _make_positive(p):
    if p.leading_coefficient() < 0:
        p.negate()
    return p


def _rewrite(basis):
    """Find the first applicable rewrite step for ideal basis.

    Return pair (p, r) meaning that basis entry p is to be replaced by r,
    where p is None if r is a new entry and r is zero if p is to be dropped.
    Return None if no rewrite applies. The basis is not modified.
    """
    # First try reducing any entry modulo all following entries.
    for i, p in enumerate(basis):
        r = Polynomial(p)
        for q in itertools.islice(basis, i+1, None):
            reduce_mod(r, q)
        if r != p:
            return p, _make_positive(r)

    # Then try raising a later entry to the degree of an earlier entry, and
    # see if reducing it modulo the earlier entry onwards leaves anything new.
    for i, p in enumerate(basis):
        for q in itertools.islice(basis, i+1, None):
            r = Polynomial(times_x_to(q, p.degree() - q.degree()))
            for s in itertools.islice(basis, i, None):
                reduce_mod(r, s)
            if r and _make_positive(r) not in basis:
                return None, r

    return None


def _apply(basis, p, r):
    if p is None:
        basis.add(r)
        logging.debug(f'Add {r}')
    else:
        basis.remove(p)
        if r:
            basis.add(r)
        logging.debug(f'Reduce {p} to {r}')


def search(basis):
    """Apply one rewrite step to ideal basis, in-place.

    Return True if the basis was changed, False if no rewrite applies.
    """
    rewrite = _rewrite(basis)
    if rewrite is None:
        return False

    _apply(basis, *rewrite)
    return True


def buchberger(basis, max_iterations=None, timeout=None):
    """Rewrite ideal basis in-place until a fixpoint is reached.

    The zero polynomial is removed from the basis and all leading coefficients
    are made positive first. Then rewrite steps are applied as in search().

    If max_iterations is set, at most max_iterations rewrite steps are applied.
    If timeout is set, no further rewrite steps are started after timeout seconds.
    Return True if a fixpoint is reached, also when it is reached by the last
    step allowed, and False if the rewriting is stopped early, in which case the
    basis still generates the same ideal.
    """
    basis.discard(Polynomial())
    for p in [p for p in basis if p.leading_coefficient() < 0]:
        basis.remove(p)
        basis.add(-p)

    start_time = time.time()
    steps = 0
    while (rewrite := _rewrite(basis)) is not None:
        if max_iterations is not None and steps >= max_iterations:
            logging.warning(f'No fixpoint reached within {max_iterations} rewrite steps')
            return False

        if timeout is not None and time.time() - start_time >= timeout:
            logging.warning(f'No fixpoint reached within {datetime.timedelta(seconds=timeout)}'
                            f' after {steps} rewrite steps')
            return False

        _apply(basis, *rewrite)
        steps += 1

    elapsed = time.time() - start_time
    logging.info(f'Fixpoint reached after {steps} rewrite steps -- '
                 f'elapsed time: {datetime.timedelta(seconds=elapsed)}')
    return True
