"""This module provides ordered bases for ideals in Z[x].

An ideal basis holds distinct polynomials sorted by decreasing leading term.
Polynomials of higher degree come first, and among polynomials of equal degree
the one with the larger leading coefficient comes first. Remaining ties are
broken by comparing all coefficients lexicographically, highest exponent first.
Hence, two generators with the same leading monomial, such as x + 16 and x + 10,
are kept apart in a basis, as the order is a strict total order on polynomials.
"""

import functools
from groebnerzx.polynomial import Polynomial


def compare(p, q):
    """Compare polynomials p and q by decreasing leading term.

    Return a negative number if p comes before q, a positive number if p comes
    after q, and 0 if p and q are equal.
    """
    m = p.degree()
    n = q.degree()
    if m != n:
        return n - m

    for d in range(m, -1, -1):
        a = p.coefficient(d)
        b = q.coefficient(d)
        if a != b:
            return -1 if a > b else 1

    return 0


def decreasing_leading_term(p, q):
    """Return True if polynomial p comes strictly before polynomial q."""
    return compare(p, q) < 0


sort_key = functools.cmp_to_key(compare)


class IdealBasis:
    """Set of polynomials, ordered by decreasing leading term.

    Polynomials are copied upon insertion, and expressions are evaluated.
    Polynomials obtained from a basis should not be modified in-place.
    """

    __slots__ = '_polynomials'

    def __init__(self, polynomials=()):
        """Initialize basis to given polynomials, discarding duplicates."""
        a = sorted((Polynomial(p) for p in polynomials), key=sort_key)
        self._polynomials = [p for i, p in enumerate(a) if i == 0 or p != a[i-1]]

    def _bisect(self, p):
        # index of first polynomial not before p
        a = self._polynomials
        lo, hi = 0, len(a)
        while lo < hi:
            mid = (lo + hi) // 2
            if compare(a[mid], p) < 0:
                lo = mid + 1
            else:
                hi = mid
        return lo

    def index(self, p):
        """Position of polynomial p in the basis."""
        if not isinstance(p, Polynomial):
            p = Polynomial(p)
        i = self._bisect(p)
        if i < len(self._polynomials) and self._polynomials[i] == p:
            return i

        raise ValueError('polynomial not in basis')

    def add(self, p):
        """Insert polynomial p, unless present already.

        Return True if p was inserted, False otherwise.
        """
        p = Polynomial(p)
        i = self._bisect(p)
        if i < len(self._polynomials) and self._polynomials[i] == p:
            return False

        self._polynomials.insert(i, p)
        return True

    def remove(self, p):
        """Remove polynomial p, raising ValueError if p is not present."""
        del self._polynomials[self.index(p)]

    def discard(self, p):
        """Remove polynomial p, if present."""
        if not isinstance(p, Polynomial):
            p = Polynomial(p)
        i = self._bisect(p)
        if i < len(self._polynomials) and self._polynomials[i] == p:
            del self._polynomials[i]

    def copy(self):
        b = IdealBasis()
        b._polynomials = [p.copy() for p in self._polynomials]
        return b

    def __getitem__(self, key):
        return self._polynomials[key]

    def __delitem__(self, key):
        del self._polynomials[key]

    def __iter__(self):
        return iter(self._polynomials)

    def __len__(self):
        return len(self._polynomials)

    def __contains__(self, p):
        try:
            self.index(p)
        except ValueError:
            return False

        return True

    def __eq__(self, other):
        if not isinstance(other, IdealBasis):
            return NotImplemented

        return self._polynomials == other._polynomials

    __hash__ = None

    def __repr__(self):
        return f'IdealBasis({self._polynomials!r})'

    def __str__(self):
        return '< ' + ', '.join(map(str, self._polynomials)) + ' >'
