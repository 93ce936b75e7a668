"""This module supports exact arithmetic with polynomials over the integers.

Polynomials in Z[x] are represented as coefficient lists. The polynomial
a_0 + a_1 x + ... + a_n x^n corresponds to the list [a_0, a_1, ... , a_n]
of gmpy2 mpz integers. Leading coefficient a_n is nonzero, using [] for the
zero polynomial. Note that polynomials are constructed from coefficients
given the other way around, highest exponent first, as in Polynomial([1, 0, -2])
for x^2 - 2.

The operators +,- (binary and unary), scalar multiplication, and << (multiplication
by a power of x) are overloaded lazily. Rather than computing a new polynomial,
these operators return an expression: a view on its operands that provides
an upper bound on its degree and the coefficient of x^d for any d. Chains of
such operators thus build a tree of views without intermediate polynomials.
An expression is only evaluated when a concrete polynomial is needed, that is,
by Polynomial(expr), by the in-place operators +=, -=, *= of polynomials, or
when testing (in)equality. Expressions refer to their operands, so operands
should not be modified before the expression is evaluated.

The product of two polynomials is computed right away, using a Karatsuba-style
algorithm that splits the operands by parity of the exponents.

Polynomials are rendered as, e.g., x^6 - 3 x^4 + x + 5 by str(), and
Polynomial.from_terms() parses this format back.
"""

import gmpy2

X = 'x'  # symbol for indeterminate in polynomials

_ZERO = gmpy2.mpz(0)


def _is_integer(a):
    return isinstance(a, (int, type(_ZERO)))


class Expression:
    """Base class for polynomial expressions.

    Subclasses provide degree_bound() and coefficient(d). The degree bound is
    an upper bound on the degree of the value of the expression, which need not
    be exact (e.g., for the sum of x^2 + 1 and -x^2). The coefficient of x^d is
    returned for any integer d, which is 0 if d exceeds the degree.
    """

    __slots__ = ()

    def degree_bound(self):
        """Upper bound on the degree of the expression (-1 if known to be zero)."""
        raise NotImplementedError

    def coefficient(self, d):
        """Coefficient of x^d of the expression."""
        raise NotImplementedError

    def evaluate(self):
        """Evaluate expression to a polynomial."""
        return Polynomial(self)

    @staticmethod
    def _coerce(a):
        # convert a to an expression, if possible
        if isinstance(a, Expression):
            return a

        if _is_integer(a):
            return Polynomial(a)

        return NotImplemented

    def __neg__(self):
        return PolynomialExpression(self.degree_bound(), lambda d: -self.coefficient(d))

    def __pos__(self):
        return self

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return PolynomialExpression(max(self.degree_bound(), other.degree_bound()),
                                    lambda d: self.coefficient(d) + other.coefficient(d))

    def __radd__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return other + self

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return PolynomialExpression(max(self.degree_bound(), other.degree_bound()),
                                    lambda d: self.coefficient(d) - other.coefficient(d))

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return other - self

    def __mul__(self, other):
        if _is_integer(other):
            return _scale(self, other)

        if isinstance(other, Expression):
            return multiply(_materialize(self), _materialize(other))

        return NotImplemented

    def __rmul__(self, other):
        if _is_integer(other):
            return _scale(self, other)

        return NotImplemented

    def __lshift__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return times_x_to(self, other)

    def __rlshift__(self, other):
        return NotImplemented

    def __eq__(self, other):
        """Equality test, coefficient by coefficient."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        d = max(self.degree_bound(), other.degree_bound())
        return all(self.coefficient(i) == other.coefficient(i) for i in range(d + 1))

    def __ne__(self, other):
        """Negated equality test."""
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return NotImplemented

        return not eq

    __hash__ = None  # NB: polynomials are mutable


class PolynomialExpression(Expression):
    """Expression given by a degree bound and a function computing coefficients."""

    __slots__ = '_degree_bound', '_coefficient'

    def __init__(self, degree_bound, coefficient):
        self._degree_bound = degree_bound
        self._coefficient = coefficient

    def degree_bound(self):
        return self._degree_bound

    def coefficient(self, d):
        return self._coefficient(d)

    def __repr__(self):
        return f'<expression of degree at most {self._degree_bound}>'


def _scale(a, n):
    return PolynomialExpression(-1 if n == 0 else a.degree_bound(),
                                lambda d: n * a.coefficient(d))


def times_x_to(a, d):
    """Multiply expression a by x^d, for d >= 0."""
    if d < 0:
        raise ValueError('negative shift count')

    a_deg = a.degree_bound()
    return PolynomialExpression(-1 if a_deg < 0 else a_deg + d,
                                lambda e: a.coefficient(e - d) if e >= d else _ZERO)


class Polynomial(Expression):
    """Polynomials over Z represented as lists of mpz integers.

    Invariant: last element of attribute 'value' is nonzero (if 'value' nonempty).
    """

    __slots__ = 'value'

    def __init__(self, value=(), check=True):
        """Initialize polynomial to given value (zero polynomial, by default).

        The value is either an iterable of integer coefficients, highest exponent first,
        an integer for a constant polynomial, a string such as 'x^2 - 2', or an expression,
        which is then evaluated. Leading zero coefficients are stripped.
        """
        if check:
            value = self._intern(value)
        self.value = value

    @classmethod
    def _intern(cls, a):
        # convert a to internal format, making a copy if a is a polynomial
        if isinstance(a, Polynomial):
            return a.value[:]

        if isinstance(a, Expression):
            return cls._evaluate(a)

        if _is_integer(a):
            return [gmpy2.mpz(a)] if a else []

        if isinstance(a, str):
            return cls._from_terms(a)

        try:
            a = list(a)
        except TypeError:
            raise TypeError('polynomial expected') from None

        if not all(_is_integer(a_i) for a_i in a):
            raise TypeError('integer coefficients expected')

        a = [gmpy2.mpz(a_i) for a_i in reversed(a)]
        return cls._strip(a)

    @classmethod
    def _evaluate(cls, a):
        c = [gmpy2.mpz(a.coefficient(i)) for i in range(a.degree_bound() + 1)]
        return cls._strip(c)

    @staticmethod
    def _strip(a):
        while a and not a[-1]:
            a.pop()
        return a

    @staticmethod
    def _from_terms(s, x=X):
        d = {}
        s = ''.join(s.split())  # remove all whitespace
        terms = s.replace('-', '+-').split('+')
        if terms[0] == '' and len(terms) > 1:
            del terms[0]  # leading minus sign
        for term in terms:
            try:
                if term.find(x) == -1:
                    c = int(term)
                    i = 0
                else:
                    c, e = term.split(x)
                    c = 1 if c == '' else -1 if c == '-' else int(c)
                    if e == '':
                        i = 1
                    elif e.startswith('^') and e[1:].isdigit():
                        i = int(e[1:])
                    else:
                        raise ValueError(f'invalid exponent in term {term!r}')
            except ValueError as exc:
                raise ValueError('ill formatted polynomial') from exc

            d[i] = d.get(i, 0) + c

        m = max(d.keys(), default=-1)
        a = [_ZERO] * (m+1)
        for i, c in d.items():
            a[i] = gmpy2.mpz(c)
        return Polynomial._strip(a)

    @staticmethod
    def _to_terms(a, x=X):
        if a == []:
            return '0'

        def monomial(c, i):
            if i == 0:
                return str(c)

            s = '' if c == 1 else '-' if c == -1 else f'{c} '
            return s + (x if i == 1 else f'{x}^{i}')

        s = monomial(a[-1], len(a) - 1)
        for i in range(len(a) - 2, -1, -1):
            if a[i] > 0:
                s += f' + {monomial(a[i], i)}'
            elif a[i] < 0:
                s += f' - {monomial(-a[i], i)}'
        return s

    @classmethod
    def from_terms(cls, s, x=X):
        """Convert string s with sum of powers of x to a polynomial."""
        return cls(cls._from_terms(s, x), check=False)

    @classmethod
    def to_terms(cls, a, x=X):
        """Convert polynomial a to a string with sum of powers of x."""
        a = cls._intern(a)
        return cls._to_terms(a, x)

    def degree(self):
        """Degree of polynomial (-1 for zero polynomial)."""
        return len(self.value) - 1

    def degree_bound(self):
        return len(self.value) - 1

    def coefficient(self, d):
        """Coefficient of x^d, which is 0 for d < 0 and d > degree."""
        if 0 <= d < len(self.value):
            return self.value[d]

        return _ZERO

    def leading_coefficient(self):
        """Leading coefficient of polynomial (0 for zero polynomial)."""
        return self.value[-1] if self.value else _ZERO

    def coefficients(self):
        """List of coefficients, highest exponent first."""
        return self.value[::-1]

    def copy(self):
        return type(self)(self.value[:], check=False)

    def negate(self):
        """Negate polynomial in-place."""
        a = self.value
        for i in range(len(a)):
            a[i] = -a[i]

    def _iadd(self, other, sign):
        b = [other.coefficient(i) for i in range(other.degree_bound() + 1)]
        # NB: coefficients of other are collected first, as other may depend on self
        a = self.value
        if len(b) > len(a):
            a.extend([_ZERO] * (len(b) - len(a)))
        if sign > 0:
            for i, b_i in enumerate(b):
                a[i] += b_i
        else:
            for i, b_i in enumerate(b):
                a[i] -= b_i
        self._strip(a)
        return self

    def __iadd__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._iadd(other, 1)

    def __isub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._iadd(other, -1)

    def __imul__(self, other):
        if _is_integer(other):
            if other == 0:
                self.value = []
            else:
                a = self.value
                for i in range(len(a)):
                    a[i] *= other
            return self

        if isinstance(other, Expression):
            self.value = multiply(self, _materialize(other)).value
            return self

        return NotImplemented

    def __ilshift__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        if other < 0:
            raise ValueError('negative shift count')

        if self.value:
            self.value[:0] = [_ZERO] * other
        return self

    def __eq__(self, other):
        """Equality test."""
        if isinstance(other, Polynomial):
            return self.value == other.value

        return super().__eq__(other)

    def __bool__(self):
        """Truth value testing.

        Return False if this polynomial is zero, True otherwise.
        """
        return bool(self.value)

    def __repr__(self):
        return f'Polynomial({[int(c) for c in reversed(self.value)]})'

    def __str__(self):
        return self._to_terms(self.value)


def _materialize(a):
    return a if isinstance(a, Polynomial) else Polynomial(a)


def _even(a):
    # polynomial with coefficients of the even powers of x in a
    return Polynomial(PolynomialExpression(a.degree() // 2, lambda d: a.coefficient(2*d)))


def _odd(a):
    # polynomial with coefficients of the odd powers of x in a
    return Polynomial(PolynomialExpression((a.degree() - 1) // 2, lambda d: a.coefficient(2*d + 1)))


def multiply(a, b):
    """Multiply polynomials a and b.

    Writing a = a_e(x^2) + x a_o(x^2) and b = b_e(x^2) + x b_o(x^2), the
    product a b has even part a_e b_e + x a_o b_o and odd part
    (a_e + a_o)(b_e + b_o) - a_e b_e - a_o b_o, in terms of x^2. Hence, only
    three recursive multiplications are needed per level, for a total of
    O(d^log_2(3)) coefficient multiplications for operands of degree d.
    """
    m = a.degree()
    n = b.degree()
    if m < 0 or n < 0:
        return Polynomial()

    if m == 0:
        return Polynomial(b * a.value[0])

    if n == 0:
        return Polynomial(a * b.value[0])

    a_e, a_o = _even(a), _odd(a)
    b_e, b_o = _even(b), _odd(b)
    c_e = multiply(a_e, b_e)
    c_o = multiply(a_o, b_o)
    c_eo = multiply(Polynomial(a_e + a_o), Polynomial(b_e + b_o))
    even = c_e + (c_o << 1)
    odd = c_eo - c_e - c_o
    return Polynomial(PolynomialExpression(
        m + n, lambda d: odd.coefficient(d // 2) if d % 2 else even.coefficient(d // 2)))
