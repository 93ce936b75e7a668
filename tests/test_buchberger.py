import os
import unittest
from groebnerzx.polynomial import Polynomial
from groebnerzx.basis import IdealBasis
from groebnerzx.buchberger import reduce_mod, polymod, search, buchberger

P = Polynomial
B = IdealBasis


def buchberger_of(*polynomials):
    b = IdealBasis(polynomials)
    buchberger(b)
    return b


class Reduction(unittest.TestCase):

    def test_reduce_mod(self):
        self.assertEqual(polymod(P(), P()), P())
        self.assertEqual(polymod(P([1, 2, 3]), P()), P([1, 2, 3]))
        self.assertEqual(polymod(P(), P([1, 2, 3])), P())
        self.assertEqual(polymod(P([1, 2, 3]), P([1, 2, 3])), P())
        self.assertEqual(polymod(P([1, 2, 3, 0]), P([1, 2, 3])), P())
        self.assertEqual(polymod(P([1, 3, 5, 3]), P([1, 2, 3])), P())
        self.assertEqual(polymod(P([1, 2, 3]), P([1, -2])), P([11]))
        self.assertEqual(polymod(P([1, 2, 4, 6]), P([2, 1, 3])), P([1, 0, 3, 3]))
        self.assertEqual(polymod(P([4, 2, 6, 9]), P([2, 1, 3])), P([9]))
        self.assertEqual(polymod(P([1, -3]), P([2])), P([1, 1]))
        self.assertEqual(polymod(P([1, 2]), P([1, 0, 0])), P([1, 2]))
        self.assertEqual(polymod(P([-7, 3]), P([2, 0])), P([1, 3]))

    def test_reduce_mod_negative_divisor(self):
        # quotients rounded toward zero, then lowered by one if the coefficient would go negative
        self.assertEqual(polymod(P([5]), P([-2])), P([1]))
        self.assertEqual(polymod(P([-5]), P([-2])), P([-3]))
        self.assertEqual(polymod(P([4]), P([-2])), P())
        self.assertEqual(polymod(P([3, 1]), P([-2, 1])), P([1, 2]))
        self.assertEqual(polymod(P([1, 3]), P([-2, 1])), P([1, 3]))

    def test_reduce_mod_inplace(self):
        p = P([1, 2, 3])
        q = P([1, -2])
        r = polymod(p, q)
        self.assertEqual(p, P([1, 2, 3]))
        reduce_mod(p, q)
        self.assertEqual(p, r)
        self.assertEqual(q, P([1, -2]))

        p = P([5, 1])
        reduce_mod(p, P())
        self.assertEqual(p, P([5, 1]))

        p = P([3, 4, 5])
        reduce_mod(p, p)
        self.assertEqual(p, P())

    def test_reduce_mod_floor(self):
        # coefficients end up in [0, lc(q)) for positive lc(q)
        for c in range(-20, 20):
            r = polymod(P([c, 0, 1]), P([6, 1]))
            self.assertEqual(r.coefficient(2), c % 6)
            self.assertTrue(0 <= r.coefficient(1) < 6)


class Search(unittest.TestCase):

    def test_self_reduction(self):
        b = B([[1, 16], [1, 10]])
        self.assertTrue(search(b))
        self.assertEqual(b, B([[1, 10], [6]]))
        self.assertTrue(search(b))
        self.assertEqual(b, B([[1, 4], [6]]))
        self.assertFalse(search(b))
        self.assertEqual(b, B([[1, 4], [6]]))

    def test_reduction_to_zero(self):
        b = B([[4], [2]])
        self.assertTrue(search(b))
        self.assertEqual(b, B([[2]]))

    def test_twist(self):
        b = B([[1, 1, 0], [4, -4]])
        self.assertTrue(search(b))
        self.assertEqual(b, B([[1, 1, 0], [4, -4], [8]]))
        self.assertTrue(search(b))
        self.assertEqual(b, B([[1, 1, 0], [4, 4], [8]]))
        self.assertFalse(search(b))

    def test_empty(self):
        b = B()
        self.assertFalse(search(b))
        b = B([[3, 1]])
        self.assertFalse(search(b))


class Buchberger(unittest.TestCase):

    def test_buchberger(self):
        self.assertEqual(buchberger_of(), B())
        self.assertEqual(buchberger_of([]), B())
        self.assertEqual(buchberger_of([1, 3, 2], [4, 4]), B([[1, 3, 2], [4, 4]]))
        self.assertEqual(buchberger_of([1, 3, 2], [4, 4], []), B([[1, 3, 2], [4, 4]]))
        self.assertEqual(buchberger_of([1, -3, 2], [4, -4]), B([[1, 1, -2], [4, -4]]))
        self.assertEqual(buchberger_of([-1, -3, -2], [4, 4]), B([[1, 3, 2], [4, 4]]))
        self.assertEqual(buchberger_of([16], [10]), B([[2]]))
        self.assertEqual(buchberger_of([10, 0], [16]), B([[2, 0], [16]]))
        self.assertEqual(buchberger_of([16, 0], [10]), B([[2, 0], [10]]))
        self.assertEqual(buchberger_of([10, -20], [16]), B([[2, 12], [16]]))
        self.assertEqual(buchberger_of([1, 16], [1, 10]), B([[1, 4], [6]]))
        self.assertEqual(buchberger_of([1, 1, 0], [4, -3]), B([[1, 15], [21]]))
        self.assertEqual(buchberger_of([1, 1, 0], [4, -4]), B([[1, 1, 0], [4, 4], [8]]))
        self.assertEqual(buchberger_of([1, 1, 0], [4, 0]), B([[1, 1, 0], [4, 0]]))
        self.assertEqual(buchberger_of([1, 1, 0], [4, 4]), B([[1, 1, 0], [4, 4]]))

    def test_number_rings(self):
        # representation of <2+3i> in Z[i]
        self.assertEqual(buchberger_of([1, 0, 1], [3, 2]), B([[1, 5], [13]]))
        # representation of <2, -1+sqrt(-5)> in Z[sqrt(-5)]
        self.assertEqual(buchberger_of([1, 0, 5], [1, -1], [2]), B([[1, 1], [2]]))
        # representation of <3, -1+sqrt(-5)> in Z[sqrt(-5)]
        self.assertEqual(buchberger_of([1, 0, 5], [1, -1], [3]), B([[1, 2], [3]]))

    def test_negative_leading_coefficients(self):
        self.assertEqual(buchberger_of([-16], [-10]), B([[2]]))
        self.assertEqual(buchberger_of([-1, -16], [1, 10]), B([[1, 4], [6]]))
        b = B([[-3, 1]])
        self.assertTrue(buchberger(b))
        self.assertEqual(b, B([[3, -1]]))

    def test_idempotence(self):
        for polynomials in ([[1, 16], [1, 10]],
                            [[1, 1, 0], [4, -4]],
                            [[1, 0, 5], [1, -1], [3]],
                            [[1, 0, 1], [3, 2]],
                            [[10, -20], [16]]):
            b = buchberger_of(*polynomials)
            c = b.copy()
            self.assertTrue(buchberger(c))
            self.assertEqual(c, b)
            self.assertFalse(search(c))

    def test_budget(self):
        b = B([[16], [10]])
        self.assertFalse(buchberger(b, max_iterations=1))
        self.assertEqual(b, B([[10], [6]]))
        self.assertTrue(buchberger(b))
        self.assertEqual(b, B([[2]]))

        b = B([[16], [10]])
        self.assertFalse(buchberger(b, max_iterations=0))
        self.assertEqual(b, B([[16], [10]]))

        b = B([[16], [10]])
        self.assertFalse(buchberger(b, timeout=0))
        self.assertEqual(b, B([[16], [10]]))

        b = B([[16], [10]])
        self.assertTrue(buchberger(b, max_iterations=100, timeout=60))
        self.assertEqual(b, B([[2]]))

        b = B([[1, 3, 2], [4, 4]])
        self.assertTrue(buchberger(b, max_iterations=1))
        self.assertTrue(buchberger(b, max_iterations=0))

    def test_budget_fixpoint_at_last_step(self):
        # 16, 10 -> 10, 6 -> 6, 4 -> 4, 2 -> 2 takes four rewrite steps
        b = B([[16], [10]])
        self.assertFalse(buchberger(b, max_iterations=3))
        self.assertEqual(b, B([[4], [2]]))

        b = B([[16], [10]])
        self.assertTrue(buchberger(b, max_iterations=4))
        self.assertEqual(b, B([[2]]))

        b = B([[1, 16], [1, 10]])
        self.assertTrue(buchberger(b, max_iterations=2))
        self.assertEqual(b, B([[1, 4], [6]]))

    @unittest.skipUnless(os.getenv('RUN_EXPENSIVE_TESTS'), 'set RUN_EXPENSIVE_TESTS to run')
    def test_expensive(self):
        # a good test case to check running time after changes to the algorithm
        b = buchberger_of([1, 0, 0, 5, 3, 0, 0, 0, 0, 0, 9, 0, 0, -3, 0, -1, 0, 0, 0, 0, 0, 0],
                          [3, 0, 1, 4, 0, 0, 0, 0, 0, 0, 0, 7, 0, 0, 0, 0, 0, 0, 0, 1])
        self.assertEqual(b, B([[1, 7747110435841547256507133], [11529190147322608601758016]]))


if __name__ == "__main__":
    unittest.main()
